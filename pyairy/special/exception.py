# Written by Eric J. Whitney, October 2026.


# ======================================================================

class ConvergenceError(RuntimeError):
    """
    Raised when a power series used to evaluate a special function has
    not reached machine precision after the allowed number of terms.

    Attributes
    ----------
    x : float
        Argument at which the series was being summed.
    terms : int
        Number of passes made before giving up.
    ratio : float
        Last ratio of the newest term to the partial sum.  The series is
        taken as converged once this falls to machine epsilon.
    """

    def __init__(self, msg: str, *, x: float, terms: int, ratio: float):
        super().__init__(msg)
        self.x, self.terms, self.ratio = x, terms, ratio

    def __str__(self):
        """Convergence report below the main failure notice."""
        return (f"{super().__str__()}\n"
                f"    x = {self.x:+.16G}, terms = {self.terms}, "
                f"last term / sum = {self.ratio:.3E}")
