import setuptools

with open("README.md", "r") as fh:
    long_description = fh.read()

setuptools.setup(
    name="pyairy",
    version="0.1.0",
    author="Eric J. Whitney",
    author_email="eric.j.whitney@optusnet.removethispart.com.au",
    description="Airy functions of real argument with reproducible "
                "accuracy.",
    install_requires=[
        'numpy'
    ],
    extras_require={
        'test': ['pytest', 'scipy', 'mpmath'],
        'examples': ['matplotlib'],
        'doc': ['sphinx', 'pydata-sphinx-theme'],
    },
    keywords='airy special functions numerical',
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=setuptools.find_packages(include=['pyairy', 'pyairy.*']),
    python_requires='>=3.10',
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Science/Research",
        "License :: OSI Approved :: MIT License",
        "Natural Language :: English",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3.10",
        "Topic :: Scientific/Engineering :: Mathematics"
    ]
)
