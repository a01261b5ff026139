"""
Setup script for probcalc.

The package is pure Python and laid out under ``src/``.
"""

from setuptools import find_packages, setup

setup(
    name="probcalc",
    version="0.1.0",
    description=(
        "Probability mass/density functions, cumulative probabilities and moments "
        "for the Poisson, Hypergeometric, Continuous Uniform and Normal distributions."
    ),
    author="Leonid Elkin, Mikhail Mikhailov, Fedor Myznikov",
    license="MIT",
    python_requires=">=3.11",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    install_requires=[
        "numpy>=1.26",
    ],
    extras_require={
        "test": [
            "pytest>=8.0",
            "scipy>=1.11",
        ],
        "docs": [
            "sphinx",
            "sphinx-rtd-theme",
            "sphinx-autodoc-typehints",
            "sphinx-copybutton",
            "myst-nb",
        ],
    },
)
