"""Setup script for colourado package."""

from setuptools import setup, find_packages

setup(
    name="colourado",
    version="0.1.0",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=[
        "numpy>=1.21.0",
        "matplotlib>=3.5.0",
        "pyyaml>=6.0",
        "click>=8.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "colourado-preview=colourado.cli.preview:main",
        ],
    },
)
