# setup.py - Package install
from setuptools import setup, find_packages

setup(
    name="gl_crystals",
    version="0.1.0",
    description="Tensor product decompositions of GL(n) irreducibles via crystal bases",
    packages=find_packages(include=["gl_crystals", "gl_crystals.*"]),
    python_requires=">=3.8",
    install_requires=["numpy"],
    extras_require={"test": ["pytest"]},
    entry_points={"console_scripts": ["gl-crystals=gl_crystals.cli:main"]},
)
