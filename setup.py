# setup.py
from setuptools import setup, find_packages

setup(
    name="tmath",
    version="1.0.0",
    description="TMath – vectors, matrices and transform constructors",
    packages=find_packages(include=["tmath", "tmath.*"]),
    python_requires=">=3.13",
    install_requires=[
        "numpy>=1.26.0",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
)
