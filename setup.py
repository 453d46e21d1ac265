"""Setup file for the mazegen package."""

from setuptools import setup, find_packages

setup(
    name="mazegen",
    version="0.1.0",
    description="Perfect maze generation by randomized depth-first search",
    packages=find_packages(include=["mazegen", "mazegen.*"]),
    python_requires=">=3.8",
    install_requires=[
        "numpy",
        "PyYAML",
        "matplotlib",
    ],
    extras_require={
        "test": ["pytest"],
    },
)
