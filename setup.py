# setup.py
from setuptools import setup, find_packages

setup(
    name="skim",
    version="0.1.0",
    description="Value model, printer, list traversal and core special forms for a small Lisp",
    packages=find_packages(include=["skim", "skim.*"]),
    python_requires=">=3.10",
    install_requires=[
        "numpy",
    ],
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
    zip_safe=False,
)
