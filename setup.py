# setup.py
from setuptools import setup, find_packages

setup(
    name="lispulator",
    version="0.1.0",
    description="A minimal read-eval-print interpreter for a small Lisp-like language",
    packages=find_packages(include=["lispulator", "lispulator.*"]),
    python_requires=">=3.10",
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
    entry_points={
        "console_scripts": ["lispulator = lispulator.repl:main"],
    },
    zip_safe=False,
)
