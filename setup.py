# setup.py
from setuptools import setup, find_packages

setup(
    name="shallot",
    version="0.1.0",
    description="A minimal applicative-order Lisp evaluator with closures and μ macros",
    packages=find_packages(include=["shallot", "shallot.*"]),
    package_data={
        "shallot": ["prelude/*.shl", "programs/*.shl"],
    },
    python_requires=">=3.10",
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
    entry_points={
        "console_scripts": ["shallot = shallot.__main__:main"],
    },
    zip_safe=False,
)
