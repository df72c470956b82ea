# setup.py
from setuptools import setup, find_packages

setup(
    name="nli",
    version="0.1.0",
    description="A small expression language with exact rationals, byte strings, lists, dictionaries and closures",
    packages=find_packages(include=["nli", "nli.*"]),
    python_requires=">=3.10",
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
    entry_points={
        "console_scripts": ["nli=nli.__main__:main"],
    },
    zip_safe=False,
)
