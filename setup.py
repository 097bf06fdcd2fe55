#!/usr/bin/env python3

from setuptools import setup

setup(
    name="dicephrase",
    version="0.3.0",
    description="Generate diceware-like passphrases",
    packages=["dicephrase"],
    python_requires=">=3.7",
    install_requires=["xkcdpass", "blessed", "pyperclip"],
    extras_require={"test": ["pytest"]},
    entry_points={"console_scripts": ["dicephrase = dicephrase.main:main"]},
)
