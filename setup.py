#!/usr/bin/env python3

from setuptools import setup

setup(
    name="randpass",
    version="0.4.0",
    description="Random password generator with entropy estimation",
    packages=["randpass"],
    python_requires=">=3.8",
    install_requires=["blessed"],
    extras_require={"test": ["pytest"]},
    entry_points={"console_scripts": ["randpass = randpass.main:main"]},
)
