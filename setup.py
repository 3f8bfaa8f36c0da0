#!/usr/bin/env python

from setuptools import setup

setup(
    name="integrator",
    version="0.1.0",
    packages=[
        "integrator",
        "integrator.details",
        "integrator.details.targets",
        "integrator.details.tools",
    ],
    python_requires=">=3.9",
    extras_require={"test": ["pytest"]},
    entry_points={"console_scripts": ["integrator = integrator.__main__:main"]},
)
