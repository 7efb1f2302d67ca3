#!/usr/bin/env python3
# -*- coding: utf-8 -*-

from setuptools import setup, find_packages

setup(
    name="export_stubs",
    version="1.0.0",
    packages=find_packages(include=["export_stubs", "export_stubs.*"]),
    install_requires=[
        "loguru>=0.6.0",
        "pydantic>=2.0",
        "typer>=0.9.0",
        "rich>=13.0.0",
    ],
    extras_require={
        "yaml": ["PyYAML>=6.0"],
        "dev": [
            "pytest>=7.0.0",
            "PyYAML>=6.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "export_stubs=export_stubs.cli:main",
        ],
    },
    description="Generate exported C stub functions from a name list and compile them into a DLL",
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: GNU General Public License v3 or later (GPLv3+)",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Topic :: Software Development :: Code Generators",
    ],
    python_requires=">=3.9",
)
