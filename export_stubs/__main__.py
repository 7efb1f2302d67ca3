#!/usr/bin/env python3
"""
Allows the package to be run as a script.
Example: python -m export_stubs -i exports.txt -c=stubs
"""
from .cli import main

if __name__ == "__main__":
    main()
