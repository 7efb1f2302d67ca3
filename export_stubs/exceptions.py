#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
File: exceptions.py

Description:
------------
Custom exceptions for the export_stubs package.
"""


class StubGenerationError(Exception):
    """Base exception for stub generation errors."""

    pass


class UsageError(StubGenerationError):
    """Exception raised for an invalid command line.

    An empty message means only the usage text should be shown.
    """

    def __init__(self, message: str = ""):
        super().__init__(message)
        self.message = message


class InputNotFoundError(StubGenerationError):
    """Exception raised when the export name list does not exist."""

    def __init__(self, input_file):
        super().__init__(f"Input file {input_file} not found.")
        self.input_file = input_file


class TemplateWriteError(StubGenerationError):
    """Exception raised for I/O errors while generating the source file."""

    pass


class CompilerInvocationError(StubGenerationError):
    """Exception raised when the compiler process cannot be started."""

    pass
