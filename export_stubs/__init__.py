#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
File: __init__.py
Version: 1.0

Description:
------------
This Python package generates a C source file with one exported stub
function per name listed in a text file. Each stub shows a notification box
naming itself when called. The source can optionally be compiled into a
shared library with an external compiler.

The package supports two modes:
    1. Writing the generated source to <input-stem>.c
    2. Compiling the generated source into <name>.dll

License:
--------
This package is released under the GPL-3.0-or-later License.
"""

from .options import InvocationConfig, StubOptions, parse_arguments, format_usage
from .exceptions import (
    StubGenerationError,
    UsageError,
    InputNotFoundError,
    TemplateWriteError,
    CompilerInvocationError,
)
from .template import PREAMBLE, render_declaration, render_source
from .generator import GenerationResult, TemplateGenerator, read_export_names, generate_stubs
from .compiler import CompilationResult, CompilerInvoker
from .pipeline import run_pipeline
from .utils import PipelineOutcome

# Module metadata
__version__ = "1.0.0"
__license__ = "GPL-3.0-or-later"

# Configure loguru logger
from loguru import logger
import sys

# Remove default handler and add custom one
logger.remove()
logger.add(
    sys.stderr,
    format="{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {message}",
    level="INFO",
)


def get_tool_info() -> dict:
    """
    Return metadata about this tool for discovery.

    Returns:
        Dict containing tool metadata including name, version, description,
        available functions, requirements, and platform compatibility.
    """
    return {
        "name": "export_stubs",
        "version": __version__,
        "description": "Generate exported C stub functions from a name list and optionally compile them",
        "license": __license__,
        "supported": True,
        "platform": ["windows", "linux", "macos"],
        "functions": [
            "generate_stubs",
            "run_pipeline",
            "parse_arguments",
        ],
        "requirements": ["loguru", "pydantic", "typer", "rich"],
        "capabilities": [
            "export_stub_generation",
            "shared_library_compilation",
        ],
        "classes": {
            "TemplateGenerator": "Renders the stub template for a name list",
            "CompilerInvoker": "Runs the external compiler",
            "StubOptions": "Generator and compiler settings",
        },
    }


# Public API
__all__ = [
    "InvocationConfig",
    "StubOptions",
    "parse_arguments",
    "format_usage",
    "StubGenerationError",
    "UsageError",
    "InputNotFoundError",
    "TemplateWriteError",
    "CompilerInvocationError",
    "PREAMBLE",
    "render_declaration",
    "render_source",
    "GenerationResult",
    "TemplateGenerator",
    "read_export_names",
    "generate_stubs",
    "CompilationResult",
    "CompilerInvoker",
    "run_pipeline",
    "PipelineOutcome",
    "get_tool_info",
    "logger",
]
