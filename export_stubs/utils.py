#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
File: utils.py

Description:
------------
Path helpers and type definitions for the export_stubs package.
"""

import tempfile
import uuid
from enum import Enum, auto
from pathlib import Path
from typing import Optional, Union

PathLike = Union[str, Path]


class PipelineOutcome(Enum):
    """Terminal state reached by a single run."""

    USAGE = auto()
    GENERATION_FAILED = auto()
    GENERATED = auto()
    COMPILED = auto()
    COMPILE_FAILED = auto()


def default_output_path(input_file: PathLike) -> Path:
    """Return `<input stem>.c` in the current working directory."""
    return Path(f"{Path(input_file).stem}.c")


def temporary_source_path(
    prefix: str = "compiled_", directory: Optional[PathLike] = None
) -> Path:
    """Return a unique, not yet existing, intermediate source path."""
    base = Path(directory) if directory is not None else Path(tempfile.gettempdir())
    return base / f"{prefix}{uuid.uuid4()}.c"
