#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
File: generator.py

Description:
------------
Template generator: turns a newline-delimited list of export names into a C
source file with one exported stub function per name.
"""

import codecs
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

from loguru import logger

from .exceptions import InputNotFoundError, TemplateWriteError
from .options import StubOptions
from .template import render_source
from .utils import PathLike, default_output_path


@dataclass
class GenerationResult:
    """Outcome of a successful template generation."""

    input_path: Path
    output_path: Path
    export_names: List[str] = field(default_factory=list)


def read_export_names(input_file: PathLike, encoding: str = "utf-8") -> List[str]:
    """
    Read export names from a text file.

    Every line is trimmed; lines that are empty after trimming are skipped.
    Order is preserved and duplicates are kept.

    Args:
        input_file: Path to the newline-delimited name list
        encoding: Text encoding of the file

    Returns:
        List of export names in file order
    """
    # A leading UTF-8 byte-order mark is not part of the first name.
    if codecs.lookup(encoding).name == "utf-8":
        encoding = "utf-8-sig"

    names = []
    with open(input_file, "r", encoding=encoding) as f:
        for line in f:
            name = line.strip()
            if name:
                names.append(name)
    return names


class TemplateGenerator:
    """
    Renders the fixed stub template for a list of export names.

    The generated text carries no timestamp or other varying content, so the
    same input always produces byte-identical output.
    """

    def __init__(self, options: Optional[StubOptions] = None):
        """
        Initialize the generator with the given options.

        Args:
            options: StubOptions object. If None, default options are used.
        """
        self.options = options or StubOptions()

    def generate(self, input_file: PathLike, output_file: PathLike) -> GenerationResult:
        """
        Generate the stub source file.

        Args:
            input_file: Path to the export name list
            output_file: Path of the source file to write (truncated if present)

        Returns:
            GenerationResult describing the written file

        Raises:
            InputNotFoundError: If the input file does not exist or is not a
                regular file. Nothing is written in that case.
            TemplateWriteError: If reading the input or writing the output fails
        """
        input_path = Path(input_file)
        output_path = Path(output_file)

        if not input_path.is_file():
            raise InputNotFoundError(input_file)

        try:
            logger.info(f"Reading export names from: {input_path}")
            names = read_export_names(input_path, self.options.encoding)
            logger.debug(f"Found {len(names)} export name(s)")

            content = render_source(names)
            with open(output_path, "w", encoding=self.options.encoding, newline="\n") as f:
                f.write(content)
        except (OSError, UnicodeError) as e:
            logger.error(f"Template generation failed: {str(e)}")
            raise TemplateWriteError(str(e)) from e

        logger.info(f"Wrote {len(names)} export stub(s) to {output_path}")
        return GenerationResult(
            input_path=input_path, output_path=output_path, export_names=names
        )


def generate_stubs(
    input_file: PathLike, output_file: Optional[PathLike] = None, **kwargs
) -> GenerationResult:
    """
    Generate a stub source file from an export name list.

    This is a convenience function that creates a TemplateGenerator instance
    and calls its generate method.

    Args:
        input_file: Path to the export name list
        output_file: Path of the source file (if None, `<stem>.c` in the cwd)
        **kwargs: Additional options passed to StubOptions

    Returns:
        GenerationResult describing the written file
    """
    options = StubOptions(**kwargs)
    if output_file is None:
        output_file = default_output_path(input_file)
    return TemplateGenerator(options).generate(input_file, output_file)
