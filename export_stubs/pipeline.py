#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
File: pipeline.py

Description:
------------
Runs the generate and (optionally) compile stages for a parsed command line
and reports every outcome on the console. Failures are reported and never
propagated.
"""

from pathlib import Path
from typing import Optional

from loguru import logger
from rich.console import Console
from rich.markup import escape

from .compiler import CompilerInvoker
from .exceptions import (
    CompilerInvocationError,
    InputNotFoundError,
    TemplateWriteError,
)
from .generator import TemplateGenerator
from .options import InvocationConfig, StubOptions
from .utils import PipelineOutcome, default_output_path, temporary_source_path


def _report(console: Console, message: str) -> None:
    console.print(escape(message), soft_wrap=True, highlight=False, emoji=False)


def _generate(
    generator: TemplateGenerator, input_file: str, output_file: Path, console: Console
) -> bool:
    try:
        result = generator.generate(input_file, output_file)
    except InputNotFoundError as e:
        _report(console, str(e))
        return False
    except TemplateWriteError as e:
        _report(console, f"Failed to generate template: {e}")
        return False

    _report(
        console, f"Template generation completed! Output written to {result.output_path}"
    )
    return True


def _compile(
    invoker: CompilerInvoker, source_file: Path, library_name: str, console: Console
) -> PipelineOutcome:
    try:
        result = invoker.compile(source_file, library_name)
    except CompilerInvocationError as e:
        _report(console, f"Compilation encountered an error: {e}")
        return PipelineOutcome.COMPILE_FAILED

    if result.success:
        library_file = invoker.options.library_filename(library_name)
        _report(console, f"Compilation successful. DLL file: {library_file}")
        return PipelineOutcome.COMPILED

    _report(console, "Compilation failed with errors:")
    # Compiler stderr is written unrendered.
    console.file.write(result.stderr + "\n")
    console.file.flush()
    return PipelineOutcome.COMPILE_FAILED


def run_pipeline(
    config: InvocationConfig,
    options: Optional[StubOptions] = None,
    console: Optional[Console] = None,
) -> PipelineOutcome:
    """
    Execute the pipeline for a parsed command line.

    In compile mode the source is written to a unique temporary file and then
    handed to the compiler. Unless `abort_on_generation_failure` is set, the
    compile stage runs even when generation failed.

    Args:
        config: Parsed command line
        options: Generator and compiler settings
        console: Console receiving the user-facing messages

    Returns:
        The terminal PipelineOutcome
    """
    options = options or StubOptions()
    console = console or Console()
    generator = TemplateGenerator(options)

    if not config.compile:
        output_file = default_output_path(config.input_path)
        if _generate(generator, config.input_path, output_file, console):
            return PipelineOutcome.GENERATED
        return PipelineOutcome.GENERATION_FAILED

    source_file = temporary_source_path(options.temp_prefix, options.temp_dir)
    logger.debug(f"Intermediate source file: {source_file}")
    generated = _generate(generator, config.input_path, source_file, console)
    if not generated and options.abort_on_generation_failure:
        logger.info("Generation failed; skipping compilation")
        return PipelineOutcome.GENERATION_FAILED

    try:
        return _compile(
            CompilerInvoker(options), source_file, config.library_name or "", console
        )
    finally:
        if options.cleanup_temp:
            source_file.unlink(missing_ok=True)
            logger.debug(f"Removed intermediate source file: {source_file}")
