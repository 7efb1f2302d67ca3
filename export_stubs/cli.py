#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
File: cli.py

Description:
------------
Command-line interface for the export_stubs package, powered by Typer.

The short flags `-i <path>` and `-c=<name>` are passed through untouched to
`parse_arguments`; Typer only owns the long options. Keep every Typer option
long-only, otherwise click's short-flag clustering would split `-c=<name>`.
"""

import sys
from pathlib import Path
from typing import Optional

import typer
from loguru import logger
from rich.console import Console
from rich.markup import escape

from . import __version__
from .exceptions import UsageError
from .options import StubOptions, format_usage, parse_arguments
from .pipeline import run_pipeline

app = typer.Typer(
    name="export-stubs",
    help="Generate C export stubs from a list of names and optionally compile them.",
    add_completion=False,
)
console = Console()


def version_callback(value: bool):
    if value:
        console.print(f"export-stubs version: {__version__}")
        raise typer.Exit()


def _configure_logging(verbose: bool) -> None:
    logger.remove()
    level = "DEBUG" if verbose else "INFO"
    logger.add(sys.stderr, level=level,
               format="{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {message}")


def _print_usage(program: str, message: str = "") -> None:
    if message:
        console.print(message, markup=False, highlight=False, soft_wrap=True)
    console.print(format_usage(program), markup=False, highlight=False, soft_wrap=True)


@app.command(
    context_settings={
        "help_option_names": ["--help"],
        "ignore_unknown_options": True,
        "allow_extra_args": True,
    }
)
def generate_command(
    ctx: typer.Context,
    config: Optional[Path] = typer.Option(
        None, "--config", help="Path to JSON/YAML configuration file.",
        exists=True, dir_okay=False, readable=True),
    verbose: bool = typer.Option(
        False, "--verbose", help="Enable verbose logging."),
    version: Optional[bool] = typer.Option(
        None, "--version", callback=version_callback, is_eager=True, help="Show version and exit."
    ),
):
    """
    -i <input-file> [-c=<library-base-name>]

    Write one exported stub function per name in the input file to
    <input-stem>.c, or compile it into <name>.dll when -c is given.
    """
    _configure_logging(verbose)
    program = ctx.find_root().info_name or "export-stubs"

    try:
        invocation = parse_arguments(list(ctx.args))
    except UsageError as e:
        _print_usage(program, e.message)
        return

    options = StubOptions()
    if config is not None:
        logger.info(f"Loading options from config file: {config}")
        try:
            options = StubOptions.from_file(config)
        except Exception as e:
            console.print(f"[red]Error:[/red] Failed to load config {escape(str(config))}: {escape(str(e))}",
                          soft_wrap=True)
            raise typer.Exit(code=1)

    outcome = run_pipeline(invocation, options, console)
    logger.debug(f"Pipeline finished: {outcome.name}")


def main():
    app()


if __name__ == "__main__":
    main()
