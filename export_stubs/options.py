#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
File: options.py

Description:
------------
Command-line parsing and configuration options for the export_stubs package.
"""

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

from loguru import logger
from pydantic import BaseModel, ConfigDict, Field, field_validator

from .exceptions import UsageError
from .utils import PathLike

COMPILE_PREFIX = "-c="
INPUT_FLAG = "-i"


@dataclass(frozen=True)
class InvocationConfig:
    """Parsed command line. Immutable once created."""

    input_path: str
    compile: bool = False
    library_name: Optional[str] = None


def parse_arguments(argv: Sequence[str]) -> InvocationConfig:
    """
    Parse the raw argument list into an InvocationConfig.

    Args:
        argv: Arguments without the program name

    Returns:
        The parsed InvocationConfig

    Raises:
        UsageError: If the arguments are empty, malformed or lack an input file.
            An empty message means only the usage text should be printed.
    """
    if not argv:
        raise UsageError()

    input_path: Optional[str] = None
    library_name: Optional[str] = None
    compile_flag = False

    tokens = iter(argv)
    for arg in tokens:
        if arg.startswith(COMPILE_PREFIX):
            compile_flag = True
            library_name = arg[len(COMPILE_PREFIX):]
        elif arg == INPUT_FLAG:
            input_path = next(tokens, None)
            if input_path is None:
                raise UsageError("Missing argument for -i.")
        else:
            raise UsageError(f"Unknown option: {arg}")

    if not input_path:
        raise UsageError("Input file is required.")

    logger.debug(
        f"Parsed arguments: input={input_path}, compile={compile_flag}, library={library_name}"
    )
    return InvocationConfig(
        input_path=input_path, compile=compile_flag, library_name=library_name
    )


def format_usage(program: str) -> str:
    """Return the usage text for the given program name."""
    return "\n".join(
        [
            "Usage:",
            f"{program} -i input.txt -c=output.dll",
            "",
            "Options:",
            "  -i    Specify the input file containing export names.",
            "  -c=<name> Compile the generated template into a DLL with the specified name.",
            "",
            "Example:",
            f"  {program} -i input.txt -c=output.dll",
        ]
    )


class StubOptions(BaseModel):
    """Generator and compiler settings, loadable from JSON or YAML."""

    model_config = ConfigDict(
        extra="forbid",
        validate_assignment=True,
        str_strip_whitespace=True,
    )

    compiler: str = Field(default="gcc", description="Compiler executable")
    compiler_flags: List[str] = Field(
        default_factory=lambda: ["-shared", "-s", "-O3"],
        description="Flags placed between the output name and the source file",
    )
    library_suffix: str = Field(default=".dll", description="Shared library suffix")
    temp_prefix: str = Field(
        default="compiled_", description="Prefix of the intermediate source file"
    )
    temp_dir: Optional[Path] = Field(
        default=None, description="Directory for the intermediate source file"
    )
    encoding: str = Field(default="utf-8", description="Input and output encoding")
    cleanup_temp: bool = Field(
        default=False, description="Remove the intermediate source after compiling"
    )
    abort_on_generation_failure: bool = Field(
        default=False, description="Skip compiling when generation failed"
    )

    @field_validator("compiler")
    @classmethod
    def validate_compiler(cls, v: str) -> str:
        if not v:
            raise ValueError("Compiler command must not be empty")
        return v

    @field_validator("library_suffix")
    @classmethod
    def validate_library_suffix(cls, v: str) -> str:
        if not v.startswith("."):
            raise ValueError(f"Library suffix must start with '.': {v}")
        return v

    def library_filename(self, name: str) -> str:
        """Return the shared library file name for a base name."""
        return f"{name}{self.library_suffix}"

    def to_dict(self) -> Dict[str, Any]:
        """Convert options to dictionary."""
        return self.model_dump()

    @classmethod
    def from_dict(cls, options_dict: Dict[str, Any]) -> "StubOptions":
        """Create StubOptions from dictionary."""
        return cls.model_validate(options_dict or {})

    @classmethod
    def from_json(cls, json_file: PathLike) -> "StubOptions":
        """Load options from JSON file."""
        try:
            with open(json_file, "r", encoding="utf-8") as f:
                options_dict = json.load(f)
            return cls.from_dict(options_dict)
        except Exception as e:
            logger.error(f"Failed to load options from JSON file: {str(e)}")
            raise

    @classmethod
    def from_yaml(cls, yaml_file: PathLike) -> "StubOptions":
        """Load options from YAML file."""
        try:
            import yaml

            with open(yaml_file, "r", encoding="utf-8") as f:
                options_dict = yaml.safe_load(f)
            return cls.from_dict(options_dict)
        except ImportError:
            logger.error(
                "YAML support requires PyYAML. Install with 'pip install pyyaml'"
            )
            raise ImportError(
                "YAML support requires PyYAML. Install with 'pip install pyyaml'"
            )
        except Exception as e:
            logger.error(f"Failed to load options from YAML file: {str(e)}")
            raise

    @classmethod
    def from_file(cls, config_file: PathLike) -> "StubOptions":
        """Load options from a JSON or YAML file, chosen by suffix."""
        path = Path(config_file)
        if path.suffix.lower() in (".yml", ".yaml"):
            return cls.from_yaml(path)
        return cls.from_json(path)
