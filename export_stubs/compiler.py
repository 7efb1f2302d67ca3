#!/usr/bin/env python3
"""
Compiler invoker: builds the generated stub source into a shared library.

Exactly one synchronous compiler run per call. There is no timeout and no
retry; the caller blocks until the compiler exits.
"""

import subprocess
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

from loguru import logger

from .exceptions import CompilerInvocationError
from .options import StubOptions
from .utils import PathLike


@dataclass
class CompilationResult:
    """Captured outcome of a compiler run."""

    command: List[str]
    exit_code: int
    stdout: str = ""
    stderr: str = ""
    library_path: Optional[Path] = None

    @property
    def success(self) -> bool:
        return self.exit_code == 0


class CompilerInvoker:
    """Runs the configured compiler against a generated source file."""

    def __init__(self, options: Optional[StubOptions] = None):
        self.options = options or StubOptions()

    def build_command(self, source_file: PathLike, library_name: str) -> List[str]:
        """Return the argument vector, e.g. `gcc -o name.dll -shared -s -O3 src.c`."""
        return [
            self.options.compiler,
            "-o",
            self.options.library_filename(library_name),
            *self.options.compiler_flags,
            str(source_file),
        ]

    def compile(self, source_file: PathLike, library_name: str) -> CompilationResult:
        """
        Compile the source file into `<library_name><suffix>` in the cwd.

        Args:
            source_file: Generated C source file
            library_name: Base name of the shared library

        Returns:
            CompilationResult with separately captured stdout and stderr.
            A non-zero exit status is reported through the result, not raised.

        Raises:
            CompilerInvocationError: If the compiler process cannot be started
        """
        cmd = self.build_command(source_file, library_name)
        try:
            logger.debug(f"Running command: {' '.join(cmd)}")
            process = subprocess.run(
                cmd,
                stdout=subprocess.PIPE,
                stderr=subprocess.PIPE,
                text=True,
                check=False,
            )
        except OSError as e:
            logger.error(f"Failed to start compiler '{cmd[0]}': {str(e)}")
            raise CompilerInvocationError(str(e)) from e

        result = CompilationResult(
            command=cmd,
            exit_code=process.returncode,
            stdout=process.stdout or "",
            stderr=process.stderr or "",
            library_path=Path(self.options.library_filename(library_name)),
        )
        if result.success:
            logger.info(f"Compiler exited successfully: {result.library_path}")
        else:
            logger.warning(f"Compiler exited with status {result.exit_code}")
        return result
