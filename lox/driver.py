"""Interpreter driver.

Chooses how the interpreter runs and turns the outcome into an exit
status.

1. Mode Selection
No arguments starts the REPL, one argument runs that file as a script, and
anything more is a usage error.

2. Script Mode
The whole file is run as a single unit. The exit status reflects the worst
error seen: 70 for a runtime error, 65 for a syntax error, 0 otherwise.

3. REPL Mode
Each line is run as its own unit with fresh error flags, so a bad line never
ends the session. The REPL exits with status 0 once input runs out.

Exit statuses follow the UNIX ``sysexits.h`` convention.


File: driver.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from __future__ import annotations

import sys
from enum import Enum
from typing import Iterable, Sequence, TextIO

from lox.config import Config
from lox.diagnostics import ErrorState, Reporter
from lox.pipeline import Pipeline, load_pipeline
from lox.source import prompt_lines, read_script

EX_OK = 0
EX_USAGE = 64
EX_DATAERR = 65
EX_SOFTWARE = 70

USAGE = "Usage: jlox [script]"


class Mode(Enum):
    """
    Ways the interpreter can be started.
    """

    REPL = "repl"
    SCRIPT = "script"
    USAGE = "usage"


def select_mode(args: Sequence[str]) -> Mode:
    """
    Pick the execution mode from the command-line arguments.

    Args:
        args (Sequence[str]): Arguments after the program name.
    """
    if len(args) > 1:
        return Mode.USAGE
    if len(args) == 1:
        return Mode.SCRIPT
    return Mode.REPL


def exit_status(state: ErrorState) -> int:
    """
    Map the error flags of a script run to a process exit status.
    """
    if state.had_runtime_error:
        return EX_SOFTWARE
    if state.had_error:
        return EX_DATAERR
    return EX_OK


class Lox:
    """Runs Lox source in script or REPL mode."""

    def __init__(
        self,
        pipeline: Pipeline | None = None,
        config: Config | None = None,
        stdin: TextIO | None = None,
        stdout: TextIO | None = None,
        stderr: TextIO | None = None,
    ):
        self.config = config if config is not None else Config()
        self.pipeline = pipeline if pipeline is not None else Pipeline(debug=self.config.debug)
        self.stdin = stdin if stdin is not None else sys.stdin
        self.stdout = stdout if stdout is not None else sys.stdout
        self.stderr = stderr if stderr is not None else sys.stderr

    @classmethod
    def from_config(cls, config: Config) -> "Lox":
        """
        Create a driver using the pipeline named in ``config``.

        Raises:
            PipelineConfigError: If the configured pipeline cannot be loaded.
        """
        pipeline = None
        if config.pipeline:
            pipeline = load_pipeline(config.pipeline)
            if config.debug:
                pipeline.debug = True
        return cls(pipeline, config)

    def run(self, source: str) -> ErrorState:
        """
        Run one unit of source with a fresh reporter.
        """
        reporter = Reporter(self.stderr)
        return self.pipeline.run(source, reporter)

    def run_file(self, path: str) -> int:
        """
        Run a script file and return the exit status.

        Raises:
            OSError: If the file cannot be read.
        """
        source = read_script(path, self.config.encoding)
        return exit_status(self.run(source))

    def run_prompt(self, lines: Iterable[str] | None = None) -> int:
        """
        Run lines interactively until they run out.

        Args:
            lines (Iterable[str] | None): Lines to run, defaults to lines
                read at the prompt from ``stdin``.

        Returns:
            int: Always ``EX_OK``.
        """
        if lines is None:
            lines = prompt_lines(self.stdin, self.stdout, self.config.prompt)
        for line in lines:
            self.run(line)
        return EX_OK


def main(argv: list[str], lox: Lox | None = None) -> int:
    """
    Entry point for the CLI.

    Behaviour:
    - No arguments: enter the REPL.
    - One argument: treat it as the path to a script and run it.
    - Any other pattern: print usage and return ``EX_USAGE``.
    """
    args = argv[1:]
    mode = select_mode(args)
    if mode is Mode.USAGE:
        print(USAGE)
        return EX_USAGE

    if lox is None:
        lox = Lox.from_config(Config.from_env())
    if mode is Mode.SCRIPT:
        return lox.run_file(args[0])
    return lox.run_prompt()
