"""Diagnostic reporting.

Every error the interpreter encounters is turned into a :class:`Diagnostic`
and handed to a :class:`Reporter`. The reporter writes it to the diagnostic
stream straight away and records which kind of error occurred, so that the
driver can pick an exit status once the unit of work is done.

Diagnostics are formatted as::

    [line 3] Error at 'x': Expect ';' after value.

or, when no line is known::

    Error: Something went wrong.

A reporter is created for each unit of work, so its :class:`ErrorState`
starts clear and belongs to that run alone.


File: diagnostics.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TextIO


class Severity(str, Enum):
    """
    Enumeration of diagnostic kinds.
    """

    USAGE = "usage"
    SYNTAX = "syntax"
    RUNTIME = "runtime"

    def __str__(self) -> str:  # pragma: no cover - trivial
        """
        Return the underlying string value for nicer debug output.
        """
        return self.value


@dataclass(frozen=True)
class Diagnostic:
    """A single reported error."""

    severity: Severity
    message: str
    line: int | None = None
    where: str = ""

    @property
    def text(self) -> str:
        """
        Return ``Error<where>: <message>`` without any line prefix.
        """
        return f"Error{self.where}: {self.message}"

    def format(self) -> str:
        """
        Render the diagnostic the way it is shown to the user.

        Returns:
            str: ``[line <n>] Error<where>: <message>``, without the line
            prefix when the location is unknown.
        """
        if self.line is None:
            return self.text
        return f"[line {self.line}] {self.text}"


@dataclass
class ErrorState:
    """Error flags collected while running one unit of source."""

    had_error: bool = False
    had_runtime_error: bool = False


class Reporter:
    """Writes diagnostics to a stream and tracks which kinds occurred."""

    def __init__(self, stream: TextIO):
        self.stream = stream
        self.diagnostics: list[Diagnostic] = []
        self._state = ErrorState()

    @property
    def had_error(self) -> bool:
        return self._state.had_error

    @property
    def had_runtime_error(self) -> bool:
        return self._state.had_runtime_error

    @property
    def state(self) -> ErrorState:
        """
        Return a copy of the current flags.
        """
        return ErrorState(self._state.had_error, self._state.had_runtime_error)

    def report(self, diagnostic: Diagnostic) -> None:
        """
        Emit a diagnostic immediately and set the matching flag.

        Args:
            diagnostic (Diagnostic): The error to report.
        """
        self.diagnostics.append(diagnostic)
        if diagnostic.severity is Severity.RUNTIME:
            self._state.had_runtime_error = True
        else:
            self._state.had_error = True
        self.stream.write(diagnostic.format() + "\n")
        self.stream.flush()

    def error(self, line: int | None, message: str, where: str = "") -> None:
        """
        Report a syntax error found by the scanner or parser.
        """
        self.report(Diagnostic(Severity.SYNTAX, message, line, where))

    def runtime_error(self, line: int | None, message: str) -> None:
        """
        Report an error raised while evaluating statements.
        """
        self.report(Diagnostic(Severity.RUNTIME, message, line))
