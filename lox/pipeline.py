"""Execution pipeline.

The pipeline is the single seam between the driver and the stages that do
the actual interpreting. A unit of source flows through up to three stages:

1. Scanner
The scanner turns source text into a sequence of tokens.

2. Parser
The parser turns tokens into a list of statements.

3. Evaluator
The evaluator executes statements. It is the only stage that outlives a
single unit of source, so variables declared on one REPL line are still
visible on the next.

Stages report errors through the :class:`~lox.diagnostics.Reporter` they are
given, or by raising :class:`~lox.exceptions.LoxSyntaxError` and
:class:`~lox.exceptions.LoxRuntimeError`. Once the scanner or parser has
reported an error, no later stage runs for that unit. Whatever a stage
raises is reported before :meth:`Pipeline.run` returns, so nothing escapes
into the driver's loop.

Stages that are not configured are skipped and their input is passed on
unchanged.


File: pipeline.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from __future__ import annotations

import importlib
from typing import Any, Protocol, Sequence

from lox.diagnostics import ErrorState, Reporter
from lox.exceptions import LoxRuntimeError, LoxSyntaxError, PipelineConfigError


class Scanner(Protocol):
    """Turns source text into tokens."""

    def __call__(self, source: str, reporter: Reporter) -> Sequence[Any]:
        ...


class Parser(Protocol):
    """Turns tokens into statements."""

    def __call__(self, tokens: Sequence[Any], reporter: Reporter) -> Sequence[Any]:
        ...


class Evaluator(Protocol):
    """Executes statements against a persistent environment."""

    def interpret(self, statements: Sequence[Any], reporter: Reporter) -> None:
        ...


class Pipeline:
    """Runs source through the scanner, parser and evaluator."""

    def __init__(
        self,
        scanner: Scanner | None = None,
        parser: Parser | None = None,
        evaluator: Evaluator | None = None,
        debug: bool = False,
    ):
        self.scanner = scanner
        self.parser = parser
        self.evaluator = evaluator
        self.debug = debug

    def run(self, source: str, reporter: Reporter) -> ErrorState:
        """
        Interpret one unit of source.

        Args:
            source (str): The source text to run.
            reporter (Reporter): Receives every diagnostic produced.

        Returns:
            ErrorState: The error flags for this unit.
        """
        return self._process(source, reporter, evaluate=True)

    def check(self, source: str, reporter: Reporter) -> ErrorState:
        """
        Scan and parse ``source`` without evaluating it.
        """
        return self._process(source, reporter, evaluate=False)

    def _process(self, source: str, reporter: Reporter, evaluate: bool) -> ErrorState:
        try:
            tokens = source
            if self.scanner is not None:
                tokens = self.scanner(source, reporter)
                if self.debug:
                    self._dump(reporter, "Tokens", tokens)
            if reporter.had_error:
                return reporter.state

            statements = tokens
            if self.parser is not None:
                statements = self.parser(tokens, reporter)
                if self.debug:
                    self._dump(reporter, "Statements", statements)
            if reporter.had_error:
                return reporter.state

            if evaluate and self.evaluator is not None:
                self.evaluator.interpret(statements, reporter)
        except LoxSyntaxError as e:
            reporter.error(e.line, e.message, e.where)
        except LoxRuntimeError as e:
            reporter.runtime_error(e.line, e.message)
        except Exception as e:  # pylint: disable=broad-exception-caught
            reporter.runtime_error(None, f"{type(e).__name__}: {e}")
        return reporter.state

    @staticmethod
    def _dump(reporter: Reporter, title: str, value: Any) -> None:
        """
        Print an intermediate result for debugging.
        """
        reporter.stream.write(f"\n{title}:\n\n{value}\n")
        reporter.stream.flush()


def load_pipeline(target: str) -> Pipeline:
    """
    Build a pipeline from a ``package.module:factory`` reference.

    Args:
        target (str): Import path of a callable returning a :class:`Pipeline`.

    Returns:
        Pipeline: The pipeline produced by the factory.

    Raises:
        PipelineConfigError: If the factory cannot be imported or does not
            return a pipeline.
    """
    module_name, sep, attr = target.partition(":")
    if not sep or not module_name or not attr:
        raise PipelineConfigError(target, "expected 'module:factory'")
    try:
        module = importlib.import_module(module_name)
    except ImportError as e:
        raise PipelineConfigError(target, str(e)) from e
    factory = getattr(module, attr, None)
    if not callable(factory):
        raise PipelineConfigError(target, f"'{attr}' is not callable")
    pipeline = factory()
    if not isinstance(pipeline, Pipeline):
        raise PipelineConfigError(target, "factory did not return a Pipeline")
    return pipeline
