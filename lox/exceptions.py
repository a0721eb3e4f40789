"""Errors.

Exceptions raised by the interpretation pipeline stages. The pipeline
converts each of them into a reported diagnostic before control returns
to the driver.


File: exceptions.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""


class LoxError(Exception):
    """
    Base error for the Lox interpreter.
    """
    def __init__(self, message, line=None):
        self.message = message
        self.line = line
        text = message
        if line is not None:
            text += f" on line {line}"
        super().__init__(text)


class LoxSyntaxError(LoxError):
    """
    Error raised by the scanner or parser.
    """
    def __init__(self, message, line=None, where=""):
        self.where = where
        super().__init__(message, line)


class LoxRuntimeError(LoxError):
    """
    Error raised by the evaluator while executing statements.
    """
    pass


class PipelineConfigError(LoxError):
    """
    Error for a configured pipeline factory that cannot be loaded.
    """
    def __init__(self, target, reason):
        self.target = target
        super().__init__(f"Cannot load pipeline '{target}': {reason}")
