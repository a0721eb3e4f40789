"""Lox interpreter driver.

The :class:`Lox` driver selects script or REPL mode, feeds source through a
:class:`Pipeline` and maps reported diagnostics to an exit status.


File: __init__.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from .driver import Lox, main
from .pipeline import Pipeline

__all__ = ["Lox", "Pipeline", "main"]
