"""Runtime configuration.

Settings are read from environment variables when the interpreter starts:

- ``LOXDEBUG``: any non-empty value dumps tokens and statements for each
  unit of source to the diagnostic stream.
- ``LOXENCODING``: text encoding used to decode script files (``utf-8``).
- ``LOXPROMPT``: prompt written before each REPL line (``"> "``).
- ``LOXPIPELINE``: ``package.module:factory`` naming a callable that returns
  the :class:`~lox.pipeline.Pipeline` to run source through.


File: config.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping

DEFAULT_ENCODING = "utf-8"
DEFAULT_PROMPT = "> "


@dataclass(frozen=True)
class Config:
    """Interpreter settings."""

    debug: bool = False
    encoding: str = DEFAULT_ENCODING
    prompt: str = DEFAULT_PROMPT
    pipeline: str | None = None

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "Config":
        """
        Build a configuration from environment variables.

        Args:
            environ (Mapping[str, str] | None): Variables to read, defaults to
                ``os.environ``.

        Returns:
            Config: The resulting settings.
        """
        if environ is None:
            environ = os.environ
        return cls(
            debug=bool(environ.get("LOXDEBUG")),
            encoding=environ.get("LOXENCODING") or DEFAULT_ENCODING,
            prompt=environ.get("LOXPROMPT", DEFAULT_PROMPT),
            pipeline=environ.get("LOXPIPELINE") or None,
        )
