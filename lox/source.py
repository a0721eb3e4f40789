"""Source acquisition.

Script mode reads a whole file as one unit of source. REPL mode pulls one
line at a time from an input stream until the stream is exhausted.


File: source.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from __future__ import annotations

from pathlib import Path
from typing import Iterator, TextIO

from lox.config import DEFAULT_ENCODING, DEFAULT_PROMPT


def read_script(path: str, encoding: str = DEFAULT_ENCODING) -> str:
    """
    Read the script at ``path`` and decode it.

    Bytes that are not valid in ``encoding`` are replaced with U+FFFD.

    Args:
        path (str): Path to the Lox source file.
        encoding (str): Text encoding of the file.

    Returns:
        str: The full contents of the file.

    Raises:
        OSError: If the file cannot be opened or read.
    """
    data = Path(path).read_bytes()
    return data.decode(encoding, errors="replace")


def prompt_lines(stdin: TextIO, stdout: TextIO, prompt: str = DEFAULT_PROMPT) -> Iterator[str]:
    """
    Yield lines typed at the prompt until end-of-input.

    The prompt is written, without a newline, before every read. Yielded
    lines have their line terminator removed.

    Args:
        stdin (TextIO): Stream to read lines from.
        stdout (TextIO): Stream the prompt is written to.
        prompt (str): Text shown before each read.
    """
    while True:
        stdout.write(prompt)
        stdout.flush()
        line = stdin.readline()
        if line == "":
            # End-of-input; move the shell prompt off the REPL prompt line.
            stdout.write("\n")
            stdout.flush()
            return
        yield line.rstrip("\r\n")
