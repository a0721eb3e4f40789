"""
jlox - Lox Language Interpreter

This is the main entry point for the Lox language interpreter.

Workflow:
1. The command-line arguments select script mode or the interactive REPL.
2. Script mode reads the whole source file; the REPL reads one line at a time.
3. Each unit of source is handed to the pipeline (scanner, parser, evaluator).
4. Errors are reported to stderr as they occur.
5. The exit status reflects the errors seen: 65 for syntax errors, 70 for
   runtime errors and 64 for a bad invocation.

Set LOXDEBUG to dump tokens and statements for every unit of source.
"""
import sys

from lox.driver import main


def entrypoint() -> None:
    """
    Console script entry point.
    """
    sys.exit(main(sys.argv))


if __name__ == "__main__":
    entrypoint()
