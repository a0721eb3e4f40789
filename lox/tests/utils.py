"""
Utility functions shared across Lox interpreter tests.

The driver treats the scanner, parser and evaluator as collaborators, so the
tests plug in a tiny calculator language instead: integer expressions with
``+ - * /``, variables declared with ``var name = expr;`` and expression
statements whose value is printed.
"""
from collections import namedtuple
from pathlib import Path
import io
import re
import sys

from lox.diagnostics import Reporter
from lox.driver import Lox
from lox.exceptions import LoxRuntimeError, LoxSyntaxError
from lox.pipeline import Pipeline

# Ensure the project root is on the Python path
PROJECT_ROOT = Path(__file__).resolve().parents[2]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.append(str(PROJECT_ROOT))

Token = namedtuple("Token", ["type", "lexeme", "line"])

TOKEN_PATTERN = re.compile(r"\d+|[A-Za-z_]\w*|[-+*/=;]|\n|[ \t\r]+|.")
OPERATORS = {"+", "-", "*", "/"}


def scan(source: str, reporter: Reporter) -> list[Token]:
    """
    Split ``source`` into tokens, reporting characters the language lacks.
    """
    tokens = []
    line = 1
    for match in TOKEN_PATTERN.finditer(source):
        text = match.group()
        if text == "\n":
            line += 1
        elif text.isspace():
            continue
        elif text.isdigit():
            tokens.append(Token("NUMBER", text, line))
        elif text[0].isalpha() or text[0] == "_":
            tokens.append(Token("VAR" if text == "var" else "IDENT", text, line))
        elif text in OPERATORS or text in {"=", ";"}:
            tokens.append(Token(text, text, line))
        else:
            reporter.error(line, "Unexpected character.")
    tokens.append(Token("EOF", "", line))
    return tokens


def parse(tokens: list[Token], reporter: Reporter) -> list[tuple]:
    """
    Group tokens into ``('var', name, expr, line)`` and ``('expr', expr, line)``.
    """
    statements = []
    current: list[Token] = []
    for token in tokens:
        if token.type == "EOF":
            if current:
                raise LoxSyntaxError("Expect ';' after expression.", token.line, " at end")
            break
        if token.type != ";":
            current.append(token)
            continue
        if current and current[0].type == "VAR":
            if len(current) < 3 or current[1].type != "IDENT" or current[2].type != "=":
                reporter.error(token.line, "Expect variable name.")
            elif _check_expr(current[3:], token, reporter):
                statements.append(("var", current[1].lexeme, current[3:], token.line))
        elif _check_expr(current, token, reporter):
            statements.append(("expr", current, token.line))
        current = []
    return statements


def _check_expr(expr: list[Token], semicolon: Token, reporter: Reporter) -> bool:
    """Operands and operators must alternate, starting and ending with an operand."""
    expect_operand = True
    for token in expr:
        if expect_operand:
            valid = token.type in {"NUMBER", "IDENT"}
        else:
            valid = token.type in OPERATORS
        if not valid:
            reporter.error(token.line, "Expect expression.", f" at '{token.lexeme}'")
            return False
        expect_operand = not expect_operand
    if expect_operand:
        reporter.error(semicolon.line, "Expect expression.", " at ';'")
        return False
    return True


class Calculator:
    """Evaluates calculator statements, keeping variables between calls."""

    def __init__(self, out=None):
        self.out = out
        self.env: dict[str, int] = {}

    def interpret(self, statements, reporter: Reporter) -> None:
        for stmt in statements:
            if stmt[0] == "var":
                _, name, expr, line = stmt
                self.env[name] = self.evaluate(expr, line)
            else:
                _, expr, line = stmt
                print(self.evaluate(expr, line), file=self.out or sys.stdout)

    def evaluate(self, expr: list[Token], line: int) -> int:
        value = self._operand(expr[0], line)
        for op, operand in zip(expr[1::2], expr[2::2]):
            right = self._operand(operand, line)
            if op.type == "+":
                value += right
            elif op.type == "-":
                value -= right
            elif op.type == "*":
                value *= right
            elif right == 0:
                raise LoxRuntimeError("Division by zero.", line)
            else:
                value //= right
        return value

    def _operand(self, token: Token, line: int) -> int:
        if token.type == "NUMBER":
            return int(token.lexeme)
        if token.lexeme not in self.env:
            raise LoxRuntimeError(f"Undefined variable '{token.lexeme}'.", line)
        return self.env[token.lexeme]


def calculator_pipeline() -> Pipeline:
    """
    Pipeline factory used through ``LOXPIPELINE``.
    """
    return Pipeline(scan, parse, Calculator())


def make_lox(stdin_text: str = "") -> Lox:
    """
    Create a driver wired to in-memory streams and the calculator pipeline.
    """
    stdout = io.StringIO()
    lox = Lox(
        Pipeline(scan, parse, Calculator(stdout)),
        stdin=io.StringIO(stdin_text),
        stdout=stdout,
        stderr=io.StringIO(),
    )
    return lox
