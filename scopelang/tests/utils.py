"""
Utility functions shared across scopelang tests.
"""
from pathlib import Path

from scopelang.lexer import tokenize
from scopelang.interpreter import Interpreter

RESOURCES = Path(__file__).resolve().parent / "resources"


def run_source(source: str) -> Interpreter:
    """
    Tokenize and execute source code, returning the interpreter.
    """
    interpreter = Interpreter("<test>")
    interpreter.execute(tokenize(source))
    return interpreter


def run_file(path: Path) -> Interpreter:
    """
    Run a file and return the interpreter instance after execution.
    """
    interpreter = Interpreter("<test>")
    interpreter.execute(tokenize(path.read_text(encoding="utf-8")))
    return interpreter
