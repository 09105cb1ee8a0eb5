"""Interpreter.

This interpreter executes scopelang scripts directly from the token stream;
there is no separate parse step and no AST. Tokens are consumed left to right
and each statement pulls exactly the tokens it needs.

1. Statements
The current token decides the statement form:
- `print NAME` outputs the value of NAME, or `null` when it is unset.
- `scope {` opens a nested scope.
- `}` closes the innermost scope.
- `NAME = VALUE` assigns. VALUE is an integer literal or another variable name.

2. Environment
Variables live in a :class:`ScopedMemory`. A global frame is opened before the
first statement and closed after the last; anything still open at that point
is an unterminated scope.

3. Assignment
An integer literal on the right-hand side is stored as is. Any other word is
read as a variable and its current value copied into the target. Copying from
an unset variable leaves the target untouched and is not an error.

4. Error Handling
Malformed scripts abort the run with a :class:`ScriptException` subclass
carrying the line number and file.


File: interpreter.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

import re

from scopelang.exceptions import (
    ExpectedOpeningBraceException,
    ScopeUnderflowException,
    UnexpectedEndOfInputException,
    UnrecognizedOperandException,
    UnterminatedScopeException,
)
from scopelang.lexer import Token, TokenStream
from scopelang.memory import ScopedMemory

INTEGER_PATTERN = re.compile(r'-?[0-9]+')
INT_MIN = -2**31
INT_MAX = 2**31 - 1

# The global frame is never closed by a `}` statement.
GLOBAL_DEPTH = 1


def parse_integer(text: str) -> int | None:
    """
    Parse a signed decimal integer literal.

    Returns:
        int | None: The value, or None if the text is not a literal or does
        not fit in a signed 32-bit integer.
    """
    if not INTEGER_PATTERN.fullmatch(text):
        return None
    value = int(text)
    if not INT_MIN <= value <= INT_MAX:
        return None
    return value


def format_value(value: int | None) -> str:
    """Render a variable value the way `print` outputs it."""
    return 'null' if value is None else str(value)


class Interpreter:
    """Token-driven interpreter for scopelang."""

    def __init__(self, file: str):
        """Initialize the interpreter."""
        self.file = file
        self.memory = ScopedMemory()

    def execute(self, tokens: list[Token]):
        """
        Run a complete script inside a fresh global scope.

        Parameters:
            tokens (list[Token]): The tokenized script.

        Raises:
            ScriptException: If the script is malformed.
        """
        self.memory = ScopedMemory()
        self.memory.open_scope()
        self.run(tokens)
        self.memory.close_scope()

        if self.memory.has_open_scope():
            raise UnterminatedScopeException(self.memory.depth, self.file)

    def run(self, tokens: list[Token], partial: bool = False) -> list[Token]:
        """
        Execute statements against the current memory.

        The caller is responsible for having opened the global scope.

        Parameters:
            tokens (list[Token]): The tokens to execute.
            partial (bool): If True, a statement cut short by the end of the
                tokens is not an error; its tokens are returned instead.

        Returns:
            list[Token]: Tokens of an incomplete trailing statement, or an
            empty list once everything has run.
        """
        stream = TokenStream(tokens)
        while stream.has_next():
            start = stream.position
            try:
                self.statement(stream.next(), stream)
            except UnexpectedEndOfInputException:
                if not partial:
                    raise
                # Statements consume all their tokens before acting, so the
                # cut-off statement has not touched memory.
                return tokens[start:]
        return []

    def statement(self, tok: Token, stream: TokenStream):
        """Execute the statement that starts with `tok`."""
        match tok.type:
            case 'PRINT':
                name = self._expect(stream, 'print')
                print(format_value(self.memory.read(name.value)))
            case 'SCOPE':
                brace = self._expect(stream, 'scope')
                if brace.type != 'LBRACE':
                    raise ExpectedOpeningBraceException(brace.value, brace.line, self.file)
                self.memory.open_scope()
            case 'RBRACE':
                if self.memory.depth <= GLOBAL_DEPTH:
                    raise ScopeUnderflowException(tok.line, self.file)
                self.memory.close_scope()
            case _:
                self.assignment(tok, stream)

    def assignment(self, target: Token, stream: TokenStream):
        """
        Execute `target = value`.

        Raises:
            UnrecognizedOperandException: If `target` is not followed by `=`.
        """
        operator = self._expect(stream, 'assignment')
        if operator.type != 'ASSIGN':
            raise UnrecognizedOperandException(operator.value, operator.line, self.file)

        source = self._expect(stream, 'assignment')
        value = parse_integer(source.value)
        if value is None:
            value = self.memory.read(source.value)
            if value is None:
                return
        self.memory.write(target.value, value)

    def _expect(self, stream: TokenStream, statement: str) -> Token:
        tok = stream.next()
        if tok is None:
            raise UnexpectedEndOfInputException(statement, stream.last_line, self.file)
        return tok
