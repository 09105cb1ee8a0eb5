"""Lexer for scopelang.

Source text is split on whitespace; every maximal run of non-whitespace
characters is one token. Spaces, tabs and newlines are interchangeable as
separators, so a statement may span several lines and several statements may
share a line.

Keywords (``print``, ``scope``, ``{``, ``}`` and ``=``) only match when they
make up the whole token, and are case-sensitive. Everything else is a
``WORD``: the lexer does not decide whether a word is an identifier or an
integer literal, that is left to the interpreter which knows the position the
word appears in.


File: lexer.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

import re

KEYWORDS = {
    'print': 'PRINT',
    'scope': 'SCOPE',
    '{': 'LBRACE',
    '}': 'RBRACE',
    '=': 'ASSIGN',
}

WORD_PATTERN = re.compile(r'\S+')


class Token:
    """
    Represents a lexical token with a type and value.
    """
    def __init__(self, type_, value, line):
        """
        Initialize a new token.

        Parameters:
            type_ (str): The token type.
            value (str): The token text as it appears in the source.
            line (int): The 1-based source line.
        """
        self.type = type_
        self.value = value
        self.line = line

    def __repr__(self) -> str:
        """
        Return a string representation of the token.
        """
        return f"Token({self.type}, {self.value}, line={self.line})"


def tokenize(code: str, first_line: int = 1) -> list[Token]:
    """
    Convert a string of source code into a list of tokens.

    Parameters:
        code (str): The source code to tokenize.
        first_line (int): Line number given to the first line of `code`.

    Returns:
        list[Token]: Tokens in source order.
    """
    tokens = []
    for line_num, line in enumerate(code.splitlines(), start=first_line):
        for match in WORD_PATTERN.finditer(line):
            word = match.group()
            tokens.append(Token(KEYWORDS.get(word, 'WORD'), word, line_num))
    return tokens


class TokenStream:
    """
    Forward-only cursor over a token list.

    One stream is created per run; the position it holds is the only parse
    state the interpreter needs.
    """
    def __init__(self, tokens: list[Token]):
        self.tokens = tokens
        self.position = 0

    def has_next(self) -> bool:
        """Return True if at least one token is left."""
        return self.position < len(self.tokens)

    def next(self) -> Token | None:
        """
        Consume and return the next token.

        Returns:
            Token | None: The next token, or None once the stream is exhausted.
        """
        if not self.has_next():
            return None
        tok = self.tokens[self.position]
        self.position += 1
        return tok

    @property
    def last_line(self) -> int | None:
        """Line of the most recently consumed token, if any."""
        if self.position == 0:
            return None
        return self.tokens[self.position - 1].line
