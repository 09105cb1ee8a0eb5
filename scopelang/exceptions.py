"""Errors.

Every malformed script surfaces as a subclass of :class:`ScriptException`.
The host only prints the message, so the subclasses exist for callers and
tests that want to tell the failure kinds apart.


File: exceptions.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""


class ScriptException(Exception):
    """
    Base error for well-formedness failures.
    """
    def __init__(self, message, line=None, file=None):
        self.line = line
        self.file = file
        if line is not None:
            message += f" on line {line}"
        if file is not None:
            message += f" in {file}"
        super().__init__(message)


class UnexpectedEndOfInputException(ScriptException):
    """
    Error for a token stream that ends in the middle of a statement.
    """
    def __init__(self, statement, line=None, file=None):
        self.statement = statement
        super().__init__(
            f"Unexpected end of input while parsing the {statement} statement",
            line,
            file,
        )


class ExpectedOpeningBraceException(ScriptException):
    """
    Error for a `scope` keyword not followed by `{`.
    """
    def __init__(self, found, line=None, file=None):
        self.found = found
        super().__init__(f"'{{' expected after 'scope', found '{found}'", line, file)


class UnrecognizedOperandException(ScriptException):
    """
    Error for an assignment target not followed by `=`.
    """
    def __init__(self, operand, line=None, file=None):
        self.operand = operand
        super().__init__(f"Unrecognized operand '{operand}'", line, file)


class UnterminatedScopeException(ScriptException):
    """
    Error for scopes still open once the script has been consumed.
    """
    def __init__(self, unclosed, file=None):
        self.unclosed = unclosed
        super().__init__(
            f"Unterminated scope, closing brace expected ({unclosed} left open)",
            file=file,
        )


class ScopeUnderflowException(ScriptException):
    """
    Error for a closing brace with no matching `scope {`.
    """
    def __init__(self, line=None, file=None):
        super().__init__("Unmatched '}', no open scope to close", line, file)


class NoOpenScopeException(ScriptException):
    """
    Error for a variable write with no frame to hold it.
    """
    def __init__(self, varname, line=None, file=None):
        self.varname = varname
        super().__init__(f"No open scope to bind '{varname}' in", line, file)
