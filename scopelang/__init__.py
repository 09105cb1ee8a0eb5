"""scopelang.

A small interpreter for integer variables, nested scopes and `print`.


File: __init__.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from .interpreter import Interpreter
from .lexer import tokenize
from .memory import ScopedMemory

__all__ = ["Interpreter", "ScopedMemory", "tokenize"]
