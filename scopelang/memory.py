"""Scoped memory.

Variables live in a stack of frames, one frame per open scope. The global
frame sits at the bottom of the stack and the innermost scope at the top.

Writes only ever touch the innermost frame, so assigning to a name that
already exists further out creates a shadowing binding instead of changing
the outer one. Reads walk the stack from the top down and return the first
binding found, or ``None`` when no frame holds the name.


File: memory.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from scopelang.exceptions import NoOpenScopeException, ScopeUnderflowException


class ScopedMemory:
    """Stack of variable frames with lexical shadowing."""

    def __init__(self):
        self.frames: list[dict[str, int]] = []

    @property
    def depth(self) -> int:
        """Number of frames currently open."""
        return len(self.frames)

    def open_scope(self):
        """Push a new, empty innermost frame."""
        self.frames.append({})

    def close_scope(self) -> dict[str, int]:
        """
        Pop the innermost frame and discard its bindings.

        Returns:
            dict[str, int]: The bindings held by the closed frame.

        Raises:
            ScopeUnderflowException: If no frame is open.
        """
        if not self.frames:
            raise ScopeUnderflowException()
        return self.frames.pop()

    def read(self, name: str) -> int | None:
        """
        Look a variable up from the innermost frame outwards.

        Returns:
            int | None: The first bound value, or None when the name is unset.
        """
        for frame in reversed(self.frames):
            if name in frame:
                return frame[name]
        return None

    def write(self, name: str, value: int):
        """
        Bind a value in the innermost frame.

        Raises:
            NoOpenScopeException: If no frame is open.
        """
        if not self.frames:
            raise NoOpenScopeException(name)
        self.frames[-1][name] = value

    def has_open_scope(self) -> bool:
        """Return True while at least one frame remains."""
        return bool(self.frames)

    def __contains__(self, name: str) -> bool:
        return self.read(name) is not None

    def __repr__(self) -> str:
        return f"ScopedMemory({self.frames!r})"
