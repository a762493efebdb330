"""
Jive Exceptions
===============

This module contains the exception classes raised by Jive.
"""

from __future__ import annotations
from typing import Any, Optional


class JiveError(Exception):
    """Base class for all errors raised by Jive."""
    pass


class NodeTypeError(JiveError, TypeError):
    """Raised when an operation receives a value of the wrong node kind.

    Attributes
    ----------
    value : Any
        The offending value (if available).
    """

    def __init__(self, message: str, *, value: Any = None):
        super().__init__(message)
        self.value = value


class PointerSyntaxError(JiveError, ValueError):
    """Raised when a JSON Pointer expression is malformed.

    Attributes
    ----------
    pointer : str | None
        The full pointer expression being parsed.
    position : int | None
        Zero-based offset of the first offending character.
    """

    def __init__(
        self,
        message: str,
        *,
        pointer: Optional[str] = None,
        position: Optional[int] = None,
    ):
        super().__init__(message)
        self.pointer = pointer
        self.position = position

    def __str__(self) -> str:  # pragma: no cover
        base = super().__str__()
        if self.pointer is not None:
            base += f" | pointer={self.pointer!r}"
        if self.position is not None:
            base += f" | position={self.position}"
        return base
