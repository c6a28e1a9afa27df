"""Recoverable errors raised by the rules engine.

Presentation layers catch these, show a message and re-prompt.
"""

from __future__ import annotations


class MoveFormatError(ValueError):
    """Move text could not be applied.

    Raised both for malformed text and for well-formed but illegal moves.
    Catch this to treat the two cases alike; catch a subclass to tell them
    apart.
    """


class MalformedMoveError(MoveFormatError):
    """Move text does not follow the ``"3a-4b"`` format."""


class IllegalMoveError(MoveFormatError):
    """Move text is well formed but the move breaks the rules."""


class SelectionRangeError(IndexError):
    """Continuation option number outside the list of candidates."""
