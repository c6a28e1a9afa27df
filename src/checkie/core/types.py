"""Square type alias and coordinate helpers.

Board layout (row, col), as printed for the players::

    row 0 = rank 8   (a8 ... h8)
    ...
    row 7 = rank 1   (a1 ... h1)

Square names put the rank digit first, e.g. ``"3a"`` is ``(5, 0)``.
"""

from __future__ import annotations

from typing import TypeAlias

Square: TypeAlias = tuple[int, int]  # (row, col), both 0–7

BOARD_SIZE = 8
FILES = "abcdefgh"
RANKS = "12345678"


def is_valid_square(sq: Square) -> bool:
    """Whether both coordinates lie in ``[0, 8)``."""
    row, col = sq
    return 0 <= row < BOARD_SIZE and 0 <= col < BOARD_SIZE


def square_name(sq: Square) -> str:
    """Human-readable name, e.g. ``(5, 0)`` → ``'3a'``."""
    if not is_valid_square(sq):
        raise ValueError(f"Square off board: {sq!r}")
    row, col = sq
    return f"{BOARD_SIZE - row}{FILES[col]}"


def parse_square(name: str) -> Square:
    """Parse a square name, e.g. ``'4b'`` → ``(4, 1)``."""
    if len(name) != 2 or name[0] not in RANKS or name[1] not in FILES:
        raise ValueError(f"Invalid square name: {name!r}")
    return (BOARD_SIZE - int(name[0]), FILES.index(name[1]))


# ── Named square constants ──────────────────────────────────────────────────

A8, B8, C8, D8, E8, F8, G8, H8 = ((0, c) for c in range(8))
A7, B7, C7, D7, E7, F7, G7, H7 = ((1, c) for c in range(8))
A6, B6, C6, D6, E6, F6, G6, H6 = ((2, c) for c in range(8))
A5, B5, C5, D5, E5, F5, G5, H5 = ((3, c) for c in range(8))
A4, B4, C4, D4, E4, F4, G4, H4 = ((4, c) for c in range(8))
A3, B3, C3, D3, E3, F3, G3, H3 = ((5, c) for c in range(8))
A2, B2, C2, D2, E2, F2, G2, H2 = ((6, c) for c in range(8))
A1, B1, C1, D1, E1, F1, G1, H1 = ((7, c) for c in range(8))
