"""Move value object."""

from __future__ import annotations

from dataclasses import dataclass

from checkie.core.types import Square, square_name


@dataclass(frozen=True, slots=True)
class Move:
    """Immutable (source, destination) pair."""

    from_sq: Square
    to_sq: Square

    @property
    def row_delta(self) -> int:
        return self.to_sq[0] - self.from_sq[0]

    @property
    def col_delta(self) -> int:
        return self.to_sq[1] - self.from_sq[1]

    @property
    def is_jump(self) -> bool:
        """A capture travels more than one row."""
        return abs(self.row_delta) > 1

    # ── Display ──────────────────────────────────────────────────────────

    def __str__(self) -> str:
        return f"{square_name(self.from_sq)}-{square_name(self.to_sq)}"

    @property
    def text(self) -> str:
        """Move text as typed by a player, e.g. ``'3a-4b'``."""
        return str(self)
