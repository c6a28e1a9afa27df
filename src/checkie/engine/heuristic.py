"""Greedy one-ply opponent: take a capture if there is one, else step."""

from __future__ import annotations

import logging
import random
from typing import TYPE_CHECKING

from checkie.core.enums import Side
from checkie.core.move import Move
from checkie.core.move_generator import MoveGenerator
from checkie.engine.search import IOpponent

if TYPE_CHECKING:
    from checkie.core.position import Position

_LOGGER = logging.getLogger(__name__)


class HeuristicOpponent(IOpponent):
    """Computer side with a single look-ahead rule.

    1. The first of its pieces (row-major scan) that can jump plays its
       first jump landing.
    2. Otherwise a movable piece is picked uniformly at random and steps
       forward-right, or forward-left when forward-right is blocked.

    Args:
        side: Side the opponent plays.
        rng: Random source for the fallback pick.  Pass a seeded
            ``random.Random`` for reproducible games.
    """

    __slots__ = ("_side", "_rng")

    def __init__(self, side: Side, rng: random.Random | None = None) -> None:
        self._side = side
        self._rng = rng if rng is not None else random.Random()

    @property
    def side(self) -> Side:
        return self._side

    def choose_move(self, position: Position) -> Move | None:
        gen = MoveGenerator(position.board)
        movable = gen.movable_pieces(self._side)
        if not movable:
            _LOGGER.debug("Side %s has no movable piece", self._side)
            return None

        for piece in movable:
            landings = gen.jump_landings(self._side, piece)
            if landings:
                return Move(piece, landings[0])

        piece = self._rng.choice(movable)
        # A movable piece without jumps always has a step.
        return Move(piece, gen.step_targets(self._side, piece)[0])

    def take_turn(self, position: Position) -> str | None:
        """Move text for the chosen move, or ``None`` if nothing can move."""
        move = self.choose_move(position)
        if move is None:
            return None
        _LOGGER.debug("Heuristic %s plays %s", self._side, move)
        return move.text
