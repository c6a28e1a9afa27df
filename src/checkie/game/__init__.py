"""Game management layer — controller, players, state machine.

Quick start::

    from checkie.game import GameController, GameMode

    ctrl = GameController()
    ctrl.new_game(GameMode.PVC)
    ctrl.apply_move("3a-4b")
    if not ctrl.check_win():
        ctrl.swap_turn()
        ctrl.play_computer_turn()
"""

from checkie.game.controller import GameController, GameEvents
from checkie.game.interfaces import GameMode, GamePhase, IGameController, PlayerKind
from checkie.game.player import Player
from checkie.game.state import GameState, MoveRecord, PendingContinuation

__all__ = [
    # Interfaces
    "GameMode",
    "GamePhase",
    "IGameController",
    "PlayerKind",
    # Concrete
    "GameController",
    "GameEvents",
    "GameState",
    "MoveRecord",
    "PendingContinuation",
    "Player",
]
