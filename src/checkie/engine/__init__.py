"""Computer opponents."""

from checkie.engine.heuristic import HeuristicOpponent
from checkie.engine.search import IOpponent

__all__ = [
    "HeuristicOpponent",
    "IOpponent",
]
