"""Tests for Player and GameMode."""

import pytest

from checkie.core.enums import Side
from checkie.game.interfaces import GameMode, PlayerKind
from checkie.game.player import Player


class TestPlayer:
    def test_human_defaults(self) -> None:
        p = Player.human(Side.X)
        assert p.is_human
        assert p.icon == "x"
        assert p.display_name == "Player x"

    def test_heuristic(self) -> None:
        p = Player.heuristic(Side.O)
        assert not p.is_human
        assert p.kind == PlayerKind.HEURISTIC
        assert p.display_name == "Computer"

    def test_named(self) -> None:
        assert Player(Side.O, name="Ada").display_name == "Ada"

    def test_frozen(self) -> None:
        p = Player.human(Side.X)
        with pytest.raises(AttributeError):
            p.side = Side.O  # type: ignore[misc]


class TestGameMode:
    @pytest.mark.parametrize(
        ("tag", "mode"),
        [("PvP", GameMode.PVP), ("PvC", GameMode.PVC)],
    )
    def test_from_tag(self, tag: str, mode: GameMode) -> None:
        assert GameMode.from_tag(tag) is mode

    @pytest.mark.parametrize("tag", ["CvC", "pvc", "PVP", "", " PvP"])
    def test_unknown_tag(self, tag: str) -> None:
        with pytest.raises(ValueError):
            GameMode.from_tag(tag)

    def test_player_kinds(self) -> None:
        assert GameMode.PVP.player_kinds() == {
            Side.X: PlayerKind.HUMAN,
            Side.O: PlayerKind.HUMAN,
        }
        assert GameMode.PVC.player_kinds()[Side.O] == PlayerKind.HEURISTIC
        assert GameMode.PVC.player_kinds()[Side.X] == PlayerKind.HUMAN
