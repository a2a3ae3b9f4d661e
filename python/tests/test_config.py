from __future__ import annotations

import pytest

from npuzzle.config import DIFFICULTIES, PuzzleConfig
from npuzzle.errors import InvalidGridSizeError


def test_defaults_are_valid() -> None:
    config = PuzzleConfig()
    config.validate()
    assert config.size == 3
    assert config.tick_interval == 1.0
    assert config.allow_solved is False


@pytest.mark.parametrize("name", list(DIFFICULTIES))
def test_from_difficulty(name: str) -> None:
    assert PuzzleConfig.from_difficulty(name).size == DIFFICULTIES[name]


def test_from_difficulty_is_case_insensitive_and_takes_overrides() -> None:
    config = PuzzleConfig.from_difficulty("HARD", tick_interval=0.5)
    assert config.size == 5
    assert config.tick_interval == 0.5


def test_unknown_difficulty() -> None:
    with pytest.raises(ValueError, match="Unknown difficulty"):
        PuzzleConfig.from_difficulty("impossible")


def test_validate_rejects_bad_values() -> None:
    with pytest.raises(InvalidGridSizeError):
        PuzzleConfig(size=1).validate()
    with pytest.raises(InvalidGridSizeError):
        PuzzleConfig(size=9).validate()
    with pytest.raises(ValueError):
        PuzzleConfig(tick_interval=0).validate()
