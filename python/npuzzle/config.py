"""Game configuration and difficulty presets."""

from __future__ import annotations

from dataclasses import dataclass

from npuzzle.models.board import check_size

DIFFICULTIES: dict[str, int] = {
    "easy": 3,
    "medium": 4,
    "hard": 5,
}


@dataclass
class PuzzleConfig:
    """Settings a ``GameController`` starts new games with.

    ``allow_solved`` lets the shuffler hand out the goal arrangement
    itself; by default it is redrawn.
    """

    size: int = 3
    tick_interval: float = 1.0
    allow_solved: bool = False

    @classmethod
    def from_difficulty(cls, name: str, **overrides) -> PuzzleConfig:
        try:
            size = DIFFICULTIES[name.lower()]
        except KeyError:
            raise ValueError(
                f"Unknown difficulty {name!r} "
                f"(choose from {', '.join(DIFFICULTIES)})."
            ) from None
        config = cls(size=size, **overrides)
        config.validate()
        return config

    def validate(self) -> None:
        check_size(self.size)
        if self.tick_interval <= 0:
            raise ValueError(
                f"Tick interval must be positive, got {self.tick_interval}."
            )
