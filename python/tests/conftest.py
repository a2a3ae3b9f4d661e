"""Shared test helpers."""

from __future__ import annotations

import pytest


class ScriptedRandom:
    """Stand-in for ``random.Random`` whose ``shuffle`` replays fixed orders."""

    def __init__(self, *orders: list[int]) -> None:
        self._orders = [list(o) for o in orders]
        self.calls = 0

    def shuffle(self, seq: list[int]) -> None:
        order = self._orders[min(self.calls, len(self._orders) - 1)]
        assert sorted(order) == sorted(seq), f"scripted order {order} != {seq}"
        seq[:] = order
        self.calls += 1


@pytest.fixture
def scripted_random() -> type[ScriptedRandom]:
    return ScriptedRandom
