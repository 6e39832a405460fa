"""Shared fixtures for reservoir-lottery tests."""

from __future__ import annotations

from typing import Callable, Iterable, List, Tuple

import pytest


class ScriptedRandom:
    """Returns pre-chosen draws and records every (a, b) range it was asked for."""

    def __init__(self, draws: Iterable[int]) -> None:
        self._draws = list(draws)
        self.calls: List[Tuple[int, int]] = []

    def randint(self, a: int, b: int) -> int:
        value = self._draws.pop(0)
        assert a <= value <= b, f"scripted draw {value} outside [{a}, {b}]"
        self.calls.append((a, b))
        return value

    @property
    def remaining(self) -> int:
        return len(self._draws)


@pytest.fixture
def scripted() -> Callable[..., ScriptedRandom]:
    return lambda *draws: ScriptedRandom(draws)
