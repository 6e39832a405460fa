"""Tests for Position values."""

from __future__ import annotations

import dataclasses

import pytest

from reservoir_lottery import EmptyName, Position, PositionError, ZeroCapacity


def test_position_default() -> None:
    pos = Position()
    assert pos.name == "default_name"
    assert pos.capacity == 1


def test_position_rejects_empty_name() -> None:
    with pytest.raises(EmptyName):
        Position("", 3)


def test_position_rejects_zero_capacity() -> None:
    with pytest.raises(ZeroCapacity):
        Position("gold", 0)


def test_position_errors_are_value_errors() -> None:
    with pytest.raises(ValueError):
        Position("", 1)
    with pytest.raises(PositionError):
        Position("gold", -1)


def test_with_name_and_capacity_return_validated_copies() -> None:
    pos = Position("gold", 2)
    assert pos.with_name("silver") == Position("silver", 2)
    assert pos.with_capacity(5) == Position("gold", 5)
    assert pos == Position("gold", 2)

    with pytest.raises(EmptyName):
        pos.with_name("")
    with pytest.raises(ZeroCapacity):
        pos.with_capacity(0)


def test_position_is_immutable() -> None:
    pos = Position("gold", 2)
    with pytest.raises(dataclasses.FrozenInstanceError):
        pos.capacity = 10  # type: ignore[misc]
