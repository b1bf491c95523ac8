# tests/unit/test_level.py

import dataclasses

import pytest

from combat_core.components import Level


def test_of_holds_value() -> None:
    assert Level.of(1).value == 1
    assert Level.of(1) == Level(value=1)


@pytest.mark.parametrize("value", [0, -3])
def test_rejects_non_positive(value: int) -> None:
    with pytest.raises(ValueError):
        Level.of(value)


def test_rejects_non_int() -> None:
    with pytest.raises(TypeError):
        Level.of(2.0)  # type: ignore[arg-type]


def test_level_is_immutable() -> None:
    level = Level.of(3)
    with pytest.raises(dataclasses.FrozenInstanceError):
        level.value = 4  # type: ignore[misc]


def test_rejects_bool() -> None:
    with pytest.raises(TypeError):
        Level.of(True)
