"""Tests for the Unit marker type."""

from dataclasses import FrozenInstanceError

import pytest

from fallible import UNIT, Unit, failure, success


def test_all_units_equal():
    assert Unit() == Unit()
    assert Unit() == UNIT


def test_all_units_hash_identically():
    assert hash(Unit()) == hash(Unit()) == hash(UNIT)
    assert len({Unit(), Unit(), UNIT}) == 1


def test_unit_not_equal_to_none():
    assert Unit() != None  # noqa: E711


def test_unit_formatting():
    assert repr(UNIT) == "Unit()"
    assert str(UNIT) == "Unit()"
    assert str(success(UNIT)) == "Success(Unit())"


def test_unit_is_frozen():
    with pytest.raises(FrozenInstanceError):
        UNIT.anything = 1  # type: ignore[attr-defined]


def test_unit_as_success_payload():
    result = success(Unit())
    assert result.contains(UNIT)
    assert result == success(UNIT)
    assert hash(result) == hash(success(Unit()))
    assert failure("e").unwrap_or(UNIT) == Unit()
