"""Unit marker type for fallible operations that succeed without a payload."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Unit:
    """
    Success payload carrying no information.

    Use as ``T`` in ``Result[Unit, E]`` when only the success/failure outcome
    matters. Every instance equals every other and they all share one hash.
    """


UNIT = Unit()


__all__ = ["UNIT", "Unit"]
