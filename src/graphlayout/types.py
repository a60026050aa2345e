"""Shared type definitions for graphlayout.

Enums used to select algorithm variants across the engines, the config layer
and the CLI.
"""

from __future__ import annotations

from enum import Enum


class Algorithm(Enum):
    Spring = "spring"
    Stress = "stress"
    Hierarchical = "hierarchical"

    @classmethod
    def default(cls) -> Algorithm:
        return cls.Spring


class OrderingStrategy(Enum):
    Barycentric = "barycentric"  # Sugiyama sweep heuristic
    Optimal = "optimal"  # integer program

    @classmethod
    def default(cls) -> OrderingStrategy:
        return cls.Optimal


class CoordStrategy(Enum):
    Optimal = "optimal"  # linear program
    Packed = "packed"  # left-to-right at minimum spacing

    @classmethod
    def default(cls) -> CoordStrategy:
        return cls.Optimal


def parse_enum(enum_cls: type[Enum], value: object) -> Enum:
    """Coerce a string (or an existing member) to a member of ``enum_cls``."""
    if isinstance(value, enum_cls):
        return value
    key = str(value).lower()
    for member in enum_cls:
        if member.value == key:
            return member
    choices = ", ".join(m.value for m in enum_cls)
    raise ValueError(f"Unknown {enum_cls.__name__} '{value}'; use one of: {choices}")
