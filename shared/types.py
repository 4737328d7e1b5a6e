"""Shared type definitions for the tilting glass project."""
from typing import NamedTuple

Point = tuple[float, float]
Polygon = list[Point]

class Finite(NamedTuple):
    value: float

class Unbounded:
    """Volume with no finite measurement (sealed glass lying on its side).

    A single truthy instance, UNBOUNDED, equal only to itself.
    """
    __slots__ = ()
    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self):
        return "UNBOUNDED"

UNBOUNDED = Unbounded()

Volume = Finite | Unbounded
