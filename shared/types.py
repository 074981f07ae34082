"""Shared type definitions for the fillet project."""
from dataclasses import dataclass
from enum import Enum
from typing import NamedTuple

Point = tuple[float, float]

@dataclass
class Line:
    origin: Point; end: Point

@dataclass
class Arc:
    """Circular arc running CCW from start_angle to end_angle (degrees)."""
    center: Point; radius: float
    start_angle: float; end_angle: float

class Circle(NamedTuple):
    center: Point; radius: float

class EndpointSelector(Enum):
    START = 0
    END = 1

Path = Line | Arc
