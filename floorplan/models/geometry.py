"""Geometric primitives used throughout the builder."""

from __future__ import annotations
from pydantic import BaseModel


class Point2D(BaseModel):
    """Point on the floor plane (X-Z, Y-up convention)."""
    x: float
    z: float


class Point3D(BaseModel):
    """Point in 3D space."""
    x: float
    y: float
    z: float


class Vector3D(BaseModel):
    """Per-axis extents (local scale) of a placed element."""
    x: float = 1.0
    y: float = 1.0
    z: float = 1.0


def lerp(a: float, b: float, t: float) -> float:
    return a + (b - a) * t


def inverse_lerp(a: float, b: float, value: float) -> float:
    """Normalized position of `value` between a and b, clamped to [0, 1]."""
    if a == b:
        return 0.0
    t = (value - a) / (b - a)
    return max(0.0, min(1.0, t))


def snap(value: float, step: float) -> float:
    """Round to the nearest multiple of `step`."""
    if step <= 0:
        return value
    return round(value / step) * step
