"""Pure math utilities - no external dependencies."""

from __future__ import annotations
from typing import Tuple

Vec2 = Tuple[float, float]


def clamp(v: float, a: float, b: float) -> float:
    """Clamp value v to range [a, b]."""
    return a if v < a else b if v > b else v


def vec_add(a: Vec2, b: Vec2) -> Vec2:
    return (a[0] + b[0], a[1] + b[1])


def vec_sub(a: Vec2, b: Vec2) -> Vec2:
    return (a[0] - b[0], a[1] - b[1])


def vec_scale(a: Vec2, k: float) -> Vec2:
    return (a[0] * k, a[1] * k)
