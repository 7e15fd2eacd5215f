"""Argument checks shared by the engine's public functions."""

import math
from numbers import Integral, Real

from src.engine.errors import InvalidArgument


def require_finite(name: str, value) -> float:
    if isinstance(value, bool) or not isinstance(value, Real):
        raise InvalidArgument(f"{name} must be a number, got {value!r}")
    if not math.isfinite(value):
        raise InvalidArgument(f"{name} must be finite, got {value!r}")
    return float(value)


def require_positive(name: str, value) -> float:
    value = require_finite(name, value)
    if value <= 0:
        raise InvalidArgument(f"{name} must be greater than 0, got {value!r}")
    return value


def require_non_negative(name: str, value) -> float:
    value = require_finite(name, value)
    if value < 0:
        raise InvalidArgument(f"{name} cannot be negative, got {value!r}")
    return value


def require_term(name: str, value) -> int:
    if isinstance(value, bool) or not isinstance(value, Integral):
        raise InvalidArgument(f"{name} must be a whole number of months, got {value!r}")
    if value < 1:
        raise InvalidArgument(f"{name} must be at least 1, got {value!r}")
    return int(value)
