"""
Utility functions

Numeric guards used by the layout engine.
"""

from __future__ import annotations
from typing import Union
import math
import logging

logger = logging.getLogger(__name__)

Number = Union[int, float]


def is_finite(value: Number) -> bool:
    """True for real, finite numbers"""
    try:
        return math.isfinite(value)
    except TypeError:
        return False


def clamp_dimension(value: Number, minimum: float, name: str = 'dimension') -> float:
    """
    Clamp a viewport dimension to a usable value

    Non-finite or too-small values are replaced by `minimum` so scale
    computation never divides by zero.

    Args:
        value: Dimension supplied by the caller
        minimum: Smallest accepted value
        name: Label used in the log message

    Returns:
        float >= minimum
    """
    if not is_finite(value) or value < minimum:
        logger.warning(f"Invalid {name} {value!r}, clamping to {minimum}")
        return float(minimum)
    return float(value)


def clamp_margin(value: Number) -> float:
    """Margins must be finite and non-negative"""
    if not is_finite(value) or value < 0:
        logger.warning(f"Invalid margin {value!r}, using 0")
        return 0.0
    return float(value)


def sign(value: Number) -> int:
    """-1, 0 or 1"""
    if value > 0:
        return 1
    if value < 0:
        return -1
    return 0
