# ds2_core/rounding.py
from __future__ import annotations
from decimal import Decimal, ROUND_HALF_UP
import math


def round_half_up(x: float) -> int:
    """Nearest int, .5 goes up (toward +inf)."""
    return int(math.floor(x + 0.5))


def round_to(x: float, digits: int) -> float:
    """
    Round on the shortest decimal form of ``x`` with ties away from zero,
    so 6.25 -> 6.3 and -1.25 -> -1.3 (builtin round() gives 6.2).
    """
    step = Decimal(1).scaleb(-digits)
    return float(Decimal(repr(float(x))).quantize(step, rounding=ROUND_HALF_UP))


def fixed(x: float, digits: int = 1) -> str:
    return f"{round_to(x, digits):.{digits}f}"


def signed_delta(delta: float) -> str:
    return f"+{fixed(delta)}" if delta >= 0 else fixed(delta)
