# ds2_core/age.py
from __future__ import annotations
from typing import Optional
from .config import AGE_ADJUSTMENT, MIN_ADJUSTED_AGE


def coerce_age(age: object) -> Optional[int]:
    """Invalid or missing age means no adjustment, never an error."""
    if age is None or isinstance(age, bool):
        return None
    if isinstance(age, int):
        return age
    try:
        return int(float(str(age).strip()))
    except (TypeError, ValueError, OverflowError):
        return None


def age_adjustment(age: Optional[int], dimension: str) -> float:
    if age is None or age < MIN_ADJUSTED_AGE:
        return 0.0
    ranges = AGE_ADJUSTMENT.get(dimension)
    if not ranges:
        return 0.0
    for min_age, max_age, adjustment in ranges:
        if min_age <= age <= max_age:
            return float(adjustment)
    return 0.0
