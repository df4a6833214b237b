"""Inverse-distance confidence over the four archetype prototypes."""
from __future__ import annotations

import math
from typing import Dict, Mapping

from .config import (
    PROTOTYPES,
    GAP_PRESSURE,
    PRESSURE_AMI_GATE,
    DISTANCE_FLOOR,
    DISTANCE_EPS,
    PROB_DIGITS,
)
from .rounding import round_to


def prototype_distances(ami: float, cmi: float) -> Dict[str, float]:
    return {
        tag: math.hypot(ami - p_ami, cmi - p_cmi)
        for tag, (p_ami, p_cmi) in PROTOTYPES.items()
    }


def apply_gap_pressure(distances: Dict[str, float], ami: float, cmi: float) -> Dict[str, float]:
    """
    Shift prototype distances by the signed CMI-AMI gap.

    The CMI-leaning and AMI-leaning branches are asymmetric
    (1.5x gated on AMI vs. a flat 0.5x pull toward DSS-I).
    """
    out = dict(distances)
    gap = cmi - ami
    pressure = abs(gap) * GAP_PRESSURE

    if gap > 0:
        out["DSS-II"] += pressure * 1.5 if ami > PRESSURE_AMI_GATE else 0.0
        out["DSS-III"] -= pressure
        out["DSS-I"] += pressure * 2
        out["DSS-IV"] += pressure
    elif gap < 0:
        out["DSS-I"] -= pressure * 0.5
        out["DSS-III"] -= pressure
        out["DSS-II"] += pressure * 2
        out["DSS-IV"] += pressure

    return {tag: max(DISTANCE_FLOOR, d) for tag, d in out.items()}


def type_probabilities(ami: float, cmi: float) -> Dict[str, float]:
    """Full-precision probabilities keyed by archetype tag; they sum to 1."""
    distances = apply_gap_pressure(prototype_distances(ami, cmi), ami, cmi)
    weights = {tag: 1.0 / (d + DISTANCE_EPS) for tag, d in distances.items()}
    total = sum(weights.values())
    return {tag: w / total for tag, w in weights.items()}


def round_probabilities(probs: Mapping[str, float], digits: int = PROB_DIGITS) -> Dict[str, float]:
    return {tag: round_to(p, digits) for tag, p in probs.items()}
