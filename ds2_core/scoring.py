from __future__ import annotations
from typing import Dict, Iterable, Mapping, Sequence
import math

from .config import (
    SCORE_SCALE,
    SCORE_CAP,
    LIKELIHOOD_EMPTY,
    LIKELIHOOD_W_CONSISTENCY,
    LIKELIHOOD_W_STRENGTH,
)
from .rounding import round_to
from .types import Aggregate, Answer, Question


def _mean(values: Sequence[float]) -> float:
    return sum(values) / len(values) if values else 0.0


def option_score(question: Question, option_index: int) -> float:
    idx = int(option_index)
    if idx < 0 or idx >= len(question.options):
        raise IndexError(f"question {question.id}: option index {idx} out of range")
    return float(question.options[idx].score)


def aggregate(answers: Mapping[int, Answer], questions: Iterable[Question]) -> Aggregate:
    """
    Bucket answered scores by marker per dimension and average them onto 0..10.
    A dimension with no answered markers scores 0.
    """
    buckets: Dict[str, Dict[str, float]] = {"AMI": {}, "CMI": {}}
    for q in questions:
        ans = answers.get(q.id)
        if ans is None:
            continue
        buckets[q.dimension][q.marker] = float(ans.score)

    ami_markers, cmi_markers = buckets["AMI"], buckets["CMI"]
    return Aggregate(
        ami_raw=_mean(list(ami_markers.values())) * SCORE_SCALE,
        cmi_raw=_mean(list(cmi_markers.values())) * SCORE_SCALE,
        ami_markers=ami_markers,
        cmi_markers=cmi_markers,
    )


def adjusted_score(raw: float, adjustment: float) -> float:
    return min(SCORE_CAP, raw + adjustment)


def likelihood(scores: Sequence[float]) -> float:
    """
    Consistency-weighted strength of a dimension's marker scores.

    Rewards a high mean and penalises spread (population std-dev), so a
    uniformly strong dimension scores above an erratic one with the same mean.
    Empty input is the neutral 0.5.
    """
    vals = [float(s) for s in scores]
    if not vals:
        return LIKELIHOOD_EMPTY
    mean = _mean(vals)
    variance = sum((v - mean) ** 2 for v in vals) / len(vals)
    std_dev = math.sqrt(variance)

    consistency = max(0.0, 1.0 - std_dev * 2.0)
    strength = mean
    return round_to(consistency * LIKELIHOOD_W_CONSISTENCY + strength * LIKELIHOOD_W_STRENGTH, 4)
