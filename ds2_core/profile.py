from __future__ import annotations
from typing import Iterable, Mapping, Optional
import logging

from .age import age_adjustment
from .classifier import classify
from .config import LEVEL_STRONG, LEVEL_MODERATE, SUMMARY_DOMINANCE_DELTA
from .probability import type_probabilities, round_probabilities
from .rounding import fixed, round_half_up, round_to, signed_delta
from .scoring import aggregate, adjusted_score, likelihood
from .types import DSS_TYPES, AgeAdjustment, Answer, Profile, Question, Timing

log = logging.getLogger(__name__)


def _level(score: float) -> str:
    if score >= LEVEL_STRONG: return "strong"
    if score >= LEVEL_MODERATE: return "moderate"
    return "developing"


def summary_text(ami: float, cmi: float, dss_type: str) -> str:
    delta = cmi - ami
    if abs(delta) >= SUMMARY_DOMINANCE_DELTA:
        dominance = "CMI-dominant" if delta > 0 else "AMI-dominant"
    else:
        dominance = "balanced"
    return (
        f"{DSS_TYPES[dss_type]} architecture. "
        f"{_level(ami)} AMI ({fixed(ami)}), {_level(cmi)} CMI ({fixed(cmi)}). "
        f"Delta={signed_delta(delta)} ({dominance})."
    )


def timing_totals(timings: Mapping[int, Timing]) -> tuple[int, int]:
    total = sum(int(t.duration) for t in timings.values())
    avg = total / len(timings) if timings else 0.0
    return total, round_half_up(avg)


def build_profile(
    questions: Iterable[Question],
    answers: Mapping[int, Answer],
    timings: Mapping[int, Timing],
    age: Optional[int] = None,
) -> Profile:
    """
    Assemble the immutable Profile for a finished session.

    Classification and probabilities run on full-precision adjusted scores;
    rounding is applied to the stored output values only.
    """
    agg = aggregate(answers, questions)

    ami_adj = age_adjustment(age, "AMI")
    cmi_adj = age_adjustment(age, "CMI")
    ami = adjusted_score(agg.ami_raw, ami_adj)
    cmi = adjusted_score(agg.cmi_raw, cmi_adj)

    dss_type = classify(ami, cmi)
    probs = type_probabilities(ami, cmi)
    total_ms, avg_ms = timing_totals(timings)

    age_block: Optional[AgeAdjustment] = None
    if age:
        age_block = AgeAdjustment(age=int(age), ami=round_to(ami_adj, 2), cmi=round_to(cmi_adj, 2))

    log.info(
        "profile ami=%.2f cmi=%.2f raw=(%.2f, %.2f) type=%s markers=(%d, %d)",
        ami, cmi, agg.ami_raw, agg.cmi_raw, dss_type,
        len(agg.ami_markers), len(agg.cmi_markers),
    )

    return Profile(
        ami=round_to(ami, 2),
        cmi=round_to(cmi, 2),
        ami_raw=round_to(agg.ami_raw, 2),
        cmi_raw=round_to(agg.cmi_raw, 2),
        age_adjustment=age_block,
        dss_type=dss_type,
        summary=summary_text(ami, cmi, dss_type),
        ami_likelihood=likelihood(list(agg.ami_markers.values())),
        cmi_likelihood=likelihood(list(agg.cmi_markers.values())),
        type_probabilities=round_probabilities(probs),
        total_ms=total_ms,
        avg_per_question_ms=avg_ms,
        timings=dict(timings),
        ami_markers=dict(agg.ami_markers),
        cmi_markers=dict(agg.cmi_markers),
    )
