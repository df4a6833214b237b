# ds2_core/insights.py
from __future__ import annotations
from typing import Dict, List, Optional

from .config import (
    MARKER_HIGH,
    MARKER_MEDIUM,
    GROWTH_HEADROOM_RATE,
    BALANCED_DELTA,
    SUMMARY_DOMINANCE_DELTA,
    DOMINANCE_THRESHOLD,
    SCORE_CAP,
    DQ_BASE,
    DQ_SPAN,
)
from .narrative import (
    INTERPRETATIONS,
    DOMINANCE_NOTES,
    DOMAIN_PROFILES,
    INTEGRATED_LEANING,
    SHORT_NAMES,
    COMPATIBILITY,
)
from .rounding import round_half_up, round_to, signed_delta
from .question_bank import marker_label
from .types import DSS_TYPES, AgeAdjustment, Profile


def to_dq(score: float) -> int:
    return round_half_up(DQ_BASE + (score / SCORE_CAP) * DQ_SPAN)


def _band(score: float) -> str:
    if score >= MARKER_HIGH: return "high"
    if score >= MARKER_MEDIUM: return "medium"
    return "low"


def marker_breakdown(markers: Dict[str, float]) -> List[Dict[str, object]]:
    return [
        {
            "marker": m,
            "label": marker_label(m),
            "score": round_to(s * 10.0, 1),
            "band": _band(s),
        }
        for m, s in markers.items()
    ]


def growth_potential(ami: float, cmi: float) -> Dict[str, object]:
    """Headroom-based growth per dimension; only the weaker side is flagged unless balanced."""
    delta = cmi - ami
    ami_gain = (SCORE_CAP - ami) * GROWTH_HEADROOM_RATE
    cmi_gain = (SCORE_CAP - cmi) * GROWTH_HEADROOM_RATE
    if abs(delta) <= BALANCED_DELTA:
        focus = ["AMI", "CMI"]
    elif delta > 0:
        focus = ["AMI"]
    else:
        focus = ["CMI"]
    return {
        "AMI": {"potential": round_to(ami + ami_gain, 2), "gain": round_to(ami_gain, 1)},
        "CMI": {"potential": round_to(cmi + cmi_gain, 2), "gain": round_to(cmi_gain, 1)},
        "focus": focus,
    }


def dq_range(ami: float, cmi: float, age_adjustment: Optional[AgeAdjustment] = None) -> Dict[str, object]:
    """
    Project both dimension scores onto the DQ scale (85..175) and derive the
    floor/ceiling band, age allowance and the development vector.
    """
    dq_ami, dq_cmi = to_dq(ami), to_dq(cmi)
    lower, upper = min(dq_ami, dq_cmi), max(dq_ami, dq_cmi)
    nominal = round_half_up((dq_ami + dq_cmi) / 2)

    age_boost = 0
    if age_adjustment is not None and (age_adjustment.ami > 0 or age_adjustment.cmi > 0):
        raw_nominal = round_half_up((to_dq(ami - age_adjustment.ami) + to_dq(cmi - age_adjustment.cmi)) / 2)
        age_boost = nominal - raw_nominal

    delta = cmi - ami
    ami_room = SCORE_CAP - ami
    cmi_room = SCORE_CAP - cmi
    if abs(delta) <= BALANCED_DELTA:
        ami_gain = to_dq(ami + ami_room * GROWTH_HEADROOM_RATE) - dq_ami
        cmi_gain = to_dq(cmi + cmi_room * GROWTH_HEADROOM_RATE) - dq_cmi
        potential_gain = round_half_up((ami_gain + cmi_gain) / 2)
    elif delta > 0:
        potential_gain = to_dq(ami + ami_room * GROWTH_HEADROOM_RATE) - dq_ami
    else:
        potential_gain = to_dq(cmi + cmi_room * GROWTH_HEADROOM_RATE) - dq_cmi

    vector: Dict[str, object]
    if abs(delta) >= SUMMARY_DOMINANCE_DELTA:
        develop = "AMI" if delta > 0 else "CMI"
        low, room = (ami, ami_room) if develop == "AMI" else (cmi, cmi_room)
        pot_ami = to_dq(min(SCORE_CAP, ami + ami_room * GROWTH_HEADROOM_RATE))
        pot_cmi = to_dq(min(SCORE_CAP, cmi + cmi_room * GROWTH_HEADROOM_RATE))
        new_nominal = (
            round_half_up((pot_ami + dq_cmi) / 2) if develop == "AMI"
            else round_half_up((dq_ami + pot_cmi) / 2)
        )
        vector = {
            "kind": "development",
            "delta": signed_delta(delta),
            "develop": develop,
            "from": round_to(low, 1),
            "to": round_to(low + room * GROWTH_HEADROOM_RATE, 1),
            "new_nominal": new_nominal,
        }
    else:
        vector = {"kind": "balanced", "delta": signed_delta(delta), "develop": "both"}

    return {
        "floor": lower,
        "nominal": nominal,
        "ceiling": upper,
        "bandwidth": upper - lower,
        "age_boost": age_boost,
        "potential_gain": potential_gain,
        "vector": vector,
    }


def interpretation(ami: float, cmi: float, dss_type: str) -> Dict[str, Optional[str]]:
    out: Dict[str, Optional[str]] = dict(INTERPRETATIONS[dss_type])
    delta = cmi - ami
    note = None
    if abs(delta) >= DOMINANCE_THRESHOLD:
        note = f"Dominance pattern (Delta={signed_delta(delta)}): " + DOMINANCE_NOTES["CMI" if delta > 0 else "AMI"]
    out["dominance_note"] = note
    return out


def domain_fit(ami: float, cmi: float, dss_type: str) -> Dict[str, object]:
    base = DOMAIN_PROFILES[dss_type]
    breakthrough = list(base["breakthrough"])
    high_fit = list(base["high_fit"])
    delta = cmi - ami
    if dss_type == "DSS-III" and abs(delta) >= DOMINANCE_THRESHOLD:
        lean = INTEGRATED_LEANING["CMI" if delta > 0 else "AMI"]
        breakthrough = list(lean["breakthrough"])
        high_fit.insert(0, lean["lead_role"])
    return {
        "breakthrough": breakthrough,
        "high_fit": high_fit,
        "innovation_vector": base["innovation_vector"],
        "innovation_desc": base["innovation_desc"],
        "productivity": dict(base["productivity"]),
        "productivity_desc": base["productivity_desc"],
    }


def compatibility(dss_type: str) -> List[Dict[str, object]]:
    rows = []
    for other, (level, rating, desc) in COMPATIBILITY[dss_type].items():
        is_self = other == dss_type
        rows.append({
            "type": other,
            "name": SHORT_NAMES[other],
            "level": "self" if is_self else level,
            "rating": "You" if is_self else rating,
            "desc": "Your cognitive architecture" if is_self else desc,
        })
    return rows


def build_insights(profile: Profile) -> Dict[str, object]:
    ami, cmi, tag = profile.ami, profile.cmi, profile.dss_type
    return {
        "type_name": DSS_TYPES[tag],
        "markers": {
            "AMI": marker_breakdown(profile.ami_markers),
            "CMI": marker_breakdown(profile.cmi_markers),
        },
        "growth": growth_potential(ami, cmi),
        "dq_range": dq_range(ami, cmi, profile.age_adjustment),
        "interpretation": interpretation(ami, cmi, tag),
        "domain_fit": domain_fit(ami, cmi, tag),
        "compatibility": compatibility(tag),
    }
