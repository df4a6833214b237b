from __future__ import annotations
from .config import HIGH_THRESHOLD, BOUNDARY_MARGIN, DOMINANCE_THRESHOLD
from .types import DssType


def classify(ami: float, cmi: float) -> DssType:
    """
    Map adjusted (AMI, CMI) scores onto one archetype.

    The rules are an ordered decision table; the first match wins. A large
    gap normally yields the dominant single-trait type, but is escalated to
    DSS-III when the weaker dimension is still within the boundary band.
    """
    ami_high = ami >= HIGH_THRESHOLD
    cmi_high = cmi >= HIGH_THRESHOLD
    ami_boundary = abs(ami - HIGH_THRESHOLD) <= BOUNDARY_MARGIN
    cmi_boundary = abs(cmi - HIGH_THRESHOLD) <= BOUNDARY_MARGIN
    near_high = HIGH_THRESHOLD - BOUNDARY_MARGIN
    gap = abs(ami - cmi)

    if ami_high and cmi_high:
        return "DSS-III"
    if not ami_high and not cmi_high and not ami_boundary and not cmi_boundary:
        return "DSS-IV"

    # dominance override
    if gap >= DOMINANCE_THRESHOLD:
        if cmi > ami:
            return "DSS-III" if cmi_high and ami >= near_high else "DSS-II"
        return "DSS-III" if ami_high and cmi >= near_high else "DSS-I"

    if ami_high and not cmi_high:
        return "DSS-I"
    if cmi_high and not ami_high:
        return "DSS-II"

    if ami_boundary and cmi_high:
        return "DSS-III"
    if cmi_boundary and ami_high:
        return "DSS-III"
    return "DSS-IV"
