from __future__ import annotations

import math

import pytest

from ds2_core.probability import (
    apply_gap_pressure,
    prototype_distances,
    round_probabilities,
    type_probabilities,
)
from ds2_core.rounding import round_to

TYPES = {"DSS-I", "DSS-II", "DSS-III", "DSS-IV"}


def test_probabilities_form_a_distribution_over_the_plane():
    grid = [x / 4 for x in range(0, 41)]
    for ami in grid:
        for cmi in grid:
            probs = type_probabilities(ami, cmi)
            assert set(probs) == TYPES
            assert abs(sum(probs.values()) - 1.0) < 1e-6
            assert all(0.0 < p <= 1.0 and math.isfinite(p) for p in probs.values())


@pytest.mark.parametrize(
    "ami,cmi,expected",
    [(8, 3, "DSS-I"), (3, 8, "DSS-II"), (8, 8, "DSS-III"), (3, 3, "DSS-IV")],
)
def test_prototype_points_favour_their_own_type(ami, cmi, expected):
    probs = type_probabilities(ami, cmi)
    assert max(probs, key=probs.get) == expected


def test_distances_are_euclidean():
    d = prototype_distances(5, 7)
    assert d["DSS-I"] == pytest.approx(math.hypot(3, 4))
    assert d["DSS-II"] == pytest.approx(math.hypot(2, 1))
    assert d["DSS-III"] == pytest.approx(math.hypot(3, 1))
    assert d["DSS-IV"] == pytest.approx(math.hypot(2, 4))


def test_cmi_leaning_pressure_without_ami_gate():
    base = {t: 5.0 for t in TYPES}
    out = apply_gap_pressure(base, ami=4.0, cmi=6.0)  # pressure 0.3
    assert out["DSS-I"] == pytest.approx(5.6)
    assert out["DSS-II"] == pytest.approx(5.0)
    assert out["DSS-III"] == pytest.approx(4.7)
    assert out["DSS-IV"] == pytest.approx(5.3)


def test_cmi_leaning_pressure_with_ami_gate():
    base = {t: 5.0 for t in TYPES}
    out = apply_gap_pressure(base, ami=5.0, cmi=7.0)
    assert out["DSS-II"] == pytest.approx(5.45)


def test_ami_leaning_pressure_is_asymmetric():
    base = {t: 5.0 for t in TYPES}
    out = apply_gap_pressure(base, ami=6.0, cmi=4.0)
    assert out["DSS-I"] == pytest.approx(4.85)
    assert out["DSS-II"] == pytest.approx(5.6)
    assert out["DSS-III"] == pytest.approx(4.7)
    assert out["DSS-IV"] == pytest.approx(5.3)

    assert type_probabilities(5, 8)["DSS-II"] < type_probabilities(8, 5)["DSS-I"]


def test_no_gap_leaves_distances_and_floor_applies():
    base = {t: 0.0 for t in TYPES}
    out = apply_gap_pressure(base, ami=5.0, cmi=5.0)
    assert all(d == pytest.approx(0.1) for d in out.values())
    assert apply_gap_pressure({t: 2.0 for t in TYPES}, 5.0, 5.0) == {t: 2.0 for t in TYPES}


def test_rounding_is_presentation_only():
    probs = type_probabilities(6.37, 4.21)
    rounded = round_probabilities(probs)
    for tag, p in probs.items():
        assert rounded[tag] == round_to(p, 4)
    assert abs(sum(rounded.values()) - 1.0) < 5e-4


def test_rounding_breaks_decimal_ties_upward():
    assert round_probabilities({"DSS-I": 0.00015})["DSS-I"] == 0.0002
    assert round_probabilities({"DSS-I": 0.12345})["DSS-I"] == 0.1235
