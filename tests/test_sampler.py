from __future__ import annotations

import random
from collections import Counter

import pytest

from ds2_core.question_bank import DIMENSIONS
from ds2_core.sampler import select_session_questions

from tests.conftest import build_synthetic_bank


def test_one_question_per_marker(synthetic_bank):
    picked = select_session_questions(synthetic_bank, random.Random(1))
    assert len(picked) == len(synthetic_bank)
    counts = Counter(q.marker for q in picked)
    assert set(counts) == set(synthetic_bank)
    assert all(n == 1 for n in counts.values())
    for q in picked:
        assert q in synthetic_bank[q.marker]


def test_grouped_by_dimension_then_sorted_by_id(synthetic_bank):
    for seed in range(5):
        picked = select_session_questions(synthetic_bank, random.Random(seed))
        dims = [DIMENSIONS.index(q.dimension) for q in picked]
        assert dims == sorted(dims), "AMI questions must precede CMI questions"
        for dim in DIMENSIONS:
            ids = [q.id for q in picked if q.dimension == dim]
            assert ids == sorted(ids)


def test_seeded_source_is_reproducible(synthetic_bank):
    first = select_session_questions(synthetic_bank, random.Random(42))
    second = select_session_questions(synthetic_bank, random.Random(42))
    assert [q.id for q in first] == [q.id for q in second]


def test_injected_source_controls_variant_choice(synthetic_bank):
    class FirstVariant:
        def choice(self, seq):
            return seq[0]

    class LastVariant:
        def choice(self, seq):
            return seq[-1]

    firsts = select_session_questions(synthetic_bank, FirstVariant())
    lasts = select_session_questions(synthetic_bank, LastVariant())
    assert {q.text.endswith("variant 0") for q in firsts} == {True}
    assert {q.text.endswith("variant 1") for q in lasts} == {True}


def test_single_variant_markers_are_always_selected():
    bank = build_synthetic_bank(markers_per_dimension=2, variants=1)
    picked = select_session_questions(bank, random.Random(3))
    assert sorted(q.id for q in picked) == sorted(v[0].id for v in bank.values())


def test_empty_bank_is_rejected():
    with pytest.raises(ValueError):
        select_session_questions({}, random.Random(0))


def test_marker_without_variants_is_rejected(synthetic_bank):
    synthetic_bank["ami_marker_0"] = []
    with pytest.raises(ValueError):
        select_session_questions(synthetic_bank, random.Random(0))
