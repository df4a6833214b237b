from __future__ import annotations

import random

import pytest

from ds2_core.question_bank import DIMENSIONS
from ds2_core.types import Option, Question


def build_synthetic_bank(
    *,
    markers_per_dimension: int = 3,
    variants: int = 2,
    dimensions: tuple[str, ...] = DIMENSIONS,
) -> dict[str, list[Question]]:
    """Create a deterministic synthetic bank keyed by marker."""

    bank: dict[str, list[Question]] = {}
    next_id = 100
    for dim in dimensions:
        for m in range(markers_per_dimension):
            marker = f"{dim.lower()}_marker_{m}"
            for v in range(variants):
                # ids out of marker order so the sampler sort is exercised
                qid = next_id + (variants - v) * 50 + m
                bank.setdefault(marker, []).append(
                    Question(
                        id=qid,
                        dimension=dim,
                        marker=marker,
                        text=f"{marker} variant {v}",
                        options=(
                            Option("none", 0.0),
                            Option("some", 0.5),
                            Option("full", 1.0),
                        ),
                    )
                )
        next_id += 1000
    return bank


class FakeClock:
    """Millisecond clock advanced explicitly by tests."""

    def __init__(self, start: int = 1_000) -> None:
        self.now = start

    def __call__(self) -> int:
        return self.now

    def advance(self, ms: int) -> None:
        self.now += ms


@pytest.fixture
def synthetic_bank() -> dict[str, list[Question]]:
    return build_synthetic_bank()


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def rng() -> random.Random:
    return random.Random(7)
