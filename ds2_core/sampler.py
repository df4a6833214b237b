from __future__ import annotations
import logging
import random
from typing import Dict, List, Mapping, Optional, Sequence

from .question_bank import DIMENSIONS
from .types import Question

log = logging.getLogger(__name__)


def _order_key(q: Question) -> tuple[int, int]:
    return DIMENSIONS.index(q.dimension), q.id


def select_session_questions(
    bank: Mapping[str, Sequence[Question]],
    rng: Optional[random.Random] = None,
) -> List[Question]:
    """
    Draw one variant per marker, then order AMI before CMI and by id within a group.

    The random source is injected so tests can seed it; any object with a
    ``choice`` method works.
    """
    if not bank:
        raise ValueError("question bank is empty; cannot start a session")
    source = rng if rng is not None else random.Random()
    selected: List[Question] = []
    for marker, variants in bank.items():
        if not variants:
            raise ValueError(f"marker {marker!r} has no question variants")
        selected.append(source.choice(list(variants)))
    selected.sort(key=_order_key)
    log.debug("session questions selected: %d", len(selected))
    return selected


def variant_counts(bank: Mapping[str, Sequence[Question]]) -> Dict[str, int]:
    return {marker: len(variants) for marker, variants in bank.items()}
