# ds2_core/session.py
from __future__ import annotations
from typing import Callable, Dict, List, Mapping, Optional, Sequence
import logging, random, time

from .age import coerce_age
from .config import load_config, make_rng, DEBUG_TRACE, TRACE_FIELDS
from .profile import build_profile
from .sampler import select_session_questions
from .scoring import option_score
from .types import Answer, Profile, Question, Timing


log = logging.getLogger(__name__)


def _emit_trace(**values: object) -> None:
    if not DEBUG_TRACE:
        return
    ordered = []
    for key in TRACE_FIELDS:
        if key in values:
            ordered.append(f"{key}={values[key]}")
    if ordered:
        log.info("trace %s", " ".join(str(val) for val in ordered))


def _now_ms() -> int:
    return int(time.time() * 1000)


class AssessmentSession:
    """
    Owns one questionnaire run: the sampled question set, the cursor, answers
    and per-question timings. Nothing here is shared between sessions.
    """

    def __init__(
        self,
        bank: Mapping[str, Sequence[Question]],
        age: object = None,
        rng: Optional[random.Random] = None,
        clock: Optional[Callable[[], int]] = None,
    ):
        self.cfg = load_config()
        self.rng = rng if rng is not None else make_rng(self.cfg)
        self.clock = clock or _now_ms
        self.age: Optional[int] = coerce_age(age)

        self.questions: List[Question] = select_session_questions(bank, self.rng)
        self._by_id: Dict[int, Question] = {q.id: q for q in self.questions}
        self.index = 0
        self.answers: Dict[int, Answer] = {}
        self.timings: Dict[int, Timing] = {}
        self._current_start: Optional[int] = None
        self._profile: Optional[Profile] = None

        log.info("session started: %d questions, age=%s", len(self.questions), self.age)
        self.present()

    # ---- navigation ----
    @property
    def total(self) -> int:
        return len(self.questions)

    @property
    def is_last(self) -> bool:
        return self.index == self.total - 1

    @property
    def answered_count(self) -> int:
        return len(self.answers)

    @property
    def progress(self) -> float:
        return self.answered_count / self.total if self.total else 0.0

    def current_question(self) -> Question:
        return self.questions[self.index]

    def present(self) -> Question:
        """Show the current question and start its clock."""
        self._current_start = self.clock()
        return self.current_question()

    def can_advance(self) -> bool:
        return self.current_question().id in self.answers

    def next(self) -> Optional[Question]:
        """Advance; returns None when the last question has been passed."""
        if self.is_last:
            return None
        self.index += 1
        return self.present()

    def previous(self) -> Question:
        if self.index > 0:
            self.index -= 1
        return self.present()

    # ---- answering ----
    def select_option(self, question_id: int, option_index: int) -> Answer:
        q = self._by_id.get(int(question_id))
        if q is None:
            raise KeyError(f"question {question_id} is not part of this session")
        score = option_score(q, option_index)

        retimed = False
        duration = None
        # only the presented question is timed; others are answered untimed
        presented = q.id == self.current_question().id
        if presented and self._current_start is not None and q.id not in self.timings:
            end = self.clock()
            duration = end - self._current_start
            self.timings[q.id] = Timing(start=self._current_start, end=end, duration=duration)
        else:
            retimed = q.id in self.timings

        ans = Answer(
            question_id=q.id,
            option_index=int(option_index),
            score=score,
            dimension=q.dimension,
            marker=q.marker,
        )
        self.answers[q.id] = ans
        self._profile = None

        _emit_trace(
            question_id=q.id,
            dimension=q.dimension,
            marker=q.marker,
            option_index=int(option_index),
            score=score,
            duration_ms=duration,
            retimed=retimed,
        )
        return ans

    def finalize(self) -> Profile:
        if self._profile is None:
            self._profile = build_profile(self.questions, self.answers, self.timings, age=self.age)
            log.info(
                "session finalized: %d/%d answered type=%s",
                self.answered_count, self.total, self._profile.dss_type,
            )
        return self._profile
