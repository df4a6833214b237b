from __future__ import annotations
import os, json, pathlib, random


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "on"}


def _env_int(name: str, default: int | None) -> int | None:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw.strip())
    except ValueError:
        return default


SCORE_SCALE: float = 10.0
SCORE_CAP: float = 10.0

HIGH_THRESHOLD: float = 5.5
BOUNDARY_MARGIN: float = 0.5
DOMINANCE_THRESHOLD: float = 3.0

# (ami, cmi) prototype points per archetype
PROTOTYPES: dict[str, tuple[float, float]] = {
    "DSS-I": (8.0, 3.0),
    "DSS-II": (3.0, 8.0),
    "DSS-III": (8.0, 8.0),
    "DSS-IV": (3.0, 3.0),
}
GAP_PRESSURE: float = 0.15
PRESSURE_AMI_GATE: float = 4.5
DISTANCE_FLOOR: float = 0.1
DISTANCE_EPS: float = 0.1
PROB_DIGITS: int = 4

LIKELIHOOD_EMPTY: float = 0.5
LIKELIHOOD_W_CONSISTENCY: float = 0.6
LIKELIHOOD_W_STRENGTH: float = 0.4

MIN_ADJUSTED_AGE: int = 12

# [min_age, max_age, adjustment], inclusive, ascending and disjoint.
# AMI is processing-dependent and declines earlier; CMI peaks later and declines slower.
AGE_ADJUSTMENT: dict[str, list[tuple[int, int, float]]] = {
    "AMI": [
        (0, 24, 0.30),
        (25, 44, 0.00),
        (45, 54, 0.40),
        (55, 64, 0.80),
        (65, 100, 1.20),
    ],
    "CMI": [
        (0, 24, 0.15),
        (25, 49, 0.00),
        (50, 59, 0.20),
        (60, 100, 0.40),
    ],
}

LEVEL_STRONG: float = 7.0
LEVEL_MODERATE: float = 4.0
SUMMARY_DOMINANCE_DELTA: float = 2.0

MARKER_HIGH: float = 0.7
MARKER_MEDIUM: float = 0.4
GROWTH_HEADROOM_RATE: float = 0.7
BALANCED_DELTA: float = 1.0
DQ_BASE: int = 85
DQ_SPAN: int = 90

BANK_MIN_VARIANTS_PER_MARKER: int = 1
BANK_EXPECT_LABELS: bool = True

QUESTIONS_PATH: str | None = None
SEED: int | None = None

DEBUG_TRACE: bool = False
TRACE_FIELDS: tuple[str, ...] = (
    "question_id",
    "dimension",
    "marker",
    "option_index",
    "score",
    "duration_ms",
    "retimed",
)
# // env overrides for staging/ops; scoring policy itself is not env-tunable.
DEBUG_TRACE = _env_bool("DEBUG_TRACE", False)
SEED = _env_int("SEED", None)
QUESTIONS_PATH = os.getenv("QUESTIONS_PATH") or None
BANK_MIN_VARIANTS_PER_MARKER = _env_int("BANK_MIN_VARIANTS_PER_MARKER", BANK_MIN_VARIANTS_PER_MARKER)
BANK_EXPECT_LABELS = _env_bool("BANK_EXPECT_LABELS", BANK_EXPECT_LABELS)


def load_config() -> dict:
    cfg = {}
    p = pathlib.Path("config.json")
    if p.exists():
        try: cfg = json.loads(p.read_text(encoding="utf-8"))
        except (OSError, ValueError): cfg = {}
    e = os.environ
    if e.get("QUESTIONS_PATH"): cfg["QUESTIONS_PATH"] = e.get("QUESTIONS_PATH")
    if e.get("SEED"):
        seed = _env_int("SEED", None)
        if seed is not None: cfg["SEED"] = seed
    return cfg


def make_rng(cfg: dict, seed: int | None = None) -> random.Random:
    """Session random source; an explicit seed wins over the configured one."""
    s = seed if seed is not None else cfg.get("SEED")
    if s is None:
        return random.Random()
    return random.Random(int(s))
