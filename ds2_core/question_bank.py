from __future__ import annotations
import json, logging, importlib.resources as ir
from pathlib import Path
from typing import Any, Dict, List, Optional
from . import config
from .types import Option, Question
DIMENSIONS = ("AMI","CMI")
MARKER_LABELS: Dict[str, str] = {
    # AMI
    "symbolic_consistency": "Symbolic Consistency",
    "multivariable_manipulation": "Multi-variable Manipulation",
    "first_principles": "First Principles Derivation",
    "boundary_checking": "Boundary Condition Checking",
    "formal_proof_construction": "Formal Proof Construction",
    "algorithmic_decomposition": "Algorithmic Decomposition",
    "error_propagation": "Error Propagation Tracing",
    "symmetry_exploitation": "Symmetry Exploitation",
    "logical_consistency": "Logical Consistency Detection",
    "quantitative_estimation": "Quantitative Estimation",
    # CMI
    "ontology_generation": "Ontology Generation",
    "reference_frame_shift": "Reference Frame Shifting",
    "paradox_tolerance": "Paradox Tolerance",
    "concept_compression": "Concept Compression",
    "analogical_transfer": "Analogical Transfer",
    "emergence_recognition": "Emergence Recognition",
    "abstraction_level_fluidity": "Abstraction Level Fluidity",
    "generative_metaphor": "Generative Metaphor",
    "conceptual_boundary_dissolution": "Conceptual Boundary Dissolution",
    "problem_space_transformation": "Problem Space Transformation",
}
log = logging.getLogger(__name__)


def marker_label(marker: str) -> str:
    return MARKER_LABELS.get(marker, marker)


def _parse_question(raw: Dict[str, Any]) -> Question:
    try:
        qid = int(raw["id"])
        dimension = str(raw["dimension"]).upper()
        marker = str(raw["marker"])
        text = str(raw["text"])
        raw_options = raw["options"]
    except (KeyError, TypeError, ValueError) as e:
        raise ValueError(f"malformed question record: {raw!r}") from e
    if dimension not in DIMENSIONS:
        raise ValueError(f"question {qid}: unknown dimension {dimension!r}")
    if not raw_options:
        raise ValueError(f"question {qid}: no options")
    options = []
    for opt in raw_options:
        score = float(opt["score"])
        if not 0.0 <= score <= 1.0:
            raise ValueError(f"question {qid}: option score {score} outside [0, 1]")
        options.append(Option(text=str(opt["text"]), score=score))
    context = raw.get("context") or None
    return Question(id=qid, dimension=dimension, marker=marker, text=text,
                    options=tuple(options), context=context)


def parse_bank(payload: Any) -> Dict[str, List[Question]]:
    """
    Group question records by marker, keeping file order within a marker.
    Accepts {"questions": [...]} or a bare list of records.
    """
    records = payload.get("questions", []) if isinstance(payload, dict) else payload
    bank: Dict[str, List[Question]] = {}
    seen_ids: set[int] = set()
    marker_dim: Dict[str, str] = {}
    for raw in records or []:
        q = _parse_question(raw)
        if q.id in seen_ids:
            raise ValueError(f"duplicate question id {q.id}")
        seen_ids.add(q.id)
        owner = marker_dim.setdefault(q.marker, q.dimension)
        if owner != q.dimension:
            raise ValueError(f"marker {q.marker!r} appears under both {owner} and {q.dimension}")
        bank.setdefault(q.marker, []).append(q)
    return bank


def load_bank(path: Optional[str | Path] = None) -> Dict[str, List[Question]]:
    override = path or config.QUESTIONS_PATH
    src = Path(override) if override else ir.files(__package__).joinpath("data/questions.json")
    data = json.loads(src.read_text(encoding="utf-8"))
    bank = parse_bank(data)
    log.info("question bank loaded: %d markers from %s", len(bank), src)
    return bank
