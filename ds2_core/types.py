from __future__ import annotations
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Literal, Tuple
Dimension = Literal["AMI","CMI"]
DssType = Literal["DSS-I","DSS-II","DSS-III","DSS-IV"]
DSS_TYPES: Dict[str, str] = {
    "DSS-I": "Systematic Analytical",
    "DSS-II": "Creative Conceptual",
    "DSS-III": "Integrated Polymathic",
    "DSS-IV": "Developing Foundational",
}
@dataclass(frozen=True)
class Option:
    text: str; score: float
@dataclass(frozen=True)
class Question:
    id: int; dimension: Dimension; marker: str; text: str
    options: Tuple[Option, ...] = ()
    context: Optional[str] = None
@dataclass
class Answer:
    question_id: int; option_index: int; score: float
    dimension: Dimension; marker: str
@dataclass(frozen=True)
class Timing:
    start: int; end: int; duration: int
    def to_dict(self) -> Dict[str, int]:
        return {"start": self.start, "end": self.end, "duration": self.duration}
@dataclass(frozen=True)
class AgeAdjustment:
    age: int; ami: float; cmi: float
@dataclass
class Aggregate:
    ami_raw: float
    cmi_raw: float
    ami_markers: Dict[str, float] = field(default_factory=dict)
    cmi_markers: Dict[str, float] = field(default_factory=dict)


@dataclass(frozen=True)
class Profile:
    """Terminal result of a completed session; all values are output-rounded."""

    ami: float
    cmi: float
    ami_raw: float
    cmi_raw: float
    age_adjustment: Optional[AgeAdjustment]
    dss_type: DssType
    summary: str
    ami_likelihood: float
    cmi_likelihood: float
    type_probabilities: Dict[str, float]
    total_ms: int
    avg_per_question_ms: int
    timings: Dict[int, Timing] = field(default_factory=dict)
    ami_markers: Dict[str, float] = field(default_factory=dict)
    cmi_markers: Dict[str, float] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, object]:
        """JSON-friendly representation consumed by the API and CLI."""

        age_block: Optional[Dict[str, object]] = None
        if self.age_adjustment is not None:
            age_block = {
                "age": self.age_adjustment.age,
                "AMI": self.age_adjustment.ami,
                "CMI": self.age_adjustment.cmi,
            }
        return {
            "DS2_Profile": {
                "AMI": self.ami,
                "CMI": self.cmi,
                "AMI_Raw": self.ami_raw,
                "CMI_Raw": self.cmi_raw,
                "Age_Adjustment": age_block,
                "DSS_Type": self.dss_type,
                "Summary": self.summary,
            },
            "DS2_Bayesian": {
                "AMI": {"value": self.ami, "likelihood": self.ami_likelihood},
                "CMI": {"value": self.cmi, "likelihood": self.cmi_likelihood},
                "Type_Probabilities": dict(self.type_probabilities),
            },
            "DS2_Timing": {
                "total_ms": self.total_ms,
                "avg_per_question_ms": self.avg_per_question_ms,
                "questions": {str(qid): t.to_dict() for qid, t in self.timings.items()},
            },
            "markers": {
                "AMI": dict(self.ami_markers),
                "CMI": dict(self.cmi_markers),
            },
        }
