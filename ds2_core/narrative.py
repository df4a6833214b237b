# ds2_core/narrative.py
INTERPRETATIONS = {
    "DSS-I": {
        "title": "Systematic Analytical",
        "core": "Your cognitive architecture prioritizes analytical mechanics: the rigorous manipulation of formal systems, symbolic reasoning, and structured problem decomposition.",
        "strengths": "You excel at detecting inconsistencies, tracing error propagation, and constructing formal proofs. Your thinking gravitates toward precision, boundary checking, and algorithmic clarity.",
        "approach": "Problems are best approached through systematic breakdown, first-principles derivation, and careful verification. You build understanding through rigorous analysis rather than intuitive leaps.",
        "growth": "Consider developing conceptual fluidity: shifting reference frames, tolerating productive ambiguity, and recognizing emergent patterns that resist formal capture.",
    },
    "DSS-II": {
        "title": "Creative Conceptual",
        "core": "Your cognitive architecture prioritizes conceptual morphogenesis: the generation of novel frameworks, cross-domain transfer, and paradigm-shifting insight.",
        "strengths": "You excel at reframing problems, dissolving apparent boundaries between concepts, and recognizing deep structural analogies across disparate domains. Paradox is generative for you rather than problematic.",
        "approach": "Problems are best approached through metaphor, abstraction-level shifting, and ontological creativity. You build understanding through pattern recognition and conceptual compression.",
        "growth": "Consider developing analytical rigor: verifying intuitions formally, tracing implications systematically, and grounding creative insights in defensible logical structure.",
    },
    "DSS-III": {
        "title": "Integrated Polymathic",
        "core": "Your cognitive architecture integrates both analytical mechanics and conceptual morphogenesis, enabling rigorous analysis combined with creative reconceptualization.",
        "strengths": "You can both generate novel frameworks and verify them formally. This dual capacity allows paradigm-shifting insight grounded in systematic validation.",
        "approach": "Problems yield to iterative cycles: creative reframing followed by rigorous testing, conceptual leaps verified through formal analysis. You can operate at multiple abstraction levels while keeping logical coherence.",
        "growth": "Your integrated architecture is rare. The key development path is deepening both capacities rather than allowing one to atrophy.",
    },
    "DSS-IV": {
        "title": "Developing Foundational",
        "core": "Your cognitive architecture shows balanced development potential across both analytical and conceptual dimensions.",
        "strengths": "Neither dimension dominates, so neither constrains the other. This leaves you open to multiple problem-solving approaches.",
        "approach": "Focus on deliberate development of both capacities. Analytical skills build through formal systems, proofs, and verification; conceptual skills build through cross-domain exploration and creative reframing.",
        "growth": "Identify which dimension feels more natural and invest in strengthening the complementary one. The goal is integrated capability: generating novel ideas and rigorously evaluating them.",
    },
}

DOMINANCE_NOTES = {
    "CMI": "Your CMI significantly exceeds AMI, indicating strong conceptual orientation with adequate analytical foundation.",
    "AMI": "Your AMI significantly exceeds CMI, indicating strong analytical orientation with adequate conceptual foundation.",
}

DOMAIN_PROFILES = {
    "DSS-I": {
        "breakthrough": ["Formal Verification", "Compiler Design", "Cryptography", "Mathematical Proof"],
        "high_fit": ["Systems Engineering", "Quantitative Finance", "Algorithm Design", "Security Analysis", "Scientific Computing"],
        "innovation_vector": "Optimization",
        "innovation_desc": "Breakthrough via rigorous refinement: finding the provably optimal solution",
        "productivity": {"type": "deep", "pct": 85, "label": "Deep Work"},
        "productivity_desc": "Peak output in extended uninterrupted sessions. Struggles with frequent context switches.",
    },
    "DSS-II": {
        "breakthrough": ["Paradigm Shifts", "New Market Creation", "Artistic Innovation", "Framework Design"],
        "high_fit": ["Strategic Consulting", "Product Vision", "Research Direction", "Creative Direction", "Venture Capital"],
        "innovation_vector": "Disruption",
        "innovation_desc": "Breakthrough via reconceptualization: seeing what others cannot imagine",
        "productivity": {"type": "burst", "pct": 70, "label": "Burst Creative"},
        "productivity_desc": "High-intensity creative bursts followed by integration periods. Non-linear output pattern.",
    },
    "DSS-III": {
        "breakthrough": ["Cross-Domain Synthesis", "First-Principles Innovation", "Systems Reconceptualization", "Novel Theory"],
        "high_fit": ["Research Leadership", "Technical Architecture", "Deep Tech Founding", "Complex Problem Solving", "Interdisciplinary Science"],
        "innovation_vector": "Synthesis",
        "innovation_desc": "Breakthrough via integration: combining rigorous analysis with conceptual leaps",
        "productivity": {"type": "variable", "pct": 80, "label": "Adaptive"},
        "productivity_desc": "Flexes between deep analytical work and creative exploration. Matches mode to problem type.",
    },
    "DSS-IV": {
        "breakthrough": ["Incremental Improvement", "Process Refinement", "Practical Application"],
        "high_fit": ["Implementation", "Operations", "Quality Assurance", "Documentation", "Support Engineering"],
        "innovation_vector": "Iteration",
        "innovation_desc": "Progress via systematic improvement: steady refinement over time",
        "productivity": {"type": "steady", "pct": 65, "label": "Steady State"},
        "productivity_desc": "Consistent output. Benefits from structured environments and clear direction.",
    },
}

# DSS-III with a wide gap leans toward the dominant side
INTEGRATED_LEANING = {
    "CMI": {
        "breakthrough": ["Paradigm Innovation", "Theoretical Frameworks", "Conceptual Architecture", "Vision-Driven R&D"],
        "lead_role": "Strategic Research",
    },
    "AMI": {
        "breakthrough": ["Formal Innovation", "Rigorous Synthesis", "Systematic Breakthroughs", "Mathematical Unification"],
        "lead_role": "Technical Research Lead",
    },
}

SHORT_NAMES = {
    "DSS-I": "Analytical",
    "DSS-II": "Conceptual",
    "DSS-III": "Polymathic",
    "DSS-IV": "Foundational",
}

COMPATIBILITY = {
    "DSS-I": {
        "DSS-I": ("synergy", "High Synergy", "Shared analytical rigor enables deep technical collaboration"),
        "DSS-II": ("complementary", "Complementary", "Your precision grounds their creativity; their vision expands your scope"),
        "DSS-III": ("synergy", "High Synergy", "They match your rigor while adding conceptual depth"),
        "DSS-IV": ("neutral", "Mentorship", "You can guide their analytical development effectively"),
    },
    "DSS-II": {
        "DSS-I": ("complementary", "Complementary", "Their rigor validates your insights; you push them beyond convention"),
        "DSS-II": ("synergy", "High Synergy", "Rapid creative amplification; ideas build on ideas"),
        "DSS-III": ("synergy", "High Synergy", "They translate your concepts into implementable frameworks"),
        "DSS-IV": ("neutral", "Mentorship", "You can nurture their conceptual development"),
    },
    "DSS-III": {
        "DSS-I": ("synergy", "High Synergy", "Strong analytical partnership; you add conceptual range to their precision"),
        "DSS-II": ("synergy", "High Synergy", "You implement their visions while expanding them systematically"),
        "DSS-III": ("complementary", "Powerful", "Rare pairing with mutual amplification across all dimensions"),
        "DSS-IV": ("neutral", "Mentorship", "Ideal mentor role; you model integrated cognitive development"),
    },
    "DSS-IV": {
        "DSS-I": ("neutral", "Learning", "Opportunity to develop analytical skills through collaboration"),
        "DSS-II": ("neutral", "Learning", "Exposure to creative reframing expands your conceptual range"),
        "DSS-III": ("complementary", "Growth", "Ideal learning partner; models integrated capability you can develop"),
        "DSS-IV": ("friction", "Limited", "Similar limitations; seek diverse partnerships for growth"),
    },
}
