from __future__ import annotations

import json
from pathlib import Path
from typing import Mapping, Sequence

from . import config
from .question_bank import DIMENSIONS, MARKER_LABELS, load_bank
from .sampler import variant_counts
from .types import Question


def _blank_dimension() -> dict[str, object]:
    return {"markers": {}, "questions": 0, "missing_label": 0}


def audit_bank(bank: Mapping[str, Sequence[Question]]) -> dict[str, object]:
    coverage: dict[str, dict[str, object]] = {dim: _blank_dimension() for dim in DIMENSIONS}
    totals = {"markers": 0, "questions": 0, "missing_label": 0}
    counts = variant_counts(bank)

    warnings: list[str] = []
    if not bank:
        warnings.append("bank is empty")

    for marker, variants in bank.items():
        totals["markers"] += 1
        if not variants:
            warnings.append(f"{marker} has no variants")
            continue
        dim = variants[0].dimension
        dim_data = coverage.setdefault(dim, _blank_dimension())
        dim_data["markers"][marker] = counts[marker]  # type: ignore[index]
        dim_data["questions"] += len(variants)  # type: ignore[operator]
        totals["questions"] += len(variants)

        if counts[marker] < config.BANK_MIN_VARIANTS_PER_MARKER:
            warnings.append(
                f"{dim} {marker} has {counts[marker]} variant(s) (<{config.BANK_MIN_VARIANTS_PER_MARKER})"
            )
        if config.BANK_EXPECT_LABELS and marker not in MARKER_LABELS:
            dim_data["missing_label"] += 1  # type: ignore[operator]
            totals["missing_label"] += 1
            warnings.append(f"{dim} {marker} has no display label")

    for dim in DIMENSIONS:
        if not coverage[dim]["markers"]:
            warnings.append(f"{dim} has no markers")

    summary = {"coverage": coverage, "warnings": warnings, "totals": totals}
    return summary


def print_report(summary: dict[str, object]) -> None:
    coverage: dict[str, dict[str, object]] = summary["coverage"]  # type: ignore[assignment]
    print("=== Bank Coverage ===")
    for dim in sorted(coverage):
        data = coverage[dim]
        markers: dict[str, int] = data["markers"]  # type: ignore[assignment]
        print(f"\nDimension: {dim}  markers={len(markers)} questions={data['questions']}")
        for marker in sorted(markers):
            print(f"  {marker:<34} variants={markers[marker]}")

    warnings: list[str] = summary["warnings"]  # type: ignore[assignment]
    if warnings:
        print("\nWarnings:")
        for msg in warnings:
            print(f" - {msg}")
    else:
        print("\nNo warnings.")

    totals = summary["totals"]
    print("\nTotals:", totals)


def write_summary(summary: dict[str, object], path: Path = Path("/tmp/ds2_bank_audit.json")) -> str:
    text = json.dumps(summary, indent=2, sort_keys=True)
    path.write_text(text + "\n", encoding="utf-8")
    print(text)
    return text


def main(_argv: list[str] | None = None) -> int:
    bank = load_bank()
    summary = audit_bank(bank)
    print_report(summary)
    write_summary(summary)
    return 2 if summary["warnings"] else 0


if __name__ == "__main__":
    raise SystemExit(main())
