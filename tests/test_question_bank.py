from __future__ import annotations

import json

import pytest

from ds2_core import config
from ds2_core.question_bank import DIMENSIONS, MARKER_LABELS, load_bank, marker_label, parse_bank


def _rec(qid, dim="AMI", marker="m", scores=(0.0, 1.0)):
    return {
        "id": qid,
        "dimension": dim,
        "marker": marker,
        "text": f"q{qid}",
        "options": [{"text": f"o{i}", "score": s} for i, s in enumerate(scores)],
    }


def test_bundled_bank_covers_every_marker(monkeypatch):
    monkeypatch.setattr(config, "QUESTIONS_PATH", None)
    bank = load_bank()
    assert set(bank) == set(MARKER_LABELS)
    by_dim = {dim: {m for m, qs in bank.items() if qs[0].dimension == dim} for dim in DIMENSIONS}
    assert len(by_dim["AMI"]) == 10
    assert len(by_dim["CMI"]) == 10
    ids = [q.id for qs in bank.values() for q in qs]
    assert len(ids) == len(set(ids))
    for qs in bank.values():
        for q in qs:
            assert q.options
            assert all(0.0 <= o.score <= 1.0 for o in q.options)
    assert any(len(qs) > 1 for qs in bank.values())


def test_parse_groups_by_marker_in_file_order():
    bank = parse_bank({"questions": [_rec(1, marker="a"), _rec(2, marker="b"), _rec(3, marker="a")]})
    assert [q.id for q in bank["a"]] == [1, 3]
    assert [q.id for q in bank["b"]] == [2]
    assert bank["a"][0].options[1].score == 1.0


def test_parse_accepts_bare_list_and_lowercase_dimension():
    bank = parse_bank([_rec(5, dim="cmi", marker="c")])
    assert bank["c"][0].dimension == "CMI"


@pytest.mark.parametrize(
    "records,needle",
    [
        ([_rec(1, dim="XYZ")], "unknown dimension"),
        ([_rec(1, scores=())], "no options"),
        ([_rec(1, scores=(0.2, 1.5))], "outside"),
        ([_rec(1), _rec(1, marker="other")], "duplicate question id"),
        ([_rec(1, dim="AMI", marker="m"), _rec(2, dim="CMI", marker="m")], "appears under both"),
        ([{"id": 1, "dimension": "AMI"}], "malformed"),
    ],
)
def test_parse_rejects_invalid_records(records, needle):
    with pytest.raises(ValueError, match=needle):
        parse_bank({"questions": records})


def test_load_bank_honours_configured_path(monkeypatch, tmp_path):
    path = tmp_path / "bank.json"
    path.write_text(json.dumps({"version": "x", "questions": [_rec(7, marker="only")]}), encoding="utf-8")
    monkeypatch.setattr(config, "QUESTIONS_PATH", str(path))
    assert list(load_bank()) == ["only"]
    assert list(load_bank(path)) == ["only"]


def test_marker_label_falls_back_to_key():
    assert marker_label("paradox_tolerance") == "Paradox Tolerance"
    assert marker_label("unknown_marker") == "unknown_marker"
