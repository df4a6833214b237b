from __future__ import annotations
import argparse, datetime, json, logging, os
from ds2_core.config import load_config, make_rng
from ds2_core.insights import build_insights
from ds2_core.question_bank import load_bank, marker_label
from ds2_core.session import AssessmentSession
def ask(n_options: int, allow_back: bool) -> int | None:
    hint = " or 'b' to go back" if allow_back else ""
    while True:
        v = input(f"Your choice (index{hint}): ").strip().lower()
        if allow_back and v == "b": return None
        if v.isdigit() and int(v) < n_options: return int(v)
        print(f"Enter a number between 0 and {n_options - 1}.")
def main(argv: list[str] | None = None) -> int:
    ap = argparse.ArgumentParser(description="DS2 cognitive-style questionnaire")
    ap.add_argument("--age", default=None, help="optional age for score adjustment")
    ap.add_argument("--seed", type=int, default=None, help="seed question sampling")
    ap.add_argument("--questions", default=None, help="path to a questions.json bank")
    ap.add_argument("--out", default="reports", help="directory for the JSON report")
    ap.add_argument("-v", "--verbose", action="store_true")
    a = ap.parse_args(argv)
    logging.basicConfig(level=logging.INFO if a.verbose else logging.WARNING,
                        format="[%(levelname)s] %(message)s")

    bank = load_bank(a.questions)
    sess = AssessmentSession(bank, age=a.age, rng=make_rng(load_config(), seed=a.seed))
    print(f"DS2 Intelligence Model: {sess.total} questions. Ctrl+C to exit.")
    try:
        q = sess.current_question()
        while q is not None:
            print(f"\n--- {sess.index + 1}/{sess.total} | {q.dimension} | {marker_label(q.marker)} ---")
            print(q.text)
            if q.context: print(f"  ({q.context})")
            for i, opt in enumerate(q.options): print(f"  [{i}] {opt.text}")
            choice = ask(len(q.options), allow_back=sess.index > 0)
            if choice is None:
                q = sess.previous(); continue
            sess.select_option(q.id, choice)
            q = sess.next()
    except KeyboardInterrupt:
        print("\nStopped by user.")

    profile = sess.finalize()
    report = profile.to_dict()
    report["insights"] = build_insights(profile)
    os.makedirs(a.out, exist_ok=True)
    ts = datetime.datetime.now().strftime("%Y%m%d_%H%M%S")
    path = os.path.join(a.out, f"ds2_profile_{ts}.json")
    with open(path, "w", encoding="utf-8") as f:
        json.dump(report, f, ensure_ascii=False, indent=2)
    print(f"\n{profile.summary}")
    print(f"Done. Report saved to: {path}")
    return 0
if __name__ == "__main__": raise SystemExit(main())
