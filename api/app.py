from __future__ import annotations
from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel
import uuid, os, logging, typing as t
from datetime import datetime, timezone

# ---- Engine imports ----
from ds2_core.config import load_config, make_rng
from ds2_core.insights import build_insights
from ds2_core.question_bank import load_bank, marker_label
from ds2_core.session import AssessmentSession
from ds2_core.types import Question

log = logging.getLogger(__name__)

SESS: dict[str, AssessmentSession] = {}
SESSION_INFO: dict[str, dict[str, t.Any]] = {}
_BANK: dict[str, list[Question]] | None = None

app = FastAPI(title="DS2 Profile API")


@app.get("/")
def root():
    return {"status": "ok", "service": "ds2-profile-api"}


ALLOWED_ORIGINS = [
    o.strip() for o in os.getenv("ALLOWED_ORIGINS", "http://localhost:3000").split(",") if o.strip()
]

app.add_middleware(
    CORSMiddleware,
    allow_origins=ALLOWED_ORIGINS,
    allow_methods=["*"],
    allow_headers=["*"],
    allow_credentials=False,
)

# ---- Schemas ----
class StartReq(BaseModel):
    age: int | str | None = None
    seed: int | None = None

class AnswerReq(BaseModel):
    question_id: int
    option_index: int

# ---- Helpers ----
def _now_iso() -> str:
    return datetime.now(timezone.utc).isoformat()


def _bank() -> dict[str, list[Question]]:
    global _BANK
    if _BANK is None:
        _BANK = load_bank()
    return _BANK


def _session(sid: str) -> AssessmentSession:
    sess = SESS.get(sid)
    if not sess:
        raise HTTPException(404, "session not found")
    return sess


def _serialize_question(sess: AssessmentSession) -> dict[str, t.Any]:
    q = sess.current_question()
    ans = sess.answers.get(q.id)
    return {
        "id": q.id,
        "dimension": q.dimension,
        "marker": q.marker,
        "marker_label": marker_label(q.marker),
        "text": q.text,
        "context": q.context or "",
        "options": [{"index": i, "text": o.text} for i, o in enumerate(q.options)],
        "selected": ans.option_index if ans else None,
        "position": sess.index + 1,
        "total": sess.total,
        "is_last": sess.is_last,
        "can_advance": sess.can_advance(),
    }


def _progress(sess: AssessmentSession) -> dict[str, t.Any]:
    return {"answered": sess.answered_count, "total": sess.total, "progress": round(sess.progress, 4)}

# ---- Health ----
@app.get("/health")
def health():
    try:
        markers = len(_bank())
    except (OSError, ValueError) as e:
        log.error("question bank unavailable: %s", e)
        return {"bank_loaded": False, "markers": 0, "active_sessions": len(SESS)}
    return {"bank_loaded": True, "markers": markers, "active_sessions": len(SESS)}

# ---- Session endpoints ----
@app.post("/session/start")
def start(req: StartReq | None = None):
    req = req or StartReq()
    try:
        bank = _bank()
    except (OSError, ValueError) as e:
        raise HTTPException(500, f"question bank unavailable: {e}")
    sid = str(uuid.uuid4())
    rng = make_rng(load_config(), seed=req.seed)
    try:
        sess = AssessmentSession(bank, age=req.age, rng=rng)
    except ValueError as e:
        raise HTTPException(500, str(e))
    SESS[sid] = sess
    SESSION_INFO[sid] = {"started_at": _now_iso(), "age": sess.age}
    return {"session_id": sid, "total": sess.total, "question": _serialize_question(sess)}


@app.get("/session/{sid}/question")
def current_question(sid: str):
    sess = _session(sid)
    return {"question": _serialize_question(sess), **_progress(sess)}


@app.post("/session/{sid}/answer")
def answer(sid: str, req: AnswerReq):
    sess = _session(sid)
    try:
        sess.select_option(req.question_id, req.option_index)
    except KeyError:
        raise HTTPException(400, f"question {req.question_id} is not part of this session")
    except (IndexError, ValueError) as e:
        raise HTTPException(400, str(e))
    return {"ok": True, **_progress(sess)}


@app.post("/session/{sid}/next")
def next_question(sid: str):
    sess = _session(sid)
    if not sess.can_advance():
        raise HTTPException(409, "current question has not been answered")
    nxt = sess.next()
    if nxt is None:
        return {"done": True, "question": None, **_progress(sess)}
    return {"done": False, "question": _serialize_question(sess), **_progress(sess)}


@app.post("/session/{sid}/previous")
def previous_question(sid: str):
    sess = _session(sid)
    sess.previous()
    return {"question": _serialize_question(sess), **_progress(sess)}


@app.get("/session/{sid}/report")
def report(sid: str):
    sess = _session(sid)
    profile = sess.finalize()
    info = SESSION_INFO.get(sid, {})
    body: dict[str, t.Any] = profile.to_dict()
    body["insights"] = build_insights(profile)
    body["meta"] = {
        "sessionId": sid,
        "startedAt": info.get("started_at"),
        "createdAt": _now_iso(),
        "answered": sess.answered_count,
        "total": sess.total,
    }
    return body


@app.delete("/session/{sid}")
def reset(sid: str):
    _session(sid)
    SESS.pop(sid, None)
    SESSION_INFO.pop(sid, None)
    return {"ok": True}
