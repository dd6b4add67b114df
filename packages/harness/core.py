"""
Scripted round replay.

- run_round: feed a fixed list of submissions to an engine and record what
  happened at each step.

This is the same loop a UI runs one keystroke at a time, kept UI-agnostic so a
CLI, a notebook or a test can drive it.
"""

from __future__ import annotations

import time
from typing import Dict, Iterable, List

from packages.engine import ValidationEngine


def run_round(engine: ValidationEngine, submissions: Iterable[str]) -> Dict:
    """
    Submit each raw string in order and collect a transcript.

    Args:
        engine:       an engine with a round already started (root chosen)
        submissions:  raw player inputs, exactly as typed

    Returns:
        dict with keys:
            root (str), steps (list[dict]), score (int),
            history (list[str]), time_ms (float)
        where each step has: turn, raw, word, accepted, reason, score
    """
    steps: List[Dict] = []

    t0 = time.perf_counter_ns()
    for turn, raw in enumerate(submissions, start=1):
        outcome = engine.submit(raw)
        steps.append({
            "turn": turn,
            "raw": raw,
            "word": outcome.word,
            "accepted": outcome.accepted,
            "reason": outcome.reason.value if outcome.reason else "",
            "score": engine.score,
        })
    elapsed_ms = (time.perf_counter_ns() - t0) / 1_000_000.0

    return {
        "root": engine.root,
        "steps": steps,
        "score": engine.score,
        "history": engine.history,
        "time_ms": elapsed_ms,
    }
