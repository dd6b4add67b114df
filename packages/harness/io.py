"""
I/O utilities for replayed rounds.

Responsibilities:
- write_csv:      flatten a round transcript into a tidy CSV (one row per submission).
- write_manifest: dump a JSON manifest with config, word-list report and totals.
- timestamp_id:   stable UTC run ID string.
"""

from __future__ import annotations

from pathlib import Path
from typing import Dict
import csv
import json
import datetime as dt

FIELDS = ["root", "turn", "raw", "word", "accepted", "reason", "score"]


def write_csv(transcript: Dict, path: str) -> str:
    """
    Serialize a round transcript (as returned by harness.run_round) to CSV.

    Schema (columns):
      root, turn, raw, word, accepted, reason, score

    `reason` is empty for accepted words; `score` is the score after the step.

    Returns:
      The path written (string).
    """
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)

    with p.open("w", newline="", encoding="utf-8") as f:
        w = csv.DictWriter(f, fieldnames=FIELDS)
        w.writeheader()
        for step in transcript["steps"]:
            w.writerow({"root": transcript["root"], **step})

    return str(p)


def write_manifest(manifest: Dict, path: str) -> str:
    """
    Write a JSON manifest describing a replay.

    Typical keys:
      - run_id
      - config: CLI args (words, dictionary, language, seed, script, outdir)
      - start_words: output of datasets.validate_start_words(...)
      - root, score, history
    """
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    with p.open("w", encoding="utf-8") as f:
        json.dump(manifest, f, indent=2)
    return str(p)


def timestamp_id() -> str:
    """
    Return a compact UTC timestamp suitable for filenames, e.g. 20250820T024121Z.
    """
    return dt.datetime.now(dt.timezone.utc).strftime("%Y%m%dT%H%M%SZ")
