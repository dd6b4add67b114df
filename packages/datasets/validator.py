"""
Start-word list validator.

What this module does:
- Validate a start-word list (start.txt): the pool root words are drawn from.
- Enforce formatting rules (lowercase, a–z only, at least `min_length` letters,
  one per line).
- Detect duplicates and invalid lines; compute SHA-256 of the raw file.
- Return a machine-readable dict (for manifests) and provide a pretty one-line summary.

Blank lines are counted separately from invalid ones: a trailing newline is
normal for a word file and the loader drops it anyway.

Typical use:
    from packages.datasets import validate_start_words, pretty_summary
    rep = validate_start_words("packages/datasets/data/start.txt")
    print(pretty_summary(rep))
"""

from __future__ import annotations

from dataclasses import dataclass, asdict
from pathlib import Path
from typing import Dict, List, Tuple
import hashlib

from packages.engine.rules import MIN_WORD_LENGTH


# -----------------------------
# Dataclass for the structured report
# -----------------------------

@dataclass
class StartListReport:
    """Diagnostics and metadata for one start-word file."""
    path: str            # file path (as given)
    exists: bool         # did the file exist on disk?
    count: int           # number of VALID words after cleaning
    sha256: str          # SHA-256 of raw file bytes (empty string if missing)
    unique_count: int    # unique valid words (after dedupe)
    invalid_lines: int   # lines that are not a clean lowercase word
    blank_lines: int     # empty/whitespace-only lines (ignored)
    min_length: int
    passed: bool
    issues: List[str]    # human-friendly list of problems (if any)


# -----------------------------
# Helpers
# -----------------------------

def _sha256_file(path: Path) -> str:
    """Compute SHA-256 of a file's raw bytes."""
    h = hashlib.sha256()
    with path.open("rb") as f:
        for chunk in iter(lambda: f.read(8192), b""):
            h.update(chunk)
    return h.hexdigest()


def _load_and_check(path: Path, min_length: int) -> Tuple[List[str], int, int]:
    """
    Load words from a text file and validate them.

    Rules:
      - one token per line
      - must be lowercase a–z
      - must have at least `min_length` letters

    Returns:
      (valid_words, invalid_count, blank_count)
    """
    valid: List[str] = []
    invalid = 0
    blank = 0

    with path.open("r", encoding="utf-8") as f:
        for raw in f:
            w = raw.strip()
            if not w:
                blank += 1
                continue
            if w == w.lower() and w.isalpha() and len(w) >= min_length:
                valid.append(w)
            else:
                invalid += 1

    return valid, invalid, blank


# -----------------------------
# Public API
# -----------------------------

def validate_start_words(path: str, min_length: int = MIN_WORD_LENGTH) -> Dict:
    """
    Validate a start-word list.

    Parameters
    ----------
    path : str
        Path to the start-word file (one word per line).
    min_length : int
        Shortest acceptable root word.

    Returns
    -------
    Dict
        A JSON-serializable dictionary (see StartListReport schema) with:
          - counts, SHA-256, duplicate/invalid flags
          - `passed` boolean (strict: requires non-empty, no invalids, no duplicates)
          - `issues` (list of strings) to surface any problems
    """
    p = Path(path)

    if not p.exists():
        rep = StartListReport(
            path=path, exists=False, count=0, sha256="", unique_count=0,
            invalid_lines=0, blank_lines=0, min_length=min_length,
            passed=False, issues=[f"start-word file not found: {path}"],
        )
        return asdict(rep)

    issues: List[str] = []
    try:
        words, invalid, blank = _load_and_check(p, min_length)
    except UnicodeDecodeError:
        words, invalid, blank = [], 0, 0
        issues.append("start-word file is not valid UTF-8")
    unique = set(words)

    if not words:
        issues.append("start-word file contains 0 valid words")
    if invalid:
        issues.append(f"start-word file has {invalid} invalid line(s)")
    if len(unique) != len(words):
        issues.append("start-word file contains duplicate lines")

    rep = StartListReport(
        path=str(p),
        exists=True,
        count=len(words),
        sha256=_sha256_file(p),
        unique_count=len(unique),
        invalid_lines=invalid,
        blank_lines=blank,
        min_length=min_length,
        passed=not issues,
        issues=issues,
    )
    return asdict(rep)


def pretty_summary(report: Dict) -> str:
    """
    Produce a compact, human-friendly one-liner for console/docs.

    Example:
        start=packages/datasets/data/start.txt | words=8 (uniq=8, sha=abc123...) | invalid=0 | OK
    """
    status = "OK" if report["passed"] else "FAIL"
    sha = (report.get("sha256") or "")[:12]
    return (
        f"start={report['path']} | words={report['count']} "
        f"(uniq={report['unique_count']}, sha={sha}) "
        f"| invalid={report['invalid_lines']} | {status}"
    )
