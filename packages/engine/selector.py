"""
Root word selection.

Strategy:
  - Normalize the candidate list (strip + lowercase) and drop blank entries,
    so a trailing newline in a word file never becomes an empty root.
  - Choose uniformly at random with a caller-supplied RNG.
  - If nothing usable is left, fall back to FALLBACK_ROOT instead of failing:
    the word list ships with the game, so an empty list is a packaging bug the
    loader reports (datasets.load_start_words), not something a round can fix.

Notes:
  - Reproducible with the same seed (via RootWordSelector.rng).
  - Never mutates the input sequence.
"""

from __future__ import annotations

import logging
import random
from typing import Iterable, List

logger = logging.getLogger(__name__)

FALLBACK_ROOT = "silkworm"


def _usable(words: Iterable[str] | None) -> List[str]:
    if not words:
        return []
    return [w.strip().lower() for w in words if w and w.strip()]


def select_root(words: Iterable[str] | None, rng: random.Random | None = None) -> str:
    """
    Pick one root word uniformly at random from `words`.

    Args:
      words : candidate roots (e.g., lines of start.txt); may be empty or None
      rng   : random.Random to draw from (module-level randomness if None)

    Returns:
      A non-empty lowercase word: a member of `words` or FALLBACK_ROOT.
    """
    pool = _usable(words)
    if not pool:
        logger.warning("No usable start words; falling back to %r", FALLBACK_ROOT)
        return FALLBACK_ROOT
    rng = rng or random
    return pool[rng.randrange(len(pool))]


class RootWordSelector:
    """Holds a start-word list and a seeded RNG; each `select()` draws a new root."""

    def __init__(self, words: Iterable[str] | None, *, seed: int | None = None,
                 rng: random.Random | None = None):
        self.words: List[str] = _usable(words)
        self.rng = rng if rng is not None else random.Random(seed)

    def select(self) -> str:
        return select_root(self.words, self.rng)
