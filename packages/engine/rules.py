"""
Acceptance rules for a single submission against the current round.

Each rule is a plain predicate on an already-normalized word. The engine
(`state.py`) runs them in a fixed order and stops at the first failure:

  1) is_original : not already in the round's history
  2) is_possible : spellable from the root's letters (each letter used at most
                   as many times as it appears in the root)
  3) is_not_root : not the root word itself
  4) is_real     : at least MIN_WORD_LENGTH letters and known to the dictionary

Normalization (lowercase + strip whitespace) happens once, up front, so every
rule sees the same canonical form.
"""

from __future__ import annotations

from typing import Iterable

# Shorter words are never accepted, whatever the dictionary says.
MIN_WORD_LENGTH = 3

DEFAULT_LANGUAGE = "en"


def normalize(raw: str) -> str:
    """
    Canonical form of a submission: lowercase, leading/trailing whitespace removed.

    Raises TypeError for non-string input; every string (including "") is fine.
    """
    if not isinstance(raw, str):
        raise TypeError(f"submission must be a str, got {type(raw).__name__}")
    return raw.lower().strip()


def is_original(word: str, history: Iterable[str]) -> bool:
    """True if `word` has not been accepted earlier in this round."""
    return word not in history


def is_possible(word: str, root: str) -> bool:
    """
    True if `word` can be spelled from the letters of `root`.

    Works on a scratch copy of the root's letters: for every letter of the
    candidate, remove the first matching letter from the pool; a letter with
    no match left means the candidate needs more copies than the root has.

    Examples (root "aabbc"):
      is_possible("ab",  "aabbc") -> True
      is_possible("aab", "aabbc") -> True
      is_possible("aaa", "aabbc") -> False
    """
    pool = list(root)
    for ch in word:
        try:
            pool.remove(ch)  # first match only
        except ValueError:
            return False
    return True


def is_not_root(word: str, root: str) -> bool:
    """True unless `word` is exactly the root word."""
    return word != root


def is_real(word: str, spell_checker, language: str = DEFAULT_LANGUAGE) -> bool:
    """
    True if `word` is long enough and the spell checker recognises it.

    The length check runs first so the dictionary is never consulted for
    one- and two-letter fragments.
    """
    if len(word) < MIN_WORD_LENGTH:
        return False
    return bool(spell_checker.is_known_word(word, language))
