"""
Hint generation: which words could still be scored this round?

Given:
  - the root word
  - a vocabulary (e.g., a dictionary word list)
  - the words already accepted

Return:
  - vocabulary words that pass the letter, originality, identity and length
    rules, in vocabulary order, without duplicates.

The dictionary rule is left to the caller (ValidationEngine.hints), since a
vocabulary drawn from the dictionary already satisfies it.
"""

from __future__ import annotations

from typing import Iterable, List

from .rules import MIN_WORD_LENGTH, is_not_root, is_possible


def possible_words(
        root: str,
        vocabulary: Iterable[str],
        used: Iterable[str] = (),
        min_length: int = MIN_WORD_LENGTH,
) -> List[str]:
    """
    Filter `vocabulary` down to words that can be formed from `root`.

    Args:
      root       : current root word (normalized)
      vocabulary : candidate words; normalized on the fly
      used       : words already accepted this round
      min_length : shortest word worth offering

    Returns:
      List[str] of candidates (order preserved as in `vocabulary`).
    """
    root = root.strip().lower()
    seen = set(used)
    out: List[str] = []

    for w in vocabulary:
        w = w.strip().lower()

        # Cheap shape checks before the letter-pool walk
        if len(w) < min_length or len(w) > len(root) or w in seen:
            continue

        if is_not_root(w, root) and is_possible(w, root):
            out.append(w)
        seen.add(w)

    return out
