"""
Round state and the submission pipeline.

A ValidationEngine owns one round: the root word, the accepted words (most
recent first) and the score. `submit` normalizes the raw input, runs the rules
from `rules.py` in priority order and only mutates state on acceptance.

Rejections are ordinary return values (Outcome with a RejectReason), never
exceptions; the caller decides how to show them (see Outcome.title/message).
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, List, Optional, Tuple

from .rules import (
    DEFAULT_LANGUAGE,
    MIN_WORD_LENGTH,
    is_not_root,
    is_original,
    is_possible,
    is_real,
    normalize,
)
from .hints import possible_words
from .selector import RootWordSelector

logger = logging.getLogger(__name__)


class RejectReason(str, Enum):
    EMPTY = "empty"
    ALREADY_USED = "already_used"
    LETTERS_NOT_AVAILABLE = "letters_not_available"
    SAME_AS_ROOT = "same_as_root"
    NOT_A_REAL_WORD = "not_a_real_word"


# (title, message) shown to the player; "{root}" is filled in at render time.
REJECTION_MESSAGES = {
    RejectReason.EMPTY: ("Empty word", "Type a word before submitting"),
    RejectReason.ALREADY_USED: ("Word used already", "Be more original"),
    RejectReason.LETTERS_NOT_AVAILABLE: ("Word not possible", "You can't spell that word from '{root}'!"),
    RejectReason.SAME_AS_ROOT: ("Word is equal to start word", "You can't do that"),
    RejectReason.NOT_A_REAL_WORD: ("Word not recognized", "That isn't a real word"),
}


@dataclass(frozen=True)
class Outcome:
    """Result of one submission. `reason` is None iff the word was accepted."""
    word: str                              # normalized submission
    root: str                              # root word at the time of submission
    reason: Optional[RejectReason] = None

    @property
    def accepted(self) -> bool:
        return self.reason is None

    @property
    def title(self) -> str:
        if self.reason is None:
            return "Accepted"
        return REJECTION_MESSAGES[self.reason][0]

    @property
    def message(self) -> str:
        if self.reason is None:
            return f"'{self.word}' added"
        return REJECTION_MESSAGES[self.reason][1].format(root=self.root)


class ValidationEngine:
    """
    One game round: root word, accepted-word history and score.

    The spell checker is injected (anything with
    `is_known_word(word, language) -> bool`), so the engine never touches a
    real dictionary unless the caller hands it one.
    """

    def __init__(self, root: str, spell_checker, *, language: str = DEFAULT_LANGUAGE):
        self.spell_checker = spell_checker
        self.language = language
        self._root = ""
        self._history: List[str] = []
        self._score = 0
        self.reset(root)

    @classmethod
    def start(
            cls,
            words: Iterable[str] | None,
            spell_checker,
            *,
            language: str = DEFAULT_LANGUAGE,
            seed: int | None = None,
    ) -> "ValidationEngine":
        """Pick a root from `words` (fallback if unusable) and open a round on it."""
        root = RootWordSelector(words, seed=seed).select()
        return cls(root, spell_checker, language=language)

    # ---- read-only views for the presentation layer ----

    @property
    def root(self) -> str:
        return self._root

    @property
    def history(self) -> List[str]:
        return list(self._history)

    @property
    def score(self) -> int:
        return self._score

    # ---- round lifecycle ----

    def reset(self, root: str) -> None:
        """Start a fresh round on `root`: empty history, score 0."""
        root = normalize(root)
        if not root:
            raise ValueError("root word must be non-empty")
        self._root = root
        self._history = []
        self._score = 0
        logger.info("New round: root=%r language=%s", root, self.language)

    def new_round(self, selector: RootWordSelector) -> str:
        """Swap in a fresh root from `selector` (the "other word" action)."""
        self.reset(selector.select())
        return self._root

    # ---- submissions ----

    def check(self, word: str) -> Optional[RejectReason]:
        """
        Run the rule chain on a normalized word without touching state.
        Returns the first failing reason, or None if every rule passes.
        """
        if not word:
            return RejectReason.EMPTY
        if not is_original(word, self._history):
            return RejectReason.ALREADY_USED
        if not is_possible(word, self._root):
            return RejectReason.LETTERS_NOT_AVAILABLE
        if not is_not_root(word, self._root):
            return RejectReason.SAME_AS_ROOT
        if not is_real(word, self.spell_checker, self.language):
            return RejectReason.NOT_A_REAL_WORD
        return None

    def submit(self, raw: str) -> Outcome:
        """
        Evaluate one raw submission.

        Accepted: the word goes to the front of the history and the score
        goes up by one. Rejected: nothing changes.
        """
        word = normalize(raw)
        reason = self.check(word)
        outcome = Outcome(word=word, root=self._root, reason=reason)

        if reason is None:
            self._history.insert(0, word)
            self._score += 1
            logger.debug("Accepted %r (score=%d)", word, self._score)
        else:
            logger.debug("Rejected %r: %s", word, reason.value)
        return outcome

    def hints(self, vocabulary: Iterable[str], limit: int | None = None) -> List[str]:
        """Vocabulary words that would pass every rule right now (dictionary included)."""
        out: List[str] = []
        for w in possible_words(self._root, vocabulary, used=self._history,
                                min_length=MIN_WORD_LENGTH):
            if self.spell_checker.is_known_word(w, self.language):
                out.append(w)
                if limit is not None and len(out) >= limit:
                    break
        return out

    def snapshot(self) -> Tuple[str, List[str], int]:
        """(root, history, score) in one go, for renderers and transcripts."""
        return self._root, list(self._history), self._score
