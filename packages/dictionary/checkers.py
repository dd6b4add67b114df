"""
Spell-check capability for the "is it a real word?" rule.

The engine only needs one method:

    is_known_word(word: str, language: str) -> bool

Implementations here:
  - WordListSpellChecker : closed world, a word is real iff it is in the list
                           (the way allowed-guess lists are used elsewhere).
  - WordfreqSpellChecker : backed by the `wordfreq` corpora; a word is real if
                           it is in the lexicon (when one is given) and its
                           Zipf frequency in `language` reaches `min_zipf`.
  - StaticSpellChecker   : fixed set for any language, used by tests and demos.
"""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import Iterable, List, Protocol, Set

from wordfreq import available_languages, top_n_list, zipf_frequency

from packages.datasets.io import ConfigurationError

logger = logging.getLogger(__name__)

# Zipf 1.0 ~ once per 100M words: drops typos and noise, keeps rare real words.
DEFAULT_MIN_ZIPF = 1.0
DEFAULT_CACHE_SIZE = 4096

# Unix word list used as the default lexicon (lowercase entries only are kept).
DEFAULT_LEXICON = "/usr/share/dict/words"


class SpellChecker(Protocol):
    def is_known_word(self, word: str, language: str) -> bool:
        ...


class StaticSpellChecker:
    """Recognises exactly `words`, whatever the language tag."""

    def __init__(self, words: Iterable[str]):
        self.words: Set[str] = {w.strip().lower() for w in words if w.strip()}

    def is_known_word(self, word: str, language: str) -> bool:
        return word.lower() in self.words

    def vocabulary(self, language: str) -> List[str]:
        return sorted(self.words)


class WordListSpellChecker:
    """
    Closed-world dictionary for one language.

    Words outside the list, or any lookup for a different language tag, are
    unknown. The set is built once here rather than per lookup.
    """

    def __init__(self, words: Iterable[str], language: str = "en"):
        self.language = language
        self.words: Set[str] = {w.strip().lower() for w in words if w.strip()}
        logger.info("Word-list dictionary ready: %d words (%s)", len(self.words), language)

    def is_known_word(self, word: str, language: str) -> bool:
        if language != self.language:
            return False
        return word.lower() in self.words

    def vocabulary(self, language: str) -> List[str]:
        return sorted(self.words) if language == self.language else []


class WordfreqSpellChecker:
    """
    Dictionary lookups through wordfreq, optionally gated by a lexicon.

    Frequency alone can't tell words from frequent junk tokens (acronyms,
    fragments, names), so with a `lexicon` a word must be in the lexicon AND
    reach `min_zipf` in wordfreq. That is the lexicon ∩ wordfreq dictionary;
    the CLI always builds it with one.

    The language is checked once against wordfreq's available languages; a
    lookup in any other language answers "unknown" instead of raising.
    Lookups are memoized per (word, language) in a bounded LRU cache.
    """

    def __init__(
            self,
            min_zipf: float = DEFAULT_MIN_ZIPF,
            wordlist: str = "best",
            *,
            language: str = "en",
            lexicon: Iterable[str] | None = None,
            cache_size: int = DEFAULT_CACHE_SIZE,
    ):
        if language not in available_languages(wordlist):
            raise ConfigurationError(
                f"wordfreq has no {wordlist!r} word list for language {language!r}")
        self.min_zipf = float(min_zipf)
        self.wordlist = wordlist
        self.language = language
        self.lexicon: Set[str] | None = None
        if lexicon is not None:
            self.lexicon = _clean_lexicon(lexicon)
            logger.info("Lexicon ready: %d words (%s)", len(self.lexicon), language)
        self._lookup = lru_cache(maxsize=cache_size)(self._frequent_enough)

    def _frequent_enough(self, word: str, language: str) -> bool:
        try:
            return zipf_frequency(word, language, wordlist=self.wordlist) >= self.min_zipf
        except LookupError:
            logger.warning("wordfreq has no data for language %r; %r treated as unknown",
                           language, word)
            return False

    def is_known_word(self, word: str, language: str) -> bool:
        word = word.lower()
        if self.lexicon is not None:
            if language != self.language or word not in self.lexicon:
                return False
        return self._lookup(word, language)

    def vocabulary(self, language: str, n: int = 50000) -> List[str]:
        """Most frequent `n` alphabetic words in `language` (hint source), lexicon-filtered."""
        if language != self.language:
            return []
        words = [w for w in top_n_list(language, n, wordlist=self.wordlist) if w.isalpha()]
        if self.lexicon is not None:
            words = [w for w in words if w in self.lexicon]
        return words


def _clean_lexicon(words: Iterable[str]) -> Set[str]:
    """
    Keep plain lowercase alphabetic entries only.

    System word lists (e.g. /usr/share/dict/words) carry proper nouns and
    acronyms in capitals ("BBC", "Abe") and possessives ("cab's"); none of
    those are playable words.
    """
    out: Set[str] = set()
    for w in words:
        w = w.strip()
        if w and w.isalpha() and w == w.lower():
            out.add(w)
    return out
