from .checkers import (
    SpellChecker,
    StaticSpellChecker,
    WordListSpellChecker,
    WordfreqSpellChecker,
    DEFAULT_MIN_ZIPF,
    DEFAULT_LEXICON,
)

__all__ = [
    "SpellChecker", "StaticSpellChecker", "WordListSpellChecker",
    "WordfreqSpellChecker", "DEFAULT_MIN_ZIPF", "DEFAULT_LEXICON",
]
