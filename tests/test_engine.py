import pytest
from packages.dictionary import StaticSpellChecker
from packages.engine import (
    ValidationEngine, RejectReason, is_possible, is_original, is_not_root, normalize,
)

REAL = StaticSpellChecker(["bad", "cab", "age", "bag", "cage", "beg", "cabbage", "cabbages"])


@pytest.fixture
def engine():
    return ValidationEngine("cabbage", REAL)


# --- rule predicates ---
@pytest.mark.parametrize("word,root,expected", [
    ("ab", "aabbc", True),
    ("abc", "aabbc", True),
    ("aab", "aabbc", True),
    ("aaa", "aabbc", False),
    ("bad", "cabbage", False),
    ("cab", "cabbage", True),
    ("", "cabbage", True),
    ("cabbages", "cabbage", False),
])
def test_is_possible(word, root, expected):
    assert is_possible(word, root) is expected


def test_is_possible_matches_letter_counts():
    # multiset-subset: every letter used no more often than in the root
    from collections import Counter
    root = "mississippi"
    for word in ["miss", "sips", "pipi", "mimi", "ssss", "sssss", "ppp", "spim", "ms"]:
        cw, cr = Counter(word), Counter(root)
        assert is_possible(word, root) is all(cw[c] <= cr[c] for c in cw)


def test_other_predicates():
    assert normalize("  CaB \n") == "cab"
    assert is_original("cab", ["bag"]) is True
    assert is_original("cab", ["cab"]) is False
    assert is_not_root("cab", "cab") is False
    with pytest.raises(TypeError):
        normalize(None)


# --- scenarios ---
def test_letters_not_available(engine):
    out = engine.submit("bad")
    assert not out.accepted and out.reason is RejectReason.LETTERS_NOT_AVAILABLE
    assert engine.score == 0 and engine.history == []


def test_accept_then_reuse(engine):
    out = engine.submit("cab")
    assert out.accepted and out.reason is None
    assert engine.score == 1 and engine.history == ["cab"]

    again = engine.submit("  CAB ")
    assert again.reason is RejectReason.ALREADY_USED
    assert engine.score == 1 and engine.history == ["cab"]


def test_same_as_root():
    eng = ValidationEngine("cab", REAL)
    assert eng.submit("cab").reason is RejectReason.SAME_AS_ROOT


def test_short_word_not_real(engine):
    # letters available, not used, but only 2 letters
    assert engine.submit("ca").reason is RejectReason.NOT_A_REAL_WORD


def test_unknown_word_not_real(engine):
    # "gab" is spellable from cabbage but unknown to this dictionary
    assert engine.submit("gab").reason is RejectReason.NOT_A_REAL_WORD


def test_empty_submission(engine):
    for raw in ["", "   ", "\n"]:
        out = engine.submit(raw)
        assert out.reason is RejectReason.EMPTY
    assert engine.score == 0 and engine.history == []


def test_reset_clears_round(engine):
    engine.submit("cab")
    engine.reset("newroot")
    assert engine.root == "newroot"
    assert engine.history == [] and engine.score == 0


def test_reset_rejects_empty_root(engine):
    with pytest.raises(ValueError):
        engine.reset("   ")


# --- properties ---
def test_priority_duplicate_before_letters():
    eng = ValidationEngine("cabbage", REAL)
    eng.submit("cage")
    eng._root = "bag"  # same round, root without "c"
    assert not is_possible("cage", eng.root)
    assert eng.submit("cage").reason is RejectReason.ALREADY_USED


def test_monotonic_acceptance_and_prepend(engine):
    accepted = []
    for w in ["cab", "age", "bag", "cage", "beg"]:
        before = engine.score
        out = engine.submit(w)
        assert out.accepted
        accepted.insert(0, w)
        assert engine.score == before + 1
        assert engine.history == accepted
    assert len(engine.history) == engine.score == 5


def test_rejection_never_mutates(engine):
    engine.submit("cab")
    snap = engine.snapshot()
    for raw in ["", "cab", "zzz", "cabbage", "ca", "gab"]:
        assert not engine.submit(raw).accepted
        assert engine.snapshot() == snap


def test_history_is_a_copy(engine):
    engine.submit("cab")
    engine.history.append("junk")
    assert engine.history == ["cab"]


def test_language_is_passed_to_checker():
    seen = []

    class Recorder:
        def is_known_word(self, word, language):
            seen.append((word, language))
            return True

    eng = ValidationEngine("cabbage", Recorder(), language="fr")
    assert eng.submit("cab").accepted
    assert seen == [("cab", "fr")]


def test_checker_not_consulted_for_short_or_failed_words():
    calls = []

    class Recorder:
        def is_known_word(self, word, language):
            calls.append(word)
            return True

    eng = ValidationEngine("cabbage", Recorder())
    eng.submit("ca")
    eng.submit("zzz")
    eng.submit("cabbage")
    assert calls == []


def test_outcome_messages(engine):
    out = engine.submit("bad")
    assert out.title == "Word not possible"
    assert "cabbage" in out.message
    assert engine.submit("cab").title == "Accepted"
    assert engine.submit("cab").title == "Word used already"


def test_start_uses_word_list():
    eng = ValidationEngine.start(["apple", "pear"], REAL, seed=1)
    assert eng.root in {"apple", "pear"}
    assert eng.score == 0 and eng.history == []


def test_start_falls_back_on_empty_list():
    assert ValidationEngine.start([], REAL).root == "silkworm"


def test_hints(engine):
    vocab = ["cab", "bad", "age", "gab", "cabbage", "ca"]
    assert engine.hints(vocab) == ["cab", "age"]  # "gab" unknown to REAL
    engine.submit("cab")
    assert engine.hints(vocab) == ["age"]
    assert engine.hints(["cab", "age", "bag", "beg"], limit=1) == ["age"]
