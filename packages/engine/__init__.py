from .rules import normalize, is_original, is_possible, is_not_root, is_real
from .selector import select_root, RootWordSelector, FALLBACK_ROOT
from .state import ValidationEngine, Outcome, RejectReason, REJECTION_MESSAGES
from .hints import possible_words

__all__ = [
    "normalize", "is_original", "is_possible", "is_not_root", "is_real",
    "select_root", "RootWordSelector", "FALLBACK_ROOT",
    "ValidationEngine", "Outcome", "RejectReason", "REJECTION_MESSAGES",
    "possible_words",
]
