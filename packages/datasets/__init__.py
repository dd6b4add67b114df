from .validator import validate_start_words, pretty_summary
from .io import read_lines, write_lines, load_word_list, load_start_words, ConfigurationError

__all__ = [
    "validate_start_words", "pretty_summary",
    "read_lines", "write_lines", "load_word_list", "load_start_words",
    "ConfigurationError",
]
