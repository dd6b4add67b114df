from __future__ import annotations
from pathlib import Path
from typing import Iterable, List


class ConfigurationError(RuntimeError):
    """A bundled resource (e.g., the start-word list) is missing or unusable."""


def read_lines(p: Path | str) -> List[str]:
    """
    Read a UTF-8 text file into a list of lines, stripping trailing CR/LF.
    Raises FileNotFoundError if the path doesn't exist.
    """
    p = Path(p)
    if not p.exists():
        raise FileNotFoundError(p)
    return [ln.rstrip("\r\n") for ln in p.read_text(encoding="utf-8").splitlines()]


def write_lines(lines: Iterable[str], p: Path | str) -> str:
    """
    Write lines to a UTF-8 text file, ensuring a trailing newline.
    Returns the string path written.
    """
    p = Path(p)
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return str(p)


def load_word_list(p: Path | str, what: str = "word list") -> List[str]:
    """
    Read a bundled or user-supplied word file (raw lines).

    Raises ConfigurationError if the file is missing, unreadable or not UTF-8.
    """
    try:
        return read_lines(p)
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigurationError(f"could not load {what} from {p}: {e}") from e


def load_start_words(p: Path | str) -> List[str]:
    """
    Load a start-word list (one word per line), lowercased, blanks dropped.

    Raises ConfigurationError if the file can't be read; an empty list is
    returned as-is and left to the selector's fallback.
    """
    lines = load_word_list(p, "start words")
    return [w.strip().lower() for w in lines if w.strip()]
