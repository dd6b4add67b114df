# apps/cli/play.py
"""
CLI entry point for playing (or replaying) word-scramble rounds.

This script:
  1) Validates the start-word list (prints counts + SHA) and loads it.
  2) Builds the dictionary: a word-list file if --dictionary is given,
     otherwise wordfreq for --language.
  3) Either replays a scripted list of submissions (--script) and writes:
       - CSV:  one row per submission (word, accepted, reason, score)
       - JSON: manifest with config, start-list report, final state
     or runs an interactive round on stdin.

Interactive commands:
  :new   pick another root word (resets history and score)
  :hint  show up to 10 words still available
  :quit  leave
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, TextIO

import packages.datasets
from packages.datasets import (
    ConfigurationError,
    load_start_words,
    load_word_list,
    pretty_summary,
    validate_start_words,
)
from packages.dictionary import (
    DEFAULT_LEXICON,
    DEFAULT_MIN_ZIPF,
    WordfreqSpellChecker,
    WordListSpellChecker,
)
from packages.engine import RootWordSelector, ValidationEngine
from packages.harness import run_round, timestamp_id, write_csv, write_manifest

logger = logging.getLogger(__name__)

DEFAULT_START_WORDS = str(Path(packages.datasets.__file__).parent / "data" / "start.txt")
HINT_LIMIT = 10


def setup_logging(level: str) -> None:
    """Configure root logging to stderr so stdout stays clean for the game."""
    # force=True replaces earlier handlers, so repeated main() calls don't stack them
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.WARNING),
        format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stderr,
        force=True,
    )


def _build_spell_checker(args: argparse.Namespace):
    """
    --dictionary: closed-world word list. Otherwise wordfreq gated by the
    --lexicon word list. Raises ConfigurationError for unreadable files or a
    language wordfreq doesn't cover.
    """
    if args.dictionary:
        words = load_word_list(args.dictionary, "dictionary")
        return WordListSpellChecker(words, language=args.language)
    lexicon = load_word_list(args.lexicon, "lexicon")
    return WordfreqSpellChecker(min_zipf=args.min_zipf, language=args.language, lexicon=lexicon)


def _render(engine: ValidationEngine, out: TextIO) -> None:
    out.write(f"\n== {engine.root.upper()} ==  score: {engine.score}\n")
    for w in engine.history:
        out.write(f"  ({len(w)}) {w}\n")


def play_interactive(engine: ValidationEngine, selector: RootWordSelector,
                     vocabulary: List[str], inp: TextIO, out: TextIO) -> None:
    """Read submissions line by line until EOF or :quit."""
    _render(engine, out)
    for line in inp:
        cmd = line.strip()
        if cmd == ":quit":
            break
        if cmd == ":new":
            engine.new_round(selector)
            _render(engine, out)
            continue
        if cmd == ":hint":
            hints = engine.hints(vocabulary, limit=HINT_LIMIT)
            out.write(("  hints: " + ", ".join(hints)) if hints else "  no hints available")
            out.write("\n")
            continue

        outcome = engine.submit(line)
        if outcome.accepted:
            _render(engine, out)
        else:
            out.write(f"  {outcome.title}: {outcome.message}\n")
    out.write(f"Final score: {engine.score}\n")


def replay_script(engine: ValidationEngine, submissions: List[str],
                  args: argparse.Namespace, report: dict) -> None:
    """Replay submissions and write CSV + manifest to --outdir."""
    transcript = run_round(engine, submissions)

    run_id = timestamp_id()
    outdir = Path(args.outdir)
    csv_path = outdir / f"round_{run_id}.csv"
    manifest_path = outdir / f"round_{run_id}_manifest.json"

    write_csv(transcript, str(csv_path))
    write_manifest({
        "run_id": run_id,
        "config": vars(args),
        "start_words": report,
        "root": transcript["root"],
        "score": transcript["score"],
        "history": transcript["history"],
        "num_submissions": len(transcript["steps"]),
    }, str(manifest_path))

    print(f"Root: {transcript['root']} | score: {transcript['score']}")
    print(f"Wrote: {csv_path}")
    print(f"Wrote: {manifest_path}")


def main(argv: List[str] | None = None) -> int:
    """
    Parse CLI args, load resources, then replay or play interactively.
    Returns the process exit status (2 on configuration errors).
    """
    ap = argparse.ArgumentParser(description="word scramble: build words from a root word")
    ap.add_argument("--words", default=DEFAULT_START_WORDS,
                    help="start-word list, one root candidate per line")
    ap.add_argument("--dictionary",
                    help="word-list file used as the dictionary (default: wordfreq + --lexicon)")
    ap.add_argument("--lexicon", default=DEFAULT_LEXICON,
                    help="word list a word must appear in before wordfreq is asked")
    ap.add_argument("--language", default="en", help="dictionary language tag")
    ap.add_argument("--min-zipf", type=float, default=DEFAULT_MIN_ZIPF,
                    help="wordfreq Zipf threshold for a word to count as real")
    ap.add_argument("--seed", type=int, help="RNG seed for root selection")
    ap.add_argument("--script", help="file of submissions to replay (one per line)")
    ap.add_argument("--outdir", default="reports", help="directory for replay outputs")
    ap.add_argument("--log-level", default="WARNING", help="logging level (DEBUG, INFO, ...)")
    args = ap.parse_args(argv)

    setup_logging(args.log_level)

    # 1) Start words: report problems, but only an unreadable file is fatal
    report = validate_start_words(args.words)
    logger.info(pretty_summary(report))
    try:
        start_words = load_start_words(args.words)
        spell_checker = _build_spell_checker(args)
        submissions = load_word_list(args.script, "script") if args.script else None
    except ConfigurationError as e:
        logger.error("%s", e)
        return 2

    # 2) First round
    selector = RootWordSelector(start_words, seed=args.seed)
    engine = ValidationEngine(selector.select(), spell_checker, language=args.language)

    # 3) Replay or play
    if submissions is not None:
        replay_script(engine, submissions, args, report)
    else:
        vocabulary = spell_checker.vocabulary(args.language)
        play_interactive(engine, selector, vocabulary, sys.stdin, sys.stdout)
    return 0


if __name__ == "__main__":
    sys.exit(main())
