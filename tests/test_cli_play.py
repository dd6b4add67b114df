import io
import json
import logging

import pytest

from apps.cli import play
from packages.dictionary import StaticSpellChecker
from packages.engine import RootWordSelector, ValidationEngine


def test_replay_script_writes_reports(tmp_path):
    words = tmp_path / "start.txt"
    words.write_text("cabbage\n", encoding="utf-8")
    dictionary = tmp_path / "dict.txt"
    dictionary.write_text("cab\nbag\nage\n", encoding="utf-8")
    script = tmp_path / "moves.txt"
    script.write_text("cab\nbad\nbag\ncab\n", encoding="utf-8")
    outdir = tmp_path / "reports"

    rc = play.main(["--words", str(words), "--dictionary", str(dictionary),
                    "--script", str(script), "--outdir", str(outdir), "--seed", "1"])
    assert rc == 0

    manifests = list(outdir.glob("*_manifest.json"))
    assert len(manifests) == 1
    m = json.loads(manifests[0].read_text(encoding="utf-8"))
    assert m["root"] == "cabbage" and m["score"] == 2
    assert m["history"] == ["bag", "cab"]
    assert len(list(outdir.glob("*.csv"))) == 1


def test_missing_start_words_exits_with_config_error(tmp_path):
    rc = play.main(["--words", str(tmp_path / "nope.txt"),
                    "--dictionary", str(tmp_path / "nope.txt")])
    assert rc == 2


def test_interactive_commands():
    checker = StaticSpellChecker(["cab", "age"])
    engine = ValidationEngine("cabbage", checker)
    selector = RootWordSelector(["cabbage"], seed=0)
    inp = io.StringIO("cab\ncab\n:hint\n:new\nage\n:quit\nbag\n")
    out = io.StringIO()

    play.play_interactive(engine, selector, ["cab", "age"], inp, out)
    text = out.getvalue()
    assert "Word used already: Be more original" in text
    assert "hints: age" in text
    # :new reset the round, :quit stopped before "bag"
    assert engine.history == ["age"] and engine.score == 1
    assert text.rstrip().endswith("Final score: 1")


def _files(tmp_path):
    words = tmp_path / "start.txt"
    words.write_text("cabbage\n", encoding="utf-8")
    lexicon = tmp_path / "lexicon.txt"
    lexicon.write_text("cab\nbag\n", encoding="utf-8")
    script = tmp_path / "moves.txt"
    script.write_text("cab\n", encoding="utf-8")
    return words, lexicon, script


def test_unsupported_language_exits_with_config_error(tmp_path):
    words, lexicon, script = _files(tmp_path)
    rc = play.main(["--words", str(words), "--lexicon", str(lexicon), "--language", "xx",
                    "--script", str(script), "--outdir", str(tmp_path / "out")])
    assert rc == 2
    assert not (tmp_path / "out").exists()


def test_missing_lexicon_exits_with_config_error(tmp_path):
    words, _, script = _files(tmp_path)
    rc = play.main(["--words", str(words), "--lexicon", str(tmp_path / "nope.txt"),
                    "--script", str(script)])
    assert rc == 2


@pytest.mark.parametrize("which", ["--dictionary", "--script"])
def test_non_utf8_files_exit_with_config_error(tmp_path, which):
    words, lexicon, script = _files(tmp_path)
    bad = tmp_path / "latin1.txt"
    bad.write_bytes("caf\xe9\n".encode("latin-1"))
    args = {"--dictionary": str(lexicon), "--script": str(script)}
    args[which] = str(bad)
    rc = play.main(["--words", str(words), "--dictionary", args["--dictionary"],
                    "--script", args["--script"], "--outdir", str(tmp_path / "out")])
    assert rc == 2


def test_repeated_runs_do_not_stack_log_handlers(tmp_path):
    words, lexicon, script = _files(tmp_path)
    argv = ["--words", str(words), "--dictionary", str(lexicon),
            "--script", str(script), "--outdir", str(tmp_path / "out")]
    assert play.main(argv) == 0
    assert play.main(argv) == 0
    assert len(logging.getLogger().handlers) == 1


def test_help_text_is_plain_ascii(capsys):
    with pytest.raises(SystemExit):
        play.main(["--help"])
    assert capsys.readouterr().out.isascii()
