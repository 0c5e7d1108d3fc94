import io

import pytest
from wordhint.engine import Catalog, ContradictionError, FeedbackParseError
from wordhint.harness import Session, State

from apps.cli.repl import repl


def _catalog():
    return Catalog.from_pairs([("crane", 40), ("crate", 30), ("trace", 20), ("react", 10)])


def test_session_happy_path_transitions():
    s = Session(_catalog())
    assert s.state is State.AWAITING_GUESS
    out = s.suggest()
    assert out.total == 4
    assert s.state is State.AWAITING_FEEDBACK

    # guessed 'crate', the answer is 'crane'
    left = s.apply_feedback("+c +r +a -t +e")
    assert left == 1
    assert s.state is State.SOLVED and s.done
    assert s.answer == "crane"
    assert s.history == [("crate", "+c +r +a -t +e")]


def test_parse_error_leaves_session_untouched():
    s = Session(_catalog())
    s.suggest()
    with pytest.raises(FeedbackParseError):
        s.apply_feedback("+c +r +a")
    assert s.state is State.AWAITING_FEEDBACK
    assert s.remaining == 4
    assert s.model.is_empty()
    assert s.history == []


def test_contradiction_is_reported_and_recoverable_by_reset():
    s = Session(_catalog())
    with pytest.raises(ContradictionError):
        s.apply_feedback("-c -r -a -n -e")
    assert s.state is State.CONTRADICTION
    assert s.remaining == 4  # last consistent pool kept
    with pytest.raises(RuntimeError):
        s.suggest()

    s.reset()
    assert s.state is State.AWAITING_GUESS
    assert s.remaining == 4 and s.model.is_empty()


def test_contradiction_between_two_feedback_lines():
    s = Session(_catalog())
    assert s.apply_feedback("~r -x -y -z -w") == 3  # drops 'react'
    with pytest.raises(ContradictionError):
        s.apply_feedback("-r -x -y -z -w")  # 'r' was confirmed present
    assert s.state is State.CONTRADICTION


def test_stop_ends_session():
    s = Session(_catalog())
    s.stop()
    assert s.done
    with pytest.raises(RuntimeError):
        s.apply_feedback("+c +r +a -t +e")


def test_repl_reads_feedback_until_solved():
    stdin = io.StringIO("bad line\n+c +r +a -t +e\n")
    stdout = io.StringIO()
    s = repl(Session(_catalog()), stdin, stdout)
    text = stdout.getvalue()
    assert "4 candidates" in text
    assert "error:" in text and "~ means letter appears" in text
    assert "solved: crane" in text
    assert s.state is State.SOLVED


def test_repl_reports_contradiction_and_resets():
    stdin = io.StringIO("-c -r -a -n -e\nreset\n\n")
    stdout = io.StringIO()
    s = repl(Session(_catalog()), stdin, stdout)
    text = stdout.getvalue()
    assert "contradiction:" in text
    assert text.count("4 candidates") == 2
    assert s.state is State.STOPPED


def test_empty_initial_pool():
    s = Session(Catalog([]))
    assert s.state is State.AWAITING_GUESS and not s.done
    out = s.suggest()
    assert out.ranked == [] and out.total == 0
    with pytest.raises(ContradictionError):
        s.apply_feedback("-c -r -a -n -e")
    assert s.state is State.CONTRADICTION
    assert s.history == []
