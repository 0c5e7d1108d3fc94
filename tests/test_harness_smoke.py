import csv
from pathlib import Path

from wordhint.engine import Catalog, Word, format_feedback
from wordhint.harness import run_batch, run_case, summarize, write_csv
from wordhint.solvers import SuggestConfig, create_solver

WORDS = Catalog.from_pairs([
    ("crane", 900), ("slate", 800), ("trace", 700), ("crate", 600), ("react", 500),
    ("glass", 400), ("class", 300), ("brass", 200), ("grass", 100), ("cares", 50),
]).words


def test_run_case_smoke():
    solver = create_solver("expected_left")
    r = run_case(solver, "glass", words=WORDS)
    assert r["solved"] is True and r["success"] is True
    assert r["history"][-1] == ("glass", "+g +l +a +s +s")
    assert r["guesses"] == len(r["history"])


def test_run_case_forced_first_guess():
    solver = create_solver("positional_rank")
    r = run_case(solver, "crane", words=WORDS, first_guess="sassy")
    assert r["history"][0][0] == "sassy"
    assert r["solved"] is True


def test_run_case_answer_missing_from_pool_terminates():
    solver = create_solver("expected_left")
    r = run_case(solver, "zebra", words=WORDS)
    assert r["solved"] is False and r["success"] is False
    assert r["guesses"] >= 1


def test_every_answer_solved():
    solver = create_solver("expected_left", SuggestConfig(top_n=5))
    results = run_batch(solver, [w.text for w in WORDS], words=WORDS)
    assert all(r["solved"] for r in results)
    assert all(r["solver_id"] == "expected_left" for r in results)
    s = summarize(results)
    assert s["games"] == len(WORDS) and s["max_guesses"] <= len(WORDS)


def test_write_csv_excel_safe(tmp_path: Path):
    solver = create_solver("expected_left")
    results = run_batch(solver, ["glass", "crane"], words=WORDS)
    p = write_csv(results, str(tmp_path / "out" / "run.csv"))
    with open(p, newline="", encoding="utf-8") as f:
        rows = list(csv.DictReader(f))
    assert [r["answer"] for r in rows] == ["glass", "crane"]
    assert rows[0]["feedback_1"].startswith("'")
    assert rows[0]["solver"] == "expected_left"


def test_forced_first_guess_then_solver_plays_last_word():
    solver = create_solver("expected_left")
    r = run_case(solver, "crane", words=[Word("crane", 1)], first_guess="sassy")
    assert r["solved"] is True and r["success"] is True
    assert [g for g, _ in r["history"]] == ["sassy", "crane"]


def test_guess_that_empties_the_pool_is_recorded():
    solver = create_solver("expected_left")
    r = run_case(solver, "zebra", words=WORDS, first_guess="crane")
    assert r["solved"] is False
    assert r["guesses"] == 1
    assert r["history"][0] == ("crane", format_feedback("crane", "zebra"))
    assert r["remaining"] == len(WORDS)
