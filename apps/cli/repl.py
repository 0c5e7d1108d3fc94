# apps/cli/repl.py
"""
Interactive guess helper.

Reads one feedback line per guess from stdin and prints ranked suggestions:

    freq: 123456   score: 98    exp: 12.40: crane
    ...
    5402 candidates

Feedback line: five fields `XY` where X is -, +, or ~ and Y is the letter you
played at that position, e.g. `+a -l ~p -h -a`. An empty line (or EOF) quits.
Commands: `reset` starts over, `quit` exits.

Suggestions print most-preferred LAST so the best word sits right above the
prompt.

Usage:
    python -m apps.cli.repl --words data/freq.txt
    python -m apps.cli.repl --words data/freq.txt --cpuprofile repl.prof
"""

from __future__ import annotations

import argparse
import cProfile
import logging
import sys
from typing import TextIO

from wordhint.datasets import load_catalog, pretty_summary, validate_frequency_list
from wordhint.engine import CatalogLoadError, ContradictionError, FeedbackParseError
from wordhint.harness import Session, State
from wordhint.solvers import Suggestions
from wordhint.solvers.config import add_config_arguments, config_from_args

HELP = """\
Enter 5 fields of the form XY where X is -, +, or ~ and Y is a letter a-z.
\t- means wrong letter; doesn't appear in the word
\t+ means correct letter
\t~ means letter appears in the word in a different position"""


def print_suggestions(out: Suggestions, stream: TextIO = sys.stdout) -> None:
    for s in reversed(out.ranked):
        exp = f"{s.expected:<5.2f}" if s.expected is not None else "-    "
        print(f"freq: {s.frequency:<8d} score: {s.score:<5d} exp: {exp}: {s.word}", file=stream)
    print(f"{out.total} candidates", file=stream)


def repl(session: Session, stdin: TextIO = sys.stdin, stdout: TextIO = sys.stdout) -> Session:
    """
    Read -> parse -> apply -> report, until EOF, an empty line or `quit`.
    Returns the session in its final state.
    """
    print_suggestions(session.suggest(), stdout)
    for raw in stdin:
        line = raw.strip()
        if not line or line == "quit":
            break
        if line == "reset":
            session.reset()
            print_suggestions(session.suggest(), stdout)
            continue
        if session.state is State.CONTRADICTION:
            print("No candidates fit the feedback so far; type `reset` to start over.", file=stdout)
            continue

        try:
            session.apply_feedback(line)
        except FeedbackParseError as e:
            print(f"error: {e}", file=stdout)
            print(HELP, file=stdout)
            continue
        except ContradictionError as e:
            print(f"contradiction: {e}", file=stdout)
            print("No candidates fit the feedback so far; type `reset` to start over.", file=stdout)
            continue

        print_suggestions(session.suggest(), stdout)
        if session.state is State.SOLVED:
            print(f"solved: {session.answer}", file=stdout)
            break

    if not session.done:
        session.stop()
    return session


def main():
    ap = argparse.ArgumentParser(description="wordhint: interactive next-guess suggestions")
    ap.add_argument("--words", default="data/freq.txt",
                    help="word/frequency list (`word frequency` per line)")
    ap.add_argument("--min-frequency", type=int, default=1000,
                    help="drop words rarer than this from the initial pool")
    ap.add_argument("--cpuprofile", metavar="FILE", help="write cpu profile to FILE")
    ap.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    add_config_arguments(ap)
    args = ap.parse_args()

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING,
                        format="%(levelname)s %(name)s: %(message)s")

    try:
        config = config_from_args(args)
    except ValueError as e:
        ap.error(str(e))

    print(pretty_summary(validate_frequency_list(args.words, args.min_frequency)))
    try:
        catalog = load_catalog(args.words, min_frequency=args.min_frequency)
    except CatalogLoadError as e:
        print(f"error: {e}", file=sys.stderr)
        sys.exit(1)

    session = Session(catalog, config)
    if args.cpuprofile:
        prof = cProfile.Profile()
        try:
            prof.runcall(repl, session)
        finally:
            prof.dump_stats(args.cpuprofile)
    else:
        repl(session)


if __name__ == "__main__":
    main()
