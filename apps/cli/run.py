# apps/cli/run.py
"""
CLI entry point for simulated games.

This script:
  1) Validates the word/frequency list (prints counts + SHA).
  2) Loads the catalog and instantiates the requested solver.
  3) Plays every requested answer to completion with a live progress bar and
     writes:
       - CSV:  per-case results + guess/feedback history columns
       - JSON: manifest with config, wordlist report, summary, git commit, etc.

Usage:
    python -m apps.cli.run --words data/freq.txt --answer glass --first-guess raise
    python -m apps.cli.run --words data/freq.txt --sample 200 --workers 4
"""

from __future__ import annotations

import argparse
import logging
import random
import sys
from pathlib import Path

from tqdm import tqdm

from wordhint.datasets import load_catalog, pretty_summary, read_lines, validate_frequency_list
from wordhint.engine import CatalogLoadError, is_valid_word
from wordhint.harness import run_batch, summarize
from wordhint.harness.io import write_csv, write_manifest, timestamp_id, git_commit_or_unknown
from wordhint.solvers import create_solver, get_solver_ids
from wordhint.solvers.config import add_config_arguments, config_from_args


def main():
    """
    Parse CLI args, validate the dataset, run the batch with progress, and write outputs.
    """
    solver_choices = ", ".join(get_solver_ids())

    ap = argparse.ArgumentParser(description="wordhint: simulate games against known answers")
    ap.add_argument("--solver", default="expected_left",
                    help=f"solver id (one of: {solver_choices})")
    ap.add_argument("--words", default="data/freq.txt",
                    help="word/frequency list (`word frequency` per line)")
    ap.add_argument("--min-frequency", type=int, default=1000,
                    help="drop words rarer than this from the initial pool")
    ap.add_argument("--answer", action="append",
                    help="hidden answer to play (repeatable); default: every catalog word")
    ap.add_argument("--answers-file",
                    help="file with one hidden answer per line (instead of --answer)")
    ap.add_argument("--first-guess", help="force the opening guess")
    ap.add_argument("--sample", type=int,
                    help="play only a subset of answers (deterministic by seed)")
    ap.add_argument("--seed", type=int, default=123, help="RNG seed for --sample")
    ap.add_argument("--outdir", default="reports", help="directory for output files")
    ap.add_argument("--progress", choices=["auto", "bar", "off"], default="auto",
                    help="show a progress bar (auto = only on a terminal)")
    ap.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    add_config_arguments(ap)
    args = ap.parse_args()

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING,
                        format="%(levelname)s %(name)s: %(message)s")

    if args.first_guess and not is_valid_word(args.first_guess):
        ap.error(f"--first-guess must be 5 lowercase letters, got {args.first_guess!r}")

    # 1) Validate the list and print a one-liner summary
    rep = validate_frequency_list(args.words, min_frequency=args.min_frequency)
    print(pretty_summary(rep))

    # 2) Load (fatal on error)
    try:
        catalog = load_catalog(args.words, min_frequency=args.min_frequency)
        if args.answers_file:
            answers = [ln.strip() for ln in read_lines(args.answers_file) if ln.strip()]
        else:
            answers = args.answer or catalog.texts()
    except CatalogLoadError as e:
        print(f"error: {e}", file=sys.stderr)
        sys.exit(1)

    try:
        config = config_from_args(args)
        solver = create_solver(args.solver, config)
    except ValueError as e:
        ap.error(str(e))

    # 3) Choose cases (deterministic sample by seed)
    if args.sample and args.sample < len(answers):
        pool = list(answers)
        random.Random(args.seed).shuffle(pool)
        answers = pool[: args.sample]

    known = set(catalog.texts())
    missing = [a for a in answers if a not in known]
    if missing:
        print(f"warning: {len(missing)} answer(s) not in the pool, e.g. {missing[:5]}",
              file=sys.stderr)

    mode = args.progress
    if mode == "auto":
        mode = "bar" if sys.stderr.isatty() else "off"
    progress = (lambda it: tqdm(it, ncols=80, desc="Playing", unit="game")) if mode == "bar" else None

    # 4) Play
    try:
        results = run_batch(solver, answers, words=catalog.words,
                            first_guess=args.first_guess, progress=progress)
    finally:
        solver.close()
    summary = summarize(results)

    if len(results) == 1:
        r = results[0]
        for g, line in r["history"]:
            print(f"{g}  {line}")
        print(f"{'PASS' if r['success'] else 'FAIL'}: {r['guesses']} guess(es)")

    print(f"games={summary['games']} wins={summary['wins']} "
          f"win_rate={summary['win_rate']:.3f} mean_guesses={summary['mean_guesses']:.3f} "
          f"max_guesses={summary['max_guesses']}")

    # 5) Write outputs (CSV + manifest)
    run_id = timestamp_id()
    outdir = Path(args.outdir)
    outdir.mkdir(parents=True, exist_ok=True)

    csv_path = outdir / f"run_{run_id}.csv"
    manifest_path = outdir / f"run_{run_id}_manifest.json"

    write_csv(results, str(csv_path))
    manifest = {
        "run_id": run_id,
        "git_commit": git_commit_or_unknown(),
        "config": vars(args),
        "suggest_config": config.as_dict(),
        "wordlist": rep,
        "num_cases": len(results),
        "summary": summary,
        "solver_id": solver.id,
    }
    write_manifest(manifest, str(manifest_path))

    print(f"Wrote: {csv_path}")
    print(f"Wrote: {manifest_path}")


if __name__ == "__main__":
    main()
