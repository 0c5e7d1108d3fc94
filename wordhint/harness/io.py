"""
I/O utilities for simulation runs.

Responsibilities:
- write_csv:      flatten per-game results into a tidy CSV (one row per game).
- write_manifest: dump a JSON manifest with config, dataset report and metadata.
- timestamp_id:   stable UTC run ID string.
- git_commit_or_unknown: best-effort short commit hash for reproducibility.

Notes:
- Feedback lines are prefixed with an apostrophe to keep Excel from reading
  strings like "+a -l ~p -h -a" as formulas (which would display as #NAME?).
"""

from __future__ import annotations

from pathlib import Path
from typing import Dict, List
import csv
import json
import subprocess
import datetime as dt


def _excel_safe(line: str) -> str:
    """
    Prefix with an apostrophe so spreadsheet apps treat it as text.
    Example: "+c -r ~a -n -e" -> "'+c -r ~a -n -e"
    """
    return "'" + line if line else line


def write_csv(results: List[Dict], path: str) -> str:
    """
    Serialize a batch of game results to CSV.

    Schema (columns):
      solver, answer, success, solved, guesses, remaining, time_ms,
      guess_1, feedback_1, ..., guess_K, feedback_K
    where K is the longest game in the batch (games are not capped at 6).

    Returns:
      The path written (string).
    """
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)

    turns = max((len(r.get("history", [])) for r in results), default=0)
    fields = ["solver", "answer", "success", "solved", "guesses", "remaining", "time_ms"]
    for i in range(1, turns + 1):
        fields += [f"guess_{i}", f"feedback_{i}"]

    with p.open("w", newline="", encoding="utf-8") as f:
        w = csv.DictWriter(f, fieldnames=fields)
        w.writeheader()

        for r in results:
            row = {
                "solver": r.get("solver_id", "?"),
                "answer": r["answer"],
                "success": r["success"],
                "solved": r["solved"],
                "guesses": r["guesses"],
                "remaining": r.get("remaining", ""),
                "time_ms": round(float(r["time_ms"]), 3),
            }

            # Expand history into fixed columns (Excel-safe feedback)
            hist = r.get("history", [])
            for i in range(1, turns + 1):
                if i <= len(hist):
                    g, line = hist[i - 1]
                    row[f"guess_{i}"] = g
                    row[f"feedback_{i}"] = _excel_safe(line)
                else:
                    row[f"guess_{i}"] = ""
                    row[f"feedback_{i}"] = ""

            w.writerow(row)

    return str(p)


def summarize(results: List[Dict]) -> Dict:
    """Win rate and guess-count stats for a batch (solved games only for the mean)."""
    n = len(results)
    wins = sum(1 for r in results if r["success"])
    solved = [r["guesses"] for r in results if r["solved"]]
    return {
        "games": n,
        "wins": wins,
        "win_rate": (wins / n) if n else 0.0,
        "mean_guesses": (sum(solved) / len(solved)) if solved else 0.0,
        "max_guesses": max(solved, default=0),
    }


def write_manifest(manifest: Dict, path: str) -> str:
    """
    Write a JSON manifest with run configuration and dataset validation summary.

    Typical keys:
      - run_id, git_commit
      - config: CLI args (solver, paths, thresholds, sample, outdir)
      - wordlist: output of datasets.validate_frequency_list(...)
      - summary: output of summarize(...)
    """
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    with p.open("w", encoding="utf-8") as f:
        json.dump(manifest, f, indent=2)
    return str(p)


def timestamp_id() -> str:
    """
    Return a compact UTC timestamp suitable for filenames, e.g. 20250820T024121Z.
    """
    return dt.datetime.now(dt.timezone.utc).strftime("%Y%m%dT%H%M%SZ")


def git_commit_or_unknown() -> str:
    """
    Best-effort short git hash of the current repo state.
    Returns 'unknown' if git is not available or the call fails.
    """
    try:
        return (
            subprocess.check_output(
                ["git", "rev-parse", "--short", "HEAD"],
                stderr=subprocess.DEVNULL,
            )
            .decode()
            .strip()
        )
    except (OSError, subprocess.CalledProcessError):
        return "unknown"
