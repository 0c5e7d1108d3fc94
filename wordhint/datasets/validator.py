"""
Dataset validator for wordhint.

What this module does:
- Validate a word/frequency list (`word frequency` per line).
- Count the lines that yield a usable 5-letter word, the ones skipped by the
  loader, and the ones whose frequency would abort loading.
- Detect duplicate words; compute SHA-256 of the raw file.
- Report how many words survive a `min_frequency` cut-off.
- Return a machine-readable dict (for manifests) and a pretty one-line summary.

Typical use:
    from wordhint.datasets import validate_frequency_list, pretty_summary
    rep = validate_frequency_list("data/freq.txt", min_frequency=1000)
    print(pretty_summary(rep))
"""

from __future__ import annotations

from dataclasses import dataclass, asdict, field
from pathlib import Path
from typing import Dict, List
import hashlib

from wordhint.engine import is_valid_word

from .io import is_frequency


# -----------------------------
# Dataclasses for structured reports
# -----------------------------

@dataclass
class FileReport:
    """Per-file diagnostics and metadata."""
    path: str             # file path (as given)
    exists: bool          # did the file exist on disk?
    sha256: str = ""      # SHA-256 of raw file bytes (empty string if missing)
    lines: int = 0        # total lines read
    count: int = 0        # lines with a valid 5-letter word and frequency
    unique_count: int = 0 # distinct valid words
    skipped_lines: int = 0  # blank or non-5-letter lines, ignored by the loader
    bad_frequency_lines: List[int] = field(default_factory=list)  # fatal at load time


@dataclass
class ValidationReport:
    """Top-level validation result for one frequency list."""
    file: FileReport
    min_frequency: int
    above_cutoff: int     # distinct words whose summed frequency >= min_frequency
    passed: bool
    issues: List[str]     # human-friendly list of problems (if any)


# -----------------------------
# Helpers
# -----------------------------

def _sha256_file(path: Path) -> str:
    """Compute SHA-256 of a file's raw bytes."""
    h = hashlib.sha256()
    with path.open("rb") as f:
        for chunk in iter(lambda: f.read(8192), b""):
            h.update(chunk)
    return h.hexdigest()


# -----------------------------
# Public API
# -----------------------------

def validate_frequency_list(path: str, min_frequency: int = 0) -> Dict:
    """
    Validate a word/frequency list without raising.

    Returns
    -------
    Dict
        A JSON-serializable dictionary (see ValidationReport schema). `passed`
        is strict: the file exists, no frequency is malformed, and at least one
        word survives the cut-off.
    """
    issues: List[str] = []
    p = Path(path)

    if not p.exists():
        issues.append(f"frequency file not found: {path}")
        rep = ValidationReport(FileReport(path, False), min_frequency, 0, False, issues)
        return asdict(rep)

    fr = FileReport(path=str(p), exists=True, sha256=_sha256_file(p))
    totals: Dict[str, int] = {}

    with p.open("r", encoding="utf-8") as f:
        for lineno, raw in enumerate(f, 1):
            fr.lines += 1
            fields = raw.split()
            if not fields or not is_valid_word(fields[0]):
                fr.skipped_lines += 1
                continue
            if len(fields) < 2 or not is_frequency(fields[1]):
                fr.bad_frequency_lines.append(lineno)
                continue
            fr.count += 1
            totals[fields[0]] = totals.get(fields[0], 0) + int(fields[1])

    fr.unique_count = len(totals)
    above = sum(1 for v in totals.values() if v >= min_frequency)

    if fr.bad_frequency_lines:
        # Surface a few examples to debug quickly (limit to 5 for brevity)
        issues.append(f"malformed frequency on line(s) {fr.bad_frequency_lines[:5]}")
    if fr.count == 0:
        issues.append("file contains 0 valid 5-letter words")
    elif above == 0:
        issues.append(f"no word reaches min_frequency={min_frequency}")
    if fr.count != fr.unique_count:
        issues.append(f"{fr.count - fr.unique_count} duplicate word line(s) (frequencies summed)")

    passed = not fr.bad_frequency_lines and above > 0

    rep = ValidationReport(
        file=fr,
        min_frequency=min_frequency,
        above_cutoff=above,
        passed=passed,
        issues=issues,
    )
    return asdict(rep)


def pretty_summary(report: Dict) -> str:
    """
    Produce a compact, human-friendly one-liner for console/docs.

    Example:
        freq.txt | words=12973 (uniq=12973, sha=abc123...) | skipped=1020 | >=1000: 5402 | OK
    """
    f = report["file"]
    status = "OK" if report["passed"] else "FAIL"
    sha = (f.get("sha256") or "")[:12]
    return (
        f"{f['path']} | words={f['count']} (uniq={f['unique_count']}, sha={sha}) "
        f"| skipped={f['skipped_lines']} | >={report['min_frequency']}: {report['above_cutoff']} "
        f"| {status}"
    )
