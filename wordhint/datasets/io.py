"""
Word/frequency list loading.

File format: one entry per line, whitespace-separated `word frequency`
(e.g. the Wikipedia word-frequency list). Only exact 5-letter lowercase a-z
words are kept; anything else is skipped silently. A frequency that is not plain
ASCII digits (no sign, no underscores) is a fatal load error.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict, Iterable, Iterator, List, Tuple

from wordhint.engine import Catalog, CatalogLoadError, Word, is_valid_word

log = logging.getLogger(__name__)


def read_lines(p: Path | str) -> List[str]:
    """
    Read a UTF-8 text file into a list of lines, stripping trailing CR/LF.
    Raises CatalogLoadError if the path doesn't exist or can't be read.
    """
    p = Path(p)
    if not p.exists():
        raise CatalogLoadError(f"word list not found: {p}")
    try:
        text = p.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise CatalogLoadError(f"failed to read word list {p}: {e}") from e
    return [ln.rstrip("\r\n") for ln in text.splitlines()]


def write_lines(lines: Iterable[str], p: Path | str) -> str:
    """
    Write lines to a UTF-8 text file, ensuring a trailing newline.
    Returns the string path written.
    """
    p = Path(p)
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return str(p)


def is_frequency(raw: str) -> bool:
    """Plain ASCII digits only: no sign, no underscores, no other scripts."""
    return raw.isascii() and raw.isdigit()


def parse_frequency(raw: str, lineno: int) -> int:
    if not is_frequency(raw):
        raise CatalogLoadError(f"line {lineno}: failed to parse frequency {raw!r}")
    return int(raw)


def iter_frequency_pairs(lines: Iterable[str]) -> Iterator[Tuple[str, int]]:
    """
    Yield (word, frequency) for every line whose word is a valid 5-letter word.

    Blank lines and non-conforming words are skipped. The frequency is only
    parsed for kept words; a bad one raises CatalogLoadError.
    """
    for lineno, line in enumerate(lines, 1):
        fields = line.split()
        if not fields or not is_valid_word(fields[0]):
            continue
        if len(fields) < 2:
            raise CatalogLoadError(f"line {lineno}: missing frequency for {fields[0]!r}")
        yield fields[0], parse_frequency(fields[1], lineno)


def load_catalog(path: Path | str, min_frequency: int = 0) -> Catalog:
    """
    Load a word/frequency list into a Catalog.

    Args:
      path          : text file, `word frequency` per line
      min_frequency : drop words seen fewer times than this in the corpus
                      (smaller, more common pool; rare answers may be lost)

    Duplicate words keep their first position and sum their frequencies.

    Raises:
      CatalogLoadError if the file is missing or a frequency is malformed.
    """
    freq: Dict[str, int] = {}
    for w, f in iter_frequency_pairs(read_lines(path)):
        freq[w] = freq.get(w, 0) + f

    words = [Word(w, f) for w, f in freq.items() if f >= min_frequency]
    log.info("loaded %d word(s) from %s (min_frequency=%d, %d below cut-off)",
             len(words), path, min_frequency, len(freq) - len(words))
    return Catalog(words)
