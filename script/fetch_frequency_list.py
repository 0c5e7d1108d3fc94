"""
Download a word/frequency list and keep only the 5-letter entries.

What it does:
- Downloads the Wikipedia word-frequency list (`word count` per line).
- Keeps lines whose word is exactly 5 lowercase a-z letters.
- Optionally drops words below --min-frequency.
- Writes `word frequency` lines, most frequent first, ready for the loader.

Usage:
    python -m script.fetch_frequency_list --out data/freq.txt
    python -m script.fetch_frequency_list --min-frequency 1000 --out data/freq.txt
"""

import argparse

import requests

from wordhint.datasets import write_lines
from wordhint.datasets.io import iter_frequency_pairs

URL = ("https://raw.githubusercontent.com/IlyaSemenov/wikipedia-word-frequency/"
       "master/results/enwiki-20190320-words-frequency.txt")


def fetch_pairs(url: str = URL, min_frequency: int = 0) -> list[tuple[str, int]]:
    r = requests.get(url, timeout=60)
    r.raise_for_status()
    totals: dict[str, int] = {}
    for w, f in iter_frequency_pairs(r.text.splitlines()):
        totals[w] = totals.get(w, 0) + f
    pairs = [(w, f) for w, f in totals.items() if f >= min_frequency]
    pairs.sort(key=lambda p: p[1], reverse=True)
    return pairs


def main():
    ap = argparse.ArgumentParser(description="Fetch a 5-letter word/frequency list")
    ap.add_argument("--url", default=URL)
    ap.add_argument("--out", default="data/freq.txt")
    ap.add_argument("--min-frequency", type=int, default=0)
    args = ap.parse_args()

    pairs = fetch_pairs(args.url, args.min_frequency)
    write_lines((f"{w} {f}" for w, f in pairs), args.out)
    print(f"Wrote {len(pairs)} words -> {args.out}")


if __name__ == "__main__":
    main()
