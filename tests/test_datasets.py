from pathlib import Path

import pytest
from wordhint.datasets import load_catalog, validate_frequency_list, pretty_summary
from wordhint.engine import Catalog, CatalogLoadError, ContradictionError, Word, parse_feedback


def _write(p: Path, lines):
    p.write_text("\n".join(lines) + "\n", encoding="utf-8")


def test_load_catalog_skips_nonconforming_words(tmp_path: Path):
    p = tmp_path / "freq.txt"
    _write(p, [
        "crane 500",
        "Crane 3",        # uppercase -> skipped
        "cranes 10",      # wrong length -> skipped
        "it's 999",       # punctuation -> skipped
        "",
        "slate 200",
        "héllo 7",        # non-ascii -> skipped
    ])
    cat = load_catalog(p)
    assert cat.texts() == ["crane", "slate"]
    assert [w.frequency for w in cat] == [500, 200]


def test_load_catalog_bad_frequency_is_fatal(tmp_path: Path):
    p = tmp_path / "freq.txt"
    _write(p, ["crane 500", "slate lots"])
    with pytest.raises(CatalogLoadError):
        load_catalog(p)


def test_load_catalog_missing_file(tmp_path: Path):
    with pytest.raises(CatalogLoadError):
        load_catalog(tmp_path / "nope.txt")


def test_load_catalog_min_frequency_and_duplicates(tmp_path: Path):
    p = tmp_path / "freq.txt"
    _write(p, ["crane 600", "slate 200", "crane 500", "trace 1500"])
    cat = load_catalog(p, min_frequency=1000)
    assert cat.texts() == ["crane", "trace"]
    assert cat[0].frequency == 1100


def test_word_rejects_bad_values():
    with pytest.raises(ValueError):
        Word("cranes", 1)
    with pytest.raises(ValueError):
        Word("crane", -1)


def test_catalog_prune_shrinks_and_reports_contradiction():
    cat = Catalog.from_pairs([("alpha", 5), ("allot", 4), ("apple", 3), ("adieu", 2), ("amber", 1)])
    _, delta = parse_feedback("+a -l -p -h -a")
    removed = cat.prune(delta)
    assert removed == 3
    assert cat.texts() == ["adieu", "amber"]
    assert "adieu" in cat and "alpha" not in cat

    _, impossible = parse_feedback("-a -x -y -z -w")
    with pytest.raises(ContradictionError):
        cat.prune(impossible)
    assert cat.texts() == ["adieu", "amber"]  # untouched


def test_validate_frequency_list_happy_path(tmp_path: Path):
    p = tmp_path / "freq.txt"
    _write(p, ["the 9999", "crane 1500", "slate 1200", "trace 50"])
    rep = validate_frequency_list(str(p), min_frequency=1000)
    assert rep["passed"] is True
    assert rep["file"]["count"] == 3
    assert rep["file"]["skipped_lines"] == 1
    assert rep["above_cutoff"] == 2
    s = pretty_summary(rep)
    assert "words=3" in s and s.endswith("OK")


def test_validate_frequency_list_flags_errors(tmp_path: Path):
    p = tmp_path / "freq.txt"
    _write(p, ["crane 10", "slate ten", "crane 5"])
    rep = validate_frequency_list(str(p))
    assert rep["passed"] is False
    assert rep["file"]["bad_frequency_lines"] == [2]
    assert any("malformed" in msg for msg in rep["issues"])
    assert any("duplicate" in msg for msg in rep["issues"])


def test_validate_frequency_list_missing(tmp_path: Path):
    rep = validate_frequency_list(str(tmp_path / "nope.txt"))
    assert rep["passed"] is False
    assert rep["file"]["exists"] is False
    assert "FAIL" in pretty_summary(rep)


def test_load_catalog_missing_frequency_is_fatal(tmp_path: Path):
    p = tmp_path / "freq.txt"
    _write(p, ["crane 500", "slate"])
    with pytest.raises(CatalogLoadError, match="missing frequency"):
        load_catalog(p)


@pytest.mark.parametrize("raw", ["1_000", "+5", "-3", "٣", "1.5"])
def test_frequency_must_be_plain_ascii_digits(tmp_path: Path, raw):
    p = tmp_path / "freq.txt"
    _write(p, ["crane 500", f"slate {raw}"])
    with pytest.raises(CatalogLoadError):
        load_catalog(p)
    rep = validate_frequency_list(str(p))
    assert rep["file"]["bad_frequency_lines"] == [2]
