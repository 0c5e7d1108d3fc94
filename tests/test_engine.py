import pytest
from wordhint.engine import (
    ConstraintModel, ContradictionError, FeedbackParseError,
    diff, feedback_marks, filter_words, format_feedback, parse_feedback, satisfies,
)

WORDS = [
    "glass", "sassy", "class", "lasso", "salsa", "sissy", "bills", "fills",
    "crane", "trace", "react", "eerie", "geese", "level", "belle", "abbey",
    "ebbed", "alpha", "allot", "apple", "adieu", "amber", "scoop", "cools",
]


# --- golden marks (duplicates + placements) ---
@pytest.mark.parametrize("guess,answer,expected", [
    ("belle", "level", "-+~~~"),
    ("level", "level", "+++++"),
    ("lemon", "level", "++---"),
    ("cools", "scoop", "~~+-~"),
    ("raise", "crane", "~~--+"),
    ("stare", "crane", "--+~+"),
    ("sassy", "glass", "~~-+-"),
])
def test_feedback_marks_golden(guess, answer, expected):
    assert feedback_marks(guess, answer) == expected


def test_format_feedback_line():
    assert format_feedback("sassy", "glass") == "~s ~a -s +s -y"


def test_diff_repeated_letters_sassy_glass():
    d = diff("sassy", "glass")
    assert d.fixed_position == [None, None, None, "s", None]
    assert d.excluded_at_position[0] == {"s"}
    assert d.excluded_at_position[1] == {"a"}
    # third 's' has no unclaimed copy left, but 's' is NOT absent
    assert d.excluded_at_position[2] == {"s"}
    assert d.must_contain == {"s", "a"}
    assert d.must_not_contain == {"y"}
    assert d.min_count["s"] == 2 and d.max_count["s"] == 2
    assert satisfies(d, "glass")
    assert satisfies(d, "class")
    assert not satisfies(d, "sassy")
    assert not satisfies(d, "lasso")  # 'a' was already tried at position 1


def test_diff_is_pure():
    a = diff("belle", "level")
    b = diff("belle", "level")
    assert repr(a) == repr(b)
    assert a is not b


@pytest.mark.parametrize("guess", WORDS)
def test_soundness_answer_survives_its_own_feedback(guess):
    for answer in WORDS:
        assert answer in filter_words(diff(guess, answer), WORDS), (guess, answer)


@pytest.mark.parametrize("guess", ["sassy", "belle", "eerie", "abbey", "crane"])
def test_filter_matches_exactly_the_same_feedback(guess):
    for answer in WORDS:
        got = filter_words(diff(guess, answer), WORDS)
        want = [w for w in WORDS if feedback_marks(guess, w) == feedback_marks(guess, answer)]
        assert got == want, (guess, answer)


def test_filter_monotonic_and_idempotent():
    m1 = diff("crane", "glass")
    once = filter_words(m1, WORDS)
    assert len(once) <= len(WORDS)
    assert filter_words(m1, once) == once

    m2 = m1.copy()
    m2.merge(diff("salsa", "glass"))
    twice = filter_words(m2, once)
    assert len(twice) <= len(once)
    assert "glass" in twice


def test_filter_is_stable():
    words = ["trace", "crane", "react"]
    m = ConstraintModel()
    assert filter_words(m, words) == words


def test_scenario_alpha_feedback():
    cat = ["alpha", "allot", "apple", "adieu", "amber"]
    guess, delta = parse_feedback("+a -l -p -h -a")
    assert guess == "alpha"
    kept = filter_words(delta, cat)
    assert kept == ["adieu", "amber"]
    for w in kept:
        assert w[0] == "a"
        assert not set("lph") & set(w)


def test_parse_feedback_builds_same_delta_as_diff():
    line = format_feedback("belle", "level")
    guess, delta = parse_feedback(line)
    assert guess == "belle"
    assert repr(delta) == repr(diff("belle", "level"))


@pytest.mark.parametrize("line", [
    "+a -l -p -h",            # too few fields
    "+a -l -p -h -a -x",      # too many
    "+al -l -p -h -a",        # token too long
    "+ -l -p -h -a",          # token too short
    "*a -l -p -h -a",         # unknown operator
    "+A -l -p -h -a",         # uppercase
    "+1 -l -p -h -a",         # not a letter
    "",
])
def test_parse_feedback_rejects_malformed(line):
    with pytest.raises(FeedbackParseError):
        parse_feedback(line)


def test_parse_error_is_a_value_error_not_contradiction():
    with pytest.raises(ValueError):
        parse_feedback("nope")
    assert not issubclass(FeedbackParseError, ContradictionError)


def test_merge_contradiction_required_and_absent():
    m = ConstraintModel()
    m.merge(parse_feedback("+a -b -c -d -e")[1])
    before = repr(m)
    with pytest.raises(ContradictionError):
        m.merge(parse_feedback("-a -x -y -z -w")[1])
    assert repr(m) == before  # untouched


def test_merge_contradiction_fixed_and_excluded_same_position():
    m = ConstraintModel()
    m.merge(parse_feedback("+a -b -c -d -e")[1])
    with pytest.raises(ContradictionError):
        m.merge(parse_feedback("~a -x -y -z -w")[1])


def test_merge_contradiction_two_letters_fixed_at_one_position():
    m = ConstraintModel()
    m.merge(parse_feedback("+a -b -c -d -e")[1])
    with pytest.raises(ContradictionError):
        m.merge(parse_feedback("+q -x -y -z -w")[1])


def test_reset_and_load_marks_reuse_storage():
    m = ConstraintModel()
    assert m.is_empty()
    m.merge(diff("crane", "glass"))
    assert not m.is_empty()
    excluded = m.excluded_at_position
    m.reset()
    assert m.is_empty()
    m.load_marks("crane", "+++++")
    assert m.excluded_at_position is excluded
    assert m.fixed_position == list("crane")
