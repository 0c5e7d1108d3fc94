"""
Feedback marks for a single (guess, answer) pair.

Conventions (one mark per position, same symbols as the feedback grammar):
  - '+' : letter confirmed at this exact position
  - '~' : letter present in the answer, but at a different position
  - '-' : letter absent (or present fewer times than guessed)

This implementation is:
  - duplicate-safe (respects true letter multiplicities in the answer)
  - deterministic (same inputs -> same outputs)

Algorithm (two-pass):
  1) First pass marks all exact matches and counts the remaining (unmatched)
     letters of the answer.
  2) Second pass marks '~' left to right, only while the letter still has an
     unclaimed occurrence.
"""

from collections import Counter
from typing import Literal

WORD_LENGTH = 5

# Each mark is one of '+', '~', '-'
Mark = Literal["+", "~", "-"]
MARKS = "+~-"


def feedback_marks(guess: str, answer: str) -> str:
    """
    Compute the feedback marks for `guess` against `answer`.

    Preconditions:
      - len(guess) == len(answer)

    Returns:
      - string of length 5 composed only of '+', '~', '-'

    Examples:
      feedback_marks("sassy", "glass") -> "~~-+-"
      feedback_marks("lemon", "level") -> "++---"
    """
    assert len(guess) == len(answer), "Guess and answer must be the same length"

    marks = ["-"] * len(guess)

    # Pass 1: exact matches; everything else in the answer is still claimable.
    remaining = Counter()
    for i, (g, a) in enumerate(zip(guess, answer)):
        if g == a:
            marks[i] = "+"
        else:
            remaining[a] += 1

    # Pass 2: a '~' consumes one unclaimed occurrence.
    for i, g in enumerate(guess):
        if marks[i] == "+":
            continue
        if remaining[g] > 0:
            marks[i] = "~"
            remaining[g] -= 1

    return "".join(marks)


def render_feedback(guess: str, marks: str) -> str:
    """Join guess letters and marks into a feedback line, e.g. '+a -l ~p -h -a'."""
    return " ".join(m + g for g, m in zip(guess, marks))


def format_feedback(guess: str, answer: str) -> str:
    """The feedback line a game would show for `guess` when the answer is `answer`."""
    return render_feedback(guess, feedback_marks(guess, answer))
