"""
Exception types raised by the engine and surfaced by the session/CLI layers.

Taxonomy:
  - CatalogLoadError   : word list missing or unparseable (fatal).
  - FeedbackParseError : malformed feedback line (recoverable; nothing mutated).
  - ContradictionError : feedback that no word can satisfy (recoverable by reset).
"""


class WordhintError(Exception):
    """Base class for every error raised by wordhint."""


class CatalogLoadError(WordhintError):
    """The word/frequency source could not be read or parsed."""


class FeedbackParseError(WordhintError, ValueError):
    """A feedback line does not follow the `<op><letter>` x5 grammar."""


class ContradictionError(WordhintError):
    """
    Accumulated feedback is inconsistent: either a constraint merge broke an
    invariant of the model, or filtering left zero candidates.
    """
