from .scoring import feedback_marks, format_feedback, WORD_LENGTH
from .constraints import ConstraintModel, diff, parse_feedback, satisfies, filter_words
from .catalog import Word, Catalog, is_valid_word
from .errors import WordhintError, CatalogLoadError, FeedbackParseError, ContradictionError

__all__ = [
    "feedback_marks", "format_feedback", "WORD_LENGTH",
    "ConstraintModel", "diff", "parse_feedback", "satisfies", "filter_words",
    "Word", "Catalog", "is_valid_word",
    "WordhintError", "CatalogLoadError", "FeedbackParseError", "ContradictionError",
]
