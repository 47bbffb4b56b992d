"""Character classes that decide where identifier-like words end."""

from collections.abc import Callable
import string

from wordspan.data_models.delimit import WordDelimiting

_WORD_CHARS = frozenset(string.ascii_letters + string.digits + "_")
_UPPERCASE = frozenset(string.ascii_uppercase)


def is_word_char(c: str) -> bool:
    return c in _WORD_CHARS


def is_boundary(c: str) -> bool:
    """True for anything that cannot appear in an ASCII identifier."""
    return c not in _WORD_CHARS


def is_camel_case_boundary(c: str) -> bool:
    """Like is_boundary, but an uppercase letter also starts a new word."""
    return c not in _WORD_CHARS or c in _UPPERCASE


def end_of_word_predicate(mode: WordDelimiting) -> Callable[[str], bool]:
    if mode is WordDelimiting.camel_case:
        return is_camel_case_boundary
    return is_boundary
