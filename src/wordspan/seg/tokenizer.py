"""Scan a text buffer into (word, line) occurrences."""

from collections.abc import Callable

from wordspan.data_models.delimit import WordDelimiting
from wordspan.data_models.occurrence import Occurrence
from wordspan.seg.boundary import end_of_word_predicate, is_word_char


def _next_word_start(text: str, pos: int) -> int:
    n = len(text)
    while pos < n and not is_word_char(text[pos]):
        pos += 1
    return pos


def _word_end(text: str, start: int, end_of_word: Callable[[str], bool]) -> int:
    # the first character always belongs to the word
    pos = start + 1
    n = len(text)
    while pos < n and not end_of_word(text[pos]):
        pos += 1
    return pos


def tokenize(
    text: str,
    end_of_word: Callable[[str], bool],
    *,
    start_line: int = 0,
) -> list[Occurrence]:
    """Return every word of text in scan order, with its zero-based line.

    end_of_word decides which characters terminate a word once it has
    started; start_line offsets the line numbers when text is a slice of a
    larger buffer.
    """
    occurrences: list[Occurrence] = []
    line = start_line
    word_end = 0
    word_start = _next_word_start(text, 0)
    while word_start < len(text):
        line += text.count("\n", word_end, word_start)
        word_end = _word_end(text, word_start, end_of_word)
        occurrences.append(Occurrence(word=text[word_start:word_end], line=line))
        word_start = _next_word_start(text, word_end)
    return occurrences


def tokenize_words(
    text: str, mode: WordDelimiting = WordDelimiting.camel_case
) -> list[Occurrence]:
    return tokenize(text, end_of_word_predicate(mode))


def count_lines(text: str) -> int:
    """Number of lines in text; a buffer without newlines has one line."""
    return text.count("\n") + 1
