"""Fold word occurrences into per-word statistics."""

from collections.abc import Iterable

from wordspan.data_models.delimit import WordDelimiting
from wordspan.data_models.occurrence import Occurrence
from wordspan.data_models.word_stats import WordStats
from wordspan.seg.boundary import end_of_word_predicate
from wordspan.seg.tokenizer import count_lines, tokenize


def aggregate(
    occurrences: Iterable[Occurrence], total_lines: int
) -> dict[str, WordStats]:
    """Return word -> WordStats for every word that occurs at least once."""
    stats: dict[str, WordStats] = {}
    for occurrence in occurrences:
        word_stats = stats.setdefault(occurrence.word, WordStats())
        word_stats.set_total_lines(total_lines)
        word_stats.add_occurrence(occurrence.line)
    return stats


def merge_stats(partials: Iterable[dict[str, WordStats]]) -> dict[str, WordStats]:
    """Combine maps built from disjoint parts of the same text."""
    merged: dict[str, WordStats] = {}
    for partial in partials:
        for word, word_stats in partial.items():
            if word in merged:
                merged[word] = merged[word].merge(word_stats)
            else:
                merged[word] = word_stats.model_copy()
    return merged


def _split_at_lines(text: str, n_chunks: int) -> list[tuple[str, int]]:
    """Split text into at most n_chunks (piece, first_line) on newline boundaries."""
    lines = text.split("\n")
    per_chunk = max(1, -(-len(lines) // n_chunks))
    chunks = []
    for first in range(0, len(lines), per_chunk):
        chunks.append(("\n".join(lines[first : first + per_chunk]), first))
    return chunks


def aggregate_chunks(
    text: str,
    mode: WordDelimiting = WordDelimiting.camel_case,
    n_chunks: int = 4,
) -> dict[str, WordStats]:
    """Aggregate text piecewise and merge; same result as a single pass."""
    if n_chunks < 1:
        raise ValueError(f"n_chunks must be positive, got {n_chunks}")
    total_lines = count_lines(text)
    end_of_word = end_of_word_predicate(mode)
    partials = [
        aggregate(tokenize(piece, end_of_word, start_line=first), total_lines)
        for piece, first in _split_at_lines(text, n_chunks)
    ]
    return merge_stats(partials)
