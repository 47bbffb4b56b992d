"""Rank words by how often they occur."""

import polars as pl

from wordspan.data_models.delimit import WordDelimiting
from wordspan.data_models.word_stats import RankedWord, WordStats
from wordspan.seg.tokenizer import count_lines, tokenize_words
from wordspan.stats.aggregate import aggregate

WordCount = list[tuple[str, WordStats]]

_SCHEMA = {
    "word": pl.String,
    "count": pl.Int64,
    "span": pl.Int64,
    "proportion": pl.Float64,
}


def rank(stats: dict[str, WordStats]) -> WordCount:
    """Return (word, stats) pairs, most frequent first.

    Words with the same count are equal under the ranking order; they are
    visited alphabetically and the sort is stable, so ties stay alphabetical.
    """
    return sorted(sorted(stats.items()), key=lambda item: item[1], reverse=True)


def compute_ranking(
    text: str, mode: WordDelimiting = WordDelimiting.camel_case
) -> list[RankedWord]:
    occurrences = tokenize_words(text, mode)
    stats = aggregate(occurrences, count_lines(text))
    return [
        RankedWord(
            word=word,
            count=word_stats.count,
            span=word_stats.span(),
            proportion=word_stats.proportion(),
        )
        for word, word_stats in rank(stats)
    ]


def ranking_to_polars(ranking: list[RankedWord]) -> pl.DataFrame:
    if not ranking:
        return pl.DataFrame(schema=_SCHEMA)
    return pl.DataFrame([r.model_dump() for r in ranking], schema=_SCHEMA)
