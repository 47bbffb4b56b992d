"""Render a ranking as a fixed-width text table."""

from wordspan.data_models.word_stats import RankedWord


def format_table(ranking: list[RankedWord]) -> str:
    """Aligned Word | # | span | proportion table, one row per word."""
    if not ranking:
        return ""
    width = max(len(r.word) for r in ranking) + 1
    lines = [
        f"{'Word':<{width}}|{'#':>4}|{'span':>4}|{'proportion':>11}",
        "-" * (width + 1 + 4 + 1 + 4),
    ]
    for r in ranking:
        percent = round(r.proportion * 100 * 100) / 100
        lines.append(f"{r.word:<{width}}|{r.count:>4}|{r.span:>4}|{percent:>10g}%")
    return "\n".join(lines) + "\n"
