"""Rank the words of a source file by occurrence count and line span.

Usage:
    python -m wordspan.count \\
        --input yourCode.txt [--mode camel_case] [--top-n 20] \\
        [--output ranking.parquet]
"""

import argparse
import json
from pathlib import Path
import sys

import yaml

from wordspan.data_models.delimit import WordDelimiting
from wordspan.data_models.word_stats import RankedWord
from wordspan.source import load_text
from wordspan.stats.rank import compute_ranking, ranking_to_polars
from wordspan.viewer.table import format_table


def export_ranking(ranking: list[RankedWord], out_path: Path) -> None:
    """Write ranking to out_path in the format named by its suffix."""
    suffix = out_path.suffix.lower()
    if suffix == ".parquet":
        ranking_to_polars(ranking).write_parquet(out_path)
    elif suffix == ".csv":
        ranking_to_polars(ranking).write_csv(out_path)
    elif suffix == ".json":
        rows = [r.model_dump() for r in ranking]
        out_path.write_text(json.dumps(rows, indent=2))
    elif suffix in (".yaml", ".yml"):
        rows = [r.model_dump() for r in ranking]
        out_path.write_text(yaml.dump(rows, allow_unicode=True, sort_keys=False))
    else:
        raise ValueError(f"Unsupported output format: {out_path.suffix!r}")


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Rank words by count and span")
    parser.add_argument(
        "--input", default="yourCode.txt", help="Path to the source file"
    )
    parser.add_argument(
        "--mode",
        choices=[m.value for m in WordDelimiting],
        default=WordDelimiting.camel_case.value,
        help="How words are delimited",
    )
    parser.add_argument("--top-n", type=int, default=None, help="Rows to keep")
    parser.add_argument(
        "--output", default=None, help="Also write .parquet/.csv/.json/.yaml"
    )
    args = parser.parse_args(argv)

    print(f"Loading {args.input}...", file=sys.stderr)
    text = load_text(Path(args.input))

    ranking = compute_ranking(text, WordDelimiting(args.mode))
    if args.top_n is not None:
        ranking = ranking[: args.top_n]

    sys.stdout.write(format_table(ranking))

    if args.output:
        out_path = Path(args.output)
        out_path.parent.mkdir(parents=True, exist_ok=True)
        export_ranking(ranking, out_path)
        print(f"Wrote {len(ranking)} rows → {out_path}", file=sys.stderr)


if __name__ == "__main__":
    main()
