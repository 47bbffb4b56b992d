from pydantic import BaseModel, ConfigDict, Field

from wordspan.ordering import LessThanOrdered


class WordStats(LessThanOrdered, BaseModel):
    """Usage statistics of one word across a text buffer.

    Ordered by occurrence count only: two stats with the same count compare
    equal whatever lines they cover.
    """

    model_config = ConfigDict(validate_assignment=True)

    total_lines: int | None = Field(default=None, ge=0)
    count: int = Field(default=0, ge=0)
    min_line: int | None = None  # unset until the first occurrence
    max_line: int | None = None

    def set_total_lines(self, total_lines: int) -> None:
        self.total_lines = total_lines

    def add_occurrence(self, line: int) -> None:
        self.count += 1
        if self.min_line is None or self.max_line is None:
            self.min_line = self.max_line = line
        else:
            self.min_line = min(self.min_line, line)
            self.max_line = max(self.max_line, line)

    def span(self) -> int:
        """Inclusive number of lines from the first to the last occurrence."""
        if self.count == 0 or self.min_line is None or self.max_line is None:
            return 0
        return self.max_line - self.min_line + 1

    def proportion(self) -> float:
        """Span as a fraction of the buffer's line count (0.0 if unknown)."""
        if not self.total_lines:
            return 0.0
        return self.span() / self.total_lines

    def merge(self, other: "WordStats") -> "WordStats":
        """Combine the stats of the same word gathered from two parts of a text."""
        if other.count == 0:
            return self.model_copy()
        if self.count == 0:
            return other.model_copy()
        return WordStats(
            total_lines=self.total_lines
            if self.total_lines is not None
            else other.total_lines,
            count=self.count + other.count,
            min_line=min(self.min_line, other.min_line),
            max_line=max(self.max_line, other.max_line),
        )

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, WordStats):
            return NotImplemented
        return self.count < other.count


class RankedWord(BaseModel):
    """A flattened row of the ranking, as handed to presenters and exporters."""

    model_config = ConfigDict(frozen=True)

    word: str
    count: int
    span: int
    proportion: float
