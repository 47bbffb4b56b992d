from pydantic import BaseModel, ConfigDict, Field

from wordspan.ordering import LessThanOrdered


class Occurrence(LessThanOrdered, BaseModel):
    """One word instance found by the tokenizer."""

    model_config = ConfigDict(frozen=True)

    word: str
    line: int = Field(ge=0)  # zero-based

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Occurrence):
            return NotImplemented
        if self.word != other.word:
            return self.word < other.word
        return self.line < other.line
