import pytest

from wordspan.data_models.occurrence import Occurrence


def test_orders_by_word_then_line():
    occurrences = [
        Occurrence(word="foo", line=3),
        Occurrence(word="bar", line=9),
        Occurrence(word="foo", line=1),
    ]
    assert sorted(occurrences) == [
        Occurrence(word="bar", line=9),
        Occurrence(word="foo", line=1),
        Occurrence(word="foo", line=3),
    ]


def test_equality_and_hash():
    a = Occurrence(word="x", line=2)
    b = Occurrence(word="x", line=2)
    assert a == b
    assert a != Occurrence(word="x", line=3)
    assert len({a, b}) == 1


def test_frozen():
    occurrence = Occurrence(word="x", line=0)
    with pytest.raises(ValueError):
        occurrence.word = "y"  # type: ignore[misc]


def test_negative_line_rejected():
    with pytest.raises(ValueError):
        Occurrence(word="x", line=-1)
