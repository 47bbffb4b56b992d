from pathlib import Path

import pytest

from wordspan.source import load_text


def test_reads_whole_file(tmp_path: Path) -> None:
    path = tmp_path / "code.txt"
    path.write_text("int fooBar;\nfoo();\n")
    assert load_text(path) == "int fooBar;\nfoo();\n"


def test_undecodable_bytes_are_replaced(tmp_path: Path) -> None:
    path = tmp_path / "latin1.txt"
    path.write_bytes(b"caf\xe9 bar")
    assert load_text(path) == "caf� bar"


def test_missing_file_raises(tmp_path: Path) -> None:
    with pytest.raises(OSError):
        load_text(tmp_path / "missing.txt")
