from pathlib import Path

import pytest

from assistant_config.settings.atomic import atomic_write_text


def test_atomic_write_replaces_content(tmp_path: Path):
    p = tmp_path / "sub" / "file.txt"
    atomic_write_text(p, "one\n")
    atomic_write_text(p, "two\n")
    assert p.read_text(encoding="utf-8") == "two\n"
    assert sorted(x.name for x in p.parent.iterdir()) == ["file.txt"]


def test_atomic_write_encode_error_keeps_old_file_and_no_temp(tmp_path: Path):
    p = tmp_path / "file.txt"
    atomic_write_text(p, "old\n")

    with pytest.raises(UnicodeEncodeError):
        atomic_write_text(p, "bad \udcff\n")

    assert p.read_text(encoding="utf-8") == "old\n"
    assert sorted(x.name for x in tmp_path.iterdir()) == ["file.txt"]
