import pytest

from wordscope.filemanager import create_test_file


def test_round_trip_utf8(tmp_path):
    content = "Война и мир.\nАнна Каренина!"
    path = create_test_file(tmp_path / "Война_и_мир.txt", content)
    assert path.read_bytes() == content.encode("utf-8")


def test_newlines_are_not_translated(tmp_path):
    content = "a\r\nb\n"
    path = create_test_file(str(tmp_path / "x.txt"), content)
    assert path.read_bytes() == content.encode("utf-8")


def test_overwrites_existing(tmp_path):
    target = tmp_path / "f.txt"
    create_test_file(target, "first long text")
    create_test_file(target, "второй")
    assert target.read_text(encoding="utf-8") == "второй"


def test_missing_directory_raises(tmp_path):
    with pytest.raises(OSError):
        create_test_file(tmp_path / "nope" / "f.txt", "text")