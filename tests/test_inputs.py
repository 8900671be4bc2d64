import pytest

from adventpuzzles.inputs import read_byte_lines, read_lines


def test_read_lines_strips_line_endings(tmp_path):
    path = tmp_path / "input.txt"
    path.write_bytes(b"first\nsecond\r\nthird")
    assert read_lines(path) == ["first", "second", "third"]


def test_read_lines_ignores_final_newline(tmp_path):
    path = tmp_path / "input.txt"
    path.write_bytes(b"one\ntwo\n")
    assert read_lines(path) == ["one", "two"]


def test_read_lines_keeps_inner_blank_lines(tmp_path):
    path = tmp_path / "input.txt"
    path.write_bytes(b"a\n\nb\n")
    assert read_lines(path) == ["a", "", "b"]


def test_read_lines_of_empty_file(tmp_path):
    path = tmp_path / "input.txt"
    path.write_bytes(b"")
    assert read_lines(path) == []


def test_read_byte_lines_splits_on_newline(tmp_path):
    path = tmp_path / "input.txt"
    path.write_bytes(b"ab\ncd\n")
    assert read_byte_lines(path) == [b"ab", b"cd", b""]


def test_read_byte_lines_round_trip(tmp_path):
    data = b"x\ny\r\nz"
    path = tmp_path / "input.txt"
    path.write_bytes(data)
    assert b"\n".join(read_byte_lines(path)) == data


@pytest.mark.parametrize("reader", [read_lines, read_byte_lines])
def test_missing_file_raises(tmp_path, reader):
    with pytest.raises(FileNotFoundError):
        reader(tmp_path / "absent.txt")