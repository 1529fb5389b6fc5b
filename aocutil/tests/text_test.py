import pytest

from aocutil.geometry import Coordinate
from aocutil.text import (
    read_blocks, read_lines, read_lines_of_chars, remove_first_and_last,
    split_block_on_whitespace,
)


@pytest.fixture
def write_input(tmp_path):
    def write(text):
        path = tmp_path / 'input'
        path.write_bytes(text.encode('utf8'))
        return str(path)
    return write


def test_read_lines(write_input):
    path = write_input("498,4 -> 498,6\n503,4 -> 502,4\n")
    assert read_lines(path) == ["498,4 -> 498,6", "503,4 -> 502,4"]


def test_read_lines_windows_endings(write_input):
    path = write_input("abc\r\ndef")
    assert read_lines(path) == ["abc", "def"]


def test_read_lines_lone_carriage_return(write_input):
    # Only \n ends a line
    path = write_input("a\rb\nc\r")
    assert read_lines(path) == ["a\rb", "c\r"]
    assert read_lines_of_chars(path) == [['a', '\r', 'b'], ['c', '\r']]


def test_read_lines_into_coordinates(write_input):
    path = write_input("6,10\n0,14\n9,10\n")
    points = sorted(Coordinate.parse(line) for line in read_lines(path))
    assert points == [Coordinate(0, 14), Coordinate(6, 10), Coordinate(9, 10)]


def test_read_lines_of_chars(write_input):
    path = write_input("#.#\n.#.\n")
    grid = read_lines_of_chars(path)
    assert grid == [['#', '.', '#'], ['.', '#', '.']]

    point = Coordinate(1, 1)
    assert grid[point.y][point.x] == '#'


def test_read_blocks(write_input):
    path = write_input("a\nb\n\nc\n")
    assert read_blocks(path) == [["a", "b"], ["c"]]


def test_read_blocks_trailing_blank_line(write_input):
    path = write_input("a\nb\n\nc\n\n")
    assert read_blocks(path) == [["a", "b"], ["c"]]


def test_read_blocks_consecutive_blank_lines(write_input):
    path = write_input("a\n\n\nb")
    assert read_blocks(path) == [["a"], [], ["b"]]


def test_read_missing_file(tmp_path):
    with pytest.raises(OSError):
        read_lines(str(tmp_path / 'nope'))


def test_split_block_on_whitespace():
    block = [
        "pid:161cm eyr:2025 hcl:#b6652a",
        "cid:213",
        "ecl:xry",
        "hgt:150cm",
        "iyr:2024 byr:2012",
    ]
    assert split_block_on_whitespace(block) == [
        "pid:161cm",
        "eyr:2025",
        "hcl:#b6652a",
        "cid:213",
        "ecl:xry",
        "hgt:150cm",
        "iyr:2024",
        "byr:2012",
    ]


def test_remove_first_and_last():
    assert remove_first_and_last("[1,2,3]") == "1,2,3"
    assert remove_first_and_last("ab") == ""
    assert remove_first_and_last("a") == ""
    assert remove_first_and_last("") == ""
