import os

import pytest

from deskmenu.utilities import (
    endswith,
    get_variable,
    have_equal_element,
    is_directory,
    join,
    replace,
    split,
    startswith,
    writen,
)


def test_split():
    result = ["abc", "\ndef", "", "", "g", ""]
    assert split("abc:\ndef:::g::", ":") == result
    assert split("abc:\ndef:::g:", ":") == result[:-1]
    assert split("abc:\ndef:::g", ":") == result[:-1]


def test_split_empty():
    assert split("", ":") == []
    assert split(":", ":") == [""]


def test_join():
    items = ["abc", "\ndef", "", "", "g", ""]
    assert join(items, ":") == "abc:\ndef:::g:"
    assert join(items[:-1], ":") == "abc:\ndef:::g"
    assert join([], " ") == ""


def test_join_default_delimiter():
    assert join(["/bin/sh", "-c", "exec true"]) == "/bin/sh -c exec true"


def test_split_join_round_trip():
    items = ["a", "", "b c", "d"]
    assert split(join(items, ":"), ":") == items


def test_have_equal_element():
    input1 = [str(i + 1) for i in range(100)]
    input2 = [str(i + 101) for i in range(100)]
    assert not have_equal_element(input1, input2)
    input2[41] = "5"
    assert have_equal_element(input1, input2)


def test_replace():
    text = "Content content ${placeholder} ${placeholder}"
    assert replace(text, "${placeholder}", "content") == "Content content content content"


def test_replace_empty_substring_is_noop():
    assert replace("abc", "", "x") == "abc"


def test_replace_substitute_contains_pattern():
    assert replace("aa", "a", "aa") == "aaaa"


def test_endswith():
    assert endswith("file.desktop", ".desktop")
    assert not endswith("file.desktop~", ".desktop")
    assert not endswith("sktop", ".desktop")


def test_startswith():
    assert startswith("Firefox --help", "Firefox")
    assert not startswith("Fire --help", "Firefox")
    assert not startswith("Fire", "Firefox")


def test_is_directory(tmp_path):
    assert is_directory("/")
    assert is_directory(str(tmp_path))
    regular = tmp_path / "file"
    regular.write_text("x")
    assert not is_directory(str(regular))
    assert not is_directory(str(tmp_path / "missing"))


def test_get_variable(monkeypatch):
    monkeypatch.setenv("VAR", "TEST")
    assert get_variable("VAR") == "TEST"
    monkeypatch.delenv("DOESNTEXIST", raising=False)
    assert get_variable("DOESNTEXIST") == ""


def test_writen():
    read_fd, write_fd = os.pipe()
    try:
        os.set_blocking(read_fd, False)
        data = b"DATADATADATA\0"
        assert writen(write_fd, data) == len(data)
        assert os.read(read_fd, len(data)) == data
        with pytest.raises(BlockingIOError):
            os.read(read_fd, 1)
    finally:
        os.close(read_fd)
        os.close(write_fd)


def test_writen_bad_fd(tmp_path):
    path = tmp_path / "f"
    path.write_text("")
    fd = os.open(path, os.O_RDONLY)
    try:
        with pytest.raises(OSError):
            writen(fd, b"data")
    finally:
        os.close(fd)