import pytest

from minish.strutils import split, strchr, strjoin, strncmp


def test_split_drops_empty_words():
    assert split("  hello   world  ", " ") == ["hello", "world"]


def test_split_empty_string():
    assert split("", ",") == []


def test_split_only_separators():
    assert split(",,,,", ",") == []


def test_split_join_round_trip():
    words = ["ls", "-la", "/tmp"]
    assert split(":".join(words), ":") == words


def test_split_rejects_long_separator():
    with pytest.raises(ValueError):
        split("a b", "ab")


def test_strchr_found():
    assert strchr("hello", "l") == "llo"


def test_strchr_missing():
    assert strchr("abc", "z") is None


def test_strchr_nul_gives_end():
    assert strchr("abc", "\0") == ""


def test_strchr_first_char():
    assert strchr("path/to", "p") == "path/to"


def test_strjoin():
    assert strjoin("/bin/", "ls") == "/bin/ls"
    assert strjoin("", "x") == "x"


def test_strncmp_equal_prefix():
    assert strncmp("abc", "abd", 2) == 0


def test_strncmp_zero_length():
    assert strncmp("a", "b", 0) == 0


def test_strncmp_sign():
    assert strncmp("abc", "abd", 3) < 0
    assert strncmp("abd", "abc", 3) > 0


def test_strncmp_shorter_string():
    assert strncmp("a", "", 1) == ord("a")
    assert strncmp("", "a", 1) == -ord("a")


def test_strncmp_identical_beyond_length():
    assert strncmp("echo", "echo", 10) == 0


def test_strncmp_antisymmetric():
    for a, b in [("pwd", "pw"), ("cd", "ce"), ("x", "xyz")]:
        assert strncmp(a, b, 5) == -strncmp(b, a, 5)