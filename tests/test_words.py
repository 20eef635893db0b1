import pytest

from mysh.words import (
    capitalize,
    count_words,
    find,
    has_prefix,
    is_alpha,
    is_blank,
    is_identifier_char,
    parse_int,
    split_on,
    split_words,
)


@pytest.mark.parametrize("char", [" ", "\t", ""])
def test_is_blank_true(char):
    assert is_blank(char) is True


@pytest.mark.parametrize("char", ["a", "-", "\n", ";"])
def test_is_blank_false(char):
    assert is_blank(char) is False


@pytest.mark.parametrize("char", ["a", "Z", "9", "_"])
def test_is_identifier_char_true(char):
    assert is_identifier_char(char) is True


@pytest.mark.parametrize("char", ["-", "=", " ", ""])
def test_is_identifier_char_false(char):
    assert is_identifier_char(char) is False


def test_split_words_blanks():
    assert split_words("  ls\t-l  /tmp ") == ["ls", "-l", "/tmp"]


def test_split_words_empty():
    assert split_words("") == []
    assert split_words(" \t ") == []


@pytest.mark.parametrize("text", ["", "a", " a b ", "ls -la\t/tmp", "\t\tx"])
def test_count_matches_split(text):
    assert count_words(text, is_blank) == len(split_words(text))


def test_split_on_path():
    assert split_on("/bin:/usr/bin", ":") == ["/bin", "/usr/bin"]


def test_split_on_drops_empty():
    assert split_on("::a::b:", ":") == ["a", "b"]
    assert split_on("ls ; pwd", ";") == ["ls ", " pwd"]


def test_count_words_custom_separator():
    assert count_words(";;ls;pwd;", lambda c: c == ";") == len(split_on(";;ls;pwd;", ";"))


@pytest.mark.parametrize(
    "text,expected",
    [("42", 42), ("-42", -42), ("--5", 5), ("+-7", -7), ("12abc", 12)],
)
def test_parse_int(text, expected):
    assert parse_int(text) == expected


def test_parse_int_no_digits():
    assert parse_int("abc") == 0
    assert parse_int("-") == 0


def test_parse_int_limits():
    assert parse_int("2147483647") == 2147483647
    assert parse_int("-2147483648") == -2147483648
    assert parse_int("2147483648") == 0


def test_has_prefix():
    assert has_prefix("PATH=/bin", "PATH=") is True
    assert has_prefix("PA", "PATH=") is False
    assert has_prefix("HOME=/x", "PATH=") is False


def test_capitalize_words():
    assert capitalize("hello world") == "Hello World"
    assert capitalize("hey-you,THERE") == "Hey-You,There"


def test_capitalize_digits_do_not_start_word():
    assert capitalize("42words") == "42words"


def test_find_located():
    idx = find("hello world", "wor")
    assert "hello world"[idx : idx + 3] == "wor"
    assert "wor" not in "hello world"[: idx + 2]


def test_find_edge_cases():
    assert find("abc", "") == 0
    assert find("abc", "z") == -1


def test_is_alpha():
    assert is_alpha("") is True
    assert is_alpha("Hello") is True
    assert is_alpha("he llo") is False
    assert is_alpha("a_b") is False
    assert is_alpha("abc1") is False