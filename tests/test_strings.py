import pytest

from cub3d.strings import (
    strchr,
    strcmp,
    strlcat,
    strlcpy,
    strlen,
    strncmp,
    strnstr,
    strrchr,
)


@pytest.mark.parametrize("text", ["", "a", "hello", "with space\t"])
def test_strlen_matches_len(text):
    assert strlen(text) == len(text)


def test_strlen_stops_at_nul():
    assert strlen("abc\0def") == len("abc")


def test_strchr_finds_first():
    assert strchr("hello", "l") == "hello".index("l")


def test_strchr_accepts_code():
    assert strchr("hello", ord("o")) == "hello".index("o")


def test_strchr_missing():
    assert strchr("hello", "z") is None


def test_strchr_nul_gives_terminator():
    assert strchr("hello", "\0") == len("hello")
    assert strchr("hello", 0) == len("hello")


def test_strrchr_finds_last():
    assert strrchr("map.test.cub", ".") == "map.test.cub".rindex(".")


def test_strrchr_missing_and_nul():
    assert strrchr("noext", ".") is None
    assert strrchr("abc", "\0") == len("abc")


def test_strchr_rejects_long_char():
    with pytest.raises(ValueError):
        strchr("abc", "ab")


def test_strcmp_equal():
    assert strcmp("cub", "cub") == 0


def test_strcmp_difference_of_codes():
    assert strcmp("abc", "abd") == ord("c") - ord("d")


def test_strcmp_prefix_is_smaller():
    assert strcmp("ab", "abc") == -ord("c")
    assert strcmp("abc", "ab") == ord("c")


@pytest.mark.parametrize("a,b", [("a", "b"), ("apple", "apricot"), ("", "x")])
def test_strcmp_antisymmetric(a, b):
    assert strcmp(a, b) == -strcmp(b, a)
    assert strcmp(a, b) < 0


def test_strncmp_limits_comparison():
    assert strncmp("NO ./path", "NO x", 3) == 0
    assert strncmp("SO ./path", "NO ", 3) == ord("S") - ord("N")


def test_strncmp_zero_length():
    assert strncmp("abc", "xyz", 0) == 0


def test_strncmp_negative_raises():
    with pytest.raises(ValueError):
        strncmp("a", "b", -1)


def test_strnstr_found():
    assert strnstr("hello world", "world", 11) == "hello world".index("world")


def test_strnstr_outside_limit():
    assert strnstr("hello world", "world", 10) is None


def test_strnstr_empty_needle():
    assert strnstr("abc", "", 0) == 0


def test_strlcpy_truncates():
    assert strlcpy("hello", 3) == ("he", len("hello"))


def test_strlcpy_fits():
    assert strlcpy("hi", 10) == ("hi", len("hi"))


def test_strlcpy_zero_size():
    assert strlcpy("hello", 0) == ("", len("hello"))


def test_strlcat_truncates():
    assert strlcat("ab", "cdef", 5) == ("abcd", len("ab") + len("cdef"))


def test_strlcat_full_dest_unchanged():
    assert strlcat("abcdef", "xy", 3) == ("abcdef", 3 + len("xy"))


def test_strlcat_fits():
    result, total = strlcat("foo", "bar", 20)
    assert result == "foo" + "bar"
    assert total == len(result)


def test_strlcat_negative_size():
    with pytest.raises(ValueError):
        strlcat("a", "b", -2)