import pytest

from cub3d.transform import (
    first_word,
    split,
    strdup,
    striteri,
    strjoin,
    strjoin_three,
    strmapi,
    strtrim,
    substr,
)


def test_strdup_copies_whole_string():
    text = "north_texture.xpm"
    assert strdup(text) == text


def test_strdup_stops_at_nul():
    head = "abc"
    assert strdup(head + "\0tail") == head


def test_strdup_rejects_non_string():
    with pytest.raises(TypeError):
        strdup(None)


def test_substr_inside():
    text = "texture"
    assert substr(text, 2, 3) == text[2:5]


def test_substr_length_clamped_to_end():
    text = "texture"
    assert substr(text, 3, 100) == text[3:]


def test_substr_start_past_end_is_empty():
    assert substr("abc", 3, 2) == ""
    assert substr("abc", 10, 2) == ""


def test_substr_negative_raises():
    with pytest.raises(ValueError):
        substr("abc", -1, 2)
    with pytest.raises(ValueError):
        substr("abc", 0, -2)


def test_strjoin_concatenates():
    left, right = "./textures/", "wall.xpm"
    result = strjoin(left, right)
    assert result.startswith(left)
    assert result.endswith(right)
    assert len(result) == len(left) + len(right)


def test_strjoin_respects_terminator():
    assert strjoin("ab\0zz", "cd") == "ab" + "cd"


def test_strjoin_three_concatenates():
    a, b, c = "path", "/", "file"
    result = strjoin_three(a, b, c)
    assert result == strjoin(strjoin(a, b), c)
    assert len(result) == len(a) + len(b) + len(c)


def test_strtrim_strips_both_ends():
    core = "NO ./north.xpm"
    assert strtrim(" \t" + core + "\n  ", " \t\n") == core


def test_strtrim_keeps_inner_characters():
    core = "a b\tc"
    assert strtrim("  " + core + "  ", " ") == core


def test_strtrim_all_trimmed_gives_empty():
    assert strtrim(" \t\n \n", " \t\n") == ""


def test_strtrim_empty_set_returns_copy():
    text = "  spaced  "
    assert strtrim(text, "") == text


def test_split_drops_empty_pieces():
    pieces = split(",,220,,100,0,", ",")
    assert pieces == ["220", "100", "0"]


def test_split_invariants():
    text = "  one two   three "
    pieces = split(text, " ")
    assert all(pieces)
    assert all(" " not in piece for piece in pieces)
    assert "".join(pieces) == text.replace(" ", "")


def test_split_only_separators():
    assert split("::::", ":") == []
    assert split("", ":") == []


def test_split_bad_separator():
    with pytest.raises(ValueError):
        split("a,b", ",,")


def test_strmapi_passes_index_and_char():
    text = "abcd"
    seen = []

    def record(index, ch):
        seen.append((index, ch))
        return ch.upper()

    result = strmapi(text, record)
    assert result == text.upper()
    assert seen == list(enumerate(text))


def test_strmapi_stops_at_nul():
    assert strmapi("xy\0z", lambda i, c: c) == "xy"


def test_striteri_modifies_in_place():
    chars = list("hello")
    striteri(chars, lambda i, c: c.upper() if i % 2 == 0 else None)
    assert "".join(chars) == "HeLlO"


def test_striteri_stops_at_terminator():
    chars = ["a", "b", "\0", "c"]
    visited = []
    striteri(chars, lambda i, c: visited.append(i))
    assert visited == [0, 1]
    assert chars == ["a", "b", "\0", "c"]


def test_striteri_rejects_str():
    with pytest.raises(TypeError):
        striteri("abc", lambda i, c: None)


def test_first_word_skips_leading_blanks():
    word = "SO"
    assert first_word(" \t\n" + word + " ./south.xpm") == word


def test_first_word_whole_string():
    word = "single"
    assert first_word(word) == word


def test_first_word_blank_only():
    assert first_word(" \t \n") == ""


def test_first_word_rejects_none():
    with pytest.raises(TypeError):
        first_word(None)