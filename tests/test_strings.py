import pytest

from pushswap.strings import (
    split,
    strchr,
    strdup,
    striteri,
    strjoin,
    strlcat,
    strlcpy,
    strlen,
    strmapi,
    strncmp,
    strnstr,
    strrchr,
    strtrim,
    substr,
)


def test_strlen_counts_characters():
    assert strlen("push_swap") == len("push_swap")
    assert strlen("") == 0


def test_strlen_rejects_non_str():
    with pytest.raises(TypeError):
        strlen(None)


def test_strchr_finds_first_and_terminator():
    text = "a-b-c"
    assert strchr(text, "-") == text.index("-")
    assert strchr(text, ord("-")) == text.index("-")
    assert strchr(text, "\0") == len(text)
    assert strchr(text, 0) == len(text)
    assert strchr(text, "z") is None


def test_strrchr_finds_last_and_terminator():
    text = "a-b-c"
    assert strrchr(text, "-") == text.rindex("-")
    assert strrchr(text, "\0") == len(text)
    assert strrchr(text, "q") is None


def test_strchr_rejects_long_character():
    with pytest.raises(ValueError):
        strchr("abc", "ab")


def test_strncmp_equal_and_limited():
    assert strncmp("abcdef", "abcdef", 6) == 0
    assert strncmp("abcX", "abcY", 3) == 0
    assert strncmp("abc", "abd", 0) == 0


def test_strncmp_sign_and_difference():
    assert strncmp("abcX", "abcY", 4) == ord("X") - ord("Y")
    assert strncmp("abc", "ab", 5) == ord("c")
    assert strncmp("ab", "abc", 5) == -ord("c")


def test_strnstr_empty_needle_and_bounds():
    assert strnstr("hello", "", 0) == 0
    assert strnstr("hello world", "world", 11) == "hello world".index("world")
    assert strnstr("hello world", "world", 10) is None
    assert strnstr("hello", "xyz", 5) is None


def test_strlcpy_truncates_and_reports_length():
    src = "abcdef"
    copied, length = strlcpy(src, 4)
    assert copied == src[:3]
    assert length == len(src)
    assert strlcpy(src, 100) == (src, len(src))
    assert strlcpy(src, 0) == ("", len(src))


def test_strlcpy_negative_size():
    with pytest.raises(ValueError):
        strlcpy("abc", -1)


def test_strlcat_appends_within_size():
    dst, src = "abc", "defgh"
    joined, length = strlcat(dst, src, 100)
    assert joined == dst + src
    assert length == len(dst) + len(src)
    joined, length = strlcat(dst, src, 6)
    assert joined == dst + src[:2]
    assert len(joined) == 5
    assert length == len(dst) + len(src)


def test_strlcat_size_too_small_keeps_dst():
    dst, src = "abcdef", "xy"
    assert strlcat(dst, src, 3) == (dst, 3 + len(src))


def test_strdup_copy_is_equal():
    assert strdup("token list") == "token list"
    assert strdup("") == ""


def test_substr_ranges():
    s = "0123456789"
    assert substr(s, 2, 3) == s[2:5]
    assert substr(s, 8, 50) == s[8:]
    assert substr(s, 11, 2) == ""
    assert substr(s, len(s), 2) == ""


def test_substr_negative_rejected():
    with pytest.raises(ValueError):
        substr("abc", -1, 2)


def test_strjoin_concatenates():
    assert strjoin("push", "_swap") == "push_swap"
    assert strjoin("", "") == ""


def test_strtrim_both_ends():
    assert strtrim("  xx hello xx ", " x") == "hello"
    assert strtrim("hello", "") == "hello"
    assert strtrim("xxxx", "x") == ""


def test_split_drops_empty_words():
    assert split("  2 6  8  9 0 ", " ") == ["2", "6", "8", "9", "0"]
    assert split("", " ") == []
    assert split("   ", " ") == []
    assert split("abc", ord(",")) == ["abc"]


def test_split_roundtrip_with_single_separators():
    words = ["1", "-2", "+3"]
    assert split(" ".join(words), " ") == words


def test_strmapi_uses_index():
    result = strmapi("abcd", lambda i, ch: ch.upper() if i % 2 == 0 else ch)
    assert result == "AbCd"
    assert strmapi("", lambda i, ch: ch) == ""


def test_striteri_modifies_in_place():
    chars = list("abcd")
    striteri(chars, lambda i, ch: ch.upper() if i >= 2 else None)
    assert chars == ["a", "b", "C", "D"]


def test_striteri_records_indices():
    seen = []
    data = bytearray(b"xyz")
    striteri(data, lambda i, b: seen.append(i))
    assert seen == [0, 1, 2]
    assert data == bytearray(b"xyz")