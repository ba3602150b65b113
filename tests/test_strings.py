import pytest

from pypipex.strings import (
    split,
    strchr,
    strcmp,
    strjoin,
    strlcat,
    strlcpy,
    strmapi,
    striteri,
    strncmp,
    strnstr,
    strrchr,
    strtrim,
    substr,
)


def test_split_command_line():
    assert split("ls -l", " ") == ["ls", "-l"]


def test_split_drops_empty_pieces():
    assert split("  grep   -v  x ", " ") == ["grep", "-v", "x"]


def test_split_path_variable():
    assert split("/usr/bin::/bin:", ":") == ["/usr/bin", "/bin"]


def test_split_empty_and_only_separators():
    assert split("", " ") == []
    assert split("    ", " ") == []


def test_split_round_trip():
    words = ["wc", "-l", "file"]
    assert split(" ".join(words), " ") == words


def test_split_rejects_multi_char_separator():
    with pytest.raises(ValueError):
        split("a b", "ab")


def test_strchr_finds_first():
    text = "a/b/c"
    index = strchr(text, "/")
    assert text[index] == "/"
    assert "/" not in text[:index]


def test_strchr_missing_and_terminator():
    assert strchr("abc", "z") is None
    assert strchr("abc", "\0") == len("abc")


def test_strrchr_finds_last():
    text = "a/b/c"
    index = strrchr(text, "/")
    assert text[index] == "/"
    assert "/" not in text[index + 1 :]
    assert strrchr("abc", "z") is None
    assert strrchr("abc", "\0") == len("abc")


def test_strcmp_equal_and_ordering():
    assert strcmp("pipex", "pipex") == 0
    assert strcmp("abc", "abd") < 0
    assert strcmp("abd", "abc") > 0
    assert strcmp("ab", "abc") < 0
    assert strcmp("abc", "ab") == ord("c")


def test_strcmp_antisymmetric():
    assert strcmp("hello", "help") == -strcmp("help", "hello")


def test_strncmp_limits_comparison():
    assert strncmp("PATH=/bin", "PATH", len("PATH")) == 0
    assert strncmp("abc", "abd", 2) == 0
    assert strncmp("abc", "abd", 3) < 0
    assert strncmp("x", "y", 0) == 0


def test_strncmp_negative_count():
    with pytest.raises(ValueError):
        strncmp("a", "b", -1)


def test_strnstr_within_length():
    big = "Foo Bar Baz"
    index = strnstr(big, "Bar", len(big))
    assert big[index : index + 3] == "Bar"
    assert strnstr(big, "Bar", 4) is None
    assert strnstr(big, "", 0) == 0
    assert strnstr(big, "Qux", len(big)) is None


def test_strjoin():
    assert strjoin("/usr/bin", "/ls") == "/usr/bin/ls"
    assert strjoin("", "") == ""


def test_strlcpy_truncates_and_reports_length():
    src = "hello world"
    copied, total = strlcpy(src, 6)
    assert total == len(src)
    assert len(copied) == 5
    assert src.startswith(copied)


def test_strlcpy_fits_and_zero_size():
    assert strlcpy("abc", 10) == ("abc", 3)
    assert strlcpy("abc", 0) == ("", 3)


def test_strlcat_appends_when_room():
    assert strlcat("/bin", "/ls", 64) == ("/bin/ls", len("/bin/ls"))


def test_strlcat_truncates():
    result, total = strlcat("ab", "cdef", 5)
    assert total == len("ab") + len("cdef")
    assert len(result) == 4
    assert result.startswith("ab")
    assert "abcdef".startswith(result)


def test_strlcat_no_room():
    assert strlcat("abcd", "xyz", 2) == ("abcd", len("xyz") + 2)


def test_strmapi_uses_index():
    result = strmapi("abc", lambda i, ch: ch.upper() if i % 2 == 0 else ch)
    assert result == "AbC"


def test_striteri_replaces_and_keeps():
    seen = []

    def visit(i, ch):
        seen.append((i, ch))
        return "_" if ch == " " else None

    assert striteri("a b", visit) == "a_b"
    assert seen == [(0, "a"), (1, " "), (2, "b")]


def test_strtrim():
    assert strtrim("  \tls -l \n", " \t\n") == "ls -l"
    assert strtrim("xxhixx", "x") == "hi"
    assert strtrim("xxxx", "x") == ""
    assert strtrim("keep", "") == "keep"


def test_substr_basic_and_bounds():
    text = "pipex"
    assert substr(text, 1, 3) == text[1:4]
    assert substr(text, 2, 100) == text[2:]
    assert substr(text, 10, 2) == ""
    assert substr(text, len(text), 2) == ""


def test_substr_negative_rejected():
    with pytest.raises(ValueError):
        substr("abc", -1, 2)
    with pytest.raises(ValueError):
        substr("abc", 0, -2)