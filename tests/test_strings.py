import pytest

from cstrkit.strings import (
    strcat,
    strchr,
    strcmp,
    strcpy,
    strcspn,
    strlen,
    strncat,
    strncmp,
    strncpy,
    strpbrk,
    strrchr,
    strspn,
    strstr,
)


@pytest.mark.parametrize(
    ("dest", "src", "n", "expected"),
    [
        ("String project", "String project", 1, "String projectS"),
        ("String project", "\0", 1, "String project"),
        ("String project", "\n\0\\d", 3, "String project\n"),
        ("String project", "", 0, "String project"),
        ("", "String project", 13, "String projec"),
        ("", "String project", 3, "Str"),
        ("", "", 10, ""),
        ("String project", "\0", 1, "String project"),
        ("String project", "\0", 0, "String project"),
        ("String project", "\0\0\0\0", 4, "String project"),
        ("String project", "", 2, "String project"),
    ],
)
def test_strncat_cases(dest, src, n, expected):
    assert strncat(dest, src, n) == expected


@pytest.mark.parametrize(
    ("text", "accept", "expected"),
    [
        ("Hello World", "Hello", 5),
        ("Hello World", "World", 0),
        ("Hello World", "Vap", 0),
        ("Hello World", "\0", 0),
        ("Hello World", "dlroW olleH", 11),
        ("Hello World", "ello", 0),
    ],
)
def test_strspn_cases(text, accept, expected):
    assert strspn(text, accept) == expected


def test_strlen_stops_at_terminator():
    assert strlen("abc\0def") == 3
    assert strlen("") == 0


def test_strcat_joins():
    assert strcat("String ", "project") == "String project"


def test_strchr_first_occurrence():
    assert strchr("Hello World", "o") == 4


def test_strchr_terminator_gives_length():
    assert strchr("Hello", 0) == strlen("Hello")


def test_strchr_non_ascii_code_not_found():
    assert strchr("caf\u00e9", 0xE9) is None
    assert strchr("abc", -1) is None


def test_strchr_missing():
    assert strchr("Hello", "z") is None


def test_strrchr_last_occurrence():
    assert strrchr("Hello World", "o") == 7


def test_strrchr_terminator_and_missing():
    assert strrchr("Hello", "\0") == 5
    assert strrchr("Hello", "q") is None


def test_strcmp_equal():
    assert strcmp("String project", "String project") == 0


def test_strcmp_ordering():
    assert strcmp("abc", "abd") < 0
    assert strcmp("abd", "abc") > 0
    assert strcmp("ab", "abc") < 0
    assert strcmp("abc", "ab") > 0


def test_strcmp_is_antisymmetric():
    assert strcmp("apple", "apricot") == -strcmp("apricot", "apple")


def test_strncmp_limits_comparison():
    assert strncmp("Hello World", "Hello there", 5) == 0
    assert strncmp("Hello World", "Hello there", 7) < 0
    assert strncmp("abc", "xyz", 0) == 0


def test_strncmp_shorter_string():
    assert strncmp("ab", "abc", 10) < 0
    assert strncmp("abc", "abc", 10) == 0


def test_strncmp_negative_count():
    with pytest.raises(ValueError):
        strncmp("a", "b", -1)


def test_strcpy_truncates_at_terminator():
    assert strcpy("copy\0me") == "copy"


def test_strncpy_pads_with_nul():
    assert strncpy("ab", 5) == "ab\0\0\0"


def test_strncpy_truncates_without_terminator():
    assert strncpy("String project", 6) == "String"


def test_strncpy_negative_count():
    with pytest.raises(ValueError):
        strncpy("abc", -2)


def test_strcspn_values():
    assert strcspn("Hello World", "oW") == 4
    assert strcspn("Hello World", "xyz") == len("Hello World")
    assert strcspn("Hello World", "") == len("Hello World")


def test_strspn_and_strcspn_partition_prefix():
    text, chars = "aabbcxa", "ab"
    assert strspn(text, chars) == 4
    assert strcspn(text[strspn(text, chars):], chars) == 2


def test_strpbrk_first_match():
    assert strpbrk("Hello World", "rW") == 6
    assert strpbrk("Hello World", "xyz") is None


def test_strstr_finds_substring():
    assert strstr("Hello World", "World") == 6
    assert strstr("Hello World", "Word") is None


def test_strstr_empty_needle():
    assert strstr("Hello", "") == 0
    assert strstr("", "") == 0


def test_single_character_required():
    with pytest.raises(ValueError):
        strchr("abc", "ab")