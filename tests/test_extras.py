import pytest

from cstrkit.extras import insert, to_lower, to_upper, trim


@pytest.mark.parametrize(
    ("source", "expected"),
    [
        ("hello", "HELLO"),
        ("hello 123 567 grepkin", "HELLO 123 567 GREPKIN"),
        ("dimon est salo", "DIMON EST SALO"),
        ("hello world 816 and 15", "HELLO WORLD 816 AND 15"),
        ("hello \n \b \t ", "HELLO \n \b \t "),
        ("hello world \n \b \t  816 and 15", "HELLO WORLD \n \b \t  816 AND 15"),
        (
            "ddddddddddddd \n ddddd \b dddd \t  816 and 15",
            "DDDDDDDDDDDDD \n DDDDD \b DDDD \t  816 AND 15",
        ),
    ],
)
def test_to_upper_cases(source, expected):
    assert to_upper(source) == expected


def test_to_upper_none():
    assert to_upper(None) is None


def test_to_upper_leaves_non_ascii():
    assert to_upper("stra\u00dfe \u00e9") == "STRA\u00dfE \u00e9"


def test_to_lower_converts_capitals():
    assert to_lower("HELLO 123 World") == "hello 123 world"


def test_to_lower_none():
    assert to_lower(None) is None


def test_case_round_trip_on_letters():
    text = "Mixed Case Text 42"
    assert to_upper(to_lower(text)) == to_upper(text)
    assert to_lower(to_upper(text)) == to_lower(text)


def test_insert_in_middle():
    assert insert("Hello World", "big ", 6) == "Hello big World"


def test_insert_at_ends():
    assert insert("abc", "XY", 0) == "XYabc"
    assert insert("abc", "XY", 3) == "abcXY"


def test_insert_length_invariant():
    src, text = "String project", "!!"
    result = insert(src, text, 4)
    assert len(result) == len(src) + len(text)
    assert result.replace(text, "", 1) == src


def test_insert_index_out_of_range():
    with pytest.raises(ValueError):
        insert("abc", "x", 4)
    with pytest.raises(ValueError):
        insert("abc", "x", -1)


def test_insert_none_arguments():
    assert insert(None, "x", 0) is None
    assert insert("abc", None, 0) is None


def test_trim_given_characters():
    assert trim("**Hello*World**", "*") == "Hello*World"
    assert trim("xyHelloyx", "xy") == "Hello"


def test_trim_whitespace_default():
    assert trim(" \t\n Hello \v\f\r ", None) == "Hello"
    assert trim("  Hello  ", "") == "Hello"


def test_trim_everything_removed():
    assert trim("aaaa", "a") == ""


def test_trim_none_source():
    assert trim(None, None) is None
    assert trim(None, "x") is None


def test_trim_is_idempotent():
    once = trim("--abc--", "-")
    assert trim(once, "-") == once