import pytest

from wolfcast.textutil import (
    atoi,
    compare_bytes,
    compare_strings,
    contains_char,
    contains_in_order,
    int_len,
    is_alnum,
    is_alpha,
    is_ascii,
    is_digit,
    is_print,
    itoa,
    prefix_before,
    sort_words,
    sort_words_desc,
)


@pytest.mark.parametrize("n", [0, 1, -1, 7, 42, -42, 2147483647, -2147483648])
def test_itoa_atoi_round_trip(n):
    assert atoi(itoa(n)) == n


def test_itoa_int_min():
    assert itoa(-2147483648) == "-2147483648"


def test_itoa_zero():
    assert itoa(0) == "0"


def test_atoi_skips_whitespace_and_stops_at_non_digit():
    assert atoi(" \t\n-42abc") == -42
    assert atoi("+17 rest") == 17


def test_atoi_without_digits_is_zero():
    assert atoi("abc") == 0
    assert atoi("") == 0
    assert atoi("-") == 0
    assert atoi("+-5") == 0


@pytest.mark.parametrize("n", [0, 5, -5, 99, -100, 2147483647])
def test_int_len_matches_formatted_digits(n):
    assert int_len(n) == len(itoa(n).lstrip("-"))


def test_character_classes():
    assert is_alpha("a") and is_alpha("Z")
    assert not is_alpha("1")
    assert is_digit("0") and is_digit("9")
    assert not is_digit("a")
    assert is_alnum("q") and is_alnum("3")
    assert not is_alnum("_")
    assert is_ascii(0) and is_ascii(127)
    assert not is_ascii(128)
    assert is_print(" ") and is_print("~")
    assert not is_print("\n")


def test_character_class_rejects_long_string():
    with pytest.raises(ValueError):
        is_alpha("ab")


def test_compare_strings_equal_is_zero():
    assert compare_strings("wolf", "wolf") == 0


def test_compare_strings_sign_and_antisymmetry():
    assert compare_strings("abc", "abd") < 0
    assert compare_strings("abd", "abc") > 0
    assert compare_strings("ab", "abc") == -compare_strings("abc", "ab")
    assert compare_strings("ab", "abc") == -ord("c")


def test_compare_bytes():
    assert compare_bytes(b"abc", b"abd", 0) == 0
    assert compare_bytes(b"abc", b"abd", 2) == 0
    assert compare_bytes(b"abc", b"abd", 3) == ord("c") - ord("d")
    assert compare_bytes(b"ab\0x", b"ab\0y", 4) == 0


def test_contains_char():
    assert contains_char("o", "wolf")
    assert not contains_char("z", "wolf")
    assert not contains_char("", "wolf")
    assert not contains_char("a", None)


def test_contains_in_order():
    assert contains_in_order("wolf3d", "wfd")
    assert not contains_in_order("wolf3d", "fw")
    assert contains_in_order("wolf", "")
    assert not contains_in_order(None, "a")


def test_sort_words_ascending_and_descending():
    words = ["pear", "apple", "app", "banana", "Zed"]
    asc = sort_words(words)
    assert all(compare_strings(a, b) <= 0 for a, b in zip(asc, asc[1:]))
    assert sort_words_desc(words) == list(reversed(asc))
    assert sorted(asc) == sorted(words)


def test_prefix_before():
    assert prefix_before("key=value", "=") == "key"
    assert prefix_before("novalue", "=") == "novalue"
    assert prefix_before("abc", "") == "abc"