import pytest

from cubscene.chars import (
    atoi,
    is_alnum,
    is_alpha,
    is_ascii,
    is_digit,
    is_print,
    is_space,
    itoa,
    to_lower,
    to_upper,
)


@pytest.mark.parametrize("c", ["a", "z", "A", "Z", "m"])
def test_is_alpha_letters(c):
    assert is_alpha(c) is True


@pytest.mark.parametrize("c", ["0", "@", "[", "`", "{", " "])
def test_is_alpha_rejects_non_letters(c):
    assert is_alpha(c) is False


def test_is_digit():
    assert all(is_digit(d) for d in "0123456789")
    assert not is_digit("a")
    assert not is_digit("/")
    assert not is_digit(":")


def test_is_alnum_is_union_of_alpha_and_digit():
    for code in range(0, 200):
        assert is_alnum(code) == (is_alpha(code) or is_digit(code))


def test_is_ascii_bounds():
    assert is_ascii(0)
    assert is_ascii(127)
    assert not is_ascii(128)
    assert not is_ascii(-1)


def test_is_print_bounds():
    assert is_print(" ")
    assert is_print("~")
    assert not is_print(31)
    assert not is_print(127)


@pytest.mark.parametrize("c", [" ", "\f", "\n", "\r", "\t", "\v"])
def test_is_space_true(c):
    assert is_space(c)


@pytest.mark.parametrize("c", ["a", "0", "\0", "_"])
def test_is_space_false(c):
    assert not is_space(c)


def test_multi_character_string_is_rejected():
    with pytest.raises(ValueError):
        is_alpha("ab")


def test_case_round_trip():
    for c in "abcdefghijklmnopqrstuvwxyz":
        assert to_lower(to_upper(c)) == c
        assert to_upper(c).isupper()


def test_case_mapping_leaves_others_alone():
    for c in "0123!@[` {":
        assert to_lower(c) == c
        assert to_upper(c) == c


def test_case_mapping_keeps_int_type():
    assert to_lower(ord("Q")) == ord("q")
    assert to_upper(ord("q")) == ord("Q")


def test_atoi_source_example():
    assert atoi("-1234") == -1234


def test_atoi_skips_whitespace_and_plus():
    assert atoi(" \t\n+255") == 255


def test_atoi_stops_at_non_digit():
    assert atoi("220,100,0") == 220


def test_atoi_without_digits_is_zero():
    assert atoi("abc") == 0
    assert atoi("") == 0
    assert atoi("-") == 0


def test_atoi_single_sign_only():
    assert atoi("--5") == 0
    assert atoi("+-5") == 0


def test_itoa_source_example():
    assert itoa(-12345) == "-12345"


@pytest.mark.parametrize("n", [0, 7, -7, 2147483647, -2147483648])
def test_itoa_atoi_round_trip(n):
    assert atoi(itoa(n)) == n