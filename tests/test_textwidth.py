import pytest

from termtoys.textwidth import wcswidth, wcswidth_cjk, wcwidth, wcwidth_cjk


def test_nul_is_zero_width():
    assert wcwidth(0) == 0
    assert wcwidth("\0") == 0


@pytest.mark.parametrize("cp", [0x01, 0x1F, 0x7F, 0x9F])
def test_control_characters_are_negative(cp):
    assert wcwidth(cp) == -1


@pytest.mark.parametrize("cp", [0x0300, 0x036F, 0x200B, 0x1160, 0x11FF, 0xFEFF, 0xE0100])
def test_combining_and_format_are_zero(cp):
    assert wcwidth(cp) == 0


def test_soft_hyphen_is_one():
    assert wcwidth(0x00AD) == 1


@pytest.mark.parametrize("ch", ["A", "z", " ", "é"])
def test_plain_characters_are_one(ch):
    assert wcwidth(ch) == 1


@pytest.mark.parametrize("cp", [0x1100, 0x115F, 0x2329, 0x4E00, 0xAC00, 0xFF01, 0x20000])
def test_wide_characters_are_two(cp):
    assert wcwidth(cp) == 2


def test_ideographic_half_fill_space_is_narrow():
    assert wcwidth(0x303F) == 1


def test_ambiguous_width_only_in_cjk_mode():
    for cp in (0x00A1, 0x20AC, 0x2460, 0x10FFFD):
        assert wcwidth(cp) == 1
        assert wcwidth_cjk(cp) == 2


def test_cjk_falls_back_for_other_characters():
    for cp in (0, 0x07, 0x0300, ord("A"), 0x4E00):
        assert wcwidth_cjk(cp) == wcwidth(cp)


def test_multi_character_string_rejected():
    with pytest.raises(ValueError):
        wcwidth("ab")


def test_string_width_sums_characters():
    text = "ab\u4e00c\u0301"
    assert wcswidth(text) == sum(wcwidth(c) for c in text)


def test_string_width_limit_and_nul():
    assert wcswidth("abcdef", 3) == wcswidth("abc")
    assert wcswidth("ab\0cd") == wcswidth("ab")


def test_string_width_control_gives_negative():
    assert wcswidth("ab\tc") == -1
    assert wcswidth_cjk("\x1b[0m") == -1


def test_string_width_cjk_counts_ambiguous_double():
    text = "\u00a1\u00a1"
    assert wcswidth_cjk(text) == 2 * wcswidth(text)


def test_string_width_accepts_code_points():
    assert wcswidth([0x4E00, ord("x")]) == wcswidth("\u4e00x")