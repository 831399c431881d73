import pytest

from termtoys.sequence import main, p26


def test_single_letters():
    assert p26(0) == "a"
    assert p26(25) == "z"


def test_sequence_start_after_z():
    assert [p26(i) for i in (26, 27, 28)] == ["aa", "ba", "ca"]


def test_least_significant_first():
    assert p26(51) == "za"
    assert p26(52) == "ab"


def test_two_letter_block_ends_with_zz_then_aaa():
    last_two = max(i for i in range(2000) if len(p26(i)) == 2)
    assert p26(last_two) == "zz"
    assert p26(last_two + 1) == "aaa"


def test_labels_unique_and_lengths_non_decreasing():
    labels = [p26(i) for i in range(5000)]
    assert len(set(labels)) == len(labels)
    assert all(len(a) <= len(b) for a, b in zip(labels, labels[1:]))


def test_negative_rejected():
    with pytest.raises(ValueError):
        p26(-1)


def test_main_prints_count(capsys):
    assert main(["3"]) == 0
    assert capsys.readouterr().out == "a\nb\nc\n"