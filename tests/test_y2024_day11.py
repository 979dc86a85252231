import pytest

from advent.y2024_day11 import count_stones, parse


def test_parse_reads_numbers():
    assert parse("125 17\n") == [125, 17]


def test_parse_rejects_negative():
    with pytest.raises(ValueError):
        parse("1 -2\n")


def test_example_six_blinks():
    assert count_stones([125, 17], 6) == 22


def test_example_twenty_five_blinks():
    assert count_stones([125, 17], 25) == 55312


def test_zero_blinks_keeps_stone_count():
    stones = [0, 1, 10, 99, 999]
    assert count_stones(stones, 0) == len(stones)


def test_counts_are_additive_over_stones():
    assert count_stones([125, 17], 15) == count_stones([125], 15) + count_stones([17], 15)


def test_even_digit_stone_splits_into_halves():
    assert count_stones([1000], 11) == count_stones([10, 0], 10)


def test_zero_becomes_one():
    assert count_stones([0], 9) == count_stones([1], 8)


def test_odd_digit_stone_is_multiplied():
    assert count_stones([1], 7) == count_stones([2024], 6)


def test_count_never_shrinks_with_more_blinks():
    counts = [count_stones([125, 17], blinks) for blinks in range(10)]
    assert counts == sorted(counts)