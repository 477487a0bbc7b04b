import pytest

from contestkit.sequences import gcd_sequence_fixable, max_alternating_parity_sum


@pytest.mark.parametrize("values", [[], [5], [4, 6], [7, 3, 9]])
def test_short_sequences_always_fixable(values):
    assert gcd_sequence_fixable(values) is True


def test_already_non_decreasing_is_fixable():
    assert gcd_sequence_fixable([2, 4, 8, 16, 32]) is True


def test_fixable_by_removing_middle_element():
    assert gcd_sequence_fixable([20, 6, 12, 3, 48, 36]) is True


def test_not_fixable():
    assert gcd_sequence_fixable([12, 6, 3, 4]) is False


def test_accepts_any_iterable():
    assert gcd_sequence_fixable(iter([20, 6, 12, 3, 48, 36])) is True


def test_alternating_whole_array():
    assert max_alternating_parity_sum([1, 2, 3, 4, 5]) == 15


def test_same_parity_neighbours_break_run():
    assert max_alternating_parity_sum([9, 9, 8, 8]) == 17


def test_single_negative_element():
    assert max_alternating_parity_sum([-1000]) == -1000


@pytest.mark.parametrize("values", [[2, 4, 6, 8], [-3, -5, -7], [1, 3, 11, 5]])
def test_same_parity_gives_maximum_element(values):
    assert max_alternating_parity_sum(values) == max(values)


@pytest.mark.parametrize(
    "values", [[-1, 4, -1, 0, 5, -4], [101, -99, 101], [-10, 5, -8, 10, 6]]
)
def test_result_at_least_maximum_element(values):
    result = max_alternating_parity_sum(values)
    assert result >= max(values)
    assert result <= sum(v for v in values if v > 0)


def test_empty_sequence_raises():
    with pytest.raises(ValueError):
        max_alternating_parity_sum([])