import pytest

from contestkit.expressions import min_expression_value


@pytest.mark.parametrize("digits", ["10", "74", "01", "00", "5"])
def test_short_strings_are_read_as_numbers(digits):
    assert min_expression_value(digits) == int(digits)


@pytest.mark.parametrize("digits", ["111", "1111", "1111111"])
def test_all_ones(digits):
    assert min_expression_value(digits) == 11


@pytest.mark.parametrize("digits", ["1023", "230", "99990", "3000", "012"])
def test_zero_makes_product_zero(digits):
    assert min_expression_value(digits) == 0


def test_three_digits_with_middle_zero():
    assert min_expression_value("901") == 9


def test_leading_two_followed_by_ones():
    assert min_expression_value("211") == 13


def test_single_pair_candidate():
    assert min_expression_value("121") == 12


@pytest.mark.parametrize("digits", ["23456", "98765", "2222", "1111121", "211111"])
def test_result_bounded_by_joined_pair_plus_rest(digits):
    result = min_expression_value(digits)
    largest_pair = max(int(digits[i:i + 2]) for i in range(len(digits) - 1))
    assert 0 < result <= largest_pair + sum(int(d) for d in digits)


@pytest.mark.parametrize("digits", ["", "12a", "1 2", "-12"])
def test_rejects_non_digit_input(digits):
    with pytest.raises(ValueError):
        min_expression_value(digits)