import pytest

from solvebook.euler_data import (
    counting_sundays,
    large_sum,
    largest_product_in_grid,
    largest_product_in_series,
    maximum_path_sum,
)


def test_series_thirteen_digits():
    assert largest_product_in_series(13) == 23514624000


@pytest.mark.parametrize("span", [1, 2, 4, 8, 12])
def test_series_growth_is_bounded_by_nine(span):
    assert largest_product_in_series(span + 1) <= 9 * largest_product_in_series(span)


def test_series_whole_length_contains_zero():
    assert largest_product_in_series(1000) == 0


@pytest.mark.parametrize("span", [0, -1, 1001])
def test_series_rejects_bad_span(span):
    with pytest.raises(ValueError):
        largest_product_in_series(span)


def test_grid_products_bounded_by_squares():
    one = largest_product_in_grid(1)
    two = largest_product_in_grid(2)
    four = largest_product_in_grid(4)
    assert two <= one * one
    assert four <= two * two
    assert four > two


@pytest.mark.parametrize("length", [0, 21])
def test_grid_rejects_bad_length(length):
    with pytest.raises(ValueError):
        largest_product_in_grid(length)


def test_large_sum_prefixes_agree():
    ten = large_sum(10)
    twelve = large_sum(12)
    assert len(ten) == 10
    assert twelve.startswith(ten)
    assert ten.isdigit()


def test_large_sum_rejects_zero_digits():
    with pytest.raises(ValueError):
        large_sum(0)


def test_maximum_path_sum_builtin_triangle():
    assert maximum_path_sum() == 1074


def test_maximum_path_sum_single_row():
    assert maximum_path_sum([[5]]) == 5


def test_maximum_path_sum_between_bounds():
    triangle = [[3], [7, 4], [2, 4, 6], [8, 5, 9, 3]]
    result = maximum_path_sum(triangle)
    assert sum(row[0] for row in triangle) <= result
    assert result <= sum(max(row) for row in triangle)


def test_maximum_path_sum_uniform_triangle():
    triangle = [[2] * (i + 1) for i in range(6)]
    assert maximum_path_sum(triangle) == sum(row[0] for row in triangle)


@pytest.mark.parametrize("triangle", [[], [[1], [2]], [[1], [2, 3, 4]]])
def test_maximum_path_sum_rejects_bad_shape(triangle):
    with pytest.raises(ValueError):
        maximum_path_sum(triangle)


def test_counting_sundays_twentieth_century():
    assert counting_sundays(1901, 2000) == 171


def test_counting_sundays_is_additive():
    whole = counting_sundays(1901, 2000)
    assert counting_sundays(1901, 1950) + counting_sundays(1951, 2000) == whole


def test_counting_sundays_repeats_every_28_years():
    assert counting_sundays(1901, 1928) == counting_sundays(1929, 1956)


def test_counting_sundays_rejects_reversed_range():
    with pytest.raises(ValueError):
        counting_sundays(2000, 1901)