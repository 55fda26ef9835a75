import pytest

from rustlings.exercises.iterators import (
    DivideByZeroError,
    DivisionError,
    NotDivisibleError,
    divide,
    factorial,
    list_of_results,
    result_with_list,
)

NUMBERS = [27, 297, 38502, 81]


def test_success():
    assert divide(81, 9) == 9


def test_not_divisible():
    with pytest.raises(NotDivisibleError) as info:
        divide(81, 6)
    assert info.value == NotDivisibleError(81, 6)
    assert (info.value.dividend, info.value.divisor) == (81, 6)


def test_divide_by_0():
    with pytest.raises(DivideByZeroError) as info:
        divide(81, 0)
    assert info.value == DivideByZeroError()


def test_divide_0_by_something():
    assert divide(0, 81) == 0


def test_errors_share_a_base():
    with pytest.raises(DivisionError):
        divide(1, 0)
    with pytest.raises(DivisionError):
        divide(5, 2)


def test_result_with_list():
    assert result_with_list(NUMBERS, 27) == [1, 11, 1426, 3]


def test_result_with_list_raises_first_error():
    with pytest.raises(NotDivisibleError) as info:
        result_with_list([27, 28, 29], 27)
    assert info.value.dividend == 28


def test_list_of_results():
    assert list_of_results(NUMBERS, 27) == [1, 11, 1426, 3]


def test_list_of_results_keeps_errors_in_place():
    results = list_of_results([27, 28], 27)
    assert results[0] == 1
    assert results[1] == NotDivisibleError(28, 27)
    assert list_of_results([4], 0) == [DivideByZeroError()]


@pytest.mark.parametrize("num, expected", [(1, 1), (2, 2), (4, 24)])
def test_factorial(num, expected):
    assert factorial(num) == expected


def test_factorial_of_0():
    assert factorial(0) == 1


def test_factorial_negative():
    with pytest.raises(ValueError):
        factorial(-1)


def test_factorial_overflow():
    with pytest.raises(OverflowError):
        factorial(21)
    assert factorial(20) < 2**64