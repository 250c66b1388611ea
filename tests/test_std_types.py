import pytest

from rustlings_runner.solutions.std_types import (
    Cons,
    DivideByZeroError,
    DivisionError,
    Nil,
    NotDivisibleError,
    capitalize_first,
    capitalize_joined,
    capitalize_words,
    create_empty_list,
    create_non_empty_list,
    divide,
    divide_all,
    divide_each,
    factorial,
    favorite_fruits,
)


def test_create_empty_list():
    assert create_empty_list() == Nil()


def test_create_non_empty_list():
    assert create_empty_list() != create_non_empty_list()


def test_non_empty_list_values():
    assert list(create_non_empty_list()) == [1, 2, 3]


def test_cons_list_iteration():
    assert list(Cons(7, Nil())) == [7]


def test_favorite_fruits_in_order():
    fruits = favorite_fruits()
    assert next(fruits) == "banana"
    assert next(fruits) == "custard apple"
    assert next(fruits) == "avocado"
    assert next(fruits) == "peach"
    assert next(fruits) == "raspberry"
    assert next(fruits, None) is None


def test_capitalize_first_success():
    assert capitalize_first("hello") == "Hello"


def test_capitalize_first_empty():
    assert capitalize_first("") == ""


def test_iterate_string_vec():
    assert capitalize_words(["hello", "world"]) == ["Hello", "World"]


def test_iterate_into_string():
    assert capitalize_joined(["hello", " ", "world"]) == "Hello World"


def test_divide_success():
    assert divide(81, 9) == 9


def test_divide_not_divisible():
    with pytest.raises(NotDivisibleError) as info:
        divide(81, 6)
    assert info.value == NotDivisibleError(81, 6)
    assert (info.value.dividend, info.value.divisor) == (81, 6)


def test_divide_by_zero():
    with pytest.raises(DivideByZeroError):
        divide(81, 0)


def test_divide_zero_by_something():
    assert divide(0, 81) == 0


def test_division_errors_share_base():
    with pytest.raises(DivisionError):
        divide(1, 0)


def test_result_with_list():
    assert divide_all([27, 297, 38502, 81], 27) == [1, 11, 1426, 3]


def test_result_with_list_fails_on_first_error():
    with pytest.raises(NotDivisibleError) as info:
        divide_all([27, 28, 29], 27)
    assert info.value.dividend == 28


def test_list_of_results():
    assert divide_each([27, 297, 38502, 81], 27) == [1, 11, 1426, 3]


def test_list_of_results_keeps_errors():
    results = divide_each([27, 28], 27)
    assert results[0] == 1
    assert results[1] == NotDivisibleError(28, 27)


@pytest.mark.parametrize("num, expected", [(1, 1), (2, 2), (4, 24), (0, 1)])
def test_factorial(num, expected):
    assert factorial(num) == expected


def test_factorial_largest_fitting():
    assert factorial(20) == 2432902008176640000


def test_factorial_overflow():
    with pytest.raises(OverflowError):
        factorial(21)


def test_factorial_negative():
    with pytest.raises(ValueError):
        factorial(-1)