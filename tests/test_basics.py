import pytest

from rustlings_runner.solutions.basics import (
    bigger,
    call_me,
    classify_character,
    current_favorite_color,
    describe_array,
    describe_cat,
    fizz_if_foo,
    is_a_color_word,
    is_even,
    nice_slice,
    sale_price,
    second_of,
    square,
)


def test_call_me_rings_each_call(capsys):
    call_me(3)
    assert capsys.readouterr().out == (
        "Ring! Call number 1\nRing! Call number 2\nRing! Call number 3\n"
    )


def test_call_me_zero_prints_nothing(capsys):
    call_me(0)
    assert capsys.readouterr().out == ""


def test_sale_price_odd():
    assert sale_price(51) == 48


def test_sale_price_even():
    assert sale_price(50) == 40


def test_square():
    assert square(3) == 9


def test_is_true_when_even():
    assert is_even(4)


def test_is_false_when_odd():
    assert not is_even(5)


def test_ten_is_bigger_than_eight():
    assert bigger(10, 8) == 10


def test_fortytwo_is_bigger_than_thirtytwo():
    assert bigger(32, 42) == 42


def test_foo_for_fizz():
    assert fizz_if_foo("fizz") == "foo"


def test_bar_for_fuzz():
    assert fizz_if_foo("fuzz") == "bar"


def test_default_to_baz():
    assert fizz_if_foo("literally anything") == "baz"


@pytest.mark.parametrize(
    "character, expected",
    [
        ("C", "Alphabetical!"),
        ("7", "Numerical!"),
        ("!", "Neither alphabetic nor numeric!"),
    ],
)
def test_classify_character(character, expected):
    assert classify_character(character) == expected


def test_classify_character_rejects_strings():
    with pytest.raises(ValueError):
        classify_character("ab")


def test_describe_big_array():
    assert describe_array(list(range(100))) == "Wow, that's a big array!"


def test_describe_small_array():
    assert describe_array([1, 2, 3]) == "Meh, I eat arrays like that for breakfast."


def test_slice_out_of_array():
    assert nice_slice([1, 2, 3, 4, 5]) == [2, 3, 4]


def test_indexing_tuple():
    assert second_of((1, 2, 3)) == 2


def test_describe_cat():
    assert describe_cat(("Furry McFurson", 3.5)) == "Furry McFurson is 3.5 years old."


def test_current_favorite_color():
    assert current_favorite_color() == "blue"


@pytest.mark.parametrize("word", ["green", "blue", "red"])
def test_color_words(word):
    assert is_a_color_word(word)


def test_not_a_color_word():
    assert not is_a_color_word("banana")


def test_you_can_assert_eq():
    assert square(2) == 4