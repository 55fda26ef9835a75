"""Basic exercises: functions, conditionals, variables and primitive types."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

_BIG_ARRAY_LENGTH = 100
_BULK_THRESHOLD = 40
_BULK_PRICE = 1
_REGULAR_PRICE = 2
_TEN = 10


def _display(value: Any) -> str:
    """Format a value the way a plain display of it reads: whole floats lose ``.0``."""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def call_me(num: int) -> list[str]:
    """Return one ringing line for each of ``num`` calls."""
    return [f"Ring! Call number {call}" for call in range(1, num + 1)]


def is_even(num: int) -> bool:
    """Tell whether ``num`` is even."""
    return num % 2 == 0


def sale_price(price: int) -> int:
    """Take 10 off an even price and 3 off an odd one."""
    return price - 10 if is_even(price) else price - 3


def square(num: int) -> int:
    """Return ``num`` multiplied by itself."""
    return num * num


def bigger(a: int, b: int) -> int:
    """Return the bigger of two numbers."""
    return a if a > b else b


def ten_check(x: int) -> str:
    """Say whether ``x`` is ten."""
    if x == _TEN:
        return "Ten!"
    return "Not ten!"


def greeting(is_morning: bool) -> str:
    """Greet for the morning, or for the evening otherwise."""
    if bool(is_morning):
        return "Good morning!"
    return "Good evening!"


def classify_character(character: str) -> str:
    """Say whether a single character is alphabetic, numeric or neither."""
    if len(character) != 1:
        raise ValueError("expected exactly one character")
    if character.isalpha():
        return "Alphabetical!"
    if character.isnumeric():
        return "Numerical!"
    return "Neither alphabetic nor numeric!"


def describe_array(items: Sequence[Any]) -> str:
    """Comment on whether a sequence holds at least 100 elements."""
    if len(items) >= _BIG_ARRAY_LENGTH:
        return "Wow, that's a big array!"
    return "Meh, I eat arrays like that for breakfast."


def nice_slice(items: Sequence[Any]) -> Sequence[Any]:
    """Return the second to fourth elements of ``items``."""
    return items[1:4]


def describe_cat(cat: tuple[str, float]) -> str:
    """Describe a ``(name, age)`` pair."""
    name, age = cat
    return f"{name} is {_display(age)} years old."


def second_number(numbers: Sequence[Any]) -> Any:
    """Return the second element of ``numbers``."""
    return numbers[1]


def calculate_price(quantity: int) -> int:
    """Price an order of apples: 2 each, or 1 each for more than 40."""
    unit = _BULK_PRICE if quantity > _BULK_THRESHOLD else _REGULAR_PRICE
    return quantity * unit


def times_two(num: int) -> int:
    """Return ``num`` doubled."""
    return num * 2