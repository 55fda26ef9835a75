"""Iterator exercises: checked division over sequences, and factorials."""

from __future__ import annotations

import math
from collections.abc import Iterable

_U64_MAX = (1 << 64) - 1


class DivisionError(ArithmeticError):
    """A division that could not give a whole-number result."""


class NotDivisibleError(DivisionError):
    """The dividend is not evenly divisible by the divisor."""

    def __init__(self, dividend: int, divisor: int) -> None:
        super().__init__(f"{dividend} is not evenly divisible by {divisor}")
        self.dividend = dividend
        self.divisor = divisor

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, NotDivisibleError):
            return NotImplemented
        return (self.dividend, self.divisor) == (other.dividend, other.divisor)

    def __hash__(self) -> int:
        return hash((self.dividend, self.divisor))

    def __repr__(self) -> str:
        return f"NotDivisibleError(dividend={self.dividend}, divisor={self.divisor})"


class DivideByZeroError(DivisionError):
    """The divisor is zero."""

    def __init__(self) -> None:
        super().__init__("division by zero")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DivideByZeroError):
            return NotImplemented
        return True

    def __hash__(self) -> int:
        return hash(DivideByZeroError)

    def __repr__(self) -> str:
        return "DivideByZeroError()"


def divide(a: int, b: int) -> int:
    """Return ``a`` divided by ``b`` when ``b`` divides ``a`` evenly.

    Raises DivideByZeroError for a zero divisor and NotDivisibleError when
    there would be a remainder.
    """
    if b == 0:
        raise DivideByZeroError()
    if a % b != 0:
        raise NotDivisibleError(a, b)
    return a // b


def result_with_list(numbers: Iterable[int], divisor: int) -> list[int]:
    """Divide every number by ``divisor``, raising the first DivisionError met."""
    return [divide(number, divisor) for number in numbers]


def list_of_results(numbers: Iterable[int], divisor: int) -> list[int | DivisionError]:
    """Divide every number by ``divisor``, keeping each failure in place as its error."""
    results: list[int | DivisionError] = []
    for number in numbers:
        try:
            results.append(divide(number, divisor))
        except DivisionError as error:
            results.append(error)
    return results


def factorial(num: int) -> int:
    """Return ``num!`` as an unsigned 64-bit value.

    Raises ValueError for a negative number and OverflowError when the result
    does not fit in 64 bits.
    """
    if num < 0:
        raise ValueError("factorial is not defined for negative numbers")
    result = math.prod(range(1, num + 1))
    if result > _U64_MAX:
        raise OverflowError("attempt to multiply with overflow")
    return result