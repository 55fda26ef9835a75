"""Error handling: validated values, parsing and failures that carry a reason."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, TextIO

_PROCESSING_FEE = 1
_COST_PER_ITEM = 5


def _parse_int(text: str, bits: int) -> int:
    """Parse a signed integer of the given width, as strictly as a typed parser."""
    if not text:
        raise ValueError("cannot parse integer from empty string")
    negative = text[0] == "-"
    digits = text[1:] if text[0] in "+-" else text
    if not digits or not (digits.isascii() and digits.isdigit()):
        raise ValueError("invalid digit found in string")
    value = -int(digits) if negative else int(digits)
    if value > (1 << (bits - 1)) - 1:
        raise ValueError("number too large to fit in target type")
    if value < -(1 << (bits - 1)):
        raise ValueError("number too small to fit in target type")
    return value


def _checked_i32(value: int, operation: str) -> int:
    if not -(1 << 31) <= value <= (1 << 31) - 1:
        raise OverflowError(f"attempt to {operation} with overflow")
    return value


def generate_nametag_text(name: str) -> str:
    """Return nametag text for a name; raise ValueError if the name is empty."""
    if not name:
        raise ValueError("`name` was empty; it must be nonempty.")
    return f"Hi! My name is {name}"


def total_cost(item_quantity: str) -> int:
    """Return the token cost of buying the typed quantity of items.

    Raises ValueError if the quantity is not a 32-bit integer.
    """
    quantity = _parse_int(item_quantity, 32)
    subtotal = _checked_i32(quantity * _COST_PER_ITEM, "multiply")
    return _checked_i32(subtotal + _PROCESSING_FEE, "add")


def spend_tokens(tokens: int, item_quantity: str) -> tuple[int, str]:
    """Buy items if affordable; return the tokens left and a message for the player."""
    cost = total_cost(item_quantity)
    if cost > tokens:
        return tokens, "You can't afford that many!"
    remaining = tokens - cost
    return remaining, f"You now have {remaining} tokens."


class CreationError(ValueError):
    """A value could not become a positive, nonzero integer."""

    NEGATIVE = "Negative"
    ZERO = "Zero"

    def __init__(self, kind: str) -> None:
        if kind not in (self.NEGATIVE, self.ZERO):
            raise ValueError(f"unknown creation error kind: {kind!r}")
        super().__init__(kind)
        self.kind = kind

    def __str__(self) -> str:
        return self.kind

    def __repr__(self) -> str:
        return f"CreationError({self.kind!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CreationError):
            return NotImplemented
        return self.kind == other.kind

    def __hash__(self) -> int:
        return hash(self.kind)


@dataclass(frozen=True)
class PositiveNonzeroInteger:
    """An integer known to be greater than zero."""

    value: int

    @classmethod
    def new(cls, value: int) -> PositiveNonzeroInteger:
        """Validate ``value``; raise CreationError if it is zero or negative."""
        if value == 0:
            raise CreationError(CreationError.ZERO)
        if value < 0:
            raise CreationError(CreationError.NEGATIVE)
        return cls(value)


def read_and_validate(stream: TextIO) -> PositiveNonzeroInteger:
    """Read one line from ``stream`` and turn it into a PositiveNonzeroInteger.

    Reading errors propagate as OSError, unparsable input as ValueError and
    values that are not positive as CreationError.
    """
    line = stream.readline()
    number = _parse_int(line.strip(), 64)
    return PositiveNonzeroInteger.new(number)


def _debug(item: Any) -> str:
    if isinstance(item, str):
        escaped = item.replace("\\", "\\\\").replace('"', '\\"')
        return f'"{escaped}"'
    return repr(item)


def describe_last_two(items: list[Any]) -> list[str]:
    """Describe the last and second-to-last items, coping with short lists."""
    remaining = list(items)
    lines = []
    for label in ("last", "second-to-last"):
        if remaining:
            lines.append(f"The {label} item in the list is {_debug(remaining.pop())}")
        else:
            lines.append(f"The list has no {label} item")
    return lines