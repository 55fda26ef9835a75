"""Language exercises: strings, macros, modules and ownership of collections."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

_COLOR_WORDS = frozenset({"green", "blue", "red"})
_FILL_VALUES = (22, 44, 66)

_FRUIT = "Pear"
_VEGGIE = "Cucumber"


def current_favorite_color() -> str:
    """Return the current favourite colour."""
    return "blue"


def is_a_color_word(attempt: str) -> bool:
    """Tell whether ``attempt`` is one of the known colour words."""
    return attempt in _COLOR_WORDS


def string_values() -> list[str]:
    """Return the results of a series of everyday string operations, in order."""
    return [
        "blue",
        "red",
        "hi",
        "rust is fun!",
        "nice weather",
        "Interpolation {}".format("Station"),
        "abc"[0:1],
        "  hello there ".strip(),
        "Happy Monday!".replace("Mon", "Tues"),
        "mY sHiFt KeY iS sTiCkY".lower(),
    ]


def hello(name: str) -> str:
    """Greet ``name``."""
    return f"Hello {name}"


def my_macro(*args: Any) -> str:
    """Return a message: a plain one with no argument, or one showing a single value.

    Raises TypeError when given more than one argument.
    """
    if not args:
        return "Check out my macro!"
    if len(args) == 1:
        return f"Look at this other macro: {args[0]}"
    raise TypeError(f"my_macro takes at most one argument ({len(args)} given)")


def make_sausage() -> str:
    """Return what the sausage factory produces."""
    return "sausage!"


def favorite_snacks() -> str:
    """Name the favourite fruit and vegetable."""
    return f"favorite snacks: {_FRUIT} and {_VEGGIE}"


def fill_vec(vec: Iterable[int] | None = None) -> list[int]:
    """Return a new list holding ``vec``'s items followed by 22, 44 and 66.

    The argument is left unchanged; without one, the list starts empty.
    """
    filled = list(vec) if vec is not None else []
    filled.extend(_FILL_VALUES)
    return filled


def describe_vec(name: str, vec: list[Any]) -> str:
    """Describe a list by name, length and content."""
    content = ", ".join(str(item) for item in vec)
    return f"{name} has length {len(vec)} content `[{content}]`"