"""
Optional values for the formatting boundary.

Chain configuration is sparse: most chains define only some of the
ecosystem links, contract roles and finality levels. Instead of checking
for ``None`` all through the formatter, values are lifted into
``Present(value)`` or ``MISSING`` once, and collapsed to text only where a
table cell is written.

Manifesto:
    - **Absence is data:** a missing address is still a row with a cell
    - **Zero is present:** ``finalized == 0`` is a real setting, not a gap
    - **Render late:** the placeholder is chosen by whoever writes the cell

Architecture:
    ::

        ┌──────────────────────────────────────────────────┐
        │                    Maybe[T]                       │
        ├────────────────────────┬─────────────────────────┤
        │      Present[T]        │        Missing          │
        │  • value: T            │  (singleton MISSING)    │
        │  • map()               │  • map() -> MISSING     │
        │  • unwrap_or()         │  • unwrap_or(default)   │
        │  • render()            │  • render(placeholder)  │
        └────────────────────────┴─────────────────────────┘

Examples:
    >>> from_optional(None) is MISSING
    True
    >>> from_optional(0)
    Present(value=0)
    >>> from_optional("  ").render("-")
    '-'
    >>> from_optional("0xabc").map(lambda s: f"`{s}`").render()
    '`0xabc`'

Tags:
    optional, sum-type, formatting, chain-docs
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Generic, TypeVar, Union


T = TypeVar("T")
U = TypeVar("U")

DEFAULT_PLACEHOLDER = " "


@dataclass(frozen=True, slots=True)
class Present(Generic[T]):
    """A value that was supplied by the configuration."""

    value: T

    def is_present(self) -> bool:
        return True

    def map(self, fn: Callable[[T], U]) -> "Present[U]":
        """Transform the wrapped value."""
        return Present(fn(self.value))

    def unwrap_or(self, default: Any) -> T:
        return self.value

    def render(self, placeholder: str = DEFAULT_PLACEHOLDER) -> str:
        """Render the wrapped value as text."""
        return str(self.value)


@dataclass(frozen=True, slots=True)
class Missing:
    """Marker for a value the configuration does not define."""

    def is_present(self) -> bool:
        return False

    def map(self, fn: Callable[[Any], Any]) -> "Missing":
        return self

    def unwrap_or(self, default: U) -> U:
        return default

    def render(self, placeholder: str = DEFAULT_PLACEHOLDER) -> str:
        return placeholder

    def __repr__(self) -> str:
        return "MISSING"


MISSING = Missing()

Maybe = Union[Present[T], Missing]


def from_optional(value: T | None) -> Maybe[T]:
    """Lift an optional configuration value into ``Maybe``.

    ``None`` and blank strings become ``MISSING``; everything else,
    including falsy numbers, is ``Present``.
    """
    if value is None:
        return MISSING
    if isinstance(value, str) and not value.strip():
        return MISSING
    return Present(value)


__all__ = [
    "DEFAULT_PLACEHOLDER",
    "Present",
    "Missing",
    "MISSING",
    "Maybe",
    "from_optional",
]
