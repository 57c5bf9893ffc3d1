"""Markdown building blocks: table cells, links, tables and hint callouts."""

from __future__ import annotations

from typing import Iterable, Sequence

from chain_docs.maybe import DEFAULT_PLACEHOLDER, Maybe, Missing, Present, from_optional


def fmt_str(value: Maybe[str] | str | None, placeholder: str = DEFAULT_PLACEHOLDER) -> str:
    """Render a string cell as inline code, or the placeholder when missing."""
    if not isinstance(value, (Present, Missing)):
        value = from_optional(value)
    return value.map(lambda s: f"`{s}`").render(placeholder)


def fmt_num(value: Maybe[int] | int | None, placeholder: str = DEFAULT_PLACEHOLDER) -> str:
    """Render a numeric cell, or the placeholder when missing."""
    if not isinstance(value, (Present, Missing)):
        value = from_optional(value)
    return value.map(str).render(placeholder)


def md_link(label: str, url: str) -> str:
    return f"[{label}]({url})"


def hint(text: str, style: str = "info") -> str:
    """Wrap ``text`` in a docs-site hint callout."""
    return f"{{% hint style='{style}' %}}\n{text}\n{{% endhint %}}"


def table_row(cells: Iterable[str]) -> str:
    return "|" + "|".join(cells) + "|"


def table(header: Sequence[str], rows: Iterable[Sequence[str]], rule: Sequence[str] | None = None) -> list[str]:
    """Build Markdown table lines.

    Args:
        header: Column titles
        rows: Cell values per row
        rule: Separator cells (dashes sized to each header by default)

    Returns:
        Table lines, without a trailing newline
    """
    if rule is None:
        rule = ["-" * len(h) for h in header]
    lines = [table_row(header), table_row(rule)]
    lines.extend(table_row(row) for row in rows)
    return lines


__all__ = [
    "fmt_str",
    "fmt_num",
    "md_link",
    "hint",
    "table_row",
    "table",
]
