"""Column descriptors and the formatter factories used to build them."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Iterable, Mapping, Sequence

from mx_common.errors import SchemaError
from mx_gui.schema.display import (
    Badge,
    BadgeList,
    Blank,
    Composite,
    DisplayValue,
    Placeholder,
    Text,
    truncate,
)

Row = Any
Formatter = Callable[[Row], DisplayValue]

SELECTION_KEY = "_selection"
SELECTION_WIDTH = 55


def read_field(row: Row, key: str, default: Any = None) -> Any:
    """Read ``key`` from a mapping or attribute object.

    Dotted keys walk nested values; any missing step yields ``default``.
    """
    value = row
    for part in key.split("."):
        if value is None:
            return default
        if isinstance(value, Mapping):
            value = value.get(part)
        else:
            value = getattr(value, part, None)
    return default if value is None else value


def is_empty(value: Any) -> bool:
    """True for None, blank strings, empty collections and falsy scalars.

    Zero and False count as empty, so a numeric version of 0 shows the
    placeholder like a missing one.
    """
    if value is None:
        return True
    if isinstance(value, (bool, int, float)):
        return not value
    if isinstance(value, str):
        return value.strip() == ""
    if isinstance(value, (list, tuple, set, frozenset, dict)):
        return len(value) == 0
    return False


def _as_strings(value: Any, label_key: str | None = None) -> list[str]:
    if value is None:
        return []
    if isinstance(value, str):
        return [value] if value else []
    if not isinstance(value, Iterable):
        return [str(value)]
    items: list[str] = []
    for item in value:
        if label_key is not None:
            item = read_field(item, label_key)
        if is_empty(item):
            continue
        items.append(str(item))
    return items


@dataclass(frozen=True)
class BadgeStyle:
    """Label and colour a status code maps to."""

    label: str
    color: str | None = None


def text(key: str) -> Formatter:
    """Field value as text, placeholder when empty."""

    def _format(row: Row) -> DisplayValue:
        value = read_field(row, key)
        if is_empty(value):
            return Placeholder()
        return Text(str(value))

    return _format


def ellipsis_text(key: str) -> Formatter:
    """Text that the widget may elide; the full value is kept as tooltip."""

    def _format(row: Row) -> DisplayValue:
        value = read_field(row, key)
        if is_empty(value):
            return Placeholder()
        return Text(str(value), tooltip=str(value))

    return _format


def badge(key: str, color: str | None = None, *, empty: DisplayValue = Placeholder()) -> Formatter:
    """Field value as a single tag."""

    def _format(row: Row) -> DisplayValue:
        value = read_field(row, key)
        if is_empty(value):
            return empty
        return Badge(str(value), color)

    return _format


def badge_list(key: str, *, label_key: str | None = None) -> Formatter:
    """Sequence field as a run of tags.

    ``label_key`` picks a field out of each element when the sequence holds
    records rather than strings.
    """

    def _format(row: Row) -> DisplayValue:
        labels = _as_strings(read_field(row, key), label_key)
        if not labels:
            return Placeholder()
        return BadgeList(tuple(Badge(label) for label in labels))

    return _format


def truncated(key: str, length: int) -> Formatter:
    """First ``length`` characters followed by an ellipsis."""

    def _format(row: Row) -> DisplayValue:
        value = read_field(row, key)
        if is_empty(value):
            return Placeholder()
        return truncate(str(value), length)

    return _format


def mapped_badge(
    key: str,
    mapping: Mapping[str, BadgeStyle],
    *,
    fallback: DisplayValue = Blank(),
) -> Formatter:
    """Closed code-to-badge mapping; unmapped codes render ``fallback``."""
    styles = {str(code): style for code, style in mapping.items()}

    def _format(row: Row) -> DisplayValue:
        value = read_field(row, key)
        style = styles.get(str(value)) if value is not None else None
        if style is None:
            return fallback
        return Badge(style.label, style.color)

    return _format


def text_with_badge(key: str, badge_key: str) -> Formatter:
    """Field text followed by another field as a trailing tag."""

    def _format(row: Row) -> DisplayValue:
        value = read_field(row, key)
        if is_empty(value):
            return Placeholder()
        suffix = read_field(row, badge_key)
        trailing = None if is_empty(suffix) else Badge(str(suffix))
        return Composite(str(value), trailing)

    return _format


@dataclass(frozen=True)
class ColumnDescriptor:
    """One table column: label, layout hints and cell formatter."""

    key: str
    title: str
    width: int | None = None
    min_width: int | None = None
    align: str | None = None
    resizable: bool = False
    is_selection: bool = False
    formatter: Formatter | None = None

    def render(self, row: Row) -> DisplayValue:
        if self.is_selection:
            return Blank()
        formatter = self.formatter or text(self.key)
        return formatter(row)


def selection_column() -> ColumnDescriptor:
    """The checkbox column every panel starts with."""
    return ColumnDescriptor(
        key=SELECTION_KEY,
        title="",
        width=SELECTION_WIDTH,
        align="center",
        is_selection=True,
    )


def validate_columns(columns: Sequence[ColumnDescriptor]) -> tuple[ColumnDescriptor, ...]:
    """Freeze a column list, enforcing a single leading selection column."""
    frozen = tuple(columns)
    positions = [i for i, column in enumerate(frozen) if column.is_selection]
    if len(positions) > 1:
        raise SchemaError(
            "At most one selection column is allowed",
            context={"positions": positions},
        )
    if positions and positions[0] != 0:
        raise SchemaError(
            "Selection column must be the first column",
            context={"position": positions[0]},
        )
    return frozen
