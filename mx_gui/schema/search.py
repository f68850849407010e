"""Search field declarations bound to a panel's query parameters."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Sequence

from mx_common.errors import SchemaError


class SearchFieldKind(str, Enum):
    INPUT = "input"
    SELECT = "select"


@dataclass(frozen=True)
class SearchOption:
    value: str
    label: str


@dataclass(frozen=True)
class SearchField:
    """One filter input.

    ``options`` is only meaningful for ``SELECT`` fields and is dropped for
    free-text ones.
    """

    key: str
    placeholder: str
    kind: SearchFieldKind = SearchFieldKind.INPUT
    options: tuple[SearchOption, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        if self.kind is SearchFieldKind.SELECT and not self.options:
            raise SchemaError(
                f"Select field '{self.key}' needs options",
                context={"key": self.key},
            )
        if self.kind is SearchFieldKind.INPUT and self.options:
            object.__setattr__(self, "options", ())

    def option_label(self, value: str) -> str | None:
        """Label for a select value, None when the value is not an option."""
        return next((opt.label for opt in self.options if opt.value == value), None)


def validate_fields(fields: Sequence[SearchField]) -> tuple[SearchField, ...]:
    """Freeze a field list, rejecting duplicate parameter keys."""
    frozen = tuple(fields)
    seen: set[str] = set()
    for search_field in frozen:
        if search_field.key in seen:
            raise SchemaError(
                f"Duplicate search field '{search_field.key}'",
                context={"key": search_field.key},
            )
        seen.add(search_field.key)
    return frozen
