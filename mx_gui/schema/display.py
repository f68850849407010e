"""Display values produced by column formatters.

Formatters never build widgets. They return one of the variants below and the
table widget switches on ``kind`` to draw the cell.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Union

PLACEHOLDER = "-"
ELLIPSIS = "..."


@dataclass(frozen=True)
class Text:
    """Plain text cell."""

    kind: ClassVar[str] = "text"
    text: str
    tooltip: str | None = None


@dataclass(frozen=True)
class Badge:
    """A tag with an optional colour (hex string or a named tag colour)."""

    kind: ClassVar[str] = "badge"
    text: str
    color: str | None = None


@dataclass(frozen=True)
class BadgeList:
    """An ordered run of tags."""

    kind: ClassVar[str] = "badge_list"
    badges: tuple[Badge, ...]

    @property
    def texts(self) -> list[str]:
        return [badge.text for badge in self.badges]


@dataclass(frozen=True)
class TruncatedText:
    """Shortened text with the full value kept for a hover tooltip."""

    kind: ClassVar[str] = "truncated"
    text: str
    full: str


@dataclass(frozen=True)
class Composite:
    """Text followed by a trailing badge, e.g. a name and its version."""

    kind: ClassVar[str] = "composite"
    text: str
    badge: Badge | None = None


@dataclass(frozen=True)
class Placeholder:
    """Absent or empty field."""

    kind: ClassVar[str] = "placeholder"
    text: str = PLACEHOLDER


@dataclass(frozen=True)
class Blank:
    """Nothing to draw (e.g. a status code outside the badge mapping)."""

    kind: ClassVar[str] = "blank"


DisplayValue = Union[Text, Badge, BadgeList, TruncatedText, Composite, Placeholder, Blank]


def display_text(value: DisplayValue) -> str:
    """Flatten a display value to the string a plain-text surface shows."""
    if isinstance(value, (Text, Badge, TruncatedText, Placeholder)):
        return value.text
    if isinstance(value, BadgeList):
        return ", ".join(value.texts)
    if isinstance(value, Composite):
        if value.badge is None:
            return value.text
        return f"{value.text} {value.badge.text}"
    return ""


def tooltip_text(value: DisplayValue) -> str | None:
    """Full text to show on hover, if the cell carries one."""
    if isinstance(value, TruncatedText):
        return value.full
    if isinstance(value, Text):
        return value.tooltip
    return None


def truncate(text: str, length: int) -> TruncatedText:
    """Keep the first ``length`` characters and append an ellipsis."""
    return TruncatedText(text=f"{text[:length]}{ELLIPSIS}", full=text)
