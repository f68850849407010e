"""Tests for display values."""

import pytest

from mx_gui.schema.display import (
    Badge,
    BadgeList,
    Blank,
    Composite,
    Placeholder,
    Text,
    TruncatedText,
    display_text,
    tooltip_text,
    truncate,
)


pytestmark = pytest.mark.unit_gui


def test_truncate_keeps_prefix_and_full_value() -> None:
    assert truncate("abcdef1234567", 7) == TruncatedText("abcdef1...", "abcdef1234567")


def test_truncate_short_text_still_gets_ellipsis() -> None:
    assert truncate("abc", 7).text == "abc..."


def test_display_text_variants() -> None:
    assert display_text(Text("plain")) == "plain"
    assert display_text(Badge("使用", "#19be6b")) == "使用"
    assert display_text(BadgeList((Badge("Ops"), Badge("Dev")))) == "Ops, Dev"
    assert display_text(Composite("deploy", Badge("v3"))) == "deploy v3"
    assert display_text(Composite("deploy")) == "deploy"
    assert display_text(Placeholder()) == "-"
    assert display_text(Blank()) == ""


def test_tooltip_text() -> None:
    assert tooltip_text(TruncatedText("ab...", "abcdef")) == "abcdef"
    assert tooltip_text(Text("desc", tooltip="long desc")) == "long desc"
    assert tooltip_text(Badge("x")) is None


def test_kinds_are_distinct() -> None:
    kinds = {cls.kind for cls in (Text, Badge, BadgeList, TruncatedText, Composite, Placeholder, Blank)}
    assert len(kinds) == 7
