"""Environment variable parsing utilities."""

from __future__ import annotations

import os
from typing import Mapping

_TRUE = {"1", "true", "yes", "on"}


def env_value(name: str, environ: Mapping[str, str] | None = None) -> str | None:
    """Stripped value of ``name``; unset and blank both read as None."""
    env = os.environ if environ is None else environ
    raw = env.get(name)
    if raw is None:
        return None
    raw = raw.strip()
    return raw or None


def parse_bool_env(value: str | None) -> bool | None:
    """True for 1/true/yes/on in any case, False for anything else, None when unset."""
    if value is None:
        return None
    return value.strip().lower() in _TRUE


def parse_int_env(value: str | None) -> int | None:
    """Integer value, or None when unset or not a number."""
    if value is None:
        return None
    try:
        return int(value.strip())
    except (TypeError, ValueError):
        return None
