"""Translation lookup injected into the panel schema builders."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Mapping

import yaml

from mx_common.errors import ConfigurationError
from mx_gui.resources import resource_path

logger = logging.getLogger(__name__)

DEFAULT_LOCALE = "zh-CN"
_CATALOG_DIR = "i18n"


def available_locales() -> list[str]:
    """Locales that ship a packaged catalogue."""
    return sorted(path.stem for path in resource_path(_CATALOG_DIR).glob("*.yaml"))


def _read_catalog(path: Path) -> dict[str, str]:
    with path.open("r", encoding="utf-8") as handle:
        data = yaml.safe_load(handle) or {}
    if not isinstance(data, dict):
        raise ConfigurationError(
            "Translation catalogue must be a mapping",
            context={"path": path},
        )
    return {str(key): str(value) for key, value in data.items()}


class Translator:
    """Key to message lookup; unknown keys translate to themselves."""

    def __init__(self, messages: Mapping[str, str] | None = None, locale: str = DEFAULT_LOCALE) -> None:
        self._messages = dict(messages or {})
        self._locale = locale

    @classmethod
    def load(cls, locale: str = DEFAULT_LOCALE) -> "Translator":
        """Load the packaged catalogue for ``locale``."""
        path = resource_path(_CATALOG_DIR) / f"{locale}.yaml"
        if not path.is_file():
            raise ConfigurationError(
                f"Unknown locale '{locale}'",
                context={"locale": locale, "available": available_locales()},
            )
        messages = _read_catalog(path)
        logger.debug("Loaded %d messages for locale %s", len(messages), locale)
        return cls(messages, locale)

    @classmethod
    def from_file(cls, path: Path, locale: str | None = None) -> "Translator":
        """Load a catalogue from an arbitrary YAML file."""
        return cls(_read_catalog(path), locale or path.stem)

    @property
    def locale(self) -> str:
        return self._locale

    def __call__(self, key: str) -> str:
        return self._messages.get(key, key)

    def __contains__(self, key: object) -> bool:
        return key in self._messages
