"""GUI settings resolved from the environment."""

from __future__ import annotations

from typing import Mapping

from pydantic import BaseModel, Field, ValidationError

from mx_common.config import env_value, parse_bool_env, parse_int_env
from mx_common.errors import ConfigurationError
from mx_gui.i18n import DEFAULT_LOCALE


class GUISettings(BaseModel):
    """Presentation and fetch options shared by every panel."""

    locale: str = DEFAULT_LOCALE
    id_prefix_length: int = Field(default=7, ge=1)
    threaded_fetch: bool = True

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "GUISettings":
        """Build settings from ``MX_GUI_*`` variables.

        Unset variables keep their defaults; values that fail validation raise
        ConfigurationError.
        """
        values: dict[str, object] = {}

        locale = env_value("MX_GUI_LOCALE", environ)
        if locale:
            values["locale"] = locale

        raw_prefix = env_value("MX_GUI_ID_PREFIX", environ)
        if raw_prefix is not None:
            prefix = parse_int_env(raw_prefix)
            if prefix is None:
                raise ConfigurationError(
                    "MX_GUI_ID_PREFIX must be an integer",
                    context={"value": raw_prefix},
                )
            values["id_prefix_length"] = prefix

        threaded = parse_bool_env(env_value("MX_GUI_THREADED_FETCH", environ))
        if threaded is not None:
            values["threaded_fetch"] = threaded

        try:
            return cls(**values)
        except ValidationError as exc:
            raise ConfigurationError(
                "Invalid GUI settings",
                context={"errors": [err["msg"] for err in exc.errors()]},
                cause=exc,
            ) from exc
