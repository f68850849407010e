"""Public API surface for mx_common."""

from mx_common.errors import (
    ConfigurationError,
    DataSourceError,
    MXError,
    PanelNotFoundError,
    SchemaError,
    error_to_payload,
    wrap_error,
)
from mx_common.logging import configure_logging, panel_log_context

__all__ = [
    "configure_logging",
    "panel_log_context",
    "ConfigurationError",
    "DataSourceError",
    "MXError",
    "PanelNotFoundError",
    "SchemaError",
    "error_to_payload",
    "wrap_error",
]
