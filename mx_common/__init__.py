"""Shared helpers for the export selection panels."""

from mx_common.api import MXError, configure_logging

__all__ = ["configure_logging", "MXError"]
