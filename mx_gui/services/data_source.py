"""Row sources the panel loader fetches from."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Mapping, Protocol, Sequence

import yaml

from mx_common.errors import DataSourceError
from mx_gui.schema.columns import read_field
from mx_gui.schema.panels import ITSM, ITSM_SCENES, PANEL_NAMES

logger = logging.getLogger(__name__)


class PanelDataSource(Protocol):
    """Anything that can produce rows for a panel and its search parameters."""

    def fetch(self, panel: str, parameters: Mapping[str, str]) -> list[Any]:
        ...


def _contains(row: Any, key: str, needle: str) -> bool:
    value = read_field(row, key)
    if value is None:
        return False
    return needle.lower() in str(value).lower()


def filter_rows(panel: str, rows: Sequence[Any], parameters: Mapping[str, str]) -> list[Any]:
    """Apply search parameters to rows.

    ``name`` and ``id`` match case-insensitive substrings. ``scene`` matches
    ITSM rows whose ``type`` equals a known scene code; other scene values
    mean no filter. Empty values are ignored.
    """
    result = list(rows)
    name = (parameters.get("name") or "").strip()
    if name:
        result = [row for row in result if _contains(row, "name", name)]
    row_id = (parameters.get("id") or "").strip()
    if row_id:
        result = [row for row in result if _contains(row, "id", row_id)]
    scene = (parameters.get("scene") or "").strip()
    if panel == ITSM and scene in ITSM_SCENES:
        result = [row for row in result if str(read_field(row, "type", "")) == scene]
    return result


class StaticPanelDataSource:
    """In-memory rows per panel, filtered like the export backend does."""

    def __init__(self, rows: Mapping[str, Sequence[Any]] | None = None) -> None:
        self._rows: dict[str, list[Any]] = {
            name: list((rows or {}).get(name, [])) for name in PANEL_NAMES
        }

    @classmethod
    def from_file(cls, path: Path) -> "StaticPanelDataSource":
        """Load rows from a YAML (or JSON) file keyed by panel name."""
        try:
            with path.open("r", encoding="utf-8") as handle:
                data = yaml.safe_load(handle) or {}
        except (OSError, yaml.YAMLError) as exc:
            raise DataSourceError(
                f"Failed to read rows from {path}",
                context={"path": path},
                cause=exc,
            ) from exc
        if not isinstance(data, dict):
            raise DataSourceError(
                "Row file must map panel names to row lists",
                context={"path": path},
            )
        unknown = sorted(str(key) for key in data if key not in PANEL_NAMES)
        if unknown:
            logger.warning("Ignoring rows for unknown panels: %s", ", ".join(unknown))
        rows = {name: data.get(name) or [] for name in PANEL_NAMES}
        for name, panel_rows in rows.items():
            if not isinstance(panel_rows, list):
                raise DataSourceError(
                    f"Rows for panel '{name}' must be a list",
                    context={"path": path, "panel": name},
                )
        return cls(rows)

    def set_rows(self, panel: str, rows: Sequence[Any]) -> None:
        self._rows[panel] = list(rows)

    def fetch(self, panel: str, parameters: Mapping[str, str]) -> list[Any]:
        if panel not in self._rows:
            raise DataSourceError(f"No rows for panel '{panel}'", context={"panel": panel})
        return filter_rows(panel, self._rows[panel], parameters)
