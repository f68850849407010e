"""Registry holding the four export selection panels."""

from __future__ import annotations

import logging
from typing import Any, Callable, Iterator, Mapping

from PySide6.QtCore import QObject

from mx_common.errors import PanelNotFoundError
from mx_gui.schema.panels import DEFAULT_ID_PREFIX, PanelSpec, build_panel_specs
from mx_gui.viewmodels.table_panel_vm import TablePanelViewModel

logger = logging.getLogger(__name__)


class SelectionTableRegistry(QObject):
    """Name-based access to the role, flow, batch and ITSM panels.

    Panels are children of the registry and share its lifetime. No state is
    shared between panels.
    """

    def __init__(
        self,
        translate: Callable[[str], str] | None = None,
        *,
        specs: Mapping[str, PanelSpec] | None = None,
        id_prefix: int = DEFAULT_ID_PREFIX,
        parent: QObject | None = None,
    ) -> None:
        super().__init__(parent)
        if specs is None:
            if translate is None:
                specs = build_panel_specs(id_prefix=id_prefix)
            else:
                specs = build_panel_specs(translate, id_prefix=id_prefix)
        self._panels: dict[str, TablePanelViewModel] = {
            name: TablePanelViewModel(spec, self) for name, spec in specs.items()
        }

    @property
    def names(self) -> list[str]:
        """Panel names in display order."""
        return list(self._panels)

    def panel(self, name: str) -> TablePanelViewModel:
        """Return the panel called ``name``.

        Raises PanelNotFoundError for names the registry does not hold.
        """
        try:
            return self._panels[name]
        except KeyError:
            logger.warning("Unknown panel requested: %s", name)
            raise PanelNotFoundError(
                f"Panel '{name}' not found",
                context={"panel": name, "available": self.names},
            ) from None

    def __getitem__(self, name: str) -> TablePanelViewModel:
        return self.panel(name)

    def __contains__(self, name: object) -> bool:
        return name in self._panels

    def __iter__(self) -> Iterator[TablePanelViewModel]:
        return iter(self._panels.values())

    def __len__(self) -> int:
        return len(self._panels)

    def export_selection(self) -> dict[str, list[Any]]:
        """Selected row keys per panel, for the export step."""
        return {name: panel.selected_keys() for name, panel in self._panels.items()}

    def selection_counts(self) -> dict[str, int]:
        return {name: panel.selected_count for name, panel in self._panels.items()}
