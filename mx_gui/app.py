"""Application setup and global services."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from mx_gui.i18n import Translator
from mx_gui.services import PanelDataSource, PanelLoader, StaticPanelDataSource
from mx_gui.settings import GUISettings
from mx_gui.viewmodels import SelectionTableRegistry

if TYPE_CHECKING:
    from mx_gui.windows import ExportSelectionWindow


class ServiceContainer:
    """Container for all GUI services (dependency injection)."""

    def __init__(
        self,
        settings: GUISettings | None = None,
        *,
        data_source: PanelDataSource | None = None,
        data_path: Path | None = None,
    ) -> None:
        self._settings = settings
        self._data_source = data_source
        self._data_path = data_path
        self._translator: Translator | None = None
        self._registry: SelectionTableRegistry | None = None
        self._loader: PanelLoader | None = None

    @property
    def settings(self) -> GUISettings:
        if self._settings is None:
            self._settings = GUISettings.from_env()
        return self._settings

    @property
    def translator(self) -> Translator:
        if self._translator is None:
            self._translator = Translator.load(self.settings.locale)
        return self._translator

    @property
    def data_source(self) -> PanelDataSource:
        if self._data_source is None:
            if self._data_path is not None:
                self._data_source = StaticPanelDataSource.from_file(self._data_path)
            else:
                self._data_source = StaticPanelDataSource()
        return self._data_source

    @property
    def registry(self) -> SelectionTableRegistry:
        if self._registry is None:
            self._registry = SelectionTableRegistry(
                self.translator,
                id_prefix=self.settings.id_prefix_length,
            )
        return self._registry

    @property
    def loader(self) -> PanelLoader:
        if self._loader is None:
            self._loader = PanelLoader(
                self.data_source,
                threaded=self.settings.threaded_fetch,
            )
            self._loader.bind(self.registry)
        return self._loader


def create_app(services: ServiceContainer | None = None) -> "ExportSelectionWindow":
    """Create and wire up the export selection window."""
    from mx_gui.windows import ExportSelectionWindow

    services = services or ServiceContainer()
    window = ExportSelectionWindow(services)
    return window
