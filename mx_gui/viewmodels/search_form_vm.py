"""ViewModel for a panel's search form."""

from __future__ import annotations

from typing import Sequence

from PySide6.QtCore import QObject, Signal

from mx_gui.schema.search import SearchField


class SearchFormViewModel(QObject):
    """Search parameters bound to a fixed set of fields.

    Values are stored as given. Deciding what an unrecognised select value
    means is left to whoever consumes ``get_parameters()``.
    """

    # Signals
    parameters_changed = Signal(dict)  # parameters snapshot
    search_requested = Signal(dict)  # parameters snapshot

    def __init__(
        self,
        fields: Sequence[SearchField],
        parent: QObject | None = None,
    ) -> None:
        super().__init__(parent)
        self._fields = tuple(fields)

        # State
        self._values: dict[str, str] = {field.key: "" for field in self._fields}

    @property
    def fields(self) -> tuple[SearchField, ...]:
        """Declared search fields, in display order."""
        return self._fields

    @property
    def is_blank(self) -> bool:
        """Whether every parameter is unset."""
        return all(value == "" for value in self._values.values())

    def value(self, key: str) -> str:
        """Current value of one parameter."""
        return self._values.get(key, "")

    def set_field_value(self, key: str, value: str) -> None:
        """Update one parameter."""
        self._values[key] = value
        self.parameters_changed.emit(self.get_parameters())

    def reset(self) -> None:
        """Set every parameter back to the empty string."""
        self._values = {key: "" for key in self._values}
        self.parameters_changed.emit(self.get_parameters())

    def get_parameters(self) -> dict[str, str]:
        """Snapshot of the current parameters."""
        return dict(self._values)

    def submit(self) -> None:
        """Ask the fetch collaborator to search with the current parameters."""
        self.search_requested.emit(self.get_parameters())
