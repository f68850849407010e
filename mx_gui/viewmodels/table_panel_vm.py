"""ViewModel for one selection table panel."""

from __future__ import annotations

import logging
from collections import Counter
from typing import Any, Hashable, Iterable

from PySide6.QtCore import QObject, Signal

from mx_gui.schema.columns import ColumnDescriptor, read_field
from mx_gui.schema.display import DisplayValue
from mx_gui.schema.panels import PanelSpec
from mx_gui.viewmodels.search_form_vm import SearchFormViewModel

logger = logging.getLogger(__name__)


class TablePanelViewModel(QObject):
    """ViewModel for a table panel.

    Holds the rows written by the fetch collaborator, the checked subset of
    those rows and the loading flag. Rows are identified by the panel's row key
    (object identity when a row has no usable key; rows sharing a key are told
    apart by position), and the selection never holds a key that is absent
    from the current rows.
    """

    # Signals
    rows_changed = Signal(list)  # list of rows
    selection_changed = Signal(list)  # selected rows, in row order
    loading_changed = Signal(bool)

    def __init__(
        self,
        spec: PanelSpec,
        parent: QObject | None = None,
    ) -> None:
        super().__init__(parent)
        self._spec = spec
        self._search_form: SearchFormViewModel | None = None
        if spec.search_fields:
            self._search_form = SearchFormViewModel(spec.search_fields, self)

        # State
        self._rows: list[Any] = []
        self._keys: list[Hashable] = []  # parallel to _rows
        self._selected: set[Hashable] = set()
        self._loading: bool = False

    @property
    def spec(self) -> PanelSpec:
        return self._spec

    @property
    def name(self) -> str:
        """Panel name (role, flow, batch or itsm)."""
        return self._spec.name

    @property
    def title(self) -> str:
        return self._spec.title

    @property
    def columns(self) -> tuple[ColumnDescriptor, ...]:
        """Column schema, selection column included."""
        return self._spec.columns

    @property
    def headers(self) -> list[str]:
        """Titles of the data columns."""
        return [column.title for column in self._spec.data_columns]

    @property
    def rows(self) -> list[Any]:
        """Current rows."""
        return list(self._rows)

    @property
    def loading(self) -> bool:
        return self._loading

    @property
    def search_form(self) -> SearchFormViewModel | None:
        """Search form, None for panels without filters."""
        return self._search_form

    @property
    def selected_count(self) -> int:
        return len(self._selected)

    def _base_key(self, row: Any) -> Hashable:
        value = read_field(row, self._spec.row_key)
        if value is None:
            return ("object", id(row))
        try:
            hash(value)
        except TypeError:
            return ("object", id(row))
        return value

    def _index_keys(self, rows: list[Any]) -> list[Hashable]:
        """Selection keys for ``rows``; repeated keys are told apart by occurrence."""
        base = [self._base_key(row) for row in rows]
        counts = Counter(base)
        seen: Counter = Counter()
        keys: list[Hashable] = []
        for key in base:
            if counts[key] > 1:
                keys.append(("duplicate", key, seen[key]))
                seen[key] += 1
            else:
                keys.append(key)
        return keys

    def row_key(self, row: Any) -> Hashable:
        """Stable identity used for selection.

        A row held by the panel gets the key assigned in ``set_rows``; any other
        row is keyed by its row-key field (object identity when it has none).
        """
        for held, key in zip(self._rows, self._keys):
            if held is row:
                return key
        return self._base_key(row)

    def set_loading(self, loading: bool) -> None:
        """Set the loading flag; views disable row interaction while it is set."""
        loading = bool(loading)
        if loading == self._loading:
            return
        self._loading = loading
        self.loading_changed.emit(loading)

    def set_rows(self, rows: Iterable[Any]) -> None:
        """Replace all rows, dropping selections whose row disappeared.

        Loading is cleared before ``rows_changed`` fires.
        """
        new_rows = list(rows)
        new_keys = self._index_keys(new_rows)
        kept = self._selected & set(new_keys)
        dropped = len(self._selected) - len(kept)

        self._rows = new_rows
        self._keys = new_keys
        self._selected = kept
        logger.debug(
            "Panel %s received %d rows (%d stale selections dropped)",
            self.name,
            len(new_rows),
            dropped,
        )

        self.set_loading(False)
        self.rows_changed.emit(self.rows)
        if dropped:
            self.selection_changed.emit(self.get_selection())

    def is_selected(self, row: Any) -> bool:
        return self.row_key(row) in self._selected

    def set_selected(self, row: Any, selected: bool) -> None:
        """Check or uncheck a row; rows not currently held are ignored."""
        key = self.row_key(row)
        if key not in self._keys:
            logger.debug("Panel %s ignored selection of unknown row %r", self.name, key)
            return
        if selected == (key in self._selected):
            return
        if selected:
            self._selected.add(key)
        else:
            self._selected.discard(key)
        self.selection_changed.emit(self.get_selection())

    def toggle_selection(self, row: Any) -> None:
        """Flip the checked state of a row."""
        self.set_selected(row, not self.is_selected(row))

    def select_all(self) -> None:
        """Check every row; no-op when there are no rows."""
        if not self._rows:
            return
        keys = set(self._keys)
        if keys == self._selected:
            return
        self._selected = keys
        self.selection_changed.emit(self.get_selection())

    def clear_selection(self) -> None:
        """Uncheck every row."""
        if not self._selected:
            return
        self._selected = set()
        self.selection_changed.emit([])

    def get_selection(self) -> list[Any]:
        """Selected rows in row order."""
        return [row for row, key in zip(self._rows, self._keys) if key in self._selected]

    def selected_keys(self) -> list[Any]:
        """Raw row-key values of the selected rows, in row order."""
        return [read_field(row, self._spec.row_key) for row in self.get_selection()]

    def render_row(self, row: Any) -> list[DisplayValue]:
        """Display values for every data column of ``row``."""
        return [column.render(row) for column in self._spec.data_columns]

    def render_rows(self) -> list[list[DisplayValue]]:
        """Display values for all current rows."""
        return [self.render_row(row) for row in self._rows]
