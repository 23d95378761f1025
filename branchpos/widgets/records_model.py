"""
Base table model over a list of dataclass records.

Subclasses set HEADERS and implement `display(row, col)`; columns listed in
NUMERIC_COLUMNS are right-aligned.
"""

from __future__ import annotations

from typing import Any, List, Sequence

from PySide6.QtCore import QAbstractTableModel, QModelIndex, Qt


class RecordsTableModel(QAbstractTableModel):
    HEADERS: List[str] = []
    NUMERIC_COLUMNS: Sequence[int] = ()

    def __init__(self, rows: list | None = None):
        super().__init__()
        self._rows = list(rows or [])

    def rowCount(self, parent=QModelIndex()):  # type: ignore[override]
        return 0 if parent.isValid() else len(self._rows)

    def columnCount(self, parent=QModelIndex()):  # type: ignore[override]
        return len(self.HEADERS)

    def data(self, index, role=Qt.DisplayRole):  # type: ignore[override]
        if not index.isValid():
            return None
        row = self._rows[index.row()]
        if role in (Qt.DisplayRole, Qt.EditRole):
            val = self.display(row, index.column())
            return "" if val is None else val
        if role == Qt.TextAlignmentRole and index.column() in self.NUMERIC_COLUMNS:
            return int(Qt.AlignRight | Qt.AlignVCenter)
        if role == Qt.ForegroundRole:
            return self.foreground(row, index.column())
        return None

    def headerData(self, section, orientation, role=Qt.DisplayRole):  # type: ignore[override]
        if orientation == Qt.Horizontal and role == Qt.DisplayRole:
            return self.HEADERS[section] if section < len(self.HEADERS) else None
        return super().headerData(section, orientation, role)

    # hooks -------------------------------------------------------------
    def display(self, row: Any, col: int) -> Any:
        raise NotImplementedError

    def foreground(self, row: Any, col: int) -> Any:
        return None

    # access ------------------------------------------------------------
    def at(self, row: int) -> Any:
        return self._rows[row]

    def rows(self) -> list:
        return list(self._rows)

    def replace(self, rows: list):
        self.beginResetModel()
        self._rows = list(rows or [])
        self.endResetModel()
