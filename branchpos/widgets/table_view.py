from PySide6.QtWidgets import QTableView, QHeaderView


class TableView(QTableView):
    def __init__(self, parent=None):
        super().__init__(parent)
        self.setSortingEnabled(False)
        self.setAlternatingRowColors(True)
        self.setSelectionBehavior(QTableView.SelectRows)
        self.setSelectionMode(QTableView.SingleSelection)
        self.setEditTriggers(QTableView.NoEditTriggers)
        self.verticalHeader().setVisible(False)
        self.horizontalHeader().setStretchLastSection(True)
        self.horizontalHeader().setSectionResizeMode(QHeaderView.Interactive)

    def selected_row(self) -> int | None:
        """Source row of the current selection, or None."""
        sm = self.selectionModel()
        if sm is None:
            return None
        rows = sm.selectedRows()
        if not rows:
            return None
        return rows[0].row()
