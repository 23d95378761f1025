"""
Pagination bar shared by the list pages.

Holds the current page and page size; the owning controller slices its rows
with `slice(rows)` and calls `set_total(len(rows))` after every reload.
"""

from __future__ import annotations

from PySide6.QtCore import Signal
from PySide6.QtWidgets import QWidget, QHBoxLayout, QLabel, QComboBox, QPushButton

from ..constants import PAGE_SIZES, DEFAULT_PAGE_SIZE
from ..utils.helpers import page_bounds, page_label, total_pages


class Pager(QWidget):
    changed = Signal()

    def __init__(self, parent: QWidget | None = None):
        super().__init__(parent)
        self.page = 1
        self.page_size = DEFAULT_PAGE_SIZE
        self.total = 0

        lay = QHBoxLayout(self)
        lay.setContentsMargins(0, 0, 0, 0)

        self.lbl_range = QLabel("Showing 0 of 0")
        lay.addWidget(self.lbl_range)
        lay.addStretch(1)

        lay.addWidget(QLabel("Rows per page:"))
        self.cmb_size = QComboBox()
        for n in PAGE_SIZES:
            self.cmb_size.addItem(str(n), userData=n)
        self.cmb_size.setCurrentIndex(PAGE_SIZES.index(DEFAULT_PAGE_SIZE))
        lay.addWidget(self.cmb_size)

        self.btn_prev = QPushButton("Previous")
        self.lbl_page = QLabel("Page 1 of 1")
        self.btn_next = QPushButton("Next")
        lay.addWidget(self.btn_prev)
        lay.addWidget(self.lbl_page)
        lay.addWidget(self.btn_next)

        self.cmb_size.currentIndexChanged.connect(self._on_size_changed)
        self.btn_prev.clicked.connect(lambda: self.go_to(self.page - 1))
        self.btn_next.clicked.connect(lambda: self.go_to(self.page + 1))
        self._refresh()

    @property
    def pages(self) -> int:
        return total_pages(self.total, self.page_size)

    def set_total(self, total: int) -> None:
        self.total = max(0, int(total))
        self.page = min(self.page, self.pages)
        self._refresh()

    def reset(self) -> None:
        """Back to page 1 (after a filter or scope change)."""
        self.page = 1
        self._refresh()

    def go_to(self, page: int) -> None:
        page = min(max(1, page), self.pages)
        if page == self.page:
            return
        self.page = page
        self._refresh()
        self.changed.emit()

    def slice(self, rows: list) -> list:
        start, end = page_bounds(self.page, self.page_size, len(rows))
        return rows[start:end]

    def _on_size_changed(self, _index: int) -> None:
        self.page_size = int(self.cmb_size.currentData() or DEFAULT_PAGE_SIZE)
        self.page = 1
        self._refresh()
        self.changed.emit()

    def _refresh(self) -> None:
        self.lbl_range.setText(page_label(self.page, self.page_size, self.total))
        self.lbl_page.setText(f"Page {self.page} of {self.pages}")
        self.btn_prev.setEnabled(self.page > 1)
        self.btn_next.setEnabled(self.page < self.pages)
