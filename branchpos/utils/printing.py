"""
HTML rendering and printing for lists and reports.

Documents are rendered from Jinja2 templates in branchpos/templates, then
either sent to the Qt print dialog (QTextDocument) or written to PDF with
WeasyPrint.
"""

from __future__ import annotations

from typing import Any, Iterable, List, Optional, Sequence, Tuple

from jinja2 import Environment, FileSystemLoader, select_autoescape
from PySide6.QtCore import Qt

from .. import config
from .helpers import today_str

_env: Optional[Environment] = None


def environment() -> Environment:
    global _env
    if _env is None:
        _env = Environment(
            loader=FileSystemLoader(str(config.TEMPLATES_DIR)),
            autoescape=select_autoescape(["html"]),
        )
    return _env


def render(template_name: str, **context: Any) -> str:
    context.setdefault("generated_on", today_str())
    return environment().get_template(template_name).render(**context)


def model_rows(model) -> Tuple[List[str], List[List[str]]]:
    """Headers and display text of every cell of a Qt table model."""
    cols = model.columnCount()
    headers = [str(model.headerData(c, Qt.Horizontal, Qt.DisplayRole) or "") for c in range(cols)]
    rows = []
    for r in range(model.rowCount()):
        rows.append([
            "" if model.data(model.index(r, c), Qt.DisplayRole) is None
            else str(model.data(model.index(r, c), Qt.DisplayRole))
            for c in range(cols)
        ])
    return headers, rows


def render_model(
    title: str,
    model,
    *,
    notes: Iterable[str] = (),
    totals: Sequence[Tuple[str, str]] = (),
) -> str:
    headers, rows = model_rows(model)
    numeric = set(getattr(model, "NUMERIC_COLUMNS", ()))
    return render(
        "table_report.html",
        title=title,
        headers=headers,
        rows=rows,
        numeric=numeric,
        notes=list(notes),
        totals=list(totals),
    )


def print_html(parent, html: str, doc_name: str) -> bool:
    """Show the print dialog and print `html`; False when cancelled."""
    from PySide6.QtGui import QTextDocument
    from PySide6.QtPrintSupport import QPrinter, QPrintDialog

    doc = QTextDocument()
    doc.setHtml(html)
    printer = QPrinter(QPrinter.HighResolution)
    printer.setDocName(doc_name)
    dlg = QPrintDialog(printer, parent)
    if not dlg.exec():
        return False
    doc.print_(printer)
    return True


def export_pdf(html: str, path: str) -> None:
    """Write `html` to a PDF file."""
    from weasyprint import HTML

    HTML(string=html, base_url=str(config.TEMPLATES_DIR)).write_pdf(path)
