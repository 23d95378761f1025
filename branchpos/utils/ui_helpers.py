from PySide6.QtWidgets import QWidget, QVBoxLayout, QMessageBox
from PySide6.QtCore import Qt


def wrap_center(w: QWidget) -> QWidget:
    host = QWidget()
    lay = QVBoxLayout(host)
    lay.addStretch(1)
    lay.addWidget(w, 0, Qt.AlignCenter)
    lay.addStretch(1)
    return host


def info(parent: QWidget, title: str, text: str):
    QMessageBox.information(parent, title, text)


def error(parent: QWidget, title: str, text: str):
    QMessageBox.critical(parent, title, text)


def confirm(parent: QWidget, title: str, text: str) -> bool:
    resp = QMessageBox.question(
        parent,
        title,
        text,
        QMessageBox.StandardButton.Yes | QMessageBox.StandardButton.No,
    )
    return resp == QMessageBox.StandardButton.Yes


def error_message(err: Exception, fallback: str) -> str:
    """
    Message to show for a failed call: the server/validation message when
    there is one, else `fallback`.
    """
    from ..api.client import ApiError
    from .validators import ValidationError

    if isinstance(err, ValidationError):
        return str(err)
    if isinstance(err, ApiError) and err.server_message:
        return err.server_message
    return fallback
