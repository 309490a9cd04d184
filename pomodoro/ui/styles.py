from __future__ import annotations

from PyQt6.QtWidgets import QApplication


THEME_QSS = """
QWidget {
    background: #f4f1ee;
    color: #2f2a26;
    font-size: 13px;
}

QMainWindow, QDialog {
    background: #f4f1ee;
}

QLabel {
    background: transparent;
}

QLabel#ModeLabel {
    font-size: 16px;
    font-weight: 600;
    color: #6f645b;
}

QLabel#ModeLabel[mode="rest"] {
    color: #4f8a6e;
}

QLabel#TimerLabel {
    font-size: 58px;
    font-weight: 700;
    color: #2d2824;
}

QPushButton {
    background: #fff1e7;
    border: none;
    border-radius: 10px;
    padding: 8px 16px;
}

QPushButton:hover {
    background: #f6e4d6;
}

QPushButton#PrimaryButton {
    background: #eb8f60;
    color: #ffffff;
    font-weight: 600;
}

QSpinBox {
    background: #fff9f3;
    border: 1px solid #eee4db;
    border-radius: 8px;
    padding: 4px 8px;
}

QSpinBox[invalid="true"] {
    border: 1px solid #d9534f;
}
"""


def apply_theme(app: QApplication) -> None:
    app.setStyleSheet(THEME_QSS)


def repolish(widget) -> None:
    """Re-evaluates dynamic-property selectors after `setProperty`."""
    widget.style().unpolish(widget)
    widget.style().polish(widget)
