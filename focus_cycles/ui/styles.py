from __future__ import annotations

from PyQt6.QtWidgets import QApplication


THEME_QSS = """
QWidget {
    color: #ffffff;
    font-size: 13px;
}

QDialog, QDialog QWidget {
    background: #f2f2f7;
    color: #1c1c1e;
}

QLabel#DialogHeading {
    font-size: 17px;
    font-weight: 700;
    color: #1c1c1e;
}

QLabel#SettingValue {
    color: #8e8e93;
    font-weight: 500;
}

QPushButton#PrimaryButton {
    background: rgba(255, 255, 255, 60);
    color: #ffffff;
    border: 2px solid rgba(255, 255, 255, 200);
    border-radius: 36px;
    min-width: 72px;
    min-height: 72px;
    font-size: 18px;
    font-weight: 700;
}

QPushButton#PrimaryButton:hover {
    background: rgba(255, 255, 255, 90);
}

QPushButton#PrimaryButton:pressed {
    background: rgba(255, 255, 255, 130);
}

QPushButton#SecondaryButton {
    background: transparent;
    color: rgba(255, 255, 255, 210);
    border: none;
    border-radius: 16px;
    padding: 8px 14px;
    font-weight: 600;
}

QPushButton#SecondaryButton:hover {
    background: rgba(255, 255, 255, 40);
}

QSpinBox {
    background: #ffffff;
    color: #1c1c1e;
    border: none;
    border-radius: 10px;
    padding: 6px 10px;
    min-height: 22px;
}

QSpinBox::up-button, QSpinBox::down-button {
    border: none;
    background: transparent;
    width: 16px;
    subcontrol-origin: border;
}

QDialogButtonBox QPushButton {
    background: #ffffff;
    color: #007aff;
    border: none;
    border-radius: 10px;
    padding: 6px 16px;
    font-weight: 700;
}
"""


def apply_theme(app: QApplication) -> None:
    app.setStyleSheet(THEME_QSS)
