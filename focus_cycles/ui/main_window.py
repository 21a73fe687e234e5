from __future__ import annotations

import logging

from PyQt6.QtCore import QPointF, QRectF, Qt
from PyQt6.QtGui import QAction, QBrush, QColor, QFont, QKeySequence, QLinearGradient, QPainter, QPen
from PyQt6.QtWidgets import (
    QDialog,
    QDialogButtonBox,
    QFormLayout,
    QHBoxLayout,
    QLabel,
    QMainWindow,
    QMessageBox,
    QPushButton,
    QSpinBox,
    QVBoxLayout,
    QWidget,
)

from focus_cycles.core.palette import Rgba, gradient_for
from focus_cycles.core.settings import (
    BREAK_MINUTES_RANGE,
    CYCLE_COUNT_RANGE,
    WORK_MINUTES_RANGE,
    InvalidConfiguration,
    TimerSettings,
)
from focus_cycles.core.ticker import QtTicker
from focus_cycles.core.timer import SessionController, SessionSnapshot


logger = logging.getLogger(__name__)

RING_WIDTH = 20


def to_qcolor(color: Rgba) -> QColor:
    return QColor(color.red, color.green, color.blue, round(color.alpha * 255))


class TimerWidget(QWidget):
    def __init__(self, snapshot: SessionSnapshot, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.setMinimumSize(360, 560)
        self._snapshot = snapshot

    @property
    def snapshot(self) -> SessionSnapshot:
        return self._snapshot

    def set_snapshot(self, snapshot: SessionSnapshot) -> None:
        self._snapshot = snapshot
        self.update()

    def paintEvent(self, event) -> None:  # noqa: N802
        painter = QPainter(self)
        painter.setRenderHint(QPainter.RenderHint.Antialiasing)
        rect = QRectF(self.rect())

        top, bottom = gradient_for(self._snapshot)
        gradient = QLinearGradient(QPointF(rect.left(), rect.top()), QPointF(rect.left(), rect.bottom()))
        gradient.setColorAt(0.0, to_qcolor(top))
        gradient.setColorAt(1.0, to_qcolor(bottom))
        painter.fillRect(rect, QBrush(gradient))

        if self._snapshot.running:
            self._paint_countdown(painter, rect)
        painter.end()

    def _paint_countdown(self, painter: QPainter, rect: QRectF) -> None:
        snapshot = self._snapshot
        diameter = min(rect.width(), rect.height()) * 0.55
        ring = QRectF(0, 0, diameter, diameter)
        ring.moveCenter(QPointF(rect.center().x(), rect.top() + rect.height() * 0.48))

        label_font = QFont()
        label_font.setPixelSize(int(diameter * 0.27))
        label_font.setWeight(QFont.Weight.Black)
        painter.setFont(label_font)
        painter.setPen(QColor("#ffffff"))
        label_rect = QRectF(rect.left(), rect.top(), rect.width(), ring.top() - rect.top())
        painter.drawText(label_rect, Qt.AlignmentFlag.AlignCenter, snapshot.phase_label)

        painter.setPen(QPen(QColor(255, 255, 255, 77), RING_WIDTH))
        painter.drawEllipse(ring)
        painter.setPen(QPen(QColor("#ffffff"), RING_WIDTH, Qt.PenStyle.SolidLine, Qt.PenCapStyle.RoundCap))
        span = int(-360 * 16 * snapshot.progress)
        painter.drawArc(ring, 90 * 16, span)

        time_font = QFont()
        time_font.setPixelSize(int(diameter * 0.23))
        time_font.setWeight(QFont.Weight.Thin)
        painter.setFont(time_font)
        painter.setPen(QColor("#ffffff"))
        time_rect = QRectF(ring.left(), ring.top(), ring.width(), ring.height() * 0.62)
        painter.drawText(time_rect, Qt.AlignmentFlag.AlignHCenter | Qt.AlignmentFlag.AlignBottom, snapshot.remaining_text)

        cycle_font = QFont()
        cycle_font.setPixelSize(int(diameter * 0.07))
        cycle_font.setWeight(QFont.Weight.Medium)
        painter.setFont(cycle_font)
        painter.setPen(QColor(255, 255, 255, 204))
        cycle_rect = QRectF(ring.left(), ring.top() + ring.height() * 0.64, ring.width(), ring.height() * 0.2)
        painter.drawText(cycle_rect, Qt.AlignmentFlag.AlignHCenter | Qt.AlignmentFlag.AlignTop, f"Cycle {snapshot.cycle_label}")


class SettingsDialog(QDialog):
    def __init__(self, settings: TimerSettings, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.setWindowTitle("Settings")

        self.work_spin = self._spin(WORK_MINUTES_RANGE, settings.work_minutes, " min")
        self.break_spin = self._spin(BREAK_MINUTES_RANGE, settings.break_minutes, " min")
        self.cycles_spin = self._spin(CYCLE_COUNT_RANGE, settings.cycle_count, "")

        heading = QLabel("Timer Settings")
        heading.setObjectName("DialogHeading")

        form = QFormLayout()
        form.addRow("Work Time", self.work_spin)
        form.addRow("Break Time", self.break_spin)
        form.addRow("Cycles", self.cycles_spin)

        buttons = QDialogButtonBox(QDialogButtonBox.StandardButton.Ok | QDialogButtonBox.StandardButton.Cancel)
        buttons.button(QDialogButtonBox.StandardButton.Ok).setText("Done")
        buttons.accepted.connect(self.accept)
        buttons.rejected.connect(self.reject)

        layout = QVBoxLayout(self)
        layout.addWidget(heading)
        layout.addLayout(form)
        layout.addWidget(buttons)

    @staticmethod
    def _spin(bounds: tuple[int, int], value: int, suffix: str) -> QSpinBox:
        spin = QSpinBox()
        spin.setRange(*bounds)
        spin.setValue(value)
        spin.setSuffix(suffix)
        return spin

    def values(self) -> tuple[int, int, int]:
        return self.work_spin.value(), self.break_spin.value(), self.cycles_spin.value()


class MainWindow(QMainWindow):
    def __init__(self, settings: TimerSettings | None = None) -> None:
        super().__init__()
        self.setWindowTitle("Focus Cycles")
        self.resize(420, 720)

        self.ticker = QtTicker(parent=self)
        self.controller = SessionController(settings, ticker=self.ticker)

        self._build_ui()
        self._connect_signals()
        self._unsubscribe = self.controller.subscribe(self._render)
        self._render(self.controller.snapshot())

    def _build_ui(self) -> None:
        self.timer_widget = TimerWidget(self.controller.snapshot(), self)
        self.setCentralWidget(self.timer_widget)

        self.start_btn = QPushButton("Start")
        self.start_btn.setObjectName("PrimaryButton")
        self.settings_btn = QPushButton("Settings")
        self.settings_btn.setObjectName("SecondaryButton")
        self.stop_btn = QPushButton("Stop")
        self.stop_btn.setObjectName("PrimaryButton")
        self.reset_btn = QPushButton("Reset")
        self.reset_btn.setObjectName("SecondaryButton")

        controls = QHBoxLayout()
        controls.addStretch()
        controls.addWidget(self.start_btn)
        controls.addWidget(self.stop_btn)
        controls.addStretch()

        secondary = QHBoxLayout()
        secondary.addStretch()
        secondary.addWidget(self.settings_btn)
        secondary.addWidget(self.reset_btn)
        secondary.addStretch()

        layout = QVBoxLayout(self.timer_widget)
        layout.addStretch(1)
        layout.addLayout(controls)
        layout.addLayout(secondary)
        layout.addSpacing(32)

        space_action = QAction(self)
        space_action.setShortcut(QKeySequence(Qt.Key.Key_Space))
        space_action.triggered.connect(self._space_toggle)
        self.addAction(space_action)

    def _connect_signals(self) -> None:
        self.start_btn.clicked.connect(self.controller.start)
        self.stop_btn.clicked.connect(self.controller.pause)
        self.reset_btn.clicked.connect(self.controller.reset)
        self.settings_btn.clicked.connect(self.open_settings)

    def _space_toggle(self) -> None:
        if self.controller.running:
            self.controller.pause()
        else:
            self.controller.start()

    def open_settings(self) -> None:
        dialog = SettingsDialog(self.controller.settings, self)
        if dialog.exec() != QDialog.DialogCode.Accepted:
            return
        self.apply_settings(*dialog.values())

    def apply_settings(self, work_minutes: int, break_minutes: int, cycle_count: int) -> bool:
        try:
            self.controller.configure(work_minutes, break_minutes, cycle_count)
        except InvalidConfiguration as exc:
            logger.warning("Rejected timer settings: %s", exc)
            QMessageBox.warning(self, "Settings", str(exc))
            return False
        return True

    def _render(self, snapshot: SessionSnapshot) -> None:
        self.timer_widget.set_snapshot(snapshot)
        self.start_btn.setVisible(not snapshot.running)
        self.settings_btn.setVisible(not snapshot.running)
        self.stop_btn.setVisible(snapshot.running)
        self.reset_btn.setVisible(snapshot.running)

    def closeEvent(self, event) -> None:  # noqa: N802
        self.controller.pause()
        self._unsubscribe()
        event.accept()
