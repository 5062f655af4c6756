"""Thin linear progress bar rendered with QPainter."""

from __future__ import annotations

from PyQt6.QtCore import QRectF, QSize, Qt
from PyQt6.QtGui import QColor, QPainter
from PyQt6.QtWidgets import QSizePolicy, QWidget

from .styles import PALETTE


class LinearProgress(QWidget):
    """Rounded track with a fill proportional to ``value`` (0..1)."""

    BAR_HEIGHT = 6

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._value: float = 0.0
        self._track_color = QColor(PALETTE["track"])
        self._fill_color = QColor(PALETTE["fill"])
        self.setFixedHeight(self.BAR_HEIGHT)
        self.setSizePolicy(
            QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Fixed,
        )

    @property
    def value(self) -> float:
        return self._value

    def set_value(self, value: float) -> None:
        """Set the fill fraction; values outside [0, 1] are clamped."""
        clamped = max(0.0, min(1.0, value))
        if clamped != self._value:
            self._value = clamped
            self.update()

    def sizeHint(self) -> QSize:  # noqa: N802
        return QSize(240, self.BAR_HEIGHT)

    def paintEvent(self, event) -> None:  # type: ignore[override]
        p = QPainter(self)
        p.setRenderHint(QPainter.RenderHint.Antialiasing)
        p.setPen(Qt.PenStyle.NoPen)

        rect = QRectF(self.rect())
        radius = rect.height() / 2

        p.setBrush(self._track_color)
        p.drawRoundedRect(rect, radius, radius)

        if self._value > 0:
            fill = QRectF(rect)
            fill.setWidth(rect.width() * self._value)
            p.setBrush(self._fill_color)
            p.drawRoundedRect(fill, radius, radius)
        p.end()
