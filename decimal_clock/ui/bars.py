"""
Linear view: one rounded progress bar per decimal level.
"""
from PySide6.QtGui import (QPainter, QColor, QFont, QPen, QBrush, QLinearGradient,
                           QPainterPath)
from PySide6.QtCore import Qt, QRectF, QPointF

from ..config import LEVEL_GRADIENTS, BARS_BACKGROUND, INK_COLOR
from ..layout import CanvasGeometry, LINEAR_REFERENCE_SIZE
from .surface import ClockSurface

# Layout of the 1200x350 reference surface; scaled to the actual size
BAR_TOP = 50
BAR_HEIGHT = 50
BAR_GAP = 70
BAR_RADIUS = 10
BAR_MARGIN = 50
LABEL_PIXEL_SIZE = 20
DIVISIONS = 10


def bar_rects(width, height, count=4):
    """Rectangles of the stacked bars, top to bottom."""
    ref_width, ref_height = LINEAR_REFERENCE_SIZE
    scale = height / ref_height
    margin = max(10.0, width * BAR_MARGIN / ref_width)
    bar_width = max(0.0, width - 2 * margin)
    return [
        QRectF(margin, (BAR_TOP + i * BAR_GAP) * scale, bar_width, BAR_HEIGHT * scale)
        for i in range(count)
    ]


def _rounded(rect, radius):
    path = QPainterPath()
    path.addRoundedRect(rect, radius, radius)
    return path


def _draw_bar(painter, rect, reading, radius, show_label, font):
    outline = _rounded(rect, radius)

    # Soft shadow under the outline
    painter.setPen(Qt.NoPen)
    painter.setBrush(QColor(0, 0, 0, 25))
    painter.drawPath(_rounded(rect.translated(0, 2), radius))

    painter.setBrush(Qt.NoBrush)
    painter.setPen(QPen(QColor(INK_COLOR), 2))
    painter.drawPath(outline)

    # Division markers (10 equal segments)
    painter.setPen(QPen(QColor(0, 0, 0, 51), 1))
    step = rect.width() / DIVISIONS
    for i in range(1, DIVISIONS):
        x = rect.left() + step * i
        painter.drawLine(QPointF(x, rect.top()), QPointF(x, rect.bottom()))

    fill_width = rect.width() * reading.fraction
    if fill_width > 0:
        start, end = LEVEL_GRADIENTS[reading.level.key]
        grad = QLinearGradient(rect.left(), rect.top(), rect.left() + fill_width, rect.top())
        grad.setColorAt(0, QColor(start))
        grad.setColorAt(1, QColor(end))
        painter.save()
        painter.setClipPath(outline)
        painter.fillRect(QRectF(rect.left(), rect.top(), fill_width, rect.height()), QBrush(grad))
        painter.restore()

    if show_label:
        painter.setFont(font)
        painter.setPen(QColor(INK_COLOR))
        label_rect = rect.adjusted(10, 0, -10, 0)
        painter.drawText(label_rect, Qt.AlignLeft | Qt.AlignVCenter, reading.label)


def paint_bars(painter, decomposition, width, height, show_labels=True):
    """Paint the whole bars view.

    Returns False without drawing when the surface has no area yet (e.g.
    before the first layout pass).
    """
    if CanvasGeometry(width, height).is_empty:
        return False

    painter.setRenderHint(QPainter.Antialiasing)

    bg = QLinearGradient(0, 0, 0, height)
    bg.setColorAt(0, QColor(BARS_BACKGROUND[0]))
    bg.setColorAt(1, QColor(BARS_BACKGROUND[1]))
    painter.fillRect(QRectF(0, 0, width, height), QBrush(bg))

    scale = height / LINEAR_REFERENCE_SIZE[1]
    radius = min(BAR_RADIUS * scale, BAR_HEIGHT * scale / 2)
    font = QFont("Arial")
    font.setPixelSize(max(10, round(LABEL_PIXEL_SIZE * scale)))
    font.setBold(True)

    rects = bar_rects(width, height, len(decomposition.readings))
    for rect, reading in zip(rects, decomposition.readings):
        _draw_bar(painter, rect, reading, radius, show_labels, font)
    return True


class DecimalBarsWidget(ClockSurface):
    """Drawing surface for the linear view; repainted in full every frame."""

    def __init__(self, show_labels=True, parent=None):
        super().__init__(*LINEAR_REFERENCE_SIZE, parent=parent)
        self.show_labels = show_labels

    def paint_frame(self, painter):
        paint_bars(painter, self.decomposition, self.width(), self.height(), self.show_labels)
