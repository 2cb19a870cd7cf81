"""
Radial view: concentric progress rings around a shared centre, with the
decimal and normal time written in the middle.
"""
import math

from PySide6.QtGui import (QPainter, QColor, QFont, QPen, QBrush, QLinearGradient,
                           QRadialGradient)
from PySide6.QtCore import Qt, QRectF, QPointF

from ..config import (LEVEL_GRADIENTS, FACE_BACKGROUND, PAGE_BACKGROUND, INK_COLOR,
                      TEXT_COLOR, RING_TRACK_COLOR)
from ..layout import CanvasGeometry, RADIAL_MAX_SIDE
from ..readout import build_readout
from .surface import ClockSurface

FACE_MARGIN = 20
RING_MARGIN = 30
RING_WIDTH = 10
RING_SPACING = 5
DIVISIONS = 10
TEXT_PIXEL_SIZE = 24
# Vertical offsets of the centre text lines on the 600px reference face
TEXT_OFFSETS = (-20, 20, 60, 100)


def ring_radii(width, height, count=4):
    """Radii of the progress rings, outermost first. Rings that would have no
    radius left are dropped."""
    outer = min(width, height) / 2 - RING_MARGIN
    radii = [outer - i * (RING_WIDTH + RING_SPACING) for i in range(count)]
    return [r for r in radii if r > 0]


def _polar(center, radius, degrees):
    angle = math.radians(degrees)
    return QPointF(center.x() + radius * math.cos(angle), center.y() + radius * math.sin(angle))


def _draw_ticks(painter, center, inner, outer, start_degrees=-90.0):
    for i in range(DIVISIONS):
        degrees = start_degrees + i * (360 / DIVISIONS)
        painter.drawLine(_polar(center, inner, degrees), _polar(center, outer, degrees))


def _draw_ring(painter, center, radius, reading):
    circle = QRectF(center.x() - radius, center.y() - radius, 2 * radius, 2 * radius)

    # Track
    painter.setBrush(Qt.NoBrush)
    painter.setPen(QPen(QColor(RING_TRACK_COLOR), RING_WIDTH))
    painter.drawEllipse(center, radius, radius)

    # Progress arc, clockwise from 12 o'clock. Qt angles are 1/16 degree,
    # counter-clockwise from 3 o'clock.
    if reading.fraction > 0:
        start, end = LEVEL_GRADIENTS[reading.level.key]
        grad = QLinearGradient(circle.topLeft(), circle.bottomRight())
        grad.setColorAt(0, QColor(start))
        grad.setColorAt(1, QColor(end))
        pen = QPen(QBrush(grad), RING_WIDTH)
        pen.setCapStyle(Qt.FlatCap)
        painter.setPen(pen)
        painter.drawArc(circle, 90 * 16, -round(reading.fraction * 360 * 16))

    painter.setPen(QPen(QColor(0, 0, 0, 77), 2))
    _draw_ticks(painter, center, radius - RING_WIDTH, radius + RING_WIDTH)


def paint_rings(painter, sample, decomposition, width, height):
    """Paint the whole rings view. Returns False if the surface is empty."""
    if CanvasGeometry(width, height).is_empty:
        return False

    painter.setRenderHint(QPainter.Antialiasing)
    painter.fillRect(QRectF(0, 0, width, height), QColor(PAGE_BACKGROUND))

    center = QPointF(width / 2, height / 2)
    side = min(width, height)
    face_radius = side / 2 - FACE_MARGIN

    if face_radius > 0:
        face = QRadialGradient(center, face_radius)
        face.setColorAt(0.1, QColor(FACE_BACKGROUND[0]))
        face.setColorAt(1, QColor(FACE_BACKGROUND[1]))
        painter.setPen(Qt.NoPen)
        painter.setBrush(QBrush(face))
        painter.drawEllipse(center, face_radius, face_radius)

        # One marker per Decimal Hour, starting at 12 o'clock so they line up
        # with the ring ticks (not at 3 o'clock, angle 0)
        painter.setPen(QPen(QColor(INK_COLOR), 3))
        _draw_ticks(painter, center, face_radius * 0.92, face_radius)

    for radius, reading in zip(ring_radii(width, height, len(decomposition.readings)),
                               decomposition.readings):
        _draw_ring(painter, center, radius, reading)

    scale = side / RADIAL_MAX_SIDE
    font = QFont("Arial")
    font.setPixelSize(max(8, round(TEXT_PIXEL_SIZE * scale)))
    font.setBold(True)
    painter.setFont(font)
    painter.setPen(QColor(TEXT_COLOR))
    line_height = font.pixelSize() * 1.5
    for offset, text in zip(TEXT_OFFSETS, build_readout(sample, decomposition).lines()):
        y = center.y() + offset * scale
        painter.drawText(QRectF(0, y - line_height / 2, width, line_height), Qt.AlignCenter, text)
    return True


class DecimalRingsWidget(ClockSurface):
    """Square drawing surface for the radial view."""

    def __init__(self, parent=None):
        super().__init__(RADIAL_MAX_SIDE, RADIAL_MAX_SIDE, parent=parent)

    def paint_frame(self, painter):
        paint_rings(painter, self.sample, self.decomposition, self.width(), self.height())
