from PySide6.QtWidgets import QWidget, QSizePolicy
from PySide6.QtGui import QPainter
from PySide6.QtCore import QSize


class ClockSurface(QWidget):
    """Base drawing surface fed by the animation driver and sized by the layout.

    Subclasses implement paint_frame(); it is only called once a frame has
    arrived, and is expected to repaint everything.
    """

    def __init__(self, width, height, parent=None):
        super().__init__(parent)
        self.sample = None
        self.decomposition = None
        self.canvas_size = QSize(width, height)
        # Never wider than the computed geometry, but free to shrink with the window
        self.setSizePolicy(QSizePolicy.Maximum, QSizePolicy.Fixed)
        self.setFixedHeight(height)

    def sizeHint(self):
        return self.canvas_size

    def minimumSizeHint(self):
        return QSize(0, self.canvas_size.height())

    def set_canvas_geometry(self, geometry):
        self.canvas_size = QSize(max(0, geometry.width), max(0, geometry.height))
        self.setFixedHeight(self.canvas_size.height())
        self.updateGeometry()
        self.update()

    def set_frame(self, sample, decomposition):
        self.sample = sample
        self.decomposition = decomposition
        self.update()

    def paintEvent(self, event):
        if self.decomposition is None:
            return
        painter = QPainter(self)
        self.paint_frame(painter)
        painter.end()

    def paint_frame(self, painter):
        raise NotImplementedError
