"""
Decimal clock view: bars, rings, digital readout and conversion table in one
configurable widget.
"""
import logging

from PySide6.QtWidgets import QWidget, QVBoxLayout, QLabel
from PySide6.QtCore import Qt, QEvent
from PySide6.QtGui import QFont

from ..config import Config, PAGE_BACKGROUND
from ..layout import ResponsiveLayout
from ..time_source import sample_now
from .animation import AnimationDriver
from .bars import DecimalBarsWidget
from .rings import DecimalRingsWidget
from .readout_panel import DigitalReadoutWidget
from .conversion_table import ConversionTableWidget

logger = logging.getLogger(__name__)

# Below this container width the readout folds into two columns
READOUT_WIDE_WIDTH = 720

# Scoped to this widget's children; nothing is installed application-wide
CLOCK_STYLE = f"""
    DecimalClockWidget {{ background-color: {PAGE_BACKGROUND}; }}
    QLabel#clockTitle {{ color: #111111; }}
    QFrame#digitalReadout {{
        background-color: #ffffff;
        border-radius: 10px;
        padding: 10px;
    }}
    QLabel#readoutTitle {{ color: #666666; }}
    QLabel#readoutValue {{ color: #111111; }}
    QLabel#tableTitle {{ color: #111111; }}
    QTableWidget#conversionTable {{
        background-color: #ffffff;
        color: #222222;
        gridline-color: #cccccc;
        border: 1px solid #cccccc;
    }}
    QTableWidget#conversionTable QHeaderView::section {{
        background-color: #333333;
        color: #ffffff;
        padding: 8px;
        border: 1px solid #cccccc;
        font-weight: bold;
    }}
"""


class DecimalClockWidget(QWidget):
    """The whole clock.

    Both schedules (per-frame animation, once-a-second readout) start when the
    widget is shown and stop when it is hidden or closed. Their timers are Qt
    children of this widget, so they cannot outlive it.
    """

    def __init__(self, config=None, time_source=sample_now, parent=None):
        super().__init__(parent)
        self.config = config or Config()
        self.container = None
        self.setAttribute(Qt.WA_StyledBackground, True)
        self.setStyleSheet(CLOCK_STYLE)
        self.setup_ui(time_source)

        self.layout_manager = ResponsiveLayout(
            self.bars, self.rings, responsive=self.config.responsive_layout
        )
        self.driver = AnimationDriver(
            [self.bars, self.rings], time_source=time_source, parent=self
        )

    def setup_ui(self, time_source):
        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 20, 0, 20)
        layout.setSpacing(20)

        title = QLabel("Decimal Clock")
        title.setObjectName("clockTitle")
        title.setFont(QFont("Arial", 28, QFont.Bold))
        title.setAlignment(Qt.AlignCenter)
        layout.addWidget(title)

        self.bars = DecimalBarsWidget(show_labels=self.config.show_labels_on_bars)
        layout.addWidget(self.bars, 0, Qt.AlignHCenter)

        self.rings = DecimalRingsWidget()
        layout.addWidget(self.rings, 0, Qt.AlignHCenter)

        self.readout = DigitalReadoutWidget(
            interval_ms=self.config.digital_update_interval_ms, time_source=time_source
        )
        layout.addWidget(self.readout, 0, Qt.AlignHCenter)

        table_title = QLabel("Conversion Table")
        table_title.setObjectName("tableTitle")
        table_title.setFont(QFont("Arial", 18, QFont.Bold))
        table_title.setAlignment(Qt.AlignCenter)
        layout.addWidget(table_title)

        self.table = ConversionTableWidget()
        self.table.setMaximumWidth(600)
        layout.addWidget(self.table, 0, Qt.AlignHCenter)

        layout.addStretch()

    @property
    def is_running(self):
        return self.driver.is_running or self.readout.is_running

    def start(self):
        self.apply_container_width(self.container_width())
        self.driver.start()
        self.readout.start()
        logger.info("Decimal clock started")

    def stop(self):
        if not self.is_running:
            return
        self.driver.stop()
        self.readout.stop()
        logger.info("Decimal clock stopped")

    def track_container(self, container):
        """Size the surfaces from another widget's width instead of our own.

        Inside a QScrollArea the clock is never narrower than its minimum size,
        so the viewport is the width that actually reflects the window.
        """
        self.container = container
        container.installEventFilter(self)
        self.apply_container_width(container.width())

    def container_width(self):
        return self.container.width() if self.container is not None else self.width()

    def apply_container_width(self, width):
        """Resize the drawing surfaces for a container of the given width."""
        self.readout.set_columns(4 if width >= READOUT_WIDE_WIDTH else 2)
        return self.layout_manager.apply(width)

    def eventFilter(self, watched, event):
        if watched is self.container and event.type() == QEvent.Resize:
            self.apply_container_width(watched.width())
        return super().eventFilter(watched, event)

    def resizeEvent(self, event):
        super().resizeEvent(event)
        if self.container is None:
            self.apply_container_width(event.size().width())

    def showEvent(self, event):
        super().showEvent(event)
        self.start()

    def hideEvent(self, event):
        self.stop()
        super().hideEvent(event)

    def closeEvent(self, event):
        self.stop()
        super().closeEvent(event)
