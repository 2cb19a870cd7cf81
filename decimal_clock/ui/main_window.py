from PySide6.QtWidgets import QMainWindow, QScrollArea, QFrame

from ..config import PAGE_BACKGROUND
from .clock_widget import DecimalClockWidget


class MainWindow(QMainWindow):
    def __init__(self, config=None):
        super().__init__()
        self.setWindowTitle("Decimal Clock")
        self.resize(1300, 900)
        self.setStyleSheet(f"QMainWindow {{ background-color: {PAGE_BACKGROUND}; }}")

        self.clock = DecimalClockWidget(config)

        # Clock is taller than most screens once the rings and table are in
        self.scroll = QScrollArea()
        self.scroll.setFrameShape(QFrame.NoFrame)
        self.scroll.setWidgetResizable(True)
        self.scroll.setWidget(self.clock)
        self.setCentralWidget(self.scroll)

        # The visible width, not the clock's own (which has a minimum), drives the layout
        self.clock.track_container(self.scroll.viewport())

    def closeEvent(self, event):
        self.clock.stop()
        super().closeEvent(event)
