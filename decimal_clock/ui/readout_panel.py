"""
Digital readout panel: decimal and normal time as text, refreshed on its own
timer independently of the animation.
"""
from PySide6.QtWidgets import QFrame, QGridLayout, QLabel
from PySide6.QtCore import QTimer, Qt, Signal
from PySide6.QtGui import QFont

from ..readout import build_readout
from ..time_source import sample_now

# (attribute on ReadoutState, title, format for the value label)
READOUT_FIELDS = [
    ('day_percent', "Day", "{}%"),
    ('total_dec_hours', "Dec Hours", "{}"),
    ('total_decihours', "Decihours", "{}"),
    ('normal_time', "Normal", "{}"),
]


class DigitalReadoutWidget(QFrame):
    state_changed = Signal(object)  # ReadoutState

    def __init__(self, interval_ms=1000, time_source=sample_now, parent=None):
        super().__init__(parent)
        self.setObjectName("digitalReadout")
        self.time_source = time_source
        self.state = None
        self.value_labels = {}
        self.cells = []
        self.columns = None

        self.grid = QGridLayout(self)
        self.grid.setHorizontalSpacing(30)
        self.grid.setVerticalSpacing(4)
        for key, title, _fmt in READOUT_FIELDS:
            lbl_title = QLabel(title)
            lbl_title.setObjectName("readoutTitle")
            lbl_title.setFont(QFont("Arial", 11))
            lbl_title.setAlignment(Qt.AlignCenter)

            lbl_value = QLabel("--")
            lbl_value.setObjectName("readoutValue")
            lbl_value.setFont(QFont("Arial", 20, QFont.Bold))
            lbl_value.setAlignment(Qt.AlignCenter)

            self.cells.append((lbl_title, lbl_value))
            self.value_labels[key] = lbl_value
        self.set_columns(len(READOUT_FIELDS))

        self.timer = QTimer(self)
        self.timer.setInterval(interval_ms)
        self.timer.timeout.connect(self.refresh)

    def set_columns(self, columns):
        """Lay the fields out in a grid this many cells wide (titles above values)."""
        if columns == self.columns:
            return
        self.columns = columns
        for lbl_title, lbl_value in self.cells:
            self.grid.removeWidget(lbl_title)
            self.grid.removeWidget(lbl_value)
        for index, (lbl_title, lbl_value) in enumerate(self.cells):
            row, column = divmod(index, columns)
            self.grid.addWidget(lbl_title, row * 2, column)
            self.grid.addWidget(lbl_value, row * 2 + 1, column)

    @property
    def is_running(self):
        return self.timer.isActive()

    def start(self):
        if self.timer.isActive():
            return
        self.refresh()
        self.timer.start()

    def stop(self):
        self.timer.stop()

    def refresh(self):
        """Sample the clock and update the labels."""
        state = build_readout(self.time_source())
        for key, _title, fmt in READOUT_FIELDS:
            self.value_labels[key].setText(fmt.format(getattr(state, key)))
        self.state = state
        self.state_changed.emit(state)
