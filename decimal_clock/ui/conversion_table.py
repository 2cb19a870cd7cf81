from PySide6.QtWidgets import (QTableWidget, QTableWidgetItem, QHeaderView,
                               QAbstractItemView)
from PySide6.QtCore import Qt

from ..decimal_time import conversion_rows


class ConversionTableWidget(QTableWidget):
    """Static decimal-to-normal conversion table, filled once at construction."""

    def __init__(self, parent=None):
        super().__init__(parent)
        self.setObjectName("conversionTable")
        self.setColumnCount(2)
        self.setHorizontalHeaderLabels(["Decimal Unit", "Normal Time Equivalent"])

        header = self.horizontalHeader()
        header.setSectionResizeMode(0, QHeaderView.ResizeToContents)
        header.setSectionResizeMode(1, QHeaderView.Stretch)  # Equivalent stretches

        self.verticalHeader().setVisible(False)
        self.setEditTriggers(QAbstractItemView.NoEditTriggers)
        self.setSelectionMode(QAbstractItemView.NoSelection)
        self.setFocusPolicy(Qt.NoFocus)

        rows = conversion_rows()
        self.setRowCount(len(rows))
        for row, (unit, equivalent) in enumerate(rows):
            self.setItem(row, 0, QTableWidgetItem(unit))
            self.setItem(row, 1, QTableWidgetItem(equivalent))

        # Show every row without scrolling
        self.resizeRowsToContents()
        height = self.horizontalHeader().height() + 2 * self.frameWidth()
        height += sum(self.rowHeight(r) for r in range(len(rows)))
        self.setFixedHeight(height)
