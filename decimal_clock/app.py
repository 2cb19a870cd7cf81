import sys
import signal
import os
import faulthandler
import logging
from PySide6.QtWidgets import QApplication
from PySide6.QtCore import QTimer
from .config import Config
from .logging_config import setup_logging, level_from_name
from .ui.main_window import MainWindow

logger = logging.getLogger(__name__)


def main():
    setup_logging(
        level_from_name(os.environ.get("DECIMAL_CLOCK_LOG_LEVEL")),
        os.environ.get("DECIMAL_CLOCK_LOG_FILE") or None,
    )

    # Crash/exception diagnostics: dump tracebacks on fatal errors and uncaught exceptions
    faulthandler.enable(all_threads=True)

    def log_exception(exc_type, exc_value, exc_tb):
        logger.critical("Unhandled exception", exc_info=(exc_type, exc_value, exc_tb))

    sys.excepthook = log_exception

    # Handle Ctrl+C
    signal.signal(signal.SIGINT, signal.SIG_DFL)

    app = QApplication(sys.argv)
    app.setApplicationName("Decimal Clock")

    config = Config()
    logger.info("Starting with options %s", config.as_dict())

    window = MainWindow(config)
    window.show()

    # Allow python to handle signals by letting the event loop wake up periodically
    timer = QTimer()
    timer.start(500)
    timer.timeout.connect(lambda: None)

    sys.exit(app.exec())
