"""
Per-frame driver for the clock surfaces.
"""
import logging

from PySide6.QtCore import QObject, QTimer, Qt, Signal
from PySide6.QtGui import QGuiApplication

from ..decimal_time import decompose
from ..time_source import sample_now

logger = logging.getLogger(__name__)

DEFAULT_REFRESH_RATE = 60.0


def frame_interval_ms(refresh_rate=None):
    """Timer interval matching a display refresh rate in Hz."""
    if not refresh_rate or refresh_rate <= 0:
        refresh_rate = DEFAULT_REFRESH_RATE
    return max(1, int(1000 / refresh_rate))


def primary_refresh_rate():
    screen = QGuiApplication.primaryScreen()
    return screen.refreshRate() if screen is not None else DEFAULT_REFRESH_RATE


class AnimationDriver(QObject):
    """Samples the clock once per display frame and hands the result to every
    surface. Each frame is independent: a skipped frame simply means the next
    one shows a later time."""
    frame_ready = Signal(object, object)  # (TimeSample, Decomposition)

    def __init__(self, surfaces=(), time_source=sample_now, interval_ms=None, parent=None):
        super().__init__(parent)
        self.surfaces = list(surfaces)
        self.time_source = time_source
        self.frame_count = 0

        # Parented to the driver so it dies with the owning widget
        self.timer = QTimer(self)
        self.timer.setTimerType(Qt.PreciseTimer)
        self.timer.setInterval(interval_ms or frame_interval_ms(primary_refresh_rate()))
        self.timer.timeout.connect(self.tick)

    @property
    def is_running(self):
        return self.timer.isActive()

    def start(self):
        if self.timer.isActive():
            return
        logger.debug("Animation started at %d ms per frame", self.timer.interval())
        self.tick()
        self.timer.start()

    def stop(self):
        if not self.timer.isActive():
            return
        self.timer.stop()
        logger.debug("Animation stopped after %d frames", self.frame_count)

    def tick(self):
        sample = self.time_source()
        decomposition = decompose(sample.elapsed_seconds)
        for surface in self.surfaces:
            surface.set_frame(sample, decomposition)
        self.frame_count += 1
        self.frame_ready.emit(sample, decomposition)
