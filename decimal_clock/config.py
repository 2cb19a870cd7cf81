"""
Configuration for the decimal clock view.
Holds the widget options and the colour palette. Settings are read from
overrides and the environment only; nothing is written back to disk.
"""

import logging
import os

logger = logging.getLogger(__name__)

# Default configuration values
DEFAULT_CONFIG = {
    'show_labels_on_bars': True,
    'digital_update_interval_ms': 1000,
    'responsive_layout': True,
}

# Environment variable for each option
ENV_VARS = {
    'show_labels_on_bars': 'DECIMAL_CLOCK_SHOW_LABELS',
    'digital_update_interval_ms': 'DECIMAL_CLOCK_DIGITAL_INTERVAL_MS',
    'responsive_layout': 'DECIMAL_CLOCK_RESPONSIVE',
}

_TRUE_STRINGS = {'1', 'true', 'yes', 'on'}
_FALSE_STRINGS = {'0', 'false', 'no', 'off'}


def _coerce(key, value):
    """Validate a value for an option, parsing strings from the environment."""
    if key not in DEFAULT_CONFIG:
        raise ValueError(f"Unknown option: {key!r}")

    if key == 'digital_update_interval_ms':
        if isinstance(value, bool):
            raise ValueError(f"{key} must be an integer, got {value!r}")
        try:
            value = int(value)
        except (TypeError, ValueError):
            raise ValueError(f"{key} must be an integer, got {value!r}") from None
        if value <= 0:
            raise ValueError(f"{key} must be positive, got {value}")
        return value

    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in _TRUE_STRINGS:
            return True
        if lowered in _FALSE_STRINGS:
            return False
    raise ValueError(f"{key} must be a boolean, got {value!r}")


class Config:
    """Option set for DecimalClockWidget."""

    def __init__(self, overrides=None, environ=None):
        """Initialize config.

        Args:
            overrides: Mapping of option name to value, applied last.
            environ: Environment mapping to read DECIMAL_CLOCK_* variables
                from. Defaults to os.environ.
        """
        self._config = dict(DEFAULT_CONFIG)
        self.load_environment(os.environ if environ is None else environ)
        for key, value in (overrides or {}).items():
            self.set(key, value)

    def load_environment(self, environ):
        """Apply DECIMAL_CLOCK_* variables, ignoring values that do not parse."""
        for key, var in ENV_VARS.items():
            raw = environ.get(var)
            if raw is None:
                continue
            try:
                self._config[key] = _coerce(key, raw)
            except ValueError as e:
                logger.warning("Ignoring %s: %s", var, e)

    def get(self, key, default=None):
        """Get a configuration value."""
        return self._config.get(key, default)

    def set(self, key, value):
        """Set a configuration value. Raises ValueError for unknown or bad values."""
        self._config[key] = _coerce(key, value)

    def as_dict(self):
        return dict(self._config)

    @property
    def show_labels_on_bars(self):
        return self._config['show_labels_on_bars']

    @show_labels_on_bars.setter
    def show_labels_on_bars(self, value):
        self.set('show_labels_on_bars', value)

    @property
    def digital_update_interval_ms(self):
        return self._config['digital_update_interval_ms']

    @digital_update_interval_ms.setter
    def digital_update_interval_ms(self, value):
        self.set('digital_update_interval_ms', value)

    @property
    def responsive_layout(self):
        return self._config['responsive_layout']

    @responsive_layout.setter
    def responsive_layout(self, value):
        self.set('responsive_layout', value)


# Gradient (start, end) per decimal level, keyed like DecimalLevel.key
LEVEL_GRADIENTS = {
    'dec_hour': ('#ff7e5f', '#feb47b'),      # Coral → Peach
    'deci_minute': ('#6a11cb', '#2575fc'),   # Violet → Blue
    'dec_minute': ('#43cea2', '#185a9d'),    # Mint → Deep Blue
    'dec_second': ('#f953c6', '#b91d73'),    # Pink → Magenta
}

# Surface palette
BARS_BACKGROUND = ('#f0f4f8', '#d9e2ec')
FACE_BACKGROUND = ('#ffffff', '#cfd9df')
PAGE_BACKGROUND = '#f5f7fa'
INK_COLOR = '#333333'
TEXT_COLOR = '#111111'
RING_TRACK_COLOR = '#eeeeee'
