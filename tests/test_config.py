import logging
import os
import tempfile
import unittest

from decimal_clock.config import Config, DEFAULT_CONFIG, LEVEL_GRADIENTS
from decimal_clock.decimal_time import LEVELS
from decimal_clock.logging_config import setup_logging, level_from_name


class TestConfig(unittest.TestCase):
    def test_defaults(self):
        config = Config(environ={})
        self.assertEqual(config.as_dict(), DEFAULT_CONFIG)
        self.assertTrue(config.show_labels_on_bars)
        self.assertEqual(config.digital_update_interval_ms, 1000)
        self.assertTrue(config.responsive_layout)

    def test_environment_overrides(self):
        config = Config(environ={
            'DECIMAL_CLOCK_SHOW_LABELS': 'false',
            'DECIMAL_CLOCK_DIGITAL_INTERVAL_MS': '250',
            'DECIMAL_CLOCK_RESPONSIVE': 'no',
        })
        self.assertFalse(config.show_labels_on_bars)
        self.assertEqual(config.digital_update_interval_ms, 250)
        self.assertFalse(config.responsive_layout)

    def test_invalid_environment_value_keeps_default(self):
        with self.assertLogs('decimal_clock.config', level='WARNING') as logs:
            config = Config(environ={'DECIMAL_CLOCK_DIGITAL_INTERVAL_MS': 'soon'})
        self.assertEqual(config.digital_update_interval_ms, 1000)
        self.assertIn('DECIMAL_CLOCK_DIGITAL_INTERVAL_MS', logs.output[0])

    def test_overrides_win_over_environment(self):
        config = Config(
            overrides={'show_labels_on_bars': True},
            environ={'DECIMAL_CLOCK_SHOW_LABELS': '0'},
        )
        self.assertTrue(config.show_labels_on_bars)

    def test_set_validates(self):
        config = Config(environ={})
        with self.assertRaises(ValueError):
            config.set('theme', 'dark')
        with self.assertRaises(ValueError):
            config.digital_update_interval_ms = 0
        with self.assertRaises(ValueError):
            config.digital_update_interval_ms = True
        with self.assertRaises(ValueError):
            config.responsive_layout = 'maybe'

        config.responsive_layout = False
        self.assertFalse(config.get('responsive_layout'))

    def test_every_level_has_a_gradient(self):
        for level in LEVELS:
            self.assertEqual(len(LEVEL_GRADIENTS[level.key]), 2)


class TestLoggingConfig(unittest.TestCase):
    def tearDown(self):
        logger = logging.getLogger("decimal_clock")
        for handler in list(logger.handlers):
            handler.close()
        logger.handlers.clear()
        logger.setLevel(logging.NOTSET)

    def test_setup_is_repeatable(self):
        setup_logging(logging.DEBUG)
        setup_logging(logging.DEBUG)
        logger = logging.getLogger("decimal_clock")
        self.assertEqual(len(logger.handlers), 1)
        self.assertEqual(logger.level, logging.DEBUG)

    def test_log_file(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = os.path.join(tmp, "clock.log")
            setup_logging(logging.INFO, path)
            logging.getLogger("decimal_clock.test").info("hello")
            self.tearDown()
            with open(path, encoding='utf-8') as f:
                content = f.read()
        self.assertIn("Logging initialized.", content)
        self.assertIn("hello", content)

    def test_level_from_name(self):
        self.assertEqual(level_from_name("debug"), logging.DEBUG)
        self.assertEqual(level_from_name("WARNING"), logging.WARNING)
        self.assertEqual(level_from_name(None), logging.INFO)
        self.assertEqual(level_from_name("loud"), logging.INFO)


if __name__ == "__main__":
    unittest.main()
