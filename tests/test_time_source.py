import datetime
import unittest

from decimal_clock.time_source import TimeSample, sample_now


class TestTimeSample(unittest.TestCase):
    def test_elapsed_seconds(self):
        self.assertEqual(TimeSample(0, 0, 0, 0).elapsed_seconds, 0)
        self.assertAlmostEqual(TimeSample(1, 1, 1, 500).elapsed_seconds, 3661.5)
        self.assertAlmostEqual(TimeSample(23, 59, 59, 999).elapsed_seconds, 86399.999)

    def test_normal_time_is_zero_padded(self):
        self.assertEqual(TimeSample(1, 2, 3).normal_time, "01:02:03")
        self.assertEqual(TimeSample(23, 59, 59, 999).normal_time, "23:59:59")

    def test_from_datetime_truncates_to_millis(self):
        dt = datetime.datetime(2025, 12, 24, 10, 30, 15, 999999)
        sample = TimeSample.from_datetime(dt)
        self.assertEqual(sample, TimeSample(10, 30, 15, 999))

    def test_out_of_range_fields_rejected(self):
        for args in ((24, 0, 0, 0), (0, 60, 0, 0), (0, 0, 60, 0), (0, 0, 0, 1000), (-1, 0, 0, 0)):
            with self.assertRaises(ValueError):
                TimeSample(*args)

    def test_sample_now_reads_the_clock_every_call(self):
        readings = iter([
            datetime.datetime(2025, 12, 24, 23, 59, 59, 900000),
            datetime.datetime(2025, 12, 25, 0, 0, 0, 100000),
        ])
        first = sample_now(clock=lambda: next(readings))
        second = sample_now(clock=lambda: next(readings))
        self.assertAlmostEqual(first.elapsed_seconds, 86399.9)
        # Midnight wraparound is not corrected
        self.assertAlmostEqual(second.elapsed_seconds, 0.1)

    def test_sample_now_default_clock(self):
        sample = sample_now()
        self.assertGreaterEqual(sample.elapsed_seconds, 0)
        self.assertLess(sample.elapsed_seconds, 86400)


if __name__ == "__main__":
    unittest.main()
