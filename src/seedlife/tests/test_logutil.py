import re
import unittest

from seedlife.logutil import format_elapsed, timing


class TestTiming(unittest.TestCase):

    def test_format_elapsed(self):
        self.assertEqual(format_elapsed(0), '0:00:00')
        self.assertEqual(format_elapsed(59.6), '0:01:00')
        self.assertEqual(format_elapsed(3725.4), '1:02:05')

    def test_timing_restarts_each_call(self):
        timing()
        self.assertEqual(timing(), '0:00:00')
        self.assertRegex(timing(), re.compile(r'^\d+:\d\d:\d\d$'))


if __name__ == "__main__":
    unittest.main()
