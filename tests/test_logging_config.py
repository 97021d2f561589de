"""Tests for :mod:`advising_portal.logging_config`."""

import logging
from unittest import TestCase

from advising_portal.logging_config import TimezoneFormatter, setup_logging


class TestTimezoneFormatter(TestCase):

    def make_record(self):
        record = logging.LogRecord('test', logging.INFO, __file__, 1, 'hello', None, None)
        record.created = 0  # 1970-01-01 00:00:00 UTC
        return record

    def test_utc(self):
        formatter = TimezoneFormatter(datefmt='%Y-%m-%d %H:%M:%S', tz_name='UTC')
        self.assertEqual(formatter.formatTime(self.make_record(), formatter.datefmt),
                         '1970-01-01 00:00:00')

    def test_other_zone(self):
        formatter = TimezoneFormatter(datefmt='%Y-%m-%d %H:%M', tz_name='Asia/Kolkata')
        self.assertEqual(formatter.formatTime(self.make_record(), formatter.datefmt),
                         '1970-01-01 05:30')

    def test_iso_without_datefmt(self):
        formatter = TimezoneFormatter(tz_name='UTC')
        self.assertEqual(formatter.formatTime(self.make_record()), '1970-01-01T00:00:00+00:00')

    def test_setup_returns_root_logger(self):
        logger = setup_logging()
        self.assertIs(logger, logging.getLogger())
        self.assertTrue(logger.handlers)
