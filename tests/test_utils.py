#!/usr/bin/env python
# -*- coding: utf-8 -*-

"""
test_utils
----------------------------------

Tests for `binning.utils` module.
"""

import logging
import os
import unittest
from unittest import mock

from binning import utils


class TestUtils(unittest.TestCase):

    def tearDown(self):
        utils.get_logger().setLevel(logging.WARNING)

    def test_configure_logging(self):
        self.assertEqual(utils.configure_logging(0).level, logging.WARNING)
        self.assertEqual(utils.configure_logging(1).level, 19)
        self.assertEqual(utils.configure_logging(2).level, logging.DEBUG)
        self.assertEqual(utils.configure_logging(5).level, logging.DEBUG)
        self.assertIs(utils.configure_logging(0), logging.getLogger('binning'))

    def test_module_logger_follows_package_level(self):
        utils.configure_logging(2)
        self.assertTrue(utils.get_logger('scheme').isEnabledFor(logging.DEBUG))
        utils.configure_logging(0)
        self.assertFalse(utils.get_logger('scheme').isEnabledFor(logging.DEBUG))

    def test_get_logger(self):
        self.assertIs(utils.get_logger(), logging.getLogger('binning'))
        self.assertIs(utils.get_logger('scheme'), logging.getLogger('binning.scheme'))

    def test_app_debug(self):
        with mock.patch.dict(os.environ, {'BINNING_APP_DEBUG': '1'}):
            self.assertTrue(utils.app_debug())
        with mock.patch.dict(os.environ, {'BINNING_APP_DEBUG': '0'}):
            self.assertFalse(utils.app_debug())
        with mock.patch.dict(os.environ, {}, clear=True):
            self.assertFalse(utils.app_debug())

    def test_format_size(self):
        self.assertEqual(utils.format_size(500), '500 bp')
        self.assertEqual(utils.format_size(1536), '1.5 Kb')
        self.assertEqual(utils.format_size(1 << 17), '128 Kb')
        self.assertEqual(utils.format_size(1 << 29), '512 Mb')
        self.assertEqual(utils.format_size(1 << 32), '4 Gb')


if __name__ == '__main__':
    unittest.main()
