#!/usr/bin/env python
# -*- coding: utf-8 -*-

"""
test_exceptions
----------------------------------

Tests for `binning.exceptions` module.
"""

import copy
import pickle
import unittest

from binning import standard_scheme
from binning.exceptions import BinningError, BinningConfigError, BinningInvalidBinError, BinningRangeError


class TestExceptions(unittest.TestCase):

    def test_range_error_pickle(self):
        error = pickle.loads(pickle.dumps(BinningRangeError(-1, 0, 10)))
        self.assertIsInstance(error, BinningRangeError)
        self.assertEqual((error.start, error.stop, error.max_position), (-1, 0, 10))
        self.assertEqual(str(error), 'interval out of range: -1-0 (maximum position is 10)')

    def test_invalid_bin_error_pickle(self):
        for original in (BinningInvalidBinError(4681, 4680), BinningInvalidBinError(100, 585, 1)):
            with self.subTest(bin=original.bin):
                error = pickle.loads(pickle.dumps(original))
                self.assertIsInstance(error, BinningInvalidBinError)
                self.assertEqual((error.bin, error.max_bin, error.level),
                                 (original.bin, original.max_bin, original.level))
                self.assertEqual(str(error), str(original))

    def test_copy(self):
        error = copy.copy(BinningRangeError(5, 7, 3))
        self.assertEqual(error.stop, 7)

    def test_raised_error_pickle(self):
        with self.assertRaises(BinningRangeError) as cm:
            standard_scheme().assign(0, (1 << 29) + 1)
        error = pickle.loads(pickle.dumps(cm.exception))
        self.assertEqual(error.stop, (1 << 29) + 1)

    def test_base_error_message(self):
        error = pickle.loads(pickle.dumps(BinningConfigError('bad offsets')))
        self.assertIsInstance(error, BinningError)
        self.assertEqual(str(error), 'bad offsets')


if __name__ == '__main__':
    unittest.main()
