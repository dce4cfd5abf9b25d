#!/usr/bin/env python
# -*- coding: utf-8 -*-

"""
test_bins
----------------------------------

Tests for `binning.bins` module.
"""

import io
import unittest

from rich.console import Console

from binning import bins, bin_info, extended_scheme
from binning.exceptions import BinningRangeError, BinningValueError


class TestBins(unittest.TestCase):

    def test_bed(self):
        self.assertEqual(bins(0, 1, fmt='bed'), 585)
        self.assertEqual(bins(74012, 173034, fmt='bed'), 73)
        self.assertEqual(bins(1200000, 2000000, fmt='BED'), 74)

    def test_gff(self):
        # 1-based closed coordinates
        self.assertEqual(bins(1, 1), 585)
        self.assertEqual(bins(1, 1 << 17, fmt='gff'), 585)
        self.assertEqual(bins(1, (1 << 17) + 1, fmt='gff'), 73)
        self.assertEqual(bins(74013, 173034, fmt='gff'), 73)

    def test_all_bins(self):
        self.assertEqual(bins(0, 1, fmt='bed', one=False), {585, 73, 9, 1, 0})
        self.assertEqual(
            bins(1200001, 2000000, fmt='gff', one=False),
            set(range(594, 601)) | {74, 9, 1, 0}
        )

    def test_scheme(self):
        self.assertEqual(bins(0, 1, fmt='bed', scheme=extended_scheme()), 4681)

    def test_unknown_format(self):
        with self.assertRaises(BinningValueError):
            bins(0, 1, fmt='vcf')

    def test_out_of_range(self):
        with self.assertRaises(BinningRangeError):
            bins(0, 1, fmt='gff', one=False)
        with self.assertRaises(BinningRangeError):
            bins(0, (1 << 29) + 1, fmt='bed')


class TestBinInfo(unittest.TestCase):

    def render(self, scheme=None):
        out = io.StringIO()
        bin_info(scheme, console=Console(file=out, width=120))
        return out.getvalue()

    def test_standard(self):
        text = self.render()
        self.assertIn('536,870,911', text)
        self.assertIn('4680', text)
        self.assertIn('131072 bp', text)
        self.assertIn('(128 Kb)', text)
        self.assertIn('(512 Mb)', text)

    def test_extended(self):
        text = self.render(extended_scheme())
        self.assertIn('37448', text)
        self.assertIn('(4 Gb)', text)


if __name__ == '__main__':
    unittest.main()
