from __future__ import annotations

import unittest

from StockholmKit.alignment import Alignment, RowNotFound, col2seqpos, seqpos2col


class CoordinateFunctionTests(unittest.TestCase):
    def test_seqpos2col(self):
        self.assertEqual(seqpos2col("A-C.G"), [0, 2, 4])
        self.assertEqual(seqpos2col("--AC"), [2, 3])
        self.assertEqual(seqpos2col("----"), [])
        self.assertEqual(seqpos2col(""), [])

    def test_col2seqpos(self):
        self.assertEqual(col2seqpos("AC-GT"), [0, 1, 1.5, 2, 3])
        self.assertEqual(col2seqpos("-A-C"), [-0.5, 0, 0.5, 1])
        self.assertEqual(col2seqpos("..A"), [-0.5, -0.5, 0])
        self.assertEqual(col2seqpos("AC.."), [0, 1, 1.5, 1.5])

    def test_residue_columns_are_ints(self):
        positions = col2seqpos("-A.C-")
        self.assertIsInstance(positions[1], int)
        self.assertIsInstance(positions[0], float)

    def test_custom_gap_chars(self):
        self.assertEqual(seqpos2col("A~C-", gap_chars="~"), [0, 2, 3])
        self.assertEqual(col2seqpos("A~C", gap_chars="~"), [0, 0.5, 1])


class AlignmentCoordinateTests(unittest.TestCase):
    def setUp(self):
        self.aln = Alignment.from_row_list([
            ("a", "-AC..GT-"),
            ("b", "ACGTACGT"),
            ("c", "~~AC"),
        ])

    def test_default_gap_chars(self):
        self.assertEqual(Alignment.DEFAULT_GAP_CHARS, ".-")
        self.assertEqual(self.aln.seqpos2col("a"), [1, 2, 5, 6])
        self.assertEqual(self.aln.col2seqpos("c"), [0, 1, 2, 3])
        self.assertEqual(self.aln.col2seqpos("c", "~"), [-0.5, -0.5, 0, 1])

    def test_missing_row(self):
        with self.assertRaises(RowNotFound):
            self.aln.seqpos2col("zzz")
        with self.assertRaises(RowNotFound):
            self.aln.col2seqpos("zzz")

    def test_maps_are_inverse_at_residue_columns(self):
        for name in self.aln.seqnames:
            to_col = self.aln.seqpos2col(name)
            to_pos = self.aln.col2seqpos(name)
            self.assertEqual(len(to_pos), len(self.aln.seqdata[name]))
            for col, pos in enumerate(to_pos):
                if self.aln.seqdata[name][col] not in Alignment.DEFAULT_GAP_CHARS:
                    self.assertIsInstance(pos, int)
                    self.assertEqual(to_col[pos], col)
                else:
                    self.assertEqual(pos % 1, 0.5)

    def test_queries_do_not_mutate(self):
        before = self.aln.copy()
        self.aln.seqpos2col("a")
        self.aln.col2seqpos("b")
        self.assertEqual(self.aln, before)


if __name__ == "__main__":
    unittest.main()
