from __future__ import annotations

import os
import tempfile
import unittest
from pathlib import Path

from StockholmKit.alignment import Alignment, MissingHeader
from StockholmKit.stockio import (
    FastaOptions,
    FormatOptions,
    ParseOptions,
    read_stockholm,
    write_fasta,
    write_stockholm,
)
from StockholmKit.stockio.options import to_int


class OptionsTests(unittest.TestCase):
    def test_defaults(self):
        self.assertEqual(ParseOptions(), ParseOptions(strict=False, quiet=False))
        self.assertEqual(FormatOptions().width, 80)
        self.assertFalse(FormatOptions().indent_names)
        self.assertIsNone(FastaOptions().width)

    def test_payload_parsing(self):
        opts = ParseOptions.from_payload({"strict": "yes", "quiet": 0})
        self.assertTrue(opts.strict)
        self.assertFalse(opts.quiet)

        fmt = FormatOptions.from_payload({"width": "60", "indentNames": "true"})
        self.assertEqual(fmt.width, 60)
        self.assertTrue(fmt.indent_names)

    def test_zero_width_means_unwrapped(self):
        self.assertIsNone(FormatOptions.from_payload({"width": 0}).width)
        self.assertIsNone(FormatOptions.from_payload({"width": None}).width)
        self.assertIsNone(FastaOptions.coerce(width=False).width)

    def test_invalid_values(self):
        with self.assertRaises(ValueError):
            FormatOptions.from_payload({"width": -1})
        with self.assertRaises(ValueError):
            FormatOptions.from_payload({"width": "wide"})
        with self.assertRaises(ValueError):
            ParseOptions.from_payload({"strict": "maybe"})

    def test_coerce(self):
        opts = ParseOptions(strict=True)
        self.assertIs(ParseOptions.coerce(opts), opts)
        self.assertEqual(ParseOptions.coerce(None), ParseOptions())
        self.assertEqual(ParseOptions.coerce({"quiet": True}), ParseOptions(quiet=True))
        self.assertEqual(ParseOptions.coerce(opts, quiet=True), ParseOptions(strict=True, quiet=True))
        self.assertEqual(FormatOptions.coerce({"width": 20}, indent_names=True),
                         FormatOptions(width=20, indent_names=True))
        with self.assertRaises(TypeError):
            ParseOptions.coerce(42)

    def test_to_int(self):
        self.assertEqual(to_int("12", name="width"), 12)
        self.assertEqual(to_int(0, name="width", min_value=0), 0)
        with self.assertRaises(ValueError):
            to_int(-3, name="width", min_value=0)
        with self.assertRaises(TypeError):
            to_int(5, name="width", positive=True)

    def test_unknown_override_keys_rejected(self):
        with self.assertRaises(TypeError):
            FormatOptions.coerce(widht=5)
        with self.assertRaises(TypeError):
            ParseOptions.coerce({"strict": True}, stritc=True)
        with self.assertRaises(TypeError):
            FastaOptions.coerce(indent_names=True)
        self.assertTrue(FormatOptions.coerce(indentNames=True).indent_names)


class FileHelperTests(unittest.TestCase):
    def setUp(self):
        self.tmpdir = tempfile.TemporaryDirectory()
        self.root = Path(self.tmpdir.name)

    def tearDown(self):
        self.tmpdir.cleanup()

    def test_write_then_read(self):
        first = Alignment.from_row_list([("a", "AC-GT"), ("b", "ACGGT")])
        second = Alignment.from_row_list([("c", "GG")])
        second.gf["ID"] = ["second"]
        path = os.path.join(self.tmpdir.name, "out.sto")

        write_stockholm([first, second], path, width=0)
        records = read_stockholm(path)
        self.assertEqual(records, [first, second])

        write_stockholm(first, path)
        self.assertEqual(read_stockholm(path), [first])

    def test_read_passes_parse_options(self):
        path = self.root / "headless.sto"
        path.write_text("a AC\n//\n", encoding="utf-8")
        with self.assertRaises(MissingHeader):
            read_stockholm(str(path), strict=True)
        self.assertEqual(read_stockholm(str(path), quiet=True)[0].seqdata, {"a": "AC"})

    def test_write_fasta(self):
        aln = Alignment.from_row_list([("a", "ACGT")])
        path = self.root / "out.fasta"
        write_fasta(aln, str(path), width=3)
        self.assertEqual(path.read_text(encoding="utf-8"), ">a\nACG\nT\n")


if __name__ == "__main__":
    unittest.main()
