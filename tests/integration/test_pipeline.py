#!/usr/bin/env python3
"""End-to-end: fixture -> document -> Typst, and an optional PDF compile.

The compile step skips gracefully when `typst` is not installed.
"""
import os
import subprocess
import sys
import tempfile
import unittest
from pathlib import Path

PROJECT_ROOT = os.path.join(os.path.dirname(__file__), '..', '..')
sys.path.insert(0, os.path.join(PROJECT_ROOT, 'src'))

import resumarkup as rm
from resumarkup.cli import _compile_pdf


class TestPipeline(unittest.TestCase):
    def setUp(self):
        self.fixtures = Path(__file__).parent.parent / 'fixtures'

    def test_fixture_to_typst(self):
        doc = rm.parse_resume(self.fixtures / 'resume.rm')
        typst = rm.generate_typst(doc)
        self.assertIn('#set page(margin: 15mm)', typst)
        self.assertIn('text(size: 30pt, weight: "bold", "Jane Doe")', typst)
        self.assertIn('"Jan 2020 - Mar 2022"', typst)
        self.assertIn('"Apr 2022 - Present"', typst)
        self.assertIn('"' + '-' * 40 + '"', typst)
        self.assertEqual(typst.count('#list('), 3)
        self.assertNotIn('free-form', typst)

    def test_same_input_same_output(self):
        path = self.fixtures / 'resume.rm'
        self.assertEqual(
            rm.generate_typst(rm.parse_resume(path)),
            rm.generate_typst(rm.parse_resume(path)),
        )

    def _has_typst(self) -> bool:
        try:
            res = subprocess.run(['typst', '--version'], capture_output=True, text=True)
            return res.returncode == 0
        except FileNotFoundError:
            return False

    def test_pdf_compile_if_available(self):
        if not self._has_typst():
            self.skipTest("typst not available; skipping PDF compile test")
        doc = rm.parse_resume(self.fixtures / 'resume.rm')
        with tempfile.TemporaryDirectory() as td:
            typ_path = Path(td) / 'resume.typ'
            typ_path.write_text(rm.generate_typst(doc), encoding='utf-8')
            pdf_path = Path(td) / 'resume.pdf'
            # Unknown families fall back to Typst's built-in fonts
            self.assertTrue(_compile_pdf(typ_path, pdf_path))
            self.assertTrue(pdf_path.exists())


if __name__ == '__main__':
    unittest.main()
