#!/usr/bin/env python3
import unittest, sys, os, subprocess, json, tempfile, pathlib

PROJECT_ROOT = os.path.join(os.path.dirname(__file__), '..', '..')
SRC_PATH = os.path.join(PROJECT_ROOT, 'src')

class TestCLI(unittest.TestCase):
    def setUp(self):
        self.fixtures = pathlib.Path(PROJECT_ROOT).resolve() / 'tests' / 'fixtures'
        self.resume = self.fixtures / 'resume.rm'

    def _run(self, args, expect_success=True, cwd=PROJECT_ROOT):
        cmd = [sys.executable, '-m', 'resumarkup.cli'] + args
        env = os.environ.copy(); env['PYTHONPATH'] = os.path.abspath(SRC_PATH) + os.pathsep + env.get('PYTHONPATH','')
        res = subprocess.run(cmd, cwd=cwd, env=env, capture_output=True, text=True)
        if expect_success and res.returncode != 0:
            self.fail(f"Command failed {cmd}\nSTDOUT:\n{res.stdout}\nSTDERR:\n{res.stderr}")
        return res

    def test_ir_output(self):
        res = self._run([str(self.resume), '--ir'])
        data = json.loads(res.stdout)
        self.assertEqual(data['configuration']['title_size'], 30)
        self.assertEqual(data['blocks'][0]['kind'], 'title')
        self.assertIn({'kind': 'date_range', 'text': 'Jan 2020 - Mar 2022', 'indent': 1}, data['blocks'])

    def test_unrecognized_options_are_reported_and_ignored(self):
        res = self._run([str(self.resume), '--ir', '--fancy', '-x'])
        self.assertIn('Option not recognized: --fancy', res.stderr)
        self.assertIn('Option not recognized: -x', res.stderr)
        self.assertIn('blocks', json.loads(res.stdout))

    def test_missing_input_path(self):
        res = self._run([], expect_success=False)
        self.assertEqual(res.returncode, 1)
        self.assertIn('ERROR: Please input a ResuMarkup file', res.stderr)

    def test_unreadable_source(self):
        res = self._run(['does-not-exist.rm', '--ir'], expect_success=False)
        self.assertEqual(res.returncode, 1)
        self.assertIn('ERROR: Cannot open file', res.stderr)

    def test_malformed_directive(self):
        res = self._run([str(self.fixtures / 'malformed.rm'), '--ir'], expect_success=False)
        self.assertEqual(res.returncode, 1)
        self.assertIn('does not have', res.stderr)
        self.assertEqual(res.stdout, '')

    def test_invalid_numeric_value_writes_nothing(self):
        with tempfile.TemporaryDirectory() as td:
            res = self._run(
                [str(self.fixtures / 'bad_divider.rm'), '--typst-only', '--typst-output', 'out.typ'],
                expect_success=False, cwd=td,
            )
            self.assertEqual(res.returncode, 1)
            self.assertIn('#+ENDSECTION', res.stderr)
            self.assertFalse(os.path.exists(os.path.join(td, 'out.typ')))

    def test_unloadable_font_writes_nothing(self):
        # resume.rm points FONTPATH at a directory that does not exist
        with tempfile.TemporaryDirectory() as td:
            res = self._run([str(self.resume), '--typst-only'], expect_success=False, cwd=td)
            self.assertEqual(res.returncode, 1)
            self.assertIn('ERROR: Failed to load font', res.stderr)
            self.assertEqual(os.listdir(td), [])

if __name__ == '__main__':
    unittest.main()
