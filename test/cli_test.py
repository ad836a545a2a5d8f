#!/usr/bin/env python
# -*- coding: utf-8 -*-

import contextlib
import io
import os
import shutil
import tempfile
import unittest

from masktrie import cli


class CliTest(unittest.TestCase):
    def setUp(self):
        self.tmpdir = tempfile.mkdtemp()
        self.keys = os.path.join(self.tmpdir, 'keys.txt')
        with open(self.keys, 'w', encoding='utf-8') as f:
            f.write('foo\nfoobar\nfrosty\nbfrza\n')

    def tearDown(self):
        shutil.rmtree(self.tmpdir)

    def run_cli(self, *argv):
        out = io.StringIO()
        with contextlib.redirect_stdout(out):
            code = cli.main(['--keys', self.keys] + list(argv))
        return code, out.getvalue()

    def test_prefix_is_default(self):
        code, out = self.run_cli('foo')
        self.assertEqual(0, code)
        self.assertIn("prefix 'foo': 2 match(es)", out)
        self.assertIn('  foobar', out)

    def test_fuzzy_mode(self):
        code, out = self.run_cli('--mode', 'fuzzy', 'fz')
        self.assertEqual(0, code)
        self.assertEqual(['  bfrza'], [l for l in out.splitlines() if l.startswith('  ')])

    def test_longest_with_values(self):
        code, out = self.run_cli('--mode', 'longest', '--values', 'foobarbaz')
        self.assertEqual(0, code)
        self.assertIn('  foobar\tNone', out)

    def test_no_match_exit_code(self):
        code, out = self.run_cli('--mode', 'exact', 'foo', 'nothing')
        self.assertEqual(1, code)
        self.assertIn("exact 'nothing': 0 match(es)", out)

    def test_missing_key_file(self):
        err = io.StringIO()
        with contextlib.redirect_stderr(err):
            with self.assertRaises(SystemExit) as ctx:
                cli.main(['--keys', os.path.join(self.tmpdir, 'nope'), 'foo'])
        self.assertEqual(2, ctx.exception.code)
        self.assertIn('key list not found', err.getvalue())

    def test_bad_mode(self):
        with contextlib.redirect_stderr(io.StringIO()):
            with self.assertRaises(SystemExit):
                cli.main(['--mode', 'bogus', 'foo'])


if __name__ == '__main__':
    unittest.main()
