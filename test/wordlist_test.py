#!/usr/bin/env python
# -*- coding: utf-8 -*-

import os
import shutil
import tempfile
import unittest

from masktrie import DEFAULT_SEARCH_PATHS, build_trie, load_keys, Trie


class WordListTest(unittest.TestCase):
    def setUp(self):
        self.tmpdir = tempfile.mkdtemp()

    def tearDown(self):
        shutil.rmtree(self.tmpdir)

    def write(self, name, lines):
        path = os.path.join(self.tmpdir, name)
        with open(path, 'w', encoding='utf-8') as f:
            f.write('\n'.join(lines) + '\n')
        return path

    def test_load_keys(self):
        path = self.write('words.txt', ['foo', '  bar  ', '', 'foo', '大豆', 'bad\x00key'])
        t = Trie()
        self.assertEqual(4, load_keys(t, path, value=True))
        self.assertEqual(['bar', 'foo', '大豆'], sorted(t.keys()))
        self.assertIs(True, t.find('大豆'))

    def test_load_keys_without_strip(self):
        path = self.write('words.txt', [' foo', ''])
        t = Trie()
        self.assertEqual(1, load_keys(t, path, strip=False))
        self.assertEqual([' foo'], t.keys())

        t = Trie()
        self.assertEqual(2, load_keys(t, path, strip=False, skip_blank=False))
        self.assertIn('', t)

    def test_load_missing_file(self):
        self.assertRaises(FileNotFoundError, load_keys, Trie(),
                          os.path.join(self.tmpdir, 'nope.txt'))

    def test_build_trie_uses_first_existing_path(self):
        first = self.write('a.txt', ['alpha'])
        second = self.write('b.txt', ['beta'])
        missing = os.path.join(self.tmpdir, 'missing.txt')

        with self.assertLogs('masktrie.wordlist', level='INFO') as logs:
            t = build_trie([missing, first, second])
        self.assertEqual(['alpha'], t.keys())
        self.assertIn('Loaded 1 keys from', logs.output[0])

    def test_default_search_paths(self):
        self.assertEqual(['words.txt', '/usr/share/dict/words'], DEFAULT_SEARCH_PATHS)

    def test_build_trie_nothing_found(self):
        missing = os.path.join(self.tmpdir, 'missing.txt')
        with self.assertLogs('masktrie.wordlist', level='WARNING'):
            t = build_trie([missing])
        self.assertEqual(0, len(t))


if __name__ == '__main__':
    unittest.main()
