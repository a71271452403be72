# Copyright (c) 2026 TrailLensCo
# All rights reserved.
#
# This file is proprietary and confidential.
# Unauthorized copying, distribution, or use of this file,
# via any medium, is strictly prohibited without the express
# written permission of TrailLensCo.

"""Functional tests for the word square enumerator."""

import os
import shutil
import sys
import tempfile
import unittest
from unittest import mock

import yaml

# Add src to path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))

from wordsquares.main import main, solve_main
from wordsquares.match_index import MatchIndex
from wordsquares.preprocess import load_index, preprocess_wordlist
from wordsquares.normalizer import WordNormalizer

WORDLIST = """Are
art
ate
Bat!
ear
eat
era
rat
tab
tar
tea
tea
a
hearts
"""


class FunctionalTestCase(unittest.TestCase):
    """Sets up a temporary workspace with a wordlist."""

    def setUp(self):
        self.temp_dir = tempfile.mkdtemp()
        self.wordlist = self.path("words.txt")
        self.seeds = self.path("seeds.txt")
        self.output = self.path("output", "wordsquares.txt")
        self.write(self.wordlist, WORDLIST)

    def tearDown(self):
        shutil.rmtree(self.temp_dir)

    def path(self, *parts):
        return os.path.join(self.temp_dir, *parts)

    def write(self, path, content):
        with open(path, "w", encoding="utf-8") as f:
            f.write(content)

    def read(self, path):
        with open(path, encoding="utf-8") as f:
            return f.read()

    def index_args(self):
        return [
            "--word-length", "3",
            "--dict", self.path("index", "dictionary.txt"),
            "--patterns", self.path("index", "patterns.txt"),
            "--matches", self.path("index", "matches.txt"),
            "--no-log-file",
            "--log-level", "WARNING",
        ]

    def run_preprocess(self):
        return main(["preprocess", "--wordlist", self.wordlist] + self.index_args())

    def run_solve(self, *extra):
        return main(
            ["solve", "--seeds", self.seeds, "--output", self.output]
            + self.index_args() + list(extra)
        )


class TestPreprocessing(FunctionalTestCase):
    """Tests for building the index files."""

    def test_preprocess_writes_index_files(self):
        """Test the three index files are written and agree."""
        self.assertEqual(self.run_preprocess(), 0)

        dictionary_lines = self.read(self.path("index", "dictionary.txt")).splitlines()
        self.assertEqual(dictionary_lines[0], "11")
        self.assertEqual(dictionary_lines[1:4], ["are", "art", "ate"])

        index = load_index(
            self.path("index", "dictionary.txt"),
            self.path("index", "patterns.txt"),
            self.path("index", "matches.txt"),
            word_length=3,
        )
        self.assertEqual(len(index.dictionary), 11)
        self.assertEqual(index.match_index.num_patterns, len(index.catalog))
        self.assertEqual(index.match_index.num_entries, 11 * 7)

    def test_preprocess_is_deterministic(self):
        """Test preprocessing twice writes identical files."""
        self.run_preprocess()
        first = [
            self.read(self.path("index", name))
            for name in ("dictionary.txt", "patterns.txt", "matches.txt")
        ]
        self.run_preprocess()
        second = [
            self.read(self.path("index", name))
            for name in ("dictionary.txt", "patterns.txt", "matches.txt")
        ]

        self.assertEqual(first, second)

    def test_preprocess_with_padding(self):
        """Test short words are padded into a wider square."""
        index = preprocess_wordlist(
            self.wordlist,
            self.path("pad", "dictionary.txt"),
            self.path("pad", "patterns.txt"),
            self.path("pad", "matches.txt"),
            normalizer=WordNormalizer(word_length=4),
        )

        self.assertIn("-bat", index.dictionary)
        self.assertIn("bat-", index.dictionary)
        self.assertNotIn("--bat", index.dictionary)

    def test_missing_wordlist(self):
        """Test a missing wordlist fails the run."""
        os.unlink(self.wordlist)

        self.assertEqual(self.run_preprocess(), 1)
        self.assertFalse(os.path.exists(self.path("index", "dictionary.txt")))


class TestSolving(FunctionalTestCase):
    """Tests for the full preprocess and solve workflow."""

    def setUp(self):
        super().setUp()
        self.assertEqual(self.run_preprocess(), 0)
        self.write(self.seeds, "bat\nare\n\ntea\n")

    def test_solve_writes_solutions(self):
        """Test the known square is written and the header count is right."""
        self.assertEqual(self.run_solve(), 0)

        text = self.read(self.output)
        lines = text.splitlines()
        blocks = [line for line in lines if line.endswith(": ")]

        self.assertEqual(lines[0], f"found {len(blocks)} wordsquares")
        self.assertGreater(len(blocks), 0)
        self.assertIn("0: bat\n1: are\n2: tea\n3: bat\n4: are\n5: tea\n", text)

    def test_solve_writes_yaml(self):
        """Test the YAML output carries the same solutions."""
        self.assertEqual(self.run_solve("--format", "text,yaml"), 0)

        with open(self.path("output", "wordsquares.yaml"), encoding="utf-8") as f:
            data = yaml.safe_load(f)
        header = self.read(self.output).splitlines()[0]

        self.assertEqual(header, f"found {data['found']} wordsquares")
        self.assertEqual(data["metadata"]["seed_words"], ["bat", "are", "tea"])
        self.assertEqual(data["stats"]["solutions"], data["found"])

    def test_no_solutions_still_writes_file(self):
        """Test a search with no results reports found 0."""
        self.write(self.seeds, "zzz\nbat\nare\n")

        self.assertEqual(self.run_solve(), 0)
        self.assertEqual(self.read(self.output), "found 0 wordsquares\n\n")

    def test_too_few_seeds(self):
        """Test too few seeds abort the run without output."""
        self.write(self.seeds, "bat\nare\n")

        self.assertEqual(self.run_solve(), 1)
        self.assertFalse(os.path.exists(self.output))

    def test_seed_of_wrong_length(self):
        """Test a seed of the wrong length aborts the run without output."""
        self.write(self.seeds, "bat\nare\ntear\n")

        self.assertEqual(self.run_solve(), 1)
        self.assertFalse(os.path.exists(self.output))

    def test_word_length_mismatch(self):
        """Test solving with another word length than the index fails."""
        exit_code = main([
            "solve", "--seeds", self.seeds, "--output", self.output,
            "--dict", self.path("index", "dictionary.txt"),
            "--patterns", self.path("index", "patterns.txt"),
            "--matches", self.path("index", "matches.txt"),
            "--no-log-file", "--log-level", "WARNING",
        ])

        self.assertEqual(exit_code, 1)
        self.assertFalse(os.path.exists(self.output))

    def test_missing_index(self):
        """Test a missing match index file fails the run."""
        os.unlink(self.path("index", "matches.txt"))

        self.assertEqual(self.run_solve(), 1)

    def test_mismatched_match_index(self):
        """Test a match index built for another pattern catalog fails the run without output."""
        MatchIndex([0, 0], []).save(self.path("index", "matches.txt"))

        self.assertEqual(self.run_solve(), 1)
        self.assertFalse(os.path.exists(self.output))

    def test_solve_entry_point(self):
        """Test the wordsquares-solve entry point runs the solve command."""
        argv = ["wordsquares-solve", "--seeds", self.seeds, "--output", self.output]
        with mock.patch.object(sys, "argv", argv + self.index_args()):
            self.assertEqual(solve_main(), 0)

        self.assertTrue(os.path.exists(self.output))

    def test_log_file_written(self):
        """Test a log file is written to the configured directory."""
        log_dir = self.path("logs")
        args = [arg for arg in self.index_args() if arg != "--no-log-file"]
        exit_code = main(
            ["solve", "--seeds", self.seeds, "--output", self.output,
             "--log-dir", log_dir] + args
        )

        self.assertEqual(exit_code, 0)
        log_files = os.listdir(log_dir)
        self.assertEqual(len(log_files), 1)
        self.assertTrue(log_files[0].startswith("wordsquares_"))

    def test_invalid_configuration(self):
        """Test an invalid configuration returns a failure exit code."""
        self.assertEqual(self.run_solve("--format", "pdf"), 1)


if __name__ == '__main__':
    unittest.main()
