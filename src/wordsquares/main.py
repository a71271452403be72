#!/usr/bin/env python3
# Copyright (c) 2026 TrailLensCo
# All rights reserved.
#
# This file is proprietary and confidential.
# Unauthorized copying, distribution, or use of this file,
# via any medium, is strictly prohibited without the express
# written permission of TrailLensCo.

"""
Word Square Enumerator

Finds every N x N word square that contains a set of seed words:
1. Preprocess a wordlist into dictionary, pattern and match index files
2. Place the seed words on the grid in every consistent way
3. Complete each placement by backtracking over matching dictionary words
4. Write the solutions as text (and optionally YAML)

Usage:
    # Build the index files:
    wordsquares preprocess --wordlist words.txt

    # Enumerate squares:
    wordsquares solve --seeds seeds.txt --output squares.txt

    # With YAML configuration:
    wordsquares solve --config config/wordsquares.yaml
"""

import logging
import sys
import time
from typing import Dict, List, Optional, Sequence

from wordsquares.config import (
    ConfigValidationError, WordSquareConfig, create_argument_parser, load_config
)
from wordsquares.enumerator import SquareEnumerator, read_seed_file
from wordsquares.exceptions import WordSquareError
from wordsquares.exporter import YAMLExporter, write_solutions
from wordsquares.logging_config import setup_logging
from wordsquares.models import Grid
from wordsquares.normalizer import WordNormalizer
from wordsquares.preprocess import WordSquareIndex, load_index, preprocess_wordlist


class WordSquareApp:
    """
    Runs the preprocess and solve workflows for one configuration.

    Workflow (solve):
    1. Load and cross-check the index files
    2. Read and validate the seed words
    3. Generate seed squares
    4. Complete every seed square
    5. Write the solutions
    """

    def __init__(self, config: WordSquareConfig):
        """
        Initialize the application.

        Args:
            config: WordSquareConfig instance with all settings
        """
        self.config = config
        self.start_time = time.time()

        # Initialize logging
        self.log_file_path = setup_logging(
            output_dir=config.logging.directory,
            log_level=config.logging.level,
            log_file_prefix=config.logging.file_prefix,
            enable_console=config.logging.console,
            enable_file=config.logging.to_file,
        )
        self.logger = logging.getLogger(__name__)
        self.logger.debug(f"Log file: {self.log_file_path}")

    def preprocess(self) -> WordSquareIndex:
        """
        Build the index files from the configured wordlist.

        Returns:
            The index that was written
        """
        index_config = self.config.index
        self.logger.info("=" * 60)
        self.logger.info("WORD SQUARE PREPROCESSING")
        self.logger.info("=" * 60)
        self.logger.info(f"   Wordlist: {self.config.inputs.wordlist}")
        self.logger.info(f"   Word length: {index_config.word_length}")
        self.logger.info(f"   Padding: {index_config.pad_short_words}")

        normalizer = WordNormalizer(
            word_length=index_config.word_length,
            filler=index_config.filler,
            pad_short_words=index_config.pad_short_words,
            min_padded_length=index_config.min_padded_length,
        )
        index = preprocess_wordlist(
            self.config.inputs.wordlist,
            index_config.dictionary_path,
            index_config.patterns_path,
            index_config.matches_path,
            normalizer=normalizer,
            wildcard=index_config.wildcard,
        )

        self.logger.info("Normalizer Stats:")
        for name, value in normalizer.stats.items():
            self.logger.info(f"   {name}: {value}")
        self.logger.info(f"   - {len(index.dictionary)} words")
        self.logger.info(f"   - {len(index.catalog)} patterns")
        self.logger.info(f"   - {index.match_index.num_entries} word matches")
        self._log_elapsed("Preprocessing")
        return index

    def solve(self) -> List[Grid]:
        """
        Enumerate every word square containing the configured seed words.

        Returns:
            Solutions in discovery order
        """
        index_config = self.config.index
        search = self.config.search
        self.logger.info("=" * 60)
        self.logger.info("WORD SQUARE ENUMERATION")
        self.logger.info("=" * 60)

        # Step 1: Load index
        self.logger.info("Step 1: Loading index files...")
        index = load_index(
            index_config.dictionary_path,
            index_config.patterns_path,
            index_config.matches_path,
            word_length=index_config.word_length,
            wildcard=index_config.wildcard,
        )
        self.logger.info(f"   - {len(index.dictionary)} words, {len(index.catalog)} patterns")

        # Step 2: Seeds are validated before any output is written
        self.logger.info("Step 2: Reading seed words...")
        seed_words = read_seed_file(self.config.inputs.seed_file)
        enumerator = SquareEnumerator(
            index.dictionary,
            index.catalog,
            index.match_index,
            seed_words,
            min_seed_words=search.min_seed_words,
            max_seed_words=search.max_seed_words,
            anchor_first_seed=search.anchor_first_seed,
            filler=index_config.filler,
        )
        self.logger.info(f"   - Seeds: {', '.join(enumerator.seed_words)}")

        # Step 3: Seed placement
        self.logger.info("Step 3: Generating seed squares...")
        start = time.time()
        enumerator.generate_seed_squares()
        self.logger.info(f"   - Seed squares generated in {time.time() - start:.2f}s")

        # Step 4: Completion
        self.logger.info("Step 4: Completing seed squares...")
        start = time.time()
        solutions = enumerator.generate_wordsquares()
        self.logger.info(f"   - Completion finished in {time.time() - start:.2f}s")

        # Step 5: Output
        self.logger.info("Step 5: Writing solutions...")
        output_files = self._write_output(solutions, enumerator.stats, enumerator.seed_words)

        # Summary
        self.logger.info("=" * 60)
        self.logger.info(f"FOUND {len(solutions)} WORDSQUARES")
        self.logger.info("=" * 60)
        self.logger.info("Output files:")
        for name, path in output_files.items():
            self.logger.info(f"   {name}: {path}")
        self.logger.info("Search Stats:")
        for name, value in enumerator.stats.items():
            self.logger.info(f"   {name}: {value}")
        self.logger.debug(f"   total grids: {enumerator.total_grids}")
        self._log_elapsed("Solving")
        return solutions

    def _write_output(
        self,
        solutions: Sequence[Grid],
        stats: Dict[str, int],
        seed_words: Sequence[str]
    ) -> Dict[str, str]:
        """Write every configured output format. Text is always written."""
        output = self.config.output
        output_files = {"text": write_solutions(solutions, output.path_for("text"))}

        if "yaml" in output.formats:
            output_files["yaml"] = YAMLExporter().save(
                solutions, stats, output.path_for("yaml"), seed_words=seed_words
            )

        return output_files

    def _log_elapsed(self, label: str):
        elapsed = time.time() - self.start_time
        self.logger.info(f"{label} time: {elapsed:.2f} seconds")


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main entry point."""
    parser = create_argument_parser()
    args = parser.parse_args(argv)

    try:
        # Load configuration
        config = load_config(args)
    except ConfigValidationError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return 1

    try:
        app = WordSquareApp(config)
        if args.command == "preprocess":
            app.preprocess()
        else:
            app.solve()
    except WordSquareError as e:
        logging.getLogger(__name__).error(f"Error: {e}")
        return 1
    except KeyboardInterrupt:
        logging.getLogger(__name__).warning("Cancelled.")
        return 130

    return 0


def preprocess_main() -> int:
    """Entry point for ``wordsquares-preprocess``."""
    return main(["preprocess"] + sys.argv[1:])


def solve_main() -> int:
    """Entry point for ``wordsquares-solve``."""
    return main(["solve"] + sys.argv[1:])


if __name__ == "__main__":
    sys.exit(main())
