# Copyright (c) 2026 TrailLensCo
# All rights reserved.
#
# This file is proprietary and confidential.
# Unauthorized copying, distribution, or use of this file,
# via any medium, is strictly prohibited without the express
# written permission of TrailLensCo.

"""
Exhaustive word square search.

Search runs in two phases:
1. Seed placement: every consistent way to put all seed words on
   distinct lines of an empty grid ("seed squares").
2. Completion: depth-first backtracking from each seed square that fills
   the remaining lines with dictionary words matching the perpendicular
   constraint, recording every complete grid.
"""

import logging
from pathlib import Path
from typing import Dict, Iterable, Iterator, List, Sequence

from wordsquares.dictionary import Dictionary
from wordsquares.exceptions import SeedValidationError
from wordsquares.match_index import MatchIndex
from wordsquares.models import (
    FILLER, MAX_SEED_WORDS, MIN_SEED_WORDS, NOT_FOUND, Grid
)
from wordsquares.patterns import PatternCatalog

logger = logging.getLogger(__name__)


def validate_seed_words(
    seed_words: Iterable[str],
    word_length: int,
    min_seed_words: int = MIN_SEED_WORDS,
    max_seed_words: int = MAX_SEED_WORDS,
    filler: str = FILLER
) -> List[str]:
    """
    Normalize and validate seed words.

    Seeds are stripped and lowercased. Each must be exactly
    ``word_length`` characters of a-z or the filler character.

    Returns:
        The normalized seed words, in input order

    Raises:
        SeedValidationError: If the count is outside
            [min_seed_words, max_seed_words] or a seed is malformed
    """
    seeds = [word.strip().lower() for word in seed_words]

    if len(seeds) > max_seed_words:
        raise SeedValidationError(
            f"Too many seed words: {len(seeds)} (max {max_seed_words})"
        )
    if len(seeds) < min_seed_words:
        raise SeedValidationError(
            f"Too few seed words: {len(seeds)} (min {min_seed_words})"
        )

    for seed in seeds:
        if len(seed) > word_length:
            raise SeedValidationError(
                f"Seed word '{seed}' exceeds word length {word_length}"
            )
        if len(seed) < word_length:
            raise SeedValidationError(
                f"Seed word '{seed}' is shorter than word length {word_length}; "
                f"use '{filler}' for empty cells"
            )
        for char in seed:
            if char != filler and not ("a" <= char <= "z"):
                raise SeedValidationError(
                    f"Seed word '{seed}' contains invalid character {char!r}"
                )
    return seeds


def read_seed_file(path: str) -> List[str]:
    """
    Read seed words, one per line. Blank lines are skipped.

    Raises:
        SeedValidationError: If the file does not exist
    """
    path = Path(path)
    if not path.is_file():
        raise SeedValidationError(f"Seed file not found: {path}")

    with open(path, "r", encoding="utf-8") as f:
        seeds = [line.strip() for line in f if line.strip()]

    logger.info(f"Read {len(seeds)} seed words from {path}")
    return seeds


class SquareEnumerator:
    """
    Enumerates every word square containing all seed words.

    The dictionary, catalog and match index are only read. Each search
    path mutates a single Grid through paired assign/unassign calls.

    Usage:
        enumerator = SquareEnumerator(dictionary, catalog, index, seeds)
        enumerator.generate_seed_squares()
        solutions = enumerator.generate_wordsquares()
    """

    def __init__(
        self,
        dictionary: Dictionary,
        catalog: PatternCatalog,
        match_index: MatchIndex,
        seed_words: Sequence[str],
        min_seed_words: int = MIN_SEED_WORDS,
        max_seed_words: int = MAX_SEED_WORDS,
        anchor_first_seed: bool = True,
        filler: str = FILLER
    ):
        """
        Initialize the enumerator.

        Args:
            dictionary: Words addressed by match index row ids
            catalog: Pattern ids for constraint lookups
            match_index: Candidate words per pattern id
            seed_words: Words every solution must contain
            min_seed_words: Fewest seed words accepted
            max_seed_words: Most seed words accepted
            anchor_first_seed: Restrict the first seed word to rows
            filler: Padding character allowed in seed words

        Raises:
            SeedValidationError: If the seed words are invalid
        """
        self.dictionary = dictionary
        self.catalog = catalog
        self.match_index = match_index
        self.word_length = dictionary.word_length
        self.anchor_first_seed = anchor_first_seed
        self.seed_words = validate_seed_words(
            seed_words, self.word_length, min_seed_words, max_seed_words, filler
        )

        self.seed_squares: List[Grid] = []
        self.solutions: List[Grid] = []

        # Track statistics
        self.stats: Dict[str, int] = {
            "seed_squares": 0,
            "solutions": 0,
            "assignments": 0,
            "pruned_lookups": 0,
        }

    def new_grid(self) -> Grid:
        return Grid(size=self.word_length, wildcard=self.catalog.wildcard)

    # ------------------------------------------------------------------
    # Phase A: seed placement
    # ------------------------------------------------------------------
    def generate_seed_squares(self) -> List[Grid]:
        """
        Generate every consistent placement of the seed words.

        Returns:
            Seed squares, each with exactly one line per seed word
        """
        self.seed_squares = []
        self._place_seeds(self.new_grid(), 0)
        self.stats["seed_squares"] = len(self.seed_squares)
        logger.info(f"Generated {len(self.seed_squares)} seed squares")
        return self.seed_squares

    def _place_seeds(self, grid: Grid, count: int):
        if count == len(self.seed_words):
            self.seed_squares.append(grid.copy())
            return

        word = self.seed_words[count]
        # Only rows for the first seed: skips the transposed layouts
        last = grid.size if count == 0 and self.anchor_first_seed else grid.num_lines
        for index in range(last):
            if grid.is_assigned(index):
                continue
            with grid.placed(index, word):
                if grid.consistent():
                    self._place_seeds(grid, count + 1)

    # ------------------------------------------------------------------
    # Phase B: completion
    # ------------------------------------------------------------------
    def iter_completions(self, seed_square: Grid) -> Iterator[Grid]:
        """
        Yield every completion of a seed square, in search order.

        The seed square itself is not modified. Candidates are tried in
        ascending word id order, which fixes the order of solutions.
        """
        return self._complete(seed_square.copy())

    def _complete(self, grid: Grid) -> Iterator[Grid]:
        index = grid.next_unassigned_line()
        if index == grid.complete_index:
            yield grid.copy()
            return

        pattern_id = self.catalog.lookup(grid.constraint_at(index))
        if pattern_id == NOT_FOUND:
            self.stats["pruned_lookups"] += 1
            return

        for word_id in self.match_index.candidates(pattern_id):
            self.stats["assignments"] += 1
            with grid.placed(index, self.dictionary.word(word_id)):
                yield from self._complete(grid)

    def iter_wordsquares(self) -> Iterator[Grid]:
        """
        Yield the completions of every seed square, seed square by seed square.

        Seed squares are generated first if that has not happened yet.
        """
        if not self.seed_squares:
            self.generate_seed_squares()
        for number, seed_square in enumerate(self.seed_squares, start=1):
            logger.debug(f"Completing seed square {number}/{len(self.seed_squares)}")
            for solution in self.iter_completions(seed_square):
                self.stats["solutions"] += 1
                yield solution

    def generate_wordsquares(self) -> List[Grid]:
        """
        Find every word square reachable from the seed squares.

        Returns:
            All solutions in discovery order
        """
        for counter in ("solutions", "assignments", "pruned_lookups"):
            self.stats[counter] = 0
        self.solutions = list(self.iter_wordsquares())
        logger.info(f"Generated {len(self.solutions)} wordsquares")
        return self.solutions

    @property
    def total_grids(self) -> int:
        """Seed squares plus solutions recorded so far."""
        return len(self.seed_squares) + len(self.solutions)
