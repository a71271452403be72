# Copyright (c) 2026 TrailLensCo
# All rights reserved.
#
# This file is proprietary and confidential.
# Unauthorized copying, distribution, or use of this file,
# via any medium, is strictly prohibited without the express
# written permission of TrailLensCo.

"""
Wildcard patterns derived from dictionary words.

A pattern keeps the characters of a word at a subset of its positions and
replaces every other position with the wildcard. The catalog numbers the
distinct patterns in sorted string order; persisted match indexes rely on
that order, so it is enforced whenever a catalog is constructed.
"""

import logging
from itertools import combinations
from typing import Dict, Iterator, List, Optional, Sequence, Tuple

from wordsquares.dictionary import Dictionary
from wordsquares.exceptions import IndexFileError
from wordsquares.index_files import (
    PathLike, open_for_writing, read_end, read_lines, read_section, write_section
)
from wordsquares.models import NOT_FOUND, WILDCARD

logger = logging.getLogger(__name__)

Positions = Tuple[int, ...]


def generate_combinations(word_length: int) -> List[Positions]:
    """
    Return every non-empty subset of the positions 0..word_length-1.

    For a word length of 5 this is 31 subsets.
    """
    positions = range(word_length)
    subsets: List[Positions] = []
    for size in range(1, word_length + 1):
        subsets.extend(combinations(positions, size))
    return subsets


def pattern_for(word: str, positions: Positions, wildcard: str = WILDCARD) -> str:
    """Reveal ``word`` at ``positions`` and put the wildcard elsewhere."""
    chars = [wildcard] * len(word)
    for position in positions:
        chars[position] = word[position]
    return "".join(chars)


def iter_word_patterns(
    word: str,
    subsets: Sequence[Positions],
    wildcard: str = WILDCARD
) -> Iterator[str]:
    """Yield the pattern of ``word`` for every subset, in subset order."""
    for positions in subsets:
        yield pattern_for(word, positions, wildcard)


class PatternCatalog:
    """
    Bijection between distinct patterns and ids 0..len-1.

    Ids follow the sorted order of the pattern strings.
    """

    def __init__(
        self,
        patterns: Sequence[str],
        word_length: int,
        wildcard: str = WILDCARD
    ):
        """
        Initialize the catalog.

        Args:
            patterns: Distinct patterns in strictly increasing order
            word_length: Length every pattern must have
            wildcard: Wildcard character used by the patterns

        Raises:
            ValueError: If a pattern has the wrong length or the patterns
                are not strictly sorted
        """
        self.word_length = word_length
        self.wildcard = wildcard
        self._patterns: Tuple[str, ...] = tuple(patterns)
        self._ids: Dict[str, int] = {}

        previous: Optional[str] = None
        for pattern_id, pattern in enumerate(self._patterns):
            if len(pattern) != word_length:
                raise ValueError(
                    f"pattern {pattern!r} (id {pattern_id}) has length "
                    f"{len(pattern)}, expected {word_length}"
                )
            if previous is not None and pattern <= previous:
                raise ValueError(
                    f"patterns must be unique and sorted: {pattern!r} "
                    f"(id {pattern_id}) follows {previous!r}"
                )
            self._ids[pattern] = pattern_id
            previous = pattern

    @classmethod
    def build(
        cls,
        dictionary: Dictionary,
        subsets: Optional[Sequence[Positions]] = None,
        wildcard: str = WILDCARD
    ) -> "PatternCatalog":
        """
        Build the catalog of every pattern derived from the dictionary.

        Args:
            dictionary: Source words
            subsets: Revealed-position subsets; all non-empty subsets
                when omitted
            wildcard: Wildcard character

        Returns:
            PatternCatalog with ids in sorted pattern order
        """
        if subsets is None:
            subsets = generate_combinations(dictionary.word_length)

        distinct = set()
        for word in dictionary:
            distinct.update(iter_word_patterns(word, subsets, wildcard))

        catalog = cls(sorted(distinct), dictionary.word_length, wildcard)
        logger.info(
            f"Pattern catalog built: {len(catalog)} distinct patterns from "
            f"{len(dictionary)} words x {len(subsets)} subsets"
        )
        return catalog

    @classmethod
    def load(
        cls,
        path: PathLike,
        word_length: Optional[int] = None,
        wildcard: str = WILDCARD
    ) -> "PatternCatalog":
        """
        Load a pattern file written by save().

        Raises:
            IndexFileError: If the file is missing, malformed or unsorted
        """
        with read_lines(path, "Pattern") as lines:
            patterns = read_section(lines, path, "Patterns")
            read_end(lines, path, "Patterns")

        if word_length is None:
            if not patterns:
                raise IndexFileError(f"Patterns in {path}: no patterns, cannot infer word length")
            word_length = len(patterns[0])

        try:
            catalog = cls(patterns, word_length, wildcard)
        except ValueError as e:
            raise IndexFileError(f"Patterns in {path}: {e}")

        logger.info(f"Loaded {len(catalog)} patterns from {path}")
        return catalog

    def save(self, path: PathLike) -> None:
        """Write the patterns, in id order, as a counted section."""
        with open_for_writing(path) as f:
            write_section(f, self._patterns)
        logger.debug(f"Wrote {len(self._patterns)} patterns to {path}")

    def lookup(self, pattern: str) -> int:
        """Return the id of a pattern, or NOT_FOUND if no word produces it."""
        return self._ids.get(pattern, NOT_FOUND)

    def pattern(self, pattern_id: int) -> str:
        return self._patterns[pattern_id]

    @property
    def patterns(self) -> Tuple[str, ...]:
        return self._patterns

    def __len__(self) -> int:
        return len(self._patterns)

    def __contains__(self, pattern: str) -> bool:
        return pattern in self._ids

    def __iter__(self) -> Iterator[str]:
        return iter(self._patterns)
