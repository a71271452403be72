# Copyright (c) 2026 TrailLensCo
# All rights reserved.
#
# This file is proprietary and confidential.
# Unauthorized copying, distribution, or use of this file,
# via any medium, is strictly prohibited without the express
# written permission of TrailLensCo.

"""
Pattern-to-word match index in compressed sparse column layout.

For pattern id p the matching word ids are
``rows[offsets[p]:offsets[p + 1]]``, in ascending word id order.
"""

import logging
from typing import List, Optional, Sequence

import numpy as np

from wordsquares.dictionary import Dictionary
from wordsquares.exceptions import IndexFileError
from wordsquares.index_files import (
    PathLike, open_for_writing, read_end, read_int_section, read_lines,
    write_section
)
from wordsquares.models import NOT_FOUND
from wordsquares.patterns import (
    PatternCatalog, Positions, generate_combinations, iter_word_patterns
)

logger = logging.getLogger(__name__)

# Progress is logged every this many words while building
PROGRESS_INTERVAL = 10000


class MatchIndex:
    """
    Sparse bipartite map from pattern ids to matching word ids.

    Both arrays are read-only once the index is constructed.
    """

    def __init__(self, offsets: Sequence[int], rows: Sequence[int]):
        self.offsets = np.array(offsets, dtype=np.int64)
        self.rows = np.array(rows, dtype=np.int64)
        self.offsets.setflags(write=False)
        self.rows.setflags(write=False)

    @classmethod
    def build(
        cls,
        dictionary: Dictionary,
        catalog: PatternCatalog,
        subsets: Optional[Sequence[Positions]] = None
    ) -> "MatchIndex":
        """
        Build the index for a dictionary and its pattern catalog.

        A word matches a pattern exactly when the pattern is derived from
        the word by one of the subsets, so every (pattern, word) pair is
        found by deriving the word's own patterns instead of testing every
        word against every pattern. A stable sort by pattern id keeps the
        word ids of each pattern in ascending order, which yields the same
        arrays as the pattern-major scan over all words.

        Args:
            dictionary: Words, in id order
            catalog: Catalog built from the same dictionary and subsets
            subsets: Revealed-position subsets; all non-empty subsets
                when omitted

        Returns:
            MatchIndex over ``len(catalog)`` patterns
        """
        if subsets is None:
            subsets = generate_combinations(dictionary.word_length)

        num_subsets = len(subsets)
        total = len(dictionary) * num_subsets
        pattern_ids = np.empty(total, dtype=np.int64)
        word_ids = np.repeat(np.arange(len(dictionary), dtype=np.int64), num_subsets)

        entry = 0
        for word_id, word in enumerate(dictionary):
            if word_id and word_id % PROGRESS_INTERVAL == 0:
                logger.debug(f"Matching word {word_id} of {len(dictionary)}")
            for pattern in iter_word_patterns(word, subsets, catalog.wildcard):
                pattern_id = catalog.lookup(pattern)
                if pattern_id == NOT_FOUND:
                    raise ValueError(
                        f"pattern {pattern!r} of word {word!r} is missing from the catalog"
                    )
                pattern_ids[entry] = pattern_id
                entry += 1

        order = np.argsort(pattern_ids, kind="stable")
        rows = word_ids[order]
        counts = np.bincount(pattern_ids, minlength=len(catalog))
        offsets = np.zeros(len(catalog) + 1, dtype=np.int64)
        np.cumsum(counts, out=offsets[1:])

        index = cls(offsets, rows)
        logger.info(
            f"Match index built: {index.num_patterns} patterns, "
            f"{index.num_entries} word matches"
        )
        return index

    @classmethod
    def load(cls, path: PathLike, num_words: Optional[int] = None) -> "MatchIndex":
        """
        Load a match index file written by save().

        Args:
            path: Match index file
            num_words: Dictionary size; row ids are checked against it
                when given

        Raises:
            IndexFileError: If the file is missing or malformed, or the
                arrays violate the index invariants
        """
        with read_lines(path, "Match index") as lines:
            offsets = read_int_section(lines, path, "Match offsets")
            rows = read_int_section(lines, path, "Match rows")
            read_end(lines, path, "Match index")

        index = cls(offsets, rows)
        errors = index.validate(num_words)
        if errors:
            raise IndexFileError(
                f"Match index in {path} is invalid:\n" +
                "\n".join(f"  - {e}" for e in errors)
            )

        logger.info(f"Loaded match index with {index.num_patterns} patterns from {path}")
        return index

    def save(self, path: PathLike) -> None:
        """Write offsets then rows, each as a counted section."""
        with open_for_writing(path) as f:
            write_section(f, self.offsets.tolist())
            write_section(f, self.rows.tolist())
        logger.debug(f"Wrote match index with {self.num_entries} entries to {path}")

    def validate(self, num_words: Optional[int] = None) -> List[str]:
        """
        Check the compressed sparse column invariants.

        Returns:
            List of validation error messages (empty if valid)
        """
        errors = []
        offsets = self.offsets

        if len(offsets) == 0:
            errors.append("offsets must hold at least one value")
            return errors
        if offsets[0] != 0:
            errors.append(f"offsets must start at 0, got {offsets[0]}")
        if len(offsets) > 1 and np.any(np.diff(offsets) < 0):
            errors.append("offsets must be non-decreasing")
        if offsets[-1] != len(self.rows):
            errors.append(
                f"last offset {offsets[-1]} must equal the number of rows {len(self.rows)}"
            )
        if len(self.rows):
            if self.rows.min() < 0:
                errors.append("row ids must be non-negative")
            if num_words is not None and self.rows.max() >= num_words:
                errors.append(
                    f"row id {self.rows.max()} is out of range for {num_words} words"
                )
        return errors

    @property
    def num_patterns(self) -> int:
        return len(self.offsets) - 1

    @property
    def num_entries(self) -> int:
        return len(self.rows)

    def candidates(self, pattern_id: int) -> np.ndarray:
        """Return the matching word ids of a pattern, ascending."""
        return self.rows[self.offsets[pattern_id]:self.offsets[pattern_id + 1]]

    def count(self, pattern_id: int) -> int:
        return int(self.offsets[pattern_id + 1] - self.offsets[pattern_id])
