# Copyright (c) 2026 TrailLensCo
# All rights reserved.
#
# This file is proprietary and confidential.
# Unauthorized copying, distribution, or use of this file,
# via any medium, is strictly prohibited without the express
# written permission of TrailLensCo.

"""
Wordlist preprocessing and index loading.

Preprocessing turns a raw wordlist into three index files:
- dictionary: the fixed-length words, one id per line
- patterns: every distinct wildcard pattern, in sorted order
- matches: the pattern-to-word match index (offsets, then rows)

Solving loads the three files back and checks that they agree.
"""

import logging
import time
from dataclasses import dataclass
from typing import Optional

from wordsquares.dictionary import Dictionary
from wordsquares.exceptions import IndexFileError
from wordsquares.index_files import PathLike
from wordsquares.match_index import MatchIndex
from wordsquares.models import WILDCARD
from wordsquares.normalizer import WordNormalizer
from wordsquares.patterns import PatternCatalog, generate_combinations

logger = logging.getLogger(__name__)


@dataclass
class WordSquareIndex:
    """The three read-only structures shared by every search branch."""
    dictionary: Dictionary
    catalog: PatternCatalog
    match_index: MatchIndex

    @property
    def word_length(self) -> int:
        return self.dictionary.word_length


def build_index(
    dictionary: Dictionary,
    wildcard: str = WILDCARD
) -> WordSquareIndex:
    """Build the pattern catalog and match index for a dictionary."""
    subsets = generate_combinations(dictionary.word_length)
    logger.info(
        f"Generated {len(subsets)} position subsets for word length "
        f"{dictionary.word_length}"
    )

    start = time.time()
    catalog = PatternCatalog.build(dictionary, subsets, wildcard)
    logger.info(f"Pattern catalog built in {time.time() - start:.2f}s")

    start = time.time()
    match_index = MatchIndex.build(dictionary, catalog, subsets)
    logger.info(f"Match index built in {time.time() - start:.2f}s")

    return WordSquareIndex(dictionary, catalog, match_index)


def preprocess_wordlist(
    wordlist_path: PathLike,
    dictionary_path: PathLike,
    patterns_path: PathLike,
    matches_path: PathLike,
    normalizer: Optional[WordNormalizer] = None,
    wildcard: str = WILDCARD
) -> WordSquareIndex:
    """
    Build and persist the index files for a raw wordlist.

    Args:
        wordlist_path: Raw wordlist, one word per line
        dictionary_path: Destination of the dictionary file
        patterns_path: Destination of the pattern file
        matches_path: Destination of the match index file
        normalizer: Word normalizer; 5-letter defaults when omitted
        wildcard: Wildcard character used in patterns

    Returns:
        The in-memory index that was written

    Raises:
        IndexFileError: If the wordlist does not exist
    """
    normalizer = normalizer or WordNormalizer()
    total_start = time.time()

    dictionary = Dictionary.from_wordlist_file(wordlist_path, normalizer)
    index = build_index(dictionary, wildcard)

    start = time.time()
    dictionary.save(dictionary_path)
    index.catalog.save(patterns_path)
    index.match_index.save(matches_path)
    logger.info(f"Index files written in {time.time() - start:.2f}s")
    logger.info(f"  - dictionary: {dictionary_path}")
    logger.info(f"  - patterns: {patterns_path}")
    logger.info(f"  - matches: {matches_path}")

    logger.info(f"Preprocessing complete in {time.time() - total_start:.2f}s")
    return index


def load_index(
    dictionary_path: PathLike,
    patterns_path: PathLike,
    matches_path: PathLike,
    word_length: Optional[int] = None,
    wildcard: str = WILDCARD
) -> WordSquareIndex:
    """
    Load the three index files and check that they belong together.

    Args:
        dictionary_path: Dictionary file
        patterns_path: Pattern file
        matches_path: Match index file
        word_length: Expected word length; taken from the dictionary
            when omitted
        wildcard: Wildcard character used in patterns

    Raises:
        IndexFileError: If a file is missing or malformed, or the files
            disagree with each other or with ``word_length``
    """
    dictionary = Dictionary.load(dictionary_path, word_length)
    catalog = PatternCatalog.load(patterns_path, dictionary.word_length, wildcard)
    match_index = MatchIndex.load(matches_path, num_words=len(dictionary))

    if match_index.num_patterns != len(catalog):
        raise IndexFileError(
            f"Match index {matches_path} covers {match_index.num_patterns} patterns "
            f"but {patterns_path} holds {len(catalog)}"
        )

    return WordSquareIndex(dictionary, catalog, match_index)
