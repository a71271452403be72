# Copyright (c) 2026 TrailLensCo
# All rights reserved.
#
# This file is proprietary and confidential.
# Unauthorized copying, distribution, or use of this file,
# via any medium, is strictly prohibited without the express
# written permission of TrailLensCo.

"""
Word square enumerator.

Finds every N x N word square whose rows and columns are dictionary
words and which contains all of a given set of seed words.
"""

from wordsquares.dictionary import Dictionary
from wordsquares.enumerator import SquareEnumerator, read_seed_file, validate_seed_words
from wordsquares.exceptions import (
    ExportError, IndexFileError, SeedValidationError, WordSquareError
)
from wordsquares.match_index import MatchIndex
from wordsquares.models import FILLER, NOT_FOUND, WILDCARD, Grid
from wordsquares.normalizer import WordNormalizer
from wordsquares.patterns import PatternCatalog, generate_combinations
from wordsquares.preprocess import WordSquareIndex, load_index, preprocess_wordlist

__version__ = "1.0.0"

__all__ = [
    "Dictionary",
    "ExportError",
    "FILLER",
    "Grid",
    "IndexFileError",
    "MatchIndex",
    "NOT_FOUND",
    "PatternCatalog",
    "SeedValidationError",
    "SquareEnumerator",
    "WILDCARD",
    "WordNormalizer",
    "WordSquareError",
    "WordSquareIndex",
    "generate_combinations",
    "load_index",
    "preprocess_wordlist",
    "read_seed_file",
    "validate_seed_words",
]
