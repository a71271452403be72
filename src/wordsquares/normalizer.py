# Copyright (c) 2026 TrailLensCo
# All rights reserved.
#
# This file is proprietary and confidential.
# Unauthorized copying, distribution, or use of this file,
# via any medium, is strictly prohibited without the express
# written permission of TrailLensCo.

"""
Wordlist normalization.

Turns raw wordlist lines into fixed-length candidate words. Lines are
reduced to their ASCII letters and lowercased; words one or two letters
short of the grid width are padded with the filler character.
"""

import logging
import re
from typing import Dict, Iterable, List, Set

from wordsquares.models import DEFAULT_WORD_LENGTH, FILLER

logger = logging.getLogger(__name__)

NON_LETTER_RE = re.compile(r"[^A-Za-z]")

# Shortest sanitized word that may be padded up to the grid width
DEFAULT_MIN_PADDED_LENGTH = 3


class WordNormalizer:
    """
    Sanitizes wordlist lines and produces words of exactly ``word_length``.

    Padding policy:
        - length N:   kept as-is
        - length N-1: ``-word`` and ``word-``
        - length N-2: ``--word``, ``-word-`` and ``word--``
        - anything else is discarded

    Padding only applies to sanitized words of at least
    ``min_padded_length`` letters. With the defaults this pads 3- and
    4-letter words into a 5-wide square and never pads fragments of one
    or two letters.
    """

    def __init__(
        self,
        word_length: int = DEFAULT_WORD_LENGTH,
        filler: str = FILLER,
        pad_short_words: bool = True,
        min_padded_length: int = DEFAULT_MIN_PADDED_LENGTH,
    ):
        self.word_length = word_length
        self.filler = filler
        self.pad_short_words = pad_short_words
        self.min_padded_length = min_padded_length
        self.stats: Dict[str, int] = {
            "lines_read": 0,
            "exact": 0,
            "padded": 0,
            "discarded": 0,
        }

    @staticmethod
    def sanitize(line: str) -> str:
        """Keep ASCII letters only, lowercased."""
        return NON_LETTER_RE.sub("", line).lower()

    def variants(self, word: str) -> List[str]:
        """
        Return the fixed-length words produced by a sanitized word.

        Args:
            word: Output of sanitize()

        Returns:
            Zero to three words of length ``word_length``
        """
        n = self.word_length
        length = len(word)
        if length == n:
            return [word]
        if not self.pad_short_words or length < self.min_padded_length:
            return []

        fill = self.filler
        if length == n - 1:
            return [fill + word, word + fill]
        if length == n - 2:
            return [fill * 2 + word, fill + word + fill, word + fill * 2]
        return []

    def normalize(self, lines: Iterable[str]) -> Set[str]:
        """
        Normalize raw wordlist lines into a set of unique words.

        The result is unordered; Dictionary fixes the id order.
        """
        words: Set[str] = set()
        for line in lines:
            self.stats["lines_read"] += 1
            produced = self.variants(self.sanitize(line))
            if not produced:
                self.stats["discarded"] += 1
            elif len(produced) == 1:
                self.stats["exact"] += 1
            else:
                self.stats["padded"] += 1
            words.update(produced)

        logger.debug(
            f"Normalized {self.stats['lines_read']} lines: "
            f"{self.stats['exact']} exact, {self.stats['padded']} padded, "
            f"{self.stats['discarded']} discarded"
        )
        return words
