# Copyright (c) 2026 TrailLensCo
# All rights reserved.
#
# This file is proprietary and confidential.
# Unauthorized copying, distribution, or use of this file,
# via any medium, is strictly prohibited without the express
# written permission of TrailLensCo.

"""
Fixed-length word collection.

A word's id is its position in the dictionary. Dictionaries built from a
raw wordlist are ordered by sorted word text, so the same wordlist always
produces the same ids.
"""

import logging
from pathlib import Path
from typing import Dict, Iterable, Iterator, Optional, Sequence, Tuple

from wordsquares.exceptions import IndexFileError
from wordsquares.index_files import (
    PathLike, open_for_writing, read_end, read_lines, read_section, write_section
)
from wordsquares.models import NOT_FOUND
from wordsquares.normalizer import WordNormalizer

logger = logging.getLogger(__name__)


class Dictionary:
    """
    Immutable, id-ordered list of unique words of one length.
    """

    def __init__(self, words: Sequence[str], word_length: int):
        """
        Initialize the dictionary.

        Args:
            words: Words in id order
            word_length: Length every word must have

        Raises:
            ValueError: If a word has the wrong length or appears twice
        """
        self.word_length = word_length
        self._words: Tuple[str, ...] = tuple(words)
        self._index: Dict[str, int] = {}

        for word_id, word in enumerate(self._words):
            if len(word) != word_length:
                raise ValueError(
                    f"word {word!r} (id {word_id}) has length {len(word)}, "
                    f"expected {word_length}"
                )
            if word in self._index:
                raise ValueError(f"duplicate word {word!r} (id {word_id})")
            self._index[word] = word_id

    @classmethod
    def from_wordlist(
        cls,
        lines: Iterable[str],
        normalizer: WordNormalizer
    ) -> "Dictionary":
        """Build a dictionary from raw wordlist lines, ids in sorted order."""
        words = sorted(normalizer.normalize(lines))
        logger.info(f"Dictionary built with {len(words)} words of length {normalizer.word_length}")
        return cls(words, normalizer.word_length)

    @classmethod
    def from_wordlist_file(
        cls,
        path: PathLike,
        normalizer: WordNormalizer
    ) -> "Dictionary":
        """
        Build a dictionary from a raw wordlist file.

        Raises:
            IndexFileError: If the wordlist does not exist
        """
        path = Path(path)
        if not path.is_file():
            raise IndexFileError(f"Wordlist file not found: {path}")
        logger.info(f"Loading wordlist: {path}")
        with open(path, "r", encoding="utf-8", errors="replace") as f:
            return cls.from_wordlist(f, normalizer)

    @classmethod
    def load(cls, path: PathLike, word_length: Optional[int] = None) -> "Dictionary":
        """
        Load a dictionary file written by save().

        Args:
            path: Dictionary file
            word_length: Expected word length; inferred from the first
                word when omitted

        Raises:
            IndexFileError: If the file is missing or malformed
        """
        with read_lines(path, "Dictionary") as lines:
            words = read_section(lines, path, "Dictionary")
            read_end(lines, path, "Dictionary")

        if word_length is None:
            if not words:
                raise IndexFileError(f"Dictionary in {path}: no words, cannot infer word length")
            word_length = len(words[0])

        try:
            dictionary = cls(words, word_length)
        except ValueError as e:
            raise IndexFileError(f"Dictionary in {path}: {e}")

        logger.info(f"Loaded {len(dictionary)} words from {path}")
        return dictionary

    def save(self, path: PathLike) -> None:
        """Write the dictionary as a counted section."""
        with open_for_writing(path) as f:
            write_section(f, self._words)
        logger.debug(f"Wrote {len(self._words)} words to {path}")

    @property
    def words(self) -> Tuple[str, ...]:
        return self._words

    def word(self, word_id: int) -> str:
        return self._words[word_id]

    def index_of(self, word: str) -> int:
        return self._index.get(word, NOT_FOUND)

    def __len__(self) -> int:
        return len(self._words)

    def __iter__(self) -> Iterator[str]:
        return iter(self._words)

    def __getitem__(self, word_id: int) -> str:
        return self._words[word_id]

    def __contains__(self, word: str) -> bool:
        return word in self._index
