"""
Data models for the word square enumerator.
"""

from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Iterator, List

# Character used to pad words shorter than the grid width
FILLER = "-"
# Character standing for "any character" in a pattern
WILDCARD = "*"
# Returned by lookups when a pattern or word is unknown
NOT_FOUND = -1

DEFAULT_WORD_LENGTH = 5
MIN_SEED_WORDS = 3
MAX_SEED_WORDS = 10


def placeholder(word_length: int, wildcard: str = WILDCARD) -> str:
    """Return the all-wildcard word held by an unassigned line."""
    return wildcard * word_length


def matches_pattern(word: str, pattern: str, wildcard: str = WILDCARD) -> bool:
    """
    Check if a word matches a pattern.
    Pattern uses the wildcard for unknown characters; every other
    character, the filler included, must be equal.
    Example: 'r**t*' matches 'route'
    """
    if len(word) != len(pattern):
        return False
    for w, p in zip(word, pattern):
        if p != wildcard and w != p:
            return False
    return True


@dataclass
class Grid:
    """
    One N x N word square under construction.

    The square is stored as 2N lines: indices 0..N-1 are the rows and
    N..2N-1 are the columns. Row i and column j-N share the cell
    (i, j-N), so ``words[i][j - N]`` must equal ``words[j][i]`` whenever
    both lines are assigned.
    """
    size: int
    words: List[str] = field(default_factory=list)
    assigned: List[bool] = field(default_factory=list)
    wildcard: str = WILDCARD

    def __post_init__(self):
        if not self.words:
            self.words = [
                placeholder(self.size, self.wildcard)
                for _ in range(2 * self.size)
            ]
        if not self.assigned:
            self.assigned = [False] * (2 * self.size)

    @property
    def num_lines(self) -> int:
        return 2 * self.size

    @property
    def complete_index(self) -> int:
        """Sentinel returned by next_unassigned_line() on a full grid."""
        return 2 * self.size

    def is_row(self, index: int) -> bool:
        return index < self.size

    def is_assigned(self, index: int) -> bool:
        return self.assigned[index]

    def assign(self, index: int, word: str):
        """Place a word on a line. Consistency is not checked here."""
        self.words[index] = word
        self.assigned[index] = True

    def unassign(self, index: int):
        """Reset a line to the placeholder."""
        self.words[index] = placeholder(self.size, self.wildcard)
        self.assigned[index] = False

    @contextmanager
    def placed(self, index: int, word: str) -> Iterator["Grid"]:
        """
        Assign a word for the duration of a ``with`` block.

        The line is unassigned on every exit path, including exceptions
        and generators that are closed before they finish.
        """
        self.assign(index, word)
        try:
            yield self
        finally:
            self.unassign(index)

    def consistent(self) -> bool:
        """Check that every assigned row agrees with every assigned column."""
        n = self.size
        for row in range(n):
            if not self.assigned[row]:
                continue
            for col in range(n):
                line = n + col
                if self.assigned[line] and self.words[row][col] != self.words[line][row]:
                    return False
        return True

    def next_unassigned_line(self) -> int:
        """Return the lowest unassigned line, rows before columns."""
        for index in range(self.num_lines):
            if not self.assigned[index]:
                return index
        return self.complete_index

    def constraint_at(self, index: int) -> str:
        """
        Get the pattern the perpendicular lines impose on a line.

        Position k holds the character of the crossing line at the shared
        cell when that line is assigned, and the wildcard otherwise.
        """
        n = self.size
        chars = []
        if index < n:
            for k in range(n):
                crossing = n + k
                chars.append(self.words[crossing][index] if self.assigned[crossing] else self.wildcard)
        else:
            col = index - n
            for k in range(n):
                chars.append(self.words[k][col] if self.assigned[k] else self.wildcard)
        return "".join(chars)

    def assigned_count(self) -> int:
        return sum(1 for flag in self.assigned if flag)

    def is_complete(self) -> bool:
        return all(self.assigned)

    def rows(self) -> List[str]:
        return self.words[:self.size]

    def columns(self) -> List[str]:
        return self.words[self.size:]

    def copy(self) -> "Grid":
        """Return an independent copy of this grid."""
        return Grid(
            size=self.size,
            words=list(self.words),
            assigned=list(self.assigned),
            wildcard=self.wildcard,
        )

    def format_lines(self) -> List[str]:
        """Return the 2N lines as ``<index>: <word>`` strings."""
        return [f"{index}: {word}" for index, word in enumerate(self.words)]

    def to_string(self) -> str:
        """Convert the rows to a letter matrix."""
        result = []
        for row in self.rows():
            result.append(" ".join(row))
        return "\n".join(result)
