# Copyright (c) 2026 TrailLensCo
# All rights reserved.
#
# This file is proprietary and confidential.
# Unauthorized copying, distribution, or use of this file,
# via any medium, is strictly prohibited without the express
# written permission of TrailLensCo.

"""
Line-oriented index file format.

Every index file is made of counted sections: a line holding an integer
count, followed by exactly that many value lines. The dictionary and
pattern files hold one section; the match index file holds two
(offsets, then rows).
"""

from contextlib import contextmanager
from pathlib import Path
from typing import Iterable, Iterator, List, TextIO, Union

from wordsquares.exceptions import IndexFileError

PathLike = Union[str, Path]


@contextmanager
def read_lines(path: PathLike, label: str) -> Iterator[Iterator[str]]:
    """
    Open an index file and provide its lines without their line endings.

    Usage:
        with read_lines(path, "Dictionary") as lines:
            words = read_section(lines, path, "Dictionary")
            read_end(lines, path, "Dictionary")

    Args:
        path: File to read
        label: Human-readable file kind used in error messages

    Raises:
        IndexFileError: If the file does not exist
    """
    path = Path(path)
    if not path.is_file():
        raise IndexFileError(f"{label} file not found: {path}")

    with open(path, "r", encoding="utf-8") as f:
        yield (line.rstrip("\r\n") for line in f)


def read_section(lines: Iterator[str], path: PathLike, label: str) -> List[str]:
    """
    Read one counted section.

    Raises:
        IndexFileError: If the count is missing or not a non-negative
            integer, or the file ends before ``count`` values were read
    """
    header = next(lines, None)
    if header is None:
        raise IndexFileError(f"{label} in {path}: missing count line")
    try:
        count = int(header.strip())
    except ValueError:
        raise IndexFileError(f"{label} in {path}: invalid count {header!r}")
    if count < 0:
        raise IndexFileError(f"{label} in {path}: negative count {count}")

    values = []
    for _ in range(count):
        line = next(lines, None)
        if line is None:
            raise IndexFileError(
                f"{label} in {path}: expected {count} entries, found {len(values)}"
            )
        values.append(line)
    return values


def read_int_section(lines: Iterator[str], path: PathLike, label: str) -> List[int]:
    """Read one counted section of integers."""
    values = read_section(lines, path, label)
    try:
        return [int(value) for value in values]
    except ValueError as e:
        raise IndexFileError(f"{label} in {path}: {e}")


def read_end(lines: Iterator[str], path: PathLike, label: str) -> None:
    """
    Check that nothing but blank lines follows the last section.

    Raises:
        IndexFileError: If the file holds more values than its counts declare
    """
    for line in lines:
        if line.strip():
            raise IndexFileError(
                f"{label} in {path}: unexpected content after the last section: {line!r}"
            )


def write_section(handle: TextIO, values: Iterable) -> None:
    """Write one counted section."""
    values = [str(value) for value in values]
    handle.write(f"{len(values)}\n")
    if values:
        handle.write("\n".join(values))
        handle.write("\n")


def open_for_writing(path: PathLike) -> TextIO:
    """Open an index file for writing, creating parent directories."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    return open(path, "w", encoding="utf-8", newline="\n")
