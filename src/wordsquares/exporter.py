# Copyright (c) 2026 TrailLensCo
# All rights reserved.
#
# This file is proprietary and confidential.
# Unauthorized copying, distribution, or use of this file,
# via any medium, is strictly prohibited without the express
# written permission of TrailLensCo.

"""
Solution writers.

The text format is the primary output:

    found <K> wordsquares

    1:

    0: <row 0>
    ...
    <2N-1>: <column N-1>

followed by the next solution block after a blank line. The YAML format
carries the same solutions plus run statistics.
"""

import logging
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

import yaml

from wordsquares.exceptions import ExportError
from wordsquares.models import Grid

logger = logging.getLogger(__name__)


def format_solutions(solutions: Sequence[Grid]) -> str:
    """
    Render solutions in the text output format.

    Args:
        solutions: Complete grids in discovery order

    Returns:
        Text with a ``found <K> wordsquares`` header and one block per solution
    """
    header = f"found {len(solutions)} wordsquares\n"
    blocks = []
    for ordinal, grid in enumerate(solutions, start=1):
        lines = [f"{ordinal}: ", ""] + grid.format_lines()
        blocks.append("\n".join(lines) + "\n")
    return header + "\n" + "\n\n".join(blocks)


def write_solutions(solutions: Sequence[Grid], path: str) -> str:
    """
    Write solutions in the text output format.

    Returns:
        Path of the written file

    Raises:
        ExportError: If the file cannot be written
    """
    path = Path(path)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(format_solutions(solutions), encoding="utf-8")
    except OSError as e:
        raise ExportError(f"Could not write solutions to {path}: {e}")

    logger.info(f"Wrote {len(solutions)} wordsquares to {path}")
    return str(path)


class YAMLExporter:
    """
    Exports solutions with run statistics to YAML.

    Usage:
        exporter = YAMLExporter()
        yaml_str = exporter.export(solutions, stats)
        exporter.save(solutions, stats, 'output/wordsquares.yaml')
    """

    def build_data(
        self,
        solutions: Sequence[Grid],
        stats: Optional[Dict[str, Any]] = None,
        seed_words: Optional[Sequence[str]] = None
    ) -> Dict[str, Any]:
        """Build the plain mapping that is serialized."""
        word_length = solutions[0].size if solutions else None
        wordsquares: List[Dict[str, Any]] = []
        for ordinal, grid in enumerate(solutions, start=1):
            wordsquares.append({
                "ordinal": ordinal,
                "rows": grid.rows(),
                "columns": grid.columns(),
            })

        return {
            "metadata": {
                "generated": datetime.now().isoformat(timespec="seconds"),
                "word_length": word_length,
                "seed_words": list(seed_words or []),
            },
            "found": len(solutions),
            "stats": dict(stats or {}),
            "wordsquares": wordsquares,
        }

    def export(
        self,
        solutions: Sequence[Grid],
        stats: Optional[Dict[str, Any]] = None,
        seed_words: Optional[Sequence[str]] = None
    ) -> str:
        """
        Export solutions to a YAML string.

        Args:
            solutions: Complete grids in discovery order
            stats: Optional search statistics
            seed_words: Optional seed words of the run

        Returns:
            YAML document
        """
        data = self.build_data(solutions, stats, seed_words)
        header = "# Word square solutions\n"
        return header + yaml.safe_dump(
            data,
            default_flow_style=False,
            sort_keys=False,
            allow_unicode=True,
        )

    def save(
        self,
        solutions: Sequence[Grid],
        stats: Optional[Dict[str, Any]],
        path: str,
        seed_words: Optional[Sequence[str]] = None
    ) -> str:
        """
        Export solutions and save to a file.

        Returns:
            Path to the saved file

        Raises:
            ExportError: If the file cannot be written
        """
        path = Path(path)
        content = self.export(solutions, stats, seed_words)
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(content, encoding="utf-8")
        except OSError as e:
            raise ExportError(f"Could not write YAML solutions to {path}: {e}")

        logger.info(f"Wrote YAML solutions to {path}")
        return str(path)
