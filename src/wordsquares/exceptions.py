# Copyright (c) 2026 TrailLensCo
# All rights reserved.
#
# This file is proprietary and confidential.
# Unauthorized copying, distribution, or use of this file,
# via any medium, is strictly prohibited without the express
# written permission of TrailLensCo.

"""Exception hierarchy for word square preprocessing and search."""


class WordSquareError(Exception):
    """Base exception for every fatal word square failure."""
    pass


class IndexFileError(WordSquareError):
    """Raised when a wordlist or index file is missing, malformed or inconsistent."""
    pass


class SeedValidationError(WordSquareError):
    """Raised when the seed words cannot start a search."""
    pass


class ExportError(WordSquareError):
    """Raised when solutions cannot be written."""
    pass
