"""
Data-layer exceptions.

Both concrete errors are raised while loading the backing JSON source and are
surfaced to whichever caller triggered the load. The API translates any
``DatasetError`` into a 503.
"""
from __future__ import annotations


class DatasetError(Exception):
    """Base class for failures loading the sales dataset."""


class SourceUnavailableError(DatasetError):
    """The source file is missing or cannot be read."""


class MalformedSourceError(DatasetError):
    """The source is readable but is not a JSON array of objects."""
