"""Utility functions for pycomicget."""

from pycomicget.utils.file import (
    filename_for_url,
    sanitize_filename,
)

__all__ = [
    "filename_for_url",
    "sanitize_filename",
]
