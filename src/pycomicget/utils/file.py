"""File naming utilities for downloads."""

import re
from pathlib import Path
from urllib.parse import urlparse


_UNSAFE_CHARS = re.compile(r'[<>:"/\\|?*\x00-\x1f]')

# Room for the index prefix and an extension.
MAX_STEM = 200


def sanitize_filename(name: str, replacement: str = "_") -> str:
    """Make a CDN path segment safe to use as a local file name."""
    cleaned = _UNSAFE_CHARS.sub(replacement, name).strip(". ")
    return cleaned[:MAX_STEM] or "unnamed"


def filename_for_url(url: str, index: int, default_ext: str = ".jpg") -> str:
    """Build a download filename for an image URL.

    The name is the zero-padded index followed by the URL's file name, so
    files sort in the order they were requested, e.g.
    ``0003_c1x.webp`` for ``https://cdn.example/a/c1x.webp``.

    Args:
        url: Image URL
        index: Position of the URL in the request, 1-indexed
        default_ext: Extension used when the URL path has none
    """
    path = Path(urlparse(url).path)
    stem = sanitize_filename(path.stem) if path.stem else "image"
    ext = path.suffix.lower() or default_ext
    return f"{str(index).zfill(4)}_{stem}{ext}"
