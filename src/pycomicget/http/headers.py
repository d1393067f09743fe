"""Header utilities.

The catalog API expects every call to look like it comes from the official
mobile app. Those headers are protocol constants and are attached per
request; they are not user-configurable.

Transport-level extra headers (for image CDNs and the like) can still be
loaded from a simple key-value header file.
"""

from pathlib import Path
from typing import Dict

APP_VERSION = "2.0.7"

PROTOCOL_HEADERS: Dict[str, str] = {
    "authorization": "Token",
    "referer": f"com.copymanga.app-{APP_VERSION}",
    "User-Agent": f"COPY/{APP_VERSION}",
    "source": "copyApp",
    "webp": "1",
    "version": APP_VERSION,
    "region": "1",
    "platform": "3",
    "Accept": "application/json",
}


def load_headers_from_file(header_file: str) -> Dict[str, str]:
    """Default headers for the transport, read from ``Name: value`` lines.

    These go on every request the transport makes, raw image fetches
    included; the API protocol headers are attached per call on top of them.
    A missing file yields no extra headers.
    """
    path = Path(header_file)
    if not path.is_file():
        return {}

    extra: Dict[str, str] = {}
    for raw in path.read_text(encoding="utf-8").splitlines():
        name, sep, value = raw.partition(":")
        if raw.lstrip().startswith("#") or not sep:
            continue
        extra[name.strip()] = value.strip()
    return extra
