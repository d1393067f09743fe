"""Configuration management for pycomicget."""

import os
from dataclasses import dataclass
from typing import Optional

DEFAULT_API_HOST = "https://api.mangacopy.com"


def _default_api_host() -> str:
    return os.environ.get('PYCOMICGET_API_HOST') or DEFAULT_API_HOST


@dataclass
class Config:
    """Configuration for the catalog client and the download helpers.

    The API host and transport settings seed a new ``Client``; both can be
    swapped later on the client itself without rebuilding it.
    """

    # API endpoint
    api_host: str = ""

    # HTTP settings
    timeout: float = 30.0  # seconds, per httpx phase
    user_agent: str = (
        "Mozilla/5.0 (Linux; Android 12; Pixel 6) AppleWebKit/537.36 "
        "(KHTML, like Gecko) Chrome/120.0.0.0 Mobile Safari/537.36"
    )
    proxy: Optional[str] = None
    verify_ssl: bool = True
    http2: bool = True
    header_file: Optional[str] = None

    # Downloads
    download_dir: str = "./downloads"
    max_concurrent_downloads: int = 8
    show_progress: bool = True

    # Retry settings for downloads (using tenacity); the API client never retries
    max_retries: int = 3
    retry_wait_min: float = 1.0
    retry_wait_max: float = 10.0
    retry_multiplier: float = 2.0

    def __post_init__(self):
        """Fill in environment-derived defaults and validate."""
        if not self.api_host:
            self.api_host = _default_api_host()

        # Setup proxy from environment if not specified
        if not self.proxy:
            self.proxy = os.environ.get('HTTPS_PROXY') or os.environ.get('HTTP_PROXY')

        if self.timeout <= 0:
            raise ValueError(f"Timeout must be positive: {self.timeout}")
        if self.max_concurrent_downloads < 1:
            raise ValueError(
                f"max_concurrent_downloads must be at least 1: {self.max_concurrent_downloads}"
            )
