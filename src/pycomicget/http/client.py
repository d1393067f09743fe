"""HTTP client utilities using httpx directly (async-only).

This module builds the ``httpx.AsyncClient`` that serves as a catalog
client's transport handle. The API client itself never retries; the
tenacity decorator here is only used by layers above it (downloads).
"""

from pathlib import Path

import httpx
from tenacity import (
    retry,
    stop_after_attempt,
    wait_exponential,
    retry_if_exception_type,
)

from pycomicget.errors import TransportFailure
from pycomicget.config import Config
from pycomicget.http.headers import load_headers_from_file


def create_client(config: Config) -> httpx.AsyncClient:
    """Create an async httpx client from configuration.

    Args:
        config: Configuration object

    Returns:
        Configured httpx.AsyncClient instance

    Example:
        >>> config = Config(proxy="http://127.0.0.1:8080")
        >>> await catalog.set_transport(create_client(config))
    """
    headers = {'User-Agent': config.user_agent}

    if config.header_file and Path(config.header_file).exists():
        headers.update(load_headers_from_file(config.header_file))

    return httpx.AsyncClient(
        headers=headers,
        timeout=config.timeout,
        verify=config.verify_ssl,
        follow_redirects=True,
        http2=config.http2,
        proxy=config.proxy,
    )


def create_retry_decorator(config: Config):
    """Create a tenacity retry decorator from config.

    Retries only on ``TransportFailure``; API errors and decode failures
    are not transient and are re-raised immediately.

    Args:
        config: Configuration object

    Returns:
        Configured retry decorator
    """
    return retry(
        stop=stop_after_attempt(config.max_retries),
        wait=wait_exponential(
            multiplier=config.retry_multiplier,
            min=config.retry_wait_min,
            max=config.retry_wait_max,
        ),
        retry=retry_if_exception_type(TransportFailure),
        reraise=True,
    )
