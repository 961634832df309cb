"""HTTP driver: blocking GET using requests."""

import logging
from typing import Optional

import requests

from ..errors import FetchError

logger = logging.getLogger(__name__)


def _too_large(url: str, max_bytes: int) -> FetchError:
    return FetchError(url, f"response exceeds {max_bytes} bytes")


def http_get(
    url: str,
    *,
    max_bytes: int,
    timeout: Optional[float] = None,
    chunk_size: int = 64 * 1024,
) -> bytes:
    """Fetch a URL and return the response body.

    The body is streamed so an oversized response is rejected as soon as it
    crosses max_bytes instead of being buffered whole.

    Args:
        url: http:// or https:// URL
        max_bytes: Largest accepted body size
        timeout: Connect/read timeout in seconds (None waits forever)
        chunk_size: Streaming chunk size

    Returns:
        Response body

    Raises:
        FetchError: On connection errors, timeouts, 4xx/5xx status codes or
            an oversized body
    """
    try:
        response = requests.get(
            url, stream=True, timeout=timeout, allow_redirects=True
        )
        try:
            response.raise_for_status()

            declared = response.headers.get("Content-Length", "")
            if declared.isdigit() and int(declared) > max_bytes:
                raise _too_large(url, max_bytes)

            body = bytearray()
            for chunk in response.iter_content(chunk_size=chunk_size):
                body.extend(chunk)
                if len(body) > max_bytes:
                    raise _too_large(url, max_bytes)
        finally:
            response.close()
    except requests.RequestException as e:
        raise FetchError(url, str(e)) from e

    logger.debug("Fetched %d bytes from %s", len(body), url)
    return bytes(body)


__all__ = ["http_get"]
