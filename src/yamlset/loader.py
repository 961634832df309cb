"""Load YAML documents from a URL or a local file.

Locations:
    manifests/app.yaml                     # Relative or absolute path
    file:///etc/app/manifest.yaml          # file:// URL
    https://example.com/deploy.yaml        # HTTP(S), fetched with requests

Every location is read in full with a size cap (10 MiB by default), decoded
as UTF-8 and handed to :func:`yamlset.codec.parse`.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, List, Literal
from urllib.parse import urlparse
from urllib.request import url2pathname

from .codec import parse
from .drivers import http_get, read_file
from .errors import FetchError
from .models import (
    DEFAULT_FETCH_SETTINGS,
    DEFAULT_SETTINGS,
    CodecSettings,
    FetchSettings,
)

logger = logging.getLogger(__name__)

LocationType = Literal["file", "http"]

HTTP_SCHEMES = ("http", "https")


@dataclass(frozen=True)
class Location:
    """A location string resolved to a reader.

    Examples:
        "app.yaml" → Location(raw="app.yaml", type="file", target="app.yaml")
        "file:///tmp/a.yaml" → Location(..., type="file", target="/tmp/a.yaml")
        "https://x.io/a.yaml" → Location(..., type="http", target="https://x.io/a.yaml")
    """

    raw: str
    type: LocationType
    target: str
    """Path for files, full URL for http."""


def resolve_location(location: str) -> Location:
    """Decide how a location string is read.

    Raises:
        FetchError: If the location is empty or uses an unsupported scheme
    """
    if not location or not location.strip():
        raise FetchError(location, "location cannot be empty")

    parsed = urlparse(location)
    scheme = parsed.scheme.lower()

    if scheme in HTTP_SCHEMES:
        return Location(raw=location, type="http", target=location)

    if scheme == "file":
        if parsed.netloc not in ("", "localhost"):
            raise FetchError(
                location, f"remote file host '{parsed.netloc}' not supported"
            )
        return Location(
            raw=location, type="file", target=url2pathname(parsed.path)
        )

    # Windows drive letters parse as one-letter schemes; "name:x.yaml" has
    # no "//" and is a plain file name too.
    if len(scheme) <= 1 or "://" not in location:
        return Location(raw=location, type="file", target=location)

    raise FetchError(location, f"unsupported URL scheme '{scheme}'")


def fetch(
    location: str, settings: FetchSettings = DEFAULT_FETCH_SETTINGS
) -> str:
    """Read a location in full and return its text.

    Raises:
        FetchError: If the location cannot be read, exceeds the size cap or
            is not valid UTF-8
    """
    resolved = resolve_location(location)
    logger.debug("Fetching %s (%s)", resolved.target, resolved.type)

    if resolved.type == "http":
        data = http_get(
            resolved.target,
            max_bytes=settings.max_bytes,
            timeout=settings.timeout,
            chunk_size=settings.chunk_size,
        )
    else:
        data = read_file(resolved.target, max_bytes=settings.max_bytes)

    try:
        return data.decode("utf-8-sig")
    except UnicodeDecodeError as e:
        raise FetchError(location, "content is not valid UTF-8") from e


def load(
    url_or_file: str,
    *,
    settings: CodecSettings = DEFAULT_SETTINGS,
    fetch_settings: FetchSettings = DEFAULT_FETCH_SETTINGS,
) -> List[Any]:
    """Load every non-empty YAML document from a URL or a file.

    Empty documents (blank, ``null``, ``[]``, ``{}``) are skipped.

    Args:
        url_or_file: URL or file path to load from
        settings: Codec settings
        fetch_settings: Size cap and timeout for reading

    Returns:
        One native value per document, in stream order

    Raises:
        FetchError: If the location cannot be read
        MalformedYamlError: If the content is not valid YAML
    """
    body = fetch(url_or_file, fetch_settings)
    return parse(body, settings=settings)


__all__ = ["Location", "LocationType", "fetch", "load", "resolve_location"]
