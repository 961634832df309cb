"""File driver: read a local file with a size cap."""

import logging
from pathlib import Path

from ..errors import FetchError

logger = logging.getLogger(__name__)


def read_file(path: str, *, max_bytes: int) -> bytes:
    """Read a file and return its contents as bytes.

    Args:
        path: File path to read
        max_bytes: Largest accepted file size

    Returns:
        File contents

    Raises:
        FetchError: If the file cannot be read or is larger than max_bytes
    """
    file_path = Path(path)
    try:
        with file_path.open("rb") as f:
            # One extra byte tells an exact fit apart from an overflow
            data = f.read(max_bytes + 1)
    except FileNotFoundError as e:
        raise FetchError(path, "file not found") from e
    except OSError as e:
        raise FetchError(path, e.strerror or str(e)) from e

    if len(data) > max_bytes:
        raise FetchError(path, f"file exceeds {max_bytes} bytes")

    logger.debug("Read %d bytes from %s", len(data), file_path)
    return data


__all__ = ["read_file"]
