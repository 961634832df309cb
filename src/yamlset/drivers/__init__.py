"""Drivers: byte-level readers for local files and HTTP URLs."""

from .file import read_file
from .http import http_get

__all__ = ["http_get", "read_file"]
