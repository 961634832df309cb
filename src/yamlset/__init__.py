"""yamlset: read and write multi-document YAML (YAML 1.1)."""

from .codec import (
    UNDEFINED,
    format_objects,
    is_empty,
    parse,
    parse_all,
    save,
    stringify,
    tmp,
)
from .errors import (
    FetchError,
    MalformedYamlError,
    ParseError,
    SerializationError,
    YamlSetError,
)
from .loader import fetch, load
from .models import CodecSettings, FetchSettings

__all__ = [
    "__version__",
    "CodecSettings",
    "FetchError",
    "FetchSettings",
    "MalformedYamlError",
    "ParseError",
    "SerializationError",
    "UNDEFINED",
    "YamlSetError",
    "fetch",
    "format_objects",
    "is_empty",
    "load",
    "parse",
    "parse_all",
    "save",
    "stringify",
    "tmp",
]

__version__ = "0.1.0"
