"""Multi-document YAML codec.

Converts between lists of native values and a single YAML stream whose
documents are separated by ``---``. Every call reads or writes under the
schema version held by :class:`~yamlset.models.CodecSettings` (YAML 1.1).

Examples:
    >>> stringify({"a": 1}, [1, 2])
    'a: 1\\n---\\n- 1\\n- 2\\n'
    >>> parse("a: 1\\n---\\n{}\\n---\\nmode: 0775\\n")
    [{'a': 1}, {'mode': 509}]
"""

from __future__ import annotations

import io
import logging
import os
import sys
import tempfile
import warnings
from collections.abc import Mapping, Set
from functools import lru_cache
from pathlib import Path
from typing import Any, Iterable, List, Tuple, Union

from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError
from ruamel.yaml.representer import SafeRepresenter
from ruamel.yaml.resolver import VersionedResolver

from .errors import MalformedYamlError, SerializationError
from .models import DEFAULT_SETTINGS, CodecSettings

logger = logging.getLogger(__name__)

DOCUMENT_SEPARATOR = "---\n"

# Emitted in place of an undefined document; parsers read it back as an
# empty document rather than an explicit null.
BLANK_DOCUMENT = "\n"


class _Undefined:
    """Marker for an absent document or value (singleton)."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "UNDEFINED"

    def __bool__(self) -> bool:
        return False

    def __reduce__(self):
        return (_Undefined, ())


UNDEFINED = _Undefined()


class _Representer(SafeRepresenter):
    """Safe representer that keeps key order and writes UNDEFINED as null."""

    def __init__(self, *args: Any, **kwargs: Any):
        super().__init__(*args, **kwargs)
        self.sort_base_mapping_type_on_output = False


_Representer.add_representer(_Undefined, SafeRepresenter.represent_none)


@lru_cache(maxsize=None)
def _pinned_resolver(schema_version: Tuple[int, int]) -> type:
    """Return a resolver class that resolves plain scalars under one version.

    Setting ``YAML.version`` would also pin the version, but it makes the
    emitter write a ``%YAML`` directive at the top of every document.
    Pinning it on the resolver applies the same implicit typing rules (both
    for reading and for deciding which strings need quotes) without it.
    """

    class PinnedResolver(VersionedResolver):
        def __init__(self, version=None, loader=None, loadumper=None):
            super().__init__(
                version=schema_version, loader=loader, loadumper=loadumper
            )

    PinnedResolver.__name__ = "Yaml{}{}Resolver".format(*schema_version)
    return PinnedResolver


def _yaml(settings: CodecSettings) -> YAML:
    """Build a YAML instance configured for ``settings``."""
    yaml = YAML(typ="safe", pure=True)
    yaml.Resolver = _pinned_resolver(settings.version)
    yaml.Representer = _Representer
    yaml.default_flow_style = False
    yaml.sort_base_mapping_type_on_output = False
    yaml.allow_unicode = True
    # Never fold long scalars
    yaml.width = sys.maxsize
    yaml.indent(mapping=settings.indent, sequence=settings.indent, offset=0)
    return yaml


def is_empty(value: Any) -> bool:
    """Return True if a parsed document carries nothing worth keeping.

    UNDEFINED, None, empty lists and empty mappings are empty. Scalars such
    as ``0``, ``False`` and ``""`` are legitimate documents and are not.
    """
    if value is UNDEFINED or value is None:
        return True
    if isinstance(value, (Mapping, Set, list, tuple)):
        return len(value) == 0
    return False


def stringify(*docs: Any, settings: CodecSettings = DEFAULT_SETTINGS) -> str:
    """Serialize documents into one multi-document YAML string.

    Each argument becomes exactly one document, in order. A top-level
    UNDEFINED becomes a blank document; UNDEFINED nested inside a mapping or
    list is written as ``null`` so the key is not lost.

    Args:
        *docs: Documents to serialize
        settings: Codec settings (schema version, indentation)

    Returns:
        YAML text, documents joined by ``---``; empty string for no docs

    Raises:
        SerializationError: If a value has no YAML representation
    """
    if not docs:
        return ""

    yaml = _yaml(settings)
    blocks = []
    for index, doc in enumerate(docs):
        if doc is UNDEFINED:
            blocks.append(BLANK_DOCUMENT)
            continue

        stream = io.StringIO()
        try:
            yaml.dump(doc, stream)
        except YAMLError as e:
            raise SerializationError(
                f"Cannot serialize document {index} "
                f"({type(doc).__name__}): {e}"
            ) from e
        blocks.append(stream.getvalue())

    return DOCUMENT_SEPARATOR.join(blocks)


def format_objects(docs: Iterable[Any]) -> str:
    """Deprecated: use ``stringify(*docs)``."""
    warnings.warn(
        "format_objects() is deprecated, use stringify(*docs)",
        DeprecationWarning,
        stacklevel=2,
    )
    return stringify(*docs)


def save(
    file_path: Union[str, os.PathLike],
    docs: Iterable[Any],
    *,
    settings: CodecSettings = DEFAULT_SETTINGS,
) -> Path:
    """Write documents to ``file_path`` as a multi-document YAML file.

    The file is overwritten. Filesystem errors propagate unchanged.
    """
    data = stringify(*docs, settings=settings)
    path = Path(file_path)
    with path.open("w", encoding=settings.encoding, newline="") as f:
        f.write(data)
    logger.debug("Wrote %d bytes to %s", len(data), path)
    return path


def tmp(
    docs: Iterable[Any], *, settings: CodecSettings = DEFAULT_SETTINGS
) -> str:
    """Write documents to a fresh temp directory and return the file path.

    The directory is created by ``tempfile.mkdtemp`` so concurrent callers
    never collide. Nothing is cleaned up; the caller owns the file.
    """
    tmpdir = tempfile.mkdtemp(prefix=settings.tmp_prefix)
    file_path = os.path.join(tmpdir, settings.tmp_filename)
    save(file_path, docs, settings=settings)
    return file_path


def _construct(yaml: YAML, node: Any) -> Any:
    value = yaml.constructor.construct_document(node)
    # An empty document composes to a plain scalar with no text at all,
    # while `null` or `~` keep their source text.
    if value is None and node.value == "":
        return UNDEFINED
    return value


def parse_all(
    text: str, *, settings: CodecSettings = DEFAULT_SETTINGS
) -> List[Any]:
    """Parse every document in ``text`` without filtering.

    Blank documents come back as UNDEFINED, explicit nulls as None.

    Raises:
        MalformedYamlError: If the text is not a valid YAML stream
    """
    yaml = _yaml(settings)
    documents = []
    try:
        for node in yaml.compose_all(text):
            documents.append(_construct(yaml, node))
    except YAMLError as e:
        raise MalformedYamlError(str(e)) from e
    return documents


def parse(text: str, *, settings: CodecSettings = DEFAULT_SETTINGS) -> List[Any]:
    """Parse ``text`` and drop empty documents (see :func:`is_empty`)."""
    raw = parse_all(text, settings=settings)
    documents = [doc for doc in raw if not is_empty(doc)]
    logger.debug(
        "Parsed %d documents (%d empty skipped)",
        len(documents),
        len(raw) - len(documents),
    )
    return documents


__all__ = [
    "BLANK_DOCUMENT",
    "DOCUMENT_SEPARATOR",
    "UNDEFINED",
    "format_objects",
    "is_empty",
    "parse",
    "parse_all",
    "save",
    "stringify",
    "tmp",
]
