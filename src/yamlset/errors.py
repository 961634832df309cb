"""Exceptions raised by yamlset."""


class YamlSetError(Exception):
    """Base class for yamlset errors."""

    pass


class MalformedYamlError(YamlSetError):
    """Text is not a valid YAML stream."""

    pass


class SerializationError(YamlSetError):
    """A value cannot be represented as YAML."""

    pass


class FetchError(YamlSetError):
    """A location could not be read.

    The underlying cause (HTTP status, OS error, size overflow) is chained
    as ``__cause__`` when there is one, but only ``location`` is part of the
    contract.
    """

    def __init__(self, location: str, message: str):
        super().__init__(f"Failed to load {location}: {message}")
        self.location = location


# Kept for callers that think of it as a parser failure
ParseError = MalformedYamlError


__all__ = [
    "FetchError",
    "MalformedYamlError",
    "ParseError",
    "SerializationError",
    "YamlSetError",
]
