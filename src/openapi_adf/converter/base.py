"""Shared converter interface."""

from typing import IO, Protocol

from openapi_adf.parser.base import OpenAPIDocument


class ConversionError(Exception):
    """Raised when a converted document cannot be encoded or written."""


class Converter(Protocol):
    def format(self) -> str:
        """Lowercase token naming the output target."""
        ...

    def convert(self, document: OpenAPIDocument, output: IO[str]) -> None:
        """Write the converted document to output."""
        ...
