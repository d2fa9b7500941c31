"""Errors raised by the etag package."""

from __future__ import annotations


class ParseError(ValueError):
    """Base exception for entity tag parse failures."""


class InvalidFormatError(ParseError):
    """Text does not match the entity-tag grammar."""

    def __init__(self, message: str, *, text: str, position: int | None = None) -> None:
        self.text = text
        self.position = position
        super().__init__(message)


__all__ = ["InvalidFormatError", "ParseError"]
