"""EntityTag value type.

This module provides the entity tag itself:
- strong()/weak(): Unchecked constructors
- checked_strong()/checked_weak(): Constructors that validate the tag content
- parse(): Strict parser for the `ETag` header grammar
- strong_eq()/weak_eq(): HTTP strong and weak comparison
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from etag.errors import InvalidFormatError

logger = logging.getLogger(__name__)

WEAK_PREFIX = "W/"
DQUOTE = '"'


def is_etagc(char: str) -> bool:
    """Check if a character may appear inside the quotes of an entity tag.

    etagc = %x21 / %x23-7E / obs-text
    """
    code = ord(char)
    return code == 0x21 or 0x23 <= code <= 0x7E or 0x80 <= code <= 0xFF


def _check_content(content: str, *, text: str, offset: int = 0) -> None:
    for i, char in enumerate(content):
        if not is_etagc(char):
            raise InvalidFormatError(
                f"invalid character {char!r} at position {offset + i}",
                text=text,
                position=offset + i,
            )


@dataclass(frozen=True, slots=True)
class EntityTag:
    """An HTTP entity tag.

    `tag` is the opaque content between the double quotes, without the
    `W/` marker. Equality (`==`) is structural: both the weak flag and the
    content must match. Use strong_eq() and weak_eq() for the HTTP
    comparison functions.
    """

    is_weak: bool
    tag: str

    @classmethod
    def strong(cls, tag: str) -> EntityTag:
        """Create a strong tag. The content is stored verbatim."""
        return cls(is_weak=False, tag=tag)

    @classmethod
    def weak(cls, tag: str) -> EntityTag:
        """Create a weak tag. The content is stored verbatim."""
        return cls(is_weak=True, tag=tag)

    @classmethod
    def checked_strong(cls, tag: str) -> EntityTag:
        """Create a strong tag, rejecting content outside the etagc range."""
        _check_content(tag, text=tag)
        return cls.strong(tag)

    @classmethod
    def checked_weak(cls, tag: str) -> EntityTag:
        """Create a weak tag, rejecting content outside the etagc range."""
        _check_content(tag, text=tag)
        return cls.weak(tag)

    @classmethod
    def parse(cls, text: str) -> EntityTag:
        """Parse an entity tag from its header representation.

        Format: `"<opaque>"` or `W/"<opaque>"`. The `W/` marker is
        case-sensitive, nothing may follow the closing quote and no
        surrounding whitespace is trimmed.

        Raises:
            InvalidFormatError: If the text does not match the grammar
        """
        try:
            return cls._parse(text)
        except InvalidFormatError as e:
            logger.debug("Rejected entity tag %r: %s", text, e)
            raise

    @classmethod
    def _parse(cls, text: str) -> EntityTag:
        if not text:
            raise InvalidFormatError("entity tag cannot be empty", text=text, position=0)

        is_weak = text.startswith(WEAK_PREFIX)
        start = len(WEAK_PREFIX) if is_weak else 0

        if start >= len(text) or text[start] != DQUOTE:
            raise InvalidFormatError(
                f"expected opening '\"' at position {start}",
                text=text,
                position=start,
            )

        end = text.find(DQUOTE, start + 1)
        if end == -1:
            raise InvalidFormatError(
                f"unterminated quote opened at position {start}",
                text=text,
                position=len(text),
            )

        content = text[start + 1 : end]
        _check_content(content, text=text, offset=start + 1)

        if end + 1 != len(text):
            raise InvalidFormatError(
                f"unexpected {text[end + 1]!r} after closing quote at position {end + 1}",
                text=text,
                position=end + 1,
            )

        return cls(is_weak=is_weak, tag=content)

    def to_string(self) -> str:
        """Format as `W/"<tag>"` for weak tags or `"<tag>"` for strong tags."""
        if self.is_weak:
            return f'{WEAK_PREFIX}"{self.tag}"'
        return f'"{self.tag}"'

    def __str__(self) -> str:
        return self.to_string()

    def strong_eq(self, other: EntityTag) -> bool:
        """Strong comparison: both tags strong and the content identical."""
        return not self.is_weak and not other.is_weak and self.tag == other.tag

    def weak_eq(self, other: EntityTag) -> bool:
        """Weak comparison: content identical, weak flags ignored."""
        return self.tag == other.tag

    def strong_ne(self, other: EntityTag) -> bool:
        return not self.strong_eq(other)

    def weak_ne(self, other: EntityTag) -> bool:
        return not self.weak_eq(other)


def parse_etag(text: str) -> EntityTag:
    """Parse an entity tag. Shorthand for EntityTag.parse()."""
    return EntityTag.parse(text)


__all__ = ["EntityTag", "is_etagc", "parse_etag"]
