"""Keyed hashing used to derive entity tags from values.

Tags are hashed with BLAKE2b in keyed mode. The key is the hash policy:
a fixed key gives tags that are stable across processes, a random key gives
tags that only hold for the lifetime of the hasher but resist crafted
collisions.
"""

from __future__ import annotations

import hashlib
import json
import logging
import os
from dataclasses import dataclass, field
from typing import Any

logger = logging.getLogger(__name__)

DIGEST_SIZE = 8  # bytes, rendered as 16 hex digits
MAX_KEY_SIZE = hashlib.blake2b.MAX_KEY_SIZE
RANDOM_KEY_SIZE = 16

_DEFAULT_KEY = b"etag/v1"


@dataclass(frozen=True, slots=True)
class TagHasher:
    """A keyed BLAKE2b hash function for tag derivation.

    `key` may be given as str, in which case it is UTF-8 encoded.
    """

    key: bytes = field(default=_DEFAULT_KEY, repr=False)
    randomized: bool = False

    def __post_init__(self) -> None:
        key: bytes | str = self.key
        if isinstance(key, str):
            key = key.encode("utf-8")
            object.__setattr__(self, "key", key)
        if len(key) > MAX_KEY_SIZE:
            raise ValueError(f"key must be at most {MAX_KEY_SIZE} bytes")

    def hexdigest(self, data: bytes) -> str:
        """Hash bytes to a lowercase hex string of DIGEST_SIZE bytes."""
        return hashlib.blake2b(data, digest_size=DIGEST_SIZE, key=self.key).hexdigest()


def _dumps(value: Any) -> str:
    return json.dumps(value, sort_keys=True, separators=(",", ":"), default=str)


def _normalize(value: Any) -> Any:
    """Rewrite a value into JSON data whose encoding is independent of
    iteration order.

    Dicts with non-string keys become lists of `[key, value]` pairs and sets
    become lists, both ordered by the encoding of their members.
    """
    if isinstance(value, dict):
        if all(isinstance(k, str) for k in value):
            return {k: _normalize(v) for k, v in value.items()}
        pairs = [[_normalize(k), _normalize(v)] for k, v in value.items()]
        return sorted(pairs, key=lambda pair: _dumps(pair[0]))
    if isinstance(value, (set, frozenset)):
        return sorted((_normalize(v) for v in value), key=_dumps)
    if isinstance(value, (list, tuple)):
        return [_normalize(v) for v in value]
    return value


def canonical_bytes(value: Any) -> bytes:
    """Encode a value to the bytes that get measured and hashed.

    bytes-like values are used as-is, strings are UTF-8 encoded and
    everything else goes through compact JSON with sorted keys. Sets and
    dicts with non-string keys are ordered by content, so the result does
    not depend on the process hash seed.
    """
    if isinstance(value, bytes):
        return value
    if isinstance(value, (bytearray, memoryview)):
        return bytes(value)
    if isinstance(value, str):
        return value.encode("utf-8")
    return _dumps(_normalize(value)).encode("utf-8")


def create_hasher(
    *,
    key: bytes | str | None = None,
    randomized: bool = False,
) -> TagHasher:
    """Create a tag hasher.

    Args:
        key: Explicit hash key (at most 64 bytes)
        randomized: Use a fresh random key instead of the fixed default

    Returns:
        TagHasher instance
    """
    if key is not None and randomized:
        raise ValueError("key and randomized are mutually exclusive")

    if randomized:
        logger.debug("Creating randomized tag hasher")
        return TagHasher(key=os.urandom(RANDOM_KEY_SIZE), randomized=True)

    if key is None:
        return _DEFAULT_HASHER

    return TagHasher(key=key)  # type: ignore[arg-type]


def default_hasher() -> TagHasher:
    """Return the fixed-key hasher used when none is given."""
    return _DEFAULT_HASHER


_DEFAULT_HASHER = TagHasher()


__all__ = [
    "DIGEST_SIZE",
    "TagHasher",
    "canonical_bytes",
    "create_hasher",
    "default_hasher",
]
