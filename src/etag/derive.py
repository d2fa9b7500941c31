"""Default entity tags for values without a natural tag."""

from __future__ import annotations

from typing import Any

from etag.entity_tag import EntityTag
from etag.hashing import TagHasher, canonical_bytes, default_hasher


def from_value(value: Any, *, hasher: TagHasher | None = None) -> EntityTag:
    """Derive a strong tag of the form `<length>-<hash>`.

    `length` is the decimal size of the value's canonical bytes and `hash`
    their keyed BLAKE2b digest in hex. With the default hasher the result
    is stable across processes.

    Example:
        from_value("string")  # EntityTag(is_weak=False, tag='6-...')
    """
    data = canonical_bytes(value)
    digest = (hasher or default_hasher()).hexdigest(data)
    return EntityTag.strong(f"{len(data)}-{digest}")


__all__ = ["from_value"]
