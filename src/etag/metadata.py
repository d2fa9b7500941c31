"""Entity tags from file metadata.

Tags take the form `<modified>-<size>` and only need stat()-level
information, never the file content. Importing this module fails with
ImportError on platforms whose os module has no stat facility.
"""

from __future__ import annotations

from os import stat_result

from etag.entity_tag import EntityTag

_NANOS_PER_SECOND = 1_000_000_000


def from_file_meta(modified: int | float | str, size: int) -> EntityTag:
    """Derive a strong tag `<modified>-<size>` from already-read metadata.

    Raises:
        ValueError: If size is not a non-negative int
        InvalidFormatError: If modified renders to characters outside etagc
    """
    if isinstance(size, bool) or not isinstance(size, int):
        raise ValueError(f"size must be an int, got {type(size).__name__}")
    if size < 0:
        raise ValueError(f"size must not be negative: {size}")
    return EntityTag.checked_strong(f"{modified}-{size}")


def from_stat(stat: stat_result) -> EntityTag:
    """Derive a strong tag from an os.stat() result.

    The modification time is written as `<seconds>.<nanoseconds>`.
    """
    seconds, nanos = divmod(stat.st_mtime_ns, _NANOS_PER_SECOND)
    return from_file_meta(f"{seconds}.{nanos}", stat.st_size)


__all__ = ["from_file_meta", "from_stat"]
