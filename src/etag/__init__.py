"""etag - HTTP entity tag parsing, formatting and comparison."""

from contextlib import suppress

from etag.derive import from_value
from etag.entity_tag import EntityTag, parse_etag
from etag.errors import InvalidFormatError, ParseError
from etag.hashing import TagHasher, create_hasher, default_hasher

FILE_METADATA_SUPPORTED = False

# Optional capability - only available where the platform exposes os.stat_result
with suppress(ImportError):
    from etag.metadata import from_file_meta, from_stat

    FILE_METADATA_SUPPORTED = True

__version__ = "0.1.0"

__all__ = [
    "FILE_METADATA_SUPPORTED",
    "EntityTag",
    "InvalidFormatError",
    "ParseError",
    "TagHasher",
    "create_hasher",
    "default_hasher",
    "from_value",
    "parse_etag",
]

if FILE_METADATA_SUPPORTED:
    __all__ += ["from_file_meta", "from_stat"]
