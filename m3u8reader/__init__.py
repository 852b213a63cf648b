"""Read HTTP Live Streaming (M3U8) playlists into an ordered item model."""

from __future__ import annotations

from collections.abc import Iterable
from os import PathLike

from m3u8reader.items import (
    ByteRange,
    DiscontinuityItem,
    Item,
    KeyItem,
    MapItem,
    MediaItem,
    PlaylistItem,
    SegmentItem,
    SessionDataItem,
    TimeItem,
)
from m3u8reader.playlist import Playlist
from m3u8reader.protocol import Tag
from m3u8reader.reader import CustomTagsParser, ParseError, Reader, ReaderState
from m3u8reader.registry import DEFAULT_REGISTRY, TagRegistry

__all__ = (
    "ByteRange",
    "DEFAULT_REGISTRY",
    "DiscontinuityItem",
    "Item",
    "KeyItem",
    "MapItem",
    "MediaItem",
    "ParseError",
    "Playlist",
    "PlaylistItem",
    "Reader",
    "ReaderState",
    "SegmentItem",
    "SessionDataItem",
    "Tag",
    "TagRegistry",
    "TimeItem",
    "load",
    "loads",
    "read",
)


def read(
    lines: Iterable[str],
    strict: bool = False,
    custom_tags_parser: CustomTagsParser | None = None,
) -> Playlist:
    """Parse an iterable of already decoded playlist lines."""
    return Reader(strict=strict, custom_tags_parser=custom_tags_parser).read(lines)


def loads(
    content: str,
    strict: bool = False,
    custom_tags_parser: CustomTagsParser | None = None,
) -> Playlist:
    """
    Parse playlist text.

    Args:
        content: The whole M3U8 document as a string.
        strict: Raise ``ParseError`` instead of coercing malformed values.
        custom_tags_parser: Callback for tags the reader does not recognize.

    Returns:
        The parsed ``Playlist``.
    """
    return read(content.splitlines(), strict, custom_tags_parser)


def load(
    path: str | PathLike,
    encoding: str = "utf-8",
    strict: bool = False,
    custom_tags_parser: CustomTagsParser | None = None,
) -> Playlist:
    """Parse the playlist file at ``path``."""
    with open(path, encoding=encoding) as file:
        return read(file, strict, custom_tags_parser)
