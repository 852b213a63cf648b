"""
The tag registry maps each recognized tag to its handler.

A line matches a tag only when the tag literal is followed by ``:`` or by the
end of the line, so ``#EXT-X-MEDIA-SEQUENCE:3`` never resolves to
``#EXT-X-MEDIA``.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from types import MappingProxyType

from m3u8reader.handlers import (
    BASIC_TAGS,
    MASTER_PLAYLIST_TAGS,
    MEDIA_PLAYLIST_TAGS,
    MEDIA_SEGMENT_TAGS,
    Handler,
)
from m3u8reader.protocol import Tag


class TagRegistry(Mapping[Tag, Handler]):
    """
    Read-only union of tag families.

    Families are merged in the order given; a tag present in more than one
    family resolves to the handler of the last one.
    """

    def __init__(self, *families: Mapping[Tag, Handler]):
        merged: dict[Tag, Handler] = {}
        for family in families:
            merged.update(family)
        self._handlers = MappingProxyType(merged)

    def __getitem__(self, tag: Tag) -> Handler:
        return self._handlers[tag]

    def __iter__(self) -> Iterator[Tag]:
        return iter(self._handlers)

    def __len__(self) -> int:
        return len(self._handlers)

    def match(self, line: str) -> tuple[Tag, str] | None:
        """
        Resolve the tag a line starts with.

        Args:
            line: One playlist line, with or without its line ending.

        Returns:
            The matched tag and the text after its ``:`` delimiter (line
            ending removed), or None if the line is not a registered tag.
        """
        if not line.startswith("#EXT"):
            return None
        name, _, value = line.rstrip("\r\n").partition(":")
        try:
            tag = Tag(name.rstrip())
        except ValueError:
            return None
        if tag not in self._handlers:
            return None
        return tag, value


DEFAULT_REGISTRY = TagRegistry(
    BASIC_TAGS, MEDIA_SEGMENT_TAGS, MEDIA_PLAYLIST_TAGS, MASTER_PLAYLIST_TAGS
)
