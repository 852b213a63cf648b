from __future__ import annotations

from dataclasses import dataclass, field

from m3u8reader.items import Item, PlaylistItem, SegmentItem


@dataclass
class Playlist:
    """
    The result of reading one M3U8 document.

    ``items`` holds every parsed entry in source order. ``cache`` is ``None``
    unless the playlist says ``YES`` or ``NO``. ``master`` is set by the
    reader when a variant stream tag is seen; when it was never set,
    ``is_master`` is true as soon as the playlist holds any variant stream.
    """

    version: int | None = None
    sequence: int = 0
    target: int = 10
    cache: bool | None = None
    type: str | None = None
    iframes_only: bool = False
    master: bool | None = None
    items: list[Item] = field(default_factory=list)

    @property
    def is_master(self) -> bool:
        if self.master is not None:
            return self.master
        return bool(self.playlists)

    @property
    def segments(self) -> list[SegmentItem]:
        return [item for item in self.items if isinstance(item, SegmentItem)]

    @property
    def playlists(self) -> list[PlaylistItem]:
        return [item for item in self.items if isinstance(item, PlaylistItem)]

    @property
    def duration(self) -> float:
        return sum(segment.duration for segment in self.segments)
