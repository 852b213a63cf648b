"""
Per-tag handlers, grouped into the four tag families.

A handler receives the reader state and the text following the tag's
``:`` delimiter (empty for tags without a value). Handlers raise
``ValueError`` for malformed input only when ``state.strict`` is set; the
reader turns that into a ``ParseError`` for the current line.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import TYPE_CHECKING

from m3u8reader.attributes import parse_yes_no, to_float, to_int
from m3u8reader.items import (
    ByteRange,
    DiscontinuityItem,
    KeyItem,
    MapItem,
    MediaItem,
    PlaylistItem,
    SegmentItem,
    SessionDataItem,
    TimeItem,
)
from m3u8reader.protocol import Tag

if TYPE_CHECKING:
    from m3u8reader.reader import ReaderState

logger = logging.getLogger(__name__)

Handler = Callable[["ReaderState", str], None]


def parse_version(state: ReaderState, value: str) -> None:
    state.playlist.version = to_int(value, state.strict)


def parse_segment(state: ReaderState, value: str) -> None:
    # only the first comma separates the duration from the comment
    duration, _, comment = value.partition(",")
    item = SegmentItem(duration=to_float(duration, state.strict), comment=comment or None)
    _begin(state, item)
    state.master = False


def parse_discontinuity(state: ReaderState, value: str) -> None:
    state.push(DiscontinuityItem())


def parse_byterange(state: ReaderState, value: str) -> None:
    if not (state.open and isinstance(state.item, SegmentItem)):
        if state.strict:
            raise ValueError("byte range without a pending segment")
        logger.debug("Dropping byte range on line %d: no pending segment", state.lineno)
        return
    state.item.byterange = ByteRange.parse(value, state.strict)


def parse_key(state: ReaderState, value: str) -> None:
    state.push(KeyItem.parse(value, state.strict))


def parse_map(state: ReaderState, value: str) -> None:
    state.push(MapItem.parse(value, state.strict))


def parse_time(state: ReaderState, value: str) -> None:
    state.push(TimeItem.parse(value, state.strict))
    state.open = False


def parse_sequence(state: ReaderState, value: str) -> None:
    state.playlist.sequence = to_int(value, state.strict)


def parse_cache(state: ReaderState, value: str) -> None:
    state.playlist.cache = parse_yes_no(value)


def parse_target(state: ReaderState, value: str) -> None:
    state.playlist.target = to_int(value, state.strict)


def parse_iframes_only(state: ReaderState, value: str) -> None:
    state.playlist.iframes_only = True


def parse_playlist_type(state: ReaderState, value: str) -> None:
    state.playlist.type = value.strip()


def parse_media(state: ReaderState, value: str) -> None:
    state.push(MediaItem.parse(value, state.strict))
    state.open = False


def parse_session_data(state: ReaderState, value: str) -> None:
    state.push(SessionDataItem.parse(value, state.strict))


def parse_stream(state: ReaderState, value: str) -> None:
    _begin(state, PlaylistItem.parse(value, state.strict))
    state.master = True
    state.playlist.master = True


def parse_iframe_stream(state: ReaderState, value: str) -> None:
    state.push(PlaylistItem.parse(value, state.strict, iframe=True))
    state.item = None
    state.open = False
    state.master = True
    state.playlist.master = True


def _begin(state: ReaderState, item) -> None:
    if state.open and state.item is not None:
        logger.debug(
            "Discarding %s item never completed before line %d",
            state.item.kind,
            state.lineno,
        )
    state.item = item
    state.open = True


BASIC_TAGS: dict[Tag, Handler] = {Tag.VERSION: parse_version}

MEDIA_SEGMENT_TAGS: dict[Tag, Handler] = {
    Tag.EXTINF: parse_segment,
    Tag.DISCONTINUITY: parse_discontinuity,
    Tag.BYTERANGE: parse_byterange,
    Tag.KEY: parse_key,
    Tag.MAP: parse_map,
    Tag.PROGRAM_DATE_TIME: parse_time,
}

MEDIA_PLAYLIST_TAGS: dict[Tag, Handler] = {
    Tag.MEDIA_SEQUENCE: parse_sequence,
    Tag.ALLOW_CACHE: parse_cache,
    Tag.TARGETDURATION: parse_target,
    Tag.I_FRAMES_ONLY: parse_iframes_only,
    Tag.PLAYLIST_TYPE: parse_playlist_type,
}

MASTER_PLAYLIST_TAGS: dict[Tag, Handler] = {
    Tag.MEDIA: parse_media,
    Tag.SESSION_DATA: parse_session_data,
    Tag.STREAM_INF: parse_stream,
    Tag.I_FRAME_STREAM_INF: parse_iframe_stream,
}
