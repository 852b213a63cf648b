"""Tag literals recognized by the reader."""

from __future__ import annotations

import enum


class Tag(str, enum.Enum):
    VERSION = "#EXT-X-VERSION"

    # media segment tags
    EXTINF = "#EXTINF"
    DISCONTINUITY = "#EXT-X-DISCONTINUITY"
    BYTERANGE = "#EXT-X-BYTERANGE"
    KEY = "#EXT-X-KEY"
    MAP = "#EXT-X-MAP"
    PROGRAM_DATE_TIME = "#EXT-X-PROGRAM-DATE-TIME"

    # media playlist tags
    MEDIA_SEQUENCE = "#EXT-X-MEDIA-SEQUENCE"
    ALLOW_CACHE = "#EXT-X-ALLOW-CACHE"
    TARGETDURATION = "#EXT-X-TARGETDURATION"
    I_FRAMES_ONLY = "#EXT-X-I-FRAMES-ONLY"
    PLAYLIST_TYPE = "#EXT-X-PLAYLIST-TYPE"

    # master playlist tags
    MEDIA = "#EXT-X-MEDIA"
    SESSION_DATA = "#EXT-X-SESSION-DATA"
    STREAM_INF = "#EXT-X-STREAM-INF"
    I_FRAME_STREAM_INF = "#EXT-X-I-FRAME-STREAM-INF"

    def __str__(self) -> str:
        return self.value

