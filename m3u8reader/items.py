"""
Playlist item variants.

Each item carries a class-level ``kind`` tag. Items built from attribute-list
tags expose a ``parse`` classmethod receiving the text after the ``TAG:``
prefix.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import ClassVar

from m3u8reader.attributes import (
    cast_date_time,
    parse_attribute_list,
    parse_yes_no,
    to_float,
    to_int,
)


@dataclass
class ByteRange:
    """A ``<length>[@<offset>]`` sub-range of a resource."""

    length: int
    start: int | None = None

    @classmethod
    def parse(cls, value: str, strict: bool = False) -> ByteRange:
        length, sep, start = value.strip().partition("@")
        return cls(
            length=to_int(length, strict),
            start=to_int(start, strict) if sep else None,
        )

    def __str__(self) -> str:
        if self.start is None:
            return str(self.length)
        return f"{self.length}@{self.start}"


@dataclass
class SegmentItem:
    kind: ClassVar[str] = "segment"

    duration: float
    comment: str | None = None
    byterange: ByteRange | None = None
    segment: str | None = None


@dataclass
class DiscontinuityItem:
    kind: ClassVar[str] = "discontinuity"


@dataclass
class KeyItem:
    kind: ClassVar[str] = "key"

    method: str | None = None
    uri: str | None = None
    iv: str | None = None
    key_format: str | None = None
    key_format_versions: str | None = None

    @classmethod
    def parse(cls, value: str, strict: bool = False) -> KeyItem:
        attributes = parse_attribute_list(value, strict)
        return cls(
            method=attributes.get("METHOD"),
            uri=attributes.get("URI"),
            iv=attributes.get("IV"),
            key_format=attributes.get("KEYFORMAT"),
            key_format_versions=attributes.get("KEYFORMATVERSIONS"),
        )


@dataclass
class MapItem:
    kind: ClassVar[str] = "map"

    uri: str | None = None
    byterange: ByteRange | None = None

    @classmethod
    def parse(cls, value: str, strict: bool = False) -> MapItem:
        attributes = parse_attribute_list(value, strict)
        byterange = attributes.get("BYTERANGE")
        return cls(
            uri=attributes.get("URI"),
            byterange=ByteRange.parse(byterange, strict) if byterange else None,
        )


@dataclass
class SessionDataItem:
    kind: ClassVar[str] = "session_data"

    data_id: str | None = None
    value: str | None = None
    uri: str | None = None
    language: str | None = None

    @classmethod
    def parse(cls, value: str, strict: bool = False) -> SessionDataItem:
        attributes = parse_attribute_list(value, strict)
        return cls(
            data_id=attributes.get("DATA-ID"),
            value=attributes.get("VALUE"),
            uri=attributes.get("URI"),
            language=attributes.get("LANGUAGE"),
        )


@dataclass
class MediaItem:
    """An ``#EXT-X-MEDIA`` rendition. Its URI, if any, is an attribute."""

    kind: ClassVar[str] = "media"

    type: str | None = None
    group_id: str | None = None
    language: str | None = None
    assoc_language: str | None = None
    name: str | None = None
    autoselect: bool | None = None
    default: bool | None = None
    forced: bool | None = None
    instream_id: str | None = None
    characteristics: str | None = None
    channels: str | None = None
    uri: str | None = None

    @classmethod
    def parse(cls, value: str, strict: bool = False) -> MediaItem:
        attributes = parse_attribute_list(value, strict)
        return cls(
            type=attributes.get("TYPE"),
            group_id=attributes.get("GROUP-ID"),
            language=attributes.get("LANGUAGE"),
            assoc_language=attributes.get("ASSOC-LANGUAGE"),
            name=attributes.get("NAME"),
            autoselect=parse_yes_no(attributes.get("AUTOSELECT")),
            default=parse_yes_no(attributes.get("DEFAULT")),
            forced=parse_yes_no(attributes.get("FORCED")),
            instream_id=attributes.get("INSTREAM-ID"),
            characteristics=attributes.get("CHARACTERISTICS"),
            channels=attributes.get("CHANNELS"),
            uri=attributes.get("URI"),
        )


@dataclass
class TimeItem:
    kind: ClassVar[str] = "time"

    time: datetime | None = None

    @classmethod
    def parse(cls, value: str, strict: bool = False) -> TimeItem:
        return cls(time=cast_date_time(value, strict))


@dataclass
class PlaylistItem:
    """
    A variant stream of a master playlist.

    ``#EXT-X-STREAM-INF`` items receive their ``uri`` from the following
    line. ``#EXT-X-I-FRAME-STREAM-INF`` items carry it as an attribute and
    have ``iframe`` set.
    """

    program_id: int | None = None
    bandwidth: int | None = None
    average_bandwidth: int | None = None
    codecs: str | None = None
    width: int | None = None
    height: int | None = None
    frame_rate: float | None = None
    video: str | None = None
    audio: str | None = None
    subtitles: str | None = None
    closed_captions: str | None = None
    hdcp_level: str | None = None
    name: str | None = None
    uri: str | None = None
    iframe: bool = False

    @property
    def kind(self) -> str:
        return "iframe_stream" if self.iframe else "stream"

    @property
    def resolution(self) -> str | None:
        if self.width is None:
            return None
        return f"{self.width}x{self.height}"

    @classmethod
    def parse(
        cls, value: str, strict: bool = False, iframe: bool = False
    ) -> PlaylistItem:
        attributes = parse_attribute_list(value, strict)
        width = height = None
        resolution = attributes.get("RESOLUTION")
        if resolution:
            width_text, sep, height_text = resolution.lower().partition("x")
            if strict and not sep:
                raise ValueError(f"invalid resolution: {resolution!r}")
            width = to_int(width_text, strict)
            height = to_int(height_text, strict) if sep else None
        return cls(
            program_id=to_int(attributes.get("PROGRAM-ID"), strict),
            bandwidth=to_int(attributes.get("BANDWIDTH"), strict),
            average_bandwidth=to_int(attributes.get("AVERAGE-BANDWIDTH"), strict),
            codecs=attributes.get("CODECS"),
            width=width,
            height=height,
            frame_rate=to_float(attributes.get("FRAME-RATE"), strict),
            video=attributes.get("VIDEO"),
            audio=attributes.get("AUDIO"),
            subtitles=attributes.get("SUBTITLES"),
            closed_captions=attributes.get("CLOSED-CAPTIONS"),
            hdcp_level=attributes.get("HDCP-LEVEL"),
            name=attributes.get("NAME"),
            uri=attributes.get("URI"),
            iframe=iframe,
        )


Item = (
    SegmentItem
    | DiscontinuityItem
    | KeyItem
    | MapItem
    | SessionDataItem
    | MediaItem
    | TimeItem
    | PlaylistItem
)
