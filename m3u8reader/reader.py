"""
The line-by-line parsing state machine.

``Reader.read`` walks the lines once. A line naming a registered tag is
handed to that tag's handler. Any other non-blank, non-``#`` line completes
the pending item when one is open: it becomes the ``uri`` of a variant stream
or the ``segment`` of a media segment. Everything else is dropped.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from dataclasses import dataclass

from m3u8reader.items import Item
from m3u8reader.playlist import Playlist
from m3u8reader.registry import DEFAULT_REGISTRY, TagRegistry

logger = logging.getLogger(__name__)


class ParseError(Exception):
    def __init__(self, lineno: int, line: str, reason: str | None = None):
        super().__init__(lineno, line, reason)
        self.lineno = lineno
        self.line = line
        self.reason = reason

    def __str__(self) -> str:
        message = f"Syntax error in manifest on line {self.lineno}: {self.line}"
        if self.reason:
            message = f"{message} ({self.reason})"
        return message


@dataclass
class ReaderState:
    """Everything one ``read`` call mutates. Never shared between calls."""

    playlist: Playlist
    strict: bool = False
    item: Item | None = None
    open: bool = False
    master: bool = False
    lineno: int = 0

    def push(self, item: Item) -> None:
        self.playlist.items.append(item)


CustomTagsParser = Callable[[str, int, Playlist, ReaderState], bool | None]


class Reader:
    """
    Reads M3U8 lines into a ``Playlist``.

    Args:
        registry: Tags to recognize and their handlers.
        strict: Raise ``ParseError`` on malformed values, on byte ranges
            without a pending segment and on stray URI lines instead of
            coercing or dropping them.
        custom_tags_parser: Called as ``(line, lineno, playlist, state)`` for
            every ``#`` line the registry does not recognize. A truthy return
            marks the line as handled.
    """

    def __init__(
        self,
        registry: TagRegistry = DEFAULT_REGISTRY,
        strict: bool = False,
        custom_tags_parser: CustomTagsParser | None = None,
    ):
        self.registry = registry
        self.strict = strict
        self.custom_tags_parser = custom_tags_parser

    def read(self, lines: Iterable[str] | str) -> Playlist:
        if isinstance(lines, str):
            lines = lines.splitlines()
        state = ReaderState(playlist=Playlist(), strict=self.strict)
        for lineno, line in enumerate(lines, 1):
            state.lineno = lineno
            self.parse_line(state, line)
        if state.open:
            logger.debug("Playlist ended with an incomplete %s item", state.item.kind)
        return state.playlist

    def parse_line(self, state: ReaderState, line: str) -> None:
        match = self.registry.match(line)
        if match is not None:
            tag, value = match
            try:
                self.registry[tag](state, value)
            except ValueError as exc:
                raise ParseError(state.lineno, line.rstrip("\r\n"), str(exc)) from exc
            return

        value = line.rstrip("\r\n")
        if not value.strip():
            return
        if value.startswith("#"):
            handled = self.custom_tags_parser is not None and self.custom_tags_parser(
                value, state.lineno, state.playlist, state
            )
            if not handled:
                logger.debug("Ignoring line %d: %s", state.lineno, value)
            return
        if state.item is not None and state.open:
            self.parse_next_line(state, value)
        elif self.strict:
            raise ParseError(state.lineno, value, "no tag awaiting a URI")
        else:
            logger.debug("Dropping line %d without a pending item: %s", state.lineno, value)

    def parse_next_line(self, state: ReaderState, value: str) -> None:
        if state.master:
            state.item.uri = value
        else:
            state.item.segment = value
        state.push(state.item)
        state.open = False
