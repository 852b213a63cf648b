from __future__ import annotations

import argparse
import logging
import sys

from m3u8reader import ParseError, Playlist, load


def describe(playlist: Playlist) -> list[str]:
    lines = [
        f"kind: {'master' if playlist.is_master else 'media'}",
        f"version: {playlist.version}",
        f"sequence: {playlist.sequence}",
        f"target: {playlist.target}",
        f"cache: {playlist.cache}",
        f"type: {playlist.type}",
        f"iframes_only: {playlist.iframes_only}",
    ]
    for item in playlist.items:
        lines.append(f"{item.kind}: {item!r}")
    if playlist.segments:
        lines.append(f"duration: {playlist.duration:.3f}")
    return lines


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="m3u8reader", description="Parse an M3U8 playlist"
    )
    parser.add_argument("source", help="Path to the playlist file")
    parser.add_argument("--encoding", default="utf-8")
    parser.add_argument(
        "--strict", action="store_true", help="Fail on malformed values"
    )
    parser.add_argument("-v", "--verbose", action="store_true")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        playlist = load(args.source, encoding=args.encoding, strict=args.strict)
    except (OSError, UnicodeDecodeError, ParseError) as exc:
        print(f"{args.source}: {exc}", file=sys.stderr)
        return 1

    for line in describe(playlist):
        print(line)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
