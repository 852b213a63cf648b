"""
Attribute-list grammar and scalar coercion helpers.

Coercion is permissive by default: a malformed number keeps its leading
numeric prefix (or becomes zero), a malformed date becomes ``None`` and a
YES/NO flag with any other value stays unset. Passing ``strict=True`` makes
the numeric and date helpers raise ``ValueError`` instead.
"""

from __future__ import annotations

import logging
import re
from datetime import datetime

logger = logging.getLogger(__name__)

ATTRIBUTELISTPATTERN = re.compile(r"""((?:[^,"']|"[^"]*"|'[^']*')+)""")

_INT_PREFIX = re.compile(r"\s*[+-]?\d+")
_FLOAT_PREFIX = re.compile(r"\s*[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?")


def remove_quotes(value: str) -> str:
    quotes = ('"', "'")
    if len(value) >= 2 and value.startswith(quotes) and value.endswith(quotes):
        return value[1:-1]
    return value


def parse_attribute_list(value: str, strict: bool = False) -> dict[str, str]:
    """
    Split a ``KEY=VALUE,KEY="quoted, value"`` attribute list.

    Commas inside quotes do not separate attributes. Keys are kept exactly as
    written; quotes around values are removed. A bare token without ``=`` is
    stored under the empty key. An unterminated quote runs to the end of the
    line, or raises ``ValueError`` when ``strict`` is set.

    Args:
        value: The text after the ``TAG:`` prefix.
        strict: Reject unterminated quotes instead of closing them.

    Returns:
        A dict of attribute names to string values, in source order.
    """
    value = value.strip()
    parts = ATTRIBUTELISTPATTERN.split(value)
    for part in parts[0::2]:
        # only separators remain between matches unless a quote is left open
        stray = part.strip(",")
        if stray:
            if strict:
                raise ValueError(f"unterminated quote in attribute list: {value!r}")
            logger.warning("Closing unterminated quote in attribute list %r", value)
            return parse_attribute_list(value + stray[0])
    attributes = {}
    for param in parts[1::2]:
        name, sep, raw = param.partition("=")
        if not sep:
            name, raw = "", name
        attributes[name.strip()] = remove_quotes(raw.strip())
    return attributes


def to_int(value: str | None, strict: bool = False) -> int | None:
    """Coerce ``value`` to an int, returning ``None`` only for ``None``."""
    if value is None:
        return None
    try:
        return int(value.strip())
    except ValueError:
        if strict:
            raise
    match = _INT_PREFIX.match(value)
    try:
        result = int(match.group()) if match else 0
    except ValueError:
        # digit strings past the interpreter's conversion limit
        result = 0
    logger.warning("Coerced malformed integer %r to %d", value, result)
    return result


def to_float(value: str | None, strict: bool = False) -> float | None:
    """Coerce ``value`` to a float, returning ``None`` only for ``None``."""
    if value is None:
        return None
    try:
        return float(value.strip())
    except ValueError:
        if strict:
            raise
    match = _FLOAT_PREFIX.match(value)
    result = float(match.group()) if match else 0.0
    logger.warning("Coerced malformed number %r to %s", value, result)
    return result


def parse_yes_no(value: str | None) -> bool | None:
    if value is None:
        return None
    value = value.strip()
    if value == "YES":
        return True
    if value == "NO":
        return False
    return None


def cast_date_time(value: str, strict: bool = False) -> datetime | None:
    try:
        return datetime.fromisoformat(value.strip())
    except ValueError:
        if strict:
            raise
    logger.warning("Ignoring malformed date-time %r", value)
    return None
