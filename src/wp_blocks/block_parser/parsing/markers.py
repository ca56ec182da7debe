from dataclasses import dataclass
from enum import Enum
from typing import Iterator, Optional, Tuple

from .patterns import (
    CLOSE_PREFIX, COMMENT_CLOSE, COMMENT_OPEN, OPEN_PREFIX, SELF_CLOSE
)
from ..errors import MarkerSyntaxError


class MarkerKind(Enum):
    OPEN = "open"
    SELF_CLOSING = "self_closing"
    CLOSE = "close"


@dataclass(frozen=True)
class Marker:
    """A single block delimiter comment found in content"""
    kind: MarkerKind
    name: str
    start: int
    end: int
    raw_attributes: Optional[str] = None

    @property
    def opens_block(self) -> bool:
        return self.kind is not MarkerKind.CLOSE


def read_marker(content: str, pos: int) -> Optional[Marker]:
    """Read the block marker starting at pos.

    Returns None when the comment at pos is an ordinary HTML comment and
    raises MarkerSyntaxError when it starts like a block marker but is
    not a complete one.
    """
    if not content.startswith(COMMENT_OPEN, pos):
        return None

    i = _skip_whitespace(content, pos + len(COMMENT_OPEN))

    if content.startswith(CLOSE_PREFIX, i):
        name, i = _read_name(content, i + len(CLOSE_PREFIX), pos)
        i = _skip_whitespace(content, i)
        if not content.startswith(COMMENT_CLOSE, i):
            raise MarkerSyntaxError(f"Unterminated closing marker for {name} at offset {pos}")
        return Marker(MarkerKind.CLOSE, name, pos, i + len(COMMENT_CLOSE))

    if not content.startswith(OPEN_PREFIX, i):
        return None

    name, i = _read_name(content, i + len(OPEN_PREFIX), pos)
    i = _skip_whitespace(content, i)

    raw_attributes = None
    if i < len(content) and content[i] == '{':
        payload_end = _find_payload_end(content, i)
        if payload_end < 0:
            raw_attributes, i = _recover_payload(content, i, name, pos)
        else:
            raw_attributes = content[i:payload_end]
            i = _skip_whitespace(content, payload_end)

    if content.startswith(SELF_CLOSE, i):
        return Marker(MarkerKind.SELF_CLOSING, name, pos, i + len(SELF_CLOSE), raw_attributes)
    if content.startswith(COMMENT_CLOSE, i):
        return Marker(MarkerKind.OPEN, name, pos, i + len(COMMENT_CLOSE), raw_attributes)

    raise MarkerSyntaxError(f"Unterminated opening marker for {name} at offset {pos}")


def iter_markers(content: str, start: int = 0) -> Iterator[Marker]:
    """Yield every well-formed marker at or after start, skipping broken ones"""
    pos = content.find(COMMENT_OPEN, start)
    while pos != -1:
        try:
            marker = read_marker(content, pos)
        except MarkerSyntaxError:
            marker = None
        if marker is not None:
            yield marker
            pos = content.find(COMMENT_OPEN, marker.end)
        else:
            pos = content.find(COMMENT_OPEN, pos + len(COMMENT_OPEN))


def _skip_whitespace(content: str, i: int) -> int:
    while i < len(content) and content[i].isspace():
        i += 1
    return i


def _read_name(content: str, i: int, marker_start: int) -> Tuple[str, int]:
    """Read a block name token; any text up to whitespace, payload or terminator"""
    start = i
    while i < len(content):
        if content[i].isspace() or content[i] == '{':
            break
        if content.startswith(COMMENT_CLOSE, i) or content.startswith(SELF_CLOSE, i):
            break
        i += 1

    if i == start:
        raise MarkerSyntaxError(f"Missing block name at offset {marker_start}")
    return content[start:i], i


def _recover_payload(content: str, i: int, name: str, marker_start: int) -> Tuple[str, int]:
    """Take an unbalanced payload up to the first } before the comment terminator.

    Returns (raw payload, terminator index). The marker survives and the
    attribute decoder reports the broken payload.
    """
    terminator = content.find(COMMENT_CLOSE, i)
    if terminator < 0:
        raise MarkerSyntaxError(f"Unterminated opening marker for {name} at offset {marker_start}")
    if content.startswith(SELF_CLOSE, terminator - 1):
        terminator -= 1

    brace = content.find('}', i, terminator)
    payload_end = brace + 1 if brace >= 0 else terminator
    return content[i:payload_end].rstrip(), terminator


def _find_payload_end(content: str, i: int) -> int:
    """Find the index just past the balanced {...} span starting at i"""
    depth = 0
    in_string = False
    escape_next = False

    while i < len(content):
        char = content[i]

        if escape_next:
            escape_next = False
        elif in_string:
            if char == '\\':
                escape_next = True
            elif char == '"':
                in_string = False
        elif char == '"':
            in_string = True
        elif char == '{':
            depth += 1
        elif char == '}':
            depth -= 1
            if depth == 0:
                return i + 1
        elif content.startswith(COMMENT_CLOSE, i):
            # Comment ended before the payload did
            return -1
        i += 1

    return -1
