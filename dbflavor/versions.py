from __future__ import annotations

import re
from typing import Sequence, Tuple

Version = Tuple[int, ...]

_SEGMENT = re.compile(r"[0-9]+")


class VersionParseError(ValueError):
    def __init__(self, version: str, reason: str):
        super().__init__(f"invalid version {version!r}: {reason}")
        self.version = version
        self.reason = reason


def parse_version(s: str) -> Version:
    """
    Parse a dotted-decimal string ("8.0.21") into a tuple of ints.

    Every segment must be a run of ASCII digits: empty segments, signs,
    whitespace and suffixes like "-log" are rejected.
    """
    if not isinstance(s, str):
        raise VersionParseError(repr(s), "not a string")
    out = []
    for seg in s.split("."):
        if not seg:
            raise VersionParseError(s, "empty segment")
        if not _SEGMENT.fullmatch(seg):
            raise VersionParseError(s, f"segment {seg!r} is not a non-negative integer")
        out.append(int(seg))
    return tuple(out)


def version_to_string(v: Sequence[int]) -> str:
    return ".".join(str(int(x)) for x in v)


def compare(a: Sequence[int], b: Sequence[int]) -> int:
    """
    Return -1, 0 or 1.

    Components are compared position by position. When one version is a
    prefix of the other the shorter one is smaller: missing components are
    absent, not zero, so 8.0 < 8.0.0 < 8.0.21.
    """
    for x, y in zip(a, b):
        if x != y:
            return 1 if x > y else -1
    if len(a) == len(b):
        return 0
    return 1 if len(a) > len(b) else -1


def is_at_least(a: Sequence[int], b: Sequence[int]) -> bool:
    return compare(a, b) >= 0
