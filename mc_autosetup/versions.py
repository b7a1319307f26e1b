"""
Version string rules shared by the loader resolver and the first-run step.

The gates compare on the *second* dot segment ("1.7.10" -> 7) and the
third as a sub-version, defaulting to 0. ``version_ordinal`` is the single
place that knows this.
"""
from __future__ import annotations
import re
from typing import List, Tuple
from .errors import VersionParseError

_VALID = re.compile(r"^[0-9.]+$")

# (ordinal, sub) minimums
MIN_SUPPORTED = (2, 5)
MIN_EULA = (7, 10)


def is_valid_version_string(version: str) -> bool:
    return bool(_VALID.match(version))


def parse_version(version: str) -> List[int]:
    try:
        return [int(part) for part in version.split(".")]
    except ValueError as e:
        raise VersionParseError(f"Cannot parse version {version!r}") from e


def version_ordinal(version: str) -> Tuple[int, int]:
    segments = parse_version(version)
    if len(segments) < 2:
        raise VersionParseError(f"Version {version!r} has no ordinal segment")
    sub = segments[2] if len(segments) > 2 else 0
    return segments[1], sub


def _at_least(version: str, minimum: Tuple[int, int]) -> bool:
    ordinal, sub = version_ordinal(version)
    return not (ordinal < minimum[0] or (ordinal == minimum[0] and sub < minimum[1]))


def is_supported_version(version: str) -> bool:
    return _at_least(version, MIN_SUPPORTED)


def has_eula(version: str) -> bool:
    return _at_least(version, MIN_EULA)
