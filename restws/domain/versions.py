"""Platform version matching for search handler registration.

Patterns: exact ("1.9.0"), wildcard ("1.9.*", "*"), or inclusive range
("1.8.0 - 1.9.*"). Versions compare numerically segment by segment; missing
segments are zero and non-numeric qualifiers ("-SNAPSHOT") are ignored.
"""

import re
from collections.abc import Iterable

_LEADING_DIGITS_RE = re.compile(r"^(\d+)")
_RANGE_SEP = " - "
WILDCARD = "*"


def parse_version(version: str) -> tuple[int, ...]:
    """Return the numeric segments of version, stopping at the first non-numeric one.

    Args:
        version: Version string such as "1.9.4" or "2.0.0-SNAPSHOT".

    Returns:
        Tuple of ints, e.g. (1, 9, 4). Empty if version has no leading number.
    """
    segments: list[int] = []
    for part in version.strip().split("."):
        match = _LEADING_DIGITS_RE.match(part)
        if not match:
            break
        segments.append(int(match.group(1)))
        if match.end() != len(part):
            break
    return tuple(segments)


def compare_versions(left: str, right: str) -> int:
    """Return -1, 0 or 1 as left is lower than, equal to, or higher than right."""
    a, b = parse_version(left), parse_version(right)
    width = max(len(a), len(b))
    a += (0,) * (width - len(a))
    b += (0,) * (width - len(b))
    return (a > b) - (a < b)


def _wildcard_prefix(pattern: str) -> tuple[int, ...]:
    return parse_version(pattern.split(WILDCARD, 1)[0].rstrip("."))


def _below_upper_bound(version: str, high: str) -> bool:
    if WILDCARD not in high:
        return compare_versions(version, high) <= 0
    prefix = _wildcard_prefix(high)
    return parse_version(version)[: len(prefix)] <= prefix


def matches_version(version: str, pattern: str) -> bool:
    """Return whether version satisfies a single pattern."""
    pattern = pattern.strip()
    if _RANGE_SEP in pattern:
        low, high = (p.strip() for p in pattern.split(_RANGE_SEP, 1))
        low = low.replace(WILDCARD, "0")
        return compare_versions(version, low) >= 0 and _below_upper_bound(version, high)
    if WILDCARD in pattern:
        prefix = _wildcard_prefix(pattern)
        return parse_version(version)[: len(prefix)] == prefix
    return compare_versions(version, pattern) == 0


def is_version_supported(version: str, patterns: Iterable[str]) -> bool:
    """Return True if version satisfies any of the patterns.

    Args:
        version: Running platform version.
        patterns: Supported version patterns declared by a search config.
    """
    return any(matches_version(version, p) for p in patterns)
