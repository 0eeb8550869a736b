"""
Denylist filtering for newly generated labels.

Pre-existing hashtags never pass through here; only labels the engine is
about to add can be denied.
"""

import re
from collections.abc import Sequence
from dataclasses import dataclass, field
from enum import Enum


class DenylistMode(str, Enum):
    """How denylist entries are interpreted."""

    EXACT = "exact"
    GLOB = "glob"


@dataclass
class DenylistResult:
    """Labels partitioned by the denylist, both in input order."""

    kept: list[str] = field(default_factory=list)
    denied: list[str] = field(default_factory=list)


def glob_to_regex(pattern: str) -> re.Pattern[str]:
    """
    Compile a denylist glob into an anchored, case-insensitive regex.

    Only ``*`` (any run, including empty) and ``?`` (exactly one character)
    are special. Everything else, brackets included, is literal.

    Example:
        >>> bool(glob_to_regex("astro-*").fullmatch("astro-components"))
        True
        >>> bool(glob_to_regex("astro-*").fullmatch("astro"))
        False
    """
    parts: list[str] = []
    for char in pattern:
        if char == "*":
            parts.append(".*")
        elif char == "?":
            parts.append(".")
        else:
            parts.append(re.escape(char))
    return re.compile("".join(parts), re.IGNORECASE | re.DOTALL)


def filter_denylisted(
    candidates: Sequence[str],
    denylist: Sequence[str],
    mode: DenylistMode | str = DenylistMode.EXACT,
) -> DenylistResult:
    """
    Split candidate labels into kept and denied.

    Args:
        candidates: Normalized candidate labels
        denylist: Normalized labels (exact mode) or glob patterns (glob mode)
        mode: Matching mode

    Returns:
        DenylistResult with kept and denied labels
    """
    if not denylist:
        return DenylistResult(kept=list(candidates))

    result = DenylistResult()

    if DenylistMode(mode) == DenylistMode.EXACT:
        deny = set(denylist)
        for candidate in candidates:
            if candidate in deny:
                result.denied.append(candidate)
            else:
                result.kept.append(candidate)
        return result

    patterns = [glob_to_regex(entry) for entry in denylist]
    for candidate in candidates:
        if any(p.fullmatch(candidate) for p in patterns):
            result.denied.append(candidate)
        else:
            result.kept.append(candidate)
    return result
