"""Mutual exclusivity between overlapping formats.

Only HDR formats are resolved: a DV release with an HDR10 base layer would
otherwise score for Dolby Vision, HDR10 and generic HDR at once.
"""

from __future__ import annotations

import logging

from reelscore.shared.enums import FormatCategory
from reelscore.shared.models import MatchedFormat, ScoringProfile

logger = logging.getLogger(__name__)

# Most specific first.
HDR_PRIORITY: tuple[str, ...] = (
    "hdr-dolby-vision",
    "hdr-dolby-vision-no-fallback",
    "hdr-hdr10plus",
    "hdr-hdr10",
    "hdr10-missing",
    "hdr-generic",
    "hdr-hlg",
    "hdr-pq",
    "hdr-missing",
    "hdr-sdr",
)

_UNRANKED = len(HDR_PRIORITY)


def _hdr_rank(matched: MatchedFormat) -> int:
    try:
        return HDR_PRIORITY.index(matched.format.id)
    except ValueError:
        return _UNRANKED


def apply_mutual_exclusivity(matched: list[MatchedFormat], profile: ScoringProfile) -> list[MatchedFormat]:
    """Keep a single HDR format when several matched.

    Non-HDR formats keep their order; the surviving HDR format is appended
    after them. Formats missing from ``HDR_PRIORITY`` rank lowest; ties keep
    the earlier match.
    """
    hdr = [m for m in matched if m.format.category is FormatCategory.HDR]
    if len(hdr) <= 1:
        return matched

    best = min(hdr, key=_hdr_rank)
    logger.debug(
        "hdr exclusivity for profile '%s': kept %s, dropped %s",
        profile.id,
        best.format.id,
        ",".join(m.format.id for m in hdr if m is not best),
    )
    others = [m for m in matched if m.format.category is not FormatCategory.HDR]
    return [*others, best]
