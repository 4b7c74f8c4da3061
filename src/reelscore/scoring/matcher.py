"""Condition and format evaluation against release attributes."""

from __future__ import annotations

import functools
import logging
import re
from collections.abc import Iterable

from reelscore.shared.enums import SDR_ALIAS, AudioFormat, ConditionType
from reelscore.shared.models import (
    ConditionResult,
    CustomFormat,
    FormatCondition,
    FormatEvaluation,
    MatchedFormat,
    ReleaseAttributes,
)

logger = logging.getLogger(__name__)

_ATMOS_RE = re.compile(r"\batmos\b", re.IGNORECASE)


@functools.lru_cache(maxsize=None)
def _compile(pattern: str) -> re.Pattern[str] | None:
    """Compile a user pattern once. ``None`` marks a pattern that never matches."""
    try:
        return re.compile(pattern, re.IGNORECASE)
    except re.error as exc:
        logger.warning("invalid pattern %r: %s", pattern, exc)
        return None


def clear_pattern_cache() -> None:
    """Drop every compiled pattern. Results are unaffected, only latency."""
    _compile.cache_clear()


def _search(pattern: str | None, text: str | None) -> bool:
    if pattern is None or text is None:
        return False
    compiled = _compile(pattern)
    return compiled is not None and compiled.search(text) is not None


def _casefold_equal(left: str | None, right: str | None) -> bool:
    if left is None or right is None:
        return False
    return left.casefold() == right.casefold()


def _raw_match(condition: FormatCondition, attrs: ReleaseAttributes) -> bool:
    kind = condition.type
    if kind is ConditionType.RESOLUTION:
        return condition.resolution is not None and attrs.resolution == condition.resolution
    if kind is ConditionType.SOURCE:
        return condition.source is not None and attrs.source == condition.source
    if kind is ConditionType.CODEC:
        return condition.codec is not None and attrs.codec == condition.codec
    if kind is ConditionType.AUDIO:
        if condition.audio is None:
            return False
        if attrs.audio == condition.audio:
            return True
        # Atmos usually rides on top of TrueHD or DD+, so the title is checked too.
        return condition.audio is AudioFormat.ATMOS and _ATMOS_RE.search(attrs.title) is not None
    if kind is ConditionType.HDR:
        if condition.hdr is None or condition.hdr == SDR_ALIAS:
            return attrs.hdr is None
        return attrs.hdr == condition.hdr
    if kind is ConditionType.RELEASE_TITLE:
        return _search(condition.pattern, attrs.title)
    if kind is ConditionType.RELEASE_GROUP:
        return _search(condition.pattern, attrs.release_group)
    if kind is ConditionType.STREAMING_SERVICE:
        return _casefold_equal(condition.streaming_service, attrs.streaming_service)
    if kind is ConditionType.INDEXER:
        return _casefold_equal(condition.indexer, attrs.indexer)
    if kind is ConditionType.FLAG:
        if condition.flag is None:
            return False
        return bool(getattr(attrs, condition.flag.attribute, False))
    return False


def evaluate_condition(condition: FormatCondition, attrs: ReleaseAttributes) -> ConditionResult:
    """Evaluate one condition, keeping both the raw and the negated outcome."""
    raw = _raw_match(condition, attrs)
    return ConditionResult(condition=condition, matches=not raw if condition.negate else raw, raw_match=raw)


def evaluate_format(fmt: CustomFormat, attrs: ReleaseAttributes) -> FormatEvaluation:
    """Evaluate a format: every required condition AND at least one optional one.

    Either group passes vacuously when empty, so a format without conditions
    always matches.
    """
    results = tuple(evaluate_condition(c, attrs) for c in fmt.conditions)
    required = [r.matches for r in results if r.condition.required]
    optional = [r.matches for r in results if not r.condition.required]
    matches = all(required) and (not optional or any(optional))
    return FormatEvaluation(matches=matches, condition_results=results)


def match_formats(attrs: ReleaseAttributes, formats: Iterable[CustomFormat]) -> list[MatchedFormat]:
    """Return the formats that match ``attrs``, in library order, with their traces."""
    matched: list[MatchedFormat] = []
    for fmt in formats:
        evaluation = evaluate_format(fmt, attrs)
        if evaluation.matches:
            matched.append(MatchedFormat(format=fmt, condition_results=evaluation.condition_results))
    logger.debug("matched %d format(s) for '%s'", len(matched), attrs.title)
    return matched


def matches_format(attrs: ReleaseAttributes, fmt: CustomFormat) -> bool:
    return evaluate_format(fmt, attrs).matches
