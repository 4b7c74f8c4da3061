"""Terse constructors for the built-in format library."""

from __future__ import annotations

from reelscore.shared.enums import (
    AudioFormat,
    Codec,
    ConditionType,
    FormatCategory,
    HdrFormat,
    ReleaseFlag,
    Resolution,
    Source,
)
from reelscore.shared.models import CustomFormat, FormatCondition


def builtin(
    id: str,
    name: str,
    description: str,
    category: FormatCategory,
    tags: tuple[str, ...],
    *conditions: FormatCondition,
) -> CustomFormat:
    return CustomFormat(
        id=id,
        name=name,
        description=description,
        category=category,
        tags=tags,
        conditions=conditions,
        is_built_in=True,
    )


def resolution(value: Resolution, *, required: bool = True, negate: bool = False) -> FormatCondition:
    return FormatCondition(
        name=value.value, type=ConditionType.RESOLUTION, resolution=value, required=required, negate=negate
    )


def source(value: Source, name: str | None = None, *, required: bool = True, negate: bool = False) -> FormatCondition:
    return FormatCondition(
        name=name or value.value, type=ConditionType.SOURCE, source=value, required=required, negate=negate
    )


def codec(value: Codec, name: str | None = None, *, required: bool = True, negate: bool = False) -> FormatCondition:
    return FormatCondition(
        name=name or value.value, type=ConditionType.CODEC, codec=value, required=required, negate=negate
    )


def audio(value: AudioFormat, name: str | None = None, *, required: bool = True) -> FormatCondition:
    return FormatCondition(name=name or value.value, type=ConditionType.AUDIO, audio=value, required=required)


def hdr(value: HdrFormat | str | None, name: str, *, required: bool = True, negate: bool = False) -> FormatCondition:
    return FormatCondition(name=name, type=ConditionType.HDR, hdr=value, required=required, negate=negate)


def title(name: str, pattern: str, *, required: bool = True, negate: bool = False) -> FormatCondition:
    return FormatCondition(
        name=name, type=ConditionType.RELEASE_TITLE, pattern=pattern, required=required, negate=negate
    )


def group(name: str, pattern: str, *, required: bool = True) -> FormatCondition:
    return FormatCondition(name=name, type=ConditionType.RELEASE_GROUP, pattern=pattern, required=required)


def flag(value: ReleaseFlag, *, required: bool = True, negate: bool = False) -> FormatCondition:
    return FormatCondition(name=value.value, type=ConditionType.FLAG, flag=value, required=required, negate=negate)


def indexer(name: str, value: str, *, required: bool = True) -> FormatCondition:
    return FormatCondition(name=name, type=ConditionType.INDEXER, indexer=value, required=required)


NOT_REMUX = title("Not Remux", r"\bRemux\b", negate=True)
REMUX = title("Remux", r"\bRemux\b")
