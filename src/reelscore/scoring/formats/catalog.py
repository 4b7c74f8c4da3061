"""The built-in format library, assembled once at import."""

from __future__ import annotations

from reelscore.scoring.formats.audio import AUDIO_FORMATS
from reelscore.scoring.formats.banned import BANNED_FORMATS
from reelscore.scoring.formats.codec import CODEC_FORMATS
from reelscore.scoring.formats.enhancement import ENHANCEMENT_FORMATS
from reelscore.scoring.formats.groups import GROUP_FORMATS
from reelscore.scoring.formats.hdr import HDR_FORMATS
from reelscore.scoring.formats.other import OTHER_FORMATS
from reelscore.scoring.formats.resolution import RESOLUTION_FORMATS
from reelscore.scoring.formats.source import SOURCE_FORMATS
from reelscore.scoring.formats.streaming import STREAMING_FORMATS
from reelscore.shared.enums import FormatCategory
from reelscore.shared.models import CustomFormat

ALL_FORMATS: tuple[CustomFormat, ...] = (
    RESOLUTION_FORMATS
    + SOURCE_FORMATS
    + CODEC_FORMATS
    + AUDIO_FORMATS
    + HDR_FORMATS
    + STREAMING_FORMATS
    + GROUP_FORMATS
    + BANNED_FORMATS
    + ENHANCEMENT_FORMATS
    + OTHER_FORMATS
)

_BY_ID: dict[str, CustomFormat] = {fmt.id: fmt for fmt in ALL_FORMATS}

if len(_BY_ID) != len(ALL_FORMATS):
    raise RuntimeError("duplicate id in built-in format library")

BUILT_IN_FORMAT_IDS: frozenset[str] = frozenset(_BY_ID)


def get_format(format_id: str) -> CustomFormat | None:
    return _BY_ID.get(format_id)


def formats_in(category: FormatCategory) -> tuple[CustomFormat, ...]:
    """Built-in formats of one category, in library order."""
    return tuple(fmt for fmt in ALL_FORMATS if fmt.category is category)
