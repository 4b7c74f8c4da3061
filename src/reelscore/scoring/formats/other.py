"""Formats with no breakdown bucket; they only count towards the total."""

from __future__ import annotations

from reelscore.scoring.formats.conditions import builtin, flag, title
from reelscore.shared.enums import FormatCategory, ReleaseFlag

OTHER_FORMATS = (
    builtin("format-3d", "3D", "Stereoscopic 3D release", FormatCategory.OTHER, ("3D",), flag(ReleaseFlag.IS_3D)),
    builtin(
        "multi-audio",
        "Multi-Audio",
        "Carries more than one audio language",
        FormatCategory.OTHER,
        ("Language",),
        title("Multi", r"\b(MULTi|DUAL[-. ]?AUDIO)\b"),
    ),
)
