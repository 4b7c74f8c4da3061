"""Pre-release and fake sources. Every built-in profile bans these outright."""

from __future__ import annotations

from reelscore.scoring.formats.conditions import builtin, source, title
from reelscore.shared.enums import FormatCategory, Source

_B = FormatCategory.BANNED

BANNED_FORMATS = (
    builtin("banned-cam", "CAM", "Recorded in a cinema with a camera", _B, ("Banned",), source(Source.CAM)),
    builtin("banned-telesync", "Telesync", "Cinema camera with line audio", _B, ("Banned",), source(Source.TELESYNC)),
    builtin("banned-telecine", "Telecine", "Copied from film reel", _B, ("Banned",), source(Source.TELECINE)),
    builtin("banned-screener", "Screener", "Promotional screener copy", _B, ("Banned",), source(Source.SCREENER)),
    builtin(
        "banned-workprint",
        "Workprint",
        "Unfinished pre-release cut",
        _B,
        ("Banned",),
        title("Workprint", r"\bWORKPRINT\b"),
    ),
    builtin(
        "banned-upscaled",
        "Upscaled",
        "Artificially upscaled from a lower resolution",
        _B,
        ("Banned", "Fake"),
        title("Upscaled", r"\b(Up[.-]?scaled?|AI[. ]?Upscal(e|ed))\b"),
    ),
)
