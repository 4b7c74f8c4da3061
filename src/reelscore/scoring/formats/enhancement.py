"""Edition and release-fix formats."""

from __future__ import annotations

from reelscore.scoring.formats.conditions import builtin, flag, title
from reelscore.shared.enums import FormatCategory, ReleaseFlag

_E = FormatCategory.ENHANCEMENT

ENHANCEMENT_FORMATS = (
    builtin("repack", "Repack", "Fixed re-release by the same group", _E, ("Fix",), flag(ReleaseFlag.IS_REPACK)),
    builtin("proper", "Proper", "Fixed re-release by another group", _E, ("Fix",), flag(ReleaseFlag.IS_PROPER)),
    builtin(
        "imax-enhanced",
        "IMAX Enhanced",
        "IMAX Enhanced expanded aspect ratio",
        _E,
        ("Edition", "IMAX"),
        title("IMAX Enhanced", r"\bIMAX[. ]?Enhanced\b"),
    ),
    builtin(
        "imax",
        "IMAX",
        "IMAX edition",
        _E,
        ("Edition", "IMAX"),
        title("IMAX", r"\bIMAX\b"),
        title("Not IMAX Enhanced", r"\bIMAX[. ]?Enhanced\b", negate=True),
    ),
    builtin("remastered", "Remastered", "Remastered", _E, ("Edition",), title("Remaster", r"\bRemaster(ed)?\b")),
    builtin("criterion", "Criterion", "Criterion Collection", _E, ("Edition",), title("Criterion", r"\bCriterion\b")),
    builtin("extended", "Extended", "Extended cut", _E, ("Edition",), title("Extended", r"\bExtended\b")),
    builtin(
        "directors-cut",
        "Director's Cut",
        "Director's cut edition",
        _E,
        ("Edition",),
        title("Director's Cut", r"\bDirector'?s[. ]?Cut\b"),
    ),
    builtin("open-matte", "Open Matte", "Open matte", _E, ("Edition",), title("Open Matte", r"\bOpen[. ]?Matte\b")),
    builtin("hybrid", "Hybrid", "Combined from several sources", _E, ("Edition",), title("Hybrid", r"\bHybrid\b")),
)
