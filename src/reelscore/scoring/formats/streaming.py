"""Streaming service formats.

Services are detected from the title rather than the parsed service code so
that spelled-out names ("Netflix", "Disney+") match as well.
"""

from __future__ import annotations

from reelscore.scoring.formats.conditions import builtin, title
from reelscore.shared.enums import FormatCategory
from reelscore.shared.models import CustomFormat


def _service(code: str, description: str, pattern: str, *tags: str) -> CustomFormat:
    return builtin(
        f"streaming-{code.lower()}",
        code,
        description,
        FormatCategory.STREAMING,
        ("Streaming", *tags),
        title(code, pattern),
    )


PREMIUM_STREAMING_FORMATS = (
    _service("ATVP", "Apple TV+ - known for high bitrate encodes", r"\b(ATVP|AppleTV\+?|Apple[. ]?TV)\b", "Premium"),
    _service("AMZN", "Amazon Prime Video", r"\b(AMZN|Amazon)\b", "Premium"),
    _service("NF", "Netflix", r"\b(NF|Netflix)\b", "Premium"),
    _service("DSNP", "Disney+", r"\b(DSNP|Disney\+?|DisneyPlus)\b", "Premium"),
)

HBO_STREAMING_FORMATS = (
    _service("HMAX", "HBO Max", r"\b(HMAX|HBO[. ]?Max)\b", "HBO"),
    builtin(
        "streaming-max",
        "MAX",
        "Max (formerly HBO Max)",
        FormatCategory.STREAMING,
        ("Streaming", "HBO", "Max"),
        title("MAX", r"\bMAX\b"),
        title("Not HMAX", r"\bHMAX\b", negate=True),
    ),
)

STANDARD_STREAMING_FORMATS = (
    _service("PCOK", "Peacock", r"\b(PCOK|Peacock)\b"),
    _service("PMTP", "Paramount+", r"\b(PMTP|Paramount\+?)\b"),
    _service("HULU", "Hulu", r"\bHULU\b"),
    _service("iT", "iTunes", r"\b(iT|iTunes)\b"),
    _service("STAN", "Stan (Australia)", r"\bSTAN\b", "International"),
    _service("CRAV", "Crave (Canada)", r"\b(CRAV|Crave)\b", "International"),
    _service("NOW", "NOW (UK)", r"\bNOW\b", "International"),
    _service("SHO", "Showtime", r"\b(SHO|Showtime)\b"),
)

SPECIALTY_STREAMING_FORMATS = (
    _service("ROKU", "The Roku Channel", r"\bROKU\b"),
    _service("MUBI", "MUBI arthouse streaming", r"\bMUBI\b", "Specialty"),
    _service("CRIT", "Criterion Channel", r"\b(CRIT|Criterion)\b", "Specialty"),
    _service("DS4K", "Disney+ 4K source", r"\bDS4K\b", "Specialty", "4K"),
)

ASIAN_STREAMING_FORMATS = (
    _service("iQIYI", "iQIYI", r"\b(iQIYI|IQIYI)\b", "Asian"),
    _service("TVING", "TVING (Korea)", r"\bTVING\b", "Asian"),
    _service("VIKI", "Rakuten Viki", r"\bVIKI\b", "Asian"),
    _service("VIU", "Viu", r"\bVIU\b", "Asian"),
    _service("WAVVE", "Wavve (Korea)", r"\bWAVVE\b", "Asian"),
    _service("WeTV", "WeTV", r"\bWeTV\b", "Asian"),
    _service("KOCOWA", "KOCOWA (Korean content)", r"\b(KOCOWA|KCW)\b", "Asian"),
)

INTERNATIONAL_STREAMING_FORMATS = (
    _service("BCORE", "Sony Bravia Core - very high bitrate", r"\b(BCORE|Bravia[. ]?Core)\b", "Premium"),
    _service("MA", "Movies Anywhere", r"\bMA\b"),
)

# Releases from a direct-streaming indexer carry a [Streaming] tag.
STREAMING_PROTOCOL_FORMAT = builtin(
    "streaming-protocol",
    "Streaming Release",
    "Release from a streaming indexer - instant playback via .strm files",
    FormatCategory.STREAMING,
    ("Streaming", "Protocol", "Instant"),
    title("Streaming Tag", r"\[Streaming\]"),
)

STREAMING_FORMATS = (
    PREMIUM_STREAMING_FORMATS
    + HBO_STREAMING_FORMATS
    + STANDARD_STREAMING_FORMATS
    + SPECIALTY_STREAMING_FORMATS
    + ASIAN_STREAMING_FORMATS
    + INTERNATIONAL_STREAMING_FORMATS
    + (STREAMING_PROTOCOL_FORMAT,)
)
