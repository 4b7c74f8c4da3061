"""Source formats, independent of resolution."""

from __future__ import annotations

from reelscore.scoring.formats.conditions import builtin, flag, source
from reelscore.shared.enums import FormatCategory, ReleaseFlag, Source

_S = FormatCategory.SOURCE

SOURCE_FORMATS = (
    builtin("source-remux", "Remux", "Untouched disc video", _S, ("Source", "Remux"), flag(ReleaseFlag.IS_REMUX)),
    builtin("source-bluray", "Bluray", "Blu-ray encode", _S, ("Source", "Bluray"), source(Source.BLURAY)),
    builtin("source-webdl", "WEB-DL", "Untouched streaming download", _S, ("Source", "WEB"), source(Source.WEBDL)),
    builtin("source-webrip", "WEBRip", "Re-encoded streaming capture", _S, ("Source", "WEB"), source(Source.WEBRIP)),
    builtin("source-hdtv", "HDTV", "Broadcast capture", _S, ("Source", "TV"), source(Source.HDTV)),
    builtin("source-dvd", "DVD", "DVD source", _S, ("Source", "DVD"), source(Source.DVD)),
)
