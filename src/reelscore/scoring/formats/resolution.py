"""Resolution + source combinations: the base quality tiers."""

from __future__ import annotations

from reelscore.scoring.formats.conditions import NOT_REMUX, REMUX, builtin, resolution, source, title
from reelscore.shared.enums import FormatCategory, Resolution, Source

_R = FormatCategory.RESOLUTION
_576 = title("576p", r"\b576[pi]\b")

RESOLUTION_2160P_FORMATS = (
    builtin(
        "2160p-remux",
        "2160p Remux",
        "4K Remux - lossless extraction from UHD Blu-ray",
        _R,
        ("2160p", "4K", "Remux", "Lossless"),
        resolution(Resolution.UHD_2160P),
        REMUX,
    ),
    builtin(
        "2160p-bluray",
        "2160p Bluray",
        "4K Blu-ray encode (not remux)",
        _R,
        ("2160p", "4K", "Bluray", "Encode"),
        resolution(Resolution.UHD_2160P),
        source(Source.BLURAY, "Bluray"),
        NOT_REMUX,
    ),
    builtin(
        "2160p-webdl",
        "2160p WEB-DL",
        "4K WEB-DL from streaming services",
        _R,
        ("2160p", "4K", "WEB-DL", "Streaming"),
        resolution(Resolution.UHD_2160P),
        source(Source.WEBDL, "WEB-DL"),
    ),
    builtin(
        "2160p-webrip",
        "2160p WEBRip",
        "4K WEBRip (re-encoded from streaming)",
        _R,
        ("2160p", "4K", "WEBRip"),
        resolution(Resolution.UHD_2160P),
        source(Source.WEBRIP, "WEBRip"),
    ),
)

RESOLUTION_1080P_FORMATS = (
    builtin(
        "1080p-remux",
        "1080p Remux",
        "1080p Remux - lossless extraction from Blu-ray",
        _R,
        ("1080p", "Remux", "Lossless"),
        resolution(Resolution.FHD_1080P),
        REMUX,
    ),
    builtin(
        "1080p-bluray",
        "1080p Bluray",
        "1080p Blu-ray encode (not remux)",
        _R,
        ("1080p", "Bluray", "Encode"),
        resolution(Resolution.FHD_1080P),
        source(Source.BLURAY, "Bluray"),
        NOT_REMUX,
    ),
    builtin(
        "1080p-webdl",
        "1080p WEB-DL",
        "1080p WEB-DL from streaming services",
        _R,
        ("1080p", "WEB-DL", "Streaming"),
        resolution(Resolution.FHD_1080P),
        source(Source.WEBDL, "WEB-DL"),
    ),
    builtin(
        "1080p-webdl-hevc",
        "1080p WEB-DL HEVC",
        "1080p WEB-DL encoded in HEVC",
        _R,
        ("1080p", "WEB-DL", "HEVC", "Efficient"),
        resolution(Resolution.FHD_1080P),
        source(Source.WEBDL, "WEB-DL"),
        title("HEVC", r"\b(x265|HEVC|H\.?265)\b"),
    ),
    builtin(
        "1080p-webrip",
        "1080p WEBRip",
        "1080p WEBRip (re-encoded from streaming)",
        _R,
        ("1080p", "WEBRip"),
        resolution(Resolution.FHD_1080P),
        source(Source.WEBRIP, "WEBRip"),
    ),
    builtin(
        "1080p-hdtv",
        "1080p HDTV",
        "1080p broadcast capture",
        _R,
        ("1080p", "HDTV"),
        resolution(Resolution.FHD_1080P),
        source(Source.HDTV, "HDTV"),
    ),
)

RESOLUTION_720P_FORMATS = (
    builtin(
        "720p-bluray",
        "720p Bluray",
        "720p Blu-ray encode",
        _R,
        ("720p", "Bluray"),
        resolution(Resolution.HD_720P),
        source(Source.BLURAY, "Bluray"),
    ),
    builtin(
        "720p-webdl",
        "720p WEB-DL",
        "720p WEB-DL from streaming services",
        _R,
        ("720p", "WEB-DL"),
        resolution(Resolution.HD_720P),
        source(Source.WEBDL, "WEB-DL"),
    ),
    builtin(
        "720p-webrip",
        "720p WEBRip",
        "720p WEBRip",
        _R,
        ("720p", "WEBRip"),
        resolution(Resolution.HD_720P),
        source(Source.WEBRIP, "WEBRip"),
    ),
    builtin(
        "720p-hdtv",
        "720p HDTV",
        "720p broadcast capture",
        _R,
        ("720p", "HDTV"),
        resolution(Resolution.HD_720P),
        source(Source.HDTV, "HDTV"),
    ),
)

# 576p has no Resolution member, so these match on the title token.
RESOLUTION_SD_FORMATS = (
    builtin(
        "576p-bluray",
        "576p Bluray",
        "PAL resolution Blu-ray",
        _R,
        ("576p", "SD", "Bluray"),
        _576,
        source(Source.BLURAY, "Bluray"),
    ),
    builtin(
        "576p-webdl",
        "576p WEB-DL",
        "PAL resolution WEB-DL",
        _R,
        ("576p", "SD", "WEB-DL"),
        _576,
        source(Source.WEBDL, "WEB-DL"),
    ),
    builtin(
        "576p-dvd",
        "576p DVD",
        "PAL DVD",
        _R,
        ("576p", "SD", "DVD"),
        _576,
        source(Source.DVD, "DVD"),
    ),
    builtin(
        "480p-webdl",
        "480p WEB-DL",
        "SD WEB-DL",
        _R,
        ("480p", "SD", "WEB-DL"),
        resolution(Resolution.SD_480P),
        source(Source.WEBDL, "WEB-DL"),
    ),
    builtin(
        "dvd",
        "DVD",
        "DVD encode",
        _R,
        ("SD", "DVD"),
        source(Source.DVD, "DVD"),
        NOT_REMUX,
    ),
    builtin(
        "dvd-remux",
        "DVD Remux",
        "Untouched DVD video stream",
        _R,
        ("SD", "DVD", "Remux"),
        source(Source.DVD, "DVD"),
        REMUX,
    ),
)

RESOLUTION_FORMATS = (
    RESOLUTION_2160P_FORMATS + RESOLUTION_1080P_FORMATS + RESOLUTION_720P_FORMATS + RESOLUTION_SD_FORMATS
)
