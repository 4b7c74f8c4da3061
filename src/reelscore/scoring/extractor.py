"""Normalise raw parser tokens into ReleaseAttributes."""

from __future__ import annotations

import logging

from reelscore.parser.interfaces import ReleaseParser
from reelscore.parser.release_parser import RegexReleaseParser
from reelscore.shared.enums import AudioFormat, Codec, HdrFormat, Resolution, Source
from reelscore.shared.models import ParsedRelease, ReleaseAttributes

logger = logging.getLogger(__name__)

# Worst-first: a CAM tag outranks any WEB/BluRay token in the same title.
SOURCE_PRIORITY = ("cam", "telesync", "telecine", "screener", "remux", "webrip", "webdl", "bluray", "hdtv", "dvd")

# Lossless and object-based codecs first; Atmos only when nothing else is named.
AUDIO_PRIORITY = ("truehd", "dts-x", "dts-hdma", "dts-hd", "dts", "dd+", "dd", "flac", "aac", "mp3", "opus")

_RESOLUTIONS = {
    "2160p": Resolution.UHD_2160P,
    "1080p": Resolution.FHD_1080P,
    "720p": Resolution.HD_720P,
    "480p": Resolution.SD_480P,
}

_default_parser = RegexReleaseParser()


def extract_attributes(parsed: ParsedRelease, indexer: str | None = None) -> ReleaseAttributes:
    """Collapse parser tokens into the closed vocabularies used for matching.

    Unknown or missing tokens map to the ``unknown`` sentinels; 576p has no
    enum member and is detected by title patterns instead.
    """
    sources = set(parsed.sources)
    is_remux = "remux" in sources

    return ReleaseAttributes(
        title=parsed.original_title,
        clean_title=parsed.clean_title,
        year=parsed.year,
        resolution=_RESOLUTIONS.get(parsed.resolution or "", Resolution.UNKNOWN),
        source=_source(sources),
        codec=_codec(parsed.codec),
        hdr=_hdr(set(parsed.hdr)),
        audio=_audio(set(parsed.audio)),
        release_group=parsed.release_group,
        streaming_service=parsed.streaming_service,
        is_remux=is_remux,
        is_repack=parsed.is_repack,
        is_proper=parsed.is_proper,
        is_3d=parsed.is_3d,
        languages=parsed.languages,
        indexer=indexer,
    )


def parse_release(title: str, parser: ReleaseParser | None = None, indexer: str | None = None) -> ReleaseAttributes:
    """Parse a release title and normalise it in one step."""
    parsed = (parser or _default_parser).parse(title)
    return extract_attributes(parsed, indexer=indexer)


def _codec(token: str | None) -> Codec:
    try:
        return Codec(token) if token else Codec.UNKNOWN
    except ValueError:
        logger.debug("unrecognised codec token %r", token)
        return Codec.UNKNOWN


def _source(sources: set[str]) -> Source:
    for key in SOURCE_PRIORITY:
        if key not in sources:
            continue
        if key == "remux" and "dvd" in sources and "bluray" not in sources:
            return Source.DVD
        return Source(key)
    return Source.UNKNOWN


def _audio(tokens: set[str]) -> AudioFormat:
    for key in AUDIO_PRIORITY:
        if key in tokens:
            return AudioFormat(key)
    if "atmos" in tokens:
        return AudioFormat.ATMOS
    return AudioFormat.UNKNOWN


def _hdr(tokens: set[str]) -> HdrFormat | None:
    if "dv" in tokens:
        if "hdr10plus" in tokens:
            return HdrFormat.DOLBY_VISION_HDR10PLUS
        if "hdr10" in tokens or "hdr" in tokens:
            return HdrFormat.DOLBY_VISION_HDR10
        if "hlg" in tokens:
            return HdrFormat.DOLBY_VISION_HLG
        if "sdr" in tokens:
            return HdrFormat.DOLBY_VISION_SDR
        return HdrFormat.DOLBY_VISION
    if "hdr10plus" in tokens:
        return HdrFormat.HDR10PLUS
    if "hdr10" in tokens:
        return HdrFormat.HDR10
    if "hlg" in tokens:
        return HdrFormat.HLG
    if "pq" in tokens:
        return HdrFormat.PQ
    if "hdr" in tokens:
        return HdrFormat.HDR
    return None
