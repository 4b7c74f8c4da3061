"""Regex tokeniser for scene and P2P style release titles."""

from __future__ import annotations

import logging
import re

from reelscore.shared.models import ParsedRelease

logger = logging.getLogger(__name__)


def _token(pattern: str, *, digits_follow: bool = False, flags: int = re.IGNORECASE) -> re.Pattern[str]:
    """Compile ``pattern`` so that it only matches a whole token.

    Dots, dashes, spaces, brackets and underscores all delimit tokens. With
    ``digits_follow`` a trailing channel layout is tolerated (``DDP5.1``).
    """
    tail = r"(?![A-Za-z])" if digits_follow else r"(?![A-Za-z0-9])"
    return re.compile(rf"(?<![A-Za-z0-9])(?:{pattern}){tail}", flags)


_EXTENSION_RE = re.compile(r"\.(?:mkv|mp4|avi|m4v|m2ts|ts|wmv|mov|iso|nzb|torrent)$", re.IGNORECASE)
_TRAILING_TAGS_RE = re.compile(r"(?:\s*\[[^\]]*\]|\s*\([^)]*\))+$")
_LEADING_GROUP_RE = re.compile(r"^\[(?P<group>[^\]]+)\]")
_GROUP_RE = re.compile(r"-(?P<group>[A-Za-z0-9][A-Za-z0-9_.@]*)$")

# Tails of "WEB-DL", "DTS-HD.MA", "DTS-X" etc. that look like a group suffix.
_NOT_GROUPS = frozenset({"DL", "DLRIP", "RIP", "HD", "MA", "X", "HDMA", "RAY", "AUDIO", "SUB", "SUBS", "ES"})

# Ordered: explicit pixel counts win over marketing labels.
_RESOLUTIONS: tuple[tuple[str, re.Pattern[str]], ...] = (
    ("2160p", _token(r"2160[pi]|3840x2160")),
    ("1080p", _token(r"1080[pi]|1920x1080")),
    ("720p", _token(r"720p|1280x720")),
    ("576p", _token(r"576[pi]")),
    ("480p", _token(r"480[pi]|640x480|848x480")),
    ("2160p", _token(r"4K|UHD")),
)

_SOURCES: tuple[tuple[str, re.Pattern[str]], ...] = (
    ("remux", _token(r"(?:BD|UHD)?REMUX")),
    ("cam", _token(r"(?:HD)?CAM(?:RIP)?|HQCAM")),
    ("telesync", _token(r"(?:HD)?TS|TELESYNC|PDVD")),
    ("telecine", _token(r"(?:HD)?TC|TELECINE")),
    ("screener", _token(r"(?:DVD|BD|WEB)?SCR(?:EENER)?")),
    ("webrip", _token(r"WEB[-. ]?RIP|WEBCAP")),
    ("webdl", _token(r"WEB[-. ]?DL|WEB")),
    ("bluray", _token(r"BLU[-. ]?RAY|BD[-. ]?RIP|BR[-. ]?RIP|BDMV|BD(?:25|50|66|100)?")),
    ("hdtv", _token(r"(?:HD|PD|SD|UHD)TV(?:RIP)?|TVRIP|DSR(?:IP)?")),
    ("dvd", _token(r"DVD(?:RIP|R|5|9)?|NTSC|PAL")),
)

_CODECS: tuple[tuple[str, re.Pattern[str]], ...] = (
    ("av1", _token(r"AV1")),
    ("vvc", _token(r"VVC|[HX]\.?266")),
    ("h265", _token(r"X265|H\.?265|HEVC")),
    ("h264", _token(r"X264|H\.?264|AVC")),
    ("vp9", _token(r"VP9")),
    ("vc1", _token(r"VC[-. ]?1")),
    ("xvid", _token(r"XVID")),
    ("divx", _token(r"DIVX")),
    ("mpeg2", _token(r"MPEG[-. ]?2")),
)

_AUDIO: tuple[tuple[str, re.Pattern[str]], ...] = (
    ("truehd", _token(r"TRUE[-. ]?HD", digits_follow=True)),
    ("atmos", _token(r"ATMOS", digits_follow=True)),
    ("dts-x", _token(r"DTS[-. ]?X", digits_follow=True)),
    ("dts-hdma", _token(r"DTS[-. ]?HD[-. ]?MA|DTS[-. ]?MA", digits_follow=True)),
    ("dts-hd", _token(r"DTS[-. ]?HD(?:[-. ]?HRA)?", digits_follow=True)),
    ("dts", _token(r"DTS(?:[-. ]?ES)?", digits_follow=True)),
    ("dd+", _token(r"DD\+|DDP|E[-. ]?AC[-. ]?3|DOLBY[-. ]?DIGITAL[-. ]?PLUS", digits_follow=True)),
    ("dd", _token(r"DD|AC[-. ]?3|DOLBY[-. ]?DIGITAL", digits_follow=True)),
    ("flac", _token(r"FLAC", digits_follow=True)),
    ("aac", _token(r"AAC", digits_follow=True)),
    ("mp3", _token(r"MP3", digits_follow=True)),
    ("opus", _token(r"OPUS", digits_follow=True)),
)

_HDR: tuple[tuple[str, re.Pattern[str]], ...] = (
    ("dv", _token(r"DV|DOVI|DOLBY[-. ]?VISION")),
    ("hdr10plus", _token(r"HDR10(?:\+|P|PLUS)")),
    ("hdr10", _token(r"HDR10")),
    ("hdr", _token(r"HDR")),
    ("hlg", _token(r"HLG")),
    ("pq", _token(r"PQ")),
    ("sdr", _token(r"SDR")),
)

# Scene abbreviations are case-sensitive: "iT" is iTunes, "it" is a word.
_STREAMING_CODES = (
    "AMZN", "NF", "ATVP", "DSNP", "HMAX", "MAX", "PCOK", "PMTP", "HULU", "iT", "STAN", "CRAV",
    "NOW", "SHO", "ROKU", "MUBI", "CRIT", "DS4K", "iQIYI", "TVING", "VIKI", "VIU", "WAVVE",
    "WeTV", "KCW", "KOCOWA", "BCORE", "iP", "HBO", "APTV",
)
_STREAMING_RE = re.compile(
    r"(?<![A-Za-z0-9])("
    + "|".join(re.escape(code) for code in sorted(_STREAMING_CODES, key=len, reverse=True))
    + r")(?![A-Za-z0-9])"
)

_LANGUAGES: tuple[tuple[str, re.Pattern[str]], ...] = (
    ("french", _token(r"FRENCH|TRUEFRENCH|VFF|VFQ")),
    ("german", _token(r"GERMAN")),
    ("spanish", _token(r"SPANISH|CASTELLANO|LATINO")),
    ("italian", _token(r"ITALIAN|ITA")),
    ("japanese", _token(r"JAPANESE|JAP")),
    ("korean", _token(r"KOREAN|KOR")),
    ("russian", _token(r"RUSSIAN|RUS")),
    ("hindi", _token(r"HINDI")),
    ("multi", _token(r"MULTI|DUAL[-. ]?AUDIO")),
)

_REPACK_RE = _token(r"REPACK\d*|RERIP")
_PROPER_RE = _token(r"PROPER")
_3D_RE = _token(r"3D|H-?SBS|HALF[-. ]?SBS|H-?OU|HALF[-. ]?OU")

_YEAR_RE = re.compile(r"(?<![0-9A-Za-z])(?P<year>(?:19|20)\d{2})(?![0-9A-Za-z])")
_EPISODE_RE = re.compile(
    r"(?<![A-Za-z0-9])S(?P<season>\d{1,2})(?P<episodes>(?:[-. ]?E\d{1,3})+)(?![0-9])", re.IGNORECASE
)
_SEASON_RE = re.compile(
    r"(?<![A-Za-z0-9])(?:S(?P<short>\d{1,2})|SEASON[-. ]?(?P<long>\d{1,2}))(?![0-9A-Za-z])", re.IGNORECASE
)


class RegexReleaseParser:
    """Recognise quality tokens in release titles with a fixed regex table."""

    def parse(self, title: str) -> ParsedRelease:
        """Tokenise ``title``. Unrecognised parts are left empty; never raises."""
        stem = _EXTENSION_RE.sub("", title.strip())

        resolution = self._first_key(_RESOLUTIONS, stem)
        episode = _EPISODE_RE.search(stem)
        season_match = None if episode else _SEASON_RE.search(stem)
        year_match = self._year(stem)

        title_end = self._title_end(stem, year_match, episode or season_match)
        tail = stem[title_end:]
        # Source tags only count between the title and the release group: "Cam.2018" or "-TS" are names.
        group_match = self._trailing_group(stem)
        quality = stem[title_end : group_match.start()] if group_match else tail

        season: int | None = None
        episodes: tuple[int, ...] = ()
        if episode:
            season = int(episode.group("season"))
            episodes = tuple(int(n) for n in re.findall(r"\d+", episode.group("episodes")))
        elif season_match:
            season = int(season_match.group("short") or season_match.group("long"))

        streaming = _STREAMING_RE.search(tail)

        parsed = ParsedRelease(
            original_title=title,
            clean_title=self._clean(stem[:title_end]),
            year=int(year_match.group("year")) if year_match else None,
            season=season,
            episodes=episodes,
            is_season_pack=season_match is not None,
            resolution=resolution,
            sources=self._all_keys(_SOURCES, quality),
            codec=self._first_key(_CODECS, stem),
            audio=self._all_keys(_AUDIO, stem),
            hdr=self._all_keys(_HDR, stem),
            release_group=self._release_group(stem),
            streaming_service=streaming.group(1) if streaming else None,
            is_repack=bool(_REPACK_RE.search(stem)),
            is_proper=bool(_PROPER_RE.search(stem)),
            is_3d=bool(_3D_RE.search(tail)),
            languages=self._languages(tail),
        )
        logger.debug(
            "parsed '%s': resolution=%s sources=%s group=%s",
            title,
            parsed.resolution,
            ",".join(parsed.sources) or "-",
            parsed.release_group,
        )
        return parsed

    @staticmethod
    def _first_key(table: tuple[tuple[str, re.Pattern[str]], ...], text: str) -> str | None:
        for key, pattern in table:
            if pattern.search(text):
                return key
        return None

    @staticmethod
    def _all_keys(table: tuple[tuple[str, re.Pattern[str]], ...], text: str) -> tuple[str, ...]:
        return tuple(key for key, pattern in table if pattern.search(text))

    @staticmethod
    def _year(stem: str) -> re.Match[str] | None:
        # A leading year is usually part of the title ("2012.2009.1080p").
        candidates = [m for m in _YEAR_RE.finditer(stem) if m.start() > 0]
        return candidates[-1] if candidates else None

    def _title_end(self, stem: str, year: re.Match[str] | None, season: re.Match[str] | None) -> int:
        starts = [m.start() for m in (year, season) if m is not None]
        # Quality tags come after the year or season marker; anything before is title.
        if starts:
            return min(starts)
        for table in (_RESOLUTIONS, _SOURCES, _CODECS):
            for _, pattern in table:
                found = pattern.search(stem)
                if found and found.start() > 0:
                    starts.append(found.start())
        if starts:
            return min(starts)
        group = _GROUP_RE.search(stem)
        return group.start() if group else len(stem)

    @staticmethod
    def _clean(raw: str) -> str:
        raw = _LEADING_GROUP_RE.sub("", raw)
        return re.sub(r"[._]+", " ", raw).strip(" -[](){}")

    @staticmethod
    def _release_group(stem: str) -> str | None:
        leading = _LEADING_GROUP_RE.match(stem)
        if leading:
            return leading.group("group").strip() or None

        match = RegexReleaseParser._trailing_group(stem)
        return match.group("group") if match else None

    @staticmethod
    def _trailing_group(stem: str) -> re.Match[str] | None:
        # Positions stay valid for ``stem``: only a suffix is stripped.
        match = _GROUP_RE.search(_TRAILING_TAGS_RE.sub("", stem))
        if not match:
            return None
        group = match.group("group")
        if group.isdigit() or group.upper().split(".")[0] in _NOT_GROUPS:
            return None
        return match

    @staticmethod
    def _languages(tail: str) -> frozenset[str]:
        found = {name for name, pattern in _LANGUAGES if pattern.search(tail)}
        if not found or "multi" in found:
            found.add("english")
        return frozenset(found)
