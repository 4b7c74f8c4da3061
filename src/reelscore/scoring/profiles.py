"""Built-in scoring profiles.

Profiles only hold weights; the format library decides what matches. A
format missing from ``format_scores`` still shows up in results with 0.
"""

from __future__ import annotations

from collections.abc import Iterable

from reelscore.scoring.formats.banned import BANNED_FORMATS
from reelscore.scoring.formats.groups import LOW_QUALITY_FORMATS, MICRO_GROUP_FORMATS, group_format_id
from reelscore.scoring.formats.streaming import STREAMING_FORMATS
from reelscore.shared.models import CustomFormat, ScoringProfile

# Any matched format at or below this score bans the release outright.
BANNED_SCORE = -999999


def _each(formats: Iterable[CustomFormat], score: int) -> dict[str, int]:
    return {fmt.id: score for fmt in formats}


def _groups(score: int, *names: str) -> dict[str, int]:
    return {group_format_id(name): score for name in names}


_BANS = _each(BANNED_FORMATS, BANNED_SCORE)

_REMUX_GROUPS = ("3L", "BiZKiT", "BLURANiUM", "CiNEPHiLES", "EPSiLON", "FraMeSToR", "SiCFoI", "WiLDCAT")
_ENCODE_GROUPS = ("CtrlHD", "D-Z0N3", "decibeL", "DON", "EA", "EbP", "HiFi", "playBD", "PTer", "SA89", "SoLaR")
_WEB_GROUPS = ("CMRG", "FLUX", "NTb", "NTG", "PECULATE", "SiGMA", "SMURF", "TEPES", "TheFarm")
_X265_GROUPS = ("DarQ", "dkore", "edge2020", "GRiMM", "LSt", "NAN0", "Ralphy", "RCVR", "SAMPA", "Silence", "TAoE")


QUALITY = ScoringProfile(
    id="quality",
    name="Quality",
    description="Best available audio and video, file size is no concern",
    tags=("4K", "Remux", "Lossless"),
    format_scores={
        # Resolution
        "2160p-remux": 2000,
        "2160p-bluray": 1700,
        "2160p-webdl": 1500,
        "2160p-webrip": 1200,
        "1080p-remux": 1300,
        "1080p-bluray": 1100,
        "1080p-webdl": 900,
        "1080p-webdl-hevc": 50,
        "1080p-webrip": 750,
        "1080p-hdtv": 500,
        "720p-bluray": 500,
        "720p-webdl": 450,
        "720p-webrip": 400,
        "720p-hdtv": 250,
        "576p-bluray": 150,
        "576p-webdl": 120,
        "576p-dvd": 100,
        "480p-webdl": 80,
        "dvd-remux": 120,
        "dvd": 60,
        # Source
        "source-remux": 100,
        "source-bluray": 60,
        "source-webdl": 50,
        "source-webrip": 30,
        "source-hdtv": 10,
        # Codec
        "codec-av1": 30,
        "codec-x265": 40,
        "codec-x264": 20,
        "codec-vp9": 10,
        "codec-mpeg2": -50,
        "codec-xvid": -100,
        "codec-10bit": 20,
        # Audio
        "audio-truehd": 200,
        "audio-dts-x": 180,
        "audio-dts-hdma": 160,
        "audio-atmos": 150,
        "audio-dts-hd": 120,
        "audio-pcm": 100,
        "audio-flac": 90,
        "audio-dts": 80,
        "audio-ddplus": 80,
        "audio-dd": 40,
        "audio-opus": 30,
        "audio-aac": 20,
        "audio-mp3": -20,
        # HDR
        "hdr-dolby-vision": 300,
        "hdr-hdr10plus": 250,
        "hdr-hdr10": 200,
        "hdr-dolby-vision-no-fallback": 150,
        "hdr10-missing": 150,
        "hdr-generic": 150,
        "hdr-hlg": 100,
        "hdr-pq": 80,
        "hdr-sdr": -100,
        # Streaming
        "streaming-atvp": 60,
        "streaming-bcore": 60,
        "streaming-amzn": 40,
        "streaming-nf": 40,
        "streaming-dsnp": 40,
        "streaming-hmax": 30,
        "streaming-max": 30,
        # Release groups
        **_groups(200, *_REMUX_GROUPS),
        **_groups(150, *_ENCODE_GROUPS),
        **_groups(100, *_WEB_GROUPS),
        **_each(MICRO_GROUP_FORMATS, -600),
        **_each(LOW_QUALITY_FORMATS, -1000),
        # Enhancements
        "imax-enhanced": 80,
        "imax": 40,
        "hybrid": 40,
        "criterion": 30,
        "remastered": 20,
        "open-matte": 20,
        "repack": 10,
        "proper": 10,
        # Other
        "format-3d": -5000,
        **_BANS,
    },
    min_score=0,
    upgrade_until_score=10000,
    min_score_increment=10,
    movie_min_size_gb=1,
    episode_min_size_mb=100,
    is_built_in=True,
)

BALANCED = ScoringProfile(
    id="balanced",
    name="Balanced",
    description="High quality encodes at sensible sizes",
    tags=("1080p", "4K", "Encode"),
    format_scores={
        "2160p-remux": 1400,
        "2160p-bluray": 1250,
        "2160p-webdl": 1100,
        "2160p-webrip": 950,
        "1080p-remux": 1000,
        "1080p-bluray": 950,
        "1080p-webdl": 900,
        "1080p-webdl-hevc": 60,
        "1080p-webrip": 800,
        "1080p-hdtv": 550,
        "720p-bluray": 520,
        "720p-webdl": 480,
        "720p-webrip": 430,
        "720p-hdtv": 300,
        "576p-bluray": 200,
        "576p-webdl": 180,
        "576p-dvd": 150,
        "480p-webdl": 120,
        "dvd-remux": 100,
        "dvd": 100,
        "source-bluray": 40,
        "source-webdl": 40,
        "source-webrip": 20,
        "codec-av1": 60,
        "codec-x265": 50,
        "codec-x264": 20,
        "codec-xvid": -150,
        "codec-10bit": 20,
        "audio-truehd": 100,
        "audio-dts-x": 100,
        "audio-dts-hdma": 90,
        "audio-atmos": 80,
        "audio-ddplus": 70,
        "audio-dts-hd": 60,
        "audio-dts": 50,
        "audio-dd": 40,
        "audio-flac": 40,
        "audio-aac": 30,
        "audio-opus": 30,
        "hdr-dolby-vision": 200,
        "hdr-hdr10plus": 180,
        "hdr-hdr10": 150,
        "hdr-dolby-vision-no-fallback": 50,
        "hdr10-missing": 120,
        "hdr-generic": 100,
        "hdr-hlg": 60,
        "hdr-pq": 50,
        "streaming-atvp": 30,
        "streaming-amzn": 20,
        "streaming-nf": 20,
        "streaming-dsnp": 20,
        **_groups(100, *_ENCODE_GROUPS, *_WEB_GROUPS),
        **_groups(80, *_X265_GROUPS),
        **_each(MICRO_GROUP_FORMATS, -100),
        **_each(LOW_QUALITY_FORMATS, -1000),
        "imax-enhanced": 50,
        "imax": 30,
        "hybrid": 20,
        "repack": 10,
        "proper": 10,
        "format-3d": -5000,
        **_BANS,
    },
    min_score=0,
    upgrade_until_score=5000,
    min_score_increment=10,
    movie_min_size_gb=1,
    movie_max_size_gb=40,
    episode_min_size_mb=100,
    episode_max_size_mb=4000,
    is_built_in=True,
)

COMPACT = ScoringProfile(
    id="compact",
    name="Compact",
    description="Small, efficient encodes; 1080p HEVC over bloated 4K",
    tags=("Efficient", "x265", "Micro"),
    format_scores={
        "2160p-remux": -2000,
        "2160p-bluray": -500,
        "2160p-webdl": 350,
        "2160p-webrip": 250,
        "1080p-remux": -1000,
        "1080p-bluray": 500,
        "1080p-webdl": 450,
        "1080p-webdl-hevc": 150,
        "1080p-webrip": 420,
        "1080p-hdtv": 300,
        "720p-bluray": 380,
        "720p-webdl": 350,
        "720p-webrip": 330,
        "720p-hdtv": 200,
        "576p-bluray": 150,
        "576p-webdl": 150,
        "576p-dvd": 120,
        "480p-webdl": 120,
        "dvd-remux": -200,
        "dvd": 100,
        "source-remux": -500,
        "source-bluray": 30,
        "source-webdl": 30,
        "source-webrip": 30,
        "codec-av1": 250,
        "codec-x265": 200,
        "codec-vvc": 100,
        "codec-x264": 0,
        "codec-mpeg2": -300,
        "codec-vc1": -300,
        "codec-xvid": -200,
        "codec-10bit": 50,
        "audio-truehd": -100,
        "audio-dts-x": -100,
        "audio-dts-hdma": -100,
        "audio-pcm": -200,
        "audio-flac": -50,
        "audio-opus": 60,
        "audio-aac": 50,
        "audio-ddplus": 40,
        "audio-dd": 30,
        "hdr-hdr10": 20,
        "hdr-hdr10plus": 20,
        **_groups(150, *_X265_GROUPS),
        **_each(MICRO_GROUP_FORMATS, 100),
        **_groups(120, "YIFY"),
        "group-yts": 150,
        **_each(LOW_QUALITY_FORMATS, -500),
        "repack": 10,
        "proper": 10,
        "format-3d": -5000,
        **_BANS,
    },
    min_score=0,
    upgrade_until_score=3000,
    min_score_increment=10,
    movie_max_size_gb=15,
    episode_max_size_mb=2000,
    is_built_in=True,
)

STREAMER = ScoringProfile(
    id="streamer",
    name="Streamer",
    description="Instant playback from streaming indexers, WEB-DL otherwise",
    tags=("Streaming", "Instant"),
    format_scores={
        **_each(STREAMING_FORMATS, 20),
        "streaming-protocol": 2000,
        "2160p-webdl": 300,
        "1080p-webdl": 250,
        "720p-webdl": 150,
        "source-webdl": 50,
        **_each(LOW_QUALITY_FORMATS, -1000),
        "format-3d": -5000,
        **_BANS,
    },
    min_score=0,
    upgrade_until_score=5000,
    min_score_increment=0,
    is_built_in=True,
)

DEFAULT_PROFILES: tuple[ScoringProfile, ...] = (QUALITY, BALANCED, COMPACT, STREAMER)

_BY_ID = {profile.id: profile for profile in DEFAULT_PROFILES}

BUILT_IN_PROFILE_IDS: frozenset[str] = frozenset(_BY_ID)


def get_profile(profile_id: str) -> ScoringProfile | None:
    return _BY_ID.get(profile_id)
