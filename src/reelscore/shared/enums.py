"""Domain enumerations used across all modules."""

from __future__ import annotations

from enum import Enum, unique

# Alias accepted by hdr conditions for "no HDR metadata".
SDR_ALIAS = "sdr"


@unique
class Resolution(str, Enum):
    """Normalised vertical resolution of a release."""

    UHD_2160P = "2160p"
    FHD_1080P = "1080p"
    HD_720P = "720p"
    SD_480P = "480p"
    UNKNOWN = "unknown"


@unique
class Source(str, Enum):
    """Where the video stream was captured or ripped from."""

    REMUX = "remux"
    BLURAY = "bluray"
    WEBDL = "webdl"
    WEBRIP = "webrip"
    HDTV = "hdtv"
    DVD = "dvd"
    CAM = "cam"
    TELESYNC = "telesync"
    TELECINE = "telecine"
    SCREENER = "screener"
    UNKNOWN = "unknown"


@unique
class Codec(str, Enum):
    """Video codec."""

    AV1 = "av1"
    VVC = "vvc"
    H265 = "h265"
    H264 = "h264"
    VP9 = "vp9"
    VC1 = "vc1"
    XVID = "xvid"
    DIVX = "divx"
    MPEG2 = "mpeg2"
    UNKNOWN = "unknown"


@unique
class AudioFormat(str, Enum):
    """Primary audio codec."""

    ATMOS = "atmos"
    TRUEHD = "truehd"
    DTS_X = "dts-x"
    DTS_HDMA = "dts-hdma"
    DTS_HD = "dts-hd"
    DTS = "dts"
    DDPLUS = "dd+"
    DD = "dd"
    FLAC = "flac"
    AAC = "aac"
    MP3 = "mp3"
    OPUS = "opus"
    UNKNOWN = "unknown"


@unique
class HdrFormat(str, Enum):
    """HDR metadata flavour. SDR is represented by ``None`` on attributes."""

    DOLBY_VISION = "dolby-vision"
    DOLBY_VISION_HDR10PLUS = "dolby-vision-hdr10+"
    DOLBY_VISION_HDR10 = "dolby-vision-hdr10"
    DOLBY_VISION_HLG = "dolby-vision-hlg"
    DOLBY_VISION_SDR = "dolby-vision-sdr"
    HDR10PLUS = "hdr10+"
    HDR10 = "hdr10"
    HDR = "hdr"
    HLG = "hlg"
    PQ = "pq"


@unique
class FormatCategory(str, Enum):
    """Grouping of custom formats, used for breakdown buckets and UI."""

    RESOLUTION = "resolution"
    SOURCE = "source"
    CODEC = "codec"
    AUDIO = "audio"
    HDR = "hdr"
    STREAMING = "streaming"
    RELEASE_GROUP_TIER = "release_group_tier"
    MICRO = "micro"
    LOW_QUALITY = "low_quality"
    BANNED = "banned"
    ENHANCEMENT = "enhancement"
    OTHER = "other"


@unique
class ConditionType(str, Enum):
    """Discriminator for FormatCondition payloads."""

    RESOLUTION = "resolution"
    SOURCE = "source"
    RELEASE_TITLE = "release_title"
    RELEASE_GROUP = "release_group"
    CODEC = "codec"
    AUDIO = "audio"
    HDR = "hdr"
    STREAMING_SERVICE = "streaming_service"
    FLAG = "flag"
    INDEXER = "indexer"


@unique
class ReleaseFlag(str, Enum):
    """Boolean release attributes addressable by ``flag`` conditions."""

    IS_REMUX = "isRemux"
    IS_REPACK = "isRepack"
    IS_PROPER = "isProper"
    IS_3D = "is3d"

    @property
    def attribute(self) -> str:
        """Name of the matching field on ReleaseAttributes."""
        return {
            ReleaseFlag.IS_REMUX: "is_remux",
            ReleaseFlag.IS_REPACK: "is_repack",
            ReleaseFlag.IS_PROPER: "is_proper",
            ReleaseFlag.IS_3D: "is_3d",
        }[self]


@unique
class Protocol(str, Enum):
    """Transport a release is delivered through."""

    TORRENT = "torrent"
    USENET = "usenet"
    STREAMING = "streaming"


@unique
class MediaType(str, Enum):
    """Kind of media a release belongs to, for size validation."""

    MOVIE = "movie"
    TV = "tv"
