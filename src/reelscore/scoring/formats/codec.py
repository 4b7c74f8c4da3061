"""Video codec formats."""

from __future__ import annotations

from reelscore.scoring.formats.conditions import builtin, codec, title
from reelscore.shared.enums import Codec, FormatCategory

_C = FormatCategory.CODEC

CODEC_FORMATS = (
    builtin("codec-av1", "AV1", "AOMedia Video 1", _C, ("Codec", "Efficient"), codec(Codec.AV1)),
    builtin("codec-vvc", "VVC", "H.266 / Versatile Video Coding", _C, ("Codec", "Efficient"), codec(Codec.VVC)),
    builtin("codec-x265", "x265", "HEVC / H.265", _C, ("Codec", "HEVC", "Efficient"), codec(Codec.H265)),
    builtin("codec-x264", "x264", "AVC / H.264", _C, ("Codec", "AVC"), codec(Codec.H264)),
    builtin("codec-vp9", "VP9", "Google VP9", _C, ("Codec",), codec(Codec.VP9)),
    builtin("codec-vc1", "VC-1", "SMPTE VC-1, common on early Blu-rays", _C, ("Codec", "Legacy"), codec(Codec.VC1)),
    builtin("codec-mpeg2", "MPEG-2", "MPEG-2 video", _C, ("Codec", "Legacy"), codec(Codec.MPEG2)),
    builtin(
        "codec-xvid",
        "XviD/DivX",
        "MPEG-4 ASP encodes",
        _C,
        ("Codec", "Legacy"),
        codec(Codec.XVID, required=False),
        codec(Codec.DIVX, required=False),
    ),
    builtin(
        "codec-10bit",
        "10bit",
        "10-bit colour depth encode",
        _C,
        ("Codec", "10bit"),
        title("10bit", r"\b(10[-. ]?bit|Hi10P?)\b"),
    ),
)
