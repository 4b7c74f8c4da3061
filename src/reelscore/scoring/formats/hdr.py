"""HDR formats.

Several of these overlap on purpose (a DV release with an HDR10 base layer
matches both Dolby Vision and HDR10); the exclusivity resolver keeps one.
"""

from __future__ import annotations

from reelscore.scoring.formats.conditions import builtin, hdr, resolution, title
from reelscore.shared.enums import SDR_ALIAS, FormatCategory, HdrFormat, Resolution

_H = FormatCategory.HDR

HDR_FORMATS = (
    builtin(
        "hdr-dolby-vision",
        "Dolby Vision",
        "Dolby Vision with an HDR10, HDR10+ or HLG fallback layer",
        _H,
        ("HDR", "Dolby Vision"),
        hdr(HdrFormat.DOLBY_VISION_HDR10, "DV HDR10", required=False),
        hdr(HdrFormat.DOLBY_VISION_HDR10PLUS, "DV HDR10+", required=False),
        hdr(HdrFormat.DOLBY_VISION_HLG, "DV HLG", required=False),
    ),
    builtin(
        "hdr-dolby-vision-no-fallback",
        "Dolby Vision (no fallback)",
        "Dolby Vision without a fallback layer; needs a DV capable display",
        _H,
        ("HDR", "Dolby Vision"),
        hdr(HdrFormat.DOLBY_VISION, "DV", required=False),
        hdr(HdrFormat.DOLBY_VISION_SDR, "DV SDR", required=False),
    ),
    builtin(
        "hdr-hdr10plus",
        "HDR10+",
        "HDR10+ dynamic metadata",
        _H,
        ("HDR", "HDR10+"),
        hdr(HdrFormat.HDR10PLUS, "HDR10+", required=False),
        hdr(HdrFormat.DOLBY_VISION_HDR10PLUS, "DV HDR10+", required=False),
    ),
    builtin(
        "hdr-hdr10",
        "HDR10",
        "HDR10 static metadata",
        _H,
        ("HDR", "HDR10"),
        hdr(HdrFormat.HDR10, "HDR10", required=False),
        hdr(HdrFormat.DOLBY_VISION_HDR10, "DV HDR10", required=False),
    ),
    builtin(
        "hdr10-missing",
        "HDR10 (assumed)",
        "4K release tagged only 'HDR'; almost always HDR10",
        _H,
        ("HDR", "HDR10", "Assumed"),
        resolution(Resolution.UHD_2160P),
        title("HDR", r"\bHDR\b"),
        title("Not specific HDR", r"\b(HDR10|DV\b|DoVi\b|Dolby[. ]?Vision|HLG\b|PQ\b)", negate=True),
    ),
    builtin("hdr-generic", "HDR", "Generic HDR tag", _H, ("HDR",), title("HDR", r"\bHDR\b")),
    builtin(
        "hdr-hlg",
        "HLG",
        "Hybrid Log-Gamma broadcast HDR",
        _H,
        ("HDR", "HLG"),
        hdr(HdrFormat.HLG, "HLG", required=False),
        hdr(HdrFormat.DOLBY_VISION_HLG, "DV HLG", required=False),
    ),
    builtin("hdr-pq", "PQ", "Perceptual Quantizer without HDR10 metadata", _H, ("HDR", "PQ"), hdr(HdrFormat.PQ, "PQ")),
    builtin(
        "hdr-missing",
        "HDR (assumed)",
        "Untagged 4K release, most likely HDR",
        _H,
        ("HDR", "Assumed"),
        resolution(Resolution.UHD_2160P),
        hdr(SDR_ALIAS, "No HDR tag"),
        title("Not SDR", r"\bSDR\b", negate=True),
    ),
    builtin("hdr-sdr", "SDR", "Explicit standard dynamic range", _H, ("SDR",), title("SDR", r"\bSDR\b")),
)
