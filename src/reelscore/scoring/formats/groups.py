"""Release group formats.

Detection only: a group format says nothing about quality until a profile
scores it. Micro encoders (small, heavily compressed files) get their own
category so profiles can treat them as a block.
"""

from __future__ import annotations

import re

from reelscore.scoring.formats.conditions import builtin, group, indexer, title
from reelscore.shared.enums import FormatCategory
from reelscore.shared.models import CustomFormat


def group_format_id(name: str) -> str:
    """Stable id for a group name: lower-case, hyphens kept, other symbols dropped."""
    return "group-" + re.sub(r"[^a-z0-9-]", "", name.lower())


def _group(name: str, description: str = "", *tags: str) -> CustomFormat:
    category = FormatCategory.MICRO if "Micro" in tags else FormatCategory.RELEASE_GROUP_TIER
    return builtin(
        group_format_id(name),
        name,
        description or f"{name} release group",
        category,
        ("Release Group", *tags),
        group(name, f"^{re.escape(name)}$"),
    )


RELEASE_GROUP_FORMATS = (
    _group("3L", "Quality remux group"),
    _group("4K4U"),
    _group("AMIABLE", "Scene group"),
    _group("AOC"),
    _group("Arid", "Anime group", "Anime"),
    _group("BiZKiT", "Remux group"),
    _group("BLASPHEMY"),
    _group("BLURANiUM", "Remux group"),
    _group("BOLS"),
    _group("BTM"),
    _group("BeyondHD", "Encode group (not their remuxes)"),
    _group("CBT", "Anime group", "Anime"),
    _group("CiNEPHiLES", "Remux group"),
    _group("CLASSiCALHD"),
    _group("CMRG", "WEB-DL group"),
    _group("CREATiVE24"),
    _group("CTR", "Anime group", "Anime"),
    _group("CtrlHD", "Quality encode group"),
    _group("D-Z0N3", "Top tier encode group"),
    _group("DarQ", "Efficient x265 encoder"),
    _group("d3g"),
    _group("decibeL", "Quality encode/remux group"),
    _group("Dekinai", "Anime group", "Anime"),
    _group("DepraveD"),
    _group("DeViSiVE"),
    _group("dkore", "Efficient x265 encoder"),
    _group("DON", "Top tier encode group"),
    _group("Drag", "Anime group", "Anime"),
    _group("DRONES", "Scene group"),
    _group("DRX"),
    _group("EA", "Quality encode group"),
    _group("EbP", "Top tier encode group"),
    _group("edge2020", "Efficient x265 encoder"),
    _group("EPSiLON", "Remux group"),
    _group("Erai-raws", "Anime WEB source", "Anime"),
    _group("EXP", "Anime group", "Anime"),
    _group("FGT"),
    _group("Flights"),
    _group("Flugel", "Anime group", "Anime"),
    _group("FLUX", "Quality WEB-DL/encode group"),
    _group("FraMeSToR", "Top tier remux group"),
    _group("GECKOS", "Scene group"),
    _group("GRiMM", "Efficient x265 encoder"),
    _group("hallowed", "Scene group"),
    _group("HDS"),
    _group("Headpatter", "Anime group", "Anime"),
    _group("HiFi", "Quality encode group"),
    _group("Holomux", "Anime group", "Anime"),
    _group("HorribleSubs", "Anime WEB source", "Anime"),
    _group("HQMUX", "Quality 4K encode group"),
    _group("hydes", "Anime group", "Anime"),
    _group("iFT", "Quality 4K encode group"),
    _group("IK", "Anime group", "Anime"),
    _group("iVy"),
    _group("Kametsu", "Anime group", "Anime"),
    _group("KC"),
    _group("KH", "Anime group", "Anime"),
    _group("kuchikirukia", "Anime group", "Anime"),
    _group("LSt", "Efficient x265 encoder"),
    _group("Lulu", "Anime group", "Anime"),
    _group("LYS1TH3A", "Top tier anime group", "Anime"),
    _group("MgB"),
    _group("MTBB", "Top tier anime group", "Anime"),
    _group("Mysteria", "Anime group", "Anime"),
    _group("NAHOM"),
    _group("NAN0", "Efficient x265 encoder"),
    _group("Netaro", "Anime group", "Anime"),
    _group("NhaNc3"),
    _group("NoGroup"),
    _group("NTb", "Quality WEB-DL group"),
    _group("NTG", "Quality WEB-DL group"),
    _group("OEPlus"),
    _group("Okay-Subs", "Anime group", "Anime"),
    _group("OZR", "Top tier anime group", "Anime"),
    _group("PECULATE", "WEB-DL group"),
    _group("PiRaTeS"),
    _group("playBD", "Quality encode/remux group"),
    _group("pog42", "Anime group", "Anime"),
    _group("Pookie", "Anime group", "Anime"),
    _group("PTer", "Quality encode group"),
    _group("Quetzal", "Anime group", "Anime"),
    _group("Ralphy", "Efficient x265 encoder"),
    _group("Rasetsu", "Anime group", "Anime"),
    _group("RCVR", "Efficient x265 encoder"),
    _group("REBORN", "Top tier 4K encode group"),
    _group("SA89", "Top tier 4K encode group"),
    _group("sam", "Top tier anime group", "Anime"),
    _group("SAMPA", "Efficient x265 encoder"),
    _group("SbR", "Quality encode group"),
    _group("SCY", "Top tier anime group", "Anime"),
    _group("SECTOR7", "Scene group"),
    _group("Senjou", "Anime group", "Anime"),
    _group("SHD"),
    _group("ShieldBearer"),
    _group("SiCFoI", "Remux group"),
    _group("SiGMA", "WEB-DL group"),
    _group("Silence", "Efficient x265 encoder"),
    _group("smol", "Top tier anime group", "Anime"),
    _group("SMURF", "WEB-DL group"),
    _group("SoLaR", "Top tier 4K encode group"),
    _group("SPARKS", "Scene group"),
    _group("STUTTERSHIT"),
    _group("SubsPlease", "Anime WEB source", "Anime"),
    _group("TAoE", "Quality efficient encoder"),
    _group("tarunk9c"),
    _group("TeamSyndicate", "Quality encode group"),
    _group("TEKNO3D"),
    _group("TEPES", "WEB-DL group"),
    _group("TheFarm", "Quality WEB-DL group"),
    _group("ToNaTo", "Efficient x265 encoder"),
    _group("TvR"),
    _group("UDF", "Anime group", "Anime"),
    _group("UnKn0wn"),
    _group("VECTOR"),
    _group("Vialle", "Efficient x265 encoder"),
    _group("VietHD", "Quality encode group"),
    _group("Vodes", "Top tier anime group", "Anime"),
    _group("Vyndros", "Efficient x265 encoder"),
    _group("W4NK3R", "Quality 4K encode group"),
    _group("WBDP", "Anime group", "Anime"),
    _group("WiLDCAT", "Remux group"),
    _group("YELLO", "Efficient x265 encoder"),
    _group("YURI", "Anime group", "Anime"),
    _group("ZoroSenpai", "Quality encode group"),
    _group("ZQ", "Quality 4K encode group"),
    _group("ZR", "Anime group", "Anime"),
)

# YTS publishes under several domains and is often only recognisable by indexer.
YTS_FORMAT = builtin(
    "group-yts",
    "YTS",
    "YTS/YIFY - popular micro encoder",
    FormatCategory.MICRO,
    ("Release Group", "Micro"),
    group("YTS", r"^YTS(\.MX|\.LT|\.AG)?$", required=False),
    title("YTS Title", r"\bYTS(\.MX|\.LT|\.AG)?\b", required=False),
    indexer("YTS Indexer", "YTS", required=False),
)

MICRO_GROUP_FORMATS = (
    _group("ETRG", "Micro encoder", "Micro"),
    _group("ETTV", "Micro encoder", "Micro"),
    _group("EZTV", "Micro encoder", "Micro"),
    _group("GalaxyRG", "Micro encoder", "Micro"),
    _group("ION10", "Micro encoder", "Micro"),
    _group("MeGusta", "Micro encoder", "Micro"),
    _group("PSA", "Micro encoder", "Micro"),
    _group("QxR", "Quality micro encoder", "Micro"),
    _group("RARBG", "Popular scene group", "Micro"),
    _group("TGx", "Micro encoder", "Micro"),
    _group("Tigole", "Quality micro encoder", "Micro"),
    _group("x0r", "Micro encoder", "Micro"),
    _group("YIFY", "Micro encoder", "Micro"),
    YTS_FORMAT,
)

LOW_QUALITY_FORMATS = (
    builtin(
        "lq-hardcoded-subs",
        "Hardcoded Subs",
        "Subtitles burned into the video",
        FormatCategory.LOW_QUALITY,
        ("Low Quality", "Subtitles"),
        title("Hardsub", r"\b(HC|HardSubs?|HCSubs?|KORSUBS?|SUBBED)\b"),
    ),
    builtin(
        "lq-line-audio",
        "LiNE Audio",
        "Audio taken from a cinema line feed",
        FormatCategory.LOW_QUALITY,
        ("Low Quality", "Audio"),
        title("LiNE", r"\b(?-i:LiNE)\b"),
    ),
    builtin(
        "lq-sample",
        "Sample",
        "Preview sample rather than the full release",
        FormatCategory.LOW_QUALITY,
        ("Low Quality",),
        title("Sample", r"\bSample\b"),
    ),
)

GROUP_FORMATS = RELEASE_GROUP_FORMATS + MICRO_GROUP_FORMATS + LOW_QUALITY_FORMATS
