"""Audio codec formats."""

from __future__ import annotations

from reelscore.scoring.formats.conditions import audio, builtin, title
from reelscore.shared.enums import AudioFormat, FormatCategory

_A = FormatCategory.AUDIO

AUDIO_FORMATS = (
    builtin(
        "audio-atmos",
        "Atmos",
        "Dolby Atmos object audio, usually carried on TrueHD or DD+",
        _A,
        ("Audio", "Lossless", "Object"),
        audio(AudioFormat.ATMOS),
    ),
    builtin("audio-truehd", "TrueHD", "Dolby TrueHD", _A, ("Audio", "Lossless"), audio(AudioFormat.TRUEHD)),
    builtin("audio-dts-x", "DTS:X", "DTS:X object audio", _A, ("Audio", "Object"), audio(AudioFormat.DTS_X)),
    builtin("audio-dts-hdma", "DTS-HD MA", "DTS-HD MA", _A, ("Audio", "Lossless"), audio(AudioFormat.DTS_HDMA)),
    builtin("audio-dts-hd", "DTS-HD", "DTS-HD High Resolution", _A, ("Audio",), audio(AudioFormat.DTS_HD)),
    builtin("audio-dts", "DTS", "DTS core", _A, ("Audio",), audio(AudioFormat.DTS)),
    builtin("audio-ddplus", "DD+", "Dolby Digital Plus / E-AC3", _A, ("Audio",), audio(AudioFormat.DDPLUS)),
    builtin("audio-dd", "DD", "Dolby Digital / AC3", _A, ("Audio",), audio(AudioFormat.DD)),
    builtin("audio-flac", "FLAC", "Free Lossless Audio Codec", _A, ("Audio", "Lossless"), audio(AudioFormat.FLAC)),
    builtin("audio-pcm", "PCM", "Uncompressed PCM", _A, ("Audio", "Lossless"), title("PCM", r"\bL?PCM\b")),
    builtin("audio-aac", "AAC", "Advanced Audio Coding", _A, ("Audio", "Lossy"), audio(AudioFormat.AAC)),
    builtin("audio-mp3", "MP3", "MPEG-1 Layer III", _A, ("Audio", "Lossy"), audio(AudioFormat.MP3)),
    builtin("audio-opus", "Opus", "Opus audio", _A, ("Audio", "Lossy", "Efficient"), audio(AudioFormat.OPUS)),
)
