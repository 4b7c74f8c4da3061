"""Shared pytest fixtures for the reelscore test suite."""

from __future__ import annotations

from collections.abc import Iterator

import pytest

from reelscore.config import Settings
from reelscore.scoring.matcher import clear_pattern_cache
from reelscore.scoring.profiles import BALANCED, COMPACT, QUALITY, STREAMER
from reelscore.shared.enums import AudioFormat, Codec, HdrFormat, Resolution, Source
from reelscore.shared.models import ReleaseAttributes, ScoringProfile


@pytest.fixture()
def settings() -> Settings:
    """Return a Settings instance with test defaults."""
    return Settings(
        default_profile_id="balanced",
        custom_formats_enabled=True,
        log_scoring_details=True,
    )


@pytest.fixture(autouse=True)
def _fresh_pattern_cache() -> Iterator[None]:
    clear_pattern_cache()
    yield
    clear_pattern_cache()


@pytest.fixture()
def quality_profile() -> ScoringProfile:
    return QUALITY


@pytest.fixture()
def balanced_profile() -> ScoringProfile:
    return BALANCED


@pytest.fixture()
def compact_profile() -> ScoringProfile:
    return COMPACT


@pytest.fixture()
def streamer_profile() -> ScoringProfile:
    return STREAMER


@pytest.fixture()
def sample_attributes() -> ReleaseAttributes:
    return ReleaseAttributes(
        title="Movie.2024.2160p.UHD.BluRay.REMUX.HDR10.TrueHD.Atmos.7.1-FraMeSToR",
        clean_title="Movie",
        year=2024,
        resolution=Resolution.UHD_2160P,
        source=Source.REMUX,
        codec=Codec.H265,
        hdr=HdrFormat.HDR10,
        audio=AudioFormat.TRUEHD,
        release_group="FraMeSToR",
        is_remux=True,
        languages=frozenset({"english"}),
    )


@pytest.fixture()
def empty_profile() -> ScoringProfile:
    """A profile that scores nothing, so only the gates decide."""
    return ScoringProfile(id="empty", name="Empty")
