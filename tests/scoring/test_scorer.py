"""Tests for release scoring, ranking and upgrade decisions."""

from __future__ import annotations

import logging
import math
from collections.abc import Iterator

import pytest

from reelscore.config import Settings
from reelscore.scoring.profiles import BANNED_SCORE, DEFAULT_PROFILES
from reelscore.scoring.scorer import (
    ReleaseScorer,
    compare_releases,
    debug_release,
    default_scorer,
    explain_score,
    filter_quality_releases,
    is_upgrade,
    parse_release,
    rank_releases,
    score_release,
    should_upgrade,
)
from reelscore.shared.enums import (
    Codec,
    ConditionType,
    FormatCategory,
    MediaType,
    Protocol,
    Resolution,
    Source,
)
from reelscore.shared.models import (
    CustomFormat,
    FormatCondition,
    ReleaseCandidate,
    ScoringProfile,
    SizeValidationContext,
)

GB = 1024**3
MB = 1024**2

RELEASES = {
    "4k-remux": "Movie.2024.2160p.UHD.BluRay.REMUX.DTS-HD.MA-GROUP",
    "4k-webdl": "Movie.2024.2160p.WEB-DL.DDP5.1.H.265-GROUP",
    "1080p-bluray": "Movie.2024.1080p.BluRay.x264.DTS-GROUP",
    "1080p-webdl": "Movie.2024.1080p.WEB-DL.DD5.1.H.264-GROUP",
    "720p-webdl": "Movie.2024.720p.WEB-DL.x264-GROUP",
    "720p-hdtv": "Movie.2024.720p.HDTV.x264-GROUP",
    "yts-1080p": "Movie.2024.1080p.BluRay.x264-YTS.MX",
    "yify-720p": "Movie.2024.720p.BluRay.x264-YIFY",
    "cam": "Movie.2024.CAM.x264-GROUP",
    "ts": "Movie.2024.TS.x264-GROUP",
    "hdts": "Movie.2024.HDTS.x264-GROUP",
    "screener": "Movie.2024.DVDScr.x264-GROUP",
    "telecine": "Movie.2024.TC.x264-GROUP",
    "telesync": "Movie.2024.TELESYNC.x264-GROUP",
    "hardsub": "Movie.2024.1080p.WEB-DL.x264.HardSub-GROUP",
    "dolby-vision": "Movie.2024.2160p.WEB-DL.DV.HDR.DDP5.1-GROUP",
    "hdr10": "Movie.2024.2160p.WEB-DL.HDR10.DDP5.1-GROUP",
    "hdr10plus": "Movie.2024.2160p.WEB-DL.HDR10Plus.DDP5.1-GROUP",
    "atmos": "Movie.2024.2160p.WEB-DL.DDP5.1.Atmos-GROUP",
    "truehd": "Movie.2024.2160p.BluRay.TrueHD.7.1-GROUP",
    "dts-x": "Movie.2024.2160p.BluRay.DTS-X.MA-GROUP",
}

BANNED = ["cam", "ts", "hdts", "screener", "telecine", "telesync"]
NEVER_BANNED = ["4k-remux", "4k-webdl", "1080p-bluray", "1080p-webdl", "720p-webdl", "yts-1080p", "yify-720p"]

TORRENT_PROFILES = [p for p in DEFAULT_PROFILES if p.id != "streamer"]

_profile_ids = [p.id for p in DEFAULT_PROFILES]
_torrent_ids = [p.id for p in TORRENT_PROFILES]


def _with(profile: ScoringProfile, **changes: object) -> ScoringProfile:
    return profile.model_copy(update={"id": "test", "name": "Test", "is_built_in": False, **changes})


# ---------------------------------------------------------------------------
# Every built-in profile
# ---------------------------------------------------------------------------


@pytest.mark.parametrize("profile", DEFAULT_PROFILES, ids=_profile_ids)
class TestAllProfiles:
    @pytest.mark.parametrize("key", BANNED)
    def test_bans(self, profile: ScoringProfile, key: str) -> None:
        result = score_release(RELEASES[key], profile)
        assert result.is_banned is True
        assert result.total_score == -math.inf
        assert result.meets_minimum is False

    @pytest.mark.parametrize("key", NEVER_BANNED)
    def test_never_banned(self, profile: ScoringProfile, key: str) -> None:
        assert score_release(RELEASES[key], profile).is_banned is False

    def test_results_are_valid(self, profile: ScoringProfile) -> None:
        for release in RELEASES.values():
            result = score_release(release, profile)
            assert result.profile == profile.name
            assert result.release_name == release
            if result.is_banned:
                assert result.total_score == -math.inf
                assert result.banned_reasons
            if result.meets_minimum:
                assert not result.is_rejected

    def test_deterministic(self, profile: ScoringProfile) -> None:
        for release in RELEASES.values():
            assert score_release(release, profile) == score_release(release, profile)

    def test_resolution_preference(self, profile: ScoringProfile) -> None:
        uhd = score_release(RELEASES["4k-webdl"], profile).breakdown.resolution.score
        fhd = score_release(RELEASES["1080p-webdl"], profile).breakdown.resolution.score
        hd = score_release(RELEASES["720p-webdl"], profile).breakdown.resolution.score
        if profile.id == "compact":
            assert fhd > uhd
        else:
            assert uhd >= fhd
        assert fhd >= hd

    def test_edge_case_titles(self, profile: ScoringProfile) -> None:
        assert score_release("", profile).is_banned is False
        assert score_release("Movie.2024-GROUP", profile).is_banned is False
        complex_name = "Movie.2024.PROPER.REPACK.2160p.UHD.BluRay.REMUX.HDR.DV.TrueHD.7.1.Atmos-GROUP"
        assert score_release(complex_name, profile).is_banned is False

    def test_oversized_movie(self, profile: ScoringProfile) -> None:
        ctx = SizeValidationContext(media_type=MediaType.MOVIE)
        result = score_release(RELEASES["1080p-bluray"], profile, file_size_bytes=50 * GB, size_context=ctx)
        if profile.movie_max_size_gb is not None and profile.movie_max_size_gb < 50:
            assert result.size_rejected is True
            assert result.meets_minimum is False
        else:
            assert result.size_rejected is False

    def test_season_pack_without_count_skips_size(self, profile: ScoringProfile) -> None:
        ctx = SizeValidationContext(media_type=MediaType.TV, is_season_pack=True, episode_count=0)
        result = score_release(RELEASES["1080p-webdl"], profile, file_size_bytes=10 * GB, size_context=ctx)
        assert result.size_rejected is False


# ---------------------------------------------------------------------------
# Scenarios
# ---------------------------------------------------------------------------


class TestScenarios:
    def test_micro_groups_valued_per_profile(
        self, quality_profile: ScoringProfile, compact_profile: ScoringProfile
    ) -> None:
        in_quality = score_release(RELEASES["yts-1080p"], quality_profile)
        in_compact = score_release(RELEASES["yts-1080p"], compact_profile)
        assert not in_quality.is_banned
        assert not in_compact.is_banned
        assert in_compact.total_score > in_quality.total_score

    def test_micro_group_in_release_group_bucket(self, quality_profile: ScoringProfile) -> None:
        result = score_release(RELEASES["yts-1080p"], quality_profile)
        assert result.breakdown.release_group_tier.formats == ("YTS",)
        assert result.breakdown.release_group_tier.score == -600

    def test_single_hdr_format_scored(self, quality_profile: ScoringProfile) -> None:
        result = score_release(RELEASES["dolby-vision"], quality_profile)
        assert result.breakdown.hdr.formats == ("Dolby Vision",)
        assert result.breakdown.hdr.score == 300
        hdr_ids = [s.format.id for s in result.matched_formats if s.format.category is FormatCategory.HDR]
        assert hdr_ids == ["hdr-dolby-vision"]

    def test_episode_upgrade(self, balanced_profile: ScoringProfile) -> None:
        decision = is_upgrade(
            "Show.S01E01.720p.WEB-DL.x264-GROUP", "Show.S01E01.1080p.WEB-DL.x264-GROUP", balanced_profile
        )
        assert decision.is_upgrade is True
        assert decision.improvement > 0

    def test_season_pack_average_size(self, balanced_profile: ScoringProfile) -> None:
        profile = _with(balanced_profile, episode_max_size_mb=800)
        pack = "Show.S01.1080p.WEB-DL.x264-GROUP"
        rejected = score_release(
            pack,
            profile,
            file_size_bytes=10 * GB,
            size_context=SizeValidationContext(media_type=MediaType.TV, is_season_pack=True, episode_count=10),
        )
        assert rejected.size_rejected is True
        assert rejected.size_rejection_reason == "Episode size 1024 MB per episode (avg) exceeds maximum 800 MB"

        skipped = score_release(
            pack,
            profile,
            file_size_bytes=10 * GB,
            size_context=SizeValidationContext(media_type=MediaType.TV, is_season_pack=True, episode_count=0),
        )
        assert skipped.size_rejected is False

    def test_protocol_restriction(self, balanced_profile: ScoringProfile) -> None:
        profile = _with(balanced_profile, allowed_protocols=(Protocol.USENET,))
        result = score_release(RELEASES["1080p-bluray"], profile, protocol=Protocol.TORRENT)
        assert result.protocol_rejected is True
        assert "torrent" in result.protocol_rejection_reason
        assert "usenet" in result.protocol_rejection_reason
        assert result.meets_minimum is False


# ---------------------------------------------------------------------------
# Validation gates
# ---------------------------------------------------------------------------


class TestSizeValidation:
    def test_movie_below_minimum(self, quality_profile: ScoringProfile) -> None:
        ctx = SizeValidationContext(media_type=MediaType.MOVIE)
        result = score_release(RELEASES["1080p-bluray"], quality_profile, file_size_bytes=GB // 2, size_context=ctx)
        assert result.size_rejection_reason == "Movie size 0.50 GB is below minimum 1 GB"

    def test_movie_above_maximum(self, balanced_profile: ScoringProfile) -> None:
        ctx = SizeValidationContext(media_type=MediaType.MOVIE)
        result = score_release(RELEASES["1080p-bluray"], balanced_profile, file_size_bytes=50 * GB, size_context=ctx)
        assert result.size_rejection_reason == "Movie size 50.00 GB exceeds maximum 40 GB"

    def test_episode_below_minimum(self, balanced_profile: ScoringProfile) -> None:
        ctx = SizeValidationContext(media_type=MediaType.TV)
        result = score_release(RELEASES["1080p-webdl"], balanced_profile, file_size_bytes=50 * MB, size_context=ctx)
        assert result.size_rejection_reason == "Episode size 50 MB is below minimum 100 MB"

    def test_within_limits(self, balanced_profile: ScoringProfile) -> None:
        ctx = SizeValidationContext(media_type=MediaType.TV, is_season_pack=True, episode_count=10)
        result = score_release(RELEASES["1080p-webdl"], balanced_profile, file_size_bytes=5 * GB, size_context=ctx)
        assert result.size_rejected is False
        assert result.size_rejection_reason is None

    def test_needs_both_size_and_context(self, balanced_profile: ScoringProfile) -> None:
        oversized = score_release(RELEASES["1080p-bluray"], balanced_profile, file_size_bytes=500 * GB)
        assert oversized.size_rejected is False
        ctx = SizeValidationContext(media_type=MediaType.MOVIE)
        assert score_release(RELEASES["1080p-bluray"], balanced_profile, size_context=ctx).size_rejected is False
        assert (
            score_release(RELEASES["1080p-bluray"], balanced_profile, file_size_bytes=0, size_context=ctx).size_rejected
            is False
        )


class TestProtocolValidation:
    def test_allowed_protocol(self, balanced_profile: ScoringProfile) -> None:
        profile = _with(balanced_profile, allowed_protocols=(Protocol.USENET,))
        result = score_release(RELEASES["1080p-bluray"], profile, protocol="usenet")
        assert result.protocol_rejected is False
        assert result.protocol_rejection_reason is None

    def test_no_restriction(self, balanced_profile: ScoringProfile) -> None:
        for protocol in Protocol:
            result = score_release(RELEASES["1080p-bluray"], balanced_profile, protocol=protocol)
            assert result.protocol_rejected is False

    def test_empty_allow_list_is_unrestricted(self, balanced_profile: ScoringProfile) -> None:
        profile = _with(balanced_profile, allowed_protocols=())
        assert score_release(RELEASES["1080p-bluray"], profile, protocol="torrent").protocol_rejected is False

    def test_streaming_rejected_by_download_only(self, balanced_profile: ScoringProfile) -> None:
        profile = _with(balanced_profile, allowed_protocols=(Protocol.TORRENT, Protocol.USENET))
        result = score_release(RELEASES["1080p-webdl"], profile, protocol=Protocol.STREAMING)
        assert result.protocol_rejected is True
        assert result.protocol_rejection_reason == (
            "Protocol 'streaming' not allowed. Profile accepts: torrent, usenet"
        )


class TestScoreRelease:
    def test_unscored_formats_stay_visible(self, empty_profile: ScoringProfile) -> None:
        result = score_release(RELEASES["1080p-bluray"], empty_profile)
        assert result.total_score == 0
        assert "1080p-bluray" in {s.format.id for s in result.matched_formats}
        assert result.breakdown.resolution.formats == ("1080p Bluray",)
        assert result.meets_minimum is True

    def test_min_score(self, balanced_profile: ScoringProfile) -> None:
        profile = _with(balanced_profile, min_score=10_000)
        result = score_release(RELEASES["1080p-bluray"], profile)
        assert result.is_rejected is False
        assert result.meets_minimum is False

    def test_other_category_counts_only_towards_total(self, empty_profile: ScoringProfile) -> None:
        profile = _with(empty_profile, format_scores={"multi-audio": 25})
        result = score_release("Movie.2024.MULTi.1080p.WEB-DL.x264-GROUP", profile)
        assert result.total_score == 25
        assert all(data.score == 0 for _, data in result.breakdown.items())

    def test_ban_overrides_positive_scores(self, balanced_profile: ScoringProfile) -> None:
        profile = _with(balanced_profile, format_scores={**balanced_profile.format_scores, "1080p-bluray": 10**9})
        result = score_release("Movie.2024.1080p.BluRay.Upscaled.x264-GROUP", profile)
        assert result.is_banned is True
        assert result.total_score == -math.inf
        assert result.banned_reasons == ("Upscaled",)
        assert result.breakdown.banned.score == BANNED_SCORE

    def test_identical_episodes_score_identically(self, balanced_profile: ScoringProfile) -> None:
        first = score_release("Show.S01E01.1080p.WEB-DL.x264-GROUP", balanced_profile)
        second = score_release("Show.S01E02.1080p.WEB-DL.x264-GROUP", balanced_profile)
        pack = score_release("Show.S01.1080p.WEB-DL.x264-GROUP", balanced_profile)
        assert first.total_score == second.total_score == pack.total_score > 0

    @pytest.mark.parametrize(
        "release",
        ["Cam.2018.1080p.NF.WEB-DL.DDP5.1.x264-NTG", "Show.S01E01.1080p.WEB-DL.DDP5.1.H.264-TS"],
    )
    def test_source_words_outside_quality_tags_do_not_ban(
        self, balanced_profile: ScoringProfile, release: str
    ) -> None:
        assert parse_release(release).source is Source.WEBDL
        result = score_release(release, balanced_profile)
        assert result.is_banned is False
        assert result.total_score > 0

    def test_precomputed_attributes(self, balanced_profile: ScoringProfile) -> None:
        attrs = parse_release(RELEASES["1080p-webdl"])
        assert score_release("renamed", balanced_profile, attributes=attrs).total_score == (
            score_release(RELEASES["1080p-webdl"], balanced_profile).total_score
        )

    def test_logs_details_when_enabled(
        self, balanced_profile: ScoringProfile, caplog: pytest.LogCaptureFixture
    ) -> None:
        scorer = ReleaseScorer(settings=Settings(log_scoring_details=True))
        with caplog.at_level(logging.DEBUG, logger="reelscore.scoring.scorer"):
            scorer.score(RELEASES["720p-webdl"], balanced_profile)
        assert f"scored '{RELEASES['720p-webdl']}' with balanced" in caplog.text


# ---------------------------------------------------------------------------
# Comparison, ranking, filtering
# ---------------------------------------------------------------------------


class TestCompare:
    def test_winner(self, balanced_profile: ScoringProfile) -> None:
        result = compare_releases(RELEASES["720p-webdl"], RELEASES["1080p-webdl"], balanced_profile)
        assert result.winner == "release2"
        assert result.score_difference == result.release2_score.total_score - result.release1_score.total_score

    def test_tie(self, balanced_profile: ScoringProfile) -> None:
        result = compare_releases(RELEASES["720p-webdl"], RELEASES["720p-webdl"], balanced_profile)
        assert result.winner == "tie"
        assert result.score_difference == 0

    def test_both_banned_tie(self, balanced_profile: ScoringProfile) -> None:
        result = compare_releases(RELEASES["cam"], RELEASES["screener"], balanced_profile)
        assert result.winner == "tie"
        assert result.score_difference == 0

    def test_banned_loses(self, balanced_profile: ScoringProfile) -> None:
        result = compare_releases(RELEASES["720p-hdtv"], RELEASES["cam"], balanced_profile)
        assert result.winner == "release1"
        assert result.score_difference == math.inf


class TestRank:
    def test_descending_with_rejected_last(self, balanced_profile: ScoringProfile) -> None:
        names = [RELEASES["720p-webdl"], RELEASES["cam"], RELEASES["1080p-webdl"], RELEASES["4k-webdl"]]
        ranked = rank_releases(names, balanced_profile)
        assert [r.release_name for r in ranked] == [
            RELEASES["4k-webdl"],
            RELEASES["1080p-webdl"],
            RELEASES["720p-webdl"],
            RELEASES["cam"],
        ]
        assert [r.rank for r in ranked] == [1, 2, 3, 4]

    def test_size_rejected_after_accepted(self, balanced_profile: ScoringProfile) -> None:
        huge = ReleaseCandidate(
            name=RELEASES["4k-remux"],
            size_bytes=80 * GB,
            size_context=SizeValidationContext(media_type=MediaType.MOVIE),
        )
        ranked = rank_releases([huge, RELEASES["cam"], RELEASES["720p-hdtv"]], balanced_profile)
        assert [r.release_name for r in ranked] == [RELEASES["720p-hdtv"], RELEASES["4k-remux"], RELEASES["cam"]]
        assert ranked[1].size_rejected is True

    def test_protocol_rejected_candidate(self, balanced_profile: ScoringProfile) -> None:
        profile = _with(balanced_profile, allowed_protocols=(Protocol.USENET,))
        torrent = ReleaseCandidate(name=RELEASES["4k-webdl"], protocol=Protocol.TORRENT)
        ranked = rank_releases([torrent, RELEASES["720p-webdl"]], profile)
        assert ranked[0].release_name == RELEASES["720p-webdl"]
        assert ranked[1].protocol_rejected is True

    def test_stable_for_ties(self, balanced_profile: ScoringProfile) -> None:
        names = ["Show.S01E02.1080p.WEB-DL.x264-GROUP", "Show.S01E01.1080p.WEB-DL.x264-GROUP"]
        assert [r.release_name for r in rank_releases(names, balanced_profile)] == names

    def test_ordering_invariant(self, balanced_profile: ScoringProfile) -> None:
        ranked = rank_releases(list(RELEASES.values()), balanced_profile)
        seen_rejected = False
        previous = math.inf
        for result in ranked:
            if result.is_rejected:
                seen_rejected = True
                continue
            assert not seen_rejected
            assert result.total_score <= previous
            previous = result.total_score

    def test_empty(self, balanced_profile: ScoringProfile) -> None:
        assert rank_releases([], balanced_profile) == []


class TestFilterQuality:
    def test_drops_banned(self, balanced_profile: ScoringProfile) -> None:
        names = [RELEASES["1080p-webdl"], RELEASES["cam"], RELEASES["720p-webdl"]]
        kept = filter_quality_releases(names, balanced_profile)
        assert [r.release_name for r in kept] == [RELEASES["1080p-webdl"], RELEASES["720p-webdl"]]

    def test_drops_below_minimum(self, balanced_profile: ScoringProfile) -> None:
        profile = _with(balanced_profile, min_score=600)
        kept = filter_quality_releases([RELEASES["1080p-webdl"], RELEASES["720p-webdl"]], profile)
        assert [r.release_name for r in kept] == [RELEASES["1080p-webdl"]]

    def test_drops_size_rejected(self, balanced_profile: ScoringProfile) -> None:
        huge = ReleaseCandidate(
            name=RELEASES["1080p-bluray"],
            size_bytes=50 * GB,
            size_context=SizeValidationContext(media_type=MediaType.MOVIE),
        )
        assert filter_quality_releases([huge], balanced_profile) == []


# ---------------------------------------------------------------------------
# Upgrades
# ---------------------------------------------------------------------------


@pytest.mark.parametrize("profile", TORRENT_PROFILES, ids=_torrent_ids)
class TestUpgradeAllTorrentProfiles:
    def test_720p_to_1080p(self, profile: ScoringProfile) -> None:
        decision = is_upgrade(RELEASES["720p-webdl"], RELEASES["1080p-webdl"], profile)
        assert decision.is_upgrade is True
        assert decision.improvement > 0

    def test_1080p_to_4k(self, profile: ScoringProfile) -> None:
        decision = is_upgrade(RELEASES["1080p-webdl"], RELEASES["4k-webdl"], profile)
        assert decision.is_upgrade is True
        assert decision.improvement > 0

    def test_downgrade(self, profile: ScoringProfile) -> None:
        decision = is_upgrade(RELEASES["1080p-webdl"], RELEASES["720p-webdl"], profile)
        assert decision.is_upgrade is False
        assert decision.improvement < 0

    def test_same_release(self, profile: ScoringProfile) -> None:
        decision = is_upgrade(RELEASES["1080p-webdl"], RELEASES["1080p-webdl"], profile)
        assert decision.is_upgrade is False
        assert decision.improvement == 0

    @pytest.mark.parametrize("key", ["cam", "screener"])
    def test_banned_candidate(self, profile: ScoringProfile, key: str) -> None:
        decision = is_upgrade(RELEASES["720p-webdl"], RELEASES[key], profile)
        assert decision.is_upgrade is False
        assert decision.improvement == 0
        assert decision.candidate.is_banned is True

    def test_minimum_improvement(self, profile: ScoringProfile) -> None:
        assert is_upgrade(RELEASES["720p-webdl"], RELEASES["1080p-webdl"], profile, minimum_improvement=0).is_upgrade
        assert not is_upgrade(
            RELEASES["720p-webdl"], RELEASES["1080p-webdl"], profile, minimum_improvement=999999
        ).is_upgrade

    def test_sidegrade(self, profile: ScoringProfile) -> None:
        same = RELEASES["1080p-webdl"]
        assert is_upgrade(same, same, profile, allow_sidegrade=False).is_upgrade is False
        assert is_upgrade(same, same, profile, allow_sidegrade=True).is_upgrade is True


class TestUpgradeGates:
    def test_candidate_below_minimum(self, balanced_profile: ScoringProfile) -> None:
        profile = _with(balanced_profile, min_score=10_000)
        decision = is_upgrade(RELEASES["720p-hdtv"], RELEASES["4k-webdl"], profile)
        assert decision.is_upgrade is False
        assert decision.improvement == 0
        assert decision.reason == "Candidate does not meet the profile minimum score"

    def test_size_rejected_candidate(self, balanced_profile: ScoringProfile) -> None:
        decision = is_upgrade(
            RELEASES["720p-webdl"],
            RELEASES["4k-webdl"],
            balanced_profile,
            candidate_size_bytes=100 * GB,
            size_context=SizeValidationContext(media_type=MediaType.MOVIE),
        )
        assert decision.is_upgrade is False
        assert decision.candidate.size_rejected is True
        assert decision.reason.startswith("Candidate rejected: Movie size")

    def test_banned_reason(self, balanced_profile: ScoringProfile) -> None:
        decision = is_upgrade(RELEASES["720p-webdl"], RELEASES["cam"], balanced_profile)
        assert decision.reason == "Candidate is banned: CAM"

    def test_upgrade_from_banned_existing(self, balanced_profile: ScoringProfile) -> None:
        decision = is_upgrade(RELEASES["cam"], RELEASES["720p-webdl"], balanced_profile)
        assert decision.is_upgrade is True
        assert decision.improvement == math.inf


class TestShouldUpgrade:
    def test_follows_profile_policy(self, balanced_profile: ScoringProfile) -> None:
        decision = should_upgrade(RELEASES["720p-webdl"], RELEASES["1080p-webdl"], balanced_profile)
        assert decision.is_upgrade is True

    def test_upgrades_disabled(self, balanced_profile: ScoringProfile) -> None:
        profile = _with(balanced_profile, upgrades_allowed=False)
        decision = should_upgrade(RELEASES["720p-webdl"], RELEASES["1080p-webdl"], profile)
        assert decision.is_upgrade is False
        assert "does not allow upgrades" in decision.reason

    def test_cutoff_reached(self, balanced_profile: ScoringProfile) -> None:
        profile = _with(balanced_profile, upgrade_until_score=500)
        decision = should_upgrade(RELEASES["720p-webdl"], RELEASES["1080p-webdl"], profile)
        assert decision.is_upgrade is False
        assert "cutoff" in decision.reason

    def test_min_score_increment(self, balanced_profile: ScoringProfile) -> None:
        profile = _with(balanced_profile, min_score_increment=10_000)
        assert should_upgrade(RELEASES["720p-webdl"], RELEASES["1080p-webdl"], profile).is_upgrade is False

    def test_explicit_minimum_wins(self, balanced_profile: ScoringProfile) -> None:
        profile = _with(balanced_profile, min_score_increment=10_000)
        decision = should_upgrade(RELEASES["720p-webdl"], RELEASES["1080p-webdl"], profile, minimum_improvement=0)
        assert decision.is_upgrade is True


# ---------------------------------------------------------------------------
# Explain / debug
# ---------------------------------------------------------------------------


def _custom_scorer() -> ReleaseScorer:
    formats = [
        CustomFormat(
            id="res-1080",
            name="1080p",
            category=FormatCategory.RESOLUTION,
            conditions=(
                FormatCondition(name="1080p", type=ConditionType.RESOLUTION, resolution=Resolution.FHD_1080P),
            ),
        ),
        CustomFormat(
            id="x264",
            name="x264",
            category=FormatCategory.CODEC,
            conditions=(FormatCondition(name="x264", type=ConditionType.CODEC, codec=Codec.H264),),
        ),
        CustomFormat(
            id="grp",
            name="Group",
            category=FormatCategory.MICRO,
            conditions=(FormatCondition(name="grp", type=ConditionType.RELEASE_GROUP, pattern="^GROUP$"),),
        ),
        CustomFormat(
            id="no-cam",
            name="CAM",
            category=FormatCategory.BANNED,
            conditions=(FormatCondition(name="cam", type=ConditionType.SOURCE, source=Source.CAM),),
        ),
    ]
    return ReleaseScorer(formats=formats, settings=Settings())


_CUSTOM_PROFILE = ScoringProfile(
    id="custom",
    name="Test",
    format_scores={"res-1080": 100, "x264": 10, "grp": -30, "no-cam": BANNED_SCORE},
)


class TestExplainScore:
    def test_breakdown_text(self) -> None:
        result = _custom_scorer().score("Movie.2024.1080p.BluRay.x264-GROUP", _CUSTOM_PROFILE)
        assert explain_score(result) == "\n".join(
            [
                "Release: Movie.2024.1080p.BluRay.x264-GROUP",
                "Profile: Test",
                "Total Score: 80",
                "",
                "Score Breakdown:",
                "  resolution: +100 (1080p)",
                "  codec: +10 (x264)",
                "  release_group_tier: -30 (Group)",
                "",
                "Meets Minimum: Yes",
            ]
        )

    def test_banned_text(self) -> None:
        result = _custom_scorer().score("Movie.2024.CAM.x264-GROUP", _CUSTOM_PROFILE)
        text = explain_score(result)
        assert "Total Score: -inf" in text
        assert "BANNED\nReasons: CAM\n" in text
        assert "  banned: -999999 (CAM)" in text
        assert text.endswith("Meets Minimum: No")

    def test_rejection_blocks(self, balanced_profile: ScoringProfile) -> None:
        profile = _with(balanced_profile, allowed_protocols=(Protocol.USENET,))
        result = score_release(
            RELEASES["1080p-bluray"],
            profile,
            file_size_bytes=50 * GB,
            size_context=SizeValidationContext(media_type=MediaType.MOVIE),
            protocol=Protocol.TORRENT,
        )
        text = explain_score(result)
        assert "SIZE REJECTED\nReason: Movie size 50.00 GB exceeds maximum 40 GB\n" in text
        assert "PROTOCOL REJECTED\nReason: Protocol 'torrent' not allowed. Profile accepts: usenet\n" in text

    def test_zero_scored_bucket_listed(self, empty_profile: ScoringProfile) -> None:
        text = explain_score(score_release(RELEASES["1080p-bluray"], empty_profile))
        assert "  resolution: +0 (1080p Bluray)" in text


class TestDebug:
    def test_condition_trace(self) -> None:
        report = debug_release("Movie.2024.1080p.BluRay.x264-GROUP")
        by_id = {f.id: f for f in report.matched_formats}
        bluray = by_id["1080p-bluray"]
        assert bluray.category is FormatCategory.RESOLUTION
        not_remux = next(c for c in bluray.conditions if c.name == "Not Remux")
        assert not_remux.matched is True
        assert not_remux.negate is True
        assert not_remux.required is True
        assert report.attributes.source is Source.BLURAY

    def test_debug_is_before_exclusivity(self) -> None:
        report = debug_release(RELEASES["dolby-vision"])
        hdr_ids = {f.id for f in report.matched_formats if f.category is FormatCategory.HDR}
        assert {"hdr-dolby-vision", "hdr-hdr10", "hdr-generic"} <= hdr_ids

    def test_custom_scorer_matched_ids(self) -> None:
        assert _custom_scorer().matched_format_ids("Movie.2024.1080p.BluRay.x264-GROUP") == ["res-1080", "x264", "grp"]


class TestDefaultScorer:
    @pytest.fixture(autouse=True)
    def _rebuild_default(self) -> Iterator[None]:
        default_scorer.cache_clear()
        yield
        default_scorer.cache_clear()

    def test_shared_instance(self) -> None:
        assert default_scorer() is default_scorer()

    def test_settings_reloaded_after_cache_clear(
        self, balanced_profile: ScoringProfile, monkeypatch: pytest.MonkeyPatch, caplog: pytest.LogCaptureFixture
    ) -> None:
        monkeypatch.setenv("REELSCORE_LOG_SCORING_DETAILS", "false")
        with caplog.at_level(logging.DEBUG, logger="reelscore.scoring.scorer"):
            score_release(RELEASES["720p-webdl"], balanced_profile)
            assert "scored '" not in caplog.text

            monkeypatch.setenv("REELSCORE_LOG_SCORING_DETAILS", "true")
            score_release(RELEASES["720p-webdl"], balanced_profile)
            assert "scored '" not in caplog.text

            default_scorer.cache_clear()
            score_release(RELEASES["720p-webdl"], balanced_profile)
        assert f"scored '{RELEASES['720p-webdl']}' with balanced" in caplog.text
