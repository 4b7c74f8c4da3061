"""Release scoring: match formats, weigh them with a profile, apply gates."""

from __future__ import annotations

import functools
import logging
import math
from collections.abc import Iterable, Sequence

from reelscore.config import Settings, get_settings
from reelscore.parser.interfaces import ReleaseParser
from reelscore.parser.release_parser import RegexReleaseParser
from reelscore.scoring.exclusivity import apply_mutual_exclusivity
from reelscore.scoring.extractor import parse_release as _parse_release
from reelscore.scoring.formats.catalog import ALL_FORMATS
from reelscore.scoring.matcher import match_formats
from reelscore.scoring.profiles import BANNED_SCORE
from reelscore.shared.enums import FormatCategory, MediaType, Protocol
from reelscore.shared.models import (
    CategoryScore,
    ComparisonResult,
    CustomFormat,
    DebugCondition,
    DebugFormat,
    DebugReport,
    RankedResult,
    ReleaseAttributes,
    ReleaseCandidate,
    ScoreBreakdown,
    ScoredFormat,
    ScoringProfile,
    ScoringResult,
    SizeValidationContext,
    UpgradeDecision,
)

logger = logging.getLogger(__name__)

_BYTES_PER_GB = 1024**3
_BYTES_PER_MB = 1024**2

# Format category -> breakdown bucket. Categories without a bucket only count towards the total.
_BUCKETS: dict[FormatCategory, str] = {
    FormatCategory.RESOLUTION: "resolution",
    FormatCategory.SOURCE: "source",
    FormatCategory.CODEC: "codec",
    FormatCategory.AUDIO: "audio",
    FormatCategory.HDR: "hdr",
    FormatCategory.STREAMING: "streaming",
    FormatCategory.RELEASE_GROUP_TIER: "release_group_tier",
    FormatCategory.MICRO: "release_group_tier",
    FormatCategory.LOW_QUALITY: "release_group_tier",
    FormatCategory.BANNED: "banned",
    FormatCategory.ENHANCEMENT: "enhancement",
}


def _candidate(release: str | ReleaseCandidate) -> ReleaseCandidate:
    return release if isinstance(release, ReleaseCandidate) else ReleaseCandidate(name=release)


def _format_score(value: float) -> str:
    if math.isinf(value):
        return "-inf" if value < 0 else "inf"
    return str(int(value)) if float(value).is_integer() else str(value)


class ReleaseScorer:
    """Score releases against profiles using a format library.

    Stateless apart from its configuration; safe to share between threads.
    """

    def __init__(
        self,
        formats: Sequence[CustomFormat] | None = None,
        parser: ReleaseParser | None = None,
        settings: Settings | None = None,
    ) -> None:
        self._formats: tuple[CustomFormat, ...] = tuple(formats) if formats is not None else ALL_FORMATS
        self._parser = parser or RegexReleaseParser()
        self._settings = settings or get_settings()

    @property
    def formats(self) -> tuple[CustomFormat, ...]:
        return self._formats

    def parse(self, release_name: str) -> ReleaseAttributes:
        return _parse_release(release_name, parser=self._parser)

    # ── Single release ──────────────────────────────────────────

    def score(
        self,
        release_name: str,
        profile: ScoringProfile,
        attributes: ReleaseAttributes | None = None,
        file_size_bytes: int | None = None,
        size_context: SizeValidationContext | None = None,
        protocol: Protocol | str | None = None,
    ) -> ScoringResult:
        """Score one release.

        Args:
            release_name: Raw release title.
            profile: Profile supplying weights and gates.
            attributes: Pre-parsed attributes; parsed from the title when omitted.
            file_size_bytes: Release size. Size gates only run with a context too.
            size_context: Movie or TV, and season pack information.
            protocol: Delivery protocol, checked against the profile allow-list.

        Returns:
            ScoringResult. A banned release has ``total_score == -inf``.
        """
        attrs = attributes if attributes is not None else self.parse(release_name)

        matched = apply_mutual_exclusivity(match_formats(attrs, self._formats), profile)
        scored = [
            ScoredFormat(format=m.format, condition_results=m.condition_results, score=profile.score_for(m.format.id))
            for m in matched
        ]

        breakdown = self._breakdown(scored)
        total: float = sum(s.score for s in scored)

        banned = [s.format.name for s in scored if s.score <= BANNED_SCORE]
        if banned:
            total = -math.inf

        size_reason = self._size_rejection(profile, file_size_bytes, size_context)
        protocol_reason = self._protocol_rejection(profile, protocol)

        meets_minimum = not banned and size_reason is None and protocol_reason is None and total >= profile.min_score

        result = ScoringResult(
            release_name=release_name,
            profile=profile.name,
            total_score=total,
            matched_formats=tuple(scored),
            breakdown=breakdown,
            meets_minimum=meets_minimum,
            is_banned=bool(banned),
            banned_reasons=tuple(banned),
            size_rejected=size_reason is not None,
            size_rejection_reason=size_reason,
            protocol_rejected=protocol_reason is not None,
            protocol_rejection_reason=protocol_reason,
        )
        if self._settings.log_scoring_details:
            logger.debug(
                "scored '%s' with %s: total=%s formats=%s banned=%s size=%s protocol=%s",
                release_name,
                profile.id,
                _format_score(total),
                ",".join(s.format.id for s in scored),
                result.is_banned,
                result.size_rejected,
                result.protocol_rejected,
            )
        return result

    @staticmethod
    def _breakdown(scored: Iterable[ScoredFormat]) -> ScoreBreakdown:
        totals: dict[str, int] = {}
        names: dict[str, list[str]] = {}
        for item in scored:
            bucket = _BUCKETS.get(item.format.category)
            if bucket is None:
                continue
            totals[bucket] = totals.get(bucket, 0) + item.score
            names.setdefault(bucket, []).append(item.format.name)
        return ScoreBreakdown(
            **{bucket: CategoryScore(score=totals[bucket], formats=tuple(names[bucket])) for bucket in totals}
        )

    @staticmethod
    def _size_rejection(
        profile: ScoringProfile,
        file_size_bytes: int | None,
        context: SizeValidationContext | None,
    ) -> str | None:
        if not file_size_bytes or file_size_bytes <= 0 or context is None:
            return None

        if context.media_type is MediaType.MOVIE:
            size_gb = file_size_bytes / _BYTES_PER_GB
            if profile.movie_min_size_gb is not None and size_gb < profile.movie_min_size_gb:
                return f"Movie size {size_gb:.2f} GB is below minimum {profile.movie_min_size_gb:g} GB"
            if profile.movie_max_size_gb is not None and size_gb > profile.movie_max_size_gb:
                return f"Movie size {size_gb:.2f} GB exceeds maximum {profile.movie_max_size_gb:g} GB"
            return None

        size_bytes = file_size_bytes
        if context.is_season_pack:
            # Unknown episode count: nothing to average over, let it through.
            if not context.episode_count or context.episode_count <= 0:
                return None
            size_bytes = file_size_bytes / context.episode_count

        size_mb = size_bytes / _BYTES_PER_MB
        label = " per episode (avg)" if context.is_season_pack else ""
        if profile.episode_min_size_mb is not None and size_mb < profile.episode_min_size_mb:
            return f"Episode size {size_mb:.0f} MB{label} is below minimum {profile.episode_min_size_mb:g} MB"
        if profile.episode_max_size_mb is not None and size_mb > profile.episode_max_size_mb:
            return f"Episode size {size_mb:.0f} MB{label} exceeds maximum {profile.episode_max_size_mb:g} MB"
        return None

    @staticmethod
    def _protocol_rejection(profile: ScoringProfile, protocol: Protocol | str | None) -> str | None:
        if protocol is None or not profile.allowed_protocols:
            return None
        value = protocol.value if isinstance(protocol, Protocol) else str(protocol)
        allowed = [p.value for p in profile.allowed_protocols]
        if value in allowed:
            return None
        return f"Protocol '{value}' not allowed. Profile accepts: {', '.join(allowed)}"

    # ── Pairs and batches ───────────────────────────────────────

    def compare(
        self,
        release1: str,
        release2: str,
        profile: ScoringProfile,
        attrs1: ReleaseAttributes | None = None,
        attrs2: ReleaseAttributes | None = None,
        size1_bytes: int | None = None,
        size2_bytes: int | None = None,
    ) -> ComparisonResult:
        first = self.score(release1, profile, attrs1, size1_bytes)
        second = self.score(release2, profile, attrs2, size2_bytes)

        if first.total_score > second.total_score:
            winner = "release1"
        elif second.total_score > first.total_score:
            winner = "release2"
        else:
            winner = "tie"

        # inf - inf is nan; equal scores, banned or not, differ by nothing.
        difference = 0.0 if winner == "tie" else abs(first.total_score - second.total_score)
        return ComparisonResult(
            winner=winner, release1_score=first, release2_score=second, score_difference=difference
        )

    def _score_candidate(self, release: str | ReleaseCandidate, profile: ScoringProfile) -> ScoringResult:
        c = _candidate(release)
        return self.score(c.name, profile, c.attributes, c.size_bytes, c.size_context, c.protocol)

    def rank(self, releases: Iterable[str | ReleaseCandidate], profile: ScoringProfile) -> list[RankedResult]:
        """Order releases best first. Rejected releases always sort after accepted ones.

        The sort is stable, so equal scores keep their input order.
        """
        scored = [self._score_candidate(r, profile) for r in releases]
        scored.sort(key=lambda r: (r.is_rejected, -r.total_score))
        return [RankedResult(**dict(r), rank=i) for i, r in enumerate(scored, start=1)]

    def filter_quality(
        self, releases: Iterable[str | ReleaseCandidate], profile: ScoringProfile
    ) -> list[ScoringResult]:
        """Keep only releases that pass every gate and meet the profile minimum."""
        results = (self._score_candidate(r, profile) for r in releases)
        return [r for r in results if r.meets_minimum and not r.is_rejected]

    # ── Upgrades ────────────────────────────────────────────────

    def is_upgrade(
        self,
        existing_release: str,
        candidate_release: str,
        profile: ScoringProfile,
        *,
        minimum_improvement: float = 0,
        allow_sidegrade: bool = False,
        existing_attrs: ReleaseAttributes | None = None,
        candidate_attrs: ReleaseAttributes | None = None,
        existing_size_bytes: int | None = None,
        candidate_size_bytes: int | None = None,
        size_context: SizeValidationContext | None = None,
        protocol: Protocol | str | None = None,
    ) -> UpgradeDecision:
        """Decide whether ``candidate_release`` should replace ``existing_release``.

        A rejected candidate (banned, size, protocol or under the minimum) is
        never an upgrade, whatever its score. Otherwise the improvement must
        exceed ``minimum_improvement``, or equal it when sidegrades are allowed.
        """
        existing = self.score(existing_release, profile, existing_attrs, existing_size_bytes, size_context)
        candidate = self.score(
            candidate_release, profile, candidate_attrs, candidate_size_bytes, size_context, protocol
        )

        if candidate.is_rejected or not candidate.meets_minimum:
            return UpgradeDecision(
                is_upgrade=False,
                improvement=0,
                existing=existing,
                candidate=candidate,
                reason=self._rejection_reason(candidate),
            )

        improvement = candidate.total_score - existing.total_score
        if allow_sidegrade:
            upgrade = improvement >= minimum_improvement
        else:
            upgrade = improvement > minimum_improvement

        if upgrade:
            reason = f"Score improves by {_format_score(improvement)}"
        else:
            reason = (
                f"Improvement {_format_score(improvement)} does not reach the required "
                f"{_format_score(minimum_improvement)}"
            )
        return UpgradeDecision(
            is_upgrade=upgrade, improvement=improvement, existing=existing, candidate=candidate, reason=reason
        )

    def should_upgrade(
        self,
        existing_release: str,
        candidate_release: str,
        profile: ScoringProfile,
        **kwargs,
    ) -> UpgradeDecision:
        """Apply the profile's own upgrade policy on top of :meth:`is_upgrade`.

        Honours ``upgrades_allowed``, stops once the existing release reaches
        ``upgrade_until_score`` and requires ``min_score_increment``.
        """
        kwargs.setdefault("minimum_improvement", profile.min_score_increment)
        decision = self.is_upgrade(existing_release, candidate_release, profile, **kwargs)
        if not decision.is_upgrade:
            return decision

        if not profile.upgrades_allowed:
            reason = f"Profile '{profile.name}' does not allow upgrades"
        elif (
            profile.upgrade_until_score is not None
            and decision.existing.total_score >= profile.upgrade_until_score
        ):
            reason = (
                f"Existing score {_format_score(decision.existing.total_score)} already meets the cutoff "
                f"{_format_score(profile.upgrade_until_score)}"
            )
        else:
            return decision
        return decision.model_copy(update={"is_upgrade": False, "reason": reason})

    @staticmethod
    def _rejection_reason(result: ScoringResult) -> str:
        if result.is_banned:
            return f"Candidate is banned: {', '.join(result.banned_reasons)}"
        if result.size_rejected:
            return f"Candidate rejected: {result.size_rejection_reason}"
        if result.protocol_rejected:
            return f"Candidate rejected: {result.protocol_rejection_reason}"
        return "Candidate does not meet the profile minimum score"

    # ── Explain / debug ─────────────────────────────────────────

    def matched_format_ids(self, release_name: str, attributes: ReleaseAttributes | None = None) -> list[str]:
        """Ids of every format that matches, before exclusivity is applied."""
        attrs = attributes if attributes is not None else self.parse(release_name)
        return [m.format.id for m in match_formats(attrs, self._formats)]

    def debug(self, release_name: str, attributes: ReleaseAttributes | None = None) -> DebugReport:
        attrs = attributes if attributes is not None else self.parse(release_name)
        matched = match_formats(attrs, self._formats)
        return DebugReport(
            release_name=release_name,
            attributes=attrs,
            matched_formats=tuple(
                DebugFormat(
                    id=m.format.id,
                    name=m.format.name,
                    category=m.format.category,
                    conditions=tuple(
                        DebugCondition(
                            name=r.condition.name,
                            type=r.condition.type,
                            matched=r.matches,
                            required=r.condition.required,
                            negate=r.condition.negate,
                        )
                        for r in m.condition_results
                    ),
                )
                for m in matched
            ),
        )


def explain_score(result: ScoringResult) -> str:
    """Render a result as the multi-line report shown to operators."""
    lines = [
        f"Release: {result.release_name}",
        f"Profile: {result.profile}",
        f"Total Score: {_format_score(result.total_score)}",
        "",
    ]
    if result.is_banned:
        lines += ["BANNED", f"Reasons: {', '.join(result.banned_reasons)}", ""]
    if result.size_rejected:
        lines += ["SIZE REJECTED", f"Reason: {result.size_rejection_reason}", ""]
    if result.protocol_rejected:
        lines += ["PROTOCOL REJECTED", f"Reason: {result.protocol_rejection_reason}", ""]

    lines.append("Score Breakdown:")
    for bucket, data in result.breakdown.items():
        if not data.formats:
            continue
        sign = "+" if data.score >= 0 else ""
        lines.append(f"  {bucket}: {sign}{data.score} ({', '.join(data.formats)})")

    lines += ["", f"Meets Minimum: {'Yes' if result.meets_minimum else 'No'}"]
    return "\n".join(lines)


# ── Module-level API bound to the built-in library ──────────────


@functools.lru_cache(maxsize=1)
def default_scorer() -> ReleaseScorer:
    """Shared scorer over the built-in format library.

    Settings are read once, on the first call, and kept for the life of the
    process. After changing the environment call ``default_scorer.cache_clear()``,
    or build a ``ReleaseScorer`` with explicit settings.
    """
    return ReleaseScorer()


def parse_release(release_name: str) -> ReleaseAttributes:
    return default_scorer().parse(release_name)


def score_release(
    release_name: str,
    profile: ScoringProfile,
    attributes: ReleaseAttributes | None = None,
    file_size_bytes: int | None = None,
    size_context: SizeValidationContext | None = None,
    protocol: Protocol | str | None = None,
) -> ScoringResult:
    return default_scorer().score(release_name, profile, attributes, file_size_bytes, size_context, protocol)


def compare_releases(release1: str, release2: str, profile: ScoringProfile, **kwargs) -> ComparisonResult:
    return default_scorer().compare(release1, release2, profile, **kwargs)


def rank_releases(releases: Iterable[str | ReleaseCandidate], profile: ScoringProfile) -> list[RankedResult]:
    return default_scorer().rank(releases, profile)


def filter_quality_releases(
    releases: Iterable[str | ReleaseCandidate], profile: ScoringProfile
) -> list[ScoringResult]:
    return default_scorer().filter_quality(releases, profile)


def is_upgrade(existing_release: str, candidate_release: str, profile: ScoringProfile, **kwargs) -> UpgradeDecision:
    return default_scorer().is_upgrade(existing_release, candidate_release, profile, **kwargs)


def should_upgrade(
    existing_release: str, candidate_release: str, profile: ScoringProfile, **kwargs
) -> UpgradeDecision:
    return default_scorer().should_upgrade(existing_release, candidate_release, profile, **kwargs)


def get_matched_format_ids(release_name: str, attributes: ReleaseAttributes | None = None) -> list[str]:
    return default_scorer().matched_format_ids(release_name, attributes)


def debug_release(release_name: str, attributes: ReleaseAttributes | None = None) -> DebugReport:
    return default_scorer().debug(release_name, attributes)
