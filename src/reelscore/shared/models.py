"""Frozen Pydantic domain models shared by all modules."""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType
from typing import Literal

from pydantic import BaseModel, Field, field_serializer, field_validator, model_validator

from reelscore.shared.enums import (
    AudioFormat,
    Codec,
    ConditionType,
    FormatCategory,
    HdrFormat,
    MediaType,
    Protocol,
    ReleaseFlag,
    Resolution,
    Source,
)

# Condition type -> attribute holding its payload. hdr is absent: None is a valid payload there.
_PAYLOAD_FIELDS: dict[ConditionType, str] = {
    ConditionType.RESOLUTION: "resolution",
    ConditionType.SOURCE: "source",
    ConditionType.RELEASE_TITLE: "pattern",
    ConditionType.RELEASE_GROUP: "pattern",
    ConditionType.CODEC: "codec",
    ConditionType.AUDIO: "audio",
    ConditionType.STREAMING_SERVICE: "streaming_service",
    ConditionType.FLAG: "flag",
    ConditionType.INDEXER: "indexer",
}


# ── Parsing ─────────────────────────────────────────────────────


class ParsedRelease(BaseModel):
    """Raw tokens recognised in a release title, before normalisation."""

    model_config = {"frozen": True}

    original_title: str
    clean_title: str = ""
    year: int | None = None
    season: int | None = None
    episodes: tuple[int, ...] = ()
    is_season_pack: bool = False
    resolution: str | None = None
    sources: tuple[str, ...] = ()
    codec: str | None = None
    audio: tuple[str, ...] = ()
    hdr: tuple[str, ...] = ()
    release_group: str | None = None
    streaming_service: str | None = None
    is_repack: bool = False
    is_proper: bool = False
    is_3d: bool = False
    languages: frozenset[str] = frozenset()


class ReleaseAttributes(BaseModel):
    """Normalised attributes of a single release, the input to format matching."""

    model_config = {"frozen": True}

    title: str
    clean_title: str = ""
    year: int | None = None
    resolution: Resolution = Resolution.UNKNOWN
    source: Source = Source.UNKNOWN
    codec: Codec = Codec.UNKNOWN
    hdr: HdrFormat | None = None
    audio: AudioFormat = AudioFormat.UNKNOWN
    release_group: str | None = None
    streaming_service: str | None = None
    is_remux: bool = False
    is_repack: bool = False
    is_proper: bool = False
    is_3d: bool = False
    languages: frozenset[str] = frozenset()
    indexer: str | None = None


# ── Format library ──────────────────────────────────────────────


class FormatCondition(BaseModel):
    """A single predicate over release attributes."""

    model_config = {"frozen": True}

    name: str
    type: ConditionType
    required: bool = True
    negate: bool = False

    pattern: str | None = None
    resolution: Resolution | None = None
    source: Source | None = None
    codec: Codec | None = None
    audio: AudioFormat | None = None
    hdr: HdrFormat | Literal["sdr"] | None = None
    streaming_service: str | None = None
    flag: ReleaseFlag | None = None
    indexer: str | None = None

    @model_validator(mode="after")
    def _check_payload(self) -> FormatCondition:
        field = _PAYLOAD_FIELDS.get(self.type)
        if field is not None and getattr(self, field) is None:
            raise ValueError(f"condition '{self.name}' of type {self.type.value} requires '{field}'")
        return self


class CustomFormat(BaseModel):
    """Named, declarative detection rule. Formats detect; profiles score."""

    model_config = {"frozen": True}

    id: str = Field(min_length=1)
    name: str = Field(min_length=1)
    description: str = ""
    category: FormatCategory = FormatCategory.OTHER
    tags: tuple[str, ...] = ()
    conditions: tuple[FormatCondition, ...] = ()
    enabled: bool = True
    is_built_in: bool = False


class ScoringProfile(BaseModel):
    """Score weights, thresholds and gates applied to matched formats."""

    model_config = {"frozen": True}

    id: str = Field(min_length=1)
    name: str = Field(min_length=1)
    description: str = ""
    tags: tuple[str, ...] = ()
    format_scores: Mapping[str, int] = Field(default_factory=dict, validate_default=True)
    min_score: float = 0
    upgrade_until_score: float | None = None
    min_score_increment: float = 0
    upgrades_allowed: bool = True
    movie_min_size_gb: float | None = None
    movie_max_size_gb: float | None = None
    episode_min_size_mb: float | None = None
    episode_max_size_mb: float | None = None
    allowed_protocols: tuple[Protocol, ...] | None = None
    is_built_in: bool = False

    @field_validator("format_scores", mode="after")
    @classmethod
    def _freeze_scores(cls, value: Mapping[str, int]) -> Mapping[str, int]:
        # Read-only view over a private copy.
        return MappingProxyType(dict(value))

    @field_serializer("format_scores")
    def _dump_scores(self, value: Mapping[str, int]) -> dict[str, int]:
        return dict(value)

    def score_for(self, format_id: str) -> int:
        """Score assigned to a format id; unlisted formats score zero."""
        return self.format_scores.get(format_id, 0)


class SizeValidationContext(BaseModel):
    """Caller-supplied context enabling size validation."""

    model_config = {"frozen": True}

    media_type: MediaType
    is_season_pack: bool = False
    episode_count: int | None = None


class ReleaseCandidate(BaseModel):
    """One entry of a batch passed to ranking or filtering."""

    model_config = {"frozen": True}

    name: str
    attributes: ReleaseAttributes | None = None
    size_bytes: int | None = None
    size_context: SizeValidationContext | None = None
    protocol: Protocol | None = None


# ── Matching results ────────────────────────────────────────────


class ConditionResult(BaseModel):
    """Outcome of one condition: before (raw_match) and after negation (matches)."""

    model_config = {"frozen": True}

    condition: FormatCondition
    matches: bool
    raw_match: bool


class FormatEvaluation(BaseModel):
    model_config = {"frozen": True}

    matches: bool
    condition_results: tuple[ConditionResult, ...] = ()


class MatchedFormat(BaseModel):
    model_config = {"frozen": True}

    format: CustomFormat
    condition_results: tuple[ConditionResult, ...] = ()


class ScoredFormat(MatchedFormat):
    score: int = 0


# ── Scoring results ─────────────────────────────────────────────


class CategoryScore(BaseModel):
    """Subtotal for one breakdown bucket plus contributing format names."""

    model_config = {"frozen": True}

    score: int = 0
    formats: tuple[str, ...] = ()


class ScoreBreakdown(BaseModel):
    model_config = {"frozen": True}

    resolution: CategoryScore = Field(default_factory=CategoryScore)
    source: CategoryScore = Field(default_factory=CategoryScore)
    codec: CategoryScore = Field(default_factory=CategoryScore)
    audio: CategoryScore = Field(default_factory=CategoryScore)
    hdr: CategoryScore = Field(default_factory=CategoryScore)
    streaming: CategoryScore = Field(default_factory=CategoryScore)
    release_group_tier: CategoryScore = Field(default_factory=CategoryScore)
    banned: CategoryScore = Field(default_factory=CategoryScore)
    enhancement: CategoryScore = Field(default_factory=CategoryScore)

    def items(self) -> list[tuple[str, CategoryScore]]:
        """Buckets in declaration order."""
        return [(name, getattr(self, name)) for name in type(self).model_fields]


class ScoringResult(BaseModel):
    """Full verdict for one release against one profile."""

    model_config = {"frozen": True}

    release_name: str
    profile: str
    total_score: float
    matched_formats: tuple[ScoredFormat, ...] = ()
    breakdown: ScoreBreakdown = Field(default_factory=ScoreBreakdown)
    meets_minimum: bool = False
    is_banned: bool = False
    banned_reasons: tuple[str, ...] = ()
    size_rejected: bool = False
    size_rejection_reason: str | None = None
    protocol_rejected: bool = False
    protocol_rejection_reason: str | None = None

    @property
    def is_rejected(self) -> bool:
        return self.is_banned or self.size_rejected or self.protocol_rejected


class RankedResult(ScoringResult):
    rank: int


class ComparisonResult(BaseModel):
    model_config = {"frozen": True}

    winner: Literal["release1", "release2", "tie"]
    release1_score: ScoringResult
    release2_score: ScoringResult
    score_difference: float


class UpgradeDecision(BaseModel):
    model_config = {"frozen": True}

    is_upgrade: bool
    improvement: float
    existing: ScoringResult
    candidate: ScoringResult
    reason: str = ""


# ── Debug trace ─────────────────────────────────────────────────


class DebugCondition(BaseModel):
    model_config = {"frozen": True}

    name: str
    type: ConditionType
    matched: bool
    required: bool
    negate: bool


class DebugFormat(BaseModel):
    model_config = {"frozen": True}

    id: str
    name: str
    category: FormatCategory
    conditions: tuple[DebugCondition, ...] = ()


class DebugReport(BaseModel):
    """Which formats matched a release, and through which conditions."""

    model_config = {"frozen": True}

    release_name: str
    attributes: ReleaseAttributes
    matched_formats: tuple[DebugFormat, ...] = ()
