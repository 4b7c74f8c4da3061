"""In-memory registries for custom formats and scoring profiles.

Registries validate records on the way in (reserved ids, duplicates,
built-in protection) so the scorer can trust whatever it is handed.
"""

from __future__ import annotations

import logging
import uuid
from collections.abc import Iterable, Mapping
from typing import Any, Literal

from reelscore.config import Settings, get_settings
from reelscore.scoring.formats.catalog import ALL_FORMATS, BUILT_IN_FORMAT_IDS
from reelscore.scoring.profiles import BUILT_IN_PROFILE_IDS, DEFAULT_PROFILES
from reelscore.shared.enums import FormatCategory
from reelscore.shared.exceptions import (
    BuiltInModificationError,
    ConfigurationError,
    DuplicateIdError,
    FormatNotFoundError,
    ProfileNotFoundError,
    ReservedIdError,
)
from reelscore.shared.models import CustomFormat, FormatCondition, ScoringProfile

logger = logging.getLogger(__name__)

FormatKind = Literal["all", "builtin", "custom"]

# Only these fields of a built-in profile may be overridden.
SIZE_LIMIT_FIELDS = frozenset({"movie_min_size_gb", "movie_max_size_gb", "episode_min_size_mb", "episode_max_size_mb"})


def _new_id() -> str:
    return str(uuid.uuid4())


# ── Formats ─────────────────────────────────────────────────────


class FormatRegistry:
    """Built-in format library plus caller-defined custom formats."""

    def __init__(
        self,
        custom_formats: Iterable[CustomFormat] = (),
        settings: Settings | None = None,
    ) -> None:
        self._settings = settings or get_settings()
        self._custom: dict[str, CustomFormat] = {}
        for fmt in custom_formats:
            self._add(fmt)

    @property
    def custom_count(self) -> int:
        return len(self._custom)

    def list_formats(
        self,
        kind: FormatKind = "all",
        category: FormatCategory | None = None,
        search: str | None = None,
    ) -> list[CustomFormat]:
        """List formats, built-ins first.

        Args:
            kind: ``"builtin"``, ``"custom"`` or ``"all"``.
            category: Keep only formats of this category.
            search: Case-insensitive substring of the name or description.
        """
        formats: list[CustomFormat] = []
        if kind in ("all", "builtin"):
            formats.extend(ALL_FORMATS)
        if kind in ("all", "custom"):
            formats.extend(self._custom.values())

        if category is not None:
            formats = [f for f in formats if f.category is category]
        if search:
            needle = search.casefold()
            formats = [f for f in formats if needle in f.name.casefold() or needle in f.description.casefold()]
        return formats

    def get(self, format_id: str) -> CustomFormat | None:
        if format_id in self._custom:
            return self._custom[format_id]
        return next((f for f in ALL_FORMATS if f.id == format_id), None)

    def create(
        self,
        name: str,
        conditions: Iterable[FormatCondition | Mapping[str, Any]],
        *,
        format_id: str | None = None,
        description: str = "",
        category: FormatCategory = FormatCategory.OTHER,
        tags: Iterable[str] = (),
        enabled: bool = True,
    ) -> CustomFormat:
        """Validate and store a new custom format.

        Raises:
            ReservedIdError: ``format_id`` belongs to a built-in format.
            DuplicateIdError: A custom format with ``format_id`` exists.
            ConfigurationError: No conditions were given.
            pydantic.ValidationError: A field or condition is malformed.
        """
        fmt = CustomFormat.model_validate(
            {
                "id": format_id or _new_id(),
                "name": name,
                "description": description,
                "category": category,
                "tags": tuple(tags),
                "conditions": tuple(conditions),
                "enabled": enabled,
                "is_built_in": False,
            }
        )
        self._add(fmt)
        logger.info("created custom format %s (%s)", fmt.id, fmt.name)
        return fmt

    def _add(self, fmt: CustomFormat) -> None:
        if fmt.id in BUILT_IN_FORMAT_IDS:
            raise ReservedIdError(f"format id '{fmt.id}' is reserved for a built-in format")
        if fmt.id in self._custom:
            raise DuplicateIdError(f"format with id '{fmt.id}' already exists")
        if not fmt.conditions:
            raise ConfigurationError(f"format '{fmt.id}' requires at least one condition")
        self._custom[fmt.id] = fmt.model_copy(update={"is_built_in": False})

    def update(self, format_id: str, **changes: Any) -> CustomFormat:
        """Apply a partial update to a custom format; unspecified fields are kept."""
        if format_id in BUILT_IN_FORMAT_IDS:
            raise BuiltInModificationError(f"cannot modify built-in format '{format_id}'")
        current = self._custom.get(format_id)
        if current is None:
            raise FormatNotFoundError(f"format '{format_id}' not found")

        changes.pop("id", None)
        changes.pop("is_built_in", None)
        if "conditions" in changes:
            changes["conditions"] = tuple(changes["conditions"])
            if not changes["conditions"]:
                raise ConfigurationError(f"format '{format_id}' requires at least one condition")

        updated = CustomFormat.model_validate({**current.model_dump(), **changes})
        self._custom[format_id] = updated
        logger.info("updated custom format %s", format_id)
        return updated

    def delete(self, format_id: str) -> CustomFormat:
        if format_id in BUILT_IN_FORMAT_IDS:
            raise BuiltInModificationError(f"cannot delete built-in format '{format_id}'")
        try:
            fmt = self._custom.pop(format_id)
        except KeyError:
            raise FormatNotFoundError(f"format '{format_id}' not found") from None
        logger.info("deleted custom format %s", format_id)
        return fmt

    def active_formats(self) -> tuple[CustomFormat, ...]:
        """Formats taking part in matching: built-ins plus enabled custom formats."""
        if not self._settings.custom_formats_enabled:
            return ALL_FORMATS
        return ALL_FORMATS + tuple(f for f in self._custom.values() if f.enabled)


# ── Profiles ────────────────────────────────────────────────────


class ProfileRegistry:
    """Built-in profiles plus caller-defined ones, with a default selection."""

    def __init__(
        self,
        custom_profiles: Iterable[ScoringProfile] = (),
        settings: Settings | None = None,
    ) -> None:
        self._settings = settings or get_settings()
        self._custom: dict[str, ScoringProfile] = {}
        self._size_overrides: dict[str, dict[str, float | None]] = {}
        self._default_id: str | None = None
        for profile in custom_profiles:
            self._add(profile)

    def list_profiles(self) -> list[ScoringProfile]:
        builtins = [self._with_overrides(p) for p in DEFAULT_PROFILES]
        return builtins + list(self._custom.values())

    def get(self, profile_id: str) -> ScoringProfile | None:
        if profile_id in self._custom:
            return self._custom[profile_id]
        builtin = next((p for p in DEFAULT_PROFILES if p.id == profile_id), None)
        return self._with_overrides(builtin) if builtin is not None else None

    def _with_overrides(self, profile: ScoringProfile) -> ScoringProfile:
        overrides = self._size_overrides.get(profile.id)
        return profile.model_copy(update=overrides) if overrides else profile

    def create(
        self,
        name: str,
        *,
        profile_id: str | None = None,
        copy_from_id: str | None = None,
        format_scores: Mapping[str, int] | None = None,
        **fields: Any,
    ) -> ScoringProfile:
        """Validate and store a new profile.

        Args:
            name: Display name.
            profile_id: Explicit id; generated when omitted.
            copy_from_id: Profile whose ``format_scores`` seed the new one.
            format_scores: Scores applied on top of the copied ones.
            **fields: Any other ``ScoringProfile`` field.

        Raises:
            ReservedIdError: ``profile_id`` belongs to a built-in profile.
            DuplicateIdError: A custom profile with ``profile_id`` exists.
            ProfileNotFoundError: ``copy_from_id`` does not exist.
        """
        scores: dict[str, int] = {}
        if copy_from_id is not None:
            source = self.get(copy_from_id)
            if source is None:
                raise ProfileNotFoundError(f"profile '{copy_from_id}' to copy from not found")
            scores.update(source.format_scores)
        scores.update(format_scores or {})

        fields.pop("is_built_in", None)
        profile = ScoringProfile.model_validate(
            {**fields, "id": profile_id or _new_id(), "name": name, "format_scores": scores}
        )
        self._add(profile)
        logger.info("created profile %s (%s)", profile.id, profile.name)
        return profile

    def _add(self, profile: ScoringProfile) -> None:
        if profile.id in BUILT_IN_PROFILE_IDS:
            raise ReservedIdError(f"profile id '{profile.id}' is reserved for a built-in profile")
        if profile.id in self._custom:
            raise DuplicateIdError(f"profile with id '{profile.id}' already exists")
        self._custom[profile.id] = profile.model_copy(update={"is_built_in": False})

    def update(self, profile_id: str, **changes: Any) -> ScoringProfile:
        """Apply a partial update.

        Built-in profiles only accept the size limit fields; any other change
        raises ``BuiltInModificationError``.
        """
        changes.pop("id", None)
        changes.pop("is_built_in", None)

        if profile_id in BUILT_IN_PROFILE_IDS:
            rejected = sorted(set(changes) - SIZE_LIMIT_FIELDS)
            if rejected:
                raise BuiltInModificationError(
                    f"built-in profile '{profile_id}' only accepts size limits, got: {', '.join(rejected)}"
                )
            overrides = {**self._size_overrides.get(profile_id, {}), **changes}
            # Validate the override values against the model before keeping them.
            builtin = next(p for p in DEFAULT_PROFILES if p.id == profile_id)
            updated = ScoringProfile.model_validate({**builtin.model_dump(), **overrides})
            self._size_overrides[profile_id] = {k: getattr(updated, k) for k in overrides}
            logger.info("updated size limits of built-in profile %s", profile_id)
            return updated

        current = self._custom.get(profile_id)
        if current is None:
            raise ProfileNotFoundError(f"profile '{profile_id}' not found")
        updated = ScoringProfile.model_validate({**current.model_dump(), **changes})
        self._custom[profile_id] = updated
        logger.info("updated profile %s", profile_id)
        return updated

    def delete(self, profile_id: str) -> ScoringProfile:
        if profile_id in BUILT_IN_PROFILE_IDS:
            raise BuiltInModificationError(f"cannot delete built-in profile '{profile_id}'")
        try:
            profile = self._custom.pop(profile_id)
        except KeyError:
            raise ProfileNotFoundError(f"profile '{profile_id}' not found") from None
        if self._default_id == profile_id:
            self._default_id = None
        logger.info("deleted profile %s", profile_id)
        return profile

    # Default selection

    @property
    def default_profile_id(self) -> str:
        return self._default_id or self._settings.default_profile_id

    def set_default(self, profile_id: str) -> ScoringProfile:
        profile = self.get(profile_id)
        if profile is None:
            raise ProfileNotFoundError(f"profile '{profile_id}' not found")
        self._default_id = profile_id
        logger.info("default profile set to %s", profile_id)
        return profile

    def default_profile(self) -> ScoringProfile:
        """The selected default, else the configured one.

        Raises:
            ProfileNotFoundError: The configured default id does not exist.
        """
        profile = self.get(self.default_profile_id)
        if profile is None:
            raise ProfileNotFoundError(f"default profile '{self.default_profile_id}' not found")
        return profile
