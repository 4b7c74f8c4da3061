"""Hierarchical exception types for reelscore."""

from __future__ import annotations


class ReelscoreError(Exception):
    """Base exception for all reelscore errors."""


# ── Configuration ───────────────────────────────────────────────


class ConfigurationError(ReelscoreError):
    """A format or profile record was rejected by the registry."""


class ReservedIdError(ConfigurationError):
    """Id collides with the built-in namespace."""


class DuplicateIdError(ConfigurationError):
    """Id already exists among custom records."""


class BuiltInModificationError(ConfigurationError):
    """Attempted to edit or delete a built-in record."""


# ── Lookup ──────────────────────────────────────────────────────


class NotFoundError(ReelscoreError):
    """Requested record does not exist."""


class FormatNotFoundError(NotFoundError):
    """No custom format with the given id."""


class ProfileNotFoundError(NotFoundError):
    """No scoring profile with the given id."""
