"""Interfaces for the release parser module."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from reelscore.shared.models import ParsedRelease


@runtime_checkable
class ReleaseParser(Protocol):
    """Protocol for turning a raw release title into recognised tokens."""

    def parse(self, title: str) -> ParsedRelease:
        """Tokenise a release title.

        Implementations must tolerate any input, leaving unrecognised
        fields empty rather than raising.

        Args:
            title: Raw release name as published by an indexer.

        Returns:
            ParsedRelease holding the raw tokens found.
        """
        ...
