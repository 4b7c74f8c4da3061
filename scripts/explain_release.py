#!/usr/bin/env python3
"""Print the score breakdown of one or more release titles.

Usage: explain_release.py TITLE [TITLE ...]

The profile comes from REELSCORE_DEFAULT_PROFILE_ID (default: balanced).
"""

from __future__ import annotations

import logging
import sys

from reelscore.config import get_settings
from reelscore.scoring.registry import ProfileRegistry
from reelscore.scoring.scorer import explain_score, rank_releases

logging.basicConfig(level=logging.INFO, format="%(levelname)s: %(message)s")
logger = logging.getLogger(__name__)


def main() -> None:
    titles = sys.argv[1:]
    if not titles:
        print(__doc__)
        sys.exit(2)

    profile = ProfileRegistry(settings=get_settings()).default_profile()
    logger.info("scoring %d release(s) with profile '%s'", len(titles), profile.name)

    for ranked in rank_releases(titles, profile):
        print(f"#{ranked.rank}")
        print(explain_score(ranked))
        print()


if __name__ == "__main__":
    main()
