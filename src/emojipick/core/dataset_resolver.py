# -*- coding: utf-8 -*-
"""
src/emojipick/core/dataset_resolver.py

This module picks the emoji dataset that matches a platform version.

Platform releases ship fonts for a specific emoji version, so a picker must
not offer glyphs the platform cannot draw. The brackets below map a
platform version to the newest emoji version it is known to render; each
bracket starts at its lower bound and runs up to the next one. Anything
below the first bracket gets the minimal floor dataset and anything above
the last bound gets the newest one, so the lookup never fails.
"""

import logging
import math
from functools import lru_cache
from typing import Optional, Tuple

from .categories import EmojiCategory, EmojiCategoryType
from .emoji_definitions import EMOJI_DEFINITIONS

logger = logging.getLogger(__name__)

FLOOR_EMOJI_VERSION = 5.0

# (lower bound inclusive, emoji version), sorted by lower bound.
DATASET_BRACKETS: Tuple[Tuple[float, float], ...] = (
    (12.1, 11.0),
    (13.2, 12.0),
    (14.2, 13.0),
    (14.5, 13.1),
    (15.4, 14.0),
)

EmojiDataset = Tuple[EmojiCategory, ...]


def dataset_version_for(platform_version: float) -> float:
    """
    Returns the emoji version of the dataset that applies to `platform_version`.

    The table is scanned for the greatest lower bound that is <= the input.
    Inputs below every bound, or that do not compare (NaN), get the floor.
    """
    emoji_version = FLOOR_EMOJI_VERSION
    for lower_bound, bracket_version in DATASET_BRACKETS:
        if platform_version >= lower_bound:
            emoji_version = bracket_version
        else:
            break
    return emoji_version


def effective_platform_version(platform_version: float, max_platform_version: Optional[float] = None) -> float:
    """Caps the platform version at `max_platform_version`, when one is given."""
    if max_platform_version is None or math.isnan(max_platform_version):
        return platform_version
    return min(platform_version, max_platform_version)


@lru_cache(maxsize=None)
def _build_dataset(emoji_version: float) -> EmojiDataset:
    categories = []
    for category_type in EmojiCategoryType:
        entries = tuple(
            entry for entry in EMOJI_DEFINITIONS[category_type]
            if entry.unicode_version <= emoji_version
        )
        categories.append(EmojiCategory(type=category_type, entries=entries))
    logger.debug(
        f"Built emoji dataset {emoji_version} with "
        f"{sum(len(c) for c in categories)} emojis."
    )
    return tuple(categories)


def resolve_catalog(platform_version: float, max_platform_version: Optional[float] = None) -> EmojiDataset:
    """
    Returns the ordered emoji categories for a platform version.

    Args:
        platform_version (float): The host platform version, e.g. 15.4.
        max_platform_version (Optional[float]): If set, datasets newer than
            the one for this version are never returned. Useful when the
            picked emoji is sent to devices that may be on older releases.

    Returns:
        A tuple of eight EmojiCategory objects in EmojiCategoryType order.
        Calls that land in the same bracket return the same tuple.
    """
    version = effective_platform_version(platform_version, max_platform_version)
    return _build_dataset(dataset_version_for(version))
