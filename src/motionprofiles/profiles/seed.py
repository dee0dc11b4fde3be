"""
Seed planner profile.

The seed planner linearly interpolates between waypoints; these thresholds
decide how finely each interpolation is subdivided.
"""

import math
from dataclasses import dataclass
from typing import Any, Optional

from motionprofiles.core.config import SeedSettings
from motionprofiles.profiles.types import to_plain


@dataclass(frozen=True)
class SeedProfile:
    """Longest valid segment lengths for the interpolation seed planner.

    Angles are in radians, translation in meters.
    """

    state_step: float
    translation_step: float
    rotation_step: float
    min_steps: int

    def to_dict(self) -> dict[str, Any]:
        return to_plain(self)


def create_seed_profile(settings: Optional[SeedSettings] = None) -> SeedProfile:
    """Build the seed planner profile (5 deg, 0.1 m, 5 deg, 1 step by default)."""
    settings = settings or SeedSettings()
    return SeedProfile(
        state_step=settings.state_step_deg * math.pi / 180,
        translation_step=settings.translation_step,
        rotation_step=settings.rotation_step_deg * math.pi / 180,
        min_steps=settings.min_steps,
    )
