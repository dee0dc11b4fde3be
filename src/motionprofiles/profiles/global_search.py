"""
Sampling-based global planner profile.

One planner instance runs per host thread. Their ranges are linearly spaced
between a fine and a coarse bound so the instances cover different
exploration granularities instead of repeating the same search.
"""

from dataclasses import dataclass, field
from typing import Any, Optional

import numpy as np

from motionprofiles.core.config import GlobalSearchSettings
from motionprofiles.core.host import HostParallelism
from motionprofiles.core.logging import get_logger
from motionprofiles.profiles.types import (
    CollisionCheckPolicy,
    ContactTestType,
    ExplorationParameterSet,
    PlannerKind,
    to_plain,
)

logger = get_logger(__name__)


@dataclass(frozen=True)
class GlobalSearchProfile:
    """Parallel sampling-based planners sharing one time budget."""

    planning_time: float
    planners: tuple[ExplorationParameterSet, ...]
    collision_check: CollisionCheckPolicy = field(
        default_factory=lambda: CollisionCheckPolicy(strictness=ContactTestType.FIRST_CONTACT)
    )

    @property
    def ranges(self) -> tuple[float, ...]:
        return tuple(p.range_or_step for p in self.planners)

    def to_dict(self) -> dict[str, Any]:
        return to_plain(self)


def create_global_search_profile(
    host: Optional[HostParallelism] = None,
    settings: Optional[GlobalSearchSettings] = None,
) -> GlobalSearchProfile:
    """
    Build the global search profile.

    Args:
        host: Host parallelism; detected when not given
        settings: Planner settings; defaults when not given

    Returns:
        GlobalSearchProfile with one RRT-Connect planner per host thread
    """
    host = host or HostParallelism.detect()
    settings = settings or GlobalSearchSettings()

    # linspace gives range_min alone when there is a single thread
    ranges = np.linspace(settings.range_min, settings.range_max, host.threads)
    planners = tuple(
        ExplorationParameterSet(
            algorithm_kind=PlannerKind.RRT_CONNECT,
            range_or_step=float(r),
            time_budget=settings.planning_time,
        )
        for r in ranges
    )

    logger.info(
        "global_search_profile_built",
        planners=len(planners),
        planning_time=settings.planning_time,
    )
    return GlobalSearchProfile(
        planning_time=settings.planning_time,
        planners=planners,
        collision_check=CollisionCheckPolicy(strictness=ContactTestType.FIRST_CONTACT),
    )
