"""
Stage identifiers and the profile lookup table.

The planning orchestrator resolves profiles by stage identifier, profile name
and profile type when it assembles its task graph. This module only fills the
table; it never performs the orchestrator's lookups on its behalf.
"""

from dataclasses import dataclass, field
from typing import Any, Optional, TypeVar

from motionprofiles.core.config import ProfileSettings
from motionprofiles.core.exceptions import ProfileNotFoundError, ProfileRegistrationError
from motionprofiles.core.host import HostParallelism
from motionprofiles.core.logging import get_logger
from motionprofiles.profiles.global_search import create_global_search_profile
from motionprofiles.profiles.graph_search import create_graph_search_profile
from motionprofiles.profiles.seed import create_seed_profile
from motionprofiles.profiles.trajopt import (
    create_trajopt_composite_profile,
    create_trajopt_tool_z_free_plan_profile,
)

logger = get_logger(__name__)

TRAJOPT_DEFAULT_NAMESPACE = "TrajOptMotionPlannerTask"
OMPL_DEFAULT_NAMESPACE = "OMPLMotionPlannerTask"
DESCARTES_DEFAULT_NAMESPACE = "DescartesMotionPlannerTask"
SIMPLE_DEFAULT_NAMESPACE = "SimpleMotionPlannerTask"
MIN_LENGTH_DEFAULT_NAMESPACE = "MinLengthTask"
CONTACT_CHECK_DEFAULT_NAMESPACE = "DiscreteContactCheckTask"
ISP_DEFAULT_NAMESPACE = "IterativeSplineParameterizationTask"

STAGE_IDENTIFIERS: tuple[str, ...] = (
    TRAJOPT_DEFAULT_NAMESPACE,
    OMPL_DEFAULT_NAMESPACE,
    DESCARTES_DEFAULT_NAMESPACE,
    SIMPLE_DEFAULT_NAMESPACE,
    MIN_LENGTH_DEFAULT_NAMESPACE,
    CONTACT_CHECK_DEFAULT_NAMESPACE,
    ISP_DEFAULT_NAMESPACE,
)

DEFAULT_PROFILE_NAME = "DEFAULT"

P = TypeVar("P")


@dataclass
class ProfileDictionary:
    """
    Profiles keyed by stage identifier, profile name and profile type.

    One stage may hold several profile types under the same name (the
    trajectory optimizer stage holds a plan and a composite profile).

    Example:
        >>> profiles = ProfileDictionary()
        >>> profiles.add(SIMPLE_DEFAULT_NAMESPACE, "DEFAULT", create_seed_profile())
        >>> seed = profiles.get(SIMPLE_DEFAULT_NAMESPACE, "DEFAULT", SeedProfile)
    """

    _profiles: dict[str, dict[tuple[str, type], Any]] = field(default_factory=dict, init=False)

    def add(self, stage: str, name: str, profile: Any) -> None:
        """
        Register a profile.

        Raises:
            ProfileRegistrationError: If the stage already holds a profile of
                this type under this name
        """
        if not stage or not name:
            raise ProfileRegistrationError(
                "Stage identifier and profile name must be non-empty",
                stage=stage,
                details={"name": name},
            )

        key = (name, type(profile))
        entries = self._profiles.setdefault(stage, {})
        if key in entries:
            raise ProfileRegistrationError(
                f"Profile already registered: {stage}/{name}",
                stage=stage,
                details={"type": type(profile).__name__},
            )
        entries[key] = profile

    def get(self, stage: str, name: str, profile_type: type[P]) -> P:
        """
        Look up a profile.

        Raises:
            ProfileNotFoundError: If nothing matches
        """
        entries = self._profiles.get(stage, {})
        key = (name, profile_type)
        if key not in entries:
            available = sorted(f"{n}:{t.__name__}" for n, t in entries)
            raise ProfileNotFoundError(
                f"Profile not found: {stage}/{name}",
                stage=stage,
                details={"type": profile_type.__name__, "available": available},
            )
        return entries[key]

    def has(self, stage: str, name: str, profile_type: type) -> bool:
        return (name, profile_type) in self._profiles.get(stage, {})

    def stages(self) -> list[str]:
        return list(self._profiles.keys())

    def names(self, stage: str) -> list[str]:
        return sorted({name for name, _ in self._profiles.get(stage, {})})

    def items(self, stage: str) -> list[tuple[str, Any]]:
        """(name, profile) pairs registered for a stage, in registration order."""
        return [(name, profile) for (name, _), profile in self._profiles.get(stage, {}).items()]


def build_default_profiles(
    host: Optional[HostParallelism] = None,
    settings: Optional[ProfileSettings] = None,
    name: str = DEFAULT_PROFILE_NAME,
) -> ProfileDictionary:
    """
    Build every stage profile once and register it under its stage.

    Args:
        host: Host parallelism shared by the parallel stages; detected when
            not given (capped by ``settings.max_threads``)
        settings: Builder settings; defaults when not given
        name: Profile name to register under

    Returns:
        ProfileDictionary holding the seed, global search, graph search and
        trajectory optimizer profiles
    """
    settings = settings or ProfileSettings()
    host = host or HostParallelism.detect(max_threads=settings.max_threads)

    profiles = ProfileDictionary()
    profiles.add(SIMPLE_DEFAULT_NAMESPACE, name, create_seed_profile(settings.seed))
    profiles.add(
        OMPL_DEFAULT_NAMESPACE,
        name,
        create_global_search_profile(host, settings.global_search),
    )
    profiles.add(
        DESCARTES_DEFAULT_NAMESPACE,
        name,
        create_graph_search_profile(host, settings.graph_search, dof=settings.dof),
    )
    profiles.add(
        TRAJOPT_DEFAULT_NAMESPACE,
        name,
        create_trajopt_tool_z_free_plan_profile(settings.trajopt),
    )
    profiles.add(
        TRAJOPT_DEFAULT_NAMESPACE,
        name,
        create_trajopt_composite_profile(settings.trajopt, dof=settings.dof),
    )

    logger.info("profiles_built", name=name, threads=host.threads, stages=profiles.stages())
    return profiles
