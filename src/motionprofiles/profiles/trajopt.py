"""
Trajectory optimizer profiles.

Two profiles work together: a plan profile applied to every waypoint, which
frees rotation about the tool's approach axis, and a composite profile applied
to the whole trajectory, which sets smoothing and collision costs.
"""

from dataclasses import dataclass
from typing import Any, Optional

import numpy as np

from motionprofiles.core.config import TrajOptSettings
from motionprofiles.core.logging import get_logger
from motionprofiles.profiles.types import (
    CollisionCheckPolicy,
    CollisionEvaluatorType,
    ContactTestType,
    SmoothnessWeights,
    to_plain,
)

logger = get_logger(__name__)

# Cartesian error ordering is (x, y, z, rx, ry, rz)
CARTESIAN_DOF = 6
TOOL_Z_ROTATION_INDEX = 5


@dataclass(frozen=True)
class TrajOptPlanProfile:
    """Per-waypoint Cartesian matching coefficients."""

    cartesian_coeff: tuple[float, ...]

    @property
    def free_axes(self) -> tuple[int, ...]:
        return tuple(i for i, c in enumerate(self.cartesian_coeff) if c == 0.0)

    def to_dict(self) -> dict[str, Any]:
        return to_plain(self)


@dataclass(frozen=True)
class TrajOptCompositeProfile:
    """Whole-trajectory smoothing and collision costs."""

    smoothness: SmoothnessWeights
    contact_test_type: ContactTestType
    collision_cost: CollisionCheckPolicy
    collision_constraint: CollisionCheckPolicy
    smooth_velocities: bool = True
    smooth_accelerations: bool = True
    smooth_jerks: bool = True

    @property
    def velocity_coeff(self) -> tuple[float, ...]:
        return self.smoothness.velocity

    @property
    def acceleration_coeff(self) -> tuple[float, ...]:
        return self.smoothness.acceleration

    @property
    def jerk_coeff(self) -> tuple[float, ...]:
        return self.smoothness.jerk

    def to_dict(self) -> dict[str, Any]:
        return to_plain(self)


def create_trajopt_tool_z_free_plan_profile(
    settings: Optional[TrajOptSettings] = None,
) -> TrajOptPlanProfile:
    """Plan profile leaving rotation about the tool z axis unconstrained."""
    settings = settings or TrajOptSettings()
    coeff = np.full(CARTESIAN_DOF, settings.cartesian_coeff, dtype=float)
    coeff[TOOL_Z_ROTATION_INDEX] = 0.0
    return TrajOptPlanProfile(cartesian_coeff=tuple(float(c) for c in coeff))


def create_trajopt_composite_profile(
    settings: Optional[TrajOptSettings] = None, dof: int = 6
) -> TrajOptCompositeProfile:
    """
    Build the whole-trajectory optimizer profile.

    Collision is a soft cost evaluated on waypoints and on the segments
    between them; the hard constraint stays off and is left to the contact
    check stage that runs after optimization.

    Args:
        settings: Optimizer settings; defaults when not given
        dof: Number of robot joints

    Returns:
        TrajOptCompositeProfile
    """
    settings = settings or TrajOptSettings()
    if dof < 1:
        raise ValueError(f"dof must be at least 1, got {dof}")

    profile = TrajOptCompositeProfile(
        smoothness=SmoothnessWeights.uniform(
            dof,
            velocity=settings.velocity_coeff,
            acceleration=settings.acceleration_coeff,
            jerk=settings.jerk_coeff,
        ),
        contact_test_type=ContactTestType.CLOSEST_CONTACT,
        collision_cost=CollisionCheckPolicy(
            strictness=ContactTestType.CLOSEST_CONTACT,
            enabled=True,
            margin=settings.collision_margin,
            margin_buffer=settings.collision_margin_buffer,
            cost_coefficient=settings.collision_coeff,
            evaluator=CollisionEvaluatorType.DISCRETE_CONTINUOUS,
        ),
        collision_constraint=CollisionCheckPolicy(
            strictness=ContactTestType.CLOSEST_CONTACT,
            enabled=settings.enable_collision_constraint,
            margin=settings.collision_margin,
            margin_buffer=settings.collision_margin_buffer,
            cost_coefficient=settings.collision_coeff,
            evaluator=CollisionEvaluatorType.DISCRETE_CONTINUOUS,
        ),
    )

    logger.info(
        "trajopt_composite_profile_built",
        dof=dof,
        collision_margin=settings.collision_margin,
        collision_constraint=settings.enable_collision_constraint,
    )
    return profile
