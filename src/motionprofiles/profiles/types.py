"""
Value records shared by the profile builders.

Profiles and the records they hold are frozen dataclasses. Per-joint vectors
are stored as tuples so a profile can be shared read-only by every planner
thread that looks it up.
"""

from dataclasses import dataclass, fields
from enum import Enum
from typing import Any

import numpy as np


class ContactTestType(Enum):
    """How much work a collision query does."""

    FIRST_CONTACT = "first"  # Stop at the first contact found (feasibility only)
    CLOSEST_CONTACT = "closest"  # Closest distance per pair (cost shaping)


class CollisionEvaluatorType(Enum):
    """Which states the optimizer's collision term evaluates."""

    DISCRETE = "discrete"
    CONTINUOUS = "continuous"
    DISCRETE_CONTINUOUS = "discrete_continuous"


class PlannerKind(Enum):
    """Sampling-based planner algorithm."""

    RRT_CONNECT = "rrt_connect"


def to_plain(value: Any) -> Any:
    """Convert profile data into JSON/YAML-serializable builtins."""
    if isinstance(value, Enum):
        return value.name
    if isinstance(value, (tuple, list)):
        return [to_plain(v) for v in value]
    if isinstance(value, np.generic):
        return value.item()
    if hasattr(value, "__dataclass_fields__"):
        return {f.name: to_plain(getattr(value, f.name)) for f in fields(value)}
    return value


def constant_vector(size: int, value: float) -> tuple[float, ...]:
    """Per-DOF vector with every entry set to ``value``."""
    return tuple(float(v) for v in np.full(size, value, dtype=float))


@dataclass(frozen=True)
class CollisionCheckPolicy:
    """Collision checking strictness and cost shaping for one check site."""

    strictness: ContactTestType = ContactTestType.FIRST_CONTACT
    enabled: bool = True
    margin: float = 0.0
    margin_buffer: float = 0.0
    cost_coefficient: float = 1.0
    evaluator: CollisionEvaluatorType = CollisionEvaluatorType.DISCRETE

    def to_dict(self) -> dict[str, Any]:
        return to_plain(self)


@dataclass(frozen=True)
class ExplorationParameterSet:
    """Tuning for one of the parallel sampling-based planner instances."""

    algorithm_kind: PlannerKind
    range_or_step: float
    time_budget: float

    def to_dict(self) -> dict[str, Any]:
        return to_plain(self)


@dataclass(frozen=True)
class SmoothnessWeights:
    """Per-DOF penalties on velocity, acceleration and jerk."""

    velocity: tuple[float, ...]
    acceleration: tuple[float, ...]
    jerk: tuple[float, ...]

    def __post_init__(self) -> None:
        sizes = {len(self.velocity), len(self.acceleration), len(self.jerk)}
        if len(sizes) != 1:
            raise ValueError(
                f"Smoothness weight vectors must share one length, got {sorted(sizes)}"
            )

    @classmethod
    def uniform(
        cls, dof: int, velocity: float, acceleration: float, jerk: float
    ) -> "SmoothnessWeights":
        return cls(
            velocity=constant_vector(dof, velocity),
            acceleration=constant_vector(dof, acceleration),
            jerk=constant_vector(dof, jerk),
        )

    def to_dict(self) -> dict[str, Any]:
        return to_plain(self)
