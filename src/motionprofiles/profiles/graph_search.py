"""
Cartesian graph-search planner profile.

Vertices are joint solutions for discretized tool poses; edges are transitions
between consecutive vertices. Vertices are collision checked with the cheap
first-contact query. Edge checks are off since dense graphs make them too
expensive and later stages validate the final trajectory anyway.
"""

import math
from dataclasses import dataclass, field
from functools import partial
from typing import Any, Callable, Iterator, Optional, Sequence

import numpy as np
from scipy.spatial.transform import Rotation

from motionprofiles.core.config import GraphSearchSettings
from motionprofiles.core.host import HostParallelism
from motionprofiles.core.logging import get_logger
from motionprofiles.profiles.types import CollisionCheckPolicy, ContactTestType, to_plain

logger = get_logger(__name__)

DEFAULT_SAMPLE_RESOLUTION = math.radians(10.0)

PoseSampler = Callable[[np.ndarray], Iterator[np.ndarray]]


@dataclass(frozen=True)
class EuclideanDistanceTerm:
    """Joint-space Euclidean distance, optionally weighted per joint."""

    weights: Optional[tuple[float, ...]] = None

    def __call__(self, start: Sequence[float], end: Sequence[float]) -> float:
        start_arr = np.asarray(start, dtype=float)
        end_arr = np.asarray(end, dtype=float)
        if start_arr.shape != end_arr.shape:
            raise ValueError(
                f"Configuration size mismatch: {start_arr.shape} vs {end_arr.shape}"
            )

        diff = end_arr - start_arr
        if self.weights is not None:
            weights = np.asarray(self.weights, dtype=float)
            if weights.shape != diff.shape:
                raise ValueError(
                    f"Weight vector has {weights.size} entries, configuration has {diff.size}"
                )
            diff = weights * diff
        return float(np.linalg.norm(diff))


@dataclass(frozen=True)
class EdgeCostFunction:
    """Sum of distance terms evaluated on a transition between two configurations."""

    terms: tuple[EuclideanDistanceTerm, ...] = (EuclideanDistanceTerm(),)

    def __call__(self, start: Sequence[float], end: Sequence[float]) -> float:
        return sum(term(start, end) for term in self.terms)

    def to_dict(self) -> dict[str, Any]:
        return to_plain(self)


def wrist_mask(dof: int, weight: float = 5.0) -> tuple[float, ...]:
    """Weight vector selecting the last three joints."""
    if dof < 3:
        raise ValueError(f"A wrist mask needs at least 3 joints, got {dof}")
    mask = np.zeros(dof)
    mask[-3:] = weight
    return tuple(float(w) for w in mask)


def make_edge_evaluator(
    penalize_wrist_motion: bool = False, wrist_weight: float = 5.0
) -> Callable[[int], EdgeCostFunction]:
    """
    Build the edge cost factory for a graph problem.

    The factory takes the problem's joint count and returns a fresh cost
    function. The nominal Euclidean term is always present; the wrist term is
    added only when ``penalize_wrist_motion`` is set.
    """

    def edge_evaluator(num_joints: int) -> EdgeCostFunction:
        terms = [EuclideanDistanceTerm()]
        if penalize_wrist_motion:
            terms.append(EuclideanDistanceTerm(weights=wrist_mask(num_joints, wrist_weight)))
        return EdgeCostFunction(terms=tuple(terms))

    return edge_evaluator


def sample_tool_z_axis(
    tool_pose: np.ndarray, resolution: float = DEFAULT_SAMPLE_RESOLUTION
) -> Iterator[np.ndarray]:
    """
    Sample poses by rotating a tool pose about its own z (approach) axis.

    Angles run from -pi in steps of ``resolution``. The sweep stops before
    +pi on purpose: +pi is the same pose as -pi, and an inclusive sweep would
    add a duplicate graph vertex.

    Args:
        tool_pose: 4x4 homogeneous transform of the target tool pose
        resolution: Angular step in radians

    Yields:
        4x4 homogeneous transforms, one per sampled angle
    """
    if resolution <= 0.0:
        raise ValueError(f"Sample resolution must be positive, got {resolution}")

    pose = np.asarray(tool_pose, dtype=float)
    if pose.shape != (4, 4):
        raise ValueError(f"Tool pose must be a 4x4 transform, got shape {pose.shape}")

    count = max(1, int(round(2.0 * math.pi / resolution)))
    for k in range(count):
        angle = -math.pi + k * resolution
        rotation = np.eye(4)
        rotation[:3, :3] = Rotation.from_euler("z", angle).as_matrix()
        yield pose @ rotation


@dataclass(frozen=True)
class GraphSearchProfile:
    """Configuration consumed by the Cartesian graph-search planner."""

    num_threads: int
    num_joints: int
    sample_resolution: float
    target_pose_sampler: PoseSampler
    edge_evaluator: Callable[[int], EdgeCostFunction]
    vertex_collision: CollisionCheckPolicy = field(
        default_factory=lambda: CollisionCheckPolicy(strictness=ContactTestType.FIRST_CONTACT)
    )
    edge_collision: CollisionCheckPolicy = field(
        default_factory=lambda: CollisionCheckPolicy(
            strictness=ContactTestType.FIRST_CONTACT, enabled=False
        )
    )
    allow_collision: bool = False
    enable_collision: bool = True
    use_redundant_joint_solutions: bool = False
    # None leaves the planner's own default in place
    state_evaluator: Optional[Callable[..., Any]] = None
    vertex_evaluator: Optional[Callable[..., Any]] = None

    @property
    def enable_edge_collision(self) -> bool:
        return self.edge_collision.enabled

    def to_dict(self) -> dict[str, Any]:
        return {
            "num_threads": self.num_threads,
            "num_joints": self.num_joints,
            "sample_resolution": self.sample_resolution,
            "vertex_collision": self.vertex_collision.to_dict(),
            "edge_collision": self.edge_collision.to_dict(),
            "allow_collision": self.allow_collision,
            "enable_collision": self.enable_collision,
            "use_redundant_joint_solutions": self.use_redundant_joint_solutions,
            "edge_evaluator": self.edge_evaluator(self.num_joints).to_dict(),
            "state_evaluator": None if self.state_evaluator is None else "custom",
            "vertex_evaluator": None if self.vertex_evaluator is None else "custom",
        }


def create_graph_search_profile(
    host: Optional[HostParallelism] = None,
    settings: Optional[GraphSearchSettings] = None,
    dof: int = 6,
) -> GraphSearchProfile:
    """
    Build the graph search profile.

    Args:
        host: Host parallelism; detected when not given
        settings: Graph search settings; defaults when not given
        dof: Number of robot joints

    Returns:
        GraphSearchProfile solving on every host thread
    """
    host = host or HostParallelism.detect()
    settings = settings or GraphSearchSettings()
    if settings.penalize_wrist_motion and dof < 3:
        raise ValueError(f"Wrist motion penalty needs at least 3 joints, got {dof}")
    resolution = math.radians(settings.sample_resolution_deg)

    profile = GraphSearchProfile(
        num_threads=host.threads,
        num_joints=dof,
        sample_resolution=resolution,
        target_pose_sampler=partial(sample_tool_z_axis, resolution=resolution),
        edge_evaluator=make_edge_evaluator(
            penalize_wrist_motion=settings.penalize_wrist_motion,
            wrist_weight=settings.wrist_weight,
        ),
        vertex_collision=CollisionCheckPolicy(strictness=ContactTestType.FIRST_CONTACT),
        edge_collision=CollisionCheckPolicy(
            strictness=ContactTestType.FIRST_CONTACT,
            enabled=settings.enable_edge_collision,
        ),
        use_redundant_joint_solutions=settings.use_redundant_joint_solutions,
    )

    logger.info(
        "graph_search_profile_built",
        num_threads=profile.num_threads,
        sample_resolution_deg=settings.sample_resolution_deg,
        penalize_wrist_motion=settings.penalize_wrist_motion,
    )
    return profile
