"""
Profiles module - One builder per planning stage.

- Seed: linear interpolation thresholds
- Global search: parallel RRT-Connect planners with spread ranges
- Graph search: Cartesian graph vertices, edge costs and pose sampling
- Trajectory optimization: per-waypoint and whole-trajectory costs
"""

from motionprofiles.profiles.global_search import (
    GlobalSearchProfile,
    create_global_search_profile,
)
from motionprofiles.profiles.graph_search import (
    EdgeCostFunction,
    EuclideanDistanceTerm,
    GraphSearchProfile,
    create_graph_search_profile,
    sample_tool_z_axis,
    wrist_mask,
)
from motionprofiles.profiles.seed import SeedProfile, create_seed_profile
from motionprofiles.profiles.trajopt import (
    TrajOptCompositeProfile,
    TrajOptPlanProfile,
    create_trajopt_composite_profile,
    create_trajopt_tool_z_free_plan_profile,
)
from motionprofiles.profiles.types import (
    CollisionCheckPolicy,
    CollisionEvaluatorType,
    ContactTestType,
    ExplorationParameterSet,
    PlannerKind,
    SmoothnessWeights,
)

__all__ = [
    "SeedProfile",
    "create_seed_profile",
    "GlobalSearchProfile",
    "create_global_search_profile",
    "GraphSearchProfile",
    "EdgeCostFunction",
    "EuclideanDistanceTerm",
    "create_graph_search_profile",
    "sample_tool_z_axis",
    "wrist_mask",
    "TrajOptPlanProfile",
    "TrajOptCompositeProfile",
    "create_trajopt_tool_z_free_plan_profile",
    "create_trajopt_composite_profile",
    "CollisionCheckPolicy",
    "CollisionEvaluatorType",
    "ContactTestType",
    "ExplorationParameterSet",
    "PlannerKind",
    "SmoothnessWeights",
]
