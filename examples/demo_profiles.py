"""
Demonstration of motionprofiles.

This script shows how to:
1. Detect host parallelism
2. Build every stage profile
3. Look profiles up by stage identifier
4. Sample candidate tool poses and evaluate an edge cost
"""

import numpy as np

from motionprofiles.core.config import LoggingSettings
from motionprofiles.core.host import HostParallelism
from motionprofiles.core.logging import configure_logging
from motionprofiles.profiles.global_search import GlobalSearchProfile
from motionprofiles.profiles.graph_search import GraphSearchProfile
from motionprofiles.profiles.trajopt import TrajOptCompositeProfile
from motionprofiles.registry import (
    DESCARTES_DEFAULT_NAMESPACE,
    OMPL_DEFAULT_NAMESPACE,
    TRAJOPT_DEFAULT_NAMESPACE,
    build_default_profiles,
)


def main():
    """Run profile demonstration."""
    configure_logging(LoggingSettings(level="INFO"))

    print("=" * 60)
    print("motionprofiles Demo")
    print("=" * 60)

    # 1. Host parallelism
    print("\n1. Detecting host parallelism")
    host = HostParallelism.detect()
    print(f"   [OK] {host.threads} thread(s)")

    # 2. Build profiles
    print("\n2. Building profiles")
    profiles = build_default_profiles(host=host)
    for stage in profiles.stages():
        print(f"   [OK] {stage}: {', '.join(profiles.names(stage))}")

    # 3. Lookups
    print("\n3. Looking up profiles")
    ompl = profiles.get(OMPL_DEFAULT_NAMESPACE, "DEFAULT", GlobalSearchProfile)
    print(f"   RRT-Connect ranges: {[round(r, 3) for r in ompl.ranges]}")

    trajopt = profiles.get(TRAJOPT_DEFAULT_NAMESPACE, "DEFAULT", TrajOptCompositeProfile)
    print(f"   Collision margin: {trajopt.collision_cost.margin} m")

    # 4. Graph search helpers
    print("\n4. Sampling tool poses")
    descartes = profiles.get(DESCARTES_DEFAULT_NAMESPACE, "DEFAULT", GraphSearchProfile)
    target = np.eye(4)
    target[:3, 3] = [0.8, 0.0, 0.4]
    samples = list(descartes.target_pose_sampler(target))
    print(f"   [OK] {len(samples)} candidate poses about the tool z axis")

    cost = descartes.edge_evaluator(6)
    start = [0.0, -0.5, 0.5, 0.0, 0.3, 0.0]
    end = [0.1, -0.4, 0.5, 0.2, 0.3, -0.1]
    print(f"   Edge cost: {cost(start, end):.4f}")

    print("\n" + "=" * 60)
    print("Demo complete!")
    print("=" * 60)


if __name__ == "__main__":
    main()
