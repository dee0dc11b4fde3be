"""
motionprofiles - Profile builders for a multi-stage robot motion planning pipeline.

Builds the configuration records consumed by an interpolation seed planner,
parallel sampling-based planners, a Cartesian graph-search planner and a
trajectory optimizer.
"""

__version__ = "0.1.0"
__author__ = "motionprofiles Contributors"

from motionprofiles.core.config import ProfileSettings
from motionprofiles.core.host import HostParallelism
from motionprofiles.registry import ProfileDictionary, build_default_profiles

__all__ = [
    "__version__",
    "HostParallelism",
    "ProfileDictionary",
    "ProfileSettings",
    "build_default_profiles",
]
