"""
Core module - Shared configuration, host information, logging and exceptions.
"""

from motionprofiles.core.config import (
    GlobalSearchSettings,
    GraphSearchSettings,
    ProfileSettings,
    SeedSettings,
    TrajOptSettings,
)
from motionprofiles.core.exceptions import (
    ConfigurationError,
    MotionProfileError,
    ProfileNotFoundError,
    ProfileRegistrationError,
)
from motionprofiles.core.host import HostParallelism

__all__ = [
    # Config
    "ProfileSettings",
    "SeedSettings",
    "GlobalSearchSettings",
    "GraphSearchSettings",
    "TrajOptSettings",
    # Exceptions
    "MotionProfileError",
    "ConfigurationError",
    "ProfileNotFoundError",
    "ProfileRegistrationError",
    # Host
    "HostParallelism",
]
