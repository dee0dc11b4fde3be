"""
Configuration management for motionprofiles.

Every numeric constant used by the profile builders lives here as the default
of a validated settings model. Builders called without settings reproduce
these defaults exactly; a YAML file can override any subset of them.
"""

from pathlib import Path
from typing import Literal, Optional

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, model_validator

from motionprofiles.core.exceptions import ConfigurationError


class LoggingSettings(BaseModel):
    """Log level, renderer and optional log file."""

    model_config = ConfigDict(frozen=True)

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    json_output: bool = False
    log_file: Optional[Path] = None


class SeedSettings(BaseModel):
    """Interpolation thresholds for the seed planner."""

    model_config = ConfigDict(frozen=True)

    state_step_deg: float = Field(default=5.0, gt=0.0)
    translation_step: float = Field(default=0.1, gt=0.0)
    rotation_step_deg: float = Field(default=5.0, gt=0.0)
    min_steps: int = Field(default=1, ge=1)


class GlobalSearchSettings(BaseModel):
    """Parallel sampling-based planner settings."""

    model_config = ConfigDict(frozen=True)

    planning_time: float = Field(default=20.0, gt=0.0)
    range_min: float = Field(default=0.05, gt=0.0)
    range_max: float = Field(default=0.5, gt=0.0)

    @model_validator(mode="after")
    def _check_range_bounds(self) -> "GlobalSearchSettings":
        # Equal bounds would give every parallel planner the same range
        if self.range_min >= self.range_max:
            raise ValueError(
                f"range_min ({self.range_min}) must be below range_max ({self.range_max})"
            )
        return self


class GraphSearchSettings(BaseModel):
    """Cartesian graph-search planner settings."""

    model_config = ConfigDict(frozen=True)

    sample_resolution_deg: float = Field(default=10.0, gt=0.0, le=360.0)
    enable_edge_collision: bool = False
    use_redundant_joint_solutions: bool = False
    penalize_wrist_motion: bool = False
    wrist_weight: float = Field(default=5.0, ge=0.0)


class TrajOptSettings(BaseModel):
    """Trajectory optimizer weights and collision settings."""

    model_config = ConfigDict(frozen=True)

    cartesian_coeff: float = Field(default=5.0, ge=0.0)
    velocity_coeff: float = Field(default=10.0, ge=0.0)
    acceleration_coeff: float = Field(default=25.0, ge=0.0)
    jerk_coeff: float = Field(default=50.0, ge=0.0)
    collision_margin: float = Field(default=0.010, ge=0.0)
    collision_margin_buffer: float = Field(default=0.010, ge=0.0)
    collision_coeff: float = Field(default=10.0, ge=0.0)
    enable_collision_constraint: bool = False


class ProfileSettings(BaseModel):
    """
    Aggregate settings for all profile builders.

    Example:
        >>> settings = ProfileSettings.from_yaml(Path("profiles.yaml"))
        >>> settings.global_search.planning_time
        20.0
    """

    model_config = ConfigDict(frozen=True)

    dof: int = Field(default=6, ge=1)
    max_threads: Optional[int] = Field(default=None, ge=1)
    seed: SeedSettings = Field(default_factory=SeedSettings)
    global_search: GlobalSearchSettings = Field(default_factory=GlobalSearchSettings)
    graph_search: GraphSearchSettings = Field(default_factory=GraphSearchSettings)
    trajopt: TrajOptSettings = Field(default_factory=TrajOptSettings)

    @model_validator(mode="after")
    def _check_wrist_penalty(self) -> "ProfileSettings":
        # The wrist is the last three joints
        if self.graph_search.penalize_wrist_motion and self.dof < 3:
            raise ValueError("penalize_wrist_motion requires dof >= 3")
        return self

    @classmethod
    def from_yaml(cls, path: Path) -> "ProfileSettings":
        """
        Load settings from a YAML file.

        The file holds overrides under a top-level ``profiles`` key; anything
        not given keeps its default.

        Args:
            path: Path to the YAML file

        Returns:
            ProfileSettings instance

        Raises:
            ConfigurationError: If the file is missing, unreadable or invalid
        """
        path = Path(path)
        if not path.exists():
            raise ConfigurationError(f"Settings file not found: {path}")

        try:
            with open(path) as f:
                data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigurationError(
                f"Failed to parse settings file: {path}",
                details={"error": str(e)},
            )

        if data is None:
            return cls()
        if not isinstance(data, dict):
            raise ConfigurationError(
                f"Settings file must contain a mapping: {path}",
                details={"type": type(data).__name__},
            )

        overrides = data.get("profiles") or {}
        try:
            return cls(**overrides)
        except (TypeError, ValidationError) as e:
            raise ConfigurationError(
                f"Invalid profile settings: {path}",
                details={"error": str(e)},
            )
