"""
Tests for stage identifiers and the profile lookup table.
"""

import pytest

from motionprofiles.core.exceptions import ProfileNotFoundError, ProfileRegistrationError
from motionprofiles.profiles.seed import SeedProfile, create_seed_profile
from motionprofiles.profiles.trajopt import (
    TrajOptCompositeProfile,
    TrajOptPlanProfile,
    create_trajopt_composite_profile,
    create_trajopt_tool_z_free_plan_profile,
)
from motionprofiles.registry import (
    SIMPLE_DEFAULT_NAMESPACE,
    STAGE_IDENTIFIERS,
    TRAJOPT_DEFAULT_NAMESPACE,
    ProfileDictionary,
)


@pytest.fixture
def profiles():
    """Empty profile dictionary."""
    return ProfileDictionary()


class TestStageIdentifiers:
    """Tests for the stage identifier constants."""

    def test_unique(self):
        """Test the seven identifiers are distinct."""
        assert len(set(STAGE_IDENTIFIERS)) == len(STAGE_IDENTIFIERS) == 7

    def test_known_names(self):
        """Test identifiers match the orchestrator stage names."""
        assert TRAJOPT_DEFAULT_NAMESPACE == "TrajOptMotionPlannerTask"
        assert "IterativeSplineParameterizationTask" in STAGE_IDENTIFIERS


class TestProfileDictionary:
    """Tests for ProfileDictionary."""

    def test_add_and_get(self, profiles):
        """Test a registered profile is returned as the same object."""
        seed = create_seed_profile()
        profiles.add(SIMPLE_DEFAULT_NAMESPACE, "DEFAULT", seed)
        assert profiles.get(SIMPLE_DEFAULT_NAMESPACE, "DEFAULT", SeedProfile) is seed
        assert profiles.has(SIMPLE_DEFAULT_NAMESPACE, "DEFAULT", SeedProfile)

    def test_two_types_under_one_name(self, profiles):
        """Test plan and composite profiles share a stage and name."""
        profiles.add(TRAJOPT_DEFAULT_NAMESPACE, "DEFAULT", create_trajopt_tool_z_free_plan_profile())
        profiles.add(TRAJOPT_DEFAULT_NAMESPACE, "DEFAULT", create_trajopt_composite_profile())

        assert isinstance(
            profiles.get(TRAJOPT_DEFAULT_NAMESPACE, "DEFAULT", TrajOptPlanProfile),
            TrajOptPlanProfile,
        )
        assert isinstance(
            profiles.get(TRAJOPT_DEFAULT_NAMESPACE, "DEFAULT", TrajOptCompositeProfile),
            TrajOptCompositeProfile,
        )
        assert profiles.names(TRAJOPT_DEFAULT_NAMESPACE) == ["DEFAULT"]
        assert len(profiles.items(TRAJOPT_DEFAULT_NAMESPACE)) == 2

    def test_duplicate_rejected(self, profiles):
        """Test registering the same key twice."""
        profiles.add(SIMPLE_DEFAULT_NAMESPACE, "DEFAULT", create_seed_profile())
        with pytest.raises(ProfileRegistrationError) as exc_info:
            profiles.add(SIMPLE_DEFAULT_NAMESPACE, "DEFAULT", create_seed_profile())
        assert exc_info.value.stage == SIMPLE_DEFAULT_NAMESPACE

    def test_empty_name_rejected(self, profiles):
        """Test an empty profile name is rejected."""
        with pytest.raises(ProfileRegistrationError):
            profiles.add(SIMPLE_DEFAULT_NAMESPACE, "", create_seed_profile())

    def test_missing_profile(self, profiles):
        """Test a missing name lists what is available."""
        profiles.add(SIMPLE_DEFAULT_NAMESPACE, "DEFAULT", create_seed_profile())
        with pytest.raises(ProfileNotFoundError) as exc_info:
            profiles.get(SIMPLE_DEFAULT_NAMESPACE, "FAST", SeedProfile)
        assert exc_info.value.details["available"] == ["DEFAULT:SeedProfile"]

    def test_missing_stage(self, profiles):
        """Test lookups on an unknown stage."""
        with pytest.raises(ProfileNotFoundError):
            profiles.get("UnknownTask", "DEFAULT", SeedProfile)
        assert profiles.names("UnknownTask") == []
        assert profiles.items("UnknownTask") == []
