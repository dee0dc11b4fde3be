"""
Tests for the trajectory optimizer profiles.
"""

import pytest

from motionprofiles.core.config import TrajOptSettings
from motionprofiles.profiles.trajopt import (
    TOOL_Z_ROTATION_INDEX,
    create_trajopt_composite_profile,
    create_trajopt_tool_z_free_plan_profile,
)
from motionprofiles.profiles.types import CollisionEvaluatorType, ContactTestType


class TestPlanProfile:
    """Tests for the tool-z-free plan profile."""

    def test_tool_z_rotation_free(self):
        """Test only the tool z rotation coefficient is zero."""
        coeff = create_trajopt_tool_z_free_plan_profile().cartesian_coeff
        assert len(coeff) == 6
        assert coeff[TOOL_Z_ROTATION_INDEX] == 0.0
        assert coeff.count(0.0) == 1
        assert coeff.count(5.0) == 5

    def test_free_axes(self):
        """Test the free axis is index 5."""
        assert create_trajopt_tool_z_free_plan_profile().free_axes == (5,)

    def test_custom_coefficient(self):
        """Test a custom Cartesian coefficient."""
        profile = create_trajopt_tool_z_free_plan_profile(TrajOptSettings(cartesian_coeff=2.0))
        assert profile.cartesian_coeff == (2.0, 2.0, 2.0, 2.0, 2.0, 0.0)


class TestCompositeProfile:
    """Tests for the whole-trajectory composite profile."""

    def test_smoothing_weights(self):
        """Test velocity, acceleration and jerk weights escalate."""
        profile = create_trajopt_composite_profile()
        assert profile.smooth_velocities is True
        assert profile.velocity_coeff == (10.0,) * 6
        assert profile.acceleration_coeff == (25.0,) * 6
        assert profile.jerk_coeff == (50.0,) * 6

    def test_collision_cost(self):
        """Test the soft collision cost settings."""
        profile = create_trajopt_composite_profile()
        cost = profile.collision_cost
        assert profile.contact_test_type is ContactTestType.CLOSEST_CONTACT
        assert cost.enabled is True
        assert cost.evaluator is CollisionEvaluatorType.DISCRETE_CONTINUOUS
        assert cost.margin == 0.010
        assert cost.margin_buffer == 0.010
        assert cost.cost_coefficient == 10.0

    def test_collision_constraint_disabled(self):
        """Test the hard collision constraint is off."""
        profile = create_trajopt_composite_profile()
        assert profile.collision_constraint.enabled is False

    def test_dof(self):
        """Test weight vectors follow the joint count."""
        profile = create_trajopt_composite_profile(dof=7)
        assert len(profile.velocity_coeff) == 7
        assert len(profile.jerk_coeff) == 7

    def test_invalid_dof(self):
        """Test zero joints is rejected."""
        with pytest.raises(ValueError):
            create_trajopt_composite_profile(dof=0)

    def test_custom_settings(self):
        """Test margin and constraint overrides."""
        settings = TrajOptSettings(
            collision_margin=0.02, collision_margin_buffer=0.05, enable_collision_constraint=True
        )
        profile = create_trajopt_composite_profile(settings)
        assert profile.collision_cost.margin == 0.02
        assert profile.collision_cost.margin_buffer == 0.05
        assert profile.collision_constraint.enabled is True

    def test_to_dict(self):
        """Test the plain dict form."""
        data = create_trajopt_composite_profile().to_dict()
        assert data["contact_test_type"] == "CLOSEST_CONTACT"
        assert data["collision_cost"]["evaluator"] == "DISCRETE_CONTINUOUS"
        assert data["smoothness"]["jerk"] == [50.0] * 6
