"""
Pytest configuration and shared fixtures.
"""

import tempfile
from pathlib import Path

import pytest

from motionprofiles.core.host import HostParallelism


@pytest.fixture
def temp_dir():
    """Provide a temporary directory that is cleaned up after the test."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def four_threads():
    """Host parallelism of a four-thread machine."""
    return HostParallelism(threads=4)


@pytest.fixture
def sample_settings_file(temp_dir):
    """Create a settings file overriding a few builder constants."""
    settings = """
profiles:
  dof: 7
  max_threads: 2

  global_search:
    planning_time: 5.0
    range_min: 0.1
    range_max: 0.3

  graph_search:
    sample_resolution_deg: 30.0
    penalize_wrist_motion: true

  trajopt:
    collision_margin: 0.025
"""
    path = temp_dir / "profiles.yaml"
    path.write_text(settings)
    return path
