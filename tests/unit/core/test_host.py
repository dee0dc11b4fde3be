"""
Tests for host parallelism detection.
"""

from unittest.mock import patch

import pytest

from motionprofiles.core.exceptions import ConfigurationError
from motionprofiles.core.host import HostParallelism


class TestHostParallelism:
    """Tests for HostParallelism."""

    def test_detect_uses_cpu_count(self):
        """Test detection reports the CPU count."""
        with patch("motionprofiles.core.host.os.cpu_count", return_value=8):
            assert HostParallelism.detect().threads == 8

    @pytest.mark.parametrize("reported", [0, None])
    def test_detect_floors_unknown_to_one(self, reported):
        """Test an unknown or zero CPU count falls back to one thread."""
        with patch("motionprofiles.core.host.os.cpu_count", return_value=reported):
            assert HostParallelism.detect().threads == 1

    def test_detect_respects_max_threads(self):
        """Test max_threads caps the detected count."""
        with patch("motionprofiles.core.host.os.cpu_count", return_value=16):
            assert HostParallelism.detect(max_threads=4).threads == 4

    def test_max_threads_above_reported(self):
        """Test a cap above the CPU count leaves the count unchanged."""
        with patch("motionprofiles.core.host.os.cpu_count", return_value=2):
            assert HostParallelism.detect(max_threads=32).threads == 2

    def test_zero_threads_rejected(self):
        """Test constructing with zero threads raises."""
        with pytest.raises(ConfigurationError) as exc_info:
            HostParallelism(threads=0)
        assert exc_info.value.details == {"threads": 0}

    def test_frozen(self):
        """Test the thread count cannot be changed."""
        host = HostParallelism(threads=2)
        with pytest.raises(AttributeError):
            host.threads = 3
