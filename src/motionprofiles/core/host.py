"""
Host hardware parallelism.

The global-search and graph-search stages both fan out over the host's
threads. The thread count is read once and passed to both builders so the
stages are sized consistently.
"""

import os
from dataclasses import dataclass
from typing import Optional

from motionprofiles.core.exceptions import ConfigurationError
from motionprofiles.core.logging import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class HostParallelism:
    """Number of usable hardware threads on the host."""

    threads: int

    def __post_init__(self) -> None:
        if self.threads < 1:
            raise ConfigurationError(
                "Host parallelism must be at least one thread",
                details={"threads": self.threads},
            )

    @classmethod
    def detect(cls, max_threads: Optional[int] = None) -> "HostParallelism":
        """
        Read the host concurrency.

        A host that cannot report its concurrency (``None`` or ``0``) is
        treated as single-threaded.

        Args:
            max_threads: Optional upper bound on the reported count

        Returns:
            HostParallelism with at least one thread
        """
        reported = os.cpu_count()
        if not reported:
            logger.warning("host_concurrency_unavailable", reported=reported, fallback=1)
            reported = 1

        threads = reported
        if max_threads is not None:
            threads = max(1, min(threads, max_threads))

        logger.debug("host_parallelism_detected", reported=reported, threads=threads)
        return cls(threads=threads)
