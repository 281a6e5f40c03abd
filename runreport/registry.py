"""Process-wide lookup of run trackers by run identifier."""

from __future__ import annotations

import threading
from typing import Callable, Dict, List, Optional

import structlog

from .tracker import RunTracker

logger = structlog.get_logger(__name__)


class InstanceRegistry:
    """Share one :class:`RunTracker` per run identifier.

    The host creates a single registry at start-up and hands it to every
    call site that reports on a run. Entries live until :meth:`dispose`.
    """

    def __init__(
        self, tracker_factory: Callable[[str], RunTracker] = RunTracker
    ) -> None:
        self._tracker_factory = tracker_factory
        self._trackers: Dict[str, RunTracker] = {}
        self._lock = threading.Lock()

    def get_or_create(self, run_id: str) -> RunTracker:
        """Return the tracker for ``run_id``, creating it on first use."""
        with self._lock:
            tracker = self._trackers.get(run_id)
            if tracker is None:
                tracker = self._tracker_factory(run_id)
                self._trackers[run_id] = tracker
                logger.debug("tracker_created", run=run_id)
            return tracker

    def get(self, run_id: str) -> Optional[RunTracker]:
        with self._lock:
            return self._trackers.get(run_id)

    def dispose(self, run_id: str) -> None:
        """Forget the tracker for ``run_id``.

        Open artifacts are not closed; finish the run before disposing.
        """
        with self._lock:
            tracker = self._trackers.pop(run_id, None)
        if tracker is None:
            return
        if tracker.sink is not None and tracker.sink.is_open:
            logger.warning("tracker_disposed_with_open_artifact", run=run_id)
        else:
            logger.debug("tracker_disposed", run=run_id)

    def run_ids(self) -> List[str]:
        with self._lock:
            return list(self._trackers)

    def __contains__(self, run_id: object) -> bool:
        with self._lock:
            return run_id in self._trackers

    def __len__(self) -> int:
        with self._lock:
            return len(self._trackers)
