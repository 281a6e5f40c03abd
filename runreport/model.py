"""Identity and timing types passed in by the test-execution driver."""

from __future__ import annotations

import time
from dataclasses import dataclass, field
from typing import Optional, Protocol


class TestPage(Protocol):
    """Anything that names an executed test page by its full path."""

    @property
    def full_path(self) -> str:
        ...


@dataclass(frozen=True)
class WikiTestPage:
    """Minimal test page identity built from a dotted or slashed path."""

    __test__ = False

    path: str

    @property
    def full_path(self) -> str:
        return self.path


@dataclass
class TimeMeasurement:
    """Wall clock timing for a test or a whole run, in milliseconds."""

    started: float = field(default_factory=lambda: time.time() * 1000)
    stopped: Optional[float] = None

    def stop(self) -> TimeMeasurement:
        """Record the stop time and return ``self`` for chaining."""
        self.stopped = time.time() * 1000
        return self

    @property
    def elapsed_ms(self) -> float:
        end = self.stopped if self.stopped is not None else time.time() * 1000
        return end - self.started
