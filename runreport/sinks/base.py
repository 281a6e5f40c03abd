"""Abstract result sink interface."""

from __future__ import annotations

from abc import ABC, abstractmethod
from contextlib import contextmanager
from typing import Dict, Iterator, List, Optional

from ..exceptions import ProtocolViolationError


class ResultSink(ABC):
    """Write target for one named result artifact at a time.

    Implementations must reject ``open`` while an artifact is already open
    and ``write``/``close`` while none is.
    """

    @property
    @abstractmethod
    def is_open(self) -> bool:
        """Return ``True`` while an artifact is open."""
        raise NotImplementedError

    @abstractmethod
    def open(self, name: str) -> None:
        """Begin a new artifact called ``name``."""
        raise NotImplementedError

    @abstractmethod
    def write(self, chunk: str) -> None:
        """Append ``chunk`` to the open artifact."""
        raise NotImplementedError

    @abstractmethod
    def close(self) -> None:
        """Finalize and release the open artifact."""
        raise NotImplementedError

    @contextmanager
    def artifact(self, name: str) -> Iterator[ResultSink]:
        """Open ``name`` for the duration of a ``with`` block."""
        self.open(name)
        try:
            yield self
        finally:
            self.close()

    def _require_closed(self, name: str) -> None:
        if self.is_open:
            raise ProtocolViolationError(
                f"cannot open {name!r}: previous artifact was not closed"
            )

    def _require_open(self, action: str) -> None:
        if not self.is_open:
            raise ProtocolViolationError(f"cannot {action}: no artifact is open")


class InMemoryResultSink(ResultSink):
    """In-memory sink for development and testing."""

    def __init__(self) -> None:
        self.artifacts: Dict[str, str] = {}
        self.opened: List[str] = []
        self._current: Optional[str] = None

    @property
    def is_open(self) -> bool:
        return self._current is not None

    @property
    def current(self) -> Optional[str]:
        """Name of the open artifact, if any."""
        return self._current

    def open(self, name: str) -> None:
        self._require_closed(name)
        self._current = name
        self.opened.append(name)
        self.artifacts[name] = ""

    def write(self, chunk: str) -> None:
        self._require_open("write")
        self.artifacts[self._current] += chunk

    def close(self) -> None:
        self._require_open("close")
        self._current = None
