"""Secondary observers that receive the same lifecycle events as a tracker."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Iterable, List, Optional

from .model import TestPage, TimeMeasurement
from .summary import TestSummary


class ResultsListener(ABC):
    """Interface for consumers chained behind a :class:`RunTracker`."""

    @abstractmethod
    def new_test_started(
        self, test: TestPage, timing: Optional[TimeMeasurement]
    ) -> None:
        raise NotImplementedError

    @abstractmethod
    def test_complete(
        self,
        test: TestPage,
        summary: TestSummary,
        timing: Optional[TimeMeasurement],
    ) -> None:
        raise NotImplementedError

    @abstractmethod
    def all_testing_complete(self, timing: Optional[TimeMeasurement]) -> None:
        raise NotImplementedError


class NullListener(ResultsListener):
    """Listener that ignores every event."""

    def new_test_started(self, test, timing) -> None:
        pass

    def test_complete(self, test, summary, timing) -> None:
        pass

    def all_testing_complete(self, timing) -> None:
        pass


class CompositeListener(ResultsListener):
    """Forward each event to several listeners in registration order."""

    def __init__(self, listeners: Iterable[ResultsListener] = ()) -> None:
        self.listeners: List[ResultsListener] = list(listeners)

    def add(self, listener: ResultsListener) -> None:
        self.listeners.append(listener)

    def new_test_started(self, test, timing) -> None:
        for listener in self.listeners:
            listener.new_test_started(test, timing)

    def test_complete(self, test, summary, timing) -> None:
        for listener in self.listeners:
            listener.test_complete(test, summary, timing)

    def all_testing_complete(self, timing) -> None:
        for listener in self.listeners:
            listener.all_testing_complete(timing)
