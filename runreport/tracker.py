"""Stateful reporting core for one test run."""

from __future__ import annotations

from typing import Any, Dict, List, Optional

import structlog

from .exceptions import ProtocolViolationError
from .listener import NullListener, ResultsListener
from .metrics import TESTS_COMPLETED
from .model import TestPage, TimeMeasurement
from .reporter import SummaryReporter
from .sinks.base import ResultSink
from .summary import TestSummary, css_class

logger = structlog.get_logger(__name__)


class RunTracker:
    """Persist per-test results and aggregate counts for a run.

    A run is a suite unless a completed test has the same full path as the
    run's main page. Suites get a summary page on
    :meth:`all_testing_complete`.
    """

    def __init__(
        self,
        main_page_name: str,
        sink: ResultSink | None = None,
        listener: ResultsListener | None = None,
    ) -> None:
        self._main_page_name = main_page_name
        self._sink = sink
        self._listener: ResultsListener = listener or NullListener()
        self._is_suite = True
        self._total_summary = TestSummary()
        self._visited_test_pages: List[str] = []
        self._test_summaries: Dict[str, TestSummary] = {}

    @property
    def main_page_name(self) -> str:
        return self._main_page_name

    @property
    def is_suite(self) -> bool:
        return self._is_suite

    @property
    def listener(self) -> ResultsListener:
        return self._listener

    @property
    def sink(self) -> Optional[ResultSink]:
        return self._sink

    def set_results_repository(self, sink: ResultSink) -> None:
        """Replace the sink artifacts are written to."""
        self._sink = sink

    def set_listener(self, listener: ResultsListener | None) -> None:
        """Attach ``listener``; ``None`` detaches the current one."""
        self._listener = listener or NullListener()

    def _require_sink(self) -> ResultSink:
        if self._sink is None:
            raise ProtocolViolationError(
                f"no result sink attached to run {self._main_page_name!r}"
            )
        return self._sink

    # Driver hooks without reporting effect
    def test_system_started(
        self, test_system: Any, test_system_name: str, test_runner: str
    ) -> None:
        logger.debug(
            "test_system_started",
            run=self._main_page_name,
            test_system=test_system_name,
            runner=test_runner,
        )

    def set_execution_log_and_tracking_id(
        self, tracking_id: str, log: Any = None
    ) -> None:
        logger.debug(
            "tracking_id_assigned", run=self._main_page_name, tracking_id=tracking_id
        )

    def new_test_started(
        self, test: TestPage, timing: TimeMeasurement | None = None
    ) -> None:
        """Open the result page for ``test``."""
        self._require_sink().open(test.full_path)
        logger.info("test_started", run=self._main_page_name, test=test.full_path)
        self._listener.new_test_started(test, timing)

    def test_output_chunk(self, output: str) -> None:
        """Stream ``output`` into the open result page."""
        self._require_sink().write(output)

    def test_complete(
        self,
        test: TestPage,
        summary: TestSummary,
        timing: TimeMeasurement | None = None,
    ) -> None:
        """Record ``summary`` for ``test`` and close its result page."""
        sink = self._require_sink()
        full_path = test.full_path
        if not sink.is_open:
            raise ProtocolViolationError(
                f"cannot complete {full_path!r}: no result page is open"
            )
        self._visited_test_pages.append(full_path)
        self._total_summary.add(summary)
        self._test_summaries[full_path] = summary.copy()
        sink.close()
        self._is_suite = self._is_suite and self._main_page_name != full_path
        outcome = css_class(summary)
        TESTS_COMPLETED.labels(outcome=outcome).inc()
        logger.info(
            "test_complete",
            run=self._main_page_name,
            test=full_path,
            outcome=outcome,
            right=summary.right,
            wrong=summary.wrong,
            ignores=summary.ignores,
            exceptions=summary.exceptions,
            elapsed_ms=timing.elapsed_ms if timing is not None else None,
        )
        self._listener.test_complete(test, summary, timing)

    def all_testing_complete(self, timing: TimeMeasurement | None = None) -> None:
        """Finish the run, writing the summary page when it is a suite."""
        if self._is_suite:
            self.write_summary(self._main_page_name)
        logger.info(
            "run_complete",
            run=self._main_page_name,
            suite=self._is_suite,
            tests=len(self._visited_test_pages),
            total=str(self._total_summary),
        )
        self._listener.all_testing_complete(timing)

    def write_summary(self, suite_name: str) -> None:
        """Write the summary table for this run as ``suite_name``."""
        SummaryReporter(self._require_sink()).build_and_write(self, suite_name)

    def get_total_summary(self) -> TestSummary:
        return self._total_summary

    def set_total_summary(self, summary: TestSummary) -> None:
        """Replace the running total, e.g. to seed or reset it."""
        self._total_summary = summary

    def get_test_summary(self, test_path: str) -> TestSummary:
        """Return the stored summary for ``test_path``.

        Raises
        ------
        KeyError
            If no test with that path has completed.
        """

        return self._test_summaries[test_path]

    def get_tests_executed(self) -> List[str]:
        """Return full paths of completed tests in completion order."""
        return list(self._visited_test_pages)
