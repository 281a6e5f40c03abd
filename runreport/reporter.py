"""Suite summary page listing every executed test."""

from __future__ import annotations

from typing import TYPE_CHECKING

import structlog

from .metrics import SUMMARIES_WRITTEN
from .sinks.base import ResultSink
from .summary import TestSummary, css_class

if TYPE_CHECKING:
    from .tracker import RunTracker

logger = structlog.get_logger(__name__)

SUMMARY_HEADER = (
    "<table><tr><td>Name</td><td>Right</td><td>Wrong</td>"
    "<td>Exceptions</td></tr>"
)
SUMMARY_FOOTER = "</table>"


def summary_row(test_name: str, summary: TestSummary) -> str:
    """Return one table row linking to the result page of ``test_name``."""

    return (
        f'<tr class="{css_class(summary)}"><td>'
        f'<a href="{test_name}.html">{test_name}</a>'
        f"</td><td>{summary.right}</td><td>{summary.wrong}"
        f"</td><td>{summary.exceptions}</td></tr>"
    )


class SummaryReporter:
    """Write the aggregate table for a run through a :class:`ResultSink`."""

    def __init__(self, sink: ResultSink) -> None:
        self.sink = sink

    def build_and_write(self, tracker: RunTracker, name: str | None = None) -> None:
        """Write the summary of ``tracker`` as the artifact ``name``.

        Parameters
        ----------
        tracker:
            Tracker whose executed tests are listed, in completion order.
        name:
            Artifact name. Defaults to the tracker's main page name.
        """

        name = name or tracker.main_page_name
        tests = tracker.get_tests_executed()
        with self.sink.artifact(name):
            self.sink.write(SUMMARY_HEADER)
            for test_name in tests:
                self.sink.write(
                    summary_row(test_name, tracker.get_test_summary(test_name))
                )
            self.sink.write(SUMMARY_FOOTER)
        SUMMARIES_WRITTEN.inc()
        logger.info("summary_written", name=name, tests=len(tests))
