"""Streaming HTML reporting for test runs."""

from .exceptions import ArtifactIOError, ProtocolViolationError, RunReportError
from .summary import TestSummary, css_class
from .model import TestPage, TimeMeasurement, WikiTestPage
from .sinks import FolderResultSink, InMemoryResultSink, ResultSink
from .listener import CompositeListener, NullListener, ResultsListener
from .reporter import SUMMARY_FOOTER, SUMMARY_HEADER, SummaryReporter, summary_row
from .tracker import RunTracker
from .registry import InstanceRegistry
from .logging_config import configure_logging
from .metrics import start_metrics_server

__all__ = [
    "RunReportError",
    "ArtifactIOError",
    "ProtocolViolationError",
    "TestSummary",
    "css_class",
    "TestPage",
    "TimeMeasurement",
    "WikiTestPage",
    "ResultSink",
    "InMemoryResultSink",
    "FolderResultSink",
    "ResultsListener",
    "NullListener",
    "CompositeListener",
    "SummaryReporter",
    "SUMMARY_HEADER",
    "SUMMARY_FOOTER",
    "summary_row",
    "RunTracker",
    "InstanceRegistry",
    "configure_logging",
    "start_metrics_server",
]
