"""Prometheus counters for result pages, test outcomes and suite summaries."""

import os
from prometheus_client import Counter, start_http_server
from . import config

# Result artifacts opened through any sink.
ARTIFACTS_OPENED = Counter(
    "runreport_artifacts_opened_total",
    "Number of result artifacts opened.",
)

TESTS_COMPLETED = Counter(
    "runreport_tests_completed_total",
    "Count of completed tests by outcome.",
    ["outcome"],
)

SUMMARIES_WRITTEN = Counter(
    "runreport_summaries_written_total",
    "Number of suite summary artifacts written.",
)


def start_metrics_server(port: int | None = None) -> None:
    """Expose the runreport artifact, test outcome and summary counters.

    Parameters
    ----------
    port:
        Port for the HTTP server. If ``None`` the value from the
        ``RUNREPORT_METRICS_PORT`` environment variable is used when set,
        otherwise ``settings.metrics_port``.
    """

    if port is None:
        env = os.getenv("RUNREPORT_METRICS_PORT")
        if env:
            port = int(env)
        else:
            port = config.settings.metrics_port
    start_http_server(port)
