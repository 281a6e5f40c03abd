import json
import logging

import structlog

from runreport import configure_logging
from runreport.config import Settings
from runreport.metrics import start_metrics_server


def test_start_metrics_server_env(monkeypatch):
    port = {}

    def fake_start(port_arg):
        port["value"] = port_arg

    monkeypatch.setattr("runreport.metrics.start_http_server", fake_start)
    monkeypatch.setenv("RUNREPORT_METRICS_PORT", "9100")
    start_metrics_server(None)
    assert port["value"] == 9100


def test_start_metrics_server_explicit_port(monkeypatch):
    port = {}

    def fake_start(port_arg):
        port["value"] = port_arg

    monkeypatch.setattr("runreport.metrics.start_http_server", fake_start)
    monkeypatch.setenv("RUNREPORT_METRICS_PORT", "9100")
    start_metrics_server(9200)
    assert port["value"] == 9200


def test_configure_logging_emits_json(capsys):
    configure_logging("debug")
    try:
        structlog.get_logger("runreport.test").info("artifact_opened", name="Suite")
        line = capsys.readouterr().out.strip().splitlines()[-1]
        record = json.loads(line)
        assert record["event"] == "artifact_opened"
        assert record["name"] == "Suite"
        assert record["level"] == "info"
        assert "timestamp" in record
    finally:
        configure_logging(logging.INFO)


def test_configure_logging_defaults_to_settings_level(capsys, monkeypatch):
    monkeypatch.setattr("runreport.config.settings", Settings(log_level="DEBUG"))
    configure_logging()
    try:
        structlog.get_logger("runreport.test").debug("tracker_created", run="Suite")
        line = capsys.readouterr().out.strip().splitlines()[-1]
        record = json.loads(line)
        assert record["event"] == "tracker_created"
        assert record["level"] == "debug"
    finally:
        configure_logging(logging.INFO)


def test_start_metrics_server_uses_settings_port(monkeypatch):
    port = {}

    def fake_start(port_arg):
        port["value"] = port_arg

    monkeypatch.setattr("runreport.metrics.start_http_server", fake_start)
    monkeypatch.delenv("RUNREPORT_METRICS_PORT", raising=False)
    monkeypatch.setattr("runreport.config.settings", Settings(metrics_port=9400))
    start_metrics_server(None)
    assert port["value"] == 9400
