from typing import Optional

from pydantic import BaseModel, ValidationError, field_validator

import logging
import os
import yaml


class Settings(BaseModel):
    """Configuration options loaded from YAML or environment variables."""

    # Artifact output
    output_dir: str = "fitnesse-results"

    # Logging and metrics
    log_level: str = "INFO"
    metrics_port: int = 8000

    @field_validator("output_dir")
    @classmethod
    def _check_output_dir(cls, value: str) -> str:
        """Ensure an output directory was given."""
        if not value or not value.strip():
            raise ValueError("output_dir must not be empty")
        return value

    @field_validator("log_level")
    @classmethod
    def _check_log_level(cls, value: str) -> str:
        """Ensure the log level names a standard logging level."""
        level = value.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"unknown log_level {value!r}")
        return level

    @field_validator("metrics_port")
    @classmethod
    def _check_port(cls, value: int) -> int:
        """Ensure the metrics port is within the valid TCP range."""
        if not (1 <= value <= 65535):
            raise ValueError("metrics_port must be between 1 and 65535")
        return value


def load_settings(path: Optional[str] = None) -> Settings:
    """Return :class:`Settings` from ``path`` and environment variables."""

    data: dict[str, object] = {}
    if path:
        with open(path, "r", encoding="utf-8") as fh:
            data = yaml.safe_load(fh) or {}
    env = os.getenv
    if "output_dir" not in data and env("RUNREPORT_OUTPUT_DIR"):
        data["output_dir"] = env("RUNREPORT_OUTPUT_DIR")
    if "log_level" not in data and env("RUNREPORT_LOG_LEVEL"):
        data["log_level"] = env("RUNREPORT_LOG_LEVEL")
    if "metrics_port" not in data and env("RUNREPORT_METRICS_PORT"):
        try:
            data["metrics_port"] = int(env("RUNREPORT_METRICS_PORT"))
        except ValueError:
            pass

    try:
        settings_obj = Settings.model_validate(data)
    except ValidationError as exc:
        raise ValueError(f"Invalid configuration: {exc}") from exc
    globals()["settings"] = settings_obj
    return settings_obj


# Global settings instance used by the package
settings = load_settings()
