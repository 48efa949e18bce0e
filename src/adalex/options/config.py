# Copyright 2026 AdaLex Contributors
# SPDX-License-Identifier: Apache-2.0

"""Optional YAML configuration for the adalex command-line driver."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Literal

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from adalex.report.stats import Section

logger = logging.getLogger(__name__)

# ###############
# Public Interface
# ###############

CONFIG_FILE_NAME = ".adalex.yaml"

ShowOption = Literal["all", "id", "kw", "num", "str"]
LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class ScanConfigError(Exception):
    """Raised when the configuration file cannot be read or is invalid."""


class ScanConfig(BaseModel):
    """Driver settings read from ``.adalex.yaml``.

    Every field is optional; an empty file yields the defaults.
    """

    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    show: list[ShowOption] = Field(default_factory=list)
    stop_on_error: bool = Field(alias="stop-on-error", default=True)
    color: bool = False
    log_level: LogLevel = Field(alias="log-level", default="WARNING")

    @field_validator("log_level", mode="before")
    @classmethod
    def upper_log_level(cls, value: object) -> object:
        return value.upper() if isinstance(value, str) else value

    @property
    def show_all(self) -> bool:
        """True if every token should be printed."""
        return "all" in self.show

    @property
    def sections(self) -> set[Section]:
        """The report sections enabled by default."""
        return {Section(name) for name in self.show if name != "all"}


def load_scan_config(path: Path) -> ScanConfig:
    """Load and validate a configuration file.

    Args:
        path: Path to the YAML file.

    Returns:
        A validated ScanConfig instance.

    Raises:
        ScanConfigError: If the file cannot be read, contains invalid YAML,
            or does not conform to the expected schema.
    """
    try:
        raw = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        raise ScanConfigError(f"Config file not found: {path}") from None
    except OSError as exc:
        raise ScanConfigError(f"Cannot read config file '{path}': {exc}") from exc

    try:
        data = yaml.safe_load(raw)
    except yaml.YAMLError as exc:
        raise ScanConfigError(f"Invalid YAML in config file '{path}': {exc}") from exc

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ScanConfigError(f"{path}: config must be a YAML mapping")

    try:
        config = ScanConfig.model_validate(data)
    except ValidationError as exc:
        raise ScanConfigError(f"Invalid config file '{path}': {exc}") from exc

    logger.debug("Loaded configuration from %s", path)
    return config


def discover_scan_config(directory: Path) -> ScanConfig:
    """Load ``.adalex.yaml`` from *directory*, or return the defaults if there is none.

    Raises:
        ScanConfigError: If the file exists but is invalid.
    """
    path = directory / CONFIG_FILE_NAME
    if not path.is_file():
        return ScanConfig()
    return load_scan_config(path)
