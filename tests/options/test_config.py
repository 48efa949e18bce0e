# Copyright 2026 AdaLex Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tests for the driver configuration module."""

from pathlib import Path

import pytest

from adalex.options import (
    CONFIG_FILE_NAME,
    ScanConfig,
    ScanConfigError,
    discover_scan_config,
    load_scan_config,
)
from adalex.report.stats import Section

# ###############
# Helpers
# ###############


def _write_config(tmp_path: Path, content: str) -> Path:
    """Write a config file and return its path."""
    config_file = tmp_path / CONFIG_FILE_NAME
    config_file.write_text(content, encoding="utf-8")
    return config_file


# ###############
# Normal Cases
# ###############


def test_config_file_name_constant() -> None:
    """CONFIG_FILE_NAME has the expected value."""
    assert CONFIG_FILE_NAME == ".adalex.yaml"


def test_empty_config_uses_defaults(tmp_path: Path) -> None:
    """An empty file yields the default settings."""
    config = load_scan_config(_write_config(tmp_path, ""))

    assert config == ScanConfig()
    assert config.show == []
    assert config.stop_on_error is True
    assert config.color is False
    assert config.log_level == "WARNING"
    assert config.show_all is False
    assert config.sections == set()


def test_full_config(tmp_path: Path) -> None:
    """All keys are parsed, using their hyphenated names."""
    content = """\
show: [all, id, num]
stop-on-error: false
color: true
log-level: debug
"""
    config = load_scan_config(_write_config(tmp_path, content))

    assert config.show_all is True
    assert config.sections == {Section.IDENTIFIERS, Section.NUMERALS}
    assert config.stop_on_error is False
    assert config.color is True
    assert config.log_level == "DEBUG"


def test_discover_without_file_returns_defaults(tmp_path: Path) -> None:
    """A directory without a config file yields the defaults."""
    assert discover_scan_config(tmp_path) == ScanConfig()


def test_discover_reads_file(tmp_path: Path) -> None:
    """discover_scan_config loads the file from the directory."""
    _write_config(tmp_path, "show: [kw]\n")
    assert discover_scan_config(tmp_path).sections == {Section.KEYWORDS}


# ###############
# Error Cases
# ###############


def test_missing_file_raises(tmp_path: Path) -> None:
    """Loading a file that does not exist raises ScanConfigError."""
    with pytest.raises(ScanConfigError, match="not found"):
        load_scan_config(tmp_path / "missing.yaml")


def test_invalid_yaml_raises(tmp_path: Path) -> None:
    """Malformed YAML raises ScanConfigError."""
    with pytest.raises(ScanConfigError, match="Invalid YAML"):
        load_scan_config(_write_config(tmp_path, "show: [all\n"))


def test_non_mapping_raises(tmp_path: Path) -> None:
    """A top-level list is rejected."""
    with pytest.raises(ScanConfigError, match="mapping"):
        load_scan_config(_write_config(tmp_path, "- all\n"))


def test_unknown_key_raises(tmp_path: Path) -> None:
    """Unknown keys are rejected."""
    with pytest.raises(ScanConfigError, match="Invalid config"):
        load_scan_config(_write_config(tmp_path, "verbose: true\n"))


def test_unknown_section_raises(tmp_path: Path) -> None:
    """Only known section names are accepted in 'show'."""
    with pytest.raises(ScanConfigError):
        load_scan_config(_write_config(tmp_path, "show: [everything]\n"))


def test_invalid_log_level_raises(tmp_path: Path) -> None:
    """Unknown log levels are rejected."""
    with pytest.raises(ScanConfigError):
        load_scan_config(_write_config(tmp_path, "log-level: chatty\n"))


def test_error_message_names_file(tmp_path: Path) -> None:
    """Validation errors mention the offending file."""
    path = _write_config(tmp_path, "color: [1, 2]\n")
    with pytest.raises(ScanConfigError) as exc_info:
        load_scan_config(path)
    assert str(path) in str(exc_info.value)
