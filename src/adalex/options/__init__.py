# Copyright 2026 AdaLex Contributors
# SPDX-License-Identifier: Apache-2.0

"""Driver configuration for adalex."""

from adalex.options.config import (
    CONFIG_FILE_NAME,
    ScanConfig,
    ScanConfigError,
    discover_scan_config,
    load_scan_config,
)

__all__ = [
    "CONFIG_FILE_NAME",
    "ScanConfig",
    "ScanConfigError",
    "discover_scan_config",
    "load_scan_config",
]
