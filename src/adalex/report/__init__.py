# Copyright 2026 AdaLex Contributors
# SPDX-License-Identifier: Apache-2.0

"""Aggregate reporting over scanned tokens."""

from adalex.report.stats import SECTION_ORDER, LexemeStats, Section, format_section, format_summary

__all__ = [
    "LexemeStats",
    "SECTION_ORDER",
    "Section",
    "format_section",
    "format_summary",
]
