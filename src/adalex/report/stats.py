# Copyright 2026 AdaLex Contributors
# SPDX-License-Identifier: Apache-2.0

"""Aggregate statistics over the distinct lexemes of a scanned program."""

from __future__ import annotations

import enum
from collections.abc import Callable, Iterable
from dataclasses import dataclass, field

from adalex.scanner.lexer import LexItem, TokenType, is_keyword

# ###############
# Public Interface
# ###############


class Section(enum.Enum):
    """Optional report sections, valued by their command-line flag name."""

    NUMERALS = "num"
    STRINGS = "str"
    IDENTIFIERS = "id"
    KEYWORDS = "kw"


SECTION_ORDER: tuple[Section, ...] = (
    Section.NUMERALS,
    Section.STRINGS,
    Section.IDENTIFIERS,
    Section.KEYWORDS,
)
"""The order in which sections are printed."""


@dataclass
class LexemeStats:
    """Collects distinct lexemes by category while a program is scanned.

    Attributes:
        token_count: Number of tokens added, excluding ``DONE`` and ``ERR``.
        numerals: Distinct integer and real literals, by exact text.
        strings: Distinct string and character literals.
        keywords: Distinct keyword kinds encountered.
    """

    token_count: int = 0
    numerals: set[str] = field(default_factory=set)
    strings: set[str] = field(default_factory=set)
    keywords: set[TokenType] = field(default_factory=set)
    # Case-folded spelling -> first spelling seen.
    _identifiers: dict[str, str] = field(default_factory=dict, init=False)

    def add(self, item: LexItem) -> None:
        """Record one scanned token."""
        kind = item.kind
        if kind in (TokenType.DONE, TokenType.ERR):
            return
        self.token_count += 1
        if kind == TokenType.IDENT:
            self._identifiers.setdefault(item.lexeme.lower(), item.lexeme)
        elif kind in (TokenType.ICONST, TokenType.FCONST):
            self.numerals.add(item.lexeme)
        elif kind in (TokenType.SCONST, TokenType.CCONST):
            self.strings.add(item.lexeme)
        elif is_keyword(kind):
            self.keywords.add(kind)

    def add_all(self, items: Iterable[LexItem]) -> None:
        """Record every token in *items*."""
        for item in items:
            self.add(item)

    @property
    def identifiers(self) -> list[str]:
        """Distinct identifiers, compared and sorted case-insensitively."""
        return [self._identifiers[key] for key in sorted(self._identifiers)]

    def entries(self, section: Section) -> list[str]:
        """Return the display entries of *section*, in display order."""
        if section == Section.NUMERALS:
            return [_format_number(float(text)) for text in sorted(self.numerals, key=float)]
        if section == Section.STRINGS:
            return [f'"{text}"' for text in sorted(self.strings)]
        if section == Section.IDENTIFIERS:
            return self.identifiers
        return sorted(kind.value.lower() for kind in self.keywords)


def format_summary(stats: LexemeStats, lines: int) -> str:
    """Render the summary block printed after a successful scan.

    Args:
        stats: The collected statistics.
        lines: Number of lines scanned.

    Returns:
        The summary text, starting with an empty line and without a trailing newline.
    """
    return "\n".join(
        [
            "",
            f"Lines: {lines}",
            f"Total Tokens: {stats.token_count}",
            f"Numerals: {len(stats.numerals)}",
            f"Characters and Strings : {len(stats.strings)}",
            f"Identifiers: {len(stats.identifiers)}",
            f"keywords: {len(stats.keywords)}",
        ]
    )


def format_section(
    stats: LexemeStats,
    section: Section,
    style: Callable[[str], str] | None = None,
) -> str | None:
    """Render one report section as a header line and a comma-separated entry line.

    Args:
        stats: The collected statistics.
        section: Which section to render.
        style: Optional function applied to the header text (e.g. for color).

    Returns:
        The section text without a trailing newline, or None if the section is empty.
    """
    entries = stats.entries(section)
    if not entries:
        return None
    header = _SECTION_HEADERS[section]
    if style is not None:
        header = style(header)
    return f"{header}\n{', '.join(entries)}"


# ################
# Implementation
# ################

_SECTION_HEADERS: dict[Section, str] = {
    Section.NUMERALS: "NUMERIC CONSTANTS:",
    Section.STRINGS: "CHARACTERS AND STRINGS:",
    Section.IDENTIFIERS: "IDENTIFIERS:",
    Section.KEYWORDS: "keywords:",
}


def _format_number(value: float) -> str:
    """Print whole values as integers and everything else with six significant digits."""
    if value.is_integer():
        return str(int(value))
    return f"{value:g}"
