# Copyright 2026 AdaLex Contributors
# SPDX-License-Identifier: Apache-2.0

"""Lexical scanner for the Ada-flavored teaching language.

The scanner is pull-based: each call to :func:`next_token` consumes just
enough characters from a :class:`~adalex.scanner.stream.CharStream` to
produce one :class:`LexItem`. Lexical errors never raise; they come back as
``ERR`` items whose lexeme carries the diagnostic, and scanning may resume
with the following call.
"""

from __future__ import annotations

import enum
from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType

from adalex.scanner.stream import CharStream

# ###############
# Public Interface
# ###############


class TokenType(enum.Enum):
    """All token kinds produced by the scanner.

    Keyword members carry their canonical source spelling as value, operator
    and punctuation members their canonical symbol.
    """

    # Literals
    ICONST = "ICONST"
    FCONST = "FCONST"
    SCONST = "SCONST"
    CCONST = "CCONST"
    BCONST = "BCONST"

    # Identifiers
    IDENT = "IDENT"

    # Keywords
    GET = "GET"
    PUT = "PUT"
    PUTLN = "PUTLN"
    IF = "IF"
    ELSE = "ELSE"
    ELSIF = "ELSIF"
    THEN = "THEN"
    BEGIN = "BEGIN"
    END = "END"
    IS = "IS"
    PROCEDURE = "PROCEDURE"
    CONST = "CONST"
    INT = "INTEGER"
    FLOAT = "FLOAT"
    CHAR = "CHARACTER"
    STRING = "STRING"
    BOOL = "BOOLEAN"
    TRUE = "TRUE"
    FALSE = "FALSE"
    AND = "AND"
    OR = "OR"
    NOT = "NOT"
    MOD = "MOD"

    # Operators
    PLUS = "+"
    MINUS = "-"
    MULT = "*"
    DIV = "/"
    EXP = "**"
    ASSOP = ":="
    EQ = "="
    NEQ = "/="
    LTHAN = "<"
    GTHAN = ">"
    LTE = "<="
    GTE = ">="
    CONCAT = "&"

    # Punctuation
    COMMA = ","
    SEMICOL = ";"
    COLON = ":"
    LPAREN = "("
    RPAREN = ")"
    DOT = "."

    # Control
    DONE = "DONE"
    ERR = "ERR"


@dataclass(frozen=True)
class LexItem:
    """A scanned token together with its source text and line.

    Attributes:
        kind: The kind of token.
        lexeme: The source text of the token. Operators and punctuation carry
            their spelling, ERR items a diagnostic message.
        line: 1-based line number on which the token begins.
    """

    kind: TokenType
    lexeme: str
    line: int


@dataclass
class LineCounter:
    """Mutable line number shared between the caller and successive scanner calls."""

    value: int = 1


KEYWORDS: Mapping[str, TokenType] = MappingProxyType(
    {
        "GET": TokenType.GET,
        "PUT": TokenType.PUT,
        "PUTLN": TokenType.PUTLN,
        "PUTLINE": TokenType.PUTLN,
        "IF": TokenType.IF,
        "ELSE": TokenType.ELSE,
        "ELSIF": TokenType.ELSIF,
        "THEN": TokenType.THEN,
        "BEGIN": TokenType.BEGIN,
        "END": TokenType.END,
        "IS": TokenType.IS,
        "PROCEDURE": TokenType.PROCEDURE,
        "CONST": TokenType.CONST,
        "CONSTANT": TokenType.CONST,
        "INTEGER": TokenType.INT,
        "FLOAT": TokenType.FLOAT,
        "CHARACTER": TokenType.CHAR,
        "STRING": TokenType.STRING,
        "BOOLEAN": TokenType.BOOL,
        "TRUE": TokenType.TRUE,
        "FALSE": TokenType.FALSE,
        "AND": TokenType.AND,
        "OR": TokenType.OR,
        "NOT": TokenType.NOT,
        "MOD": TokenType.MOD,
    }
)
"""Upper-case keyword spellings, aliases included, mapped to their token kind."""


def is_keyword(kind: TokenType) -> bool:
    """Return True if *kind* is a keyword kind (booleans excluded)."""
    return kind in _KEYWORD_KINDS


def id_or_kw(lexeme: str, line: int) -> LexItem:
    """Classify an identifier-shaped lexeme as keyword, boolean, or identifier.

    The lookup is case-insensitive; the returned item keeps the original
    spelling.
    """
    kind = KEYWORDS.get(lexeme.upper())
    if kind is None:
        return LexItem(TokenType.IDENT, lexeme, line)
    if kind in (TokenType.TRUE, TokenType.FALSE):
        return LexItem(TokenType.BCONST, lexeme, line)
    return LexItem(kind, lexeme, line)


def next_token(stream: CharStream, lines: LineCounter) -> LexItem:
    """Scan and return the next token from *stream*.

    Whitespace and ``--`` comments before the token are skipped. Newlines
    consumed along the way advance *lines* in place.

    Args:
        stream: The character source; its position advances past the token.
        lines: The current line number, updated as newlines are consumed.

    Returns:
        The next LexItem. At end of input a ``DONE`` item is returned, on
        this and every later call. Lexical errors produce an ``ERR`` item.
    """
    return _Scanner(stream, lines).scan()


def tokenize(source: str, stop_on_error: bool = False) -> list[LexItem]:
    """Scan a whole source text.

    Args:
        source: The program text.
        stop_on_error: If True, stop after the first ``ERR`` item instead of
            scanning on.

    Returns:
        All scanned items. The list ends with a single ``DONE`` item, or with
        the first ``ERR`` item when *stop_on_error* is set.
    """
    stream = CharStream(source)
    lines = LineCounter()
    items: list[LexItem] = []
    while True:
        item = next_token(stream, lines)
        items.append(item)
        if item.kind == TokenType.DONE:
            return items
        if item.kind == TokenType.ERR and stop_on_error:
            return items


# ################
# Implementation
# ################

_KEYWORD_KINDS = frozenset(KEYWORDS.values()) - {TokenType.TRUE, TokenType.FALSE}

_SINGLE_CHAR_TOKENS: dict[str, TokenType] = {
    "+": TokenType.PLUS,
    "-": TokenType.MINUS,
    "*": TokenType.MULT,
    "/": TokenType.DIV,
    "=": TokenType.EQ,
    "<": TokenType.LTHAN,
    ">": TokenType.GTHAN,
    "&": TokenType.CONCAT,
    "%": TokenType.MOD,
    ":": TokenType.COLON,
    ".": TokenType.DOT,
    ",": TokenType.COMMA,
    ";": TokenType.SEMICOL,
    "(": TokenType.LPAREN,
    ")": TokenType.RPAREN,
}

_DOUBLE_CHAR_TOKENS: dict[str, TokenType] = {
    "**": TokenType.EXP,
    "/=": TokenType.NEQ,
    "!=": TokenType.NEQ,
    "<=": TokenType.LTE,
    ">=": TokenType.GTE,
    "&&": TokenType.AND,
    "||": TokenType.OR,
    ":=": TokenType.ASSOP,
    "..": TokenType.CONCAT,
}


def _is_letter(ch: str) -> bool:
    return ch.isascii() and ch.isalpha()


def _is_digit(ch: str) -> bool:
    return ch.isascii() and ch.isdigit()


def _is_sign(ch: str) -> bool:
    return ch == "+" or ch == "-"


class _Scanner:
    """Scanner state for a single call: one token in, back to idle."""

    def __init__(self, stream: CharStream, lines: LineCounter) -> None:
        self._stream = stream
        self._lines = lines

    def scan(self) -> LexItem:
        """Skip whitespace and comments, then dispatch on the first character."""
        stream = self._stream
        while True:
            ch = stream.read()
            if not ch:
                return LexItem(TokenType.DONE, "", self._lines.value)
            if ch == "-" and stream.peek() == "-":
                stream.read()
                self._skip_comment()
            elif ch == "\n":
                self._lines.value += 1
            elif ch.isspace():
                continue
            elif _is_letter(ch) or ch == "_":
                return self._scan_identifier(ch)
            elif _is_digit(ch):
                return self._scan_number(ch)
            elif ch == '"':
                return self._scan_string()
            elif ch == "'":
                return self._scan_char()
            else:
                return self._scan_operator(ch)

    # ------------------------------------------------------------------
    # Comments
    # ------------------------------------------------------------------

    def _skip_comment(self) -> None:
        """Consume the rest of a '--' comment through its terminating newline."""
        while True:
            ch = self._stream.read()
            if not ch:
                return
            if ch == "\n":
                self._lines.value += 1
                return

    # ------------------------------------------------------------------
    # Identifiers and keywords
    # ------------------------------------------------------------------

    def _scan_identifier(self, first: str) -> LexItem:
        """Scan an identifier; a second consecutive underscore ends it."""
        line = self._lines.value
        chars = [first]
        prev_underscore = first == "_"
        while True:
            ch = self._stream.read()
            if not (_is_letter(ch) or _is_digit(ch) or ch == "_"):
                self._stream.unread(ch)
                break
            if prev_underscore and ch == "_":
                self._stream.unread(ch)
                break
            chars.append(ch)
            prev_underscore = ch == "_"

        lexeme = "".join(chars)
        if lexeme.startswith("_"):
            return LexItem(TokenType.ERR, lexeme, line)
        return id_or_kw(lexeme, line)

    # ------------------------------------------------------------------
    # Literals
    # ------------------------------------------------------------------

    def _scan_number(self, first: str) -> LexItem:
        """Scan an integer or real literal with optional fraction and exponent.

        A '.' directly followed by another '.' is left in the stream so that
        ``1..10`` scans as a range.
        """
        stream = self._stream
        line = self._lines.value
        chars = [first]
        has_dot = False
        has_exponent = False

        while True:
            ch = stream.read()
            if ch == ".":
                if stream.peek() == ".":
                    stream.unread(ch)
                    break
                if has_dot:
                    return LexItem(TokenType.ERR, "".join(chars) + ".", line)
                if has_exponent:
                    stream.unread(ch)
                    break
                has_dot = True
                chars.append(ch)
            elif (ch == "E" or ch == "e") and not has_exponent:
                if not self._exponent_follows():
                    stream.unread(ch)
                    break
                has_exponent = True
                chars.append(ch)
                if _is_sign(stream.peek()):
                    chars.append(stream.read())
            elif _is_digit(ch):
                chars.append(ch)
            else:
                stream.unread(ch)
                break

        kind = TokenType.FCONST if has_dot else TokenType.ICONST
        return LexItem(kind, "".join(chars), line)

    def _exponent_follows(self) -> bool:
        """Return True if the upcoming characters form an exponent: a digit, or a sign then a digit."""
        stream = self._stream
        nxt = stream.peek()
        if _is_digit(nxt):
            return True
        if not _is_sign(nxt):
            return False
        sign = stream.read()
        valid = _is_digit(stream.peek())
        stream.unread(sign)
        return valid

    def _scan_string(self) -> LexItem:
        """Scan a double-quoted string; it must close on the same line."""
        line = self._lines.value
        chars: list[str] = []
        while True:
            ch = self._stream.read()
            if ch == '"':
                return LexItem(TokenType.SCONST, "".join(chars), line)
            if not ch or ch == "\n":
                if ch:
                    self._lines.value += 1
                return LexItem(TokenType.ERR, ' Invalid string constant "' + "".join(chars), line)
            chars.append(ch)

    def _scan_char(self) -> LexItem:
        """Scan a single-quoted character literal holding exactly one character."""
        line = self._lines.value
        ch = self._stream.read()
        if ch == "\n":
            self._lines.value += 1
            return LexItem(TokenType.ERR, "New line is an invalid character constant.", line)
        if not ch:
            return LexItem(TokenType.ERR, "Unterminated character constant.", line)
        if ch == "'":
            return LexItem(TokenType.ERR, "Empty character constant.", line)

        content = [ch]
        while True:
            ch = self._stream.read()
            if ch == "'":
                break
            if not ch or ch == "\n":
                if ch:
                    self._lines.value += 1
                return LexItem(TokenType.ERR, "Unterminated character constant.", line)
            content.append(ch)

        if len(content) == 1:
            return LexItem(TokenType.CCONST, content[0], line)
        return LexItem(TokenType.ERR, f" Invalid character constant '{''.join(content[:2])}'", line)

    # ------------------------------------------------------------------
    # Operators and punctuation
    # ------------------------------------------------------------------

    def _scan_operator(self, ch: str) -> LexItem:
        """Resolve an operator or punctuation mark using one character of lookahead."""
        line = self._lines.value
        pair = ch + self._stream.peek()
        if pair in _DOUBLE_CHAR_TOKENS:
            self._stream.read()
            return LexItem(_DOUBLE_CHAR_TOKENS[pair], pair, line)
        if ch in _SINGLE_CHAR_TOKENS:
            return LexItem(_SINGLE_CHAR_TOKENS[ch], ch, line)
        return LexItem(TokenType.ERR, ch, line)
