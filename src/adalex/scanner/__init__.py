# Copyright 2026 AdaLex Contributors
# SPDX-License-Identifier: Apache-2.0

"""Scanner for the Ada-flavored teaching language."""

from adalex.scanner.lexer import (
    KEYWORDS,
    LexItem,
    LineCounter,
    TokenType,
    id_or_kw,
    is_keyword,
    next_token,
    tokenize,
)
from adalex.scanner.render import describe, render
from adalex.scanner.stream import CharStream, StreamError

__all__ = [
    "CharStream",
    "KEYWORDS",
    "LexItem",
    "LineCounter",
    "StreamError",
    "TokenType",
    "describe",
    "id_or_kw",
    "is_keyword",
    "next_token",
    "render",
    "tokenize",
]
