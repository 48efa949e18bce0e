# Copyright 2026 AdaLex Contributors
# SPDX-License-Identifier: Apache-2.0

"""Human-readable rendering of scanned tokens for the per-token trace."""

from adalex.scanner.lexer import LexItem, TokenType

# ###############
# Public Interface
# ###############


def render(item: LexItem) -> str:
    """Render a token as one trace line, including the trailing newline."""
    return describe(item) + "\n"


def describe(item: LexItem) -> str:
    """Render a token without the trailing newline.

    Literals and identifiers show their lexeme, errors show the line and
    diagnostic, and every other kind shows its mnemonic (``PLUS``, ``ASSOP``,
    ``PUTLN``, ...).
    """
    kind = item.kind
    if kind == TokenType.ERR:
        return f"ERR: In line {item.line}, Error Message {{{item.lexeme}}}"
    template = _LITERAL_TEMPLATES.get(kind)
    if template is not None:
        return template.format(kind=kind.name, lexeme=item.lexeme)
    return kind.name


# ################
# Implementation
# ################

_LITERAL_TEMPLATES: dict[TokenType, str] = {
    TokenType.ICONST: "{kind}: ({lexeme})",
    TokenType.FCONST: "{kind}: ({lexeme})",
    TokenType.BCONST: "{kind}: ({lexeme})",
    TokenType.SCONST: '{kind}: "{lexeme}"',
    TokenType.CCONST: "{kind}: '{lexeme}'",
    TokenType.IDENT: "{kind}: <{lexeme}>",
}
