"""
Tokenizer for type specifications.

A single composite pattern splits the input left to right. Multi-character
operators win over identifier runs, which win over the single-character
fallback used for punctuation. Whitespace is skipped. Tokens are plain
strings; their order is the only context kept.
"""

from __future__ import annotations

import re

from typeshape.errors import (
    UnexpectedEndOfInputError,
    expected_literal,
    expected_text,
)
from typeshape.types import WILDCARD

# =============================================================================
# Lexical Grammar
# =============================================================================

ELLIPSIS = "..."
COMMENT_SEPARATOR = "::"
ARROW = "->"
UNION = "|"
COMMA = ","
COLON = ":"
LBRACKET, RBRACKET = "[", "]"
LPAREN, RPAREN = "(", ")"
LBRACE, RBRACE = "{", "}"
MAYBE = "Maybe"

_IDENTIFIER_SOURCE = r"[$A-Za-z0-9_]+"

IDENTIFIER: re.Pattern[str] = re.compile(_IDENTIFIER_SOURCE)
TOKEN_PATTERN: re.Pattern[str] = re.compile(
    "|".join(
        (re.escape(ELLIPSIS), re.escape(COMMENT_SEPARATOR), re.escape(ARROW),
         _IDENTIFIER_SOURCE, r"\S")
    )
)


def tokenize(source: str) -> tuple[str, ...]:
    """Split a type specification into its tokens."""
    return tuple(TOKEN_PATTERN.findall(source))


def is_identifier(token: str | None) -> bool:
    """Whether a token can be used as a type name or field name."""
    return token is not None and IDENTIFIER.fullmatch(token) is not None


# =============================================================================
# Cursor
# =============================================================================

class TokenCursor:
    """
    Read position over an immutable token sequence.

    Productions move the cursor forward instead of consuming a shared list,
    so the token tuple itself is never modified and the unconsumed tail is
    always available for diagnostics.
    """

    __slots__ = ("tokens", "position", "depth")

    def __init__(self, tokens: tuple[str, ...], position: int = 0):
        self.tokens = tokens
        self.position = position
        self.depth = 0  # Open structures enclosing the position

    @property
    def remaining(self) -> tuple[str, ...]:
        return self.tokens[self.position:]

    def at_end(self) -> bool:
        return self.position >= len(self.tokens)

    def lookahead(self, offset: int = 0) -> str | None:
        index = self.position + offset
        return self.tokens[index] if index < len(self.tokens) else None

    def peek(self) -> str:
        """Next token; raises if the input is exhausted."""
        token = self.lookahead()
        if token is None:
            raise UnexpectedEndOfInputError()
        return token

    def advance(self) -> str:
        token = self.peek()
        self.position += 1
        return token

    def expect(self, literal: str) -> str:
        token = self.peek()
        if token != literal:
            raise expected_literal(literal, token)
        return self.advance()

    def expect_identifier(self) -> str:
        token = self.peek()
        if not is_identifier(token):
            raise expected_text(token)
        return self.advance()

    def accept(self, literal: str) -> str | None:
        """Consume the next token only if it equals ``literal``."""
        if self.lookahead() == literal:
            self.position += 1
            return literal
        return None
