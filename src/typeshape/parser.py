"""
Recursive-descent parser for type specifications.

Grammar, evaluated over the token sequence from left to right::

    Types     -> (Label '::')? 'Maybe'? Type ('|' Type)*
    Type      -> (Identifier | '*') Structure? | Structure
    Structure -> Array | Tuple | Fields
    Array     -> '[' Types ']'
    Tuple     -> '(' Types (','? Types)* ','? ')'
    Fields    -> '{' (Field ','?)* '...'? '}'
    Field     -> Identifier ':' Types

Each production reads through a ``TokenCursor``; nothing is shared between
calls to ``parse``.
"""

from __future__ import annotations

import logging

from typeshape.errors import (
    EmptyArrayElementTypeError,
    EmptyInputError,
    EmptyTupleError,
    MissingCommentSeparatorError,
    TypeSpecError,
    UnsupportedFunctionTypeError,
    nesting_too_deep,
    unexpected_character,
)
from typeshape.tokens import (
    ARROW,
    COLON,
    COMMA,
    COMMENT_SEPARATOR,
    ELLIPSIS,
    LBRACE,
    LBRACKET,
    LPAREN,
    MAYBE,
    RBRACE,
    RBRACKET,
    RPAREN,
    UNION,
    WILDCARD,
    TokenCursor,
    is_identifier,
    tokenize,
)
from typeshape.types import (
    MAYBE_EXPANSION,
    ArrayType,
    FieldsType,
    NamedType,
    TupleType,
    TypeDef,
    Types,
)

logger = logging.getLogger(__name__)

MAX_DEPTH = 100  # Levels of nested [], () and {}

# =============================================================================
# Entry Point
# =============================================================================

def parse(source: str) -> Types:
    """
    Parse a type specification into its union of type descriptors.

    Args:
        source: Specification such as ``"Maybe String"`` or ``"{ a: [Number], ... }"``

    Returns:
        The ordered union; a value matches if it satisfies any member.

    Raises:
        TypeSpecError: On any failure. Failures detected while parsing carry
            the unconsumed tokens and the original input.
    """
    if not source:
        raise EmptyInputError()

    tokens = tokenize(source)
    if ARROW in tokens:
        raise UnsupportedFunctionTypeError()

    logger.debug("parsing %r (%d tokens)", source, len(tokens))
    cursor = TokenCursor(tokens)
    try:
        types = _consume_types(cursor, outermost=True)
    except TypeSpecError as err:
        raise err.with_context(cursor.remaining, source) from err

    if not cursor.at_end():
        logger.debug("ignoring trailing tokens %r in %r", cursor.remaining, source)
    return types


# =============================================================================
# Unions
# =============================================================================

def _consume_types(cursor: TokenCursor, outermost: bool = False) -> Types:
    if outermost and cursor.peek() == COMMENT_SEPARATOR:
        raise MissingCommentSeparatorError()

    if cursor.lookahead(1) == COMMENT_SEPARATOR:
        cursor.advance()
        cursor.advance()

    types: list[TypeDef] = []
    seen: set[str] = set()
    if cursor.peek() == MAYBE:
        cursor.advance()
        types.extend(MAYBE_EXPANSION)
        seen.update(t.name for t in MAYBE_EXPANSION)

    while True:
        typedef = _consume_type(cursor)
        if typedef.name not in seen:
            types.append(typedef)
        # Only bare names suppress later duplicates.
        if typedef.structure is None:
            seen.add(typedef.name)
        if not cursor.accept(UNION):
            break

    return tuple(types)


def _consume_type(cursor: TokenCursor) -> TypeDef:
    token = cursor.peek()
    if token == WILDCARD or is_identifier(token):
        name = cursor.advance()
        structure = _maybe_consume_structure(cursor, name)
        return structure if structure is not None else NamedType(name)

    structure = _maybe_consume_structure(cursor)
    if structure is None:
        raise unexpected_character(token)
    return structure


# =============================================================================
# Structures
# =============================================================================

def _maybe_consume_structure(
    cursor: TokenCursor, name: str | None = None
) -> ArrayType | TupleType | FieldsType | None:
    match cursor.lookahead():
        case "[":
            consume = _consume_array
        case "(":
            consume = _consume_tuple
        case "{":
            consume = _consume_fields
        case _:
            return None

    if cursor.depth >= MAX_DEPTH:
        raise nesting_too_deep(MAX_DEPTH)
    cursor.depth += 1
    try:
        return consume(cursor, name)
    finally:
        cursor.depth -= 1


def _consume_array(cursor: TokenCursor, name: str | None = None) -> ArrayType:
    cursor.expect(LBRACKET)
    if cursor.peek() == RBRACKET:
        raise EmptyArrayElementTypeError()
    of = _consume_types(cursor)
    cursor.expect(RBRACKET)
    return ArrayType(of=of, name=name)


def _consume_tuple(cursor: TokenCursor, name: str | None = None) -> TupleType:
    cursor.expect(LPAREN)
    if cursor.peek() == RPAREN:
        raise EmptyTupleError()

    slots: list[Types] = []
    while True:
        slots.append(_consume_types(cursor))
        cursor.accept(COMMA)
        if cursor.peek() == RPAREN:
            break

    cursor.expect(RPAREN)
    return TupleType(of=tuple(slots), name=name)


def _consume_fields(cursor: TokenCursor, name: str | None = None) -> FieldsType:
    cursor.expect(LBRACE)

    fields: dict[str, Types] = {}
    subset = False
    while True:
        if cursor.accept(ELLIPSIS):
            subset = True
            break
        key, types = _consume_field(cursor)
        fields[key] = types
        cursor.accept(COMMA)
        if cursor.peek() == RBRACE:
            break

    cursor.expect(RBRACE)
    return FieldsType(of=fields, subset=subset, name=name)


def _consume_field(cursor: TokenCursor) -> tuple[str, Types]:
    key = cursor.expect_identifier()
    cursor.expect(COLON)
    return key, _consume_types(cursor)
