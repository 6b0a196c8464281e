"""
Error taxonomy for the type-specification parser.

Every failure is a ``TypeSpecError`` subclass identified by a stable ``code``.
Errors are structured values: the message, the offending token and, once the
entry point has attached it, the unconsumed tokens and the original input.
Rendering for humans is kept in ``format()`` so callers can build their own
diagnostics from the fields instead.
"""

from __future__ import annotations

import json
from typing import ClassVar, Self


class TypeSpecError(Exception):
    """Base for all type-specification failures."""

    code: ClassVar[str] = "type_spec_error"
    _registry: ClassVar[dict[str, type[TypeSpecError]]] = {}

    def __init_subclass__(cls, code: str | None = None, **kwargs):
        super().__init_subclass__(**kwargs)
        if code is None:
            return
        if existing := TypeSpecError._registry.get(code):
            raise ValueError(f"Error code '{code}' already registered to {existing}")
        cls.code = code
        TypeSpecError._registry[code] = cls

    def __init__(
        self,
        message: str,
        *,
        token: str | None = None,
        remaining: tuple[str, ...] | None = None,
        source: str | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.token = token
        self.remaining = remaining
        self.source = source

    def with_context(self, remaining: tuple[str, ...], source: str) -> Self:
        """Copy of this error carrying the unconsumed tokens and original input."""
        return type(self)(
            self.message, token=self.token, remaining=tuple(remaining), source=source
        )

    def format(self) -> str:
        if self.remaining is None or self.source is None:
            return self.message
        return (
            f"{self.message} - Remaining tokens: "
            f"{json.dumps(list(self.remaining), ensure_ascii=False)}"
            f" - Initial input: '{self.source}'"
        )

    def __str__(self) -> str:
        return self.format()

    @classmethod
    def registry(cls) -> dict[str, type[TypeSpecError]]:
        return dict(TypeSpecError._registry)


# =============================================================================
# Taxonomy
# =============================================================================

class EmptyInputError(TypeSpecError, code="empty_input"):
    """Input string has zero length."""

    def __init__(self, message: str = "No type specified.", **kwargs):
        super().__init__(message, **kwargs)


class UnexpectedEndOfInputError(TypeSpecError, code="unexpected_end_of_input"):
    """Token stream ran out while a production still expected more."""

    def __init__(self, message: str = "Unexpected end of input.", **kwargs):
        super().__init__(message, **kwargs)


class UnexpectedTokenError(TypeSpecError, code="unexpected_token"):
    """A token failed an expected-identifier or expected-literal check."""


class UnsupportedFunctionTypeError(TypeSpecError, code="unsupported_function_type"):
    def __init__(
        self,
        message: str = (
            "Function types are not supported. "
            "To validate that something is a function, you may use 'Function'."
        ),
        **kwargs,
    ):
        super().__init__(message, **kwargs)


class MissingCommentSeparatorError(TypeSpecError, code="missing_comment_separator"):
    """``::`` opened the input with no label in front of it."""

    def __init__(
        self, message: str = "No comment before comment separator '::' found.", **kwargs
    ):
        super().__init__(message, **kwargs)


class EmptyArrayElementTypeError(TypeSpecError, code="empty_array_element_type"):
    def __init__(
        self,
        message: str = "Must specify type of Array - eg. [Type], got [] instead.",
        **kwargs,
    ):
        super().__init__(message, **kwargs)


class EmptyTupleError(TypeSpecError, code="empty_tuple"):
    def __init__(
        self,
        message: str = "Tuple must be of at least length 1 - eg. (Type), got () instead.",
        **kwargs,
    ):
        super().__init__(message, **kwargs)


class NestingTooDeepError(TypeSpecError, code="nesting_too_deep"):
    """Structures nested past the supported depth."""


# =============================================================================
# Constructors
# =============================================================================

def expected_text(found: str) -> UnexpectedTokenError:
    return UnexpectedTokenError(f"Expected text, got '{found}' instead.", token=found)


def expected_literal(literal: str, found: str) -> UnexpectedTokenError:
    return UnexpectedTokenError(
        f"Expected '{literal}', got '{found}' instead.", token=found
    )


def unexpected_character(found: str) -> UnexpectedTokenError:
    return UnexpectedTokenError(f"Unexpected character: {found}", token=found)


def nesting_too_deep(limit: int) -> NestingTooDeepError:
    return NestingTooDeepError(
        f"Type nested too deeply - at most {limit} levels of [], () and {{}} are supported."
    )
