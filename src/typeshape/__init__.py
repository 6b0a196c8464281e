"""typeshape - Parser for compact type specifications like ``Maybe [Number]``."""

from typeshape.errors import (
    EmptyArrayElementTypeError,
    EmptyInputError,
    EmptyTupleError,
    MissingCommentSeparatorError,
    NestingTooDeepError,
    # Error taxonomy
    TypeSpecError,
    UnexpectedEndOfInputError,
    UnexpectedTokenError,
    UnsupportedFunctionTypeError,
)
from typeshape.formatting import (
    format_type,
    # Formatting
    format_types,
)
from typeshape.parser import (
    # Parsing
    parse,
)
from typeshape.serialization import (
    from_builtins,
    from_dict,
    from_json,
    to_builtins,
    # Serialization
    to_dict,
    to_json,
)
from typeshape.tokens import (
    TokenCursor,
    # Tokenizer
    tokenize,
)
from typeshape.types import (
    MAYBE_EXPANSION,
    WILDCARD,
    ArrayType,
    FieldsType,
    NamedType,
    TupleType,
    # Type descriptors
    TypeDef,
    Types,
)

__all__ = [
    "MAYBE_EXPANSION",
    "WILDCARD",
    "ArrayType",
    "EmptyArrayElementTypeError",
    "EmptyInputError",
    "EmptyTupleError",
    "FieldsType",
    "MissingCommentSeparatorError",
    "NamedType",
    "NestingTooDeepError",
    "TokenCursor",
    "TupleType",
    # Type descriptors
    "TypeDef",
    # Error taxonomy
    "TypeSpecError",
    "Types",
    "UnexpectedEndOfInputError",
    "UnexpectedTokenError",
    "UnsupportedFunctionTypeError",
    "format_type",
    # Formatting
    "format_types",
    "from_builtins",
    "from_dict",
    "from_json",
    # Parsing
    "parse",
    "to_builtins",
    # Serialization
    "to_dict",
    "to_json",
    # Tokenizer
    "tokenize",
]
