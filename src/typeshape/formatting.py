"""Canonical rendering of type descriptors back to specification syntax."""

from __future__ import annotations

from typeshape.types import (
    ArrayType,
    FieldsType,
    NamedType,
    TupleType,
    TypeDef,
    Types,
)


def format_types(types: Types) -> str:
    """
    Render a union as a specification string.

    Parsing the result yields descriptors equal to ``types`` whenever
    ``types`` itself came from the parser. Comment labels and the ``Maybe``
    shorthand are not reproduced; ``Maybe X`` renders as ``Undefined | Null | X``.
    """
    return " | ".join(format_type(t) for t in types)


def format_type(typedef: TypeDef) -> str:
    prefix = typedef.name or ""

    match typedef:
        case NamedType(name=name):
            return name
        case ArrayType(of=of):
            return f"{prefix}[{format_types(of)}]"
        case TupleType(of=slots):
            return f"{prefix}({', '.join(format_types(slot) for slot in slots)})"
        case FieldsType(of=fields, subset=subset):
            parts = [f"{key}: {format_types(types)}" for key, types in fields.items()]
            if subset:
                parts.append("...")
            return f"{prefix}{{{', '.join(parts)}}}"
        case _:
            raise TypeError(f"Cannot format {type(typedef).__name__}")
