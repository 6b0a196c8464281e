"""
Serialization of parsed type descriptors to builtins and JSON.

Descriptors encode to plain dicts shaped like the parser's documented output::

    {"name": "Array", "structure": "array", "of": [{"name": "Number"}]}

``name`` is omitted for anonymous structures, ``subset`` only appears on
field records. Decoding dispatches on ``structure`` through the type registry.
"""

from __future__ import annotations

import json
from typing import Any

from typeshape.types import (
    ArrayType,
    FieldsType,
    NamedType,
    TupleType,
    TypeDef,
    Types,
)

# =============================================================================
# Encoding
# =============================================================================

def to_dict(typedef: TypeDef) -> dict[str, Any]:
    """Encode a single descriptor."""
    data: dict[str, Any] = {}
    if typedef.name is not None:
        data["name"] = typedef.name

    match typedef:
        case NamedType():
            pass
        case ArrayType(of=of):
            data["structure"] = typedef.structure
            data["of"] = to_builtins(of)
        case TupleType(of=slots):
            data["structure"] = typedef.structure
            data["of"] = [to_builtins(slot) for slot in slots]
        case FieldsType(of=fields, subset=subset):
            data["structure"] = typedef.structure
            data["of"] = {key: to_builtins(types) for key, types in fields.items()}
            data["subset"] = subset
        case _:
            raise TypeError(f"Cannot serialize {type(typedef).__name__}")

    return data


def to_builtins(types: Types) -> list[dict[str, Any]]:
    """Encode a union."""
    return [to_dict(t) for t in types]


def to_json(types: Types, indent: int | None = None) -> str:
    return json.dumps(to_builtins(types), indent=indent)


# =============================================================================
# Decoding
# =============================================================================

def from_dict(data: dict[str, Any]) -> TypeDef:
    """Decode a single descriptor."""
    if not isinstance(data, dict):
        raise ValueError(f"Type descriptor must be a dict, got {type(data).__name__}")

    structure = data.get("structure")
    name = data.get("name")
    if name is not None and (not isinstance(name, str) or not name):
        raise ValueError(f"Type name must be a non-empty string, got {name!r}")

    if structure is None:
        if name is None:
            raise ValueError(f"Bare type must have a name: {data}")
        return NamedType(name)

    typedef_cls = TypeDef.registry().get(structure) if isinstance(structure, str) else None
    if typedef_cls is None:
        raise ValueError(f"Unknown structure '{structure}'")

    of = data.get("of")
    if typedef_cls is ArrayType:
        if not of:
            raise ValueError("array type must have an element type")
        return ArrayType(of=from_builtins(of), name=name)
    if typedef_cls is TupleType:
        if not of or not isinstance(of, list):
            raise ValueError("tuple type must have at least one slot")
        return TupleType(of=tuple(from_builtins(slot) for slot in of), name=name)

    if of is None:
        of = {}
    if not isinstance(of, dict):
        raise ValueError(f"fields type must map names to types, got {type(of).__name__}")
    subset = data.get("subset", False)
    if not isinstance(subset, bool):
        raise ValueError(f"fields subset must be a boolean, got {subset!r}")

    return FieldsType(
        of={key: from_builtins(types) for key, types in of.items()},
        subset=subset,
        name=name,
    )


def from_builtins(data: list[dict[str, Any]]) -> Types:
    """Decode a union."""
    if not isinstance(data, list):
        raise ValueError(f"Type union must be a list, got {type(data).__name__}")
    return tuple(from_dict(item) for item in data)


def from_json(text: str) -> Types:
    return from_builtins(json.loads(text))
