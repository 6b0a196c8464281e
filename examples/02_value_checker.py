"""
Value Checker Example
=====================

The parser only builds trees. This example shows a small consumer that walks
them to check Python values, the way a validator built on typeshape would:

1. Mapping type names to Python checks
2. Walking unions, arrays, tuples and records
3. Honouring open and closed records
"""

from collections.abc import Callable, Mapping, Sequence
from typing import Any

from typeshape import (
    WILDCARD,
    ArrayType,
    FieldsType,
    NamedType,
    TupleType,
    TypeDef,
    Types,
    parse,
)


# ============================================================================
# Step 1: Name Checks
# ============================================================================
# Names are opaque to the parser; the consumer decides what they mean.

NAME_CHECKS: dict[str, Callable[[Any], bool]] = {
    "Undefined": lambda v: v is None,
    "Null": lambda v: v is None,
    "String": lambda v: isinstance(v, str),
    "Number": lambda v: isinstance(v, int | float) and not isinstance(v, bool),
    "Boolean": lambda v: isinstance(v, bool),
    "Array": lambda v: isinstance(v, list),
    "Tuple": lambda v: isinstance(v, tuple),
    "Object": lambda v: isinstance(v, Mapping),
}


def name_matches(name: str | None, value: Any) -> bool:
    if name is None or name == WILDCARD:
        return True
    check = NAME_CHECKS.get(name)
    if check is None:
        raise ValueError(f"No check registered for type name '{name}'")
    return check(value)


# ============================================================================
# Step 2: Walking the Tree
# ============================================================================


def matches(types: Types, value: Any) -> bool:
    """A value matches a union if any member matches."""
    return any(matches_type(t, value) for t in types)


def matches_type(typedef: TypeDef, value: Any) -> bool:
    if not name_matches(typedef.name, value):
        return False

    match typedef:
        case NamedType():
            return True
        case ArrayType(of=of):
            return isinstance(value, Sequence) and not isinstance(value, str) and all(
                matches(of, item) for item in value
            )
        case TupleType(of=slots):
            return (
                isinstance(value, Sequence)
                and not isinstance(value, str)
                and len(value) == len(slots)
                and all(matches(slot, item) for slot, item in zip(slots, value))
            )
        case FieldsType(of=fields, subset=subset):
            if not isinstance(value, Mapping):
                return False
            if not subset and set(value) - set(fields):
                return False
            return all(matches(types, value.get(key)) for key, types in fields.items())
        case _:
            raise TypeError(f"Unknown type descriptor: {typedef}")


# ============================================================================
# Main: Run All Examples
# ============================================================================


def main():
    """Check a handful of values against specifications."""

    print("=" * 80)
    print("Value Checker Example")
    print("=" * 80)
    print()

    cases = [
        ("Maybe String", None, True),
        ("Maybe String", 3, False),
        ("[Number]", [1, 2.5], True),
        ("Array[Number]", (1, 2), False),
        ("(String, Number)", ["a", 1], True),
        ("(String, Number)", ["a"], False),
        ("{ name: String, age: Number }", {"name": "Ada", "age": 36}, True),
        ("{ name: String }", {"name": "Ada", "age": 36}, False),
        ("{ name: String, ... }", {"name": "Ada", "age": 36}, True),
        ("[*]", ["a", 1, None], True),
    ]

    for source, value, expected in cases:
        result = matches(parse(source), value)
        print(f"{source:32} {value!r:32} {result}")
        assert result is expected

    print()
    print("All examples completed successfully!")


if __name__ == "__main__":
    main()
