"""
Parsing Example
===============

This example walks through the type specification syntax and the trees the
parser builds for it. It covers:

1. Bare names, unions and the Maybe shorthand
2. Arrays, tuples and records
3. Labels before a specification
4. Serializing to JSON and back
5. Reading structured errors
"""

from typeshape import (
    TypeSpecError,
    format_types,
    from_json,
    parse,
    to_builtins,
    to_json,
)


# ============================================================================
# Step 1: Names and Unions
# ============================================================================


def example_names_and_unions():
    """Names are opaque; '|' builds a union, duplicates collapse."""

    for source in ["Number", "String | Number | String", "Maybe String"]:
        print(f"{source!r:32} -> {to_builtins(parse(source))}")

    assert len(parse("String | String")) == 1


# ============================================================================
# Step 2: Structures
# ============================================================================
# A name in front of a structure is attached to it: Array[Number] is an
# array named "Array", [Number] an anonymous one.


def example_structures():
    """Arrays, tuples, closed and open records."""

    sources = [
        "[Number]",
        "Array[Number | String]",
        "(String, Number)",
        "{ name: String, age: Number }",
        "{ name: String, ... }",
    ]
    for source in sources:
        print(f"{source}:")
        print(f"  {to_builtins(parse(source))}")


# ============================================================================
# Step 3: Labels
# ============================================================================


def example_labels():
    """A leading 'Label ::' documents a specification and is dropped."""

    types = parse("UserId :: String | Number")
    print(f"Parsed: {format_types(types)}")

    assert format_types(types) == "String | Number"


# ============================================================================
# Step 4: Serialization
# ============================================================================


def example_serialization():
    """Trees survive a JSON round trip."""

    types = parse("{ id: String, tags: [String], location: Maybe (Number, Number), ... }")
    json_str = to_json(types, indent=2)
    print(json_str)

    assert from_json(json_str) == types


# ============================================================================
# Step 5: Errors
# ============================================================================


def example_errors():
    """Every failure has a code, a message and, when parsing, the unread tokens."""

    for source in ["", "[]", "()", "A -> B", ":: Number", "{ name String }"]:
        try:
            parse(source)
        except TypeSpecError as err:
            print(f"{source!r:18} {err.code:28} {err.message}")
            if err.remaining is not None:
                print(f"{'':18} remaining: {list(err.remaining)}")


# ============================================================================
# Main: Run All Examples
# ============================================================================


def main():
    """Run all parsing examples."""

    print("=" * 80)
    print("Parsing Example")
    print("=" * 80)
    print()

    print("--- Example 1: Names and Unions ---")
    example_names_and_unions()
    print()

    print("--- Example 2: Structures ---")
    example_structures()
    print()

    print("--- Example 3: Labels ---")
    example_labels()
    print()

    print("--- Example 4: Serialization ---")
    example_serialization()
    print()

    print("--- Example 5: Errors ---")
    example_errors()
    print()

    print("All examples completed successfully!")


if __name__ == "__main__":
    main()
