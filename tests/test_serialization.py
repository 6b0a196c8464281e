"""Tests for typeshape.serialization module."""

import json

import pytest

from typeshape.parser import parse
from typeshape.serialization import (
    from_builtins,
    from_dict,
    from_json,
    to_builtins,
    to_dict,
    to_json,
)
from typeshape.types import ArrayType, FieldsType, NamedType, TupleType


class TestToDict:
    """Test encoding descriptors to dicts."""

    def test_named(self):
        """Test a bare name encodes to just its name."""
        assert to_dict(NamedType("Number")) == {"name": "Number"}

    def test_anonymous_array_omits_name(self):
        """Test anonymous structures have no name key."""
        assert to_dict(ArrayType((NamedType("Number"),))) == {
            "structure": "array",
            "of": [{"name": "Number"}],
        }

    def test_named_array(self):
        """Test a named array keeps its name."""
        assert to_dict(ArrayType((NamedType("Number"),), name="Array"))["name"] == "Array"

    def test_tuple(self):
        """Test tuple slots encode as nested lists."""
        assert to_builtins(parse("(String, Number)")) == [
            {
                "structure": "tuple",
                "of": [[{"name": "String"}], [{"name": "Number"}]],
            }
        ]

    def test_fields(self):
        """Test records carry their subset flag."""
        assert to_builtins(parse("{ name: String, age: Number }")) == [
            {
                "structure": "fields",
                "of": {"name": [{"name": "String"}], "age": [{"name": "Number"}]},
                "subset": False,
            }
        ]

    def test_open_fields(self):
        """Test an open record encodes subset true."""
        assert to_dict(parse("{ name: String, ... }")[0])["subset"] is True

    def test_maybe(self):
        """Test the Maybe expansion encodes in order."""
        assert to_builtins(parse("Maybe String")) == [
            {"name": "Undefined"},
            {"name": "Null"},
            {"name": "String"},
        ]

    def test_unknown_typedef(self):
        """Test encoding something that is not a descriptor fails."""
        with pytest.raises((TypeError, AttributeError)):
            to_dict(object())


class TestFromDict:
    """Test decoding dicts to descriptors."""

    def test_named(self):
        """Test decoding a bare name."""
        assert from_dict({"name": "Number"}) == NamedType("Number")

    def test_array(self):
        """Test decoding an array."""
        assert from_dict({"structure": "array", "of": [{"name": "A"}]}) == ArrayType(
            (NamedType("A"),)
        )

    def test_tuple(self):
        """Test decoding a tuple."""
        data = {"name": "Pair", "structure": "tuple", "of": [[{"name": "A"}], [{"name": "B"}]]}
        assert from_dict(data) == TupleType(
            ((NamedType("A"),), (NamedType("B"),)), name="Pair"
        )

    def test_fields_default_subset(self):
        """Test a missing subset flag decodes as a closed record."""
        data = {"structure": "fields", "of": {"a": [{"name": "A"}]}}
        assert from_dict(data) == FieldsType({"a": (NamedType("A"),)})

    def test_unknown_structure(self):
        """Test an unknown structure tag is rejected."""
        with pytest.raises(ValueError, match="Unknown structure 'map'"):
            from_dict({"structure": "map", "of": []})

    def test_bare_without_name(self):
        """Test a bare descriptor needs a name."""
        with pytest.raises(ValueError, match="must have a name"):
            from_dict({})

    def test_empty_array(self):
        """Test an array without elements is rejected."""
        with pytest.raises(ValueError, match="element type"):
            from_dict({"structure": "array", "of": []})

    def test_empty_tuple(self):
        """Test a tuple without slots is rejected."""
        with pytest.raises(ValueError, match="at least one slot"):
            from_dict({"structure": "tuple", "of": []})


class TestJSON:
    """Test JSON encoding."""

    def test_to_json_is_valid(self):
        """Test to_json output loads as the builtin encoding."""
        types = parse("Maybe [Number] | { id: String, ... }")
        assert json.loads(to_json(types)) == to_builtins(types)

    def test_indent(self):
        """Test indentation is passed through."""
        assert "\n  " in to_json(parse("Number"), indent=2)

    @pytest.mark.parametrize(
        "source",
        [
            "Number",
            "Maybe String",
            "Array[Number | String]",
            "(String, [Number], { a: A })",
            "Object{ name: String, tags: [*], ... }",
        ],
    )
    def test_json_restores_tree(self, source):
        """Test decoding the JSON rebuilds an equal tree."""
        types = parse(source)
        assert from_json(to_json(types)) == types

    def test_from_builtins(self):
        """Test decoding a plain union list."""
        assert from_builtins([{"name": "A"}, {"name": "B"}]) == (
            NamedType("A"),
            NamedType("B"),
        )


class TestMalformedPayloads:
    """Test decoding rejects malformed data with ValueError."""

    @pytest.mark.parametrize(
        "data",
        [
            {"structure": "fields", "of": {}, "subset": "false"},
            {"structure": "fields", "of": [["a", [{"name": "A"}]]]},
            {"structure": "fields", "of": {"a": {"name": "A"}}},
            {"structure": "array", "of": ["Number"]},
            {"structure": "array", "of": {"name": "A"}},
            {"structure": "tuple", "of": {"a": []}},
            {"structure": ["array"], "of": []},
            {"name": 3},
            {"name": ""},
        ],
    )
    def test_from_dict_rejects(self, data):
        """Test each malformed descriptor raises ValueError."""
        with pytest.raises(ValueError):
            from_dict(data)

    def test_from_builtins_rejects_non_list(self):
        """Test a union must be a list."""
        with pytest.raises(ValueError, match="must be a list"):
            from_builtins({"name": "A"})

    def test_from_json_rejects_non_dict_item(self):
        """Test a union item must be an object."""
        with pytest.raises(ValueError, match="must be a dict"):
            from_json('["Number"]')

    def test_decoded_record_hashable(self):
        """Test decoded records can be hashed."""
        types = from_json(to_json(parse("[{ a: A, ... }]")))
        assert hash(types) == hash(parse("[{ a: A, ... }]"))
