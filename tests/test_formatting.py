"""Tests for typeshape.formatting module."""

import pytest

from typeshape.formatting import format_type, format_types
from typeshape.parser import parse
from typeshape.types import ArrayType, FieldsType, NamedType, TupleType


class TestFormatType:
    """Test rendering single descriptors."""

    def test_named(self):
        """Test a bare name."""
        assert format_type(NamedType("Number")) == "Number"

    def test_array(self):
        """Test anonymous and named arrays."""
        of = (NamedType("A"), NamedType("B"))
        assert format_type(ArrayType(of)) == "[A | B]"
        assert format_type(ArrayType(of, name="Array")) == "Array[A | B]"

    def test_tuple(self):
        """Test slots are comma separated."""
        tt = TupleType(((NamedType("A"),), (NamedType("B"), NamedType("C"))))
        assert format_type(tt) == "(A, B | C)"

    def test_closed_fields(self):
        """Test an exact record."""
        ft = FieldsType({"a": (NamedType("A"),), "b": (NamedType("B"),)})
        assert format_type(ft) == "{a: A, b: B}"

    def test_open_fields(self):
        """Test an open record ends with '...'."""
        assert format_type(FieldsType({"a": (NamedType("A"),)}, subset=True)) == "{a: A, ...}"
        assert format_type(FieldsType({}, subset=True)) == "{...}"

    def test_unknown(self):
        """Test formatting a non-descriptor fails."""
        with pytest.raises((TypeError, AttributeError)):
            format_type(object())


class TestFormatTypes:
    """Test rendering unions."""

    def test_union(self):
        """Test members are joined by '|'."""
        assert format_types(parse("A|B|C")) == "A | B | C"

    def test_maybe_expanded(self):
        """Test Maybe renders as its expansion."""
        assert format_types(parse("Maybe String")) == "Undefined | Null | String"

    def test_comment_dropped(self):
        """Test labels are not reproduced."""
        assert format_types(parse("Age :: Number")) == "Number"


class TestRoundTrip:
    """Test formatting then parsing rebuilds the same tree."""

    @pytest.mark.parametrize(
        "source",
        [
            "Number",
            "*",
            "Maybe String",
            "String | Number | String",
            "[Number]",
            "Array[Maybe Number]",
            "(String, Number)",
            "(A | B C,)",
            "{ name: String, age: Number }",
            "{ name: String, ... }",
            "{...}",
            "Array[Number] | Array | Array[String]",
            "Label :: { id: key :: String, point: (Number, Number), tags: [[*]] }",
            "Object{ a: { b: { c: [X | Y], ... } } } | Null",
        ],
    )
    def test_round_trip(self, source):
        """Test parse(format(parse(s))) equals parse(s)."""
        types = parse(source)
        assert parse(format_types(types)) == types

    def test_canonical_is_stable(self):
        """Test formatting a reparsed tree gives the same text."""
        text = format_types(parse("Maybe {a:[A],b:(B,C),...}"))
        assert format_types(parse(text)) == text
