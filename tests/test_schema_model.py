"""Tests for schema model classes."""

import pytest

from xsdbridge.schema_model import (
    ArrayNode, ObjectNode, Occurrence, PrimitiveNode, SchemaKind, SchemaVisitor, UnknownNode,
)


class TestSchemaKind:
    """Tests for SchemaKind enum."""

    def test_kind_values(self):
        """Test SchemaKind enum values."""
        assert SchemaKind.OBJECT == "object"
        assert SchemaKind.ARRAY == "array"
        assert SchemaKind.INTEGER == "integer"
        assert SchemaKind.UNKNOWN == "unknown"

    def test_from_tag(self):
        """Test resolving plain type tags."""
        assert SchemaKind.from_tag("string") is SchemaKind.STRING
        assert SchemaKind.from_tag("boolean") is SchemaKind.BOOLEAN

    def test_from_tag_list_first_wins(self):
        """Test that the first entry of a tag list is used."""
        assert SchemaKind.from_tag(["integer", "null"]) is SchemaKind.INTEGER
        assert SchemaKind.from_tag(["null", "integer"]) is SchemaKind.UNKNOWN

    def test_from_tag_unrecognised(self):
        """Test unknown, missing and empty tags."""
        assert SchemaKind.from_tag("date") is SchemaKind.UNKNOWN
        assert SchemaKind.from_tag(None) is SchemaKind.UNKNOWN
        assert SchemaKind.from_tag([]) is SchemaKind.UNKNOWN

    def test_is_primitive(self):
        """Test primitive classification."""
        assert SchemaKind.NUMBER.is_primitive
        assert not SchemaKind.OBJECT.is_primitive
        assert not SchemaKind.UNKNOWN.is_primitive


class TestOccurrence:
    """Tests for Occurrence class."""

    def test_default_occurrence(self):
        """Test default occurrence (0..unbounded)."""
        occurs = Occurrence()
        assert occurs.min == 0
        assert occurs.max == "unbounded"
        assert not occurs.is_bounded
        assert str(occurs) == "[0..unbounded]"

    def test_bounded_occurrence(self):
        """Test explicit bounds."""
        occurs = Occurrence(2, 5)
        assert occurs.is_bounded
        assert occurs.as_attributes() == {"minOccurs": "2", "maxOccurs": "5"}

    def test_negative_min_clamped(self):
        """Test negative minimum is clamped to zero."""
        assert Occurrence(-3).min == 0

    def test_equality(self):
        """Test value equality."""
        assert Occurrence(1, 3) == Occurrence(1, 3)
        assert Occurrence(1, 3) != Occurrence(1)


class TestNodes:
    """Tests for schema node variants."""

    def test_object_node(self):
        """Test ObjectNode keeps property order."""
        node = ObjectNode(properties={"b": UnknownNode(), "a": UnknownNode()})
        assert node.kind is SchemaKind.OBJECT
        assert list(node.properties) == ["b", "a"]
        assert node.description is None

    def test_array_node_defaults(self):
        """Test ArrayNode defaults."""
        node = ArrayNode(description="things")
        assert node.kind is SchemaKind.ARRAY
        assert node.items is None
        assert node.occurs == Occurrence()

    def test_primitive_node(self):
        """Test PrimitiveNode reports its primitive kind."""
        node = PrimitiveNode(primitive="integer")
        assert node.kind is SchemaKind.INTEGER

    def test_primitive_node_rejects_composite_kind(self):
        """Test PrimitiveNode only holds primitive kinds."""
        with pytest.raises(ValueError):
            PrimitiveNode(primitive=SchemaKind.OBJECT)

    def test_unknown_node(self):
        """Test UnknownNode keeps the original tag."""
        node = UnknownNode(type_tag="date")
        assert node.kind is SchemaKind.UNKNOWN
        assert node.type_tag == "date"

    def test_accept_dispatches_by_variant(self):
        """Test visitor dispatch."""

        class Recorder(SchemaVisitor):
            def visit_object(self, node, element_name):
                return ("object", element_name)

            def visit_array(self, node, element_name):
                return ("array", element_name)

            def visit_primitive(self, node, element_name):
                return ("primitive", element_name)

            def visit_unknown(self, node, element_name):
                return ("unknown", element_name)

        visitor = Recorder()
        assert ObjectNode().accept(visitor, "a") == ("object", "a")
        assert ArrayNode().accept(visitor, "b") == ("array", "b")
        assert PrimitiveNode().accept(visitor, "c") == ("primitive", "c")
        assert UnknownNode().accept(visitor, "d") == ("unknown", "d")
