"""
Tests for the JSON node model: equality, access and native conversion.
"""
import base64
from decimal import Decimal

import pytest

from jive.exceptions import NodeTypeError
from jive.nodes import (
    MISSING,
    NULL,
    ArrayNode,
    BigIntegerNode,
    BinaryNode,
    BooleanNode,
    DecimalNode,
    DoubleNode,
    Entry,
    FloatNode,
    IntNode,
    LongNode,
    MissingNode,
    NodeType,
    NullNode,
    ObjectNode,
    POJONode,
    ShortNode,
    TextNode,
)


class TestValueNodes:
    def test_equality_is_by_class_and_value(self):
        assert IntNode(2) == IntNode(2)
        assert IntNode(2) != IntNode(3)
        assert IntNode(2) != LongNode(2)
        assert IntNode(2) != TextNode("2")
        assert BooleanNode(True) != IntNode(1)

    def test_hash_consistent_with_equality(self):
        assert len({IntNode(1), IntNode(1), TextNode("1")}) == 2

    def test_boolean_node_rejects_non_bools(self):
        for value in ("false", 0, 1, None):
            with pytest.raises(NodeTypeError, match="expects a bool"):
                BooleanNode(value)

    def test_floating_nodes_reject_text(self):
        for node_class in (FloatNode, DoubleNode):
            with pytest.raises(NodeTypeError, match="expects a number"):
                node_class("1.5")
            with pytest.raises(NodeTypeError):
                node_class(True)

    def test_floating_nodes_accept_numbers(self):
        assert DoubleNode(2).value == 2.0
        assert DoubleNode(Decimal("0.5")) == DoubleNode(0.5)

    def test_nan_equals_nan(self):
        nan = float("nan")
        assert DoubleNode(nan) == DoubleNode(float("nan"))
        assert FloatNode(nan) == FloatNode(nan)
        assert DoubleNode(nan) != FloatNode(nan)
        assert DoubleNode(nan) != DoubleNode(1.0)
        assert len({DoubleNode(nan), DoubleNode(float("nan"))}) == 1

    def test_value_nodes_never_equal_plain_values(self):
        assert IntNode(1) != 1
        assert TextNode("a") != "a"

    def test_integral_width_limits(self):
        assert ShortNode(32767).value == 32767
        with pytest.raises(ValueError, match="16-bit"):
            ShortNode(32768)
        with pytest.raises(ValueError, match="32-bit"):
            IntNode(2 ** 31)
        assert LongNode(2 ** 63 - 1).value == 2 ** 63 - 1
        with pytest.raises(ValueError):
            LongNode(-(2 ** 63) - 1)
        assert BigIntegerNode(2 ** 100).value == 2 ** 100

    def test_integral_nodes_reject_non_ints(self):
        with pytest.raises(NodeTypeError):
            IntNode("1")
        with pytest.raises(NodeTypeError):
            IntNode(True)

    def test_text_node_rejects_non_strings(self):
        with pytest.raises(NodeTypeError):
            TextNode(1)

    def test_type_predicates(self):
        assert IntNode(1).is_number()
        assert IntNode(1).is_integral_number()
        assert not IntNode(1).is_floating_point_number()
        assert DoubleNode(1.5).is_floating_point_number()
        assert DecimalNode(Decimal("1.5")).is_number()
        assert TextNode("x").is_textual()
        assert BinaryNode(b"x").is_binary()
        assert POJONode(object()).is_pojo()
        assert BooleanNode(False).is_boolean()
        assert TextNode("x").is_value_node()
        assert not TextNode("x").is_container()

    def test_node_type_tags(self):
        assert ShortNode(1).node_type is NodeType.SHORT
        assert FloatNode(1.0).node_type is NodeType.FLOAT
        assert DoubleNode(1.0).node_type is NodeType.DOUBLE

    def test_as_text(self):
        assert BooleanNode(True).as_text() == "true"
        assert IntNode(42).as_text() == "42"
        assert TextNode("hi").as_text() == "hi"
        assert BinaryNode(b"\x00\x01").as_text() == base64.b64encode(b"\x00\x01").decode("ascii")
        assert NULL.as_text() == "null"
        assert MISSING.as_text() == ""

    def test_leaf_access_is_missing(self):
        assert IntNode(1).path("a") is MISSING
        assert IntNode(1).get(0) is None

    def test_unhashable_pojo_still_hashes(self):
        node = POJONode(["not", "hashable"])
        assert isinstance(hash(node), int)
        assert node == POJONode(["not", "hashable"])


class TestSentinels:
    def test_null_and_missing_are_singletons(self):
        assert NullNode() is NULL
        assert MissingNode() is MISSING
        assert NULL != MISSING

    def test_sentinels_are_falsy(self):
        assert not NULL
        assert not MISSING

    def test_sentinel_predicates(self):
        assert NULL.is_null()
        assert NULL.is_value_node()
        assert MISSING.is_missing()
        assert not MISSING.is_value_node()
        assert NULL.to_native() is None
        assert MISSING.to_native() is None

    def test_missing_chains(self):
        assert MISSING.path("a").path(0) is MISSING


class TestArrayNode:
    def setup_method(self):
        self.array = ArrayNode().add(1).add("two").add(None)

    def test_add_coerces_and_chains(self):
        assert list(self.array) == [IntNode(1), TextNode("two"), NULL]

    def test_constructor_coerces(self):
        assert ArrayNode([1, "two", None]) == self.array

    def test_not_equal_to_plain_list(self):
        assert self.array != [IntNode(1), TextNode("two"), NULL]
        assert ArrayNode() != []

    def test_get_and_path(self):
        assert self.array.get(1) == TextNode("two")
        assert self.array.get(5) is None
        assert self.array.get(-1) is None
        assert self.array.path(0) == IntNode(1)
        assert self.array.path(3) is MISSING
        assert self.array.path("0") is MISSING

    def test_slicing_returns_array_node(self):
        sliced = self.array[:2]
        assert isinstance(sliced, ArrayNode)
        assert sliced == ArrayNode([1, "two"])

    def test_concatenation_operator(self):
        combined = self.array + ArrayNode([4])
        assert isinstance(combined, ArrayNode)
        assert len(combined) == 4

    def test_to_native(self):
        nested = ArrayNode([1, [2, {"a": 3}]])
        assert nested.to_native() == [1, [2, {"a": 3}]]

    def test_append_coerces(self):
        self.array.append(4)
        assert self.array[3] == IntNode(4)
        assert self.array.to_native() == [1, "two", None, 4]

    def test_extend_and_iadd_coerce(self):
        self.array.extend([4, "five"])
        self.array += [6]
        assert isinstance(self.array, ArrayNode)
        assert list(self.array[3:]) == [IntNode(4), TextNode("five"), IntNode(6)]

    def test_insert_coerces(self):
        self.array.insert(0, "zero")
        assert self.array[0] == TextNode("zero")

    def test_item_assignment_coerces(self):
        self.array[0] = 10
        self.array[1:3] = ["a", "b", "c"]
        assert self.array == ArrayNode([10, "a", "b", "c"])
        assert all(isinstance(node, (IntNode, TextNode)) for node in self.array)

    def test_repetition_returns_array_node(self):
        doubled = ArrayNode([1]) * 2
        assert isinstance(doubled, ArrayNode)
        assert doubled == ArrayNode([1, 1])
        assert isinstance(2 * ArrayNode([1]), ArrayNode)

    def test_copy_is_independent(self):
        copy = self.array.copy()
        copy.add(4)
        assert len(self.array) == 3
        assert isinstance(copy, ArrayNode)

    def test_is_array(self):
        assert self.array.is_array()
        assert self.array.is_container()
        assert not self.array.is_value_node()

    def test_unhashable(self):
        with pytest.raises(TypeError):
            hash(self.array)


class TestObjectNode:
    def setup_method(self):
        self.obj = ObjectNode().put("a", 1).put("b", "x")

    def test_put_coerces(self):
        assert self.obj["a"] == IntNode(1)
        assert self.obj["b"] == TextNode("x")

    def test_item_assignment_coerces(self):
        self.obj["c"] = 2.5
        assert self.obj["c"] == DoubleNode(2.5)

    def test_update_coerces(self):
        self.obj.update({"b": 2}, c=[3])
        assert self.obj["b"] == IntNode(2)
        assert self.obj["c"] == ArrayNode([3])
        assert self.obj.to_native() == {"a": 1, "b": 2, "c": [3]}

    def test_update_rejects_non_text_keys(self):
        with pytest.raises(NodeTypeError, match="keys must be str"):
            self.obj.update([(1, "x")])

    def test_setdefault_coerces(self):
        assert self.obj.setdefault("a", 99) == IntNode(1)
        assert self.obj.setdefault("c", 3) == IntNode(3)
        assert self.obj.setdefault("d") is NULL
        assert self.obj["c"] == IntNode(3)

    def test_merge_operators_coerce(self):
        merged = self.obj | {"c": 3}
        assert isinstance(merged, ObjectNode)
        assert merged["c"] == IntNode(3)
        assert "c" not in self.obj
        self.obj |= {"a": "replaced"}
        assert self.obj["a"] == TextNode("replaced")

    def test_set_requires_node(self):
        with pytest.raises(NodeTypeError, match="JsonNode"):
            self.obj.set("c", 3)
        with pytest.raises(NodeTypeError, match="keys must be str"):
            self.obj.set(1, IntNode(3))

    def test_get_and_path(self):
        assert self.obj.get("a") == IntNode(1)
        assert self.obj.get("zzz") is None
        assert self.obj.get(0) is None
        assert self.obj.path("zzz") is MISSING

    def test_fields_yields_entries(self):
        assert list(self.obj.fields()) == [Entry("a", IntNode(1)), Entry("b", TextNode("x"))]

    def test_equality(self):
        assert self.obj == ObjectNode({"b": "x", "a": 1})
        assert self.obj != {"a": IntNode(1), "b": TextNode("x")}
        assert self.obj != ObjectNode({"a": 1})

    def test_constructor_accepts_pairs(self):
        assert ObjectNode([("a", 1), ("b", "x")]) == self.obj

    def test_to_native(self):
        obj = ObjectNode({"a": [1, 2], "b": {"c": None}})
        assert obj.to_native() == {"a": [1, 2], "b": {"c": None}}

    def test_is_object(self):
        assert self.obj.is_object()
        assert not self.obj.is_array()
