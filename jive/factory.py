"""
Jive Node Factory
=================

This module contains the construction primitives for JSON nodes.

`new_json_node` is the single entry point for turning a Python value into a
node: it dispatches on the value's type (or on an explicit `NodeType`) and
picks the matching leaf or container class. `None` always becomes `NULL`.
"""

import logging
from decimal import Decimal
from typing import Any, Callable, Dict, Iterable, Optional, Tuple

from .collectors import to_array_node, to_object_node
from .nodes import (
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
    JsonNode,
    LongNode,
    NodeType,
    ObjectNode,
    POJONode,
    ShortNode,
    TextNode,
)

logger = logging.getLogger(__name__)


def _integral_node(value: int) -> JsonNode:
    """Picks the narrowest of IntNode, LongNode and BigIntegerNode for `value`."""
    for node_class in (IntNode, LongNode):
        bound = 1 << (node_class.bits - 1)
        if -bound <= value < bound:
            return node_class(value)
    return BigIntegerNode(value)


# Checked in order: bool must precede int since bool is an int subclass.
_TYPE_CONSTRUCTORS: Tuple[Tuple[Any, Callable[[Any], JsonNode]], ...] = (
    (bool, BooleanNode),
    (int, _integral_node),
    (float, DoubleNode),
    (Decimal, DecimalNode),
    (str, TextNode),
    ((bytes, bytearray, memoryview), BinaryNode),
    (dict, ObjectNode),
    ((list, tuple), ArrayNode),
)

_KIND_CONSTRUCTORS: Dict[NodeType, Callable[[Any], JsonNode]] = {
    NodeType.NULL: lambda value: NULL,
    NodeType.BOOLEAN: BooleanNode,
    NodeType.SHORT: ShortNode,
    NodeType.INT: IntNode,
    NodeType.LONG: LongNode,
    NodeType.BIG_INTEGER: BigIntegerNode,
    NodeType.FLOAT: FloatNode,
    NodeType.DOUBLE: DoubleNode,
    NodeType.DECIMAL: DecimalNode,
    NodeType.TEXT: TextNode,
    NodeType.BINARY: BinaryNode,
    NodeType.POJO: POJONode,
    NodeType.ARRAY: ArrayNode,
    NodeType.OBJECT: ObjectNode,
}


def new_json_node(value: Any, kind: Optional[NodeType] = None) -> JsonNode:
    """
    Constructs a JSON node from a Python value.

    Without `kind`, the node class is chosen from the value's type: bool,
    int (narrowest integral width), float, Decimal, str, bytes-like, dict and
    list/tuple (converted recursively). Any other object is wrapped in a
    POJONode. Existing nodes are returned unchanged.

    :param value: The value to wrap. None always yields `NULL`.
    :param kind: Forces a specific node kind, e.g. `NodeType.SHORT`.
    :return: A new JsonNode (or the `NULL` singleton).
    :raises NodeTypeError: If the value's type does not suit `kind` (e.g. text forced to BOOLEAN).
    :raises ValueError: If `kind` cannot be constructed or the value is out of range for it.
    """
    if value is None:
        return NULL

    if isinstance(value, JsonNode):
        if kind is None or kind is value.node_type:
            return value
        value = value.to_native()
        if value is None:
            return NULL

    if kind is not None:
        constructor = _KIND_CONSTRUCTORS.get(kind)
        if constructor is None:
            raise ValueError(f"Cannot construct a node of kind {kind}")
        return constructor(value)

    for value_type, constructor in _TYPE_CONSTRUCTORS:
        if isinstance(value, value_type):
            return constructor(value)

    logger.debug(f"Wrapping {type(value).__name__} value in a POJONode")
    return POJONode(value)


def new_json_entry(key: str, value: Any, kind: Optional[NodeType] = None) -> Entry:
    """Constructs an `Entry` whose value is `new_json_node(value, kind)`."""
    return Entry(key, new_json_node(value, kind))


def new_array_node(*nodes: Any) -> ArrayNode:
    """
    Constructs a new ArrayNode populated with `nodes` in argument order.

    Values which are not nodes yet are passed through `new_json_node`.
    """
    return to_array_node().collect(new_json_node(node) for node in nodes)


def new_object_node(*entries: Tuple[str, Any]) -> ObjectNode:
    """
    Constructs a new ObjectNode populated with the given (key, value) entries.

    Later entries overwrite earlier ones sharing the same key.
    """
    return to_object_node().collect(Entry(key, new_json_node(value)) for key, value in entries)


def new_iterable(node: Optional[JsonNode]) -> Iterable[JsonNode]:
    """
    Returns an iterable of nodes seeded from `node`.

    An ArrayNode is returned as is, None yields an empty ArrayNode, and any
    other node is wrapped in a new single-element ArrayNode.
    """
    if node is None:
        return new_array_node()
    if isinstance(node, ArrayNode):
        return node
    return new_array_node(node)
