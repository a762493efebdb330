"""
Jive Nodes
==========

This module contains the JSON node types Jive operates on.

A JSON tree is built from a small tagged union of node classes. Leaf nodes
wrap a single immutable Python value and carry a `NodeType` tag saying which
JSON kind (and, for numbers, which width) they represent. Containers are
`ArrayNode`, a list of nodes, and `ObjectNode`, a dict from text keys to
nodes.

Two singletons stand in for absent values:

- `NULL` is the JSON ``null`` literal.
- `MISSING` is returned by lookups that found nothing, so that chained
  access such as ``node.path("a").path(0)`` never raises.
"""

import base64
import logging
import math
import numbers
from decimal import Decimal
from enum import Enum
from typing import Any, Iterable, Iterator, NamedTuple, Optional, Union

from .exceptions import NodeTypeError

logger = logging.getLogger(__name__)


class NodeType(Enum):
    """Enumeration of JSON node kinds."""
    NULL = "null"
    MISSING = "missing"
    BOOLEAN = "boolean"
    SHORT = "short"
    INT = "int"
    LONG = "long"
    BIG_INTEGER = "big_integer"
    FLOAT = "float"
    DOUBLE = "double"
    DECIMAL = "decimal"
    TEXT = "text"
    BINARY = "binary"
    POJO = "pojo"
    ARRAY = "array"
    OBJECT = "object"


_INTEGRAL_TYPES = frozenset({NodeType.SHORT, NodeType.INT, NodeType.LONG, NodeType.BIG_INTEGER})
_FLOATING_TYPES = frozenset({NodeType.FLOAT, NodeType.DOUBLE, NodeType.DECIMAL})


class JsonNode:
    """
    Base class of every node in a JSON tree.

    Accessors never raise on absent values: `get` returns None and `path`
    returns `MISSING`. Subclasses override only what differs for their kind.
    """

    __slots__ = ()

    node_type: NodeType

    def is_null(self) -> bool:
        return self.node_type is NodeType.NULL

    def is_missing(self) -> bool:
        return self.node_type is NodeType.MISSING

    def is_boolean(self) -> bool:
        return self.node_type is NodeType.BOOLEAN

    def is_number(self) -> bool:
        return self.node_type in _INTEGRAL_TYPES or self.node_type in _FLOATING_TYPES

    def is_integral_number(self) -> bool:
        return self.node_type in _INTEGRAL_TYPES

    def is_floating_point_number(self) -> bool:
        return self.node_type in _FLOATING_TYPES

    def is_textual(self) -> bool:
        return self.node_type is NodeType.TEXT

    def is_binary(self) -> bool:
        return self.node_type is NodeType.BINARY

    def is_pojo(self) -> bool:
        return self.node_type is NodeType.POJO

    def is_array(self) -> bool:
        return self.node_type is NodeType.ARRAY

    def is_object(self) -> bool:
        return self.node_type is NodeType.OBJECT

    def is_container(self) -> bool:
        return self.is_array() or self.is_object()

    def is_value_node(self) -> bool:
        """True for every node that is neither a container nor `MISSING`."""
        return not self.is_container() and not self.is_missing()

    def get(self, key: Union[str, int], default: Any = None) -> Any:
        """Returns the child at `key`, or `default` if there is none."""
        return default

    def path(self, key: Union[str, int]) -> "JsonNode":
        """Returns the child at `key`, or `MISSING` if there is none."""
        return MISSING

    def at(self, pointer: str) -> "JsonNode":
        """
        Resolves a JSON Pointer (RFC 6901) against this node.

        :param pointer: The pointer expression, e.g. ``"/users/0/name"``.
        :return: The addressed node, or `MISSING` if it does not exist.
        :raises PointerSyntaxError: If the pointer is malformed.
        """
        from .pointer import at
        return at(self, pointer)

    def as_text(self) -> str:
        return ""

    def to_native(self) -> Any:
        """Converts this node (recursively) into plain Python values."""
        raise NotImplementedError


class ValueNode(JsonNode):
    """A leaf node wrapping a single immutable value."""

    __slots__ = ("_value",)

    def __init__(self, value: Any):
        self._value = value

    @property
    def value(self) -> Any:
        return self._value

    def as_text(self) -> str:
        return str(self._value)

    def to_native(self) -> Any:
        return self._value

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, JsonNode):
            return NotImplemented
        return type(self) is type(other) and self._value == other._value

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        return not result if result is not NotImplemented else NotImplemented

    def __hash__(self) -> int:
        return hash((type(self).__name__, self._value))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._value!r})"


class BooleanNode(ValueNode):
    __slots__ = ()
    node_type = NodeType.BOOLEAN

    def __init__(self, value: bool):
        if not isinstance(value, bool):
            raise NodeTypeError(f"BooleanNode expects a bool, got {type(value).__name__}", value=value)
        super().__init__(value)

    def as_text(self) -> str:
        return "true" if self._value else "false"


class _IntegralNode(ValueNode):
    """Integral leaf constrained to a signed width (None means unbounded)."""

    __slots__ = ()
    bits: Optional[int] = None

    def __init__(self, value: int):
        if isinstance(value, bool) or not isinstance(value, int):
            raise NodeTypeError(f"{type(self).__name__} expects an int, got {type(value).__name__}", value=value)
        if self.bits is not None:
            bound = 1 << (self.bits - 1)
            if not -bound <= value < bound:
                raise ValueError(f"{value} does not fit in a {self.bits}-bit {type(self).__name__}")
        super().__init__(value)


class ShortNode(_IntegralNode):
    __slots__ = ()
    node_type = NodeType.SHORT
    bits = 16


class IntNode(_IntegralNode):
    __slots__ = ()
    node_type = NodeType.INT
    bits = 32


class LongNode(_IntegralNode):
    __slots__ = ()
    node_type = NodeType.LONG
    bits = 64


class BigIntegerNode(_IntegralNode):
    __slots__ = ()
    node_type = NodeType.BIG_INTEGER


class _FloatingNode(ValueNode):
    """
    Floating-point leaf. NaN equals NaN, so duplicate NaNs collapse in
    sets and in `uniq`.
    """

    __slots__ = ()

    def __init__(self, value: float):
        if isinstance(value, (bool, str)) or not isinstance(value, (numbers.Real, Decimal)):
            raise NodeTypeError(f"{type(self).__name__} expects a number, got {type(value).__name__}", value=value)
        super().__init__(float(value))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, JsonNode):
            return NotImplemented
        if type(self) is not type(other):
            return False
        return self._value == other._value or (math.isnan(self._value) and math.isnan(other._value))

    def __hash__(self) -> int:
        # hash(nan) differs per object, so NaN gets a fixed hash.
        if math.isnan(self._value):
            return hash((type(self).__name__, "NaN"))
        return hash((type(self).__name__, self._value))


class FloatNode(_FloatingNode):
    __slots__ = ()
    node_type = NodeType.FLOAT


class DoubleNode(_FloatingNode):
    __slots__ = ()
    node_type = NodeType.DOUBLE


class DecimalNode(ValueNode):
    __slots__ = ()
    node_type = NodeType.DECIMAL

    def __init__(self, value: Union[Decimal, int, str]):
        super().__init__(value if isinstance(value, Decimal) else Decimal(value))


class TextNode(ValueNode):
    __slots__ = ()
    node_type = NodeType.TEXT

    def __init__(self, value: str):
        if not isinstance(value, str):
            raise NodeTypeError(f"TextNode expects a str, got {type(value).__name__}", value=value)
        super().__init__(value)


class BinaryNode(ValueNode):
    __slots__ = ()
    node_type = NodeType.BINARY

    def __init__(self, value: Union[bytes, bytearray, memoryview]):
        super().__init__(bytes(value))

    def as_text(self) -> str:
        # Binary content is rendered the way JSON encoders conventionally do.
        return base64.b64encode(self._value).decode("ascii")


class POJONode(ValueNode):
    """Wraps an arbitrary Python object the tree knows nothing about."""

    __slots__ = ()
    node_type = NodeType.POJO

    def __hash__(self) -> int:
        try:
            return hash((type(self).__name__, self._value))
        except TypeError:
            return hash(type(self).__name__)


class NullNode(JsonNode):
    """The JSON ``null`` literal. Use the `NULL` singleton."""

    __slots__ = ()
    node_type = NodeType.NULL
    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def as_text(self) -> str:
        return "null"

    def to_native(self) -> None:
        return None

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "NULL"


class MissingNode(JsonNode):
    """Placeholder for absent values. Use the `MISSING` singleton."""

    __slots__ = ()
    node_type = NodeType.MISSING
    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def to_native(self) -> None:
        return None

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "MISSING"


NULL = NullNode()
MISSING = MissingNode()


class Entry(NamedTuple):
    """A (key, node) pair; the element type of an object seen as a sequence."""
    key: str
    value: JsonNode


class ArrayNode(list, JsonNode):
    """
    An ordered, duplicate-permitting sequence of JSON nodes.

    It behaves like a standard list, except that every value put into it
    (through the constructor, `add`, or the inherited list mutators) is
    coerced into a node, slicing and repetition return a new ArrayNode, and
    equality only holds against another ArrayNode.
    """

    __slots__ = ()
    node_type = NodeType.ARRAY

    def __init__(self, iterable: Optional[Iterable[Any]] = None):
        super().__init__()
        if iterable is not None:
            self.add_all(iterable)

    @staticmethod
    def _coerce(value: Any) -> JsonNode:
        from .factory import new_json_node
        return new_json_node(value)

    def add(self, value: Any) -> "ArrayNode":
        """Appends `value` (coerced into a node) and returns self for chaining."""
        self.append(value)
        return self

    def add_all(self, values: Iterable[Any]) -> "ArrayNode":
        for value in values:
            self.add(value)
        return self

    def get(self, index: Union[str, int], default: Any = None) -> Any:
        if isinstance(index, int) and not isinstance(index, bool) and 0 <= index < len(self):
            return list.__getitem__(self, index)
        return default

    def path(self, index: Union[str, int]) -> JsonNode:
        return self.get(index, MISSING)

    def to_native(self) -> list:
        return [node.to_native() for node in self]

    def copy(self) -> "ArrayNode":
        """Return a shallow copy of the ArrayNode."""
        return ArrayNode(self)

    def append(self, value: Any) -> None:
        list.append(self, self._coerce(value))

    def extend(self, values: Iterable[Any]) -> None:
        list.extend(self, [self._coerce(value) for value in values])

    def insert(self, index: int, value: Any) -> None:
        list.insert(self, index, self._coerce(value))

    def __setitem__(self, key: Any, value: Any) -> None:
        if isinstance(key, slice):
            list.__setitem__(self, key, [self._coerce(item) for item in value])
        else:
            list.__setitem__(self, key, self._coerce(value))

    def __getitem__(self, key: Any) -> Any:
        result = super().__getitem__(key)
        if isinstance(key, slice):
            return ArrayNode(result)
        return result

    def __add__(self, other: Any) -> "ArrayNode":
        if isinstance(other, list):
            return ArrayNode(list.__add__(self, other))
        return NotImplemented

    def __iadd__(self, other: Iterable[Any]) -> "ArrayNode":
        self.extend(other)
        return self

    def __mul__(self, count: int) -> "ArrayNode":
        return ArrayNode(list.__mul__(self, count))

    def __rmul__(self, count: int) -> "ArrayNode":
        return ArrayNode(list.__mul__(self, count))

    def __eq__(self, other: object) -> bool:
        # A plain list must not compare equal, so never hand over to list.__eq__.
        if not isinstance(other, ArrayNode):
            return False
        return list.__eq__(self, other)

    def __ne__(self, other: object) -> bool:
        return not self.__eq__(other)

    __hash__ = None  # type: ignore

    def __repr__(self) -> str:
        return f"ArrayNode({list.__repr__(self)})"


class ObjectNode(dict, JsonNode):
    """
    A mapping from text keys to JSON nodes, iterated in insertion order.

    `put`, item assignment, `update` and `setdefault` coerce native values
    into nodes; `set` expects a node already. Both `put` and `set` return
    self for chaining.
    """

    __slots__ = ()
    node_type = NodeType.OBJECT

    def __init__(self, entries: Optional[Any] = None):
        super().__init__()
        if entries is not None:
            pairs = entries.items() if isinstance(entries, dict) else entries
            for key, value in pairs:
                self.put(key, value)

    def put(self, key: str, value: Any) -> "ObjectNode":
        from .factory import new_json_node
        return self.set(key, new_json_node(value))

    def set(self, key: str, node: JsonNode) -> "ObjectNode":
        if not isinstance(key, str):
            raise NodeTypeError(f"ObjectNode keys must be str, got {type(key).__name__}", value=key)
        if not isinstance(node, JsonNode):
            raise NodeTypeError(f"ObjectNode values must be JsonNode instances, got {type(node).__name__}", value=node)
        dict.__setitem__(self, key, node)
        return self

    def fields(self) -> Iterator[Entry]:
        """Yields every (key, node) pair as an `Entry`."""
        for key, value in self.items():
            yield Entry(key, value)

    def get(self, key: Union[str, int], default: Any = None) -> Any:
        if not isinstance(key, str):
            return default
        return dict.get(self, key, default)

    def path(self, key: Union[str, int]) -> JsonNode:
        return self.get(key, MISSING)

    def to_native(self) -> dict:
        return {key: node.to_native() for key, node in self.items()}

    def copy(self) -> "ObjectNode":
        """Return a shallow copy of the ObjectNode."""
        return ObjectNode(self)

    def __setitem__(self, key: str, value: Any) -> None:
        self.put(key, value)

    def update(self, *args: Any, **kwargs: Any) -> None:
        for key, value in dict(*args, **kwargs).items():
            self.put(key, value)

    def setdefault(self, key: str, default: Any = None) -> JsonNode:
        if key not in self:
            self.put(key, default)
        return dict.__getitem__(self, key)

    def __ior__(self, other: Any) -> "ObjectNode":
        self.update(other)
        return self

    def __or__(self, other: Any) -> "ObjectNode":
        if not isinstance(other, dict):
            return NotImplemented
        merged = self.copy()
        merged.update(other)
        return merged

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ObjectNode):
            return False
        return dict.__eq__(self, other)

    def __ne__(self, other: object) -> bool:
        return not self.__eq__(other)

    __hash__ = None  # type: ignore

    def __repr__(self) -> str:
        return f"ObjectNode({dict.__repr__(self)})"
