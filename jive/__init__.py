from .collectors import ArrayNodeCollector, ObjectNodeCollector, collect, rightmost, to_array_node, to_object_node
from .exceptions import JiveError, NodeTypeError, PointerSyntaxError
from .factory import new_array_node, new_iterable, new_json_entry, new_json_node, new_object_node
from .jive import (
    concat,
    contains,
    drop,
    every,
    filter,
    find,
    keys,
    last,
    map,
    merge,
    none,
    omit,
    pick,
    pop,
    reduce,
    reject,
    some,
    take,
    uniq,
    values,
)
from .nodes import (
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
    JsonNode,
    LongNode,
    MissingNode,
    NodeType,
    NullNode,
    ObjectNode,
    POJONode,
    ShortNode,
    TextNode,
    ValueNode,
)
from .pointer import at, compile_pointer
from .safe_execution import SafeExecution, attempt, execute
from .streams import stream, transform

__version__ = "0.1.0"

__all__ = [
    # nodes
    "JsonNode",
    "ValueNode",
    "NodeType",
    "NullNode",
    "MissingNode",
    "NULL",
    "MISSING",
    "BooleanNode",
    "ShortNode",
    "IntNode",
    "LongNode",
    "BigIntegerNode",
    "FloatNode",
    "DoubleNode",
    "DecimalNode",
    "TextNode",
    "BinaryNode",
    "POJONode",
    "ArrayNode",
    "ObjectNode",
    "Entry",
    # construction
    "new_json_node",
    "new_json_entry",
    "new_array_node",
    "new_object_node",
    "new_iterable",
    # streams and collectors
    "stream",
    "transform",
    "collect",
    "to_array_node",
    "to_object_node",
    "ArrayNodeCollector",
    "ObjectNodeCollector",
    "rightmost",
    # combinators
    "concat",
    "contains",
    "drop",
    "every",
    "filter",
    "find",
    "keys",
    "last",
    "map",
    "merge",
    "none",
    "omit",
    "pick",
    "pop",
    "reduce",
    "reject",
    "some",
    "take",
    "uniq",
    "values",
    # field access
    "at",
    "compile_pointer",
    # safe execution
    "execute",
    "attempt",
    "SafeExecution",
    # errors
    "JiveError",
    "NodeTypeError",
    "PointerSyntaxError",
]
