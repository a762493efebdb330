"""
Jive Combinators
================

Collection-style operations over ArrayNode and ObjectNode values.

Every operation accepts either container kind unless stated otherwise.
Arrays are processed element by element; objects are processed as a
sequence of `Entry` pairs, so predicates and mappers on objects receive
``(key, value)`` entries. All operations return new containers and leave
their input untouched, except `pop`, which removes the last element of the
array it is given.
"""

import functools
import itertools
import logging
from typing import AbstractSet, Any, Callable, Iterable, Optional, Set, TypeVar, Union

from .collectors import to_array_node, to_object_node
from .exceptions import NodeTypeError
from .nodes import MISSING, ArrayNode, JsonNode, ObjectNode
from .streams import Container, Item, stream, transform

logger = logging.getLogger(__name__)

T = TypeVar("T")
Predicate = Callable[[Any], bool]


def _require(node: Any, expected: type) -> None:
    if not isinstance(node, expected):
        raise NodeTypeError(f"Expected {expected.__name__}, got {type(node).__name__}", value=node)


def concat(*nodes: ArrayNode) -> ArrayNode:
    """
    Concatenates multiple ArrayNode instances into a new ArrayNode.

    All elements are kept, duplicates included, in argument order.
    """
    for node in nodes:
        _require(node, ArrayNode)
    return to_array_node().collect(itertools.chain.from_iterable(stream(node) for node in nodes))


def contains(node: Container, value: JsonNode) -> bool:
    """
    Determines whether `value` exists in a container.

    Arrays are searched by element; objects by entry value, ignoring keys.
    """
    if isinstance(node, ObjectNode):
        return some(node, lambda entry: entry.value == value)
    return some(node, lambda element: element == value)


def drop(node: ArrayNode, count: int) -> ArrayNode:
    """
    Returns a new ArrayNode with the first `count` nodes removed.

    Dropping more nodes than available yields an empty ArrayNode.
    """
    _require(node, ArrayNode)
    return transform(node, lambda s: itertools.islice(s, count, None))


def every(node: Container, predicate: Predicate) -> bool:
    """Determines whether every element (or entry) satisfies `predicate`."""
    return all(predicate(item) for item in stream(node))


def filter(node: Container, predicate: Predicate) -> Container:
    """
    Filters a container into a new container of the same kind.

    Only elements (or entries) satisfying `predicate` are kept, in order.
    """
    return transform(node, lambda s: (item for item in s if predicate(item)))


def find(node: Container, predicate: Predicate) -> Optional[Item]:
    """
    Finds the first element (or entry) satisfying `predicate`.

    :return: The matching node or `Entry`, or None if nothing matches.
    """
    return next((item for item in stream(node) if predicate(item)), None)


def keys(node: ObjectNode) -> Set[str]:
    """Returns the set of all keys of an ObjectNode."""
    _require(node, ObjectNode)
    return {entry.key for entry in stream(node)}


def last(node: ArrayNode) -> JsonNode:
    """
    Retrieves the last value of an ArrayNode.

    If the ArrayNode is empty, `MISSING` is returned.
    """
    _require(node, ArrayNode)
    return node.path(len(node) - 1)


def map(node: Container, function: Callable[[Any], Any]) -> Container:
    """
    Maps every element (or entry) of a container into a new container.

    For arrays `function` must return a JsonNode; for objects it must return
    a ``(key, node)`` entry.
    """
    return transform(node, lambda s: (function(item) for item in s))


def merge(*nodes: ObjectNode) -> ObjectNode:
    """
    Performs a shallow merge of multiple ObjectNodes into a new ObjectNode.

    This is not a recursive merge: on a key clash the value from the later
    ObjectNode replaces the earlier one.
    """
    for node in nodes:
        _require(node, ObjectNode)
    logger.debug(f"Merging {len(nodes)} ObjectNodes")
    return to_object_node().collect(itertools.chain.from_iterable(stream(node) for node in nodes))


def none(node: Container, predicate: Predicate) -> bool:
    """Returns True if no element (or entry) satisfies `predicate`."""
    return not some(node, predicate)


def _key_set(keys: tuple) -> AbstractSet[str]:
    # Accept either pick(obj, "a", "b") or pick(obj, {"a", "b"}).
    if len(keys) == 1 and not isinstance(keys[0], str):
        return frozenset(keys[0])
    return frozenset(keys)


def omit(node: ObjectNode, *keys: Union[str, Iterable[str]]) -> ObjectNode:
    """Returns a new ObjectNode without the given keys."""
    _require(node, ObjectNode)
    omitted = _key_set(keys)
    return reject(node, lambda entry: entry.key in omitted)


def pick(node: ObjectNode, *keys: Union[str, Iterable[str]]) -> ObjectNode:
    """Returns a new ObjectNode holding only the given keys."""
    _require(node, ObjectNode)
    picked = _key_set(keys)
    return filter(node, lambda entry: entry.key in picked)


def pop(node: ArrayNode) -> JsonNode:
    """
    Removes and returns the last value of an ArrayNode.

    Unlike every other operation here, this modifies `node` in place. If the
    ArrayNode is empty, `MISSING` is returned and nothing changes.
    """
    _require(node, ArrayNode)
    if not node:
        return MISSING
    return node.pop()


def reduce(node: Container, initial: T, function: Callable[[T, Any], T]) -> T:
    """
    Reduces a container into a single value, folding left to right.

    :param node: The container to reduce.
    :param initial: The initial accumulator state.
    :param function: Called as ``function(acc, item)`` for every element (or entry).
    :return: The final accumulator.
    """
    return functools.reduce(function, stream(node), initial)


def reject(node: Container, predicate: Predicate) -> Container:
    """
    Filters a container into a new container of the same kind.

    Unlike `filter`, elements (or entries) satisfying `predicate` are removed.
    """
    return filter(node, lambda item: not predicate(item))


def some(node: Container, predicate: Predicate) -> bool:
    """Returns True if at least one element (or entry) satisfies `predicate`."""
    return any(predicate(item) for item in stream(node))


def take(node: ArrayNode, count: int) -> ArrayNode:
    """
    Returns a new ArrayNode holding the first `count` nodes.

    Taking more nodes than available returns all of them.
    """
    _require(node, ArrayNode)
    return transform(node, lambda s: itertools.islice(s, count))


def uniq(node: ArrayNode) -> ArrayNode:
    """
    Returns a new ArrayNode with duplicate values removed.

    The first occurrence of every value is kept, in its original position.
    """
    _require(node, ArrayNode)

    def distinct(s):
        # Leaves are hashable; containers are not and fall back to a list scan.
        seen_leaves = set()
        seen_containers = []
        for item in s:
            if item.is_container():
                if item in seen_containers:
                    continue
                seen_containers.append(item)
            else:
                if item in seen_leaves:
                    continue
                seen_leaves.add(item)
            yield item

    return transform(node, distinct)


def values(node: ObjectNode) -> ArrayNode:
    """
    Returns a new ArrayNode holding every value of an ObjectNode.

    Values appear in the ObjectNode's iteration order.
    """
    _require(node, ObjectNode)
    return to_array_node().collect(entry.value for entry in stream(node))
