"""
Jive Collectors
===============

This module contains the collectors which gather a sequence of nodes (or of
object entries) back into a new JSON container.

A collector is described by four steps, in the same shape as a fold:

- `supplier()` creates an empty container.
- `accumulate(acc, item)` adds one item to a container.
- `combine(left, right)` merges two partially collected containers.
- `finish(acc)` turns a container into the final result.

Collectors only accept nodes. Converting arbitrary values into nodes is the
caller's job, so pipelines stay explicit about where coercion happens.

Combining is order sensitive. `ObjectNodeCollector.combine` lets the right
batch win on key collisions, which matches sequential last-write-wins only
if batches are combined in their original sequence order.
`collect_batches` therefore combines strictly left to right, and callers who
collect batches in parallel must hand them back in that order.
"""

import functools
import logging
from typing import Any, Iterable, TypeVar

from .exceptions import NodeTypeError
from .nodes import ArrayNode, JsonNode, ObjectNode

logger = logging.getLogger(__name__)

T = TypeVar("T")


def rightmost(left: T, right: T) -> T:
    """
    Combiner which discards `left` and keeps `right`.

    Not commutative and not associative over real partial results; it is only
    valid when partial results are produced by a single sequential fold.
    """
    return right


class _NodeCollector:
    """Shared driving logic for the container collectors."""

    def supplier(self) -> Any:
        raise NotImplementedError

    def accumulate(self, acc: Any, item: Any) -> Any:
        raise NotImplementedError

    def combine(self, left: Any, right: Any) -> Any:
        raise NotImplementedError

    def finish(self, acc: Any) -> Any:
        return acc

    def collect(self, items: Iterable[Any]) -> Any:
        """Collects every item of `items`, in order, into a new container."""
        acc = self.supplier()
        for item in items:
            self.accumulate(acc, item)
        return self.finish(acc)

    def collect_batches(self, batches: Iterable[Iterable[Any]]) -> Any:
        """
        Collects each batch separately and combines the partial containers.

        Batches are combined left to right in the order they are given.
        """
        partials = [self.collect(batch) for batch in batches]
        logger.debug(f"{type(self).__name__}: combining {len(partials)} partial results")
        return self.finish(functools.reduce(self.combine, partials, self.supplier()))


class ArrayNodeCollector(_NodeCollector):
    """Collects a sequence of nodes into a new ArrayNode."""

    def supplier(self) -> ArrayNode:
        return ArrayNode()

    def accumulate(self, acc: ArrayNode, item: Any) -> ArrayNode:
        if not isinstance(item, JsonNode):
            raise NodeTypeError(
                f"Cannot collect {type(item).__name__} into an ArrayNode; wrap it with new_json_node first",
                value=item,
            )
        acc.append(item)
        return acc

    def combine(self, left: ArrayNode, right: ArrayNode) -> ArrayNode:
        """Appends every node of `right` to `left`."""
        left.extend(right)
        return left


class ObjectNodeCollector(_NodeCollector):
    """Collects a sequence of (key, node) entries into a new ObjectNode."""

    def supplier(self) -> ObjectNode:
        return ObjectNode()

    def accumulate(self, acc: ObjectNode, item: Any) -> ObjectNode:
        try:
            key, value = item
        except (TypeError, ValueError):
            raise NodeTypeError(
                f"Cannot collect {type(item).__name__} into an ObjectNode; expected a (key, node) entry",
                value=item,
            )
        return acc.set(key, value)

    def combine(self, left: ObjectNode, right: ObjectNode) -> ObjectNode:
        """Copies every entry of `right` into `left`, overwriting on collision."""
        for key, value in right.items():
            left.set(key, value)
        return left


def to_array_node() -> ArrayNodeCollector:
    """Returns a new ArrayNode collector."""
    return ArrayNodeCollector()


def to_object_node() -> ObjectNodeCollector:
    """Returns a new ObjectNode collector."""
    return ObjectNodeCollector()


def collect(items: Iterable[Any], collector: _NodeCollector) -> Any:
    return collector.collect(items)
