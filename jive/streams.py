"""
Jive Streams
============

Converts JSON containers into lazy iterators and back again.

An ArrayNode streams its elements in order; an ObjectNode streams `Entry`
pairs in its native (insertion) order. Each call to `stream` returns a new
iterator, so a container can be streamed any number of times.
"""

import logging
from typing import Callable, Iterable, Iterator, Union

from .collectors import to_array_node, to_object_node
from .exceptions import NodeTypeError
from .nodes import ArrayNode, Entry, JsonNode, ObjectNode

logger = logging.getLogger(__name__)

Container = Union[ArrayNode, ObjectNode]
Item = Union[JsonNode, Entry]
Transformer = Callable[[Iterator[Item]], Iterable[Item]]


def stream(node: Container) -> Iterator[Item]:
    """
    Creates a new lazy iterator over a container.

    :param node: An ArrayNode or ObjectNode.
    :return: An iterator of nodes (arrays) or `Entry` pairs (objects).
    :raises NodeTypeError: If `node` is not a container.
    """
    if isinstance(node, ArrayNode):
        return iter(node)
    if isinstance(node, ObjectNode):
        return node.fields()
    raise NodeTypeError(f"Expected an ArrayNode or ObjectNode, got {type(node).__name__}", value=node)


def transform(node: Container, transformer: Transformer) -> Container:
    """
    Transforms a container into a new container of the same kind.

    `transformer` receives the stream of `node` and returns the items to
    collect; the input container is never modified.
    """
    collector = to_array_node() if isinstance(node, ArrayNode) else to_object_node()
    return collector.collect(transformer(stream(node)))
