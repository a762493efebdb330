"""
Jive Pointer
============

Field access into a JSON tree using JSON Pointer expressions (RFC 6901).

A pointer is a sequence of ``/``-prefixed reference tokens, where ``~1``
stands for ``/`` and ``~0`` for ``~`` inside a token. The empty pointer
addresses the whole document.

    >>> compile_pointer("/users/0/first~1last")
    ('users', '0', 'first/last')
"""

import functools
import logging
import re
from typing import Tuple

from lark import Lark, Transformer
from lark.exceptions import UnexpectedInput

from .exceptions import PointerSyntaxError
from .nodes import MISSING, ArrayNode, JsonNode, ObjectNode

logger = logging.getLogger(__name__)

pointer_grammar = r"""
    pointer: ("/" reference_token)*
    reference_token: (UNESCAPED | ESCAPE)*

    UNESCAPED: /[^\/~]+/
    ESCAPE: /~[01]/
"""

_ESCAPES = {"~0": "~", "~1": "/"}

# Array steps only accept canonical indices: no sign, no leading zeros.
_ARRAY_INDEX = re.compile(r"0|[1-9][0-9]*")


class PointerTransformer(Transformer):
    """Transformer to convert Lark parse trees to tuples of reference tokens."""

    def pointer(self, tokens):
        return tuple(tokens)

    def reference_token(self, parts):
        return "".join(_ESCAPES.get(str(part), str(part)) for part in parts)


pointer_parser = Lark(pointer_grammar, parser="lalr", start="pointer", transformer=PointerTransformer())


def compile_pointer(expression: str) -> Tuple[str, ...]:
    """
    Parses a JSON Pointer into its unescaped reference tokens.

    :param expression: The pointer string, e.g. ``"/a/0"``.
    :return: A tuple of reference tokens; empty for the whole-document pointer.
    :raises PointerSyntaxError: If the expression is not a valid pointer.
    """
    # Checked before the cache, which would fail hashing a list first.
    if not isinstance(expression, str):
        raise PointerSyntaxError(f"JSON Pointer must be a string, got {type(expression).__name__}")
    return _parse_pointer(expression)


@functools.lru_cache(maxsize=256)
def _parse_pointer(expression: str) -> Tuple[str, ...]:
    try:
        tokens = pointer_parser.parse(expression)
    except UnexpectedInput as e:
        position = getattr(e, "pos_in_stream", None)
        raise PointerSyntaxError(
            f"Invalid JSON Pointer: {expression!r}",
            pointer=expression,
            position=position,
        ) from e
    logger.debug(f"Compiled JSON Pointer {expression!r} to {tokens}")
    return tokens


def at(node: JsonNode, pointer: str) -> JsonNode:
    """
    Resolves `pointer` against `node`.

    Object steps look up the token as a key; array steps require a canonical
    non-negative index. Any step that cannot be resolved yields `MISSING`.
    """
    current = node
    for token in compile_pointer(pointer):
        if isinstance(current, ObjectNode):
            current = current.path(token)
        elif isinstance(current, ArrayNode) and _ARRAY_INDEX.fullmatch(token):
            current = current.path(int(token))
        else:
            return MISSING
        if current is MISSING:
            break
    return current
