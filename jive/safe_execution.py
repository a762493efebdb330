"""
Jive Safe Execution
===================

Runs mapper-style operations in a scope that turns failures into None.

`execute` only swallows the errors a serializer or deserializer is expected
to raise while reading or writing (I/O failures and malformed JSON input);
programming errors still propagate. `attempt` swallows every `Exception`.
"""

import json
import logging
from typing import Any, Callable, Optional, Tuple, Type, TypeVar

logger = logging.getLogger(__name__)

M = TypeVar("M")
T = TypeVar("T")

# A block executed against a mapper, e.g. ``lambda m: m.loads(text)``.
SafeExecution = Callable[[M], Optional[T]]

MAPPER_ERRORS: Tuple[Type[BaseException], ...] = (OSError, json.JSONDecodeError)


def execute(mapper: M, execution: SafeExecution) -> Optional[T]:
    """
    Executes a scoped function with the provided mapper.

    Any raised `OSError` or `json.JSONDecodeError` is caught and None is
    returned instead. On success the return value of `execution` is
    returned as is (so a None result is indistinguishable from a failure).

    :param mapper: The serializer/deserializer to execute with, e.g. the `json` module.
    :param execution: Called as ``execution(mapper)``.
    :return: The result of `execution`, or None.
    """
    try:
        return execution(mapper)
    except MAPPER_ERRORS as e:
        logger.debug(f"Mapper execution failed, returning None: {e!r}")
        return None


def attempt(execution: Callable[..., T], *args: Any, **kwargs: Any) -> Optional[T]:
    """
    Calls ``execution(*args, **kwargs)``, returning None if it raises any Exception.
    """
    try:
        return execution(*args, **kwargs)
    except Exception as e:
        logger.debug(f"Execution of {getattr(execution, '__name__', 'callable')} failed, returning None: {e!r}")
        return None
