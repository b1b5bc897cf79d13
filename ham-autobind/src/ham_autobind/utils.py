from typing import Any

from .descriptors import autobind
from .log import get_logger

logger = get_logger(__name__)


def install(target: type, key: str) -> autobind:
    """Replace the function stored under ``key`` on ``target`` with an autobind descriptor.

    Use for functions attached to a class after its body ran; inside a class
    body the ``@autobind`` decorator does the same.
    """
    try:
        value = target.__dict__[key]
    except KeyError:
        raise AttributeError(f"{target.__name__} has no attribute {key!r}") from None

    if isinstance(value, autobind):
        return value
    if isinstance(value, (staticmethod, classmethod)):
        raise TypeError(f"{target.__name__}.{key} is a {type(value).__name__}; autobind expects a plain function")
    if hasattr(type(value), "__set__") or hasattr(type(value), "__delete__"):
        raise TypeError(f"{target.__name__}.{key} is accessor-based ({type(value).__name__}); autobind expects a plain function")

    descriptor = autobind(value)
    descriptor.__set_name__(target, key)
    setattr(target, key, descriptor)
    logger.debug("installed autobind on %s.%s", target.__name__, key)
    return descriptor


def is_autobound(target: Any, key: str) -> bool:
    cls = target if isinstance(target, type) else type(target)
    for klass in cls.__mro__:
        if key in klass.__dict__:
            return isinstance(klass.__dict__[key], autobind)
    return False
