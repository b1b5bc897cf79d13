from functools import wraps
from typing import Any, Callable, Optional

from .log import get_logger

logger = get_logger(__name__)


class BoundMethod:
    """A method with its receiver fixed for good.

    Unlike ``types.MethodType``, ``__get__`` returns the object itself, so
    grafting it onto another class or calling ``__get__`` with another
    instance never swaps the receiver.
    """

    def __init__(self, func: Callable[..., Any], obj: Any):
        wraps(func)(self)
        self.__func__ = func
        self.__self__ = obj

    def __get__(self, obj: Any, objtype: Optional[type] = None) -> "BoundMethod":
        return self

    def __call__(self, *args, **kwargs):
        return self.__func__(self.__self__, *args, **kwargs)

    def __repr__(self) -> str:
        name = getattr(self.__func__, "__qualname__", repr(self.__func__))
        return f"<bound method {name} of {self.__self__!r}>"


class autobind:
    """Bind a method to its instance on first read and memoize the result.

    The first ``obj.method`` read builds a bound method and stores it in
    ``obj.__dict__``. ``autobind`` only defines ``__get__``, so from then on
    the instance dictionary shadows the descriptor and reads never come back
    here. The stored bound method keeps ``obj`` as its receiver wherever it
    is passed or grafted:

        class View:
            @autobind
            def refresh(self):
                ...

        button.on_click(view.refresh)   # always refreshes `view`

    Reading the attribute on the class returns the plain function. Assigning
    to the attribute on an instance replaces the bound method for that
    instance only; the assigned value is stored as is.
    """

    def __init__(self, func: Optional[Callable[..., Any]]):
        if callable(func):
            wraps(func)(self)
        self.func = func
        self.name: Optional[str] = getattr(func, "__name__", None)
        self.owner: Optional[type] = None
        # true only while __get__ is storing a bound value
        self._defining = False

    def __set_name__(self, owner: type, name: str) -> None:
        self.owner = owner
        self.name = name

    def __get__(self, obj: Any, objtype: Optional[type] = None) -> Any:
        if self._defining or obj is None:
            return self.func

        try:
            own = object.__getattribute__(obj, "__dict__")
        except AttributeError:
            logger.debug("%s has no __dict__; %r is bound per read", type(obj).__name__, self.name)
            return self._bind(obj)
        if self.name in own:
            return own[self.name]

        bound = self._bind(obj)
        self._defining = True
        try:
            own[self.name] = bound
        finally:
            self._defining = False
        logger.debug("bound %s.%s to %r", type(obj).__name__, self.name, obj)
        return bound

    def _bind(self, obj: Any) -> Any:
        if self.func is None or not callable(self.func):
            return self.func
        return BoundMethod(self.func, obj)

    def __repr__(self) -> str:
        owner = self.owner.__name__ if self.owner is not None else "?"
        return f"<autobind {owner}.{self.name}>"
