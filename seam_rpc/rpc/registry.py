"""
Method registry

Fixed, read-only mapping from method name to handler. The registry is
built once at startup and shared by every dispatch cycle without locking.
"""

import logging
from types import MappingProxyType
from typing import Any, Awaitable, Callable, Iterator, Mapping, Optional, Union

logger = logging.getLogger(__name__)

Handler = Callable[[Any], Union[Any, Awaitable[Any]]]


class MethodRegistry:
    """Immutable name -> handler table with exact, case-sensitive lookup"""

    def __init__(self, handlers: Mapping[str, Handler]):
        """Initialize the registry

        Args:
            handlers: Method names mapped to callables taking the request params

        Raises:
            ValueError: A name is empty or a handler is not callable
        """
        table = {}
        for name, handler in handlers.items():
            name = getattr(name, "value", name)
            if not isinstance(name, str) or not name:
                raise ValueError(f"Invalid method name: {name!r}")
            if not callable(handler):
                raise ValueError(f"Handler for {name} is not callable")
            table[name] = handler
        self._handlers = MappingProxyType(table)
        logger.debug(f"Method registry built with methods: {sorted(table)}")

    def resolve(self, name: str) -> Optional[Handler]:
        """Look up a handler; None means the method is not registered"""
        return self._handlers.get(name)

    def names(self):
        return list(self._handlers)

    def __contains__(self, name) -> bool:
        return name in self._handlers

    def __iter__(self) -> Iterator[str]:
        return iter(self._handlers)

    def __len__(self) -> int:
        return len(self._handlers)
