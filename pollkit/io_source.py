"""Event sources and an adapter that makes any file-descriptor owner registrable."""

from __future__ import annotations

import threading
from abc import ABC, abstractmethod
from typing import Any, Callable, Generic, Hashable, Protocol, TypeVar, runtime_checkable

from pollkit.interest import Interest

T = TypeVar("T")
R = TypeVar("R")

_UNASSOCIATED = 0


@runtime_checkable
class SelectorRegistry(Protocol):
    """What an :class:`IoSource` needs from the registry it is registered with.

    ``selector_id`` identifies the underlying selector; registries sharing one
    selector share the id. Valid ids start at 1.
    """

    selector_id: int

    def register_fd(self, fd: int, token: Hashable, interests: Interest) -> None: ...

    def reregister_fd(self, fd: int, token: Hashable, interests: Interest) -> None: ...

    def deregister_fd(self, fd: int) -> None: ...


class Source(ABC):
    """An event source that may be registered with a registry.

    Implementations usually delegate to a lower level source. Sources must be
    deregistered before they are discarded.
    """

    @abstractmethod
    def register(self, registry: Any, token: Hashable, interests: Interest) -> None:
        """Register this source with ``registry``."""

    @abstractmethod
    def reregister(self, registry: Any, token: Hashable, interests: Interest) -> None:
        """Re-register this source with ``registry``."""

    @abstractmethod
    def deregister(self, registry: Any) -> None:
        """Deregister this source from ``registry``."""


class _SelectorId:
    """Tracks which selector, if any, a source is associated with."""

    def __init__(self) -> None:
        self._id = _UNASSOCIATED
        self._lock = threading.Lock()

    def _swap(self, new_id: int) -> int:
        with self._lock:
            previous, self._id = self._id, new_id
        return previous

    def associate(self, registry: SelectorRegistry) -> None:
        previous = self._swap(registry.selector_id)
        if previous != _UNASSOCIATED:
            raise FileExistsError("I/O source already registered with a `Registry`")

    def check_association(self, registry: SelectorRegistry) -> None:
        with self._lock:
            current = self._id
        if current == registry.selector_id:
            return
        if current == _UNASSOCIATED:
            raise FileNotFoundError("I/O source not registered with `Registry`")
        raise FileExistsError(
            "I/O source already registered with a different `Registry`"
        )

    def remove_association(self, registry: SelectorRegistry) -> None:
        previous = self._swap(_UNASSOCIATED)
        if previous != registry.selector_id:
            raise FileNotFoundError("I/O source not registered with `Registry`")


class IoSource(Source, Generic[T]):
    """Adapter that lets any object with ``fileno()`` be registered.

    All I/O that may block should go through :meth:`do_io`. Attribute access
    not defined here is forwarded to the wrapped object.
    """

    def __init__(self, io: T) -> None:
        self._inner = io
        self._selector_id = _SelectorId()

    def do_io(self, func: Callable[[T], R]) -> R:
        """Run an I/O operation on the wrapped object and return its result."""
        return func(self._inner)

    def into_inner(self) -> T:
        """Return the wrapped object; deregister first to stop its events."""
        return self._inner

    def _fd(self) -> int:
        return self._inner.fileno()  # type: ignore[attr-defined]

    def register(self, registry: SelectorRegistry, token: Hashable, interests: Interest) -> None:
        self._selector_id.associate(registry)
        registry.register_fd(self._fd(), token, interests)

    def reregister(self, registry: SelectorRegistry, token: Hashable, interests: Interest) -> None:
        self._selector_id.check_association(registry)
        registry.reregister_fd(self._fd(), token, interests)

    def deregister(self, registry: SelectorRegistry) -> None:
        self._selector_id.remove_association(registry)
        registry.deregister_fd(self._fd())

    def __getattr__(self, name: str) -> Any:
        if name in ("_inner", "_selector_id"):
            raise AttributeError(name)
        return getattr(self._inner, name)

    def __repr__(self) -> str:
        return repr(self._inner)