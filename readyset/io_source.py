"""Adapter that makes any file-descriptor-backed object an event source."""

from __future__ import annotations

import threading
from typing import Any, Callable, Generic, Protocol, TypeVar

from .interest import Interest
from .source import Source

T = TypeVar("T")
R = TypeVar("R")


class _Selector(Protocol):
    """What ``IoSource`` needs from ``registry.selector``."""

    id: int

    def register(self, fd: int, token: int, interests: Interest) -> None: ...

    def reregister(self, fd: int, token: int, interests: Interest) -> None: ...

    def deregister(self, fd: int) -> None: ...


def _selector_of(registry: Any) -> _Selector:
    return registry.selector


def _raw_fd(io: Any) -> int:
    fileno = getattr(io, "fileno", None)
    if callable(fileno):
        return fileno()
    if isinstance(io, int) and not isinstance(io, bool):
        return io
    raise TypeError(f"{type(io).__name__} object has no file descriptor")


class _SelectorId:
    """Tracks which selector, if any, a source is registered with."""

    UNASSOCIATED = 0

    def __init__(self) -> None:
        self._id = self.UNASSOCIATED
        self._lock = threading.Lock()

    def _swap(self, new: int) -> int:
        with self._lock:
            previous, self._id = self._id, new
            return previous

    def _load(self) -> int:
        with self._lock:
            return self._id

    def associate(self, registry: Any) -> None:
        registry_id = _selector_of(registry).id
        if self._swap(registry_id) != self.UNASSOCIATED:
            raise FileExistsError("I/O source already registered with a `Registry`")

    def check_association(self, registry: Any) -> None:
        registry_id = _selector_of(registry).id
        current = self._load()
        if current == registry_id:
            return
        if current == self.UNASSOCIATED:
            raise FileNotFoundError("I/O source not registered with `Registry`")
        raise FileExistsError(
            "I/O source already registered with a different `Registry`"
        )

    def remove_association(self, registry: Any) -> None:
        registry_id = _selector_of(registry).id
        if self._swap(self.UNASSOCIATED) != registry_id:
            raise FileNotFoundError("I/O source not registered with `Registry`")


class IoSource(Source, Generic[T]):
    """Wraps an object with a file descriptor so it can be registered.

    The registry passed to the registration methods must expose a
    ``selector`` attribute with an integer ``id`` and ``register``,
    ``reregister`` and ``deregister`` methods taking the raw descriptor.
    Attribute access falls through to the wrapped object; I/O that may
    block should go through :meth:`do_io`.
    """

    def __init__(self, io: T) -> None:
        self._inner = io
        self._selector_id = _SelectorId()

    def do_io(self, f: Callable[[T], R]) -> R:
        """Run an I/O operation ``f`` on the wrapped object and return its result."""
        return f(self._inner)

    def into_inner(self) -> T:
        """Return the wrapped object, dropping the registration state."""
        return self._inner

    def register(self, registry: Any, token: int, interests: Interest) -> None:
        self._selector_id.associate(registry)
        _selector_of(registry).register(_raw_fd(self._inner), token, interests)

    def reregister(self, registry: Any, token: int, interests: Interest) -> None:
        self._selector_id.check_association(registry)
        _selector_of(registry).reregister(_raw_fd(self._inner), token, interests)

    def deregister(self, registry: Any) -> None:
        self._selector_id.remove_association(registry)
        _selector_of(registry).deregister(_raw_fd(self._inner))

    def __getattr__(self, name: str) -> Any:
        try:
            inner = self.__dict__["_inner"]
        except KeyError:
            raise AttributeError(name) from None
        return getattr(inner, name)

    def __repr__(self) -> str:
        return repr(self._inner)