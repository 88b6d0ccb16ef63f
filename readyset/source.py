"""The interface every event source registered with a registry implements."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from .interest import Interest


class Source(ABC):
    """An event source that may be registered with a registry.

    Callers should go through the registry's own ``register``,
    ``reregister`` and ``deregister`` operations rather than calling these
    methods directly. Implementations usually delegate to a lower level
    handle such as a socket wrapped in an ``IoSource``.

    A source should be deregistered before it is discarded, since
    deregistering needs the registry and cannot happen implicitly.
    """

    @abstractmethod
    def register(self, registry: Any, token: int, interests: Interest) -> None:
        """Register this source with ``registry`` under ``token``."""

    @abstractmethod
    def reregister(self, registry: Any, token: int, interests: Interest) -> None:
        """Replace the token and interests this source is registered with."""

    @abstractmethod
    def deregister(self, registry: Any) -> None:
        """Remove this source from ``registry``."""