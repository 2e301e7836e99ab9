"""Observer port - Callbacks notified on cache invalidation."""

from __future__ import annotations

from typing import Protocol


class InvalidationObserver(Protocol):
    """Zero-argument callback invoked each time a cache is invalidated.

    Plain functions, lambdas, bound methods (e.g. another cache's
    ``invalidate`` for cascading) all satisfy this protocol.
    """

    def __call__(self) -> None:
        ...
