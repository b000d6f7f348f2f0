from __future__ import annotations

from typing import Callable, Any, Optional

from flask_caching import Cache


class CacheFacade:
    """Optional Flask-Caching memoization for repository loaders.

    Without a cache, `memoize` hands the function back untouched and `clear`
    does nothing.
    """

    def __init__(self, cache: Optional[Cache], timeout_seconds: int) -> None:
        self.cache = cache
        self.timeout_seconds = timeout_seconds

    @property
    def enabled(self) -> bool:
        return self.cache is not None

    def memoize(self, fn: Callable[..., Any]) -> Callable[..., Any]:
        if self.cache is None:
            return fn
        return self.cache.memoize(timeout=self.timeout_seconds)(fn)

    def clear(self) -> None:
        if self.cache is not None:
            self.cache.clear()
