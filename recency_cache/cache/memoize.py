"""Decorator that memoizes a function through an LRU cache."""

from __future__ import annotations

import functools
from dataclasses import dataclass
from typing import Any, Callable, Optional, Tuple, TypeVar

from .factory import new_cache

F = TypeVar("F", bound=Callable[..., Any])


@dataclass(frozen=True)
class _Call:
    """Hashable record of one call's arguments."""

    args: Tuple[Any, ...]
    kwargs: Tuple[Tuple[str, Any], ...]

    def apply(self, func: Callable[..., Any]) -> Any:
        return func(*self.args, **dict(self.kwargs))


def memoize(capacity: int = 128, *, synchronized: bool = True) -> Callable[[F], F]:
    """
    Memoize a function of hashable arguments.

    Results are kept in an LRU cache of `capacity` entries keyed by the call's
    positional and keyword arguments. A ``None`` result is not cached, so the
    function runs again for those arguments next time. Exceptions propagate
    and are not cached either.

    The wrapper exposes the backing cache as ``.cache`` and drops all entries
    with ``.cache_clear()``.

    Examples
    --------
    >>> @memoize(capacity=2)
    ... def square(n):
    ...     return n * n
    >>> square(4)
    16
    >>> square.cache.size()
    1
    """

    def decorator(func: F) -> F:
        cache = new_cache(
            capacity, lambda call: call.apply(func), synchronized=synchronized
        )

        @functools.wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> Optional[Any]:
            return cache.get(_Call(args, tuple(sorted(kwargs.items()))))

        wrapper.cache = cache  # type: ignore[attr-defined]
        wrapper.cache_clear = cache.clear  # type: ignore[attr-defined]
        return wrapper  # type: ignore[return-value]

    return decorator
