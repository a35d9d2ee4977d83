"""
Optional memoization for pure chromatheme functions.

Callers opt in by wrapping a function; cached and uncached calls return
the same values. Unhashable arguments (lists, dicts) are frozen into
tuples first, so ``generate_scale("#1890ff", shades=[...])`` caches too.
"""
from __future__ import annotations
from functools import lru_cache, wraps
from typing import Any, Callable, TypeVar

F = TypeVar("F", bound=Callable[..., Any])


def _freeze(value: Any) -> Any:
    if isinstance(value, dict):
        return ("__dict__", tuple((k, _freeze(v)) for k, v in value.items()))
    if isinstance(value, list):
        return ("__list__", tuple(_freeze(v) for v in value))
    if isinstance(value, set):
        return ("__set__", frozenset(_freeze(v) for v in value))
    return value


def _thaw(value: Any) -> Any:
    if isinstance(value, tuple) and len(value) == 2 and value[0] in ("__dict__", "__list__", "__set__"):
        tag, payload = value
        if tag == "__dict__":
            return {k: _thaw(v) for k, v in payload}
        if tag == "__list__":
            return [_thaw(v) for v in payload]
        return {_thaw(v) for v in payload}
    return value


def memoize(func: F | None = None, *, maxsize: int | None = 256):
    """
    Decorator: LRU-cache ``func`` keyed on its (frozen) arguments.

    Results are returned as-is, so only wrap functions whose results are
    immutable (Colors, strings, tuples) or that callers do not mutate.
    The wrapped function exposes ``cache_info`` and ``cache_clear``.
    """
    def decorate(fn: F) -> F:
        @lru_cache(maxsize=maxsize)
        def cached(frozen_args, frozen_kwargs):
            args = tuple(_thaw(a) for a in frozen_args)
            kwargs = {k: _thaw(v) for k, v in frozen_kwargs}
            return fn(*args, **kwargs)

        @wraps(fn)
        def wrapper(*args, **kwargs):
            key_args = tuple(_freeze(a) for a in args)
            key_kwargs = tuple(sorted((k, _freeze(v)) for k, v in kwargs.items()))
            return cached(key_args, key_kwargs)

        wrapper.cache_info = cached.cache_info
        wrapper.cache_clear = cached.cache_clear
        return wrapper

    if func is not None:
        return decorate(func)
    return decorate
