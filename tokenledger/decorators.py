"""Provides decorators for caching."""

from functools import wraps
from time import monotonic


def timed_cache(seconds: int):
    """
    Decorator to cache a function's result for a limited time.

    A result is reused for calls with identical arguments made within
    `seconds` of the call that produced it. The decorated function gains a
    `cache_clear()` method to drop all cached results.

    Args:
        seconds (int): Duration in seconds for a cached result to remain valid.
    """
    def decorator(func):
        cache = {}

        @wraps(func)
        def wrapper(*args, **kwargs):
            key = (args, frozenset(kwargs.items()))
            now = monotonic()
            hit = cache.get(key)
            if hit is not None and now - hit[1] < seconds:
                return hit[0]
            result = func(*args, **kwargs)
            cache[key] = (result, now)
            return result

        wrapper.cache_clear = cache.clear
        return wrapper
    return decorator
