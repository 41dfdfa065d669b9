"""Translation of Redis connectivity failures into domain errors."""

from collections.abc import Iterator
from contextlib import contextmanager

import redis

from review_summary.exceptions import StoreUnavailableError


@contextmanager
def store_errors(operation: str) -> Iterator[None]:
    """Re-raise Redis connection and timeout errors as StoreUnavailableError.

    Args:
        operation: Short description used in the error message
    """
    try:
        yield
    except (redis.exceptions.ConnectionError, redis.exceptions.TimeoutError) as e:
        raise StoreUnavailableError(f"Store unavailable during {operation}: {e}") from e
