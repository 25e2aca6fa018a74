"""Allocation guard turning memory exhaustion into AllocationError."""

from contextlib import contextmanager
from functools import wraps
from typing import Any, Callable, Iterator, TypeVar

from ..exceptions import AllocationError
from .logging import get_logger

logger = get_logger(__name__)

T = TypeVar('T')


@contextmanager
def allocation_scope(operation: str) -> Iterator[None]:
    """
    Context manager that aborts the enclosed block on memory exhaustion.

    Any ``MemoryError`` raised inside the block, including ones re-raised
    from worker threads, is reported as ``AllocationError``. Buffers
    allocated before the failure are left to the garbage collector.

    Args:
        operation: Name used in the log message and the error text
    """
    try:
        yield
    except MemoryError as e:
        logger.error(f"{operation} aborted: could not allocate memory")
        raise AllocationError(f"Could not allocate memory during {operation}") from e


def allocation_guard(func: Callable[..., T]) -> Callable[..., T]:
    """Decorator running a public operation inside an allocation scope."""
    @wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> T:
        with allocation_scope(func.__name__):
            return func(*args, **kwargs)
    return wrapper
