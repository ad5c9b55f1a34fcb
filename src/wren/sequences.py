"""Null-safe sequence helpers.

Each helper accepts ``None`` in place of an iterable and treats it as
empty, so callers can pass optional collections straight through::

    from wren.sequences import null_safe_count, take_page

    null_safe_count(None)                 # 0
    list(take_page(range(10), 2, 3))      # [3, 4, 5]

``take_page`` is the exception: paging an absent source is a caller
error and raises ``InvalidArgumentError``.
"""

from collections.abc import Callable, Iterable, Iterator
from itertools import islice

from wren.errors import InvalidArgumentError


def is_null_or_empty[T](source: Iterable[T] | None) -> bool:
    """True if *source* is ``None`` or yields no elements.

    Sized sources are checked with ``len()``; other iterables are probed
    for a first element, which consumes it from one-shot iterators.
    """
    if source is None:
        return True
    if hasattr(source, "__len__"):
        return len(source) == 0  # type: ignore[arg-type]
    return next(iter(source), _MISSING) is _MISSING


def take_page[T](source: Iterable[T] | None, page: int, page_size: int) -> Iterator[T]:
    """Return the elements of the 1-based *page* of size *page_size*.

    Skips ``(page - 1) * page_size`` elements and yields up to
    *page_size* more. Requesting a page past the end yields nothing.

    Raises ``InvalidArgumentError`` if *source* is ``None``.
    """
    if source is None:
        msg = "take_page() requires a source sequence, got None"
        raise InvalidArgumentError(msg)

    skip = max(0, (page - 1) * page_size)
    return islice(source, skip, skip + max(0, page_size))


def null_safe_any[T](
    source: Iterable[T] | None,
    predicate: Callable[[T], bool] | None = None,
) -> bool:
    """True if any element satisfies *predicate* (or exists, without one).

    Returns False when *source* is ``None``.
    """
    if source is None:
        return False
    if predicate is None:
        return not is_null_or_empty(source)
    return any(predicate(item) for item in source)


def null_safe_where[T](
    source: Iterable[T] | None,
    predicate: Callable[[T], bool],
) -> Iterator[T]:
    """Filter *source* by *predicate*; an absent source yields nothing."""
    if source is None:
        return iter(())
    return (item for item in source if predicate(item))


def null_safe_select[T, R](
    source: Iterable[T] | None,
    selector: Callable[[T], R],
) -> Iterator[R]:
    """Project each element through *selector*; an absent source yields nothing."""
    if source is None:
        return iter(())
    return (selector(item) for item in source)


def null_safe_count[T](source: Iterable[T] | None) -> int:
    """Number of elements in *source*, or 0 when it is ``None``."""
    if source is None:
        return 0
    if hasattr(source, "__len__"):
        return len(source)  # type: ignore[arg-type]
    return sum(1 for _ in source)


def batched[T](source: Iterable[T] | None, batch_size: int) -> Iterator[list[T]]:
    """Yield consecutive lists of *batch_size* elements.

    The final batch may be shorter. Each element is consumed exactly
    once, so one-shot iterators are safe to pass.
    """
    if batch_size < 1:
        msg = f"batch_size must be at least 1, got {batch_size}"
        raise InvalidArgumentError(msg)
    if source is None:
        return

    iterator = iter(source)
    while batch := list(islice(iterator, batch_size)):
        yield batch


def batch_for_each[T](
    source: Iterable[T] | None,
    batch_size: int,
    action: Callable[[list[T]], object],
) -> None:
    """Call *action* once per consecutive batch of *source*.

    A source of N elements produces ``ceil(N / batch_size)`` calls whose
    batches concatenate back to the source in order. An absent or empty
    source produces no calls.
    """
    for batch in batched(source, batch_size):
        action(batch)


_MISSING = object()
