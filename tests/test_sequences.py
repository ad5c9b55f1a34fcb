"""Tests for wren.sequences — null-safe helpers, paging, and batching."""

import math

import pytest

from wren.errors import InvalidArgumentError
from wren.sequences import (
    batch_for_each,
    batched,
    is_null_or_empty,
    null_safe_any,
    null_safe_count,
    null_safe_select,
    null_safe_where,
    take_page,
)


class TestNullSource:
    """Every helper except take_page treats None as an empty sequence."""

    def test_is_null_or_empty(self) -> None:
        assert is_null_or_empty(None) is True

    def test_count(self) -> None:
        assert null_safe_count(None) == 0

    def test_any(self) -> None:
        assert null_safe_any(None) is False
        assert null_safe_any(None, lambda x: True) is False

    def test_where(self) -> None:
        assert list(null_safe_where(None, lambda x: True)) == []

    def test_select(self) -> None:
        assert list(null_safe_select(None, str)) == []

    def test_batch_for_each_never_calls_action(self) -> None:
        calls: list[list[int]] = []
        batch_for_each(None, 3, calls.append)
        assert calls == []


class TestNonNullSource:
    def test_is_null_or_empty_on_empty_list(self) -> None:
        assert is_null_or_empty([]) is True

    def test_is_null_or_empty_on_items(self) -> None:
        assert is_null_or_empty([0]) is False

    def test_is_null_or_empty_on_generator(self) -> None:
        assert is_null_or_empty(x for x in ()) is True
        assert is_null_or_empty(x for x in (1,)) is False

    def test_count_list(self) -> None:
        assert null_safe_count([1, 2, 3]) == 3

    def test_count_generator(self) -> None:
        assert null_safe_count(x for x in range(5)) == 5

    def test_any_with_predicate(self) -> None:
        assert null_safe_any([1, 2, 3], lambda x: x > 2) is True
        assert null_safe_any([1, 2, 3], lambda x: x > 3) is False

    def test_any_without_predicate(self) -> None:
        assert null_safe_any([None]) is True
        assert null_safe_any([]) is False

    def test_where(self) -> None:
        assert list(null_safe_where(range(6), lambda x: x % 2 == 0)) == [0, 2, 4]

    def test_select(self) -> None:
        assert list(null_safe_select([1, 2], lambda x: x * 10)) == [10, 20]


class TestTakePage:
    def test_first_page(self) -> None:
        assert list(take_page(range(10), 1, 3)) == [0, 1, 2]

    def test_skips_previous_pages(self) -> None:
        assert list(take_page(range(10), 3, 3)) == [6, 7, 8]

    def test_last_page_is_short(self) -> None:
        assert list(take_page(range(10), 4, 3)) == [9]

    def test_beyond_end_is_empty(self) -> None:
        assert list(take_page(range(10), 5, 3)) == []

    def test_works_on_iterators(self) -> None:
        assert list(take_page(iter("abcdef"), 2, 2)) == ["c", "d"]

    def test_page_zero_behaves_like_natural_skip(self) -> None:
        assert list(take_page(range(5), 0, 2)) == [0, 1]

    def test_zero_page_size_is_empty(self) -> None:
        assert list(take_page(range(5), 1, 0)) == []

    def test_none_source_raises(self) -> None:
        with pytest.raises(InvalidArgumentError, match="source"):
            take_page(None, 1, 10)

    def test_none_source_error_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            take_page(None, 1, 10)

    @pytest.mark.parametrize(("page", "size"), [(1, 1), (2, 4), (3, 5), (7, 2)])
    def test_skips_exactly(self, page: int, size: int) -> None:
        items = list(range(20))
        assert list(take_page(items, page, size)) == items[(page - 1) * size : page * size]


class TestBatching:
    @pytest.mark.parametrize(("length", "size"), [(1, 1), (5, 2), (6, 3), (7, 10), (10, 1)])
    def test_call_count_and_order(self, length: int, size: int) -> None:
        source = list(range(length))
        batches: list[list[int]] = []

        batch_for_each(source, size, batches.append)

        assert len(batches) == math.ceil(length / size)
        assert [item for batch in batches for item in batch] == source

    def test_final_batch_is_short(self) -> None:
        batches: list[list[int]] = []
        batch_for_each([1, 2, 3, 4, 5], 2, batches.append)
        assert batches == [[1, 2], [3, 4], [5]]

    def test_empty_source(self) -> None:
        batches: list[list[int]] = []
        batch_for_each([], 2, batches.append)
        assert batches == []

    def test_one_shot_iterator_is_consumed_once(self) -> None:
        source = iter(range(5))
        assert list(batched(source, 2)) == [[0, 1], [2, 3], [4]]

    def test_invalid_batch_size(self) -> None:
        with pytest.raises(InvalidArgumentError, match="batch_size"):
            batch_for_each([1, 2], 0, lambda batch: None)
