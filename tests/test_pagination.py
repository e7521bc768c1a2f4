import pytest

from dddscaffold.pagination import Pagination, new_pagination, paginate


def test_defaults_when_not_positive():
    p = new_pagination(0, 0)
    assert p == Pagination(page=1, page_size=20)


def test_page_size_capped():
    assert new_pagination(2, 500).page_size == 100


def test_values_in_range_kept():
    assert new_pagination(3, 15) == Pagination(page=3, page_size=15)


def test_first_page_offset_zero():
    p = new_pagination(1, 30)
    assert p.offset() == 0
    assert p.limit() == 30


@pytest.mark.parametrize("page", [1, 2, 5, 9])
def test_consecutive_pages_are_contiguous(page):
    current = Pagination(page=page, page_size=7)
    following = Pagination(page=page + 1, page_size=7)
    assert following.offset() == current.offset() + current.limit()


@pytest.mark.parametrize("total", [0, 1, 19, 20, 21, 99, 100, 101])
def test_total_pages_cover_exactly(total):
    result = paginate([], total, 1, 20)
    assert result.total_pages * 20 >= total
    assert max(result.total_pages - 1, 0) * 20 < total or total == 0


def test_empty_result_has_no_pages():
    assert paginate([], 0, 1, 20).total_pages == 0


def test_items_and_fields_kept():
    result = paginate(["a", "b"], 2, 1, 10)
    assert result.items == ["a", "b"]
    assert (result.total_count, result.page, result.page_size) == (2, 1, 10)


def test_zero_page_size_rejected():
    with pytest.raises(ValueError):
        paginate([], 5, 1, 0)