"""Unit tests for Pagination."""

from lobby.domain.shared import Pagination


class TestPagination:
    def test_skip_is_page_times_size(self):
        assert Pagination(page=2, offset=10, total=35).skip == 20

    def test_total_pages_rounds_up(self):
        assert Pagination(page=0, offset=10, total=35).total_pages == 4
        assert Pagination(page=0, offset=10, total=30).total_pages == 3
        assert Pagination(page=0, offset=10, total=0).total_pages == 0

    def test_has_next(self):
        assert Pagination(page=0, offset=10, total=11).has_next
        assert not Pagination(page=1, offset=10, total=11).has_next

    def test_len_counts_page_items(self):
        page = Pagination(page=0, offset=10, total=3, data=["a", "b", "c"])

        assert len(page) == 3
