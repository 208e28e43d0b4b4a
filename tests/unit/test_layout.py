"""网格列数选择单元测试。"""

import pytest

from src.modules.listings.application.layout import (
    DEFAULT_COLUMNS,
    GridColumns,
    divisors,
    responsive_columns,
    select_columns,
)


class TestSelectColumns:
    """列数选择测试。"""

    def test_zero_returns_default(self):
        assert select_columns(0) == DEFAULT_COLUMNS

    @pytest.mark.parametrize(
        ("count", "largest"),
        [
            (6, 6),
            (5, 5),
            (7, 5),
            (1, 4),
            (12, 4),
            (24, 4),
            (9, 3),
            (10, 5),
            (11, 5),
            (13, 4),
        ],
    )
    def test_largest_breakpoint(self, count, largest):
        assert select_columns(count).largest == largest

    def test_exact_division_preferred(self):
        """20 同时能被 4 和 5 整除，按优先顺序选 4。"""
        assert select_columns(20).largest == 4

    def test_deterministic(self):
        assert select_columns(17) == select_columns(17)

    def test_negative_count_rejected(self):
        with pytest.raises(ValueError):
            select_columns(-1)

    def test_small_breakpoints_never_exceed_largest(self):
        for count in range(0, 50):
            columns = select_columns(count)
            assert max(columns.counts) == columns.largest
            assert list(columns.counts) == sorted(columns.counts)


class TestResponsiveColumns:
    """断点列数测试。"""

    def test_known_mapping(self):
        assert responsive_columns(4) == GridColumns(2, 3, 4, 4, 4)
        assert responsive_columns(6) == GridColumns(2, 3, 4, 5, 6)

    def test_unknown_column_count(self):
        assert responsive_columns(10) == GridColumns(2, 3, 10, 10, 10)

    def test_token(self):
        assert select_columns(6).token == (
            "grid-cols-2 sm:grid-cols-3 md:grid-cols-4 lg:grid-cols-5 xl:grid-cols-6"
        )


def test_divisors():
    assert divisors(12) == [1, 2, 3, 4, 6, 12]
    assert divisors(1) == [1]
