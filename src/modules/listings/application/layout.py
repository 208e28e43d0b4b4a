"""Grid layout selector.

根据结果数量选择网格列数，让最后一行尽量填满。纯函数，无副作用。
"""

from dataclasses import dataclass

BREAKPOINTS: tuple[str, ...] = ("", "sm:", "md:", "lg:", "xl:")

# 按优先顺序尝试的列数
PREFERRED_COLUMNS: tuple[int, ...] = (4, 5, 6, 3, 2)

# 允许最后一行余数不超过 2 个
MAX_REMAINDER = 2


@dataclass(frozen=True)
class GridColumns:
    """五个断点（从小到大）的列数。"""

    base: int
    sm: int
    md: int
    lg: int
    xl: int

    @property
    def counts(self) -> tuple[int, int, int, int, int]:
        return (self.base, self.sm, self.md, self.lg, self.xl)

    @property
    def largest(self) -> int:
        return self.xl

    @property
    def token(self) -> str:
        return " ".join(
            f"{prefix}grid-cols-{cols}" for prefix, cols in zip(BREAKPOINTS, self.counts)
        )


DEFAULT_COLUMNS = GridColumns(2, 3, 4, 5, 6)

_COLUMN_MAP: dict[int, GridColumns] = {
    2: GridColumns(2, 2, 2, 2, 2),
    3: GridColumns(2, 3, 3, 3, 3),
    4: GridColumns(2, 3, 4, 4, 4),
    5: GridColumns(2, 3, 4, 5, 5),
    6: GridColumns(2, 3, 4, 5, 6),
    7: GridColumns(2, 3, 4, 5, 7),
    8: GridColumns(2, 3, 4, 5, 8),
}


def responsive_columns(cols: int) -> GridColumns:
    """Per-breakpoint columns whose largest breakpoint shows ``cols`` columns."""
    if cols in _COLUMN_MAP:
        return _COLUMN_MAP[cols]
    # md 及以上断点沿用 cols
    return GridColumns(2, 3, cols, cols, cols)


def divisors(n: int) -> list[int]:
    """Positive divisors of ``n`` in ascending order."""
    return [i for i in range(1, n + 1) if n % i == 0]


def select_columns(count: int) -> GridColumns:
    """Choose a balanced column count for ``count`` items.

    Pass one takes the first preferred count that divides ``count`` exactly.
    Pass two relaxes to candidates that are a multiple of ``count`` or leave a
    remainder of at most two items. Anything else falls back to the default.
    """
    if count < 0:
        raise ValueError(f"count must be >= 0, got {count}")
    if count == 0:
        return DEFAULT_COLUMNS

    count_divisors = set(divisors(count))
    for cols in PREFERRED_COLUMNS:
        if cols in count_divisors:
            return responsive_columns(cols)

    # 余数规则而非 ceil 空位规则：7 个结果应取 5 列
    for cols in PREFERRED_COLUMNS:
        if count % cols == 0 or cols % count == 0 or count % cols <= MAX_REMAINDER:
            return responsive_columns(cols)

    return DEFAULT_COLUMNS
