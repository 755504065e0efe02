#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
栅格模型：坐标、栅格边界与障碍集合

坐标统一使用 (row, col)，与前端网格的 r / c 字段一一对应。
"""

from dataclasses import dataclass
from typing import Iterable, Iterator, NamedTuple

import numpy as np

DEFAULT_ROWS = 20
DEFAULT_COLS = 20


class Coord(NamedTuple):
    """栅格坐标 (row, col)，按值比较与哈希"""
    row: int
    col: int


@dataclass(frozen=True)
class GridBounds:
    """固定尺寸的矩形栅格 ROWS x COLS"""
    rows: int = DEFAULT_ROWS
    cols: int = DEFAULT_COLS

    def __post_init__(self) -> None:
        if self.rows <= 0 or self.cols <= 0:
            raise ValueError(f"栅格尺寸必须大于0: rows={self.rows}, cols={self.cols}")

    @property
    def cell_count(self) -> int:
        """简单路径可能包含的最大格子数"""
        return self.rows * self.cols

    @property
    def shape(self) -> tuple:
        return (self.rows, self.cols)

    def contains(self, coord: Coord) -> bool:
        """
        判断坐标是否位于栅格内

        非整数坐标永远不在栅格内。
        """
        row, col = coord
        if isinstance(row, bool) or isinstance(col, bool):
            return False
        if not isinstance(row, int) or not isinstance(col, int):
            return False
        return 0 <= row < self.rows and 0 <= col < self.cols


DEFAULT_BOUNDS = GridBounds()


def in_bounds(coord: Coord, bounds: GridBounds = DEFAULT_BOUNDS) -> bool:
    return bounds.contains(coord)


class ObstacleSet:
    """
    障碍集合

    每次规划请求新建一份，搜索期间只读。集合语义，顺序不可观察。
    """

    __slots__ = ("_cells",)

    def __init__(self, cells: Iterable[Coord] = ()) -> None:
        self._cells = frozenset(Coord(*cell) for cell in cells)

    def __contains__(self, coord: object) -> bool:
        return coord in self._cells

    def __iter__(self) -> Iterator[Coord]:
        return iter(self._cells)

    def __len__(self) -> int:
        return len(self._cells)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ObstacleSet):
            return NotImplemented
        return self._cells == other._cells

    def __hash__(self) -> int:
        return hash(self._cells)

    def __repr__(self) -> str:
        return f"ObstacleSet({sorted(self._cells)})"

    def to_grid(self, bounds: GridBounds) -> np.ndarray:
        """
        转换为 0/1 栅格（1=障碍），越界的障碍被忽略

        Args:
            bounds: 栅格边界

        Returns:
            形状为 (rows, cols) 的 uint8 数组
        """
        grid = np.zeros(bounds.shape, dtype=np.uint8)
        for cell in self._cells:
            if bounds.contains(cell):
                grid[cell.row, cell.col] = 1
        return grid
