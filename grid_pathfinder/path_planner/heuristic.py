#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
启发式函数（曼哈顿距离）

四方向、单位代价栅格上的可采纳启发式，用于邻居排序和剪枝下界。
"""

from typing import Tuple


def manhattan(a: Tuple[int, int], b: Tuple[int, int]) -> int:
    """
    曼哈顿距离

    Args:
        a: 点A坐标 (row, col)
        b: 点B坐标 (row, col)

    Returns:
        |a.row - b.row| + |a.col - b.col|
    """
    return abs(a[0] - b[0]) + abs(a[1] - b[1])
