#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
ASCII 可视化

'#' = 障碍, '.' = 空地, '*' = 路径, 'S' = 起点, 'G' = 终点
"""

from typing import Optional, Sequence

import numpy as np

from grid_pathfinder.path_planner.grid_model import Coord, GridBounds, ObstacleSet


def render_ascii(
    bounds: GridBounds,
    obstacles: ObstacleSet,
    path: Sequence[Coord],
    start: Optional[Coord] = None,
    end: Optional[Coord] = None,
) -> str:
    vis = np.full(bounds.shape, '.', dtype=str)
    vis[obstacles.to_grid(bounds) == 1] = '#'

    for coord in path:
        vis[coord[0], coord[1]] = '*'

    # 标记起点终点
    if start is not None and bounds.contains(start):
        vis[start[0], start[1]] = 'S'
    if end is not None and bounds.contains(end):
        vis[end[0], end[1]] = 'G'

    return "\n".join("".join(row) for row in vis)
