#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
路径规划模块

提供栅格模型、启发式函数和回溯 DFS 规划器。
"""

from .grid_model import (
    Coord,
    GridBounds,
    ObstacleSet,
    DEFAULT_BOUNDS,
    DEFAULT_ROWS,
    DEFAULT_COLS,
    in_bounds,
)
from .heuristic import manhattan
from .map_model import PlanRequest, PlanResult
from .dfs_planner import DFSPlanner, find_path, DEFAULT_TIME_LIMIT_MS
from .render import render_ascii

__all__ = [
    'Coord',
    'GridBounds',
    'ObstacleSet',
    'DEFAULT_BOUNDS',
    'DEFAULT_ROWS',
    'DEFAULT_COLS',
    'in_bounds',
    'manhattan',
    'PlanRequest',
    'PlanResult',
    'DFSPlanner',
    'find_path',
    'DEFAULT_TIME_LIMIT_MS',
    'render_ascii',
]
