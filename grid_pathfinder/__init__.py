#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
栅格寻路服务

在固定尺寸栅格上用带启发式剪枝和时间预算的回溯 DFS 寻找较短路径。
"""

from .path_planner import Coord, GridBounds, ObstacleSet, DFSPlanner, find_path, manhattan, in_bounds

__version__ = "0.1.0"

__all__ = ['Coord', 'GridBounds', 'ObstacleSet', 'DFSPlanner', 'find_path', 'manhattan', 'in_bounds']
