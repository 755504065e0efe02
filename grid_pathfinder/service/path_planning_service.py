#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
PathPlanningService

中间层：
- 根据配置确定栅格边界和时间预算
- 每次请求新建一个 DFSPlanner，搜索状态互不共享
- 把规划结果整理成调用方约定的形式（有序坐标列表或空列表）
"""

from typing import Dict, Iterable, List, Optional

from loguru import logger

from grid_pathfinder.config.models import AppConfig
from grid_pathfinder.path_planner.grid_model import Coord, GridBounds, ObstacleSet
from grid_pathfinder.path_planner.map_model import PlanRequest, PlanResult
from grid_pathfinder.path_planner.dfs_planner import DFSPlanner


class PathPlanningService:
    """
    路径规划服务（中间层）

    生命周期：

    1. 创建实例：pps = PathPlanningService(cfg)
    2. 每次请求调用：pps.plan_path(start, end, obstacles)
    3. 用 assemble_path(result) 得到返回给前端的坐标列表
    """

    def __init__(self, cfg: AppConfig) -> None:
        self.cfg = cfg
        self._bounds = GridBounds(rows=cfg.grid.rows, cols=cfg.grid.cols)

    @property
    def bounds(self) -> GridBounds:
        return self._bounds

    def plan_path(
        self,
        start: Coord,
        end: Coord,
        obstacles: Iterable[Coord],
        time_limit_ms: Optional[float] = None,
    ) -> PlanResult:
        """
        对一次请求进行路径规划

        Args:
            start: 起点 (row, col)
            end: 终点 (row, col)
            obstacles: 障碍坐标
            time_limit_ms: 覆盖配置中的时间预算

        Returns:
            PlanResult，无路径时 path 为空
        """
        if time_limit_ms is None:
            time_limit_ms = self.cfg.search.time_limit_ms

        obstacle_set = obstacles if isinstance(obstacles, ObstacleSet) else ObstacleSet(obstacles)
        req = PlanRequest(start=start, goal=end, obstacles=obstacle_set)

        logger.info(
            f"[PathPlanningService] 规划请求: start={tuple(start)}, goal={tuple(end)}, "
            f"obstacles={len(obstacle_set)}, time_limit_ms={time_limit_ms}"
        )

        planner = DFSPlanner(bounds=self._bounds, time_limit_ms=time_limit_ms)
        result = planner.plan(req)

        if not result.ok:
            logger.info(f"[PathPlanningService] 未找到路径: {result.reason}")
        elif result.timed_out:
            logger.warning(f"[PathPlanningService] 搜索超时，返回尽力而为的路径，路径长度: {len(result.path)}, 探索节点数: {result.nodes_explored}")

        return result


def assemble_path(result: PlanResult) -> List[Dict[str, int]]:
    """规划结果 -> [{"r": row, "c": col}, ...]，顺序从起点到终点"""
    return [{"r": int(p[0]), "c": int(p[1])} for p in result.path]
