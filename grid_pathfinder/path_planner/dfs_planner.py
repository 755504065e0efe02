#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
路径规划模块：带启发式剪枝和时间预算的回溯 DFS

在固定尺寸的栅格上寻找较短路径：
- 邻居按到终点的曼哈顿距离升序探索，尽早找到短路径
- 分支定界：当前长度 + 曼哈顿下界不优于已知最优时剪枝
- 找到长度等于曼哈顿下界的路径即提前结束
- 超出时间预算时停止扩展，返回当前最优（尽力而为）
"""

# 标准库导入
import sys
import time
from dataclasses import dataclass
from typing import List, Optional

# 第三方库导入
import numpy as np
from loguru import logger

from grid_pathfinder.path_planner.grid_model import (
    Coord,
    GridBounds,
    ObstacleSet,
    DEFAULT_BOUNDS,
)
from grid_pathfinder.path_planner.heuristic import manhattan
from grid_pathfinder.path_planner.map_model import (
    PlanRequest,
    PlanResult,
    REASON_OK,
    REASON_OUT_OF_BOUNDS,
    REASON_BLOCKED_ENDPOINT,
    REASON_NO_PATH,
    REASON_TIMEOUT,
)

DEFAULT_TIME_LIMIT_MS = 5000

# 上、右、下、左；排序稳定，距离相同时保持该顺序
DIRECTIONS = ((-1, 0), (0, 1), (1, 0), (0, -1))

# 递归之外调用栈（服务器、测试框架）预留的帧数
_STACK_HEADROOM = 200


@dataclass
class _SearchContext:
    """单次搜索的全部可变状态，搜索返回后即丢弃"""
    end: Coord
    obstacles: ObstacleSet
    visited: np.ndarray
    optimal_length: int
    max_depth: int
    started_at: float
    time_limit_s: float
    best: Optional[List[Coord]] = None
    nodes_explored: int = 0
    timed_out: bool = False

    def time_exceeded(self) -> bool:
        if not self.timed_out and time.monotonic() - self.started_at > self.time_limit_s:
            self.timed_out = True
        return self.timed_out

    def found_optimal(self) -> bool:
        return self.best is not None and len(self.best) == self.optimal_length


class DFSPlanner:
    """
    回溯 DFS 路径规划器

    实例只保存不可变配置（栅格边界、时间预算），每次调用 plan() 都新建
    独立的搜索状态，因此同一实例可被反复快速调用。

    示例:
        ```python
        planner = DFSPlanner(bounds=GridBounds(20, 20), time_limit_ms=5000)
        path = planner.find_path(Coord(0, 0), Coord(4, 4), ObstacleSet())
        ```
    """

    def __init__(self, bounds: GridBounds = DEFAULT_BOUNDS, time_limit_ms: float = DEFAULT_TIME_LIMIT_MS):
        """
        初始化 DFS 规划器

        Args:
            bounds: 栅格边界
            time_limit_ms: 单次搜索的墙钟时间预算（毫秒）

        Raises:
            ValueError: 输入参数无效
        """
        if not isinstance(bounds, GridBounds):
            raise ValueError("bounds必须是GridBounds")
        if not isinstance(time_limit_ms, (int, float)) or time_limit_ms < 0:
            raise ValueError("time_limit_ms必须是非负数")

        self.bounds_ = bounds
        self.time_limit_ms_ = time_limit_ms
        self.directions_ = DIRECTIONS

        _ensure_recursion_limit(bounds.cell_count + 1)

    def find_path(self, start: Coord, end: Coord, obstacles: ObstacleSet) -> List[Coord]:
        """返回 start..end 的路径（含两端），找不到时为空列表"""
        return self.plan(PlanRequest(start=start, goal=end, obstacles=obstacles)).path

    def plan(self, req: PlanRequest) -> PlanResult:
        """
        规划路径

        Args:
            req: 规划请求（起点、终点、障碍集合）

        Returns:
            PlanResult，所有“无路径”的情况都以空路径返回，不抛异常
        """
        start, end, obstacles = req.start, req.goal, req.obstacles

        if not self.bounds_.contains(start) or not self.bounds_.contains(end):
            logger.debug(f"[DFS] 起点或终点超出栅格范围: start={start}, goal={end}, bounds={self.bounds_.shape}")
            return PlanResult(ok=False, path=[], reason=REASON_OUT_OF_BOUNDS)

        if start in obstacles or end in obstacles:
            logger.debug(f"[DFS] 起点或终点位于障碍物上: start={start}, goal={end}")
            return PlanResult(ok=False, path=[], reason=REASON_BLOCKED_ENDPOINT)

        start, end = Coord(*start), Coord(*end)
        ctx = _SearchContext(
            end=end,
            obstacles=obstacles,
            visited=np.zeros(self.bounds_.shape, dtype=bool),
            optimal_length=manhattan(start, end) + 1,
            max_depth=self.bounds_.cell_count,
            started_at=time.monotonic(),
            time_limit_s=self.time_limit_ms_ / 1000.0,
        )

        logger.debug(
            f"[DFS] 开始搜索: start={start}, goal={end}, obstacles={len(obstacles)}, "
            f"optimal_length={ctx.optimal_length}, time_limit_ms={self.time_limit_ms_}"
        )

        ctx.visited[start.row, start.col] = True
        self._dfs(ctx, start, [start])

        elapsed_ms = (time.monotonic() - ctx.started_at) * 1000.0
        path = ctx.best or []

        if path:
            logger.info(
                f"[DFS] 路径规划成功: 路径长度={len(path)}, 下界={ctx.optimal_length}, "
                f"探索节点数={ctx.nodes_explored}, 耗时={elapsed_ms:.1f}ms, 超时={ctx.timed_out}"
            )
            return PlanResult(
                ok=True,
                path=path,
                reason=REASON_OK,
                nodes_explored=ctx.nodes_explored,
                elapsed_ms=elapsed_ms,
                timed_out=ctx.timed_out,
            )

        reason = REASON_TIMEOUT if ctx.timed_out else REASON_NO_PATH
        logger.warning(
            f"[DFS] 无法找到从起点到终点的路径: start={start}, goal={end}, reason={reason}, "
            f"探索节点数={ctx.nodes_explored}, 耗时={elapsed_ms:.1f}ms"
        )
        return PlanResult(
            ok=False,
            path=[],
            reason=reason,
            nodes_explored=ctx.nodes_explored,
            elapsed_ms=elapsed_ms,
            timed_out=ctx.timed_out,
        )

    def _dfs(self, ctx: _SearchContext, cell: Coord, path: List[Coord]) -> bool:
        """
        递归搜索

        Returns:
            True 表示应停止整个搜索（已找到最优或超时）
        """
        if ctx.time_exceeded():
            return True

        ctx.nodes_explored += 1

        if ctx.best is not None and len(path) >= len(ctx.best):
            return False

        if len(path) > ctx.max_depth:
            return False

        if cell == ctx.end:
            if ctx.best is None or len(path) < len(ctx.best):
                ctx.best = list(path)
            return ctx.found_optimal()

        for neighbor in self._ordered_neighbors(ctx, cell):
            # 分支定界：经过 neighbor 的路径至少有这么多格
            estimated_total = len(path) + manhattan(neighbor, ctx.end) + 1
            if ctx.best is not None and estimated_total >= len(ctx.best):
                continue

            ctx.visited[neighbor.row, neighbor.col] = True
            path.append(neighbor)
            stop = self._dfs(ctx, neighbor, path)
            path.pop()
            ctx.visited[neighbor.row, neighbor.col] = False

            if stop or ctx.found_optimal() or ctx.time_exceeded():
                return True

        return False

    def _ordered_neighbors(self, ctx: _SearchContext, cell: Coord) -> List[Coord]:
        """四邻域中可进入的格子，按到终点的曼哈顿距离升序"""
        neighbors = []
        for dr, dc in self.directions_:
            nxt = Coord(cell.row + dr, cell.col + dc)
            if not self.bounds_.contains(nxt):
                continue
            if nxt in ctx.obstacles:
                continue
            if ctx.visited[nxt.row, nxt.col]:
                continue
            neighbors.append(nxt)
        neighbors.sort(key=lambda p: manhattan(p, ctx.end))
        return neighbors


def find_path(
    start: Coord,
    end: Coord,
    obstacles: ObstacleSet,
    time_limit_ms: float = DEFAULT_TIME_LIMIT_MS,
    bounds: GridBounds = DEFAULT_BOUNDS,
) -> List[Coord]:
    """
    单次路径搜索的便捷入口

    Args:
        start: 起点 (row, col)
        end: 终点 (row, col)
        obstacles: 障碍集合
        time_limit_ms: 时间预算（毫秒）
        bounds: 栅格边界

    Returns:
        路径坐标列表，找不到则 []
    """
    return DFSPlanner(bounds=bounds, time_limit_ms=time_limit_ms).find_path(start, end, obstacles)


def _ensure_recursion_limit(max_depth: int) -> None:
    needed = max_depth + _STACK_HEADROOM
    if sys.getrecursionlimit() < needed:
        logger.debug(f"[DFS] 提高递归上限: {sys.getrecursionlimit()} -> {needed}")
        sys.setrecursionlimit(needed)
