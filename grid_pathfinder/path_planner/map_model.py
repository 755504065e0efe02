from dataclasses import dataclass, field
from typing import List

from grid_pathfinder.path_planner.grid_model import Coord, ObstacleSet

# PlanResult.reason 取值
REASON_OK = "ok"
REASON_OUT_OF_BOUNDS = "out_of_bounds"
REASON_BLOCKED_ENDPOINT = "blocked_endpoint"
REASON_NO_PATH = "no_path"
REASON_TIMEOUT = "timeout"


@dataclass
class PlanRequest:
    start: Coord
    goal: Coord
    obstacles: ObstacleSet = field(default_factory=ObstacleSet)


@dataclass
class PlanResult:
    ok: bool
    path: List[Coord]
    reason: str = ""
    nodes_explored: int = 0          # 进入搜索的格子数
    elapsed_ms: float = 0.0
    timed_out: bool = False          # 是否因超时提前结束（结果为尽力而为）
