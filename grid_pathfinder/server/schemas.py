#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
/find-path 请求体模型

start / end 必须带数值型的 r、c（布尔值和字符串不算数值），否则整个请求被拒绝；
obstacles 中不合法的条目被静默丢弃。
"""

from typing import Any, List, Union

from pydantic import BaseModel, ConfigDict, StrictFloat, StrictInt, ValidationError

from grid_pathfinder.path_planner.grid_model import Coord

Number = Union[StrictInt, StrictFloat]


def _as_index(v: Union[int, float]) -> Union[int, float]:
    """整数值的浮点数转为 int；其余保持原样，之后由栅格边界判定为越界"""
    if isinstance(v, float) and v.is_integer():
        return int(v)
    return v


class PointPayload(BaseModel):
    """{"r": number, "c": number}"""
    model_config = ConfigDict(extra="ignore")

    r: Number
    c: Number

    def to_coord(self) -> Coord:
        return Coord(_as_index(self.r), _as_index(self.c))

    def is_cell(self) -> bool:
        coord = self.to_coord()
        return isinstance(coord.row, int) and isinstance(coord.col, int)


class FindPathPayload(BaseModel):
    model_config = ConfigDict(extra="ignore")

    start: PointPayload
    end: PointPayload
    obstacles: Any = None

    def obstacle_coords(self) -> List[Coord]:
        if not isinstance(self.obstacles, list):
            return []
        coords = []
        for item in self.obstacles:
            try:
                point = PointPayload.model_validate(item)
            except ValidationError:
                continue
            if point.is_cell():
                coords.append(point.to_coord())
        return coords
