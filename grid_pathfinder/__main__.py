#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
命令行入口

    python -m grid_pathfinder serve [--config PATH] [--host H] [--port P]
    python -m grid_pathfinder plan --start 0,0 --end 4,4 [--obstacle 2,0 ...]
"""

import argparse
import sys
from pathlib import Path
from typing import List, Optional

from loguru import logger

from grid_pathfinder.config.loader import load_config
from grid_pathfinder.config.models import AppConfig
from grid_pathfinder.path_planner.grid_model import Coord, ObstacleSet
from grid_pathfinder.path_planner.render import render_ascii
from grid_pathfinder.server.app import run_server
from grid_pathfinder.service.path_planning_service import PathPlanningService
from grid_pathfinder.utils.global_path import GetGlobalConfig, GetLogDir
from grid_pathfinder.utils.logger import SetupLogger


def _parse_coord(text: str) -> Coord:
    """"r,c" -> Coord"""
    parts = text.split(",")
    if len(parts) != 2:
        raise argparse.ArgumentTypeError(f"坐标格式应为 r,c: {text}")
    try:
        return Coord(int(parts[0]), int(parts[1]))
    except ValueError:
        raise argparse.ArgumentTypeError(f"坐标必须是整数: {text}")


def _non_negative_ms(text: str) -> float:
    """时间预算（毫秒），拒绝负数和 nan"""
    try:
        value = float(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"时间预算必须是数值: {text}")
    if not value >= 0:
        raise argparse.ArgumentTypeError(f"时间预算不能为负数: {text}")
    return value


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="grid-pathfinder", description="栅格回溯 DFS 寻路服务")
    parser.add_argument("--config", type=Path, default=None, help="YAML 配置文件路径")
    sub = parser.add_subparsers(dest="command", required=True)

    serve = sub.add_parser("serve", help="启动 HTTP 服务")
    serve.add_argument("--host", type=str, default=None, help="覆盖监听地址")
    serve.add_argument("--port", type=int, default=None, help="覆盖监听端口")

    plan = sub.add_parser("plan", help="计算一次路径并打印 ASCII 地图")
    plan.add_argument("--start", type=_parse_coord, required=True, help="起点 r,c")
    plan.add_argument("--end", type=_parse_coord, required=True, help="终点 r,c")
    plan.add_argument("--obstacle", type=_parse_coord, action="append", default=[], help="障碍 r,c，可重复")
    plan.add_argument("--time-limit-ms", type=_non_negative_ms, default=None, help="覆盖时间预算（毫秒）")
    return parser


def _load(config_path: Optional[Path]) -> AppConfig:
    if config_path is not None:
        return load_config(config_path)
    return GetGlobalConfig()


def _setup_logging(cfg: AppConfig) -> None:
    SetupLogger(cfg.logging, default_log_dir=GetLogDir())


def _cmd_serve(cfg: AppConfig, args: argparse.Namespace) -> int:
    updates = {}
    if args.host is not None:
        updates["host"] = args.host
    if args.port is not None:
        updates["port"] = args.port
    if updates:
        cfg = cfg.model_copy(update={"server": cfg.server.model_copy(update=updates)})

    run_server(cfg)
    return 0


def _cmd_plan(cfg: AppConfig, args: argparse.Namespace) -> int:
    service = PathPlanningService(cfg)
    obstacles = ObstacleSet(args.obstacle)
    result = service.plan_path(args.start, args.end, obstacles, time_limit_ms=args.time_limit_ms)

    print(render_ascii(service.bounds, obstacles, result.path, args.start, args.end))
    print()
    print(f"reason: {result.reason}, length: {len(result.path)}, "
          f"nodes: {result.nodes_explored}, elapsed: {result.elapsed_ms:.1f}ms, timed_out: {result.timed_out}")
    print("path: " + " -> ".join(f"({p.row},{p.col})" for p in result.path))
    return 0 if result.ok else 1


def main(argv: Optional[List[str]] = None) -> int:
    args = _build_parser().parse_args(argv)
    cfg = _load(args.config)
    _setup_logging(cfg)

    if args.command == "serve":
        return _cmd_serve(cfg, args)
    if args.command == "plan":
        return _cmd_plan(cfg, args)
    logger.error(f"未知命令: {args.command}")
    return 2


if __name__ == "__main__":
    sys.exit(main())
