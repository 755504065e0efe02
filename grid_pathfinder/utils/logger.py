#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
日志初始化

控制台一个彩色 sink；开启文件日志时再加两个按天轮转的文件：
- grid_pathfinder_{日期}.log       全部日志
- grid_pathfinder_http_{日期}.log  只含 HTTP 服务（grid_pathfinder.server）的请求日志
"""

import sys
from pathlib import Path
from typing import Optional, Union

from loguru import logger

from grid_pathfinder.config.models import LoggingConfig

_FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} - {message}"
_CONSOLE_FORMAT = (
    "<green>{time:HH:mm:ss.SSS}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{line}</cyan> - "
    "<level>{message}</level>"
)
_SERVER_MODULE = "grid_pathfinder.server"


def _IsServerRecord(record) -> bool:
    name = record["name"] or ""
    return name == _SERVER_MODULE or name.startswith(_SERVER_MODULE + ".")


def SetupLogger(log_cfg: LoggingConfig, default_log_dir: Union[str, Path]) -> Optional[Path]:
    """
    按配置重建 loguru 的输出

    Args:
        log_cfg: 日志配置（级别、目录、是否写文件）
        default_log_dir: log_cfg.log_dir 为空时使用的目录

    Returns:
        实际写入的日志目录；未开启文件日志时返回 None
    """
    logger.remove()
    logger.add(sys.stderr, level=log_cfg.level, format=_CONSOLE_FORMAT, colorize=True)

    if not log_cfg.file_logging:
        return None

    log_dir = Path(log_cfg.log_dir) if log_cfg.log_dir else Path(default_log_dir)
    log_dir.mkdir(parents=True, exist_ok=True)

    logger.add(
        str(log_dir / "grid_pathfinder_{time:YYYY-MM-DD}.log"),
        rotation="00:00",
        retention="7 days",
        level=log_cfg.level,
        encoding="utf-8",
        format=_FILE_FORMAT,
    )
    logger.add(
        str(log_dir / "grid_pathfinder_http_{time:YYYY-MM-DD}.log"),
        rotation="00:00",
        retention="7 days",
        level=log_cfg.level,
        filter=_IsServerRecord,
        encoding="utf-8",
        format=_FILE_FORMAT,
    )

    logger.debug(f"[Logger] 日志目录: {log_dir}")
    return log_dir
