#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
寻路服务配置模型

使用Pydantic定义类型安全的配置模型。所有字段都有默认值，空配置即为参考部署
（20x20 栅格、5000ms 时间预算、端口 5000）。
"""

from typing import Optional
from pydantic import BaseModel, Field, field_validator, AliasChoices

# 递归 DFS 的深度上限为 rows * cols，单边最大 64
MAX_GRID_DIM = 64


class GridConfig(BaseModel):
    """栅格配置"""
    rows: int = Field(20, description="栅格行数")
    cols: int = Field(20, description="栅格列数")

    @field_validator('rows', 'cols')
    @classmethod
    def validate_dim(cls, v: int) -> int:
        """验证栅格尺寸"""
        if not 0 < v <= MAX_GRID_DIM:
            raise ValueError(f"栅格尺寸必须在1-{MAX_GRID_DIM}之间: {v}")
        return v


class SearchConfig(BaseModel):
    """搜索配置"""
    time_limit_ms: float = Field(
        5000,
        description="单次搜索的墙钟时间预算（毫秒）",
        validation_alias=AliasChoices("time_limit_ms", "timeLimitMs"),
    )

    @field_validator('time_limit_ms')
    @classmethod
    def validate_time_limit(cls, v: float) -> float:
        if v <= 0:
            raise ValueError(f"时间预算必须大于0: {v}")
        return v


class ServerConfig(BaseModel):
    """HTTP 服务配置"""
    host: str = Field("0.0.0.0", description="监听地址")
    port: int = Field(5000, description="监听端口，可被环境变量 PORT 覆盖")

    @field_validator('port')
    @classmethod
    def validate_port(cls, v: int) -> int:
        """验证端口范围"""
        if not 0 < v <= 65535:
            raise ValueError(f"端口必须在1-65535之间: {v}")
        return v


class LoggingConfig(BaseModel):
    """日志配置"""
    level: str = Field("INFO", description="日志级别")
    log_dir: Optional[str] = Field(None, description="日志目录，None 时使用程序目录下的 Logs")
    file_logging: bool = Field(True, description="是否写入按天轮转的日志文件")

    @field_validator('level')
    @classmethod
    def validate_level(cls, v: str) -> str:
        level = v.upper()
        if level not in {"TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"未知的日志级别: {v}")
        return level


class AppConfig(BaseModel):
    """寻路服务主配置"""
    grid: GridConfig = Field(default_factory=GridConfig, description="栅格配置")
    search: SearchConfig = Field(default_factory=SearchConfig, description="搜索配置")
    server: ServerConfig = Field(default_factory=ServerConfig, description="HTTP 服务配置")
    logging: LoggingConfig = Field(default_factory=LoggingConfig, description="日志配置")
