#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
配置模块

提供类型安全的配置管理和验证。
"""

from .models import (
    AppConfig,
    GridConfig,
    SearchConfig,
    ServerConfig,
    LoggingConfig,
)
from .loader import load_config, default_config

__all__ = [
    'AppConfig',
    'GridConfig',
    'SearchConfig',
    'ServerConfig',
    'LoggingConfig',
    'load_config',
    'default_config',
]
