#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
配置加载器

从YAML文件加载配置并使用Pydantic验证。
"""

import os
import yaml
from pathlib import Path
from typing import Optional, Any, Dict
from loguru import logger
from pydantic import ValidationError

from grid_pathfinder.config.models import AppConfig

PORT_ENV_VAR = "PORT"


def load_config(config_path: Path, base_dir: Optional[Path] = None) -> AppConfig:
    """
    从YAML文件加载配置

    Args:
        config_path: 配置文件路径
        base_dir: 用于解析相对路径的程序目录，默认为配置文件所在目录
            （若该目录名为 config 则取其上一级）

    Returns:
        验证后的AppConfig对象

    Raises:
        FileNotFoundError: 配置文件不存在
        yaml.YAMLError: YAML格式错误
        ValueError: 配置文件为空或不是映射
        ValidationError: 配置验证失败
    """
    config_path = Path(config_path)
    if base_dir is None:
        default_base = config_path.resolve().parent
        if default_base.name.lower() == "config":
            default_base = default_base.parent
        base_dir = default_base
    else:
        base_dir = Path(base_dir).resolve()

    # 检查文件是否存在
    if not config_path.exists():
        error_msg = f"配置文件不存在: {config_path}"
        logger.error(error_msg)
        raise FileNotFoundError(error_msg)

    # 加载YAML文件
    try:
        with open(config_path, 'r', encoding='utf-8') as f:
            raw_config = yaml.safe_load(f)
    except yaml.YAMLError as e:
        error_msg = f"YAML格式错误: {e}"
        logger.error(error_msg)
        raise yaml.YAMLError(error_msg) from e

    if raw_config is None:
        error_msg = "配置文件为空"
        logger.error(error_msg)
        raise ValueError(error_msg)

    if not isinstance(raw_config, dict):
        error_msg = f"配置文件顶层必须是映射: {type(raw_config).__name__}"
        logger.error(error_msg)
        raise ValueError(error_msg)

    _apply_relative_paths(raw_config, base_dir)
    _apply_env_overrides(raw_config)

    # 使用Pydantic验证配置
    try:
        config = AppConfig(**raw_config)
    except ValidationError as e:
        logger.error(f"配置验证失败: {config_path}")
        for error in e.errors():
            field_path = " -> ".join(str(loc) for loc in error['loc'])
            logger.error(f"  {field_path}: {error['msg']}")
        raise

    logger.info(f"配置加载成功: {config_path}")
    return config


def default_config() -> AppConfig:
    """不读文件的默认配置（仍然应用环境变量覆盖）"""
    raw_config: Dict[str, Any] = {}
    _apply_env_overrides(raw_config)
    return AppConfig(**raw_config)


def _resolve_path(value: Optional[str], base_dir: Path) -> Optional[str]:
    """解析相对路径为绝对路径"""
    if value is None:
        return None
    path = Path(value)
    if not path.is_absolute():
        path = base_dir / path
    return str(path.resolve())


def _apply_relative_paths(raw_config: Dict[str, Any], base_dir: Path) -> None:
    """将配置中的相对路径字段转换为绝对路径"""
    logging_cfg = raw_config.get('logging')
    if isinstance(logging_cfg, dict) and logging_cfg.get('log_dir'):
        logging_cfg['log_dir'] = _resolve_path(logging_cfg['log_dir'], base_dir)


def _apply_env_overrides(raw_config: Dict[str, Any]) -> None:
    """环境变量 PORT 覆盖 server.port"""
    port = os.environ.get(PORT_ENV_VAR)
    if not port:
        return
    server_cfg = raw_config.get('server')
    if not isinstance(server_cfg, dict):
        server_cfg = {}
        raw_config['server'] = server_cfg
    server_cfg['port'] = port
    logger.debug(f"使用环境变量 {PORT_ENV_VAR} 覆盖端口: {port}")
