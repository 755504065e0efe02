from pathlib import Path
from loguru import logger

from grid_pathfinder.config.models import AppConfig
from grid_pathfinder.config.loader import load_config, default_config

_global_config = None


def GetGlobalConfig() -> AppConfig:
    """程序目录下 config/config.yaml 的配置；文件不存在时使用默认配置"""
    global _global_config
    if _global_config is None:
        config_path = GetConfigPath()
        if config_path.exists():
            _global_config = load_config(config_path)
        else:
            logger.warning(f"未找到配置文件 {config_path}，使用默认配置")
            _global_config = default_config()
    return _global_config


def GetProgramDir() -> Path:
    """
    获取程序根目录路径。

    开发环境（含 pip install -e）下为项目根目录，即当前文件所在目录的父目录的父目录。
    """
    return Path(__file__).parent.parent.parent


def GetConfigPath() -> Path:
    return GetProgramDir() / "config" / "config.yaml"


def GetLogDir() -> Path:
    return GetProgramDir() / "Logs"


if __name__ == "__main__":
    logger.info(GetProgramDir())
    logger.info(GetConfigPath())
    logger.info(GetLogDir())
