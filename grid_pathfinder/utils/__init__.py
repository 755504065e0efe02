from .logger import SetupLogger
from .global_path import GetGlobalConfig, GetProgramDir, GetConfigPath, GetLogDir

__all__ = [
    'SetupLogger',
    'GetGlobalConfig',
    'GetProgramDir',
    'GetConfigPath',
    'GetLogDir',
]
