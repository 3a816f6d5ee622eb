"""
数据模型模块 - 定义各种数据结构
"""

from .gateway_config import GatewayConfig
from .path_type import PathType
from .storage_attributes import DirectoryAttributes, FileAttributes, StorageAttributes

__all__ = [
    'GatewayConfig',
    'PathType',
    'StorageAttributes',
    'FileAttributes',
    'DirectoryAttributes'
]
