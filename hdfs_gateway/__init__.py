"""
HDFS网关客户端
通过HTTP网关把HDFS暴露为统一的文件系统适配器接口
"""

__version__ = "1.0.0"

from .core.file_system import FilesystemAdapter
from .core.hdfs_adapter import HDFSAdapter
from .domain.gateway_config import GatewayConfig
from .domain.path_type import PathType
from .domain.storage_attributes import DirectoryAttributes, FileAttributes, StorageAttributes
from .exceptions import (
    HDFSGatewayError,
    PathTraversalDetected,
    TransportError,
    UnableToCheckExistence,
    UnableToListContents,
    UnableToRetrieveMetadata,
    UnsupportedOperation,
)

__all__ = [
    'FilesystemAdapter',
    'HDFSAdapter',
    'GatewayConfig',
    'PathType',
    'StorageAttributes',
    'FileAttributes',
    'DirectoryAttributes',
    'HDFSGatewayError',
    'TransportError',
    'UnableToRetrieveMetadata',
    'UnableToCheckExistence',
    'UnableToListContents',
    'UnsupportedOperation',
    'PathTraversalDetected'
]
