"""
核心模块 - 适配器接口和HDFS网关实现
"""

from .directory_listing import DirectoryListing
from .file_system import FilesystemAdapter
from .fs_input_stream import FSInputStream
from .hdfs_adapter import HDFSAdapter
from .mime_type_detector import ExtensionMimeTypeDetector, MimeTypeDetector
from .path_prefixer import PathPrefixer

__all__ = [
    'FilesystemAdapter',
    'HDFSAdapter',
    'FSInputStream',
    'DirectoryListing',
    'PathPrefixer',
    'MimeTypeDetector',
    'ExtensionMimeTypeDetector'
]
