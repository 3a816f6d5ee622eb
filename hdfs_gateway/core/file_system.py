"""
文件系统适配器抽象基类
定义了每个存储后端（HDFS网关、本地磁盘、对象存储……）都要实现的能力集合
路径都是相对于后端根目录的、以 / 分隔的字符串
"""

from abc import ABC, abstractmethod
from typing import Any, BinaryIO, Dict, Iterable, Optional, Union

from ..domain.storage_attributes import FileAttributes, StorageAttributes


class FilesystemAdapter(ABC):
    """
    文件系统适配器抽象基类
    """

    @abstractmethod
    def file_exists(self, path: str) -> bool:
        """路径存在且为文件"""

    @abstractmethod
    def directory_exists(self, path: str) -> bool:
        """路径存在且为目录"""

    @abstractmethod
    def write(self, path: str, contents: Union[bytes, str], config: Optional[Dict[str, Any]] = None) -> None:
        """写入文件内容，覆盖已有文件"""

    @abstractmethod
    def write_stream(self, path: str, contents: BinaryIO, config: Optional[Dict[str, Any]] = None) -> None:
        """从二进制流写入文件，覆盖已有文件"""

    @abstractmethod
    def read_stream(self, path: str) -> BinaryIO:
        """打开文件的读取流，调用方负责关闭"""

    def read(self, path: str) -> bytes:
        """读取文件全部内容（在 read_stream 之上实现）"""
        with self.read_stream(path) as stream:
            return stream.read()

    @abstractmethod
    def delete(self, path: str) -> None:
        """删除文件"""

    @abstractmethod
    def delete_directory(self, path: str) -> None:
        """删除目录"""

    @abstractmethod
    def create_directory(self, path: str, config: Optional[Dict[str, Any]] = None) -> None:
        """创建目录"""

    @abstractmethod
    def set_visibility(self, path: str, visibility: str) -> None:
        """设置可见性"""

    @abstractmethod
    def visibility(self, path: str) -> FileAttributes:
        """获取可见性"""

    @abstractmethod
    def mime_type(self, path: str) -> FileAttributes:
        """获取MIME类型"""

    @abstractmethod
    def last_modified(self, path: str) -> FileAttributes:
        """获取最后修改时间"""

    @abstractmethod
    def file_size(self, path: str) -> FileAttributes:
        """获取文件大小"""

    @abstractmethod
    def list_contents(self, path: str, deep: bool) -> Iterable[StorageAttributes]:
        """列出目录内容，deep为True时递归"""

    @abstractmethod
    def move(self, source: str, destination: str, config: Optional[Dict[str, Any]] = None) -> None:
        """移动文件"""

    @abstractmethod
    def copy(self, source: str, destination: str, config: Optional[Dict[str, Any]] = None) -> None:
        """复制文件"""
