"""
存储属性类
文件和目录的属性都只包含网关实际返回的字段，缺失的字段为None
"""

from typing import Any, Dict, Optional


class StorageAttributes:
    """文件/目录属性的公共基类"""

    TYPE_FILE = "file"
    TYPE_DIRECTORY = "dir"

    type: str = ""

    def __init__(self, path: str, visibility: Optional[str] = None,
                 last_modified: Optional[int] = None):
        """
        初始化存储属性

        Args:
            path: 相对于根目录的路径
            visibility: 可见性（HDFS权限模型未暴露，始终为None）
            last_modified: 最后修改时间（Unix时间戳）
        """
        self.path: str = path
        self.visibility: Optional[str] = visibility
        self.last_modified: Optional[int] = last_modified

    def get_path(self) -> str:
        """获取路径"""
        return self.path

    def get_visibility(self) -> Optional[str]:
        """获取可见性"""
        return self.visibility

    def get_last_modified(self) -> Optional[int]:
        """获取最后修改时间"""
        return self.last_modified

    def is_file(self) -> bool:
        """判断是否为文件"""
        return self.type == self.TYPE_FILE

    def is_dir(self) -> bool:
        """判断是否为目录"""
        return self.type == self.TYPE_DIRECTORY

    def to_dict(self) -> Dict[str, Any]:
        return {
            "type": self.type,
            "path": self.path,
            "visibility": self.visibility,
            "last_modified": self.last_modified,
        }

    def __eq__(self, other):
        if not isinstance(other, StorageAttributes):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    def __str__(self):
        fields = ", ".join(f"{key}={value!r}" for key, value in self.to_dict().items() if key != "type")
        return f"{type(self).__name__}{{{fields}}}"

    def __repr__(self):
        return self.__str__()


class FileAttributes(StorageAttributes):
    """文件属性类"""

    type = StorageAttributes.TYPE_FILE

    def __init__(self, path: str, file_size: Optional[int] = None, visibility: Optional[str] = None,
                 last_modified: Optional[int] = None, mime_type: Optional[str] = None):
        """
        初始化文件属性

        Args:
            path: 相对于根目录的路径
            file_size: 文件大小（字节）
            visibility: 可见性
            last_modified: 最后修改时间（Unix时间戳）
            mime_type: MIME类型
        """
        super().__init__(path, visibility=visibility, last_modified=last_modified)
        self.file_size: Optional[int] = file_size
        self.mime_type: Optional[str] = mime_type

    def get_file_size(self) -> Optional[int]:
        """获取文件大小"""
        return self.file_size

    def get_mime_type(self) -> Optional[str]:
        """获取MIME类型"""
        return self.mime_type

    def to_dict(self) -> Dict[str, Any]:
        data = super().to_dict()
        data["file_size"] = self.file_size
        data["mime_type"] = self.mime_type
        return data


class DirectoryAttributes(StorageAttributes):
    """目录属性类"""

    type = StorageAttributes.TYPE_DIRECTORY
