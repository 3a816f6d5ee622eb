"""
路径类型枚举
"""

from enum import Enum


class PathType(Enum):
    """网关对路径的分类：文件、目录或不存在"""
    NONE = "none"
    FILE = "file"
    DIRECTORY = "directory"

    @classmethod
    def get(cls, value: str) -> 'PathType':
        """
        根据网关返回的 path_type 获取枚举值

        Args:
            value: path_type 字符串

        Returns:
            对应的路径类型

        Raises:
            ValueError: 无法识别的取值
        """
        for path_type in cls:
            if path_type.value == value:
                return path_type
        raise ValueError(f"Unknown path_type: {value!r}")

    def __str__(self):
        return self.value

    def __repr__(self):
        return f"PathType.{self.name}"
