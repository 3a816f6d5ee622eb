"""
路径前缀工具
把适配器的相对路径映射为根目录下的绝对路径，并在返回时去掉根目录
"""

from typing import List

from ..exceptions import PathTraversalDetected

SEPARATOR = "/"


def normalize_path(path: str) -> str:
    """
    规范化相对路径

    去掉首尾斜杠、空段和 "."，处理 ".."；越过根目录时抛出 PathTraversalDetected。

    Args:
        path: 原始路径

    Returns:
        不带首尾斜杠的路径，根目录为空字符串
    """
    segments: List[str] = []
    for segment in path.replace("\\", SEPARATOR).split(SEPARATOR):
        if segment in ("", "."):
            continue
        if segment == "..":
            if not segments:
                raise PathTraversalDetected(path)
            segments.pop()
            continue
        segments.append(segment)
    return SEPARATOR.join(segments)


class PathPrefixer:
    """路径前缀工具类"""

    def __init__(self, root_path: str):
        """
        初始化路径前缀工具

        Args:
            root_path: 根目录，如 /elabftw/uploads
        """
        root = root_path.strip(SEPARATOR)
        self.prefix: str = f"{SEPARATOR}{root}{SEPARATOR}" if root else SEPARATOR

    def prefix_path(self, path: str) -> str:
        """
        给相对路径加上根目录前缀

        Returns:
            根目录下的绝对路径，不带末尾斜杠（根目录本身为前缀去掉末尾斜杠，"/" 除外）
        """
        location = self.prefix + normalize_path(path)
        if location != SEPARATOR:
            location = location.rstrip(SEPARATOR)
        return location

    def strip_prefix(self, path: str) -> str:
        """
        去掉网关返回路径中的根目录前缀

        Returns:
            相对于根目录的路径
        """
        if path.startswith(self.prefix):
            relative = path[len(self.prefix):]
        elif path == self.prefix.rstrip(SEPARATOR):
            relative = ""
        else:
            relative = path
        return relative.strip(SEPARATOR)

    def __str__(self):
        return f"PathPrefixer{{prefix='{self.prefix}'}}"

    def __repr__(self):
        return self.__str__()
