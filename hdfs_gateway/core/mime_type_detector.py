"""
MIME类型检测
"""

import mimetypes
from abc import ABC, abstractmethod
from typing import Optional

mimetypes.init()


class MimeTypeDetector(ABC):
    """MIME类型检测器接口"""

    @abstractmethod
    def detect_mime_type_from_path(self, path: str) -> Optional[str]:
        """根据路径推断MIME类型，无法推断时返回None"""


class ExtensionMimeTypeDetector(MimeTypeDetector):
    """根据扩展名推断MIME类型，不读取文件内容"""

    def detect_mime_type_from_path(self, path: str) -> Optional[str]:
        mime_type, _ = mimetypes.guess_type(path, strict=False)
        return mime_type
