"""
异常定义
"""

import requests

# 传输层错误（网络失败、超时、非2xx响应、无法解析的JSON）原样向上传播
TransportError = requests.exceptions.RequestException


class HDFSGatewayError(Exception):
    """适配器自身错误的基类"""


class UnableToRetrieveMetadata(HDFSGatewayError):
    """网关请求成功，但无法得到所需的元数据"""

    MIME_TYPE = "mime_type"
    LAST_MODIFIED = "last_modified"
    FILE_SIZE = "file_size"

    def __init__(self, location: str, metadata_type: str, reason: str = ""):
        self.location = location
        self.metadata_type = metadata_type
        self.reason = reason
        message = f"Unable to retrieve the {metadata_type} for file at location: {location}."
        if reason:
            message = f"{message} {reason}"
        super().__init__(message)

    @classmethod
    def mime_type(cls, location: str, reason: str = "") -> 'UnableToRetrieveMetadata':
        return cls(location, cls.MIME_TYPE, reason)

    @classmethod
    def last_modified(cls, location: str, reason: str = "") -> 'UnableToRetrieveMetadata':
        return cls(location, cls.LAST_MODIFIED, reason)

    @classmethod
    def file_size(cls, location: str, reason: str = "") -> 'UnableToRetrieveMetadata':
        return cls(location, cls.FILE_SIZE, reason)


class UnableToCheckExistence(HDFSGatewayError):
    """网关返回了无法识别的 path_type"""

    def __init__(self, location: str, path_type: object):
        self.location = location
        self.path_type = path_type
        super().__init__(f"Unable to check existence for {location}: unknown path_type {path_type!r}")


class UnableToListContents(HDFSGatewayError):
    """/list 返回的不是JSON数组，或记录缺少 is_file"""

    def __init__(self, location: str, reason: str = ""):
        self.location = location
        self.reason = reason
        super().__init__(f"Unable to list contents for {location}. {reason}".rstrip())


class UnsupportedOperation(HDFSGatewayError):
    """网关没有对应端点的操作"""

    def __init__(self, operation: str, reason: str = ""):
        self.operation = operation
        message = f"Operation '{operation}' is not supported by the HDFS gateway adapter"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class PathTraversalDetected(HDFSGatewayError):
    """路径试图越过根目录"""

    def __init__(self, path: str):
        self.path = path
        super().__init__(f"Path traversal detected: {path}")
