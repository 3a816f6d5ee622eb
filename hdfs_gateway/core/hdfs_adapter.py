"""
HDFS网关文件系统适配器
每个文件系统操作对应网关的一个HTTP端点
"""

import logging
import posixpath
from typing import Any, BinaryIO, Dict, Optional, Union

from ..domain.gateway_config import GatewayConfig
from ..domain.path_type import PathType
from ..domain.storage_attributes import DirectoryAttributes, FileAttributes, StorageAttributes
from ..exceptions import (
    UnableToCheckExistence,
    UnableToListContents,
    UnableToRetrieveMetadata,
    UnsupportedOperation,
)
from ..util.http_client_util import GatewayHttpClient
from .directory_listing import DirectoryListing
from .file_system import FilesystemAdapter
from .fs_input_stream import FSInputStream
from .mime_type_detector import ExtensionMimeTypeDetector, MimeTypeDetector
from .path_prefixer import PathPrefixer, normalize_path

logger = logging.getLogger(__name__)


class HDFSAdapter(FilesystemAdapter):
    """HDFS网关文件系统适配器"""

    def __init__(self, config: GatewayConfig, mime_type_detector: Optional[MimeTypeDetector] = None,
                 http_client: Optional[GatewayHttpClient] = None):
        """
        初始化适配器

        Args:
            config: 网关配置
            mime_type_detector: MIME类型检测器，默认按扩展名推断
            http_client: HTTP客户端，默认按配置创建
        """
        self.config = config
        self.http_client = http_client or GatewayHttpClient(
            config.base_url,
            timeout=config.timeout,
            max_connections=config.max_connections,
            max_retries=config.max_retries
        )
        self.prefixer = PathPrefixer(config.root_path)
        self.mime_type_detector = mime_type_detector or ExtensionMimeTypeDetector()
        logger.info(f"Initialized HDFSAdapter: {config.base_url}, root: {self.prefixer.prefix}")

    # --- 存在性 ---

    def path_type(self, path: str) -> PathType:
        """一次 /exists 请求得到路径类型，file_exists 和 directory_exists 都基于它"""
        location = self.prefixer.prefix_path(path)
        data = self.http_client.get_json("/exists", params={"path": location})
        value = data.get("path_type") if isinstance(data, dict) else None
        try:
            path_type = PathType.get(value)
        except ValueError:
            raise UnableToCheckExistence(location, value)
        logger.debug(f"Path type of {location}: {path_type}")
        return path_type

    def file_exists(self, path: str) -> bool:
        return self.path_type(path) == PathType.FILE

    def directory_exists(self, path: str) -> bool:
        return self.path_type(path) == PathType.DIRECTORY

    # --- 写入 ---

    def write(self, path: str, contents: Union[bytes, str], config: Optional[Dict[str, Any]] = None) -> None:
        if isinstance(contents, str):
            contents = contents.encode("utf-8")
        self._upload(path, contents)

    def write_stream(self, path: str, contents: BinaryIO, config: Optional[Dict[str, Any]] = None) -> None:
        self._upload(path, contents)

    def _upload(self, path: str, contents: Union[bytes, BinaryIO]) -> None:
        location = self.prefixer.prefix_path(path)
        files = {"file": (posixpath.basename(location), contents)}
        self.http_client.post("/upload", data={"path": location}, files=files)
        logger.info(f"Uploaded file: {location}")

    # --- 读取 ---

    def read_stream(self, path: str) -> FSInputStream:
        """
        打开文件的读取流

        返回的流直接包装传输连接，不会把整个文件读入内存；
        调用方必须关闭它（推荐使用 with 语句）。
        """
        location = self.prefixer.prefix_path(path)
        response = self.http_client.get("/download", params={"path": location}, stream=True)
        logger.debug(f"Opened input stream for {location}")
        return FSInputStream(path, response)

    # --- 删除与目录 ---

    def delete(self, path: str) -> None:
        location = self.prefixer.prefix_path(path)
        self.http_client.post("/delete", data={"path": location})
        logger.info(f"Deleted: {location}")

    def delete_directory(self, path: str) -> None:
        # 网关只有一个删除端点，不区分文件和目录
        self.delete(path)

    def create_directory(self, path: str, config: Optional[Dict[str, Any]] = None) -> None:
        location = self.prefixer.prefix_path(path)
        self.http_client.post("/mkdir", data={"path": location})
        logger.info(f"Created directory: {location}")

    # --- 可见性 ---

    def set_visibility(self, path: str, visibility: str) -> None:
        raise UnsupportedOperation("set_visibility", "the HDFS permission model is not exposed by the gateway")

    def visibility(self, path: str) -> FileAttributes:
        return FileAttributes(path)

    # --- 元数据 ---

    def mime_type(self, path: str) -> FileAttributes:
        """
        获取MIME类型

        先确认文件存在，再在本地按路径推断，从不请求网关嗅探内容。
        """
        if not self.file_exists(path):
            raise UnableToRetrieveMetadata.mime_type(path, "File does not exist.")

        mime_type = self.mime_type_detector.detect_mime_type_from_path(path)
        if mime_type is None:
            raise UnableToRetrieveMetadata.mime_type(path, "Unknown MIME type.")

        return FileAttributes(path, mime_type=mime_type)

    def _stat_entry(self, path: str, metadata_type: str) -> Dict[str, Any]:
        location = self.prefixer.prefix_path(path)
        entries = self.http_client.get_json("/list", params={"path": location})
        if not isinstance(entries, list) or not entries:
            raise UnableToRetrieveMetadata(path, metadata_type, "No listing record returned.")

        # 目录会列出子项，第一条记录必须是所请求的路径本身
        entry = entries[0]
        if self.prefixer.strip_prefix(entry.get("path", "")) != normalize_path(path):
            raise UnableToRetrieveMetadata(path, metadata_type, "Listing record does not describe this path.")
        return entry

    @staticmethod
    def _record_is_file(entry: Dict[str, Any]) -> Optional[bool]:
        """列表记录的 is_file 字段，缺失时返回None"""
        is_file = entry.get("is_file")
        return None if is_file is None else bool(is_file)

    def last_modified(self, path: str) -> FileAttributes:
        entry = self._stat_entry(path, UnableToRetrieveMetadata.LAST_MODIFIED)
        if entry.get("mtime") is None:
            raise UnableToRetrieveMetadata.last_modified(path, "Record has no mtime.")
        return FileAttributes(path, last_modified=int(entry["mtime"]))

    def file_size(self, path: str) -> FileAttributes:
        entry = self._stat_entry(path, UnableToRetrieveMetadata.FILE_SIZE)
        is_file = self._record_is_file(entry)
        if is_file is None:
            raise UnableToRetrieveMetadata.file_size(path, "Record has no is_file.")
        if not is_file:
            raise UnableToRetrieveMetadata.file_size(path, "Path is a directory.")
        if entry.get("size") is None:
            raise UnableToRetrieveMetadata.file_size(path, "Record has no size.")
        return FileAttributes(path, file_size=int(entry["size"]))

    # --- 列表 ---

    def list_contents(self, path: str, deep: bool) -> DirectoryListing:
        """
        列出目录内容

        返回惰性的可迭代对象：迭代时才请求网关，每次迭代都重新请求。
        """
        location = self.prefixer.prefix_path(path)
        return DirectoryListing(self.http_client, location, deep, self._to_attributes)

    def _to_attributes(self, entry: Dict[str, Any]) -> StorageAttributes:
        """把列表记录 {path, size, mtime, is_file} 转换为属性对象"""
        path = self.prefixer.strip_prefix(entry.get("path", ""))
        mtime = entry.get("mtime")
        last_modified = int(mtime) if mtime is not None else None

        is_file = self._record_is_file(entry)
        if is_file is None:
            raise UnableToListContents(entry.get("path", ""), "Record has no is_file.")
        if is_file:
            size = entry.get("size")
            return FileAttributes(
                path,
                file_size=int(size) if size is not None else None,
                last_modified=last_modified
            )
        return DirectoryAttributes(path, last_modified=last_modified)

    # --- 不支持的操作 ---

    def move(self, source: str, destination: str, config: Optional[Dict[str, Any]] = None) -> None:
        raise UnsupportedOperation("move", "the gateway has no move endpoint")

    def copy(self, source: str, destination: str, config: Optional[Dict[str, Any]] = None) -> None:
        raise UnsupportedOperation("copy", "the gateway has no copy endpoint")

    # --- 资源 ---

    def close(self):
        """关闭HTTP连接池"""
        self.http_client.close()
        logger.info("Closed HDFSAdapter")

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
