"""
文件输入流类
把网关 /download 的流式响应包装为可按需读取的字节流
"""

import logging
from typing import Iterator

import requests

logger = logging.getLogger(__name__)

DEFAULT_CHUNK_SIZE = 64 * 1024  # 64KB chunks


class FSInputStream:
    """文件输入流类，持有一个传输连接，使用完必须关闭"""

    def __init__(self, path: str, response: requests.Response, chunk_size: int = DEFAULT_CHUNK_SIZE):
        """
        初始化文件输入流

        Args:
            path: 文件路径（相对于根目录）
            response: 以 stream=True 发出的响应
            chunk_size: 每次从连接读取的块大小
        """
        self.path = path
        self.response = response
        self.chunk_size = chunk_size
        self.current_position = 0
        self._chunks: Iterator[bytes] = response.iter_content(chunk_size=chunk_size)
        self._buffer = b""
        self._closed = False

    @property
    def closed(self) -> bool:
        return self._closed

    def readable(self) -> bool:
        return True

    def read(self, size: int = -1) -> bytes:
        """
        读取文件数据

        Args:
            size: 读取大小，-1表示读取剩余全部数据

        Returns:
            读取的数据，到达末尾时返回空字节串
        """
        if self._closed:
            raise ValueError("Stream is closed")

        if size == 0:
            return b""

        if size is None or size < 0:
            data = self._buffer + b"".join(self._chunks)
            self._buffer = b""
        else:
            parts = [self._buffer]
            buffered = len(self._buffer)
            while buffered < size:
                chunk = next(self._chunks, None)
                if chunk is None:
                    break
                parts.append(chunk)
                buffered += len(chunk)
            joined = b"".join(parts)
            data = joined[:size]
            self._buffer = joined[size:]

        self.current_position += len(data)
        return data

    def tell(self) -> int:
        """获取当前读取位置"""
        return self.current_position

    def close(self):
        """关闭流并释放连接"""
        if not self._closed:
            self.response.close()
            self._closed = True
            logger.debug(f"Closed input stream for {self.path} after {self.current_position} bytes")

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()

    def __iter__(self):
        return self

    def __next__(self) -> bytes:
        chunk = self.read(self.chunk_size)
        if not chunk:
            raise StopIteration
        return chunk
