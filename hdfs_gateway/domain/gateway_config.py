"""
网关配置类
"""

import os
from typing import Mapping, Optional

DEFAULT_TIMEOUT = 300  # 大文件上传/下载需要较长的超时
DEFAULT_MAX_CONNECTIONS = 100
DEFAULT_ENV_PREFIX = "HDFS_GATEWAY_"


class GatewayConfig:
    """网关连接配置，在构造适配器时显式传入"""

    def __init__(self, base_url: str, root_path: str = "/", timeout: float = DEFAULT_TIMEOUT,
                 max_connections: int = DEFAULT_MAX_CONNECTIONS, max_retries: int = 0):
        """
        初始化网关配置

        Args:
            base_url: 网关基础URL（包含端口）
            root_path: HDFS上的根目录，所有路径都在其下
            timeout: 请求超时时间（秒）
            max_connections: 连接池大小
            max_retries: 传输层重试次数，默认不重试
        """
        if not base_url:
            raise ValueError("base_url must not be empty")
        if timeout <= 0:
            raise ValueError(f"timeout must be positive, got {timeout}")
        if max_connections <= 0:
            raise ValueError(f"max_connections must be positive, got {max_connections}")
        if max_retries < 0:
            raise ValueError(f"max_retries must not be negative, got {max_retries}")

        self.base_url: str = base_url.rstrip("/")
        self.root_path: str = root_path or "/"
        self.timeout: float = timeout
        self.max_connections: int = max_connections
        self.max_retries: int = max_retries

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None,
                 prefix: str = DEFAULT_ENV_PREFIX) -> 'GatewayConfig':
        """
        从环境变量读取配置

        读取 {prefix}URL、{prefix}ROOT、{prefix}TIMEOUT、
        {prefix}MAX_CONNECTIONS、{prefix}MAX_RETRIES，其中URL必填。

        Args:
            environ: 环境变量映射，默认为 os.environ
            prefix: 变量名前缀

        Returns:
            网关配置
        """
        env = os.environ if environ is None else environ

        base_url = env.get(f"{prefix}URL", "").strip()
        if not base_url:
            raise ValueError(f"{prefix}URL is not set")

        return cls(
            base_url=base_url,
            root_path=env.get(f"{prefix}ROOT", "/").strip() or "/",
            timeout=float(env.get(f"{prefix}TIMEOUT", DEFAULT_TIMEOUT)),
            max_connections=int(env.get(f"{prefix}MAX_CONNECTIONS", DEFAULT_MAX_CONNECTIONS)),
            max_retries=int(env.get(f"{prefix}MAX_RETRIES", 0)),
        )

    def __str__(self):
        return (f"GatewayConfig{{base_url='{self.base_url}', root_path='{self.root_path}', "
                f"timeout={self.timeout}, max_connections={self.max_connections}, "
                f"max_retries={self.max_retries}}}")

    def __repr__(self):
        return self.__str__()
