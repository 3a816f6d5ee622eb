"""
HTTP客户端工具类
绑定到固定的网关基础URL和超时时间
"""

import logging
from typing import Any, Dict, Optional

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from ..domain.gateway_config import DEFAULT_MAX_CONNECTIONS, DEFAULT_TIMEOUT

logger: logging.Logger = logging.getLogger(__name__)


class GatewayHttpClient:
    """网关HTTP客户端"""

    def __init__(self, base_url: str, timeout: float = DEFAULT_TIMEOUT,
                 max_connections: int = DEFAULT_MAX_CONNECTIONS, max_retries: int = 0):
        """
        初始化HTTP客户端

        Args:
            base_url: 网关基础URL
            timeout: 请求超时时间（秒）
            max_connections: 最大连接数
            max_retries: 最大重试次数
        """
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.max_connections = max_connections
        self.max_retries = max_retries

        self.session: requests.Session = requests.Session()

        # 重试用尽后返回最后的响应，由 raise_for_status 统一报错
        retry_strategy: Retry = Retry(
            total=max_retries,
            backoff_factor=0.1,
            status_forcelist=[500, 502, 503, 504],
            raise_on_status=False
        )

        adapter: HTTPAdapter = HTTPAdapter(
            max_retries=retry_strategy,
            pool_connections=max_connections,
            pool_maxsize=max_connections
        )

        self.session.mount("http://", adapter)
        self.session.mount("https://", adapter)

    def url(self, endpoint: str) -> str:
        """拼接端点的完整URL"""
        return f"{self.base_url}/{endpoint.lstrip('/')}"

    def get(self, endpoint: str, params: Optional[Dict[str, Any]] = None,
            stream: bool = False) -> requests.Response:
        """
        发送GET请求

        Args:
            endpoint: 端点路径，如 /exists
            params: 查询参数
            stream: 是否以流的方式读取响应体

        Returns:
            requests.Response对象
        """
        url = self.url(endpoint)
        response = None
        try:
            response = self.session.get(url, params=params, stream=stream, timeout=self.timeout)
            response.raise_for_status()
            return response
        except requests.exceptions.RequestException as e:
            # 流式响应出错时释放连接
            if stream and response is not None:
                response.close()
            logger.error(f"GET request failed: {url}, params: {params}, error: {e}")
            raise

    def get_json(self, endpoint: str, params: Optional[Dict[str, Any]] = None) -> Any:
        """
        发送GET请求并解析JSON响应

        Returns:
            解析后的JSON数据
        """
        response = self.get(endpoint, params=params)
        try:
            return response.json()
        except requests.exceptions.JSONDecodeError as e:
            logger.error(f"Invalid JSON from {response.url}: {e}")
            raise

    def post(self, endpoint: str, data: Optional[Dict[str, Any]] = None,
             files: Optional[Dict[str, Any]] = None) -> requests.Response:
        """
        发送POST请求

        Args:
            endpoint: 端点路径
            data: 表单数据
            files: multipart文件字段

        Returns:
            requests.Response对象
        """
        url = self.url(endpoint)
        try:
            response = self.session.post(url, data=data, files=files, timeout=self.timeout)
            response.raise_for_status()
            return response
        except requests.exceptions.RequestException as e:
            logger.error(f"POST request failed: {url}, data: {data}, error: {e}")
            raise

    def close(self):
        """关闭Session"""
        self.session.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
