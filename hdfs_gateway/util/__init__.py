"""
工具模块 - HTTP客户端
"""

from .http_client_util import GatewayHttpClient

__all__ = [
    'GatewayHttpClient'
]
