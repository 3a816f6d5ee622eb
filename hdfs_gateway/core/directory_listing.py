"""
目录列表
"""

import logging
from typing import Any, Callable, Dict, Iterator

from ..domain.storage_attributes import StorageAttributes
from ..exceptions import UnableToListContents
from ..util.http_client_util import GatewayHttpClient

logger = logging.getLogger(__name__)


class DirectoryListing:
    """
    惰性、可重复迭代的目录列表

    构造时不发请求；每次迭代都会向 /list 发一次新的请求，
    并按网关返回的顺序逐条转换为属性对象。
    """

    def __init__(self, http_client: GatewayHttpClient, location: str, deep: bool,
                 convert: Callable[[Dict[str, Any]], StorageAttributes]):
        self.http_client = http_client
        self.location = location
        self.deep = deep
        self._convert = convert

    def __iter__(self) -> Iterator[StorageAttributes]:
        params = {"path": self.location, "deep": "true" if self.deep else "false"}
        entries = self.http_client.get_json("/list", params=params)
        if not isinstance(entries, list):
            raise UnableToListContents(self.location, f"Expected a JSON array, got {type(entries).__name__}")

        logger.debug(f"Listing {self.location} (deep={self.deep}): {len(entries)} entries")
        for entry in entries:
            yield self._convert(entry)

    def __repr__(self):
        return f"DirectoryListing{{location='{self.location}', deep={self.deep}}}"
