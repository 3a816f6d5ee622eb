"""
测试夹具 - 内存中的HDFS网关模拟服务器
"""

import json
import logging
import posixpath
import threading
import time
from email.parser import BytesParser
from email.policy import default as default_policy
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer
from urllib.parse import parse_qs, urlsplit

import pytest

logger = logging.getLogger(__name__)


class MockGatewayState:
    """模拟网关的存储状态"""

    def __init__(self):
        self.files = {}  # 绝对路径 -> (内容, mtime)
        self.directories = {"/"}
        self.requests = []  # (方法, 端点, 参数)
        self.lock = threading.Lock()

    def add_directory(self, path: str):
        while path not in self.directories:
            self.directories.add(path)
            path = posixpath.dirname(path)

    def add_file(self, path: str, contents: bytes):
        self.add_directory(posixpath.dirname(path))
        self.files[path] = (contents, int(time.time()))

    def remove(self, path: str):
        prefix = path.rstrip("/") + "/"
        self.files.pop(path, None)
        self.directories.discard(path)
        for name in [p for p in self.files if p.startswith(prefix)]:
            del self.files[name]
        for name in [d for d in self.directories if d.startswith(prefix)]:
            self.directories.discard(name)

    def path_type(self, path: str) -> str:
        if path in self.files:
            return "file"
        if path in self.directories:
            return "directory"
        return "none"

    def file_record(self, path: str) -> dict:
        contents, mtime = self.files[path]
        return {"path": path, "size": len(contents), "mtime": mtime, "is_file": True}

    def list(self, path: str, deep: bool) -> list:
        if path in self.files:
            return [self.file_record(path)]
        if path not in self.directories:
            return []

        prefix = path.rstrip("/") + "/"
        records = []
        for name in self.files:
            if name.startswith(prefix) and (deep or posixpath.dirname(name) == path):
                records.append(self.file_record(name))
        for name in self.directories:
            if name != path and name.startswith(prefix) and (deep or posixpath.dirname(name) == path):
                records.append({"path": name, "size": 0, "mtime": 0, "is_file": False})
        return sorted(records, key=lambda record: record["path"])


class MockGatewayHandler(BaseHTTPRequestHandler):
    """模拟网关处理器"""

    state: MockGatewayState = None

    def do_GET(self):
        """处理GET请求"""
        parts = urlsplit(self.path)
        query = {key: values[0] for key, values in parse_qs(parts.query).items()}
        self._record("GET", parts.path, query)

        if parts.path == "/exists":
            self.send_json({"path_type": self.state.path_type(query.get("path", ""))})
        elif parts.path == "/download":
            self.handle_download(query.get("path", ""))
        elif parts.path == "/list":
            deep = query.get("deep", "false") == "true"
            self.send_json(self.state.list(query.get("path", ""), deep))
        else:
            self.send_error(404, "Not Found")

    def do_POST(self):
        """处理POST请求"""
        parts = urlsplit(self.path)
        body = self.rfile.read(int(self.headers.get("Content-Length", 0)))

        if parts.path == "/upload":
            fields = self.parse_multipart(body)
            self._record("POST", parts.path, {"path": fields["path"].decode(), "filename": fields["filename"]})
            with self.state.lock:
                self.state.add_file(fields["path"].decode(), fields["file"])
        elif parts.path in ("/delete", "/mkdir"):
            form = {key: values[0] for key, values in parse_qs(body.decode()).items()}
            self._record("POST", parts.path, form)
            with self.state.lock:
                if parts.path == "/delete":
                    self.state.remove(form["path"])
                else:
                    self.state.add_directory(form["path"])
        else:
            self.send_error(404, "Not Found")
            return

        self.send_json({"success": True})

    def handle_download(self, path: str):
        if path not in self.state.files:
            self.send_error(404, "Not Found")
            return
        contents, _ = self.state.files[path]
        self.send_response(200)
        self.send_header("Content-Type", "application/octet-stream")
        self.send_header("Content-Length", str(len(contents)))
        self.end_headers()
        self.wfile.write(contents)

    def parse_multipart(self, body: bytes) -> dict:
        header = f"Content-Type: {self.headers['Content-Type']}\r\n\r\n".encode()
        message = BytesParser(policy=default_policy).parsebytes(header + body)
        fields = {}
        for part in message.iter_parts():
            name = part.get_param("name", header="content-disposition")
            fields[name] = part.get_payload(decode=True)
            if name == "file":
                fields["filename"] = part.get_filename()
        return fields

    def send_json(self, data):
        payload = json.dumps(data).encode()
        self.send_response(200)
        self.send_header("Content-Type", "application/json")
        self.send_header("Content-Length", str(len(payload)))
        self.end_headers()
        self.wfile.write(payload)

    def _record(self, method: str, endpoint: str, params: dict):
        with self.state.lock:
            self.state.requests.append((method, endpoint, params))

    def log_message(self, format, *args):
        """重写日志方法，减少输出"""
        logger.debug(f"Mock gateway: {format % args}")


@pytest.fixture
def mock_gateway():
    """启动模拟网关，返回 (基础URL, 状态)"""
    state = MockGatewayState()
    handler = type("BoundMockGatewayHandler", (MockGatewayHandler,), {"state": state})
    server = ThreadingHTTPServer(("127.0.0.1", 0), handler)
    thread = threading.Thread(target=server.serve_forever, daemon=True)
    thread.start()

    host, port = server.server_address[:2]
    try:
        yield f"http://{host}:{port}", state
    finally:
        server.shutdown()
        server.server_close()
