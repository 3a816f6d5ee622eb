"""
HDFS网关客户端命令行接口
"""

import argparse
import logging
import os
import shutil
import sys
from datetime import datetime, timezone
from typing import List, Optional

from .core.hdfs_adapter import HDFSAdapter
from .domain.gateway_config import DEFAULT_ENV_PREFIX, GatewayConfig
from .domain.path_type import PathType
from .exceptions import HDFSGatewayError, TransportError, UnableToRetrieveMetadata


def setup_logging(verbose: bool = False):
    """设置日志"""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )


def _format_mtime(mtime: Optional[int]) -> str:
    if mtime is None:
        return "-"
    return datetime.fromtimestamp(mtime, tz=timezone.utc).strftime("%Y-%m-%d %H:%M:%S")


def ls_command(fs: HDFSAdapter, path: str, recursive: bool = False):
    """列出目录内容"""
    print(f"列出目录: {path or '/'}")
    count = 0
    for item in fs.list_contents(path, deep=recursive):
        count += 1
        if item.is_file():
            size_str = f"{item.get_file_size()} bytes"
        else:
            size_str = "目录"
        print(f"    {item.get_path()} ({size_str}, {_format_mtime(item.get_last_modified())})")

    if count == 0:
        print("  目录为空")
    else:
        print(f"  共 {count} 个项目")


def stat_command(fs: HDFSAdapter, path: str):
    """显示文件状态"""
    print(f"文件状态: {path}")
    if not fs.file_exists(path):
        print("  文件不存在")
        return

    print(f"  大小: {fs.file_size(path).get_file_size()} bytes")
    print(f"  修改时间: {_format_mtime(fs.last_modified(path).get_last_modified())}")
    try:
        print(f"  MIME类型: {fs.mime_type(path).get_mime_type()}")
    except UnableToRetrieveMetadata:
        print("  MIME类型: 未知")


def cat_command(fs: HDFSAdapter, path: str):
    """输出文件内容"""
    with fs.read_stream(path) as stream:
        for chunk in stream:
            sys.stdout.buffer.write(chunk)
    sys.stdout.buffer.flush()


def put_command(fs: HDFSAdapter, local_path: str, remote_path: str):
    """上传本地文件"""
    print(f"上传: {local_path} -> {remote_path}")
    with open(local_path, 'rb') as f:
        fs.write_stream(remote_path, f)
    print("  ✓ 上传成功")


def get_command(fs: HDFSAdapter, remote_path: str, local_path: str):
    """下载文件到本地"""
    print(f"下载: {remote_path} -> {local_path}")
    with fs.read_stream(remote_path) as stream, open(local_path, 'wb') as f:
        shutil.copyfileobj(stream, f)
    print("  ✓ 下载成功")


def mkdir_command(fs: HDFSAdapter, path: str):
    """创建目录"""
    print(f"创建目录: {path}")
    fs.create_directory(path)
    print("  ✓ 创建成功")


def rm_command(fs: HDFSAdapter, path: str, directory: bool = False):
    """删除文件或目录"""
    print(f"删除: {path}")
    if directory:
        fs.delete_directory(path)
    else:
        fs.delete(path)
    print("  ✓ 删除成功")


def exists_command(fs: HDFSAdapter, path: str) -> bool:
    """检查路径是否存在"""
    path_type = fs.path_type(path)
    if path_type == PathType.FILE:
        print(f"{path}: 文件")
        return True
    if path_type == PathType.DIRECTORY:
        print(f"{path}: 目录")
        return True
    print(f"{path}: 不存在")
    return False


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="hdfs-gateway", description="HDFS网关客户端命令行工具")
    parser.add_argument("--verbose", "-v", action="store_true", help="详细输出")
    parser.add_argument("--url", help="网关基础URL（默认读取 HDFS_GATEWAY_URL）")
    parser.add_argument("--root", help="HDFS根目录（默认读取 HDFS_GATEWAY_ROOT）")
    parser.add_argument("--timeout", type=float, help="请求超时时间（秒）")

    subparsers = parser.add_subparsers(dest="command", help="可用命令")

    ls_parser = subparsers.add_parser("ls", help="列出目录内容")
    ls_parser.add_argument("path", nargs="?", default="", help="目录路径")
    ls_parser.add_argument("--recursive", "-r", action="store_true", help="递归列出")

    stat_parser = subparsers.add_parser("stat", help="显示文件状态")
    stat_parser.add_argument("path", help="文件路径")

    cat_parser = subparsers.add_parser("cat", help="输出文件内容")
    cat_parser.add_argument("path", help="文件路径")

    put_parser = subparsers.add_parser("put", help="上传本地文件")
    put_parser.add_argument("local_path", help="本地文件路径")
    put_parser.add_argument("remote_path", help="远程文件路径")

    get_parser = subparsers.add_parser("get", help="下载文件到本地")
    get_parser.add_argument("remote_path", help="远程文件路径")
    get_parser.add_argument("local_path", help="本地文件路径")

    mkdir_parser = subparsers.add_parser("mkdir", help="创建目录")
    mkdir_parser.add_argument("path", help="目录路径")

    rm_parser = subparsers.add_parser("rm", help="删除文件")
    rm_parser.add_argument("path", help="文件路径")

    rmdir_parser = subparsers.add_parser("rmdir", help="删除目录")
    rmdir_parser.add_argument("path", help="目录路径")

    exists_parser = subparsers.add_parser("exists", help="检查路径是否存在")
    exists_parser.add_argument("path", help="路径")

    return parser


def build_config(args: argparse.Namespace) -> GatewayConfig:
    """命令行参数优先，其余取自环境变量"""
    env = dict(os.environ)
    if args.url:
        env[f"{DEFAULT_ENV_PREFIX}URL"] = args.url
    if args.root is not None:
        env[f"{DEFAULT_ENV_PREFIX}ROOT"] = args.root
    if args.timeout is not None:
        env[f"{DEFAULT_ENV_PREFIX}TIMEOUT"] = str(args.timeout)
    return GatewayConfig.from_env(env)


def main(argv: Optional[List[str]] = None) -> int:
    """主函数"""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 0

    setup_logging(args.verbose)

    try:
        config = build_config(args)
    except ValueError as e:
        print(f"配置错误: {e}")
        return 1

    with HDFSAdapter(config) as fs:
        try:
            if args.command == "ls":
                ls_command(fs, args.path, args.recursive)
            elif args.command == "stat":
                stat_command(fs, args.path)
            elif args.command == "cat":
                cat_command(fs, args.path)
            elif args.command == "put":
                put_command(fs, args.local_path, args.remote_path)
            elif args.command == "get":
                get_command(fs, args.remote_path, args.local_path)
            elif args.command == "mkdir":
                mkdir_command(fs, args.path)
            elif args.command == "rm":
                rm_command(fs, args.path)
            elif args.command == "rmdir":
                rm_command(fs, args.path, directory=True)
            elif args.command == "exists":
                if not exists_command(fs, args.path):
                    return 1
        except (HDFSGatewayError, TransportError, OSError) as e:
            print(f"命令执行失败: {e}")
            return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
