"""
基础使用示例
演示HDFS网关客户端的基本用法

运行前设置 HDFS_GATEWAY_URL，例如 http://localhost:5000
"""

import logging

from hdfs_gateway import GatewayConfig, HDFSAdapter, UnableToRetrieveMetadata

# 配置日志
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)


def main():
    """主函数"""
    print("=== HDFS网关客户端基础使用示例 ===\n")

    config = GatewayConfig.from_env()

    with HDFSAdapter(config) as fs:
        # 1. 创建目录
        print("1. 创建目录...")
        fs.create_directory("demo_dir")
        print(f"   ✓ 目录存在: {fs.directory_exists('demo_dir')}")

        # 2. 写入文件
        print("\n2. 写入文件...")
        fs.write("demo_dir/test.txt", "Hello, HDFS! 这是一个测试文件。")
        print("   ✓ 文件写入成功: demo_dir/test.txt")

        # 3. 流式读取文件
        print("\n3. 读取文件...")
        with fs.read_stream("demo_dir/test.txt") as stream:
            content = b"".join(stream)
        print(f"   ✓ 文件内容: {content.decode('utf-8')}")

        # 4. 获取文件信息
        print("\n4. 获取文件信息...")
        print(f"   ✓ 文件大小: {fs.file_size('demo_dir/test.txt').get_file_size()} bytes")
        print(f"   ✓ 修改时间: {fs.last_modified('demo_dir/test.txt').get_last_modified()}")
        try:
            print(f"   ✓ MIME类型: {fs.mime_type('demo_dir/test.txt').get_mime_type()}")
        except UnableToRetrieveMetadata as e:
            print(f"   ✗ {e}")

        # 5. 列出目录内容
        print("\n5. 列出目录内容...")
        for item in fs.list_contents("demo_dir", deep=True):
            print(f"   - {item}")

        # 6. 清理
        print("\n6. 清理...")
        fs.delete_directory("demo_dir")
        print(f"   ✓ 目录已删除: {not fs.directory_exists('demo_dir')}")


if __name__ == "__main__":
    main()
