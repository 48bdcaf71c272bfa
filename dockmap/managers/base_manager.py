"""基础管理器类"""

from typing import Optional

import docker
from docker.client import DockerClient
from loguru import logger


class BaseManager:
    """所有管理器类的基类，包含共享的属性和方法"""

    _docker_client: Optional[DockerClient]

    def __init__(self, docker_client: Optional[DockerClient] = None) -> None:
        """
        初始化基础管理器

        Args:
            docker_client: Docker客户端，为None时在首次使用时通过环境变量创建
        """
        self._docker_client = docker_client

    @property
    def docker_client(self) -> DockerClient:
        """获取Docker客户端，只在需要访问引擎时才连接"""
        if self._docker_client is None:
            try:
                self._docker_client = docker.from_env()
                logger.debug("Docker客户端初始化成功")
            except Exception as e:
                logger.debug(f"Docker客户端初始化失败: {e}")
                raise
        return self._docker_client
