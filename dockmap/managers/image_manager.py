"""镜像管理器类 - 门面模式实现"""

import os
from typing import List, Optional, Sequence, Union

from docker.client import DockerClient
from docker.errors import DockerException
from loguru import logger

from ..constants import DEFAULT_RENDER_CONFIG, ERROR_MESSAGES, RenderConfig
from ..formatters import format_dot, format_short, format_tree
from .base_manager import BaseManager
from .image.base import ImageRecord, ImageSourceError
from .image.hierarchy import resolve_root
from .image.source import parse_images_json, translate_engine_images


class ImageManager(BaseManager):
    """镜像管理器类，用于获取镜像列表并生成各种视图"""

    def __init__(self, docker_client: Optional[DockerClient] = None, config: Optional[RenderConfig] = None) -> None:
        """
        初始化镜像管理器

        Args:
            docker_client: Docker客户端，可选
            config: 渲染配置，默认使用 DEFAULT_RENDER_CONFIG
        """
        super().__init__(docker_client)
        self.config = config or DEFAULT_RENDER_CONFIG

    def list_images(self) -> List[ImageRecord]:
        """
        从Docker引擎获取所有镜像（包括中间层）

        Returns:
            List[ImageRecord]: 镜像记录列表

        Raises:
            ImageSourceError: 无法连接Docker时抛出
        """
        try:
            entries = self.docker_client.api.images(all=True)
        except DockerException as e:
            if os.environ.get("IN_DOCKER"):
                raise ImageSourceError(ERROR_MESSAGES["docker_socket"]) from e
            raise ImageSourceError(ERROR_MESSAGES["docker_connection"].format(e)) from e

        images = translate_engine_images(entries)
        logger.debug(f"从Docker引擎获取 {len(images)} 个镜像")
        return images

    def load_images(self, raw: Union[str, bytes]) -> List[ImageRecord]:
        """
        从JSON快照加载镜像

        Raises:
            ImageInputError: JSON无效时抛出
        """
        return parse_images_json(raw)

    def render_tree(
        self,
        images: Sequence[ImageRecord],
        root: Optional[str] = None,
        no_trunc: Optional[bool] = None,
    ) -> str:
        """
        生成镜像树

        Args:
            images: 镜像记录列表
            root: 作为树根的镜像ID前缀或仓库名，可选
            no_trunc: 是否显示完整ID，为None时使用配置

        Returns:
            str: 树形文本

        Raises:
            RootNotFoundError: 找不到指定的根镜像时抛出
        """
        if no_trunc is None:
            no_trunc = self.config["images"]["no_trunc"]
        start_image = resolve_root(root, images)
        return format_tree(images, start_image, no_trunc)

    def render_dot(self, images: Sequence[ImageRecord]) -> str:
        """生成Graphviz dot文本"""
        return format_dot(images, self.config["dot"])

    def render_short(self, images: Sequence[ImageRecord]) -> str:
        """生成按仓库分组的标签摘要"""
        return format_short(images)
