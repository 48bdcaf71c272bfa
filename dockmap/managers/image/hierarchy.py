"""镜像层级结构重建与根镜像解析"""

from typing import Dict, List, NamedTuple, Optional, Sequence

from loguru import logger

from ...constants import ERROR_MESSAGES
from .base import ImageRecord, RootNotFoundError
from .utils import truncate_id, with_default_tag


class ImageHierarchy(NamedTuple):
    """
    镜像层级索引

    每次渲染时重新构建，不做缓存。不检测循环引用：若输入中父子关系成环，
    递归遍历会抛出 RecursionError。
    """
    roots: List[ImageRecord]
    by_parent: Dict[str, List[ImageRecord]]

    def children_of(self, image: ImageRecord) -> List[ImageRecord]:
        """返回直接子镜像，没有子镜像时返回空列表"""
        return self.by_parent.get(image.id, [])


def build_hierarchy(images: Sequence[ImageRecord]) -> ImageHierarchy:
    """
    按父镜像ID分组，并找出所有根镜像

    根镜像和子镜像都保持输入中的相对顺序。

    Args:
        images: 镜像记录列表

    Returns:
        ImageHierarchy: 根镜像列表和父ID到子镜像列表的映射
    """
    roots: List[ImageRecord] = []
    by_parent: Dict[str, List[ImageRecord]] = {}

    for image in images:
        if image.is_root:
            roots.append(image)
        else:
            by_parent.setdefault(image.parent_id, []).append(image)

    known_ids = {image.id for image in images}
    for parent_id, children in by_parent.items():
        if parent_id not in known_ids:
            logger.warning(
                f"父镜像 {truncate_id(parent_id)} 不存在，"
                f"{len(children)} 个子镜像不会出现在树中"
            )

    logger.debug(f"共 {len(images)} 个镜像，{len(roots)} 个根镜像")
    return ImageHierarchy(roots, by_parent)


def _matches(image: ImageRecord, selector: str, reference: str) -> bool:
    """判断镜像是否与选择器匹配"""
    # ID前缀（包含完整ID）
    if image.id.startswith(selector):
        return True

    # 仓库名，未带标签时按 :latest 匹配
    if image.is_tagged and reference in image.repo_tags:
        return True

    return selector == truncate_id(image.id)


def resolve_root(selector: Optional[str], images: Sequence[ImageRecord]) -> Optional[ImageRecord]:
    """
    将用户指定的ID前缀或 "仓库名:标签" 解析为具体镜像

    Args:
        selector: 镜像ID前缀或仓库名，为空表示不指定根镜像
        images: 镜像记录列表

    Returns:
        Optional[ImageRecord]: 匹配的第一个镜像，未指定时返回None

    Raises:
        RootNotFoundError: 没有镜像与选择器匹配时抛出
    """
    if not selector:
        return None

    reference = with_default_tag(selector)
    for image in images:
        if _matches(image, selector, reference):
            logger.debug(f"根镜像 {selector} 解析为 {truncate_id(image.id)}")
            return image

    raise RootNotFoundError(selector, ERROR_MESSAGES["root_not_found"].format(selector))
