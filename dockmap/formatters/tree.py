"""镜像树格式化模块"""

from typing import List, Optional, Sequence

from ..managers.image.base import ImageRecord
from ..managers.image.hierarchy import ImageHierarchy, build_hierarchy
from ..managers.image.utils import display_id, human_size

BRANCH = "├─"
LAST_BRANCH = "└─"
GUIDE = "│ "
BLANK = "  "


def format_tree(
    images: Sequence[ImageRecord],
    start_image: Optional[ImageRecord] = None,
    no_trunc: bool = False,
) -> str:
    """
    将镜像列表格式化为ASCII树

    Args:
        images: 镜像记录列表
        start_image: 作为根节点的镜像，为None时从所有根镜像开始
        no_trunc: 是否显示完整镜像ID

    Returns:
        str: 树形文本，每个镜像一行
    """
    hierarchy = build_hierarchy(images)
    starts = [start_image] if start_image is not None else hierarchy.roots

    lines: List[str] = []
    _walk_tree(lines, starts, hierarchy, "", no_trunc)
    return "".join(lines)


def _walk_tree(
    lines: List[str],
    images: Sequence[ImageRecord],
    hierarchy: ImageHierarchy,
    prefix: str,
    no_trunc: bool,
) -> None:
    """深度优先遍历，先输出节点再输出子树"""
    last_index = len(images) - 1
    for index, image in enumerate(images):
        if index == last_index:
            connector, indent = LAST_BRANCH, BLANK
        else:
            connector, indent = BRANCH, GUIDE

        lines.append(_format_node(image, prefix + connector, no_trunc))

        children = hierarchy.children_of(image)
        if children:
            _walk_tree(lines, children, hierarchy, prefix + indent, no_trunc)


def _format_node(image: ImageRecord, prefix: str, no_trunc: bool) -> str:
    line = f"{prefix}{display_id(image.id, no_trunc)} Virtual Size: {human_size(image.virtual_size)}"
    if image.is_tagged:
        return f"{line} Tags: {', '.join(image.repo_tags)}\n"
    return f"{line}\n"
