"""镜像摘要格式化模块"""

from typing import Dict, List, Sequence

from ..managers.image.base import ImageRecord
from ..managers.image.utils import real_tags, split_repo_tag


def group_tags_by_repo(images: Sequence[ImageRecord]) -> Dict[str, List[str]]:
    """
    按仓库名分组所有标签

    Args:
        images: 镜像记录列表

    Returns:
        Dict[str, List[str]]: 仓库名到标签列表的映射，标签保持输入顺序
    """
    by_repo: Dict[str, List[str]] = {}
    for image in images:
        for repo_tag in real_tags(image.repo_tags):
            repository, tag = split_repo_tag(repo_tag)
            by_repo.setdefault(repository, []).append(tag)
    return by_repo


def format_short(images: Sequence[ImageRecord]) -> str:
    """格式化为 "仓库名: 标签1, 标签2" 的摘要，每个仓库一行"""
    return "".join(
        f"{repository}: {', '.join(tags)}\n"
        for repository, tags in group_tags_by_repo(images).items()
    )
