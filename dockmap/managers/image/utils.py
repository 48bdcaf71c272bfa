"""镜像管理工具函数"""

from typing import Iterable, Tuple

from ...constants import DEFAULT_TAG, SENTINEL_TAG, SHORT_ID_LENGTH, SIZE_UNITS


def human_size(raw: int) -> str:
    """
    将字节数转换为易读的大小字符串（十进制单位）

    Args:
        raw: 字节数

    Returns:
        str: 例如 "1.5 MB"
    """
    value = float(raw)
    index = 0
    # 超过TB时不再继续换算，数值停在TB上（例如 "5000.0 TB"），不会因单位越界而出错
    while value >= 1000 and index < len(SIZE_UNITS) - 1:
        value = value / 1000
        index += 1
    return f"{value:.1f} {SIZE_UNITS[index]}"


def truncate_id(image_id: str) -> str:
    """截取镜像ID的前12位"""
    return image_id[:SHORT_ID_LENGTH]


def display_id(image_id: str, no_trunc: bool = False) -> str:
    """根据是否截断返回用于显示的镜像ID"""
    return image_id if no_trunc else truncate_id(image_id)


def split_repo_tag(repo_tag: str) -> Tuple[str, str]:
    """
    解析 "仓库名:标签"，以最后一个冒号分割

    仓库名中可能包含带端口的仓库地址，例如 "registry:5000/myrepo:1.0"。

    Args:
        repo_tag: 完整标签

    Returns:
        Tuple[str, str]: 仓库名和标签
    """
    repository, _, tag = repo_tag.rpartition(":")
    return repository, tag


def has_tag_suffix(reference: str) -> bool:
    """判断镜像引用是否已带标签（最后一个"/"之后是否有冒号）"""
    return ":" in reference.rsplit("/", 1)[-1]


def with_default_tag(reference: str) -> str:
    """没有标签时补上 ":latest" """
    if has_tag_suffix(reference):
        return reference
    return f"{reference}:{DEFAULT_TAG}"


def real_tags(repo_tags: Iterable[str]) -> Tuple[str, ...]:
    """过滤掉占位标签"""
    return tuple(tag for tag in repo_tags if tag != SENTINEL_TAG)
