"""镜像列表输入解析

支持两种来源：
1. 预先序列化的JSON快照（例如从 `/images/json?all=1` 接口导出的镜像列表）
2. Docker引擎 `/images/json?all=1` 接口返回的数据
"""

import json
from typing import Any, Dict, Iterable, List, Union

from loguru import logger

from ...constants import ERROR_MESSAGES, ID_ALGORITHM_PREFIX, SENTINEL_TAG
from .base import ImageInputError, ImageRecord


def _get_int(entry: Dict[str, Any], key: str) -> int:
    value = entry.get(key)
    if value is None:
        return 0
    # bool 是 int 的子类，需要单独排除
    if isinstance(value, bool) or not isinstance(value, int):
        raise ImageInputError(ERROR_MESSAGES["invalid_input"].format(f"{key} 应为整数: {value!r}"))
    return value


def _get_str(entry: Dict[str, Any], key: str) -> str:
    value = entry.get(key)
    if value is None:
        return ""
    if not isinstance(value, str):
        raise ImageInputError(ERROR_MESSAGES["invalid_input"].format(f"{key} 应为字符串: {value!r}"))
    return value


def record_from_dict(entry: Any) -> ImageRecord:
    """
    将单个API风格的字典转换为镜像记录

    Args:
        entry: 包含 Id、ParentId、RepoTags 等字段的字典

    Returns:
        ImageRecord: 镜像记录，没有标签时使用占位标签

    Raises:
        ImageInputError: 字段缺失或类型错误时抛出
    """
    if not isinstance(entry, dict):
        raise ImageInputError(ERROR_MESSAGES["invalid_input"].format(f"镜像条目应为对象: {entry!r}"))

    image_id = _get_str(entry, "Id")
    if not image_id:
        raise ImageInputError(ERROR_MESSAGES["invalid_input"].format("镜像缺少 Id 字段"))

    repo_tags = entry.get("RepoTags")
    if repo_tags is None:
        repo_tags = []
    if not isinstance(repo_tags, list) or not all(isinstance(tag, str) for tag in repo_tags):
        raise ImageInputError(ERROR_MESSAGES["invalid_input"].format(f"RepoTags 应为字符串数组: {repo_tags!r}"))

    return ImageRecord(
        id=image_id,
        parent_id=_get_str(entry, "ParentId"),
        repo_tags=tuple(repo_tags) or (SENTINEL_TAG,),
        virtual_size=_get_int(entry, "VirtualSize"),
        size=_get_int(entry, "Size"),
        created=_get_int(entry, "Created"),
    )


def records_from_dicts(entries: Iterable[Any]) -> List[ImageRecord]:
    """
    批量转换镜像记录，并检查ID唯一性

    Raises:
        ImageInputError: 条目无效或ID重复时抛出
    """
    images: List[ImageRecord] = []
    seen = set()
    for entry in entries:
        image = record_from_dict(entry)
        if image.id in seen:
            raise ImageInputError(ERROR_MESSAGES["invalid_input"].format(f"镜像ID重复: {image.id}"))
        seen.add(image.id)
        images.append(image)
    return images


def parse_images_json(raw: Union[str, bytes]) -> List[ImageRecord]:
    """
    解析JSON格式的镜像列表快照

    Args:
        raw: JSON文本，顶层必须是数组

    Returns:
        List[ImageRecord]: 镜像记录列表

    Raises:
        ImageInputError: JSON无效或结构不符合要求时抛出
    """
    try:
        data = json.loads(raw)
    except ValueError as e:
        raise ImageInputError(ERROR_MESSAGES["invalid_input"].format(e)) from e

    if not isinstance(data, list):
        raise ImageInputError(ERROR_MESSAGES["invalid_input"].format("顶层应为数组"))

    images = records_from_dicts(data)
    logger.debug(f"从JSON快照读取 {len(images)} 个镜像")
    return images


def _strip_algorithm(image_id: str) -> str:
    """去掉引擎返回的 "sha256:" 前缀"""
    if image_id.startswith(ID_ALGORITHM_PREFIX):
        return image_id[len(ID_ALGORITHM_PREFIX):]
    return image_id


def translate_engine_images(entries: Iterable[Dict[str, Any]]) -> List[ImageRecord]:
    """
    将Docker引擎返回的镜像列表逐字段转换为镜像记录

    新版本API不再返回 VirtualSize，此时使用 Size。

    Args:
        entries: `APIClient.images(all=True)` 的返回值

    Returns:
        List[ImageRecord]: 镜像记录列表
    """
    normalized = []
    for entry in entries:
        item = dict(entry)
        item["Id"] = _strip_algorithm(item.get("Id") or "")
        item["ParentId"] = _strip_algorithm(item.get("ParentId") or "")
        if item.get("VirtualSize") is None:
            item["VirtualSize"] = item.get("Size")
        normalized.append(item)
    return records_from_dicts(normalized)
