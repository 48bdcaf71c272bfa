"""Docker镜像层级相关功能模块

该子包包含镜像记录定义、输入解析、层级重建和根镜像解析等功能。
"""

from .base import ImageError, ImageInputError, ImageRecord, ImageSourceError, RootNotFoundError
from .hierarchy import ImageHierarchy, build_hierarchy, resolve_root
from .source import parse_images_json, record_from_dict, translate_engine_images
from .utils import human_size, split_repo_tag, truncate_id

__all__ = [
    "ImageError",
    "ImageInputError",
    "ImageRecord",
    "ImageSourceError",
    "RootNotFoundError",
    "ImageHierarchy",
    "build_hierarchy",
    "resolve_root",
    "parse_images_json",
    "record_from_dict",
    "translate_engine_images",
    "human_size",
    "split_repo_tag",
    "truncate_id",
]
