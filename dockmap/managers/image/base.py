"""镜像记录与错误类型定义"""

from typing import Any, Dict, NamedTuple, Tuple

from ...constants import SENTINEL_TAG


class ImageError(Exception):
    """镜像处理错误基类"""
    pass


class ImageSourceError(ImageError):
    """镜像列表获取错误（无法读取输入或连接Docker）"""
    pass


class ImageInputError(ImageError):
    """镜像输入格式错误"""
    pass


class RootNotFoundError(ImageError):
    """找不到指定的根镜像"""

    def __init__(self, selector: str, message: str) -> None:
        super().__init__(message)
        self.selector = selector


class ImageRecord(NamedTuple):
    """镜像记录（构造后只读）"""
    id: str
    parent_id: str = ""
    repo_tags: Tuple[str, ...] = (SENTINEL_TAG,)
    virtual_size: int = 0
    size: int = 0
    created: int = 0

    @property
    def is_root(self) -> bool:
        """没有父镜像的镜像为根镜像"""
        return not self.parent_id

    @property
    def is_tagged(self) -> bool:
        """第一个标签不是占位标签即视为有标签"""
        return self.repo_tags[0] != SENTINEL_TAG

    def to_dict(self) -> Dict[str, Any]:
        """
        转换为Docker API风格的字典

        Returns:
            Dict[str, Any]: 与快照输入格式一致的字典
        """
        data: Dict[str, Any] = {"Id": self.id}
        if self.parent_id:
            data["ParentId"] = self.parent_id
        data["RepoTags"] = list(self.repo_tags)
        data["VirtualSize"] = self.virtual_size
        data["Size"] = self.size
        data["Created"] = self.created
        return data
