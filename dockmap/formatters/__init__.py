"""镜像信息格式化模块"""

from .dot import format_dot
from .short import format_short, group_tags_by_repo
from .tree import format_tree

__all__ = [
    "format_dot",
    "format_short",
    "format_tree",
    "group_tags_by_repo",
]
