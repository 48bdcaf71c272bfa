"""Graphviz dot 格式化模块"""

from typing import Optional, Sequence

from ..constants import DEFAULT_RENDER_CONFIG, DotConfig
from ..managers.image.base import ImageRecord
from ..managers.image.utils import truncate_id


def format_dot(images: Sequence[ImageRecord], dot_config: Optional[DotConfig] = None) -> str:
    """
    将镜像列表格式化为Graphviz有向图

    所有根镜像都通过不可见的边连到虚拟节点 base 上，有标签的镜像
    单独声明节点样式。

    Args:
        images: 镜像记录列表
        dot_config: 图名称和节点样式，默认使用 DEFAULT_RENDER_CONFIG["dot"]

    Returns:
        str: dot 格式文本
    """
    config = dot_config or DEFAULT_RENDER_CONFIG["dot"]

    lines = [f"digraph {config['graph_name']} {{\n"]
    for image in images:
        short_id = truncate_id(image.id)
        if image.is_root:
            lines.append(f' base -> "{short_id}" [style=invis]\n')
        else:
            lines.append(f' "{truncate_id(image.parent_id)}" -> "{short_id}"\n')

        if image.is_tagged:
            label = "\\n".join([short_id, *image.repo_tags])
            lines.append(
                f' "{short_id}" [label="{label}",shape={config["shape"]},'
                f'fillcolor="{config["fillcolor"]}",style="{config["style"]}"];\n'
            )

    lines.append(" base [style=invisible]\n}\n")
    return "".join(lines)
