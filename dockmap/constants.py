"""常量配置模块"""

from typing import List, TypedDict

# 镜像相关
SENTINEL_TAG: str = "<none>:<none>"  # 无标签镜像的占位标签
SHORT_ID_LENGTH: int = 12
DEFAULT_TAG: str = "latest"
ID_ALGORITHM_PREFIX: str = "sha256:"

# 大小单位（十进制，每级1000）
SIZE_UNITS: List[str] = ["B", "KB", "MB", "GB", "TB"]

# 文件相关
CONFIG_FILE: str = "dockmap.json"
CONFIG_ENV_VAR: str = "DOCKMAP_CONFIG"


# 渲染默认配置
class ImagesConfig(TypedDict):
    no_trunc: bool


class DotConfig(TypedDict):
    graph_name: str
    shape: str
    fillcolor: str
    style: str


class RenderConfig(TypedDict):
    images: ImagesConfig
    dot: DotConfig


DEFAULT_RENDER_CONFIG: RenderConfig = {
    "images": {"no_trunc": False},
    "dot": {
        "graph_name": "docker",
        "shape": "box",
        "fillcolor": "paleturquoise",
        "style": "filled,rounded",
    },
}


# 退出码
class ExitCodes(TypedDict):
    error: int
    usage: int


EXIT_CODES: ExitCodes = {"error": 1, "usage": 2}


# 错误消息
class ErrorMessages(TypedDict):
    mode_required: str
    mode_conflict: str
    root_not_found: str
    invalid_input: str
    docker_connection: str
    docker_socket: str
    config_validation: str


ERROR_MESSAGES: ErrorMessages = {
    "mode_required": "Please specify either --dot, --tree, or --short",
    "mode_conflict": "--dot, --tree and --short are mutually exclusive",
    "root_not_found": "Unable to find image {}.",
    "invalid_input": "Error reading JSON: {}",
    "docker_connection": "Unable to connect: {}\nFor help, run 'dmap --help'",
    "docker_socket": (
        "Unable to access Docker socket, please run like this:\n"
        "  docker run --rm -v /var/run/docker.sock:/var/run/docker.sock dockmap images <args>\n"
        "For more help, run 'dmap --help'"
    ),
    "config_validation": "配置验证失败: {}",
}
