"""CLI命令行接口模块"""

import typer
from loguru import logger

from dockmap.cli_utils import handle_errors, read_snapshot, select_mode
from dockmap.managers.config_manager import ConfigManager
from dockmap.managers.image_manager import ImageManager

# 创建CLI应用
app = typer.Typer(
    help="Docker镜像层级可视化工具",
    no_args_is_help=True,
    add_completion=False,
    rich_markup_mode="rich"
)


@app.command("images")
@handle_errors
def show_images(
    root: str = typer.Argument(None, help="作为树根的镜像ID前缀或仓库名，仅用于 --tree"),
    dot: bool = typer.Option(False, "-d", "--dot", help="以Graphviz dot格式显示镜像"),
    tree: bool = typer.Option(False, "-t", "--tree", help="以树形显示镜像"),
    short: bool = typer.Option(False, "-s", "--short", help="显示镜像摘要（仓库名和标签列表）"),
    no_trunc: bool = typer.Option(False, "-n", "--no-trunc", help="不截断镜像ID"),
    input_file: str = typer.Option(None, "-i", "--input", help="JSON镜像列表文件，- 表示标准输入"),
    config_file: str = typer.Option(None, "-c", "--config", help="配置文件路径"),
    verbose: bool = typer.Option(False, "-v", "--verbose", help="显示调试日志"),
):
    """可视化Docker镜像"""
    if verbose:
        from dockmap import configure_logging
        configure_logging("DEBUG")

    # 先检查参数，再获取镜像
    mode = select_mode(dot, tree, short)
    if root and mode != "tree":
        logger.warning(f"镜像 {root} 仅在 --tree 模式下使用，已忽略")

    config = ConfigManager(config_file).load_config()
    image_manager = ImageManager(config=config)

    snapshot = read_snapshot(input_file)
    if snapshot is None:
        images = image_manager.list_images()
    else:
        images = image_manager.load_images(snapshot)

    if mode == "dot":
        output = image_manager.render_dot(images)
    elif mode == "tree":
        output = image_manager.render_tree(images, root, no_trunc or None)
    else:
        output = image_manager.render_short(images)

    typer.echo(output, nl=False)


@app.command("version")
def show_version():
    """显示版本号"""
    from dockmap import __version__
    typer.echo(__version__)


def main():
    """主入口函数"""
    app()


if __name__ == "__main__":
    main()
