"""测试配置和共享fixture"""

import json

import pytest

from dockmap.managers.image.base import ImageRecord


def make_id(char):
    """生成64位镜像ID"""
    return char * 64


@pytest.fixture
def sample_images():
    """
    两棵镜像树：

    a (ubuntu:latest, ubuntu:22.04)
    ├─ b
    │  └─ c (myapp:1.0)
    └─ d (registry:5000/tools:dev)
    e (alpine:3.18)
    └─ f
    """
    return [
        ImageRecord(make_id("a"), "", ("ubuntu:latest", "ubuntu:22.04"), 77_800_000, 77_800_000, 1690000000),
        ImageRecord(make_id("b"), make_id("a"), ("<none>:<none>",), 77_800_000, 0, 1690000100),
        ImageRecord(make_id("c"), make_id("b"), ("myapp:1.0",), 120_500_000, 42_700_000, 1690000200),
        ImageRecord(make_id("d"), make_id("a"), ("registry:5000/tools:dev",), 80_000_000, 2_200_000, 1690000300),
        ImageRecord(make_id("e"), "", ("alpine:3.18",), 7_300_000, 7_300_000, 1690000400),
        ImageRecord(make_id("f"), make_id("e"), ("<none>:<none>",), 7_300_000, 0, 1690000500),
    ]


@pytest.fixture
def sample_json(sample_images):
    """与sample_images对应的JSON快照"""
    return json.dumps([image.to_dict() for image in sample_images])


@pytest.fixture
def sample_tree():
    """sample_images 截断ID后的完整镜像树"""
    return (
        "├─aaaaaaaaaaaa Virtual Size: 77.8 MB Tags: ubuntu:latest, ubuntu:22.04\n"
        "│ ├─bbbbbbbbbbbb Virtual Size: 77.8 MB\n"
        "│ │ └─cccccccccccc Virtual Size: 120.5 MB Tags: myapp:1.0\n"
        "│ └─dddddddddddd Virtual Size: 80.0 MB Tags: registry:5000/tools:dev\n"
        "└─eeeeeeeeeeee Virtual Size: 7.3 MB Tags: alpine:3.18\n"
        "  └─ffffffffffff Virtual Size: 7.3 MB\n"
    )
