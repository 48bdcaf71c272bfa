"""镜像工具函数测试"""

import pytest

from dockmap.managers.image.utils import (
    display_id,
    has_tag_suffix,
    human_size,
    real_tags,
    split_repo_tag,
    truncate_id,
    with_default_tag,
)


@pytest.mark.parametrize(
    "raw, expected",
    [
        (0, "0.0 B"),
        (999, "999.0 B"),
        (1000, "1.0 KB"),
        (1500000, "1.5 MB"),
        (188_000_000, "188.0 MB"),
        (2_500_000_000, "2.5 GB"),
        (3_000_000_000_000, "3.0 TB"),
    ],
)
def test_human_size(raw, expected):
    assert human_size(raw) == expected


def test_human_size_beyond_tb_stays_in_tb():
    assert human_size(5_000_000_000_000_000) == "5000.0 TB"


def test_truncate_id():
    image_id = "0123456789abcdef" * 4
    assert truncate_id(image_id) == "0123456789ab"
    # 对已截断的ID幂等
    assert truncate_id(truncate_id(image_id)) == "0123456789ab"


def test_display_id():
    image_id = "f" * 64
    assert display_id(image_id) == "f" * 12
    assert display_id(image_id, no_trunc=True) == image_id


def test_split_repo_tag_uses_last_colon():
    assert split_repo_tag("registry:5000/myrepo:1.0") == ("registry:5000/myrepo", "1.0")
    assert split_repo_tag("ubuntu:latest") == ("ubuntu", "latest")


@pytest.mark.parametrize(
    "reference, expected",
    [
        ("ubuntu", False),
        ("ubuntu:22.04", True),
        ("registry:5000/myrepo", False),
        ("registry:5000/myrepo:1.0", True),
    ],
)
def test_has_tag_suffix(reference, expected):
    assert has_tag_suffix(reference) is expected


def test_with_default_tag():
    assert with_default_tag("ubuntu") == "ubuntu:latest"
    assert with_default_tag("ubuntu:latest") == "ubuntu:latest"
    assert with_default_tag("ubuntu:22.04") == "ubuntu:22.04"
    assert with_default_tag("registry:5000/myrepo") == "registry:5000/myrepo:latest"


def test_real_tags_filters_sentinel():
    assert real_tags(["<none>:<none>"]) == ()
    assert real_tags(["a:1", "<none>:<none>", "b:2"]) == ("a:1", "b:2")
