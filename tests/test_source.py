"""镜像输入解析测试"""

import json

import pytest

from dockmap.managers.image.base import ImageInputError, ImageRecord
from dockmap.managers.image.source import parse_images_json, record_from_dict, translate_engine_images


def test_parse_images_json(sample_json, sample_images):
    assert parse_images_json(sample_json) == sample_images


def test_parse_images_json_accepts_bytes(sample_json, sample_images):
    assert parse_images_json(sample_json.encode("utf-8")) == sample_images


def test_optional_fields_get_defaults():
    images = parse_images_json('[{"Id": "%s", "VirtualSize": 10, "Size": 5, "Created": 1}]' % ("a" * 64))
    assert images == [ImageRecord("a" * 64, "", ("<none>:<none>",), 10, 5, 1)]
    assert images[0].is_root
    assert not images[0].is_tagged


@pytest.mark.parametrize("repo_tags", [None, []])
def test_missing_tags_become_sentinel(repo_tags):
    image = record_from_dict({"Id": "a" * 64, "RepoTags": repo_tags})
    assert image.repo_tags == ("<none>:<none>",)


def test_invalid_json():
    with pytest.raises(ImageInputError, match="Error reading JSON"):
        parse_images_json("[{not json")


@pytest.mark.parametrize(
    "payload",
    [
        {"Id": "a" * 64},
        ["not an object"],
        [{"ParentId": "b" * 64}],
        [{"Id": ""}],
        [{"Id": "a" * 64, "RepoTags": "ubuntu:latest"}],
        [{"Id": "a" * 64, "VirtualSize": "10"}],
        [{"Id": "a" * 64, "Size": True}],
        [{"Id": 42}],
    ],
)
def test_malformed_structure(payload):
    with pytest.raises(ImageInputError):
        parse_images_json(json.dumps(payload))


def test_duplicate_ids_rejected():
    payload = [{"Id": "a" * 64}, {"Id": "a" * 64}]
    with pytest.raises(ImageInputError, match="重复"):
        parse_images_json(json.dumps(payload))


def test_translate_engine_images_strips_algorithm_prefix():
    entries = [
        {
            "Id": "sha256:" + "a" * 64,
            "ParentId": "",
            "RepoTags": ["ubuntu:latest"],
            "VirtualSize": 100,
            "Size": 100,
            "Created": 1,
        },
        {
            "Id": "sha256:" + "b" * 64,
            "ParentId": "sha256:" + "a" * 64,
            "RepoTags": None,
            "Size": 50,
            "Created": 2,
        },
    ]

    images = translate_engine_images(entries)

    assert images[0] == ImageRecord("a" * 64, "", ("ubuntu:latest",), 100, 100, 1)
    # 没有 VirtualSize 时使用 Size
    assert images[1] == ImageRecord("b" * 64, "a" * 64, ("<none>:<none>",), 50, 50, 2)
    # 原始数据不被修改
    assert entries[0]["Id"].startswith("sha256:")
