import json

import pytest

from cosy.errors import CosyIOError
from cosy.load import load_and_merge


def write(path, value):
    path.write_text(json.dumps(value), encoding="utf-8")


def test_load_and_merge_basic(tmp_path):
    base = tmp_path / "base.cosy"
    override = tmp_path / "override.cosy"
    write(base, {"a": 1, "b": 2})
    write(override, {"b": 3, "c": 4})
    assert load_and_merge([base, override], json.loads) == {"a": 1, "b": 3, "c": 4}


def test_load_and_merge_nested(tmp_path):
    p1 = tmp_path / "1.cosy"
    p2 = tmp_path / "2.cosy"
    write(p1, {"server": {"host": "localhost", "port": 80}})
    write(p2, {"server": {"port": 443}})
    config = load_and_merge([p1, p2], json.loads)
    assert config["server"] == {"host": "localhost", "port": 443}


def test_load_resolves_includes_relative_to_file(tmp_path):
    sub = tmp_path / "conf"
    sub.mkdir()
    write(sub / "shared.cosy", {"shared": "yes", "x": 1})
    write(sub / "main.cosy", {"include": "shared.cosy", "x": 2})
    config = load_and_merge([str(sub / "main.cosy")], json.loads)
    assert config == {"shared": "yes", "x": 2}


def test_load_no_paths_gives_empty_object():
    assert load_and_merge([], json.loads) == {}


def test_load_missing_file(tmp_path):
    with pytest.raises(CosyIOError) as info:
        load_and_merge([tmp_path / "nope.cosy"], json.loads)
    assert str(info.value).startswith("IO error: ")