import json
import os

import pytest
import yaml

from atmoscli.output import (
    OutputFormatError,
    generate_component_backend_config,
    print_or_write_to_file,
    remove_temp_dir,
    split_component_path,
)


def test_generate_backend_config_structure():
    backend = {"bucket": "my-bucket", "region": "us-east-2"}
    result = generate_component_backend_config("s3", backend)
    assert result == {"terraform": {"backend": {"s3": backend}}}


def test_generate_backend_config_keeps_section_identity():
    backend = {"key": "value"}
    result = generate_component_backend_config("gcs", backend)
    assert result["terraform"]["backend"]["gcs"] is backend


@pytest.mark.parametrize(
    "path, expected",
    [
        ("test/test-component", ("test", "test-component")),
        ("infra/vpc/flow-logs", ("infra/vpc", "flow-logs")),
        ("vpc", ("", "vpc")),
    ],
)
def test_split_component_path(path, expected):
    assert split_component_path(path) == expected


def test_split_component_path_rejoins():
    prefix, name = split_component_path("a/b/c/d")
    assert f"{prefix}/{name}" == "a/b/c/d"


def test_write_yaml_round_trip(tmp_path):
    data = {"vars": {"stage": "dev", "enabled": True, "count": 3}, "list": ["a", "b"]}
    target = tmp_path / "out.yaml"
    print_or_write_to_file("yaml", str(target), data)
    assert yaml.safe_load(target.read_text()) == data


def test_write_json_round_trip(tmp_path):
    data = {"vars": {"stage": "dev", "enabled": False}, "list": [1, 2]}
    target = tmp_path / "out.json"
    print_or_write_to_file("json", str(target), data)
    assert json.loads(target.read_text()) == data


def test_write_file_permissions(tmp_path):
    target = tmp_path / "perm.json"
    print_or_write_to_file("json", str(target), {"a": 1})
    assert os.stat(target).st_mode & 0o777 == 0o644 & ~_umask()


def _umask():
    current = os.umask(0)
    os.umask(current)
    return current


def test_print_yaml_to_stdout(capsys):
    data = {"name": "vpc", "tags": ["x", "y"]}
    print_or_write_to_file("yaml", "", data)
    assert yaml.safe_load(capsys.readouterr().out) == data


def test_print_json_to_stdout(capsys):
    data = {"name": "vpc", "nested": {"k": "v"}}
    print_or_write_to_file("json", "", data)
    assert json.loads(capsys.readouterr().out) == data


def test_invalid_format_raises(tmp_path):
    target = tmp_path / "out.txt"
    with pytest.raises(OutputFormatError, match="invalid 'format': hcl"):
        print_or_write_to_file("hcl", str(target), {"a": 1})
    assert not target.exists()


def test_remove_temp_dir_removes_tree(tmp_path):
    root = tmp_path / "tmpdir"
    (root / "sub").mkdir(parents=True)
    (root / "sub" / "file.txt").write_text("content")
    remove_temp_dir(str(root))
    assert not root.exists()


def test_remove_temp_dir_removes_file(tmp_path):
    target = tmp_path / "single.txt"
    target.write_text("content")
    remove_temp_dir(str(target))
    assert not target.exists()


def test_remove_temp_dir_missing_path_is_quiet(tmp_path, capsys):
    missing = tmp_path / "does-not-exist"
    remove_temp_dir(str(missing))
    assert capsys.readouterr().err == ""
    assert not missing.exists()