import pytest

from atmoscli.convert import (
    indexed_maps,
    json_list_to_maps,
    json_to_map,
    list_of_strings,
    make_id,
    stringify_keys,
    yaml_list_to_maps,
    yaml_to_map,
)


def test_json_to_map():
    result = json_to_map('{"hello": "world"}')
    assert result["hello"] == "world"


def test_json_to_map_red_path():
    with pytest.raises(ValueError):
        json_to_map("Not JSON")


def test_json_to_map_rejects_array():
    with pytest.raises(ValueError):
        json_to_map("[1, 2]")


def test_json_list_to_maps():
    result = json_list_to_maps(['{"a": 1}', '{"b": "x"}'])
    assert result == [{"a": 1}, {"b": "x"}]


def test_json_list_to_maps_rejects_non_string():
    with pytest.raises(TypeError):
        json_list_to_maps([{"a": 1}])


def test_slice_of_interfaces_to_slice_of_strings():
    items = ["a", "b", "c"]
    result = list_of_strings(items)
    assert len(result) == len(items)
    assert result == items


def test_list_of_strings_none():
    with pytest.raises(ValueError, match="nil"):
        list_of_strings(None)


def test_list_of_strings_non_string():
    with pytest.raises(TypeError):
        list_of_strings(["a", 1])


def test_yaml_to_map():
    result = yaml_to_map("---\nhello: world")
    assert result["hello"] == "world"


def test_yaml_to_map_red_path():
    with pytest.raises(ValueError):
        yaml_to_map("Not YAML")


def test_yaml_list_to_maps_skips_non_strings():
    result = yaml_list_to_maps(["a: 1", 42, "b: two"])
    assert result == [{"a": 1}, {"b": "two"}]


def test_stringify_keys():
    source = {"x": 1, "y": [2]}
    assert stringify_keys(source) == source


def test_stringify_keys_rejects_non_string():
    with pytest.raises(TypeError):
        stringify_keys({1: "x"})


def test_indexed_maps():
    assert indexed_maps([{"a": 1}, {"b": 2}]) == [{0: {"a": 1}}, {1: {"b": 2}}]


def test_make_id_empty_is_sha1_of_nothing():
    assert make_id(b"") == "da39a3ee5e6b4b0d3255bfef95601890afd80709"


def test_make_id_is_stable_and_distinct():
    assert make_id(b"resource") == make_id(b"resource")
    assert make_id(b"resource") != make_id(b"other")
    assert len(make_id(b"resource")) == 40