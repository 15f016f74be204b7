import pytest

from atmoscli.merge import MergeError, merge, merge_with_options


def test_merge_basic():
    result = merge([{"foo": "bar"}, {"baz": "bat"}])
    assert result == {"foo": "bar", "baz": "bat"}


def test_merge_basic_override():
    result = merge([{"foo": "bar"}, {"baz": "bat"}, {"foo": "ood"}])
    assert result == {"foo": "ood", "baz": "bat"}


def test_merge_nested_maps():
    first = {"vars": {"a": 1, "nested": {"x": 1}}}
    second = {"vars": {"b": 2, "nested": {"y": 2}}}
    assert merge([first, second]) == {"vars": {"a": 1, "b": 2, "nested": {"x": 1, "y": 2}}}


def test_merge_replaces_lists_by_default():
    assert merge([{"l": [1, 2]}, {"l": [3]}]) == {"l": [3]}


def test_merge_append_slice():
    result = merge_with_options([{"l": [1, 2]}, {"l": [3]}], True, False)
    assert result == {"l": [1, 2, 3]}


def test_merge_slice_deep_copy():
    first = {"l": [{"a": 1}, {"b": 1}]}
    second = {"l": [{"c": 2}]}
    result = merge_with_options([first, second], False, True)
    assert result == {"l": [{"a": 1, "c": 2}, {"b": 1}]}


def test_merge_empty_value_overrides():
    assert merge([{"k": "v"}, {"k": None}]) == {"k": None}


def test_merge_skips_empty_inputs():
    assert merge([{}, None, {"a": 1}]) == {"a": 1}


def test_merge_does_not_modify_inputs():
    first = {"m": {"a": 1}}
    second = {"m": {"b": 2}}
    merge([first, second])
    assert first == {"m": {"a": 1}}
    assert second == {"m": {"b": 2}}


def test_result_is_independent_of_inputs():
    source = {"m": {"a": [1]}}
    result = merge([source])
    result["m"]["a"].append(2)
    assert source == {"m": {"a": [1]}}


def test_merge_rejects_non_mapping():
    with pytest.raises(MergeError):
        merge([{"a": 1}, ["not", "a", "map"]])