"""Deep merging of configuration mappings."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any


class MergeError(ValueError):
    """Raised when inputs cannot be merged."""


def _plain(value: Any) -> Any:
    """Return an independent copy made of dicts and lists only."""
    if isinstance(value, Mapping):
        return {key: _plain(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [_plain(item) for item in value]
    return value


def _merge_lists(dst: list, src: list, append_slice: bool, slice_deep_copy: bool) -> list:
    merged = list(dst)
    for index, item in enumerate(src):
        if index < len(merged):
            if isinstance(merged[index], dict) and isinstance(item, dict):
                _merge_into(merged[index], item, append_slice, slice_deep_copy)
            else:
                merged[index] = item
        else:
            merged.append(item)
    return merged


def _merge_into(dst: dict, src: dict, append_slice: bool, slice_deep_copy: bool) -> None:
    for key, value in src.items():
        current = dst.get(key)
        if key in dst:
            if isinstance(current, dict) and isinstance(value, dict):
                _merge_into(current, value, append_slice, slice_deep_copy)
                continue
            if isinstance(current, list) and isinstance(value, list):
                if append_slice:
                    dst[key] = current + value
                    continue
                if slice_deep_copy:
                    dst[key] = _merge_lists(current, value, append_slice, slice_deep_copy)
                    continue
        dst[key] = value


def merge_with_options(
    inputs: Iterable[Mapping[Any, Any] | None],
    append_slice: bool,
    slice_deep_copy: bool,
) -> dict[Any, Any]:
    """Deep-merge ``inputs`` in order; later values override earlier ones.

    Lists are replaced, unless ``append_slice`` concatenates them or
    ``slice_deep_copy`` merges them element by element. Inputs are never modified.
    """
    merged: dict[Any, Any] = {}
    for current in inputs:
        if current is None:
            continue
        if not isinstance(current, Mapping):
            raise MergeError(f"cannot merge a value of type {type(current).__name__}")
        if not current:
            continue
        _merge_into(merged, _plain(current), append_slice, slice_deep_copy)
    return merged


def merge(inputs: Iterable[Mapping[Any, Any] | None]) -> dict[Any, Any]:
    """Deep-merge ``inputs`` with lists replaced rather than combined."""
    return merge_with_options(inputs, False, False)