"""Conversions between JSON/YAML text, mappings and lists."""

from __future__ import annotations

import hashlib
import json
from collections.abc import Iterable, Mapping
from typing import Any

import yaml


def make_id(data: bytes) -> str:
    """Return a stable identifier (hex SHA-1) for a byte representation of a resource."""
    return hashlib.sha1(data).hexdigest()


def json_to_map(text: str) -> dict[str, Any]:
    """Parse a JSON object into a dict; raise ValueError if it is not an object."""
    data = json.loads(text)
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError(f"expected a JSON object, got {type(data).__name__}")
    return data


def json_list_to_maps(items: Iterable[Any]) -> list[dict[Any, Any]]:
    """Parse every JSON string in ``items`` into a dict."""
    result = []
    for item in items:
        if not isinstance(item, str):
            raise TypeError(f"expected a JSON string, got {type(item).__name__}")
        result.append(dict(json_to_map(item)))
    return result


def yaml_to_map(text: str) -> dict[Any, Any]:
    """Parse a YAML mapping into a dict; raise ValueError if it is not a mapping."""
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ValueError(f"invalid YAML: {exc}") from exc
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError(f"expected a YAML mapping, got {type(data).__name__}")
    return data


def yaml_list_to_maps(items: Iterable[Any]) -> list[dict[Any, Any]]:
    """Parse the YAML strings in ``items`` into dicts; non-string items are skipped."""
    return [yaml_to_map(item) for item in items if isinstance(item, str)]


def stringify_keys(mapping: Mapping[Any, Any]) -> dict[str, Any]:
    """Return a copy of ``mapping`` whose keys must all be strings."""
    result = {}
    for key, value in mapping.items():
        if not isinstance(key, str):
            raise TypeError(f"map key {key!r} is not a string")
        result[key] = value
    return result


def list_of_strings(items: Iterable[Any] | None) -> list[str]:
    """Return ``items`` as a list of strings; every item must already be a string."""
    if items is None:
        raise ValueError("input must not be nil")
    result = []
    for item in items:
        if not isinstance(item, str):
            raise TypeError(f"item {item!r} is not a string")
        result.append(item)
    return result


def indexed_maps(items: Iterable[Any]) -> list[dict[int, Any]]:
    """Wrap every item in a one-entry mapping keyed by its position."""
    return [{index: item} for index, item in enumerate(items)]