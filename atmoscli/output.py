"""Backend config generation, component path splitting and printing or writing data."""

from __future__ import annotations

import json
import os
import shutil
import sys
from collections.abc import Mapping
from typing import Any

import yaml


class OutputFormatError(ValueError):
    """Raised when an unsupported output format is requested."""


def generate_component_backend_config(
    backend_type: str, backend_config: Mapping[Any, Any] | None
) -> dict[str, Any]:
    """Wrap a component's backend section in the ``terraform.backend.<type>`` structure."""
    return {"terraform": {"backend": {backend_type: backend_config}}}


def split_component_path(component_path: str) -> tuple[str, str]:
    """Split ``folder/prefix/name`` into the folder prefix and the last part.

    A path without ``/`` has an empty folder prefix.
    """
    prefix, sep, name = component_path.rpartition("/")
    if not sep:
        return "", component_path
    return prefix, name


def _to_yaml(data: Any) -> str:
    return yaml.safe_dump(data, default_flow_style=False, allow_unicode=True)


def _to_json(data: Any) -> str:
    return json.dumps(data, indent=2)


def _write(file: str, text: str) -> None:
    fd = os.open(file, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, 0o644)
    with os.fdopen(fd, "w", encoding="utf-8") as handle:
        handle.write(text)


def print_or_write_to_file(output_format: str, file: str, data: Any) -> None:
    """Print ``data`` as YAML or JSON, or write it to ``file`` if one is given."""
    if output_format == "yaml":
        text = _to_yaml(data)
    elif output_format == "json":
        text = _to_json(data) + "\n"
    else:
        raise OutputFormatError(f"invalid 'format': {output_format}")

    if file:
        _write(file, text)
    else:
        sys.stdout.write(text)


def remove_temp_dir(path: str) -> None:
    """Remove ``path`` and everything under it; report failures on stderr."""
    try:
        if not os.path.lexists(path):
            return
        if os.path.isdir(path) and not os.path.islink(path):
            shutil.rmtree(path)
        else:
            os.remove(path)
    except OSError as exc:
        print(exc, file=sys.stderr)