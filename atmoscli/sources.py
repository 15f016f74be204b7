"""Tracing where the variables of a component in a stack are defined."""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from typing import Any

from atmoscli.models import ConfigAndStacksInfo

_MISSING = object()

RawStackConfigs = Mapping[str, Mapping[str, Any]]


def _dig(node: Any, *keys: Any) -> Any:
    """Follow ``keys`` through nested mappings; return _MISSING if any step fails."""
    for key in keys:
        if not isinstance(node, Mapping) or key not in node:
            return _MISSING
        node = node[key]
    return node


def _descriptor(stack_file: str, section: str, value: Any, dependency_type: str) -> dict[str, Any]:
    return {
        "stack_file": stack_file,
        "stack_file_section": section,
        "variable_value": value,
        "dependency_type": dependency_type,
    }


def _raw_stack(raw_stack_configs: RawStackConfigs, stack_file: str) -> Any:
    return _dig(raw_stack_configs, stack_file, "stack")


def _raw_imports(raw_stack_configs: RawStackConfigs, stack_file: str) -> Iterator[tuple[str, Mapping[Any, Any]]]:
    imports = _dig(raw_stack_configs, stack_file, "imports")
    if not isinstance(imports, Mapping):
        return
    for name, config in imports.items():
        if isinstance(config, Mapping):
            yield name, config


def _component_in_stack(
    component: str, stack_file: str, component_type: str, raw: RawStackConfigs, variable: str
) -> Iterator[dict[str, Any]]:
    value = _dig(_raw_stack(raw, stack_file), "components", component_type, component, "vars", variable)
    if value is not _MISSING:
        yield _descriptor(stack_file, f"components.{component_type}.vars", value, "inline")


def _component_type_in_stack(
    stack_file: str, component_type: str, raw: RawStackConfigs, variable: str
) -> Iterator[dict[str, Any]]:
    value = _dig(_raw_stack(raw, stack_file), component_type, "vars", variable)
    if value is not _MISSING:
        yield _descriptor(stack_file, f"{component_type}.vars", value, "inline")


def _global_in_stack(stack_file: str, raw: RawStackConfigs, variable: str) -> Iterator[dict[str, Any]]:
    value = _dig(_raw_stack(raw, stack_file), "vars", variable)
    if value is not _MISSING:
        yield _descriptor(stack_file, "vars", value, "inline")


def _component_in_imports(
    component: str, stack_file: str, component_type: str, raw: RawStackConfigs, variable: str
) -> Iterator[dict[str, Any]]:
    for name, config in _raw_imports(raw, stack_file):
        value = _dig(config, "components", component_type, component, "vars", variable)
        if value is not _MISSING:
            yield _descriptor(name, f"components.{component_type}.vars", value, "import")


def _component_type_in_imports(
    stack_file: str, component_type: str, raw: RawStackConfigs, variable: str
) -> Iterator[dict[str, Any]]:
    for name, config in _raw_imports(raw, stack_file):
        value = _dig(config, component_type, "vars", variable)
        if value is not _MISSING:
            yield _descriptor(name, f"{component_type}.vars", value, "import")


def _global_in_imports(stack_file: str, raw: RawStackConfigs, variable: str) -> Iterator[dict[str, Any]]:
    for name, config in _raw_imports(raw, stack_file):
        value = _dig(config, "vars", variable)
        if value is not _MISSING:
            yield _descriptor(name, "vars", value, "import")


def append_variable_descriptor(result: list[dict[str, Any]], descriptor: dict[str, Any]) -> None:
    """Append ``descriptor`` to ``result`` unless an equal one is already there."""
    if descriptor not in result:
        result.append(descriptor)


def _all_descriptors(
    info: ConfigAndStacksInfo, raw: RawStackConfigs, variable: str
) -> Iterator[dict[str, Any]]:
    stack_file = info.stack_file
    component_type = info.component_type
    chain = info.component_inheritance_chain
    own = info.component_from_arg

    for component in (own, *chain):
        yield from _component_in_stack(component, stack_file, component_type, raw, variable)
        yield from _component_in_imports(component, stack_file, component_type, raw, variable)

    # The type and global sections do not depend on the component, so repeating them
    # for every base component only produces duplicates, which are dropped later.
    for _ in (own, *chain):
        yield from _component_type_in_stack(stack_file, component_type, raw, variable)
        yield from _global_in_stack(stack_file, raw, variable)

    for _ in (own, *chain):
        yield from _component_type_in_imports(stack_file, component_type, raw, variable)
        yield from _global_in_imports(stack_file, raw, variable)


def process_variable_in_stacks(
    info: ConfigAndStacksInfo, raw_stack_configs: RawStackConfigs, variable: str
) -> list[dict[str, Any]]:
    """Return where ``variable`` is defined for the component, from higher to lower priority."""
    result: list[dict[str, Any]] = []
    for descriptor in _all_descriptors(info, raw_stack_configs, variable):
        append_variable_descriptor(result, descriptor)
    return result


def process_config_sources(
    info: ConfigAndStacksInfo, raw_stack_configs: RawStackConfigs
) -> dict[str, dict[str, Any]]:
    """Describe, for every variable of the component, its final value and where it is defined."""
    variables: dict[str, Any] = {}
    for key, value in info.component_vars_section.items():
        if not isinstance(key, str):
            raise TypeError(f"variable name {key!r} is not a string")
        variables[key] = {
            "name": key,
            "final_value": value,
            "stack_dependencies": process_variable_in_stacks(info, raw_stack_configs, key),
        }
    return {"vars": variables}