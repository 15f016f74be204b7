"""Data structures passed between the configuration, stack and command layers."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any


def _mapping(data: Any, what: str) -> Mapping[Any, Any]:
    if data is None:
        return {}
    if not isinstance(data, Mapping):
        raise TypeError(f"expected a mapping for {what}, got {type(data).__name__}")
    return data


def _string(value: Any, key: str) -> str:
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (str, int, float)):
        return str(value)
    raise TypeError(f"cannot use a value of type {type(value).__name__} as a string for '{key}'")


def _boolean(value: Any, key: str) -> bool:
    if value is None:
        return False
    if isinstance(value, bool):
        return value
    raise TypeError(f"cannot use a value of type {type(value).__name__} as a boolean for '{key}'")


def _strings(value: Any, key: str) -> list[str]:
    if value is None:
        return []
    if not isinstance(value, (list, tuple)):
        raise TypeError(f"expected a list for '{key}', got {type(value).__name__}")
    return [_string(item, key) for item in value]


@dataclass
class Context:
    """Values that name a component in a stack and fill in name patterns."""

    namespace: str = ""
    tenant: str = ""
    environment: str = ""
    stage: str = ""
    region: str = ""
    component: str = ""
    base_component: str = ""
    component_path: str = ""
    workspace: str = ""
    attributes: list[str] = field(default_factory=list)


@dataclass
class ArgsAndFlagsInfo:
    """What was found in the command-line arguments and flags."""

    additional_args_and_flags: list[str] = field(default_factory=list)
    sub_command: str = ""
    sub_command2: str = ""
    component_from_arg: str = ""
    global_options: list[str] = field(default_factory=list)
    terraform_dir: str = ""
    helmfile_dir: str = ""
    config_dir: str = ""
    stacks_dir: str = ""
    workflows_dir: str = ""
    base_path: str = ""
    deploy_run_init: str = ""
    init_run_reconfigure: str = ""
    auto_generate_backend_file: str = ""
    use_terraform_plan: bool = False
    plan_file: str = ""
    dry_run: bool = False
    skip_init: bool = False
    need_help: bool = False
    json_schema_dir: str = ""
    opa_dir: str = ""
    cue_dir: str = ""
    redirect_stderr: str = ""


@dataclass
class ConfigAndStacksInfo:
    """Everything known about a command: its arguments and the component config in a stack."""

    stack_from_arg: str = ""
    stack: str = ""
    stack_file: str = ""
    component_type: str = ""
    component_from_arg: str = ""
    component: str = ""
    component_folder_prefix: str = ""
    base_component_path: str = ""
    base_component: str = ""
    final_component: str = ""
    command: str = ""
    sub_command: str = ""
    sub_command2: str = ""
    component_section: dict[str, Any] = field(default_factory=dict)
    component_vars_section: dict[Any, Any] = field(default_factory=dict)
    component_env_section: dict[Any, Any] = field(default_factory=dict)
    component_env_list: list[str] = field(default_factory=list)
    component_backend_section: dict[Any, Any] | None = None
    component_backend_type: str = ""
    additional_args_and_flags: list[str] = field(default_factory=list)
    global_options: list[str] = field(default_factory=list)
    base_path: str = ""
    terraform_dir: str = ""
    helmfile_dir: str = ""
    config_dir: str = ""
    stacks_dir: str = ""
    workflows_dir: str = ""
    context: Context = field(default_factory=Context)
    context_prefix: str = ""
    deploy_run_init: str = ""
    init_run_reconfigure: str = ""
    auto_generate_backend_file: str = ""
    use_terraform_plan: bool = False
    plan_file: str = ""
    dry_run: bool = False
    skip_init: bool = False
    component_inheritance_chain: list[str] = field(default_factory=list)
    need_help: bool = False
    component_is_abstract: bool = False
    component_metadata_section: dict[Any, Any] = field(default_factory=dict)
    terraform_workspace: str = ""
    json_schema_dir: str = ""
    opa_dir: str = ""
    cue_dir: str = ""
    atmos_cli_config_path: str = ""
    atmos_base_path: str = ""
    redirect_stderr: str = ""


@dataclass
class WorkflowStep:
    """One step of a workflow."""

    name: str = ""
    command: str = ""
    stack: str = ""
    type: str = ""


def _workflow_step(data: Any) -> WorkflowStep:
    data = _mapping(data, "workflow step")
    return WorkflowStep(
        name=_string(data.get("name"), "name"),
        command=_string(data.get("command"), "command"),
        stack=_string(data.get("stack"), "stack"),
        type=_string(data.get("type"), "type"),
    )


def _workflow_step_dict(step: WorkflowStep) -> dict[str, Any]:
    result: dict[str, Any] = {"name": step.name, "command": step.command}
    if step.stack:
        result["stack"] = step.stack
    if step.type:
        result["type"] = step.type
    return result


@dataclass
class WorkflowDefinition:
    """A named workflow: its steps and an optional stack for all of them."""

    description: str = ""
    steps: list[WorkflowStep] = field(default_factory=list)
    stack: str = ""

    @classmethod
    def from_dict(cls, data: Mapping[Any, Any]) -> WorkflowDefinition:
        """Build a workflow definition from parsed YAML."""
        data = _mapping(data, "workflow definition")
        steps = data.get("steps")
        if steps is not None and not isinstance(steps, (list, tuple)):
            raise TypeError(f"expected a list for 'steps', got {type(steps).__name__}")
        return cls(
            description=_string(data.get("description"), "description"),
            steps=[_workflow_step(step) for step in steps or []],
            stack=_string(data.get("stack"), "stack"),
        )

    def to_dict(self) -> dict[str, Any]:
        """Return the definition as plain data, leaving out empty optional keys."""
        result: dict[str, Any] = {}
        if self.description:
            result["description"] = self.description
        result["steps"] = [_workflow_step_dict(step) for step in self.steps]
        if self.stack:
            result["stack"] = self.stack
        return result


@dataclass
class VendorComponentSource:
    """Where the sources of a vendored component come from."""

    type: str = ""
    uri: str = ""
    version: str = ""
    included_paths: list[str] = field(default_factory=list)
    excluded_paths: list[str] = field(default_factory=list)


@dataclass
class VendorComponentMixin:
    """An extra file pulled into a vendored component."""

    type: str = ""
    uri: str = ""
    version: str = ""
    filename: str = ""


@dataclass
class VendorComponentSpec:
    """The source and mixins of a vendored component."""

    source: VendorComponentSource = field(default_factory=VendorComponentSource)
    mixins: list[VendorComponentMixin] = field(default_factory=list)


@dataclass
class VendorComponentMetadata:
    name: str = ""
    description: str = ""


def _vendor_source(data: Any) -> VendorComponentSource:
    data = _mapping(data, "source")
    return VendorComponentSource(
        type=_string(data.get("type"), "type"),
        uri=_string(data.get("uri"), "uri"),
        version=_string(data.get("version"), "version"),
        included_paths=_strings(data.get("included_paths"), "included_paths"),
        excluded_paths=_strings(data.get("excluded_paths"), "excluded_paths"),
    )


def _vendor_mixin(data: Any) -> VendorComponentMixin:
    data = _mapping(data, "mixin")
    return VendorComponentMixin(
        type=_string(data.get("type"), "type"),
        uri=_string(data.get("uri"), "uri"),
        version=_string(data.get("version"), "version"),
        filename=_string(data.get("filename"), "filename"),
    )


def _vendor_spec(data: Any) -> VendorComponentSpec:
    data = _mapping(data, "spec")
    mixins = data.get("mixins")
    if mixins is not None and not isinstance(mixins, (list, tuple)):
        raise TypeError(f"expected a list for 'mixins', got {type(mixins).__name__}")
    return VendorComponentSpec(
        source=_vendor_source(data.get("source")),
        mixins=[_vendor_mixin(item) for item in mixins or []],
    )


@dataclass
class VendorComponentConfig:
    """Contents of a component's vendor config file (``component.yaml``)."""

    api_version: str = ""
    kind: str = ""
    metadata: VendorComponentMetadata = field(default_factory=VendorComponentMetadata)
    spec: VendorComponentSpec = field(default_factory=VendorComponentSpec)

    @classmethod
    def from_dict(cls, data: Mapping[Any, Any]) -> VendorComponentConfig:
        """Build a vendor config from parsed YAML."""
        data = _mapping(data, "vendor component config")
        metadata = _mapping(data.get("metadata"), "metadata")
        return cls(
            api_version=_string(data.get("apiVersion"), "apiVersion"),
            kind=_string(data.get("kind"), "kind"),
            metadata=VendorComponentMetadata(
                name=_string(metadata.get("name"), "name"),
                description=_string(metadata.get("description"), "description"),
            ),
            spec=_vendor_spec(data.get("spec")),
        )


@dataclass
class ValidationItem:
    """One schema a component is validated against."""

    schema_type: str = ""
    schema_path: str = ""
    description: str = ""
    disabled: bool = False

    @classmethod
    def from_dict(cls, data: Mapping[Any, Any]) -> ValidationItem:
        """Build a validation item; keys match case-insensitively."""
        data = _mapping(data, "validation item")
        lowered = {str(key).lower(): value for key, value in data.items()}
        return cls(
            schema_type=_string(lowered.get("schema_type"), "schema_type"),
            schema_path=_string(lowered.get("schema_path"), "schema_path"),
            description=_string(lowered.get("description"), "description"),
            disabled=_boolean(lowered.get("disabled"), "disabled"),
        )


@dataclass
class StackImport:
    """An entry of a stack's ``import`` section given as a mapping."""

    path: str = ""
    context: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: Mapping[Any, Any]) -> StackImport:
        """Build an import from its mapping form."""
        data = _mapping(data, "import")
        context = _mapping(data.get("context"), "context")
        return cls(
            path=_string(data.get("path"), "path"),
            context={str(key): value for key, value in context.items()},
        )