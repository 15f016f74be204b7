"""Parsing the arguments and flags given to a component command."""

from __future__ import annotations

from collections.abc import Sequence

from atmoscli.constants import (
    AUTO_GENERATE_BACKEND_FILE_FLAG,
    BASE_PATH_FLAG,
    CLI_CONFIG_DIR_FLAG,
    CUE_DIR_FLAG,
    DEPLOY_RUN_INIT_FLAG,
    DRY_RUN_FLAG,
    FROM_PLAN_FLAG,
    GLOBAL_OPTIONS_FLAG,
    HELMFILE_DIR_FLAG,
    HELP_FLAG_1,
    HELP_FLAG_2,
    INIT_RUN_RECONFIGURE,
    JSON_SCHEMA_DIR_FLAG,
    KUBE_CONFIG_CONFIG_FLAG,
    OPA_DIR_FLAG,
    PLAN_FILE_FLAG,
    REDIRECT_STDERR_FLAG,
    SKIP_INIT_FLAG,
    STACK_DIR_FLAG,
    TERRAFORM_DIR_FLAG,
    WORKFLOW_DIR_FLAG,
)
from atmoscli.models import ArgsAndFlagsInfo, ConfigAndStacksInfo


class InvalidFlagError(ValueError):
    """Raised when a flag is malformed or lacks its value."""


# Flags the tool understands but the underlying tools do not; they are removed
# from the arguments passed on.
COMMON_FLAGS: tuple[str, ...] = (
    "--stack",
    "-s",
    DRY_RUN_FLAG,
    SKIP_INIT_FLAG,
    KUBE_CONFIG_CONFIG_FLAG,
    TERRAFORM_DIR_FLAG,
    HELMFILE_DIR_FLAG,
    CLI_CONFIG_DIR_FLAG,
    STACK_DIR_FLAG,
    BASE_PATH_FLAG,
    GLOBAL_OPTIONS_FLAG,
    DEPLOY_RUN_INIT_FLAG,
    INIT_RUN_RECONFIGURE,
    AUTO_GENERATE_BACKEND_FILE_FLAG,
    FROM_PLAN_FLAG,
    PLAN_FILE_FLAG,
    HELP_FLAG_1,
    HELP_FLAG_2,
    WORKFLOW_DIR_FLAG,
    JSON_SCHEMA_DIR_FLAG,
    OPA_DIR_FLAG,
    CUE_DIR_FLAG,
    REDIRECT_STDERR_FLAG,
)

# Flags that take a value, and the attribute of ArgsAndFlagsInfo that receives it.
_VALUE_FLAGS: tuple[tuple[str, str], ...] = (
    (TERRAFORM_DIR_FLAG, "terraform_dir"),
    (HELMFILE_DIR_FLAG, "helmfile_dir"),
    (CLI_CONFIG_DIR_FLAG, "config_dir"),
    (STACK_DIR_FLAG, "stacks_dir"),
    (BASE_PATH_FLAG, "base_path"),
    (DEPLOY_RUN_INIT_FLAG, "deploy_run_init"),
    (AUTO_GENERATE_BACKEND_FILE_FLAG, "auto_generate_backend_file"),
    (WORKFLOW_DIR_FLAG, "workflows_dir"),
    (INIT_RUN_RECONFIGURE, "init_run_reconfigure"),
    (JSON_SCHEMA_DIR_FLAG, "json_schema_dir"),
    (OPA_DIR_FLAG, "opa_dir"),
    (CUE_DIR_FLAG, "cue_dir"),
    (REDIRECT_STDERR_FLAG, "redirect_stderr"),
    (PLAN_FILE_FLAG, "plan_file"),
)

_WORKSPACE_COMMANDS = frozenset({"list", "select", "new", "delete", "show"})
_STATE_COMMANDS = frozenset({"list", "mv", "pull", "push", "replace-provider", "rm", "show"})

# Fields copied from the parsed arguments into the command information.
_COPIED_FIELDS: tuple[str, ...] = (
    "additional_args_and_flags",
    "sub_command",
    "sub_command2",
    "component_from_arg",
    "global_options",
    "base_path",
    "terraform_dir",
    "helmfile_dir",
    "stacks_dir",
    "config_dir",
    "workflows_dir",
    "deploy_run_init",
    "init_run_reconfigure",
    "auto_generate_backend_file",
    "use_terraform_plan",
    "plan_file",
    "dry_run",
    "skip_init",
    "need_help",
    "json_schema_dir",
    "opa_dir",
    "cue_dir",
    "redirect_stderr",
)


def _flag_value(args: Sequence[str], index: int, flag: str) -> str | None:
    """Return the value given to ``flag`` at ``args[index]``, or None if it is another argument."""
    arg = args[index]
    if arg == flag:
        if index + 1 >= len(args):
            raise InvalidFlagError(f"invalid flag: {arg}")
        return args[index + 1]
    if (arg + "=").startswith(flag):
        parts = arg.split("=")
        if len(parts) != 2:
            raise InvalidFlagError(f"invalid flag: {arg}")
        return parts[1]
    return None


def _indexes_to_remove(args: Sequence[str]) -> set[int]:
    removed: set[int] = set()
    for index, arg in enumerate(args):
        for flag in COMMON_FLAGS:
            if arg == flag:
                removed.update((index, index + 1))
            elif arg.startswith(flag + "="):
                removed.add(index)
    return removed


def process_args_and_flags(component_type: str, args: Sequence[str]) -> ArgsAndFlagsInfo:
    """Split command-line ``args`` into the tool's own flags, the subcommand,
    the component and the arguments passed on to the underlying tool."""
    args = list(args)
    info = ArgsAndFlagsInfo()
    global_options_index = 0

    for index, arg in enumerate(args):
        if arg == GLOBAL_OPTIONS_FLAG:
            global_options_index = index + 1
        elif (arg + "=").startswith(GLOBAL_OPTIONS_FLAG):
            global_options_index = index

        for flag, attr in _VALUE_FLAGS:
            value = _flag_value(args, index, flag)
            if value is not None:
                setattr(info, attr, value)
                if flag == PLAN_FILE_FLAG:
                    info.use_terraform_plan = True

        if arg == FROM_PLAN_FLAG:
            info.use_terraform_plan = True
        if arg == DRY_RUN_FLAG:
            info.dry_run = True
        if arg == SKIP_INIT_FLAG:
            info.skip_init = True
        if arg in (HELP_FLAG_1, HELP_FLAG_2):
            info.need_help = True

    removed = _indexes_to_remove(args)
    remaining = [arg for index, arg in enumerate(args) if index not in removed]

    if global_options_index > 0 and global_options_index < len(args):
        arg = args[global_options_index]
        if arg.startswith(GLOBAL_OPTIONS_FLAG + "="):
            info.global_options = arg.split("=", 1)[1].split(" ")
        else:
            info.global_options = arg.split(" ")

    if info.need_help:
        if remaining:
            info.sub_command = remaining[0]
        return info

    if len(remaining) > 1:
        first, second = remaining[0], remaining[1]
        two_words = False

        if component_type == "terraform":
            if first == "write" and second == "varfile":
                info.sub_command = "write"
                info.sub_command2 = "varfile"
                two_words = True
            if first == "workspace" and second in _WORKSPACE_COMMANDS:
                info.sub_command = "workspace"
                info.sub_command2 = second
                two_words = True
            if first == "state" and second in _STATE_COMMANDS:
                info.sub_command = f"state {second}"
                two_words = True

        if two_words:
            if len(remaining) < 3:
                raise ValueError(f"the command '{first} {second}' requires a component argument")
            info.component_from_arg = remaining[2]
            info.additional_args_and_flags = remaining[3:]
        else:
            info.sub_command = first
            info.component_from_arg = second
            info.additional_args_and_flags = remaining[2:]

    return info


def info_from_args(component_type: str, args: Sequence[str], stack: str = "") -> ConfigAndStacksInfo:
    """Build the command information from ``args`` and the value of the ``--stack`` flag."""
    parsed = process_args_and_flags(component_type, args)
    info = ConfigAndStacksInfo(component_type=component_type)
    for name in _COPIED_FIELDS:
        value = getattr(parsed, name)
        setattr(info, name, list(value) if isinstance(value, list) else value)
    if parsed.need_help:
        return info
    if stack:
        info.stack = stack
    return info