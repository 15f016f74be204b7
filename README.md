# atmoscli

Building blocks for working with stack and component configuration for
infrastructure tools such as Terraform and Helmfile.

## Modules

- **`atmoscli.args`**: `process_args_and_flags(component_type, args)` separates
  the flags this package understands (`--stack`/`-s`, `--dry-run`,
  `--terraform-dir`, `--planfile`, `--global-options` and others) from the
  arguments meant for the underlying tool, and finds the subcommand and the
  component. Terraform two-word commands (`write varfile`, `workspace
  select|new|...`, `state mv|rm|...`) are recognised. A flag missing its value
  raises `InvalidFlagError`. `info_from_args(component_type, args, stack)`
  returns the same information as a `ConfigAndStacksInfo`.
- **`atmoscli.merge`**: `merge(inputs)` deep-merges a list of mappings, later
  ones overriding earlier ones; `merge_with_options(inputs, append_slice,
  slice_deep_copy)` can also concatenate lists or merge them element by
  element. Inputs are never modified; a non-mapping input raises `MergeError`.
- **`atmoscli.sources`**: `process_config_sources(info, raw_stack_configs)`
  reports, for every variable of a component, its final value and every place
  in a stack file or its imports where it is set, from higher to lower
  priority. `process_variable_in_stacks` does this for one variable;
  `append_variable_descriptor` appends a descriptor unless an equal one is
  already present.
- **`atmoscli.output`**: `print_or_write_to_file(output_format, file, data)`
  prints data as `yaml` or `json`, or writes it to a file (mode 0644);
  any other format raises `OutputFormatError`.
  `generate_component_backend_config(backend_type, backend_config)` builds the
  `terraform.backend.<type>` structure, `split_component_path` splits
  `folder/name` into its prefix and last part, and `remove_temp_dir` removes a
  directory tree, reporting failures on stderr.
- **`atmoscli.convert`**: `json_to_map`, `yaml_to_map` and their list forms
  `json_list_to_maps` and `yaml_list_to_maps`; `make_id` (hex SHA-1 of bytes);
  `stringify_keys`, `list_of_strings` and `indexed_maps`.
- **`atmoscli.models`**: dataclasses shared by the modules above: `Context`,
  `ArgsAndFlagsInfo`, `ConfigAndStacksInfo`, `WorkflowStep`,
  `WorkflowDefinition`, the vendoring models (`VendorComponentConfig`,
  `VendorComponentSpec`, `VendorComponentSource`, `VendorComponentMixin`,
  `VendorComponentMetadata`), `ValidationItem` and `StackImport`, several of
  which can be built from parsed YAML with `from_dict`.
- **`atmoscli.constants`**: file names and flag names.

## Installation

```
pip install .
```

## Examples

```python
from atmoscli.merge import merge

merge([{"foo": "bar"}, {"baz": "bat"}, {"foo": "ood"}])
# {'foo': 'ood', 'baz': 'bat'}
```

```python
from atmoscli.args import process_args_and_flags

info = process_args_and_flags("terraform", ["workspace", "select", "vpc", "--dry-run"])
info.sub_command, info.sub_command2, info.component_from_arg, info.dry_run
# ('workspace', 'select', 'vpc', True)
```

```python
from atmoscli.output import generate_component_backend_config, split_component_path
from atmoscli.convert import make_id

generate_component_backend_config("s3", {"bucket": "state"})
# {'terraform': {'backend': {'s3': {'bucket': 'state'}}}}

split_component_path("infra/vpc")
# ('infra', 'vpc')

make_id(b"abc")
# 'a9993e364706816aba3e25717850c26c9cd0d89d'
```

## What this package does not do

It has no command-line program. It does not read `atmos.yaml` or other CLI
configuration files, apply environment variables to a configuration, search
directories for stack files, derive stack names from name patterns, or process
stack files and their imports. Functions such as `process_config_sources`
work on stack data the caller has already loaded.

## Running the tests

```
pip install .[test]
pytest
```