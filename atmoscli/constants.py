"""Names of files, directories and command-line flags understood by the tool."""

DEFAULT_STACK_CONFIG_FILE_EXTENSION = ".yaml"
CLI_CONFIG_FILE_NAME = "atmos.yaml"
SYSTEM_DIR_CONFIG_FILE_PATH = "/usr/local/etc/atmos"
WINDOWS_APP_DATA_ENV_VAR = "LOCALAPPDATA"

# Custom flag carrying helmfile global options.
GLOBAL_OPTIONS_FLAG = "--global-options"

TERRAFORM_DIR_FLAG = "--terraform-dir"
HELMFILE_DIR_FLAG = "--helmfile-dir"
CLI_CONFIG_DIR_FLAG = "--config-dir"
STACK_DIR_FLAG = "--stacks-dir"
BASE_PATH_FLAG = "--base-path"
WORKFLOW_DIR_FLAG = "--workflows-dir"
KUBE_CONFIG_CONFIG_FLAG = "--kubeconfig-path"
JSON_SCHEMA_DIR_FLAG = "--schemas-jsonschema-dir"
OPA_DIR_FLAG = "--schemas-opa-dir"
CUE_DIR_FLAG = "--schemas-cue-dir"

DEPLOY_RUN_INIT_FLAG = "--deploy-run-init"
AUTO_GENERATE_BACKEND_FILE_FLAG = "--auto-generate-backend-file"
INIT_RUN_RECONFIGURE = "--init-run-reconfigure"

FROM_PLAN_FLAG = "--from-plan"
PLAN_FILE_FLAG = "--planfile"
DRY_RUN_FLAG = "--dry-run"
SKIP_INIT_FLAG = "--skip-init"
REDIRECT_STDERR_FLAG = "--redirect-stderr"

HELP_FLAG_1 = "-h"
HELP_FLAG_2 = "--help"

COMPONENT_CONFIG_FILE_NAME = "component.yaml"

IMPORT_SECTION_NAME = "import"