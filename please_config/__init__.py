"""please-config: configuration for the PleaseAI repository bot.

Defines, validates, loads and generates ``.please/config.yml``, and provides
the decision helpers the bot uses to act on it.

Example:
    >>> from please_config import load_config, should_review_pr
    >>> config = load_config(".")
    >>> should_review_pr(config, is_draft=False)
    True
"""

__version__ = "0.1.0"

from please_config.enums import Language, SeverityLevel
from please_config.exceptions import (
    ConfigParseError,
    ConfigurationError,
    FieldIssue,
    PleaseConfigError,
    RemoteFetchError,
    SchemaValidationError,
)
from please_config.generator import (
    GenerateConfigOptions,
    dump_config_yaml,
    generate_config,
    generate_config_yaml,
)
from please_config.json_schema import build_json_schema
from please_config.loader import load_config, load_config_from_remote, parse_config_text
from please_config.predicates import (
    fix_requires_investigation,
    fix_requires_org_membership,
    get_comment_severity_threshold,
    get_language,
    get_max_review_comments,
    get_notion_database_id,
    get_notion_page_id,
    get_slack_channel,
    get_slack_webhook_url,
    investigate_requires_org_membership,
    is_auto_review_enabled,
    is_auto_triage_enabled,
    is_code_review_disabled,
    is_code_workspace_enabled,
    is_dev_help_enabled,
    is_fix_enabled,
    is_investigate_enabled,
    is_manual_triage_enabled,
    is_notion_enabled,
    is_path_ignored,
    is_slack_enabled,
    meets_severity_threshold,
    should_auto_create_pr,
    should_auto_investigate_on_bug_label,
    should_auto_run_tests,
    should_review_pr,
    should_show_help,
    should_show_summary,
    should_update_issue_type,
)
from please_config.schema import (
    CONFIG_PATH,
    DEFAULT_CONFIG,
    CodeReviewConfig,
    CodeWorkspaceConfig,
    Config,
    IntegrationsConfig,
    IssueWorkflowConfig,
    PullRequestOpenedConfig,
    config_file_path,
)
from please_config.sources import ContentSource, GiteaContentSource, GitHubContentSource
from please_config.validator import validate_config

__all__ = [
    "__version__",
    # Schema
    "CONFIG_PATH",
    "DEFAULT_CONFIG",
    "CodeReviewConfig",
    "CodeWorkspaceConfig",
    "Config",
    "IntegrationsConfig",
    "IssueWorkflowConfig",
    "Language",
    "PullRequestOpenedConfig",
    "SeverityLevel",
    "config_file_path",
    "build_json_schema",
    # Validation and loading
    "validate_config",
    "parse_config_text",
    "load_config",
    "load_config_from_remote",
    "ContentSource",
    "GiteaContentSource",
    "GitHubContentSource",
    # Generation
    "GenerateConfigOptions",
    "dump_config_yaml",
    "generate_config",
    "generate_config_yaml",
    # Errors
    "ConfigParseError",
    "ConfigurationError",
    "FieldIssue",
    "PleaseConfigError",
    "RemoteFetchError",
    "SchemaValidationError",
    # Predicates
    "fix_requires_investigation",
    "fix_requires_org_membership",
    "get_comment_severity_threshold",
    "get_language",
    "get_max_review_comments",
    "get_notion_database_id",
    "get_notion_page_id",
    "get_slack_channel",
    "get_slack_webhook_url",
    "investigate_requires_org_membership",
    "is_auto_review_enabled",
    "is_auto_triage_enabled",
    "is_code_review_disabled",
    "is_code_workspace_enabled",
    "is_dev_help_enabled",
    "is_fix_enabled",
    "is_investigate_enabled",
    "is_manual_triage_enabled",
    "is_notion_enabled",
    "is_path_ignored",
    "is_slack_enabled",
    "meets_severity_threshold",
    "should_auto_create_pr",
    "should_auto_investigate_on_bug_label",
    "should_auto_run_tests",
    "should_review_pr",
    "should_show_help",
    "should_show_summary",
    "should_update_issue_type",
]
