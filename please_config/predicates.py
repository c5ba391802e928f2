"""
Decision helpers over a validated configuration.

Each helper answers one question ("should this pull request be reviewed?",
"is auto-triage on?") so that callers never dig through the configuration
tree themselves. Issue-workflow gates return False whenever the whole
workflow is disabled, regardless of the sub-feature's own flag.

Helpers for optional sections also accept unvalidated input (a plain mapping
or ``Config.model_construct(...)``); any missing or null step along the path
falls back to the value at the same path in ``DEFAULT_CONFIG``.
"""

from collections.abc import Mapping
from fnmatch import fnmatch
from typing import Any

from please_config.enums import Language, SeverityLevel
from please_config.schema import DEFAULT_CONFIG, UNLIMITED_REVIEW_COMMENTS, Config

ConfigLike = Config | Mapping[str, Any]


def _resolve(config: ConfigLike, path: str) -> Any:
    """Read a dotted path, falling back to the default at that path."""
    node: Any = config
    for part in path.split("."):
        if node is None:
            break
        node = node.get(part) if isinstance(node, Mapping) else getattr(node, part, None)

    if node is None:
        node = DEFAULT_CONFIG
        for part in path.split("."):
            node = getattr(node, part)
    return node


# =============================================================================
# Code review
# =============================================================================


def is_code_review_disabled(config: Config) -> bool:
    """Check if code review is disabled."""
    return config.code_review.disable


def get_language(config: Config) -> Language:
    """Get the language preference."""
    return config.language


def should_review_pr(config: Config, is_draft: bool) -> bool:
    """Check if a pull request should get an automatic review.

    Args:
        config: Validated configuration
        is_draft: Whether the pull request is a draft

    Returns:
        False if code review is disabled, or if the pull request is a draft
        and drafts are excluded; otherwise the ``code_review`` flag of
        ``pull_request_opened``.
    """
    if is_code_review_disabled(config):
        return False

    pr_config = config.code_review.pull_request_opened

    if is_draft and not pr_config.include_drafts:
        return False

    return pr_config.code_review


def should_show_help(config: Config) -> bool:
    """Check if a help comment should be posted on new pull requests."""
    return config.code_review.pull_request_opened.help


def should_show_summary(config: Config) -> bool:
    """Check if a summary should be posted on new pull requests."""
    return config.code_review.pull_request_opened.summary


def is_auto_review_enabled(config: ConfigLike) -> bool:
    """Check if automatic code review on pull request opened is enabled."""
    return _resolve(config, "code_review.pull_request_opened.code_review")


def get_comment_severity_threshold(config: Config) -> SeverityLevel:
    """Get the minimum severity of review comments to post."""
    return config.code_review.comment_severity_threshold


def meets_severity_threshold(config: Config, severity: SeverityLevel | str) -> bool:
    """Check if a review comment of the given severity should be posted.

    Raises:
        ValueError: If ``severity`` is not a known severity level
    """
    return SeverityLevel(severity).rank >= get_comment_severity_threshold(config).rank


def get_max_review_comments(config: Config) -> int | None:
    """Get the review comment cap, or None when unlimited."""
    limit = config.code_review.max_review_comments
    if limit == UNLIMITED_REVIEW_COMMENTS:
        return None
    return limit


def is_path_ignored(config: Config, path: str) -> bool:
    """Check if a repository path matches any of the ignore patterns."""
    return any(fnmatch(path, pattern) for pattern in config.ignore_patterns)


# =============================================================================
# Issue workflow
# =============================================================================


def is_auto_triage_enabled(config: Config) -> bool:
    """Check if new issues are triaged automatically."""
    return not config.issue_workflow.disable and config.issue_workflow.triage.auto


def is_manual_triage_enabled(config: Config) -> bool:
    """Check if triage can be requested manually."""
    return not config.issue_workflow.disable and config.issue_workflow.triage.manual


def should_update_issue_type(config: Config) -> bool:
    """Check if triage updates the issue type."""
    return config.issue_workflow.triage.update_issue_type


def is_investigate_enabled(config: Config) -> bool:
    """Check if issue investigation is enabled."""
    return not config.issue_workflow.disable and config.issue_workflow.investigate.enabled


def investigate_requires_org_membership(config: Config) -> bool:
    """Check if investigation is limited to organization members."""
    return config.issue_workflow.investigate.org_members_only


def should_auto_investigate_on_bug_label(config: Config) -> bool:
    """Check if adding the bug label starts an investigation."""
    return is_investigate_enabled(config) and config.issue_workflow.investigate.auto_on_bug_label


def is_fix_enabled(config: Config) -> bool:
    """Check if issue fixing is enabled."""
    return not config.issue_workflow.disable and config.issue_workflow.fix.enabled


def fix_requires_org_membership(config: Config) -> bool:
    """Check if fixing is limited to organization members."""
    return config.issue_workflow.fix.org_members_only


def fix_requires_investigation(config: Config) -> bool:
    """Check if a fix needs a prior investigation."""
    return config.issue_workflow.fix.require_investigation


def should_auto_create_pr(config: Config) -> bool:
    """Check if a pull request is opened after a fix."""
    return config.issue_workflow.fix.auto_create_pr


def should_auto_run_tests(config: Config) -> bool:
    """Check if tests run after a fix."""
    return config.issue_workflow.fix.auto_run_tests


def is_dev_help_enabled(config: ConfigLike) -> bool:
    """Check if a development help comment is posted on new issues."""
    return _resolve(config, "issue_workflow.issue_opened.post_dev_help")


# =============================================================================
# Code workspace and integrations
# =============================================================================


def is_code_workspace_enabled(config: ConfigLike) -> bool:
    """Check if the code workspace is enabled.

    An absent section counts as enabled, the same as the schema default.
    """
    return _resolve(config, "code_workspace.enabled")


def is_notion_enabled(config: ConfigLike) -> bool:
    """Check if the Notion integration is enabled."""
    return _resolve(config, "integrations.notion.enabled")


def get_notion_page_id(config: ConfigLike) -> str | None:
    """Get the Notion page ID, if configured."""
    return _resolve(config, "integrations.notion.page_id")


def get_notion_database_id(config: ConfigLike) -> str | None:
    """Get the Notion database ID, if configured."""
    return _resolve(config, "integrations.notion.database_id")


def is_slack_enabled(config: ConfigLike) -> bool:
    """Check if the Slack integration is enabled."""
    return _resolve(config, "integrations.slack.enabled")


def get_slack_webhook_url(config: ConfigLike) -> str | None:
    """Get the Slack webhook URL, if configured."""
    return _resolve(config, "integrations.slack.webhook_url")


def get_slack_channel(config: ConfigLike) -> str | None:
    """Get the Slack channel, if configured."""
    return _resolve(config, "integrations.slack.channel")
