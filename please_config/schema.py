"""
Configuration schema using Pydantic for type-safe, fully defaulted settings.

Every section of ``.please/config.yml`` is declared here together with its
field types and default values. Validating an empty document yields
``DEFAULT_CONFIG``, the canonical default instance.

Leaf fields use strict types so that YAML scalars of the wrong kind (for
example ``"true"`` for a boolean) are rejected instead of coerced.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, StrictBool, StrictInt, StrictStr, model_validator

from please_config.enums import Language, SeverityLevel

CONFIG_DIR = ".please"
CONFIG_FILENAME = "config.yml"
CONFIG_PATH = f"{CONFIG_DIR}/{CONFIG_FILENAME}"

UNLIMITED_REVIEW_COMMENTS = -1


def config_file_path(repo_path: str | Path) -> Path:
    """Get the conventional config file location for a repository root."""
    return Path(repo_path) / CONFIG_DIR / CONFIG_FILENAME


class ConfigSection(BaseModel):
    """Base for every configuration section.

    Sections are immutable, ignore unknown keys, and treat explicit ``null``
    values the same as absent keys so the field default applies.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    @model_validator(mode="before")
    @classmethod
    def _treat_null_as_absent(cls, data: Any) -> Any:
        if isinstance(data, dict):
            return {key: value for key, value in data.items() if value is not None}
        return data


class PullRequestOpenedConfig(ConfigSection):
    """Behavior when a pull request is opened."""

    help: StrictBool = Field(default=False, description="Post a help comment")
    summary: StrictBool = Field(default=True, description="Post a summary of the changes")
    code_review: StrictBool = Field(default=True, description="Run an automatic code review")
    include_drafts: StrictBool = Field(default=True, description="Also act on draft pull requests")


class CodeReviewConfig(ConfigSection):
    """Code review configuration."""

    disable: StrictBool = Field(default=False, description="Disable code review entirely")
    comment_severity_threshold: SeverityLevel = Field(
        default=SeverityLevel.MEDIUM,
        description="Minimum severity of review comments to post",
    )
    max_review_comments: StrictInt = Field(
        default=UNLIMITED_REVIEW_COMMENTS,
        ge=UNLIMITED_REVIEW_COMMENTS,
        description="Maximum review comments per review (-1 for unlimited)",
    )
    pull_request_opened: PullRequestOpenedConfig = Field(
        default_factory=PullRequestOpenedConfig,
        description="Actions taken when a pull request is opened",
    )


class IssueOpenedConfig(ConfigSection):
    """Behavior when an issue is opened."""

    post_dev_help: StrictBool = Field(default=True, description="Post a development help comment")


class TriageConfig(ConfigSection):
    """Issue triage configuration."""

    auto: StrictBool = Field(default=True, description="Triage new issues automatically")
    manual: StrictBool = Field(default=True, description="Allow triage on request")
    update_issue_type: StrictBool = Field(default=True, description="Update the issue type during triage")


class InvestigateConfig(ConfigSection):
    """Issue investigation configuration."""

    enabled: StrictBool = Field(default=True, description="Enable investigation")
    org_members_only: StrictBool = Field(default=True, description="Restrict to organization members")
    auto_on_bug_label: StrictBool = Field(default=False, description="Investigate when the bug label is added")


class FixConfig(ConfigSection):
    """Issue fix configuration."""

    enabled: StrictBool = Field(default=True, description="Enable fixes")
    org_members_only: StrictBool = Field(default=True, description="Restrict to organization members")
    require_investigation: StrictBool = Field(default=False, description="Require a prior investigation")
    auto_create_pr: StrictBool = Field(default=True, description="Open a pull request after fixing")
    auto_run_tests: StrictBool = Field(default=True, description="Run tests after fixing")


class IssueWorkflowConfig(ConfigSection):
    """Issue workflow configuration (triage → investigate → fix)."""

    disable: StrictBool = Field(default=False, description="Disable the whole issue workflow")
    issue_opened: IssueOpenedConfig = Field(default_factory=IssueOpenedConfig)
    triage: TriageConfig = Field(default_factory=TriageConfig)
    investigate: InvestigateConfig = Field(default_factory=InvestigateConfig)
    fix: FixConfig = Field(default_factory=FixConfig)


class CodeWorkspaceConfig(ConfigSection):
    """Code workspace configuration."""

    enabled: StrictBool = Field(default=True, description="Enable the code workspace")


class NotionIntegrationConfig(ConfigSection):
    """Notion integration."""

    enabled: StrictBool = Field(default=False, description="Enable the Notion integration")
    page_id: StrictStr | None = Field(default=None, description="Notion page ID")
    database_id: StrictStr | None = Field(default=None, description="Notion database ID")


class SlackIntegrationConfig(ConfigSection):
    """Slack integration."""

    enabled: StrictBool = Field(default=False, description="Enable the Slack integration")
    webhook_url: StrictStr | None = Field(default=None, description="Incoming webhook URL")
    channel: StrictStr | None = Field(default=None, description="Channel to post to")


class IntegrationsConfig(ConfigSection):
    """Third-party integrations."""

    notion: NotionIntegrationConfig = Field(default_factory=NotionIntegrationConfig)
    slack: SlackIntegrationConfig = Field(default_factory=SlackIntegrationConfig)


class Config(ConfigSection):
    """Root configuration, as stored in ``.please/config.yml``.

    Field order is the key order used when the configuration is serialized.
    """

    language: Language = Field(default=Language.KO, description="Language of bot responses")
    ignore_patterns: tuple[StrictStr, ...] = Field(
        default=(),
        description="Glob patterns of paths the bot ignores",
    )
    code_review: CodeReviewConfig = Field(default_factory=CodeReviewConfig)
    issue_workflow: IssueWorkflowConfig = Field(default_factory=IssueWorkflowConfig)
    code_workspace: CodeWorkspaceConfig = Field(default_factory=CodeWorkspaceConfig)
    integrations: IntegrationsConfig = Field(default_factory=IntegrationsConfig)


DEFAULT_CONFIG = Config()
