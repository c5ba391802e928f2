"""Tests for please_config/schema.py Pydantic models.

Tests cover:
- Default values of every section
- DEFAULT_CONFIG equals validating an empty document
- Immutability of validated configs
- Conventional config file location
- Enumerations
"""

from pathlib import Path

import pytest
from pydantic import ValidationError

from please_config.enums import Language, SeverityLevel
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
from please_config.validator import validate_config


class TestDefaultConfig:
    """Test the canonical default instance."""

    def test_equals_validated_empty_document(self):
        """Test DEFAULT_CONFIG is deep-equal to validating {}."""
        assert validate_config({}) == DEFAULT_CONFIG

    def test_equals_fresh_config(self):
        """Test DEFAULT_CONFIG matches a freshly constructed Config."""
        assert Config() == DEFAULT_CONFIG

    def test_top_level_defaults(self):
        """Test top-level scalar defaults."""
        assert DEFAULT_CONFIG.language == Language.KO
        assert DEFAULT_CONFIG.ignore_patterns == ()

    def test_code_review_defaults(self):
        """Test code review defaults."""
        code_review = DEFAULT_CONFIG.code_review

        assert code_review.disable is False
        assert code_review.comment_severity_threshold == SeverityLevel.MEDIUM
        assert code_review.max_review_comments == -1

    def test_pull_request_opened_defaults(self):
        """Test pull request opened defaults."""
        pr_config = DEFAULT_CONFIG.code_review.pull_request_opened

        assert pr_config.help is False
        assert pr_config.summary is True
        assert pr_config.code_review is True
        assert pr_config.include_drafts is True

    def test_issue_workflow_defaults(self):
        """Test issue workflow defaults."""
        workflow = DEFAULT_CONFIG.issue_workflow

        assert workflow.disable is False
        assert workflow.issue_opened.post_dev_help is True
        assert (workflow.triage.auto, workflow.triage.manual, workflow.triage.update_issue_type) == (
            True,
            True,
            True,
        )
        assert workflow.investigate.enabled is True
        assert workflow.investigate.org_members_only is True
        assert workflow.investigate.auto_on_bug_label is False
        assert workflow.fix.enabled is True
        assert workflow.fix.org_members_only is True
        assert workflow.fix.require_investigation is False
        assert workflow.fix.auto_create_pr is True
        assert workflow.fix.auto_run_tests is True

    def test_code_workspace_enabled_by_default(self):
        """Test code workspace defaults to enabled."""
        assert DEFAULT_CONFIG.code_workspace.enabled is True

    def test_integrations_disabled_by_default(self):
        """Test integrations are disabled and have no identifiers."""
        integrations = DEFAULT_CONFIG.integrations

        assert integrations.notion.enabled is False
        assert integrations.notion.page_id is None
        assert integrations.notion.database_id is None
        assert integrations.slack.enabled is False
        assert integrations.slack.webhook_url is None
        assert integrations.slack.channel is None

    def test_section_defaults_match_standalone_sections(self):
        """Test each section default equals constructing the section directly."""
        assert DEFAULT_CONFIG.code_review == CodeReviewConfig()
        assert DEFAULT_CONFIG.code_review.pull_request_opened == PullRequestOpenedConfig()
        assert DEFAULT_CONFIG.issue_workflow == IssueWorkflowConfig()
        assert DEFAULT_CONFIG.code_workspace == CodeWorkspaceConfig()
        assert DEFAULT_CONFIG.integrations == IntegrationsConfig()


class TestImmutability:
    """Test that configs cannot be modified in place."""

    def test_default_config_is_frozen(self):
        """Test assigning to DEFAULT_CONFIG raises."""
        with pytest.raises(ValidationError):
            DEFAULT_CONFIG.language = Language.EN

    def test_nested_sections_are_frozen(self):
        """Test assigning to a nested section raises."""
        with pytest.raises(ValidationError):
            DEFAULT_CONFIG.code_review.disable = True

    def test_ignore_patterns_is_a_tuple(self):
        """Test ignore patterns cannot be appended to."""
        config = validate_config({"ignore_patterns": ["*.md"]})

        assert config.ignore_patterns == ("*.md",)
        assert isinstance(config.ignore_patterns, tuple)

    def test_model_copy_leaves_default_untouched(self):
        """Test customizing a copy does not change DEFAULT_CONFIG."""
        custom = DEFAULT_CONFIG.model_copy(update={"language": Language.EN})

        assert custom.language == Language.EN
        assert DEFAULT_CONFIG.language == Language.KO


class TestConfigFilePath:
    """Test the conventional config file location."""

    def test_config_path_constant(self):
        """Test the relative config path."""
        assert CONFIG_PATH == ".please/config.yml"

    def test_config_file_path_from_string(self, tmp_path: Path):
        """Test resolving the config file from a string root."""
        assert config_file_path(str(tmp_path)) == tmp_path / ".please" / "config.yml"

    def test_config_file_path_from_path(self, tmp_path: Path):
        """Test resolving the config file from a Path root."""
        assert config_file_path(tmp_path) == tmp_path / ".please" / "config.yml"


class TestEnums:
    """Test configuration enumerations."""

    def test_language_values(self):
        """Test language enum values."""
        assert [language.value for language in Language] == ["ko", "en"]

    def test_language_is_string_enum(self):
        """Test Language compares equal to its string value."""
        assert Language.EN == "en"
        assert str(Language.EN) == "en"

    def test_severity_values(self):
        """Test severity enum values."""
        assert [level.value for level in SeverityLevel] == ["LOW", "MEDIUM", "HIGH"]

    def test_severity_rank_order(self):
        """Test severity ranks increase from LOW to HIGH."""
        assert SeverityLevel.LOW.rank < SeverityLevel.MEDIUM.rank < SeverityLevel.HIGH.rank

    def test_invalid_language_raises(self):
        """Test unknown language raises ValueError."""
        with pytest.raises(ValueError):
            Language("fr")
