"""
Generate configuration from a handful of high-level options.

Used when bootstrapping a repository: the result starts from the defaults
and only toggles the language and the two top-level feature switches.
"""

from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, Field, StrictBool

from please_config.enums import Language
from please_config.schema import DEFAULT_CONFIG, Config

YAML_INDENT = 2
YAML_LINE_WIDTH = 80


class GenerateConfigOptions(BaseModel):
    """Options for generating configuration.

    Fields left as None keep the default behavior. The two switches only
    accept real booleans, so ``0`` or ``"no"`` is rejected instead of being
    read as False.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    language: Language | None = Field(default=None, description="Language of bot responses")
    enable_code_review: StrictBool | None = Field(
        default=None, description="False disables code review; any other value leaves it enabled"
    )
    enable_issue_workflow: StrictBool | None = Field(
        default=None, description="False disables the issue workflow; any other value leaves it enabled"
    )


def generate_config(options: GenerateConfigOptions | None = None) -> Config:
    """Generate a configuration object with optional customizations.

    ``DEFAULT_CONFIG`` is never modified; the overridden sections are copies.

    Args:
        options: Configuration options to override defaults

    Returns:
        Generated configuration
    """
    options = options or GenerateConfigOptions()

    return DEFAULT_CONFIG.model_copy(
        update={
            "language": options.language or DEFAULT_CONFIG.language,
            "code_review": DEFAULT_CONFIG.code_review.model_copy(
                update={"disable": options.enable_code_review is False}
            ),
            "issue_workflow": DEFAULT_CONFIG.issue_workflow.model_copy(
                update={"disable": options.enable_issue_workflow is False}
            ),
        }
    )


def generate_config_yaml(options: GenerateConfigOptions | None = None) -> str:
    """Generate a YAML string representation of the configuration.

    Args:
        options: Configuration options to override defaults

    Returns:
        YAML text that validates back to ``generate_config(options)``
    """
    return dump_config_yaml(generate_config(options))


def dump_config_yaml(config: Config) -> str:
    """Serialize a configuration to YAML.

    Keys keep their schema declaration order and unset optional values are
    left out.
    """
    document: dict[str, Any] = config.model_dump(mode="json", exclude_none=True)
    return yaml.safe_dump(
        document,
        indent=YAML_INDENT,
        width=YAML_LINE_WIDTH,
        default_flow_style=False,
        sort_keys=False,
        allow_unicode=True,
    )
