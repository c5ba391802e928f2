"""Custom exception hierarchy for please-config.

Exception Hierarchy:
    PleaseConfigError (base)
    ├── ConfigurationError
    │   ├── SchemaValidationError
    │   └── ConfigParseError
    └── RemoteFetchError

Local configuration problems surface to the caller as ConfigurationError
subclasses. RemoteFetchError is raised by content sources and is absorbed by
the remote loader, which logs it and falls back to the default configuration.

Example Usage:
    >>> from please_config.exceptions import ConfigurationError
    >>> try:
    ...     config = load_config(repo_path)
    ... except ConfigurationError as e:
    ...     print(e.message)
"""

from dataclasses import dataclass


class PleaseConfigError(Exception):
    """Base exception for all please-config errors.

    Attributes:
        message: Human-readable error description
    """

    def __init__(self, message: str) -> None:
        """Initialize exception.

        Args:
            message: Error message
        """
        self.message = message
        super().__init__(message)


class ConfigurationError(PleaseConfigError):
    """Configuration-related errors.

    Raised when a configuration file cannot be read, parsed or validated.

    Attributes:
        source: Where the configuration came from (file path or remote
            descriptor), if known
    """

    def __init__(self, message: str, source: str | None = None) -> None:
        """Initialize exception.

        Args:
            message: Error message
            source: Origin of the configuration document
        """
        self.source = source

        full_message = message
        if source:
            full_message = f"Failed to load config from {source}: {message}"

        super().__init__(full_message)
        # Preserve original message (super sets self.message to full_message)
        self.message = message


@dataclass(frozen=True)
class FieldIssue:
    """A single offending field in a configuration document.

    Attributes:
        path: Dotted field path, e.g. "code_review.disable" or
            "ignore_patterns.1". "(root)" denotes the document itself.
        reason: Human-readable reason, e.g. "expected boolean, got string"
    """

    path: str
    reason: str

    def __str__(self) -> str:
        return f"{self.path}: {self.reason}"


class SchemaValidationError(ConfigurationError):
    """Document does not conform to the configuration schema.

    Attributes:
        issues: Every offending field with its reason
    """

    def __init__(self, issues: list[FieldIssue], source: str | None = None) -> None:
        """Initialize exception.

        Args:
            issues: Offending fields (at least one)
            source: Origin of the configuration document
        """
        self.issues = list(issues)
        details = "; ".join(str(issue) for issue in self.issues)
        super().__init__(f"Invalid configuration: {details}", source=source)

    @property
    def paths(self) -> list[str]:
        """Dotted paths of every offending field."""
        return [issue.path for issue in self.issues]


class ConfigParseError(ConfigurationError):
    """Document is not well-formed YAML."""

    pass


class RemoteFetchError(PleaseConfigError):
    """Remote content source failed for a reason other than "not found".

    Examples:
        - HTTP request failed
        - Authentication rejected
        - Payload could not be decoded
        - Payload exceeds the configured size bound
    """

    def __init__(self, message: str, status_code: int | None = None) -> None:
        """Initialize exception.

        Args:
            message: Error message
            status_code: HTTP status code (if applicable)
        """
        self.status_code = status_code

        full_message = message
        if status_code:
            full_message = f"{message} (HTTP {status_code})"

        super().__init__(full_message)
        self.message = message
