"""Enumerations for please-config settings."""

from enum import Enum


class Language(str, Enum):
    """Languages the bot can respond in."""

    KO = "ko"
    EN = "en"

    def __str__(self) -> str:
        return self.value


class SeverityLevel(str, Enum):
    """Severity levels for review comments, ordered from least to most severe."""

    LOW = "LOW"
    MEDIUM = "MEDIUM"
    HIGH = "HIGH"

    def __str__(self) -> str:
        return self.value

    @property
    def rank(self) -> int:
        """Position of this level in LOW < MEDIUM < HIGH."""
        return list(SeverityLevel).index(self)
