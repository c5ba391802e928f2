"""Remote content sources for loading configuration from hosted repositories.

Key Components:
    - ContentSource: Abstract interface used by the remote loader
    - GitHubContentSource: GitHub contents API via PyGithub
    - GiteaContentSource: Gitea contents API via httpx
"""

from please_config.sources.base import ContentSource
from please_config.sources.gitea import GiteaContentSource
from please_config.sources.github import GitHubContentSource

__all__ = ["ContentSource", "GiteaContentSource", "GitHubContentSource"]
