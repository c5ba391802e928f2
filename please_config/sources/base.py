"""
Abstract content source used by the remote configuration loader.

A content source retrieves a single file from a hosted repository. It hides
the hosting provider's API behind one method so that the loader can be used
with GitHub, Gitea or a test double.
"""

from abc import ABC, abstractmethod


class ContentSource(ABC):
    """Abstract base class for remote repository file retrieval."""

    @abstractmethod
    async def fetch_file(
        self,
        owner: str,
        repo: str,
        path: str,
        ref: str | None = None,
    ) -> str | None:
        """Fetch a file's base64-encoded content.

        Args:
            owner: Repository owner (user or organization)
            repo: Repository name
            path: File path relative to repository root (e.g., ".please/config.yml")
            ref: Branch name, tag, or commit SHA. None means the repository's
                default branch.

        Returns:
            The file content, base64-encoded as delivered by the provider's
            contents API, or None if the path does not exist or is not a file.

        Raises:
            RemoteFetchError: If the request fails for any reason other than
                the file not existing.

        Note:
            A 404 response is handled gracefully and returns None rather
            than raising an exception.
        """
        pass
