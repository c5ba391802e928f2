"""GitHub content source implementation using PyGithub."""

import asyncio
from typing import Any

import requests
import structlog
from github import Auth, Github, GithubException  # type: ignore[import-not-found]

from please_config.exceptions import RemoteFetchError
from please_config.settings import get_settings
from please_config.sources.base import ContentSource

log = structlog.get_logger(__name__)


class GitHubContentSource(ContentSource):
    """Reads repository files through the GitHub contents API."""

    def __init__(self, token: str, base_url: str | None = None):
        """Initialize GitHub content source.

        Args:
            token: GitHub personal access token or App installation token
            base_url: GitHub API base URL; defaults to the
                ``PLEASE_CONFIG_GITHUB_API_URL`` setting
        """
        self.token = token.strip() if token else token
        # Normalize base_url by removing trailing slash
        self.base_url = (base_url or get_settings().github_api_url).rstrip("/")
        self._client: Github | None = None

    def _get_client(self) -> Github:
        if self._client is None:
            self._client = Github(auth=Auth.Token(self.token), base_url=self.base_url)
        return self._client

    async def fetch_file(
        self,
        owner: str,
        repo: str,
        path: str,
        ref: str | None = None,
    ) -> str | None:
        """Fetch a file's base64-encoded content via PyGithub."""
        log.info("fetch_file", owner=owner, repo=repo, path=path, ref=ref)

        def _fetch() -> str | None:
            # lazy=True skips the repository lookup request
            repository = self._get_client().get_repo(f"{owner}/{repo}", lazy=True)
            kwargs: dict[str, Any] = {"ref": ref} if ref else {}
            contents = repository.get_contents(path, **kwargs)

            # Directories come back as a list of entries
            if isinstance(contents, list):
                return None

            # Files above the contents API limit come back with no inline content
            if not contents.content and (contents.size or 0) > 0:
                raise RemoteFetchError(
                    f"GitHub returned no inline content for {owner}/{repo}/{path} ({contents.size} bytes)"
                )

            return contents.content or ""

        try:
            return await asyncio.to_thread(_fetch)
        except requests.RequestException as e:
            log.error("github_fetch_file_failed", owner=owner, repo=repo, path=path, error=str(e))
            raise RemoteFetchError(f"GitHub contents request failed for {owner}/{repo}/{path}: {e}") from e
        except GithubException as e:
            if e.status == 404:
                log.debug("github_file_not_found", owner=owner, repo=repo, path=path, ref=ref)
                return None
            log.error("github_fetch_file_failed", owner=owner, repo=repo, path=path, error=str(e))
            raise RemoteFetchError(
                f"GitHub contents request failed for {owner}/{repo}/{path}",
                status_code=e.status,
            ) from e

    async def close(self) -> None:
        """Close the underlying GitHub client."""
        if self._client:
            await asyncio.to_thread(self._client.close)
            self._client = None
