"""Gitea content source implementation using direct REST API calls."""

from typing import Any

import httpx
import structlog

from please_config.exceptions import RemoteFetchError
from please_config.sources.base import ContentSource

log = structlog.get_logger(__name__)


class GiteaContentSource(ContentSource):
    """Reads repository files through the Gitea contents API."""

    def __init__(
        self,
        base_url: str,
        token: str,
        client: httpx.AsyncClient | None = None,
    ):
        """Initialize Gitea content source.

        Args:
            base_url: Gitea base URL (e.g., http://gitea.example.com)
            token: API token
            client: Shared HTTP client; one is created on first use if omitted
        """
        self.base_url = base_url.rstrip("/")
        self.api_base = f"{self.base_url}/api/v1"
        self.token = token.strip() if token else token
        self._client = client
        self._owns_client = client is None

    @property
    def _headers(self) -> dict[str, str]:
        return {"Authorization": f"token {self.token}", "Accept": "application/json"}

    def _get_client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient()
        return self._client

    async def fetch_file(
        self,
        owner: str,
        repo: str,
        path: str,
        ref: str | None = None,
    ) -> str | None:
        """Fetch a file's base64-encoded content via the REST API."""
        log.info("fetch_file", owner=owner, repo=repo, path=path, ref=ref)

        url = f"{self.api_base}/repos/{owner}/{repo}/contents/{path}"
        params = {"ref": ref} if ref else None

        try:
            response = await self._get_client().get(url, params=params, headers=self._headers)
        except httpx.HTTPError as e:
            log.error("gitea_fetch_file_failed", owner=owner, repo=repo, path=path, error=str(e))
            raise RemoteFetchError(f"Gitea contents request failed for {owner}/{repo}/{path}: {e}") from e

        if response.status_code == 404:
            log.debug("gitea_file_not_found", owner=owner, repo=repo, path=path, ref=ref)
            return None

        try:
            response.raise_for_status()
            content_data = response.json()
        except httpx.HTTPStatusError as e:
            log.error(
                "gitea_fetch_file_failed",
                owner=owner,
                repo=repo,
                path=path,
                status_code=response.status_code,
            )
            raise RemoteFetchError(
                f"Gitea contents request failed for {owner}/{repo}/{path}",
                status_code=response.status_code,
            ) from e
        except ValueError as e:
            raise RemoteFetchError(f"Gitea returned a non-JSON response for {owner}/{repo}/{path}") from e

        # Directories come back as a list of entries
        if not isinstance(content_data, dict) or content_data.get("type") != "file":
            return None

        content = content_data.get("content")
        # Files above the server's blob limit come back with no inline content
        if not content and (content_data.get("size") or 0) > 0:
            raise RemoteFetchError(
                f"Gitea returned no inline content for {owner}/{repo}/{path} ({content_data['size']} bytes)"
            )

        return content or ""

    async def aclose(self) -> None:
        """Close the HTTP client if this source created it."""
        if self._client is not None and self._owns_client:
            await self._client.aclose()
            self._client = None

    async def __aenter__(self) -> "GiteaContentSource":
        """Async context manager entry."""
        return self

    async def __aexit__(self, *args: Any) -> None:
        """Async context manager exit."""
        await self.aclose()
