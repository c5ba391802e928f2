"""Pytest configuration and shared fixtures."""

import base64
from collections.abc import Callable
from pathlib import Path

import pytest

from please_config.schema import CONFIG_DIR, CONFIG_FILENAME
from please_config.sources.base import ContentSource


class StubContentSource(ContentSource):
    """In-memory content source that records every request."""

    def __init__(self, content: str | None = None, error: Exception | None = None):
        self.content = content
        self.error = error
        self.calls: list[tuple[str, str, str, str | None]] = []

    async def fetch_file(
        self,
        owner: str,
        repo: str,
        path: str,
        ref: str | None = None,
    ) -> str | None:
        self.calls.append((owner, repo, path, ref))
        if self.error is not None:
            raise self.error
        return self.content


def encode_content(text: str) -> str:
    """Base64-encode text the way contents APIs deliver it."""
    return base64.b64encode(text.encode("utf-8")).decode("ascii")


@pytest.fixture
def repo_path(tmp_path: Path) -> Path:
    """Temporary repository root without a config file."""
    root = tmp_path / "repo"
    root.mkdir()
    return root


@pytest.fixture
def write_config(repo_path: Path) -> Callable[[str], Path]:
    """Write ``.please/config.yml`` into the temporary repository."""

    def _write(content: str) -> Path:
        config_dir = repo_path / CONFIG_DIR
        config_dir.mkdir(exist_ok=True)
        config_file = config_dir / CONFIG_FILENAME
        config_file.write_text(content, encoding="utf-8")
        return config_file

    return _write


@pytest.fixture
def stub_source() -> Callable[..., StubContentSource]:
    """Factory for stub content sources."""

    def _make(text: str | None = None, error: Exception | None = None) -> StubContentSource:
        content = encode_content(text) if text is not None else None
        return StubContentSource(content=content, error=error)

    return _make
