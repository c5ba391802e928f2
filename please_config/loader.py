"""
Load configuration from a repository checkout or a hosted repository.

Two entry points with different failure policies:

- ``load_config`` reads ``<repo>/.please/config.yml`` from disk. A missing
  file yields the defaults; a file that exists but cannot be read, parsed or
  validated raises, naming the file and the cause.
- ``load_config_from_remote`` asks a ``ContentSource`` for the same path. A
  missing file yields the defaults, and so does every other failure, which is
  logged instead of raised so the bot keeps running.
"""

import base64
import binascii
from pathlib import Path

import structlog
import yaml

from please_config.exceptions import ConfigParseError, ConfigurationError, RemoteFetchError
from please_config.schema import CONFIG_PATH, DEFAULT_CONFIG, Config, config_file_path
from please_config.settings import LoaderSettings, get_settings
from please_config.sources.base import ContentSource
from please_config.validator import validate_config

log = structlog.get_logger(__name__)


def parse_config_text(text: str, source: str | None = None) -> Config:
    """Parse YAML text and validate it.

    Args:
        text: YAML document
        source: Origin of the document, included in error messages

    Returns:
        Validated configuration

    Raises:
        ConfigParseError: If the text is not valid YAML
        SchemaValidationError: If the document does not match the schema
    """
    try:
        raw = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise ConfigParseError(f"Invalid YAML syntax: {e}", source=source) from e

    return validate_config(raw, source=source)


def load_config(repo_path: str | Path) -> Config:
    """Load and validate configuration from ``.please/config.yml``.

    Args:
        repo_path: Path to the repository root

    Returns:
        Validated configuration, or ``DEFAULT_CONFIG`` if the file does not exist

    Raises:
        ConfigurationError: If the file cannot be read
        ConfigParseError: If the file is not valid YAML
        SchemaValidationError: If the file does not match the schema
    """
    config_file = config_file_path(repo_path)

    if not config_file.exists():
        log.debug("config_file_absent", path=str(config_file))
        return DEFAULT_CONFIG

    try:
        text = config_file.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigurationError(f"Cannot read configuration file: {e}", source=str(config_file)) from e

    config = parse_config_text(text, source=str(config_file))
    log.info("config_loaded", path=str(config_file))
    return config


async def load_config_from_remote(
    source: ContentSource,
    owner: str,
    repo: str,
    ref: str | None = None,
    settings: LoaderSettings | None = None,
) -> Config:
    """Load configuration from a hosted repository.

    Never raises for remote or content problems: anything other than a valid
    document is logged and replaced by ``DEFAULT_CONFIG``.

    Args:
        source: Content source for the hosting provider
        owner: Repository owner
        repo: Repository name
        ref: Branch, tag or commit SHA; None uses the default branch
        settings: Loader settings; read from the environment if omitted

    Returns:
        Validated configuration, or ``DEFAULT_CONFIG``
    """
    descriptor = f"{owner}/{repo}/{CONFIG_PATH}" + (f"@{ref}" if ref else "")

    try:
        settings = settings or get_settings()
        encoded = await source.fetch_file(owner, repo, CONFIG_PATH, ref=ref)
        if encoded is None:
            log.info("remote_config_not_found", source=descriptor)
            return DEFAULT_CONFIG

        text = _decode_content(encoded, settings.max_config_bytes)
        config = parse_config_text(text, source=descriptor)
    except Exception as e:
        log.error("remote_config_load_failed", source=descriptor, error=str(e), exc_info=True)
        return DEFAULT_CONFIG

    log.info("config_loaded", source=descriptor)
    return config


def _decode_content(encoded: str, max_bytes: int) -> str:
    try:
        payload = base64.b64decode(encoded)
    except (binascii.Error, ValueError) as e:
        raise RemoteFetchError(f"Config content is not valid base64: {e}") from e

    if len(payload) > max_bytes:
        raise RemoteFetchError(f"Config content is {len(payload)} bytes, limit is {max_bytes}")

    try:
        return payload.decode("utf-8")
    except UnicodeDecodeError as e:
        raise RemoteFetchError(f"Config content is not valid UTF-8: {e}") from e
