"""API key resolution for vultr_lb.

The key is taken from, in order: an explicit argument, the ``VULTR_API_KEY``
environment variable (``.env`` files are loaded on import), and the
``api_key`` entry of a TOML credentials file.
"""

import os
import tomllib
from pathlib import Path
from typing import NamedTuple, Optional

from vultr_lb.core.exceptions import VultrAPIKeyError

API_KEY_ENV = "VULTR_API_KEY"


class ResolvedAPIKey(NamedTuple):
    """An API key and a description of where it was found."""

    value: str
    source: str


def get_credentials_path() -> Path:
    """``$VULTR_CREDENTIALS_FILE``, else ``$XDG_CONFIG_HOME/vultr/credentials.toml``."""
    explicit = os.getenv("VULTR_CREDENTIALS_FILE")
    if explicit:
        return Path(explicit).expanduser()

    config_home = os.getenv("XDG_CONFIG_HOME")
    base_dir = Path(config_home).expanduser() if config_home else Path.home() / ".config"
    return base_dir / "vultr" / "credentials.toml"


def _key_from_file(path: Path) -> Optional[str]:
    if not path.is_file():
        return None

    try:
        with path.open("rb") as handle:
            stored = tomllib.load(handle).get("api_key")
    except (OSError, tomllib.TOMLDecodeError) as e:
        raise VultrAPIKeyError(f"Cannot read credentials file {path}: {e}") from e

    if isinstance(stored, str) and stored.strip():
        return stored
    return None


def resolve_api_key(api_key: Optional[str] = None) -> ResolvedAPIKey:
    """Find the API key and report which source supplied it.

    Raises:
        VultrAPIKeyError: If no source holds a non-empty key, or the
            credentials file exists but cannot be parsed.
    """
    if api_key and api_key.strip():
        return ResolvedAPIKey(api_key, "argument")

    env_key = os.getenv(API_KEY_ENV)
    if env_key and env_key.strip():
        return ResolvedAPIKey(env_key, API_KEY_ENV)

    path = get_credentials_path()
    file_key = _key_from_file(path)
    if file_key:
        return ResolvedAPIKey(file_key, str(path))

    raise VultrAPIKeyError()


def validate_api_key_with_context(
    operation: str, api_key: Optional[str] = None
) -> ResolvedAPIKey:
    """Resolve the API key, prefixing any failure with ``operation``.

    Args:
        operation: Description of what operation requires the API key.
        api_key: Explicit key, checked before the environment.
    """
    try:
        return resolve_api_key(api_key)
    except VultrAPIKeyError as e:
        raise VultrAPIKeyError(f"Cannot {operation}: {str(e)}") from e
