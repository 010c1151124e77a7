import os
import tomllib
from dataclasses import dataclass, field
from functools import lru_cache
from pathlib import Path
from typing import Any

from dotenv import load_dotenv

from jex_update.entities import CatalogEntry

load_dotenv()

INDEX_TARGET = "index"
HEALTH_PATH = "health"
RESERVED_IDENTIFIERS = (INDEX_TARGET, HEALTH_PATH)


def load_config_file(path: Path) -> dict[str, Any]:
    """Load the optional TOML configuration file.

    Args:
        path: Location of the TOML file

    Returns:
        Parsed file contents, or an empty dict when the file does not exist
    """
    if not path.exists():
        return {}
    with open(path, "rb") as f:
        return tomllib.load(f)


def parse_repositories(value: str) -> dict[str, str]:
    """Parse ``identifier=vendor`` pairs separated by commas.

    Example:
        >>> parse_repositories("com_foo=acme, mod_bar=acme")
        {'com_foo': 'acme', 'mod_bar': 'acme'}
    """
    repositories: dict[str, str] = {}
    for pair in value.split(","):
        pair = pair.strip()
        if not pair:
            continue
        identifier, sep, vendor = pair.partition("=")
        if not sep or not identifier.strip() or not vendor.strip():
            raise ValueError(f"JEX_REPOSITORIES entry must look like identifier=vendor, got {pair!r}")
        repositories[identifier.strip()] = vendor.strip()
    return repositories


_FILE_CONFIG = load_config_file(Path(os.getenv("JEX_CONFIG_FILE", "config.toml")))
_FILE_SERVER: dict[str, Any] = _FILE_CONFIG.get("server", {})


def _default_repositories() -> dict[str, str]:
    env_value = os.getenv("JEX_REPOSITORIES")
    if env_value is not None:
        return parse_repositories(env_value)
    return {str(k): str(v) for k, v in _FILE_CONFIG.get("repositories", {}).items()}


@dataclass(frozen=True)
class Settings:
    """Application settings loaded from environment variables and config.toml."""

    # Update server
    server_name: str = os.getenv("JEX_SERVER_NAME", _FILE_SERVER.get("name", "JEX Update Server"))
    server_description: str = os.getenv(
        "JEX_SERVER_DESCRIPTION",
        _FILE_SERVER.get("description", "Joomla extensions update server"),
    )
    repositories: dict[str, str] = field(default_factory=_default_repositories)

    # Cache
    cache_ttl: int = int(os.getenv("JEX_CACHE_TTL", str(_FILE_CONFIG.get("cache", 3600))))
    cache_dir: str = os.getenv("JEX_CACHE_DIR", "cache")

    # GitHub
    github_api_url: str = os.getenv("JEX_GITHUB_API_URL", "https://api.github.com")
    github_token: str | None = os.getenv("JEX_GITHUB_TOKEN")
    http_timeout: float = float(os.getenv("JEX_HTTP_TIMEOUT", "10.0"))

    # Update document
    download_format: str = os.getenv("JEX_DOWNLOAD_FORMAT", "zip")
    description_from_name: bool = os.getenv("JEX_DESCRIPTION_FROM_NAME", "false").lower() == "true"
    target_platform: str = os.getenv("JEX_TARGET_PLATFORM", "joomla")
    target_version: str = os.getenv("JEX_TARGET_VERSION", "3.[23456789]")

    # API
    api_host: str = os.getenv("API_HOST", "0.0.0.0")
    api_port: int = int(os.getenv("API_PORT", "8000"))
    api_reload: bool = os.getenv("API_RELOAD", "false").lower() == "true"
    log_level: str = os.getenv("LOG_LEVEL", "INFO")

    @property
    def catalog(self) -> tuple[CatalogEntry, ...]:
        """Catalog entries in configuration order."""
        return tuple(
            CatalogEntry(identifier=identifier, vendor=vendor)
            for identifier, vendor in self.repositories.items()
        )

    @property
    def cache_path(self) -> Path:
        return Path(self.cache_dir)

    def __post_init__(self) -> None:
        """Validate settings after initialization."""
        if self.cache_ttl < 0:
            raise ValueError(f"JEX_CACHE_TTL must be >= 0, got {self.cache_ttl}")

        if self.http_timeout <= 0:
            raise ValueError(f"JEX_HTTP_TIMEOUT must be > 0, got {self.http_timeout}")

        for identifier in self.repositories:
            if identifier in RESERVED_IDENTIFIERS:
                raise ValueError(f"'{identifier}' is reserved and cannot be used as an extension identifier")
            if not identifier or "." in identifier or "/" in identifier:
                raise ValueError(f"Invalid extension identifier: {identifier!r}")


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


# Global settings instance
settings = get_settings()
