"""
Configuration settings for the OpenSearch security client.
"""

from functools import lru_cache
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class SecuritySettings(BaseSettings):
    """
    Connection settings for the cluster.

    Settings are loaded from environment variables with OPENSEARCH_ prefix.
    Example: OPENSEARCH_URL, OPENSEARCH_USERNAME, etc.
    """

    model_config = SettingsConfigDict(
        env_prefix="OPENSEARCH_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    url: str = Field(
        default="https://localhost:9200",
        description="Cluster URL"
    )

    # Basic auth credentials, handed to the transport
    username: Optional[str] = Field(
        default=None,
        description="Username for basic authentication"
    )
    password: Optional[str] = Field(
        default=None,
        description="Password for basic authentication"
    )

    verify_certs: bool = Field(
        default=True,
        description="Whether to verify TLS certificates"
    )

    timeout: float = Field(
        default=30.0,
        description="HTTP request timeout in seconds"
    )

    @property
    def auth(self) -> Optional[tuple]:
        """Basic auth tuple, or None when no username is configured."""
        if self.username is None:
            return None
        return (self.username, self.password or "")


# Singleton instance
_settings: Optional[SecuritySettings] = None


@lru_cache
def get_settings() -> SecuritySettings:
    """
    Get security client settings singleton.

    Returns the programmatically configured settings if any, otherwise loads
    them from the environment once.
    """
    if _settings is not None:
        return _settings
    return SecuritySettings()


def configure_settings(
    url: Optional[str] = None,
    username: Optional[str] = None,
    password: Optional[str] = None,
    **kwargs,
) -> SecuritySettings:
    """
    Configure settings programmatically.

    This allows overriding environment variables for testing
    or when settings come from a different source.

    Args:
        url: Cluster URL
        username: Username for basic authentication
        password: Password for basic authentication
        **kwargs: Additional settings

    Returns:
        Configured SecuritySettings instance
    """
    global _settings

    settings_dict = {
        k: v for k, v in {
            "url": url,
            "username": username,
            "password": password,
            **kwargs,
        }.items() if v is not None
    }

    _settings = SecuritySettings(**settings_dict)

    # Clear the lru_cache so get_settings returns new settings
    get_settings.cache_clear()

    return _settings


def reset_settings() -> None:
    """Reset settings to default (reload from environment)."""
    global _settings
    _settings = None
    get_settings.cache_clear()
