"""
Settings for the resultant ACL permission store.

Values are read from the environment (prefix ``ACL_``) or a local ``.env``
file and can be overridden by passing keyword arguments.
"""
from functools import lru_cache
from typing import List

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


DEFAULT_CAPABILITIES = [
    "read",
    "create",
    "update",
    "delete",
    "list",
    "sudo",
    "deny",
]


class PermissionSettings(BaseSettings):
    """Permission store settings."""

    model_config = SettingsConfigDict(
        env_prefix="ACL_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Response contract
    data_field: str = Field(default="data", min_length=1)

    # An entry listed with no capabilities still grants visibility unless disabled
    empty_capabilities_grant: bool = Field(default=True)

    # Capability vocabulary
    known_capabilities: List[str] = Field(default_factory=lambda: list(DEFAULT_CAPABILITIES))
    strict_capabilities: bool = Field(default=False)


@lru_cache()
def get_permission_settings() -> PermissionSettings:
    """Get cached permission settings instance."""
    return PermissionSettings()
