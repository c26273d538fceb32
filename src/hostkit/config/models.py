"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, hostkit.toml only contains
overrides. An empty file (or none at all) is a valid configuration.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from hostkit.domain.address import MAX_PORT, MIN_PORT

# Port the device daemon listens on when a connection string omits one.
DEFAULT_PORT = 5555


class NetworkConfig(BaseModel):
    """[network] section."""

    model_config = {"frozen": True}

    default_port: int = Field(default=DEFAULT_PORT, ge=MIN_PORT, le=MAX_PORT)


class FilesConfig(BaseModel):
    """[files] section.

    Modes are permission bits; write them as octal literals in TOML
    (``dir_mode = 0o755``).
    """

    model_config = {"frozen": True}

    dir_mode: int = Field(default=0o775, ge=0, le=0o7777)
    file_mode: int = Field(default=0o600, ge=0, le=0o7777)
