"""Runtime configuration: env-driven.

Centralized settings using pydantic-settings. Reads from a .env file and
PKGMETA_* environment variables.
"""

from __future__ import annotations

from pydantic_settings import BaseSettings, SettingsConfigDict


class MetaConfig(BaseSettings):
    """Configuration with environment variable overrides.

    All settings can be overridden via PKGMETA_* environment variables
    or a .env file in the working directory.

    Examples
    --------
    Override via environment::

        export PKGMETA_LOG_LEVEL=DEBUG
        export PKGMETA_HASH_CHUNK_SIZE=1048576
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="PKGMETA_",
        env_file_encoding="utf-8",
    )

    log_level: str = "INFO"

    # License files are passed through verbatim
    license_encoding: str = "utf-8"

    # Digest streaming
    hash_chunk_size: int = 64 * 1024


# Module-level singleton; import as `from pkgmeta.config import config`
config = MetaConfig()
