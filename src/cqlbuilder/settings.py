"""Shared settings loaded from environment / .env file."""

from __future__ import annotations

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Configuration for the cqlbuilder command line.

    Values are read from ``CQLBUILDER_*`` environment variables and from a
    ``.env`` file in the working directory.
    """

    model_config = SettingsConfigDict(
        env_prefix="CQLBUILDER_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    log_level: str = "INFO"

    # Render with minimal identifier quoting unless overridden on the command line
    pretty: bool = False

    # Upper bound for query documents, in characters
    max_document_size: int = 1_000_000
