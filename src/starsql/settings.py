"""Shared settings loaded from environment / .env file."""

from __future__ import annotations

import logging

from pydantic_settings import BaseSettings, SettingsConfigDict

from starsql.models.query import RenderOptions


class Settings(BaseSettings):
    """Configuration for StarSQL callers.

    Values are read from ``STARSQL_*`` environment variables and from a
    ``.env`` file in the working directory. The generator never reads these
    on its own; callers build ``RenderOptions`` from them explicitly.
    """

    model_config = SettingsConfigDict(
        env_prefix="STARSQL_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    log_level: str = "INFO"

    # Rendering defaults
    case_sensitive: bool = False
    force_group_by: bool = False
    strict_references: bool = True

    # Pipeline
    validate_sql: bool = True

    def render_options(self) -> RenderOptions:
        return RenderOptions(
            case_sensitive=self.case_sensitive,
            force_group_by=self.force_group_by,
            strict_references=self.strict_references,
        )


def configure_logging(settings: Settings | None = None) -> None:
    """Install a root handler at the configured level."""
    settings = settings or Settings()
    logging.basicConfig(level=settings.log_level.upper())
    logging.getLogger("starsql").debug("Logging configured at %s", settings.log_level.upper())
