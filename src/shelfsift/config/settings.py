"""Application settings — Pydantic-based configuration with YAML and env var support.

Configuration is loaded from (in order of precedence):
  1. Environment variables (SHELFSIFT_ prefix)
  2. YAML config file (if specified)
  3. Default values
"""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, Field, field_validator
from pydantic_settings import BaseSettings


class GoogleBooksSettings(BaseModel):
    """Google Books adapter configuration.

    ``suppress_key`` exists for tests only: Google Books allows a small rate
    of anonymous searches, so recorded fixtures can be made without a key.
    Production configurations always send ``api_key``.
    """

    api_key: str = Field(default="", description="Google API key")
    base_url: str = Field(
        default="https://www.googleapis.com/books/v1/",
        description="Books API base URL (ends with a slash)",
    )
    suppress_key: bool = Field(default=False, description="Omit the key parameter (testing only)")
    timeout: float = Field(default=30.0, gt=0, description="HTTP request timeout in seconds")

    @field_validator("base_url")
    @classmethod
    def _ensure_trailing_slash(cls, v: str) -> str:
        return v if v.endswith("/") else v + "/"


class ObservabilitySettings(BaseModel):
    """Observability configuration."""

    log_level: str = Field(default="info", description="Log level: debug, info, warning, error")
    log_format: str = Field(default="json", description="Log format: json, console")


class Settings(BaseSettings):
    """Root application settings.

    Configuration is loaded from environment variables with the SHELFSIFT_ prefix.
    Nested settings use double underscores.

    Example:
        SHELFSIFT_GOOGLE_BOOKS__API_KEY=AIza...
        SHELFSIFT_GOOGLE_BOOKS__TIMEOUT=10
        SHELFSIFT_OBSERVABILITY__LOG_FORMAT=console
    """

    model_config = {
        "env_prefix": "SHELFSIFT_",
        "env_nested_delimiter": "__",
        "case_sensitive": False,
        "env_file": ".env",
        "env_file_encoding": "utf-8",
    }

    app_name: str = Field(default="ShelfSift", description="Application name")
    debug: bool = Field(default=False, description="Debug mode")

    google_books: GoogleBooksSettings = Field(default_factory=GoogleBooksSettings)
    observability: ObservabilitySettings = Field(default_factory=ObservabilitySettings)

    @classmethod
    def from_yaml(cls, path: str | Path) -> Settings:
        """Load settings from a YAML configuration file.

        Args:
            path: Path to the YAML config file.

        Returns:
            Populated Settings instance.
        """
        import yaml  # type: ignore[import-untyped]

        config_path = Path(path)
        if not config_path.exists():
            raise FileNotFoundError(f"Config file not found: {config_path}")

        with open(config_path) as f:
            data = yaml.safe_load(f) or {}

        return cls(**data)
