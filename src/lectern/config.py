"""Application configuration."""

from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    content_dir: Path = Path("content")
    debug: bool = False
    site_title: str = "Lectern"
    host: str = "0.0.0.0"
    port: int = 8080
    log_level: str = "INFO"
    worker_threads: int = 8
    markdown_extensions: list[str] = [
        "extra",
        "sane_lists",
        "toc",
        "pymdownx.tasklist",
        "pymdownx.tilde",
    ]

    model_config = SettingsConfigDict(
        env_prefix="LECTERN_",
        env_file=".env",
        env_file_encoding="utf-8",
        frozen=True,
    )

    @property
    def root(self) -> Path:
        """Absolute content root."""
        return self.content_dir.expanduser().resolve()


settings = Settings()
