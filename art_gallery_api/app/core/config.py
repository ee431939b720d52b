"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields, so the
service starts with no configuration at all: it listens on port 3000
and reads the datasets from the ``data`` directory of the project.
"""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional


def _env_flag(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).lower() in {"1", "true", "yes"}


def _env_list(name: str, default: str) -> List[str]:
    return [item.strip() for item in os.getenv(name, default).split(",") if item.strip()]


# Directory that contains the ``art_gallery_api`` package.  For a
# non-editable install this is site-packages.
PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent.parent


def resolve_project_path(value: str) -> Path:
    """Resolve ``value`` for files that live beside the project.

    Absolute paths are returned unchanged.  A relative path is taken
    from the project root when it exists there, otherwise from the
    current working directory.
    """
    path = Path(value)
    if path.is_absolute():
        return path
    candidate = PROJECT_ROOT / path
    if candidate.exists():
        return candidate.resolve()
    return (Path.cwd() / path).resolve()


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = field(default_factory=lambda: os.getenv("PROJECT_NAME", "Art Gallery API"))
    api_version: str = field(default_factory=lambda: os.getenv("API_VERSION", "1.0.0"))
    host: str = field(default_factory=lambda: os.getenv("HOST", "0.0.0.0"))
    port: int = field(default_factory=lambda: int(os.getenv("PORT", "3000")))
    log_level: str = field(default_factory=lambda: os.getenv("LOG_LEVEL", "INFO"))
    log_file: str = field(default_factory=lambda: os.getenv("LOG_FILE", ""))

    # Location of the three dataset files, see ``data_path``.
    data_dir: str = field(default_factory=lambda: os.getenv("DATA_DIR", "data"))
    artists_file: str = field(default_factory=lambda: os.getenv("ARTISTS_FILE", "artists.json"))
    galleries_file: str = field(default_factory=lambda: os.getenv("GALLERIES_FILE", "galleries.json"))
    paintings_file: str = field(
        default_factory=lambda: os.getenv("PAINTINGS_FILE", "paintings-nested.json")
    )

    cors_origins: List[str] = field(default_factory=lambda: _env_list("CORS_ORIGINS", "*"))

    # Existing clients expect every response, including empty results, to
    # arrive with status 200.  Set STRICT_NOT_FOUND to send the
    # ``{"message": ...}`` envelope with status 404 instead.
    strict_not_found: bool = field(default_factory=lambda: _env_flag("STRICT_NOT_FOUND"))

    def data_path(self) -> Path:
        """Return the absolute dataset directory.

        A relative ``DATA_DIR`` is looked up in the project root first
        and then in the current working directory.
        """
        return resolve_project_path(self.data_dir)

    def log_path(self) -> Optional[Path]:
        """Return the absolute log file path, or ``None`` when unset."""
        if not self.log_file:
            return None
        return resolve_project_path(self.log_file)


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Tests build their own
# ``Settings`` instances after patching the environment.
settings = Settings()
