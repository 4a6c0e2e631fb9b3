"""Configuration management for spx."""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, ValidationInfo, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .errors import ProjectConfigError

PROJECT_CONFIG_PATH = Path(".spx") / "config.yaml"

_LOG_LEVELS = {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}


def _normalize_segment(value: str, label: str) -> str:
    normalized = value.strip().strip("/")
    if not normalized:
        raise ValueError(f"{label} must not be empty")
    return normalized


class SpxSettings(BaseSettings):
    """Runtime configuration sourced from environment variables and optional .env file."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )

    specs_root: str = Field(default="specs", validation_alias="SPX_SPECS_ROOT")
    work_dir: str = Field(default="work", validation_alias="SPX_WORK_DIR")
    doing_dir: str = Field(default="doing", validation_alias="SPX_DOING_DIR")
    backlog_dir: str = Field(default="backlog", validation_alias="SPX_BACKLOG_DIR")
    done_dir: str = Field(default="archive", validation_alias="SPX_DONE_DIR")
    marker_dir: str = Field(default="tests", validation_alias="SPX_MARKER_DIR")
    completion_marker: str = Field(default="DONE.md", validation_alias="SPX_COMPLETION_MARKER")
    log_level: str = Field(default="WARNING", validation_alias="SPX_LOG_LEVEL")

    @field_validator("log_level")
    @classmethod
    def _normalize_log_level(cls, value: str) -> str:
        normalized = value.strip().upper()
        if normalized not in _LOG_LEVELS:
            raise ValueError("SPX_LOG_LEVEL must be one of CRITICAL, ERROR, WARNING, INFO, DEBUG")
        return normalized

    @field_validator(
        "specs_root",
        "work_dir",
        "doing_dir",
        "backlog_dir",
        "done_dir",
        "marker_dir",
        "completion_marker",
    )
    @classmethod
    def _normalize_path_segment(cls, value: str, info: ValidationInfo) -> str:
        return _normalize_segment(value, info.field_name)

    @property
    def doing_display_path(self) -> str:
        """Work root relative to the project, as shown in user-facing messages."""

        return f"{self.specs_root}/{self.work_dir}/{self.doing_dir}"

    def work_root(self, cwd: Path) -> Path:
        """Return the directory holding in-flight work items for a project."""

        return Path(cwd) / self.specs_root / self.work_dir / self.doing_dir


class ProjectConfig(BaseModel):
    """Per-project overrides read from ``.spx/config.yaml``."""

    model_config = ConfigDict(extra="forbid")

    specs_root: str | None = None
    work_dir: str | None = None
    doing_dir: str | None = None
    backlog_dir: str | None = None
    done_dir: str | None = None
    marker_dir: str | None = None
    completion_marker: str | None = None

    @field_validator("*")
    @classmethod
    def _reject_blank(cls, value: str | None, info: ValidationInfo) -> str | None:
        if value is None:
            return None
        return _normalize_segment(value, info.field_name)


def load_project_settings(cwd: Path, base: SpxSettings | None = None) -> SpxSettings:
    """Overlay ``.spx/config.yaml`` under ``cwd`` onto the base settings.

    A missing file leaves the base settings untouched.
    """

    settings = base or get_settings()
    path = Path(cwd) / PROJECT_CONFIG_PATH
    if not path.is_file():
        return settings

    try:
        document = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        raise ProjectConfigError(f"Failed to parse YAML in {path}: {exc}") from exc

    if document is None:
        return settings
    if not isinstance(document, dict):
        raise ProjectConfigError(f"Project config in {path} must be a mapping")

    try:
        overrides = ProjectConfig.model_validate(document)
    except ValidationError as exc:
        raise ProjectConfigError(f"Project config validation error in {path}: {exc}") from exc

    return settings.model_copy(update=overrides.model_dump(exclude_none=True))


@lru_cache(maxsize=1)
def get_settings() -> SpxSettings:
    """Return cached settings instance."""

    return SpxSettings()


__all__ = [
    "PROJECT_CONFIG_PATH",
    "ProjectConfig",
    "SpxSettings",
    "get_settings",
    "load_project_settings",
]
