"""Pydantic models for persisted configuration and clone requests."""

from __future__ import annotations

import json
from datetime import datetime, timezone
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, field_validator


def _require_absolute(value: Path) -> Path:
    if not value.is_absolute():
        msg = f"Expected an absolute path, received {value}"
        raise ValueError(msg)
    return value


class ProjectsConfig(BaseModel):
    """Shape of ``config.json``: ``{"projectsDir": ..., "createdAt": ...}``."""

    model_config = ConfigDict(populate_by_name=True)

    projects_dir: Path = Field(alias="projectsDir", description="Absolute projects root")
    created_at: datetime | None = Field(
        default=None,
        alias="createdAt",
        description="When the configuration was written",
    )

    @field_validator("projects_dir")
    @classmethod
    def _validate_projects_dir(cls, value: Path) -> Path:
        return _require_absolute(value)

    @classmethod
    def for_directory(cls, projects_dir: Path) -> "ProjectsConfig":
        return cls(projects_dir=projects_dir, created_at=datetime.now(timezone.utc))

    def to_json(self) -> str:
        payload = {
            "projectsDir": str(self.projects_dir),
            "createdAt": self.created_at.isoformat() if self.created_at else None,
        }
        return json.dumps(payload, indent=2) + "\n"


class CloneRequest(BaseModel):
    """Everything the clone executor needs, built once by the folder flow."""

    source_url: str = Field(min_length=1, description="Remote passed to git clone")
    target_path: Path = Field(description="Destination directory")
    projects_root: Path = Field(description="Root the destination must stay inside")

    @field_validator("target_path", "projects_root")
    @classmethod
    def _validate_absolute(cls, value: Path) -> Path:
        return _require_absolute(value)
