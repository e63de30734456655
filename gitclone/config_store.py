"""Persisted projects-directory configuration."""

from __future__ import annotations

import logging
import os
import tempfile
from pathlib import Path
from typing import Optional

from pydantic import ValidationError as PydanticValidationError

from gitclone.errors import ConfigError
from gitclone.schemas import ProjectsConfig

LOGGER = logging.getLogger(__name__)


class ConfigStore:
    """Read and write ``config.json``, honouring an environment override.

    ``load`` and ``save`` never raise: failures are logged and reported through
    their return values so callers can fall back to first-run setup.
    """

    def __init__(self, config_file: Path, env_override: Optional[Path] = None) -> None:
        self.config_file = config_file
        self.env_override = env_override

    @property
    def using_env_override(self) -> bool:
        return self.env_override is not None

    def load(self) -> Optional[Path]:
        """Return the effective projects root, or ``None`` when unconfigured."""

        if self.env_override is not None:
            return self.env_override
        return self.load_persisted()

    def load_persisted(self) -> Optional[Path]:
        if not self.config_file.exists():
            return None
        try:
            text = self.config_file.read_text(encoding="utf-8")
            config = ProjectsConfig.model_validate_json(text)
        except (OSError, UnicodeDecodeError, PydanticValidationError) as exc:
            LOGGER.warning("Could not read config file %s: %s", self.config_file, exc)
            return None
        return config.projects_dir

    def save(self, projects_dir: Path) -> bool:
        """Persist ``projects_dir``; the file is replaced as a whole."""

        try:
            payload = ProjectsConfig.for_directory(projects_dir).to_json()
        except PydanticValidationError as exc:
            LOGGER.error("Refusing to save projects directory %s: %s", projects_dir, exc)
            return False
        tmp_name: Optional[str] = None
        try:
            self.config_file.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(
                dir=self.config_file.parent,
                prefix=".config-",
                suffix=".json.tmp",
            )
            with os.fdopen(fd, "w", encoding="utf-8") as handle:
                handle.write(payload)
            os.replace(tmp_name, self.config_file)
        except OSError as exc:
            LOGGER.error("Error saving config %s: %s", self.config_file, exc)
            if tmp_name and os.path.exists(tmp_name):
                os.unlink(tmp_name)
            return False
        LOGGER.debug("Saved projects directory %s to %s", projects_dir, self.config_file)
        return True

    def reset(self) -> bool:
        """Delete the persisted file; returns ``True`` when one was removed."""

        try:
            self.config_file.unlink()
        except FileNotFoundError:
            return False
        except OSError as exc:
            raise ConfigError(f"Failed to reset config: {exc}") from exc
        return True
