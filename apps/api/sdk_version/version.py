from __future__ import annotations

import os
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


def _repo_root() -> Path:
    return Path(__file__).resolve().parents[3]


def version_file_path() -> Path:
    configured = os.environ.get("SDK_VERSION_FILE")
    return Path(configured) if configured else _repo_root() / "version.json"


class VersionInfo(BaseModel):
    # Only the on-disk key "buildTime" fills build_time.
    model_config = ConfigDict(frozen=True, extra="ignore")

    version: str = ""
    build_time: str = Field("", alias="buildTime")

    @field_validator("version", "build_time", mode="before")
    @classmethod
    def _null_as_empty(cls, value: Any) -> Any:
        # JSON null leaves the field at its zero value.
        return "" if value is None else value


def get_version(path: str | os.PathLike[str]) -> VersionInfo:
    """Read a version file and decode it into a VersionInfo.

    Raises the OSError from the read or the pydantic ValidationError from the
    decode unchanged.
    """
    raw = Path(path).read_bytes()
    return VersionInfo.model_validate_json(raw)


def read_version() -> VersionInfo:
    return get_version(version_file_path())
