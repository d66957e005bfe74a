"""Project descriptor models: the identity and build manifest of a project.

A project descriptor is written alongside the build and read back when
metadata is generated. Descriptors load from JSON or TOML.
"""

from __future__ import annotations

import json
import tomllib
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, model_validator

LATEST_MANIFEST_FORMAT = 2


class ProjectDescriptorError(RuntimeError):
    """Raised when a project descriptor file cannot be read or validated."""

    def __init__(self, path: Path | str, reason: str) -> None:
        self.path = str(path)
        self.reason = reason
        super().__init__(f"Invalid project descriptor {self.path!r}: {reason}")


class ManifestEntry(BaseModel):
    """One software component that went into the build."""

    model_config = ConfigDict(frozen=True)

    locked_version: str
    locked_source: dict[str, Any] = Field(default_factory=dict)
    source_type: str = "url"  # "git", "url", "path", "project_local"
    described_version: str = ""
    license: str = "Unspecified"


class VersionManifest(BaseModel):
    """The versions of every component in a built project."""

    model_config = ConfigDict(frozen=True)

    build_version: str = ""
    build_git_revision: str = ""
    license: str = "Unspecified"
    software: dict[str, ManifestEntry] = Field(default_factory=dict)
    manifest_format: int = LATEST_MANIFEST_FORMAT

    def to_mapping(self) -> dict[str, Any]:
        """Nested mapping embedded as ``version_manifest`` in package metadata.

        Software entries are sorted by name so the rendering is stable.
        """
        return {
            "manifest_format": self.manifest_format,
            "software": {
                name: self.software[name].model_dump(mode="json")
                for name in sorted(self.software)
            },
            "build_version": self.build_version,
            "build_git_revision": self.build_git_revision,
            "license": self.license,
        }


class ProjectDescriptor(BaseModel):
    """Identity, version and license of the project that built a package."""

    model_config = ConfigDict(frozen=True)

    name: str
    friendly_name: str = ""
    homepage: str = ""
    build_version: str
    build_iteration: int = Field(default=1, ge=1)
    license: str = "Unspecified"
    license_file: str = "LICENSE"
    project_dir: Path = Path(".")
    built_manifest: VersionManifest = Field(default_factory=VersionManifest)

    @model_validator(mode="before")
    @classmethod
    def _default_friendly_name(cls, data: Any) -> Any:
        if isinstance(data, dict) and not data.get("friendly_name"):
            data = {**data, "friendly_name": data.get("name", "")}
        return data

    @property
    def license_file_path(self) -> Path:
        """Absolute-or-project-relative path of the license file."""
        path = Path(self.license_file)
        if path.is_absolute():
            return path
        return self.project_dir / path

    @classmethod
    def from_file(cls, path: Path | str) -> ProjectDescriptor:
        """Load a descriptor from a ``.json`` or ``.toml`` file.

        A relative ``project_dir`` is resolved against the descriptor's
        own directory.
        """
        path = Path(path)
        try:
            if path.suffix == ".toml":
                with open(path, "rb") as f:
                    data = tomllib.load(f)
            else:
                with open(path, encoding="utf-8") as f:
                    data = json.load(f)
        except OSError as exc:
            raise ProjectDescriptorError(path, str(exc)) from exc
        except (tomllib.TOMLDecodeError, json.JSONDecodeError) as exc:
            raise ProjectDescriptorError(path, f"malformed file: {exc}") from exc

        if not isinstance(data, dict):
            raise ProjectDescriptorError(path, "top level must be an object")

        project_dir = Path(data.get("project_dir", "."))
        if not project_dir.is_absolute():
            data["project_dir"] = path.parent / project_dir

        try:
            return cls.model_validate(data)
        except ValidationError as exc:
            raise ProjectDescriptorError(path, str(exc)) from exc
