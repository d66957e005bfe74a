"""Package metadata record model (immutable)."""

from __future__ import annotations

import copy
from typing import Any

from pydantic import BaseModel, ConfigDict


class MetadataRecord(BaseModel):
    """Checksums, platform identity and provenance of a built package.

    Field order is the serialization order. Fields are untyped: a record
    holds whatever its sidecar holds, so records written by older or
    foreign tools load unchanged. Fields that were never set are left out
    of ``to_mapping()``. Unknown keys are kept as extras and rendered after
    the known fields.
    """

    model_config = ConfigDict(frozen=True, extra="allow")

    # Package
    basename: Any = None
    md5: Any = None
    sha1: Any = None
    sha256: Any = None
    sha512: Any = None
    platform: Any = None
    platform_version: Any = None  # truncated marketing version
    arch: Any = None

    # Project
    name: Any = None
    friendly_name: Any = None
    homepage: Any = None
    version: Any = None
    iteration: Any = None
    license: Any = None
    version_manifest: Any = None
    license_content: Any = None

    def to_mapping(self) -> dict[str, Any]:
        """Deep copy of the set fields, known fields first, then extras."""
        data: dict[str, Any] = {
            key: getattr(self, key)
            for key in type(self).model_fields
            if key in self.model_fields_set
        }
        data.update(self.model_extra or {})
        return copy.deepcopy(data)

    def value(self, key: str) -> Any:
        """Deep copy of the value stored under *key*, or None if absent."""
        if key in type(self).model_fields:
            found = getattr(self, key) if key in self.model_fields_set else None
        else:
            found = (self.model_extra or {}).get(key)
        return copy.deepcopy(found)
