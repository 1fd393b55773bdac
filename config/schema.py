"""Configuration schema for the files library using Pydantic.

This module defines the complete configuration structure with:
- Backend selection (local disk or in-memory tree)
- Default text encoding for string reads and writes
- Directory listing behaviour
- Overrides for well-known directories (home, documents, caches, ...)
"""

from __future__ import annotations

import codecs
import os
from typing import Literal

from pydantic import BaseModel, Field, field_validator

DEFAULT_ENCODING = "utf-8"

# ============================================================================
# Listing Configuration
# ============================================================================


class ListingConfig(BaseModel):
    """Configuration for directory listings returned by the local backend."""

    sort_entries: bool = Field(True, description="Return entries sorted by name instead of native OS order")


# ============================================================================
# Special Directories
# ============================================================================


class SpecialDirectoriesConfig(BaseModel):
    """Overrides for well-known directories.

    Unset fields fall back to what the backend discovers on its own.
    """

    home: str | None = Field(None, description="Home directory")
    temporary: str | None = Field(None, description="Temporary directory")
    documents: str | None = Field(None, description="Documents directory")
    library: str | None = Field(None, description="Application library/data directory")
    caches: str | None = Field(None, description="Caches directory")

    @field_validator("home", "temporary", "documents", "library", "caches")
    @classmethod
    def validate_absolute(cls, v: str | None) -> str | None:
        """Expand ~ and require an absolute path."""
        if v is None:
            return v
        v = os.path.expanduser(v)
        if not os.path.isabs(v):
            raise ValueError(f"Special directory must be an absolute path: {v}")
        return v

    def as_dict(self) -> dict[str, str]:
        return {k: v for k, v in self.model_dump().items() if v is not None}


# ============================================================================
# Main Settings
# ============================================================================


class FilesSettings(BaseModel):
    """Main files configuration.

    Configuration priority (highest to lowest):
    1. Programmatic overrides
    2. Project config (.files/config.json or .files/config.yaml)
    3. User config (~/.files/config.json or ~/.files/config.yaml)
    4. Defaults declared here
    """

    backend: Literal["local", "memory"] = Field("local", description="Backend built by get_default_backend()")
    encoding: str = Field(DEFAULT_ENCODING, description="Default text encoding")
    listing: ListingConfig = Field(default_factory=ListingConfig)
    special_directories: SpecialDirectoriesConfig = Field(default_factory=SpecialDirectoriesConfig)

    @field_validator("encoding")
    @classmethod
    def validate_encoding(cls, v: str) -> str:
        """Reject codecs Python does not know."""
        try:
            return codecs.lookup(v).name
        except LookupError as e:
            raise ValueError(f"Unknown encoding: {v}") from e
