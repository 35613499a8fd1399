"""Core data models for list-weka-classes."""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator, model_validator


class OutputFormat(str, Enum):
    """Output formats supported by the reporters."""

    TEXT = "text"  # One name per line
    JSON = "json"  # ListingResult as JSON
    TABLE = "table"  # Names with metadata, for people


class ListerOptions(BaseModel):
    """
    Configuration for a single listing run.

    Immutable once parsed. An empty ``super_class`` lists the extension
    points themselves instead of their implementations.
    """

    model_config = ConfigDict(frozen=True)

    offline: bool = Field(False, description="Run the package manager offline")
    load_packages: bool = Field(
        False, description="Load packages before determining class hierarchies"
    )
    super_class: str = Field(
        "", description="Extension point to list implementations for"
    )
    resources: bool = Field(
        False, description="List the resource map instead of the plugin map"
    )
    exclude_disabled: bool = Field(
        False, description="Drop implementations the registry marks as disabled"
    )

    @field_validator("super_class", mode="before")
    @classmethod
    def validate_super_class(cls, v):
        """Treat a missing superclass as an empty one."""
        if v is None:
            return ""
        return v


class RegistrySnapshot(BaseModel):
    """
    Read-only copy of a registry's maps, taken after discovery.

    Attributes mirror the registry contract: extension point to
    implementation to metadata, resource type to name to value, and the
    set of disabled implementation names.
    """

    plugins: dict[str, dict[str, str]] = Field(default_factory=dict)
    resources: dict[str, dict[str, str]] = Field(default_factory=dict)
    disabled: set[str] = Field(default_factory=set)

    @field_serializer("disabled")
    def serialize_disabled(self, disabled: set[str]) -> list[str]:
        """Serialize the disabled set in a stable order."""
        return sorted(disabled)


class ListingResult(BaseModel):
    """
    Outcome of a listing run.

    ``names`` is always sorted ascending by code point and free of
    duplicates. ``entries`` carries the metadata for each name; it is empty
    text for extension-point listings.
    """

    super_class: str = Field("", description="Superclass that was queried, if any")
    resources: bool = Field(False, description="Whether the resource map was queried")
    entries: dict[str, str] = Field(default_factory=dict)
    names: list[str] = Field(default_factory=list)

    @model_validator(mode="after")
    def sort_names(self):
        """Derive the sorted, duplicate free name list."""
        names = set(self.names) | set(self.entries)
        self.names = sorted(names)
        return self

    @property
    def lists_superclasses(self) -> bool:
        return not self.super_class

    def metadata(self, name: str) -> Optional[str]:
        return self.entries.get(name)
