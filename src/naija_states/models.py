"""
Pydantic models for the state dataset.
"""

from typing import Any
from pydantic import BaseModel, ConfigDict, Field, field_validator


class StateRecord(BaseModel):
    """A state with its senatorial districts and local government areas."""

    name: str = Field(alias="state", min_length=1)
    senatorial_districts: tuple[str, ...] = Field(min_length=1)
    lgas: tuple[str, ...] = Field(min_length=1)

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    @field_validator("name", mode="before")
    @classmethod
    def strip_name(cls, v):
        if isinstance(v, str):
            return v.strip()
        return v

    @field_validator("senatorial_districts", "lgas", mode="after")
    @classmethod
    def check_entries(cls, v: tuple[str, ...], info) -> tuple[str, ...]:
        entries = tuple(entry.strip() for entry in v)
        if any(not entry for entry in entries):
            raise ValueError(f"{info.field_name} must not contain blank entries")
        if len(set(entries)) != len(entries):
            raise ValueError(f"{info.field_name} must not contain duplicates")
        return entries

    def to_dict(self) -> dict[str, Any]:
        """Dump in the dataset's own shape (``state``, ``senatorial_districts``, ``lgas``)."""
        return {
            "state": self.name,
            "senatorial_districts": list(self.senatorial_districts),
            "lgas": list(self.lgas),
        }
