from __future__ import annotations

from re import Pattern
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, SkipValidation, field_validator

# Character tables are held by reference so that in-place edits made
# through the registry stay visible to the modes that point at them.
TableRef = SkipValidation[Optional[dict[str, str]]]


class ModeDefaults(BaseModel):
    model_config = ConfigDict(arbitrary_types_allowed=True)

    replacement: str = "-"
    remove: Optional[Pattern[str]] = None
    lower: bool = True
    trim: bool = True
    charmap: TableRef = None
    multicharmap: TableRef = None


class SlugDefaults(BaseModel):
    model_config = ConfigDict(arbitrary_types_allowed=True)

    mode: str = "pretty"
    fallback: bool = True
    modes: dict[str, ModeDefaults] = Field(default_factory=dict)
    charmap: TableRef = None
    multicharmap: TableRef = None


class SlugOptions(BaseModel):
    """Per-call options. Unset fields resolve to the active mode's defaults."""

    model_config = ConfigDict(extra="forbid", arbitrary_types_allowed=True)

    replacement: Optional[str] = None
    mode: Optional[str] = None
    locale: Optional[str] = None
    charmap: TableRef = None
    multicharmap: TableRef = None
    remove: Optional[Pattern[str]] = None
    lower: Optional[bool] = None
    trim: Optional[bool] = None
    fallback: Optional[bool] = None

    @field_validator("locale")
    @classmethod
    def locale_lower(cls, v: str | None) -> str | None:
        return v.strip().lower() if v is not None else None

    def explicit(self) -> dict:
        """Fields the caller actually passed, by name."""
        return {name: getattr(self, name) for name in self.model_fields_set}
