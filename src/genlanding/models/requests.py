from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .spec import SectionKind


class GenerateFullPageRequest(BaseModel):
    prompt: str


class RegenerateSectionRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    prompt: str
    section_type: SectionKind = Field(alias="sectionType")
    brand: str
    theme: str

    @field_validator("section_type", mode="before")
    @classmethod
    def _normalize_section_type(cls, value: Any) -> Any:
        if isinstance(value, str):
            return value.upper()
        return value


class ErrorResponse(BaseModel):
    error: str


__all__ = ["ErrorResponse", "GenerateFullPageRequest", "RegenerateSectionRequest"]
