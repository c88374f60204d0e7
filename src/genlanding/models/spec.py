from __future__ import annotations

from enum import Enum
from typing import Any, Mapping, Sequence

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


class SectionKind(str, Enum):
    navbar = "NAVBAR"
    hero = "HERO"
    features = "FEATURES"
    cta = "CTA"


class PrimaryColor(str, Enum):
    indigo = "indigo"
    sky = "sky"
    rose = "rose"
    emerald = "emerald"
    amber = "amber"
    slate = "slate"


SECTION_ORDER: tuple[SectionKind, ...] = (
    SectionKind.navbar,
    SectionKind.hero,
    SectionKind.features,
    SectionKind.cta,
)


def section_id(kind: SectionKind | str) -> str:
    """Return the stable identifier of the section holding ``kind``.

    Regenerating a section never changes its kind, so the id survives every
    round trip through the generation backend.
    """
    value = kind.value if isinstance(kind, SectionKind) else str(kind)
    return f"section-{value.lower()}"


class SpecModel(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    def to_payload(self) -> dict[str, Any]:
        """JSON-ready dict using the camelCase wire names."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class FeatureItem(SpecModel):
    title: str
    description: str
    icon: str | None = Field(default=None, description="Font Awesome icon class")


class SectionContent(SpecModel):
    title: str
    subtitle: str | None = None
    description: str | None = None
    button_text: str | None = Field(default=None, alias="buttonText")
    items: Sequence[FeatureItem] | None = None

    def merged(self, patch: SectionContent | Mapping[str, Any]) -> SectionContent:
        """Shallow-merge ``patch`` over this content.

        Keys carried by the patch win; every other key keeps its current value.
        For a ``SectionContent`` patch only the keys that were explicitly set
        count, so an omitted ``subtitle`` never erases the existing one.
        """
        if isinstance(patch, SectionContent):
            incoming = patch.model_dump(exclude_unset=True)
        else:
            incoming = {_CONTENT_ALIASES.get(key, key): value for key, value in patch.items()}
        current = self.model_dump(exclude_unset=True)
        return SectionContent.model_validate({**current, **incoming})


_CONTENT_ALIASES: Mapping[str, str] = {
    field.alias: name
    for name, field in SectionContent.model_fields.items()
    if field.alias
}


class Section(SpecModel):
    id: str
    type: SectionKind
    content: SectionContent

    @field_validator("type", mode="before")
    @classmethod
    def _normalize_type(cls, value: Any) -> Any:
        if isinstance(value, str):
            return value.upper()
        return value

    def with_content(self, content: SectionContent) -> Section:
        return self.model_copy(update={"content": content})


class Theme(SpecModel):
    primary_color: PrimaryColor = Field(alias="primaryColor")


class UISpecification(SpecModel):
    name: str
    theme: Theme
    sections: Sequence[Section]

    @field_validator("name")
    @classmethod
    def _name_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("name must not be empty")
        return value

    @model_validator(mode="after")
    def _check_sections(self) -> UISpecification:
        kinds = tuple(section.type for section in self.sections)
        if kinds != SECTION_ORDER:
            expected = ", ".join(kind.value for kind in SECTION_ORDER)
            found = ", ".join(kind.value for kind in kinds) or "none"
            raise ValueError(f"sections must be exactly [{expected}], got [{found}]")
        for section in self.sections:
            if section.id != section_id(section.type):
                raise ValueError(f"section {section.type.value} has unexpected id {section.id!r}")
        features = self.sections[SECTION_ORDER.index(SectionKind.features)]
        if features.content.items is None:
            raise ValueError("FEATURES section requires items")
        return self


__all__ = [
    "FeatureItem",
    "PrimaryColor",
    "SECTION_ORDER",
    "Section",
    "SectionContent",
    "SectionKind",
    "SpecModel",
    "Theme",
    "UISpecification",
    "section_id",
]
