from __future__ import annotations

from typing import Any, Mapping

from .models.spec import PrimaryColor, SectionKind

SYSTEM_INSTRUCTION = """You are a Senior UI/UX Design Engineer.
Output a landing page specification in JSON for the 'Tambo' design system.
Aesthetic characteristics: 32px border radii, high contrast, soft layered shadows, and premium typography.
STRICT RULES:
1. Provide exactly 4 sections: NAVBAR, HERO, FEATURES (3 items), CTA.
2. Content must be high-conversion and tailored to the prompt.
3. No conversational output, just valid JSON."""

FEATURE_ITEM_SCHEMA: Mapping[str, Any] = {
    "type": "OBJECT",
    "properties": {
        "title": {"type": "STRING"},
        "description": {"type": "STRING"},
        "icon": {"type": "STRING", "description": "FontAwesome icon class"},
    },
    "required": ["title", "description"],
}

SECTION_CONTENT_SCHEMA: Mapping[str, Any] = {
    "type": "OBJECT",
    "properties": {
        "title": {"type": "STRING"},
        "subtitle": {"type": "STRING"},
        "description": {"type": "STRING"},
        "buttonText": {"type": "STRING"},
        "items": {
            "type": "ARRAY",
            "min_items": 3,
            "max_items": 3,
            "description": "Exactly 3 features required.",
            "items": FEATURE_ITEM_SCHEMA,
        },
    },
    "required": ["title"],
}

SECTION_SCHEMA: Mapping[str, Any] = {
    "type": "OBJECT",
    "properties": {
        "type": {
            "type": "STRING",
            "description": "Must be one of: " + ", ".join(kind.value for kind in SectionKind),
            "enum": [kind.value for kind in SectionKind],
        },
        "content": SECTION_CONTENT_SCHEMA,
    },
    "required": ["type", "content"],
}

UI_SPEC_SCHEMA: Mapping[str, Any] = {
    "type": "OBJECT",
    "properties": {
        "name": {"type": "STRING"},
        "theme": {
            "type": "OBJECT",
            "properties": {
                "primaryColor": {
                    "type": "STRING",
                    "enum": [color.value for color in PrimaryColor],
                },
            },
            "required": ["primaryColor"],
        },
        "sections": {"type": "ARRAY", "items": SECTION_SCHEMA},
    },
    "required": ["name", "theme", "sections"],
}


def full_page_prompt(prompt: str) -> str:
    return f'Design a premium landing page for: "{prompt}"'


def section_prompt(*, prompt: str, section_type: SectionKind, brand: str, theme: str) -> str:
    return (
        f'Regenerate the {section_type.value} section for "{prompt}". '
        f"Current theme: {theme}. Branding: {brand}."
    )


__all__ = [
    "FEATURE_ITEM_SCHEMA",
    "SECTION_CONTENT_SCHEMA",
    "SECTION_SCHEMA",
    "SYSTEM_INSTRUCTION",
    "UI_SPEC_SCHEMA",
    "full_page_prompt",
    "section_prompt",
]
