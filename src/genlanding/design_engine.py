from __future__ import annotations

import logging
from typing import Any, Mapping, Protocol

from .models.spec import SectionKind
from .prompts import (
    SECTION_SCHEMA,
    SYSTEM_INSTRUCTION,
    UI_SPEC_SCHEMA,
    full_page_prompt,
    section_prompt,
)

logger = logging.getLogger(__name__)


class JsonGenerator(Protocol):
    def generate_json(
        self,
        prompt: str,
        *,
        system_instruction: str,
        response_schema: Mapping[str, Any],
    ) -> str:
        ...


class DesignEngine:
    """Builds the generation requests and forwards them to the model.

    The returned JSON text is passed through untouched; shaping it into a
    specification is the client's job.
    """

    def __init__(
        self,
        generator: JsonGenerator,
        *,
        system_instruction: str = SYSTEM_INSTRUCTION,
        page_schema: Mapping[str, Any] = UI_SPEC_SCHEMA,
        section_schema: Mapping[str, Any] = SECTION_SCHEMA,
    ) -> None:
        self._generator = generator
        self._system_instruction = system_instruction
        self._page_schema = page_schema
        self._section_schema = section_schema

    def full_page(self, prompt: str) -> str:
        logger.info("Generating full page", extra={"prompt_length": len(prompt)})
        return self._generator.generate_json(
            full_page_prompt(prompt),
            system_instruction=self._system_instruction,
            response_schema=self._page_schema,
        )

    def section(self, *, prompt: str, section_type: SectionKind, brand: str, theme: str) -> str:
        logger.info(
            "Regenerating section",
            extra={"section_type": section_type.value, "brand": brand, "theme": theme},
        )
        return self._generator.generate_json(
            section_prompt(prompt=prompt, section_type=section_type, brand=brand, theme=theme),
            system_instruction=self._system_instruction,
            response_schema=self._section_schema,
        )


__all__ = ["DesignEngine", "JsonGenerator"]
