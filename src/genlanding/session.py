from __future__ import annotations

import logging
from enum import Enum
from typing import Protocol

from pydantic import ValidationError

from .errors import DecodeFailure, GenLandingError, ValidationFailure
from .exporter import export_markup
from .generation_client import GenerationClient
from .models.spec import Section, UISpecification
from .renderer import editable_fields, render_page
from .spec_store import SpecificationStore

logger = logging.getLogger(__name__)

GENERATION_FAILURE = "System architecture failure."
REGENERATION_FAILURE = "Failed to refresh section. Please check your connection."
EXPORT_SUCCESS = "JSX Structure Copied!"
EXPORT_FAILURE = "Clipboard access denied."
RESET_CONFIRMATION = "Discard current layout?"


class Notifier(Protocol):
    def alert(self, message: str) -> None:
        ...

    def confirm(self, message: str) -> bool:
        ...


class Clipboard(Protocol):
    async def write_text(self, text: str) -> None:
        ...


class SessionPhase(str, Enum):
    prompt = "PROMPT"
    generating = "GENERATING"
    editing = "EDITING"


def validate_prompt(prompt: str) -> str:
    if not prompt.strip():
        raise ValidationFailure("Describe your brand before generating a page.")
    return prompt


class DesignSession:
    """Owns one editing session and its in-flight request guards.

    Backend failures never escape the UI-facing coroutines; they are turned
    into ``error`` (page generation) or a notifier alert (regeneration and
    export).
    """

    def __init__(
        self,
        *,
        client: GenerationClient,
        notifier: Notifier,
        store: SpecificationStore | None = None,
    ) -> None:
        self._client = client
        self._notifier = notifier
        self._store = store or SpecificationStore()
        self.prompt = ""
        self.error: str | None = None
        self.is_generating = False
        self.regenerating_ids: set[str] = set()

    @property
    def store(self) -> SpecificationStore:
        return self._store

    @property
    def spec(self) -> UISpecification | None:
        return self._store.spec

    @property
    def phase(self) -> SessionPhase:
        if self.is_generating:
            return SessionPhase.generating
        if self._store.spec is None:
            return SessionPhase.prompt
        return SessionPhase.editing

    async def generate(self, prompt: str | None = None) -> UISpecification | None:
        if self.is_generating:
            raise ValidationFailure("A page is already being generated.")
        if prompt is not None:
            self.prompt = prompt
        try:
            validate_prompt(self.prompt)
        except ValidationFailure as exc:
            self.error = str(exc)
            return None

        self.is_generating = True
        self.error = None
        try:
            spec = await self._client.generate_full_page(self.prompt)
        except GenLandingError as exc:
            logger.warning("Page generation failed", extra={"error": str(exc)})
            self.error = str(exc) or GENERATION_FAILURE
            return None
        finally:
            self.is_generating = False

        self._store.replace(spec)
        return spec

    async def regenerate(self, section_id: str) -> Section | None:
        """Refresh one section, leaving it untouched if the request fails.

        A section that is already regenerating is skipped.
        """
        spec = self._store.spec
        existing = self._store.get_section(section_id)
        if spec is None or existing is None or section_id in self.regenerating_ids:
            return None

        self.regenerating_ids.add(section_id)
        try:
            fresh = await self._client.regenerate_section(self.prompt, existing.type, spec)
            # Inline edits may have landed while the request was outstanding.
            current = self._store.get_section(section_id)
            if current is None:
                return None
            merged = current.with_content(current.content.merged(fresh.content))
            try:
                self._store.update_section(merged)
            except ValidationError as exc:
                raise DecodeFailure(f"Regenerated section leaves the page invalid: {exc}") from exc
            return merged
        except GenLandingError as exc:
            logger.warning(
                "Section regeneration failed",
                extra={"section_id": section_id, "error": str(exc)},
            )
            self._notifier.alert(REGENERATION_FAILURE)
            return None
        finally:
            self.regenerating_ids.discard(section_id)

    def commit_edit(self, section_id: str, field: str, text: str) -> Section | None:
        """Write inline-edited text back into the store."""
        section = self._store.get_section(section_id)
        if section is None:
            return None
        if field not in editable_fields(section.type):
            raise ValidationFailure(f"{field!r} is not editable on {section.type.value}")
        updated = section.with_content(section.content.merged({field: text}))
        self._store.update_section(updated)
        return updated

    def is_regenerating(self, section_id: str) -> bool:
        return section_id in self.regenerating_ids

    def render(self) -> str:
        spec = self._store.spec
        if spec is None:
            return ""
        return render_page(spec, regenerating_ids=self.regenerating_ids)

    async def export(self, clipboard: Clipboard) -> str | None:
        spec = self._store.spec
        if spec is None:
            return None
        markup = export_markup(spec)
        try:
            await clipboard.write_text(markup)
        except Exception:
            logger.warning("Clipboard write failed", exc_info=True)
            self._notifier.alert(EXPORT_FAILURE)
            return None
        self._notifier.alert(EXPORT_SUCCESS)
        return markup

    def reset(self) -> bool:
        if self._store.spec is None:
            return False
        if not self._notifier.confirm(RESET_CONFIRMATION):
            return False
        self._store.reset()
        self.error = None
        return True


__all__ = [
    "Clipboard",
    "DesignSession",
    "EXPORT_FAILURE",
    "EXPORT_SUCCESS",
    "GENERATION_FAILURE",
    "Notifier",
    "REGENERATION_FAILURE",
    "RESET_CONFIRMATION",
    "SessionPhase",
    "validate_prompt",
]
