from __future__ import annotations

import json
import logging
from typing import Any

import httpx
from pydantic import ValidationError

from .errors import DecodeFailure, GenerationFailure, TransportFailure
from .models.requests import GenerateFullPageRequest, RegenerateSectionRequest
from .models.spec import Section, SectionKind, UISpecification, section_id

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "http://localhost:8000"
FULL_PAGE_FAILURE = "The design engine failed to respond."
SECTION_FAILURE = "Failed to refresh this section."


class GenerationClient:
    """Async client for the generation endpoints.

    Each call either returns a fully validated value or raises; there is no
    retry and no local fallback.
    """

    def __init__(
        self,
        *,
        base_url: str = DEFAULT_BASE_URL,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._http_client = http_client

    async def generate_full_page(self, prompt: str) -> UISpecification:
        request = GenerateFullPageRequest(prompt=prompt)
        response = await self._post("generateFullPage", request.model_dump())
        if not response.is_success:
            raise GenerationFailure(
                response.text or FULL_PAGE_FAILURE,
                status_code=response.status_code,
            )

        spec = parse_specification(response.text)
        logger.info(
            "Generated specification",
            extra={"spec_name": spec.name, "theme": spec.theme.primary_color.value},
        )
        return spec

    async def regenerate_section(
        self,
        prompt: str,
        section_type: SectionKind,
        current: UISpecification,
    ) -> Section:
        request = RegenerateSectionRequest(
            prompt=prompt,
            section_type=section_type,
            brand=current.name,
            theme=current.theme.primary_color.value,
        )
        response = await self._post("regenerateSection", request.model_dump(mode="json", by_alias=True))
        if not response.is_success:
            raise GenerationFailure(SECTION_FAILURE, status_code=response.status_code)

        section = parse_section(response.text, section_type)
        logger.info(
            "Regenerated section",
            extra={"section_id": section.id, "fields": sorted(section.content.model_fields_set)},
        )
        return section

    async def _post(self, path: str, payload: dict[str, Any]) -> httpx.Response:
        url = f"{self._base_url}/{path}"
        try:
            if self._http_client is not None:
                return await self._http_client.post(url, json=payload)
            async with httpx.AsyncClient() as client:
                return await client.post(url, json=payload)
        except httpx.HTTPError as exc:
            logger.warning("Generation endpoint unreachable", extra={"url": url, "error": str(exc)})
            raise TransportFailure(str(exc) or FULL_PAGE_FAILURE) from exc


def parse_specification(text: str) -> UISpecification:
    """Decode a generated page and stamp every section with its stable id."""
    payload = _load_object(text)
    sections = payload.get("sections")
    if not isinstance(sections, list):
        raise DecodeFailure("Generated page has no sections list")
    try:
        return UISpecification.model_validate(
            {**payload, "sections": [_stamp(raw) for raw in sections]}
        )
    except ValidationError as exc:
        raise DecodeFailure(f"Generated page does not match the schema: {exc}") from exc


def parse_section(text: str, section_type: SectionKind) -> Section:
    """Decode a regenerated section, forcing the requested kind and its id."""
    payload = _load_object(text)
    try:
        return Section.model_validate(
            {**payload, "type": section_type, "id": section_id(section_type)}
        )
    except ValidationError as exc:
        raise DecodeFailure(f"Generated section does not match the schema: {exc}") from exc


def _stamp(raw: Any) -> dict[str, Any]:
    if not isinstance(raw, dict) or not isinstance(raw.get("type"), str):
        raise DecodeFailure("Generated section has no type")
    kind = raw["type"].upper()
    return {**raw, "type": kind, "id": section_id(kind)}


def _load_object(text: str) -> dict[str, Any]:
    try:
        payload = json.loads(text)
    except json.JSONDecodeError as exc:
        logger.error("Failed to parse JSON response", extra={"response": text[:500]})
        raise DecodeFailure(f"Invalid JSON response: {exc}") from exc
    if not isinstance(payload, dict):
        raise DecodeFailure("Expected a JSON object")
    return payload


__all__ = [
    "DEFAULT_BASE_URL",
    "FULL_PAGE_FAILURE",
    "GenerationClient",
    "SECTION_FAILURE",
    "parse_section",
    "parse_specification",
]
