from __future__ import annotations

import copy
import logging
from typing import Any, Mapping

from google import genai
from google.genai import types

from .errors import BackendFailure

logger = logging.getLogger(__name__)

DEFAULT_MODEL = "gemini-3-flash-preview"


class GeminiAdapter:
    """Adapter for Gemini models through the google-genai SDK."""

    def __init__(
        self,
        *,
        api_key: str | None = None,
        project_id: str | None = None,
        location: str = "us-central1",
        model_name: str = DEFAULT_MODEL,
        client: Any = None,
    ) -> None:
        """Initialize Gemini adapter.

        Args:
            api_key: Gemini API key. When absent, Vertex AI is used instead.
            project_id: GCP project ID for Vertex AI
            location: Vertex AI location
            model_name: Model name (e.g., "gemini-3-flash-preview")
            client: Pre-built ``genai.Client`` (mainly for tests)
        """
        self.project_id = project_id
        self.location = location
        self.model_name = model_name

        if client is not None:
            self.client = client
        elif api_key:
            self.client = genai.Client(api_key=api_key)
        else:
            self.client = genai.Client(vertexai=True, project=project_id, location=location)

    def generate_json(
        self,
        prompt: str,
        *,
        system_instruction: str,
        response_schema: Mapping[str, Any],
        temperature: float | None = None,
    ) -> str:
        """Generate a JSON document constrained by ``response_schema``.

        Args:
            prompt: Input prompt
            system_instruction: Fixed instruction sent with every request
            response_schema: Output schema the model must follow
            temperature: Optional sampling temperature

        Returns:
            The JSON text returned by the model, without markdown fences
        """
        config = types.GenerateContentConfig(
            system_instruction=system_instruction,
            response_mime_type="application/json",
            response_schema=copy.deepcopy(dict(response_schema)),
            temperature=temperature,
        )

        try:
            response = self.client.models.generate_content(
                model=self.model_name,
                contents=prompt,
                config=config,
            )
        except Exception as exc:
            raise BackendFailure(f"Gemini request failed: {exc}") from exc

        generated_text = _strip_code_fence(response.text or "")
        if not generated_text:
            raise BackendFailure("Gemini returned an empty response")

        logger.info(
            "Generated content with Gemini",
            extra={
                "model": self.model_name,
                "input_length": len(prompt),
                "output_length": len(generated_text),
            },
        )

        return generated_text


def _strip_code_fence(text: str) -> str:
    text = text.strip()
    if text.startswith("```json"):
        text = text[7:]
    if text.startswith("```"):
        text = text[3:]
    if text.endswith("```"):
        text = text[:-3]
    return text.strip()


__all__ = ["DEFAULT_MODEL", "GeminiAdapter"]
