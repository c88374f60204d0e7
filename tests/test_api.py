import json

import pytest
from fastapi.testclient import TestClient

from genlanding.api import FULL_PAGE_ERROR, SECTION_ERROR, create_app
from genlanding.design_engine import DesignEngine
from genlanding.errors import BackendFailure


class ScriptedGenerator:
    def __init__(self, reply: str | None = None, error: Exception | None = None) -> None:
        self.reply = reply
        self.error = error
        self.prompts = []

    def generate_json(self, prompt, *, system_instruction, response_schema):
        self.prompts.append(prompt)
        if self.error:
            raise self.error
        return self.reply


def make_client(generator: ScriptedGenerator) -> TestClient:
    return TestClient(create_app(engine=DesignEngine(generator)))


def test_generate_full_page_returns_model_json(coffee_text):
    generator = ScriptedGenerator(reply=coffee_text)
    response = make_client(generator).post("/generateFullPage", json={"prompt": "artisan coffee shop"})

    assert response.status_code == 200
    assert response.headers["content-type"].startswith("application/json")
    assert response.json()["name"] == "Ember & Bean"
    assert generator.prompts == ['Design a premium landing page for: "artisan coffee shop"']


def test_generate_full_page_failure_returns_500():
    generator = ScriptedGenerator(error=BackendFailure("Gemini returned an empty response"))
    response = make_client(generator).post("/generateFullPage", json={"prompt": "artisan coffee shop"})

    assert response.status_code == 500
    assert response.json() == {"error": FULL_PAGE_ERROR}


def test_regenerate_section_returns_one_section():
    reply = json.dumps({"type": "HERO", "content": {"title": "New"}})
    generator = ScriptedGenerator(reply=reply)
    response = make_client(generator).post(
        "/regenerateSection",
        json={"prompt": "artisan coffee shop", "sectionType": "hero", "brand": "Ember & Bean", "theme": "amber"},
    )

    assert response.status_code == 200
    assert response.json() == {"type": "HERO", "content": {"title": "New"}}
    assert "Regenerate the HERO section" in generator.prompts[0]
    assert "Branding: Ember & Bean." in generator.prompts[0]


def test_regenerate_section_failure_returns_500():
    generator = ScriptedGenerator(error=RuntimeError("timeout"))
    response = make_client(generator).post(
        "/regenerateSection",
        json={"prompt": "p", "sectionType": "CTA", "brand": "b", "theme": "sky"},
    )

    assert response.status_code == 500
    assert response.json() == {"error": SECTION_ERROR}


@pytest.mark.parametrize("path", ["/generateFullPage", "/regenerateSection"])
def test_other_methods_are_not_allowed(path):
    response = make_client(ScriptedGenerator(reply="{}")).get(path)

    assert response.status_code == 405


def test_invalid_body_maps_to_route_error():
    response = make_client(ScriptedGenerator(reply="{}")).post(
        "/regenerateSection", json={"prompt": "p", "sectionType": "FOOTER"}
    )

    assert response.status_code == 500
    assert response.json() == {"error": SECTION_ERROR}


def test_healthcheck():
    response = make_client(ScriptedGenerator()).get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok"}
