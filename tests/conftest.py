from pathlib import Path

import pytest

from genlanding.generation_client import parse_specification
from genlanding.models.spec import UISpecification

FIXTURE_DIR = Path(__file__).resolve().parent.parent / "data" / "specs"


def load_fixture_text(name: str) -> str:
    return (FIXTURE_DIR / f"{name}.json").read_text(encoding="utf-8")


class RecordingNotifier:
    def __init__(self, *, confirm: bool = True) -> None:
        self.alerts: list[str] = []
        self.confirmations: list[str] = []
        self._confirm = confirm

    def alert(self, message: str) -> None:
        self.alerts.append(message)

    def confirm(self, message: str) -> bool:
        self.confirmations.append(message)
        return self._confirm


@pytest.fixture
def coffee_text() -> str:
    return load_fixture_text("artisan-coffee-shop")


@pytest.fixture
def coffee_spec(coffee_text: str) -> UISpecification:
    return parse_specification(coffee_text)


@pytest.fixture
def notifier() -> RecordingNotifier:
    return RecordingNotifier()
