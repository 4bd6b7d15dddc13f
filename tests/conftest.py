from typing import List

import pytest

from contactbook.config import AppConfig
from contactbook.models import Contact
from contactbook.store import ContactStore


class ScriptedTerminal:
    """Terminal that replays canned input and records everything shown."""

    def __init__(self, inputs: List[str]):
        self.inputs = list(inputs)
        self.prompts: List[str] = []
        self.lines: List[str] = []
        self.clears = 0

    def ask(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if not self.inputs:
            raise EOFError("script exhausted")
        return self.inputs.pop(0)

    def show(self, text: str = "") -> None:
        self.lines.append(text)

    def clear(self) -> None:
        self.clears += 1

    @property
    def output(self) -> str:
        return "\n".join(self.lines)


def make_contact(**overrides) -> Contact:
    fields = {
        "name": "Juan Dela Cruz",
        "phone": "09244561530",
        "email": "juan@email.com",
        "address": "123 Main St, Manila",
        "birthdate": "15/03/1990",
    }
    fields.update(overrides)
    return Contact(**fields)


@pytest.fixture
def juan() -> Contact:
    return make_contact()


@pytest.fixture
def maria() -> Contact:
    return make_contact(
        name="Maria Santos",
        phone="09171234567",
        email="maria.santos@example.ph",
        address="45 Rizal Ave, Quezon City",
        birthdate="01/12/1985",
    )


@pytest.fixture
def store(juan, maria) -> ContactStore:
    return ContactStore([juan, maria])


@pytest.fixture
def config() -> AppConfig:
    return AppConfig(clear_screen=False)
