from __future__ import annotations

from collections.abc import Iterator

import pytest

from bruteroom.character.controller import CharacterController
from bruteroom.events import reset_event_bus_for_testing
from bruteroom.input.keyboard import Keyboard
from tests.helpers import FakeLibrary, RecordingPlayer


@pytest.fixture(autouse=True)
def fresh_event_bus() -> Iterator[None]:
    """Give every test its own global event bus."""
    reset_event_bus_for_testing()
    yield
    reset_event_bus_for_testing()


@pytest.fixture
def player() -> RecordingPlayer:
    return RecordingPlayer()


@pytest.fixture
def library(player: RecordingPlayer) -> FakeLibrary:
    return FakeLibrary(player=player)


@pytest.fixture
def controller(library: FakeLibrary) -> CharacterController:
    return CharacterController(library)


@pytest.fixture
def keyboard() -> Keyboard:
    return Keyboard()
