"""Shared fixtures for view tests"""

import time
from typing import Iterator
from unittest.mock import Mock

import pytest

from lambdalog.models.cached_list import Page
from lambdalog.viewmodels.app import Collaborators
from lambdalog.views.app import App
from tests.infra.mock_input_controller import MockInputController
from tests.infra.mock_output_controller import MockOutputController
from tests.views.utils import EVENTS, FUNCTIONS, NOW, PROFILES, TERMINAL_SIZE


@pytest.fixture(autouse=True)
def _utc_timezone(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Show local times in UTC"""
    monkeypatch.setenv("TZ", "UTC")
    time.tzset()
    yield
    monkeypatch.undo()
    time.tzset()


@pytest.fixture(name="output_controller")
def output_controller_fixture() -> MockOutputController:
    """Create a mock terminal"""
    return MockOutputController(TERMINAL_SIZE)


@pytest.fixture(name="input_controller")
def input_controller_fixture() -> MockInputController:
    """Create a key source without keys"""
    return MockInputController()


@pytest.fixture(name="list_functions")
def list_functions_fixture() -> Mock:
    """Create a function lister"""
    return Mock(return_value=Mock(return_value=Page(FUNCTIONS)))


@pytest.fixture(name="fetch_events")
def fetch_events_fixture() -> Mock:
    """Create a log fetcher"""
    return Mock(return_value=Mock(return_value=Page(EVENTS)))


@pytest.fixture(name="app")
def app_fixture(
    output_controller: MockOutputController,
    input_controller: MockInputController,
    list_functions: Mock,
    fetch_events: Mock,
) -> App:
    """Create the app and draw its first frame"""
    collaborators = Collaborators(list_functions, fetch_events, clock=lambda: NOW)
    app = App(output_controller, input_controller, PROFILES, collaborators)
    app.draw()
    return app
