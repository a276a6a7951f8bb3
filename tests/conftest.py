"""Shared fixtures for the speech-to-text adapter tests."""

import pytest
from fastapi.testclient import TestClient

from avr_stt.app import create_app
from avr_stt.asr import AsrService
from avr_stt.settings import Settings
from tests.helpers import StubAsrProvider, make_settings


@pytest.fixture
def stub_provider() -> StubAsrProvider:
    return StubAsrProvider()


@pytest.fixture
def settings() -> Settings:
    return make_settings()


@pytest.fixture
def client(settings, stub_provider) -> TestClient:
    app = create_app(settings, asr_service=AsrService(provider=stub_provider))
    return TestClient(app)
