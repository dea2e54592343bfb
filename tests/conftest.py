from typing import Generator

import pytest
from fastapi.testclient import TestClient

from bootpane.config.settings import Settings
from bootpane.views.assets import View


@pytest.fixture
def settings() -> Settings:
    return Settings(_env_file=None)


@pytest.fixture
def view(settings: Settings) -> View:
    return View(settings=settings)


@pytest.fixture
def client() -> Generator[TestClient, None, None]:
    from bootpane.app import create_app

    with TestClient(create_app()) as test_client:
        yield test_client
