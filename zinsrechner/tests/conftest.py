from __future__ import annotations

import pytest
from flask.testing import FlaskClient

from zinsrechner.app import create_app
from zinsrechner.config import Settings


@pytest.fixture()
def settings() -> Settings:
    return Settings(_env_file=None, LOCALE="de", LOG_LEVEL="WARNING")


@pytest.fixture()
def client(settings: Settings) -> FlaskClient:
    app = create_app(settings)
    app.config["TESTING"] = True
    with app.test_client() as test_client:
        yield test_client


@pytest.fixture()
def scenario_payload() -> dict:
    return {
        "initialCapital": 10000,
        "monthlyContribution": 250,
        "years": 30,
        "interestRate": 8.6,
    }
