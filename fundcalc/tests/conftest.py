from __future__ import annotations

import pytest
from flask import Flask
from flask.testing import FlaskClient

from fundcalc.app import create_app
from fundcalc.config import Settings


@pytest.fixture()
def app() -> Flask:
    return create_app(Settings(cors_origins=("http://localhost:5173",), log_level="WARNING"))


@pytest.fixture()
def client(app: Flask) -> FlaskClient:
    with app.test_client() as test_client:
        yield test_client
