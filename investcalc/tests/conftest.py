from __future__ import annotations

import pytest
from flask.testing import FlaskClient

from investcalc.app import create_app
from investcalc.app.config import AppSettings


@pytest.fixture()
def client() -> FlaskClient:
    app = create_app(AppSettings(log_level="WARNING"))
    with app.test_client() as test_client:
        yield test_client
