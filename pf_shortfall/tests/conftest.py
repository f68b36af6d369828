from __future__ import annotations

import pytest
from flask.testing import FlaskClient

from pf_shortfall.app import create_app
from pf_shortfall.core.config import CalculatorConfig, load_config


@pytest.fixture()
def client() -> FlaskClient:
    app = create_app()
    app.config["TESTING"] = True
    with app.test_client() as test_client:
        yield test_client


@pytest.fixture()
def config() -> CalculatorConfig:
    return load_config()
