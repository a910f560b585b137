import pytest

import app as app_module
from yield_model import build_input


@pytest.fixture
def client():
    app_module.app.config['TESTING'] = True
    app_module.reset_history_log()
    with app_module.app.test_client() as client:
        yield client
    app_module.reset_history_log()


@pytest.fixture
def wheat_input():
    """Ideal rainfall and temperature, best soil, fertilizer at the cap."""
    return build_input(crop='Wheat', rainfall=200, temp=25, soil=100, fert=200)
