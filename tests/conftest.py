import pytest
from fastapi.testclient import TestClient

from calculator.models import CalculationInput, RiskMode
from core.settings import Settings
from main import create_app


@pytest.fixture
def client():
    app = create_app(Settings(log_level="WARNING"))
    with TestClient(app) as c:
        yield c


@pytest.fixture
def gold_percentage_input():
    return CalculationInput(
        account_size=10000,
        risk_mode=RiskMode.PERCENTAGE,
        risk_percentage=2,
        instrument="XAUUSD",
        stop_loss_points=50,
    )


@pytest.fixture
def btc_usd_input():
    return CalculationInput(
        account_size=5000,
        risk_mode=RiskMode.FIXED_USD,
        risk_usd=100,
        instrument="BTCUSD",
        stop_loss_points=200,
    )
