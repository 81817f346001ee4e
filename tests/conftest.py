"""Pytest configuration and shared fixtures."""
import logging
import os
from decimal import Decimal

import pytest
from starlette.testclient import TestClient

from cartrules.core.config import Config
from cartrules.pricing.domain import CartItem, HolidayRule, VIPRule
from cartrules.service import create_app


@pytest.fixture
def laptop():
    """Non-VIP item from the sample cart."""
    return CartItem(name="Laptop", price=Decimal("1000"), is_vip=False)


@pytest.fixture
def smartphone():
    """VIP item from the sample cart."""
    return CartItem(name="Smartphone", price=Decimal("800"), is_vip=True)


@pytest.fixture
def default_rules():
    return [VIPRule(), HolidayRule()]


@pytest.fixture
def config():
    return Config(rules=["vip", "holiday"], log_level="DEBUG")


@pytest.fixture
def app(config):
    return create_app(config)


@pytest.fixture
def client(app):
    with TestClient(app) as c:
        yield c


@pytest.fixture(autouse=True)
def reset_cartrules_logger():
    """Drop handlers bound to per-test streams."""
    yield
    logger = logging.getLogger("cartrules")
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep CARTRULES_* from the developer's shell out of tests."""
    for key in list(os.environ):
        if key.startswith("CARTRULES_"):
            monkeypatch.delenv(key)
