"""
Pytest configuration and shared fixtures for the ShipEngine client tests.

Provides canned transports, sample payloads and configuration directories so
that no test talks to the real API.
"""

import copy
import logging
import os
from pathlib import Path
from typing import Any, Dict
from unittest.mock import Mock

import pytest
import yaml

from shipengine_api.address.address import Address
from shipengine_api.api.client import HTTPClient
from shipengine_api.api.response_handler import ApiResponse
from shipengine_api.core.logging_manager import LoggingManager
from shipengine_api.labels.label import LabelShipment
from shipengine_api.shipengine import ShipEngine
from shipengine_api.shipments.shipment import Package, Shipment, Weight

from tests.fixtures.http_responses import TEST_API_KEY
from tests.fixtures.sample_data import SAMPLE_ADDRESSES


@pytest.fixture
def mock_transport():
    """Transport double recording every request it is given"""
    transport = Mock(spec=HTTPClient)
    transport.send.return_value = ApiResponse(status_code=200, data={})
    return transport


@pytest.fixture
def respond(mock_transport):
    """Set the payload the mocked transport returns next"""
    def _respond(data: Any, status_code: int = 200):
        mock_transport.send.return_value = ApiResponse(
            status_code=status_code, data=copy.deepcopy(data)
        )
        return mock_transport
    return _respond


@pytest.fixture
def client(mock_transport):
    """ShipEngine facade wired to the mocked transport"""
    return ShipEngine(TEST_API_KEY, transport=mock_transport)


@pytest.fixture
def austin_address():
    return Address(**SAMPLE_ADDRESSES["austin"])


@pytest.fixture
def warehouse_address():
    return Address(**SAMPLE_ADDRESSES["warehouse"])


@pytest.fixture
def sample_shipment(austin_address, warehouse_address):
    return Shipment(
        ship_to=austin_address,
        ship_from=warehouse_address,
        packages=[Package(weight=Weight(value=20, unit='ounce'))]
    )


@pytest.fixture
def sample_label_shipment(austin_address, warehouse_address):
    return LabelShipment(
        service_code='usps_priority_mail',
        ship_to=austin_address,
        ship_from=warehouse_address,
        packages=[Package(weight=Weight(value=20, unit='ounce'))]
    )


@pytest.fixture
def temp_config_dir(tmp_path) -> Path:
    """Temporary configuration directory with a default config file"""
    config_dir = tmp_path / "config"
    config_dir.mkdir()

    default_config: Dict[str, Any] = {
        "api": {
            "base_url": "https://api.shipengine.test",
            "timeout": 15,
            "verify_ssl": True,
        },
        "logging": {
            "level": "DEBUG",
            "log_to_console": False,
        },
    }

    with open(config_dir / "default_config.yaml", "w") as f:
        yaml.dump(default_config, f)

    return config_dir


@pytest.fixture
def clean_env(monkeypatch):
    """Remove SHIPENGINE_* variables from the environment"""
    for key in list(os.environ):
        if key.startswith("SHIPENGINE_"):
            monkeypatch.delenv(key, raising=False)
    return monkeypatch


@pytest.fixture(autouse=True)
def reset_logging():
    """Undo any handlers installed by LoggingManager"""
    yield
    LoggingManager.reset()
    logging.getLogger('shipengine_api').setLevel(logging.NOTSET)
