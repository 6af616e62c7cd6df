"""Pytest configuration and fixtures for Hue CLI tests."""

from ipaddress import ip_address
from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest
from click.testing import CliRunner

from models.types import Config, Group, Light


@pytest.fixture
def project_root():
    """Return the project root directory."""
    return Path(__file__).parent.parent


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def lights():
    """Lights in the (unsorted) order a bridge might return them."""
    return [
        Light(id='3', name='Kitchen', reachable=False, on=False),
        Light(id='1', name='Bedroom', reachable=True, on=None),
        Light(id='2', name='Hallway', reachable=True, on=True),
    ]


@pytest.fixture
def groups():
    return [
        Group(id='2', name='Upstairs', lights=('1', '5', '9')),
        Group(id='1', name='Living room', lights=('3', '2')),
    ]


@pytest.fixture
def bridge_address():
    return ip_address('192.168.1.20')


@pytest.fixture
def mock_bridge(bridge_address, lights, groups):
    """Patch config loading, bridge lookup and HueBridge for CLI tests.

    Yields the mock bridge handed to commands. Its patched collaborators are
    available as attributes: load_config, locate_bridge, bridge_class.
    """
    bridge = MagicMock()
    bridge.get_all_lights.return_value = lights
    bridge.get_all_groups.return_value = groups

    with patch('commands.setup.load_config', return_value=Config(username='test-user')) as mock_load, \
            patch('commands.setup.locate_bridge', return_value=bridge_address) as mock_locate, \
            patch('commands.setup.HueBridge', return_value=bridge) as mock_class:
        bridge.load_config = mock_load
        bridge.locate_bridge = mock_locate
        bridge.bridge_class = mock_class
        yield bridge


@pytest.fixture
def make_response():
    """Return a factory for fake requests.Response objects returning JSON."""
    def _make(payload, status_code=200):
        response = MagicMock()
        response.status_code = status_code
        response.json.return_value = payload
        return response
    return _make
