"""
Pytest configuration and shared fixtures for inventory API tests.

Kubernetes API objects are replaced by MagicMocks; no test talks to a real
cluster.
"""

import json
import sys
from pathlib import Path
from unittest.mock import MagicMock

import pytest

# Add src to path so tests run without an editable install
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from kube_inventory.core import ClusterInventory  # noqa: E402


def _raw_response(body):
    """Mimic the urllib3 response returned with _preload_content=False."""
    response = MagicMock()
    response.data = json.dumps(body).encode("utf-8")
    return response


@pytest.fixture
def make_response():
    """Factory building fake raw list responses from a dict body."""
    return _raw_response


@pytest.fixture
def apis():
    """Mocked CoreV1Api, AppsV1Api and NetworkingV1Api keyed by group."""
    return {"core": MagicMock(), "apps": MagicMock(), "networking": MagicMock()}


@pytest.fixture
def inventory(apis):
    return ClusterInventory(apis)
