import pytest
import ipaddress
import os
import socket
import sys
from collections import deque
from pathlib import Path

# Add the project root to the Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from tcpping.destination import ResolvedTarget

# Test configuration
pytest_plugins = ["pytest_asyncio"]

# Environment variables for testing
os.environ.setdefault("TCPPING_LOG_LEVEL", "DEBUG")


class FakeConnector:
    """
    script: outcomes returned in order, a float is a latency in ms and an
    exception instance is raised. Once the script is used up every call
    returns `default`.
    """
    def __init__(self, script=None, default=5.0):
        self.script = deque(script or [])
        self.default = default
        self.calls = []

    async def __call__(self, target, timeout):
        self.calls.append((target, timeout))
        outcome = self.script.popleft() if self.script else self.default
        if isinstance(outcome, BaseException):
            raise outcome
        return outcome


async def no_sleep(seconds):
    return None


@pytest.fixture
def fake_connector():
    return FakeConnector


@pytest.fixture
def sleep():
    return no_sleep


@pytest.fixture
def v4_target():
    return ResolvedTarget(address=ipaddress.ip_address("93.184.216.34"), port=80, family=socket.AF_INET)


@pytest.fixture
def v6_target():
    return ResolvedTarget(address=ipaddress.ip_address("::1"), port=9999, family=socket.AF_INET6)
