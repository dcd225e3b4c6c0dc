"""Pytest configuration and shared fixtures."""
import pytest

from appchat.session import ChatSession
from fakes import ScriptedTransport


@pytest.fixture
def transport():
    """Return an empty scripted transport; tests queue outcomes on it."""
    return ScriptedTransport()


@pytest.fixture
def session(transport):
    """Return a fresh session on the scripted transport."""
    return ChatSession(transport, provider="claude")


@pytest.fixture
def sample_apps():
    """Return application context records as a caller would send them."""
    return [
        {
            "product": "Desmos",
            "description": "Interactive graphing calculator",
            "category": "STEM",
            "gradeLevels": "6-12",
        },
        {
            "product": "Seesaw",
            "category": "Portfolio",
            "ssoEnabled": True,
            "customField": {"nested": [1, 2, 3]},
        },
    ]
