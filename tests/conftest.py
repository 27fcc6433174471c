# =============================================================================
# tests/conftest.py - Pytest Configuration
# =============================================================================
# Shared fixtures for the portfolio site tests.
#
# Key features:
# - Selects the testing config before the app module is imported
# - Provides an app/client pair backed by in-memory SQLite
# - Stubs the SMTP transport so no mail ever leaves the test run
# =============================================================================

import os

# =============================================================================
# Set up test environment BEFORE any imports
# =============================================================================
# app.py builds a module-level instance for gunicorn at import time

os.environ["FLASK_ENV"] = "testing"
os.environ.setdefault("MAIL_SUPPRESS_SEND", "false")

from unittest.mock import MagicMock

import pytest

from app import create_app
from utils.security import reset_rate_limits


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture
def app():
    """A fresh application using TestingConfig."""
    app = create_app("testing")
    yield app


@pytest.fixture
def client(app):
    """Flask test client for the app fixture."""
    return app.test_client()


@pytest.fixture(autouse=True)
def clear_rate_limits():
    """Every test starts with an empty rate-limit table."""
    reset_rate_limits()
    yield
    reset_rate_limits()


@pytest.fixture
def valid_payload():
    """A contact form submission that passes validation."""
    return {
        "firstName": "Jane",
        "lastName": "Doe",
        "email": "jane.doe@example.com",
        "subject": "Project inquiry",
        "message": "Hi Alex,\nI'd love to talk about a dashboard project.",
    }


@pytest.fixture
def smtp_mock(monkeypatch):
    """
    Replace smtplib.SMTP inside the notifications module.

    Returns the connection object the code sees inside its `with` block,
    with the class mock available as `smtp_mock.smtp_class`. send_message
    flattens each message the way smtplib does, so header errors surface.
    """
    connection = MagicMock(name="smtp_connection")
    connection.__enter__.return_value = connection
    connection.__exit__.return_value = False
    connection.send_message.side_effect = lambda msg: msg.as_bytes()

    smtp_class = MagicMock(name="SMTP", return_value=connection)
    monkeypatch.setattr("utils.notifications.smtplib.SMTP", smtp_class)

    connection.smtp_class = smtp_class
    return connection


class ImmediateThread:
    """Thread stand-in that runs its target synchronously on start()."""

    def __init__(self, target=None, args=(), kwargs=None):
        self._target = target
        self._args = args
        self._kwargs = kwargs or {}
        self.daemon = False

    def start(self):
        self._target(*self._args, **self._kwargs)


@pytest.fixture
def immediate_threads(monkeypatch):
    """Run background notification threads inline."""
    monkeypatch.setattr("utils.notifications.threading.Thread", ImmediateThread)
