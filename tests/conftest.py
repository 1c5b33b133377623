"""Shared fixtures for the dashboard test suite"""

import pytest

from polydash.app import create_app


class FlaskClientTransport:
    """Transport that posts through a Flask test client instead of the network"""

    def __init__(self, client):
        self.client = client

    def post_json(self, path, payload):
        resp = self.client.post(path, json=payload)
        body = resp.get_json(silent=True)
        return resp.status_code, body if isinstance(body, dict) else {}


class ScriptedTransport:
    """Transport that replays canned (status, body) replies or raises exceptions"""

    def __init__(self, *replies):
        self.replies = list(replies)
        self.calls = []

    def post_json(self, path, payload):
        self.calls.append((path, payload))
        reply = self.replies.pop(0)
        if isinstance(reply, Exception):
            raise reply
        return reply


@pytest.fixture
def app():
    return create_app()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def app_transport(client):
    return FlaskClientTransport(client)


@pytest.fixture
def scripted():
    """Factory for ScriptedTransport"""
    return ScriptedTransport


@pytest.fixture
def transport_for():
    """Build a FlaskClientTransport for an arbitrary app"""
    def _make(app):
        return FlaskClientTransport(app.test_client())
    return _make
