"""Shared fixtures for switchyard tests."""

import pytest

from switchyard.http.request import Request


@pytest.fixture
def make_request():
    """Build a switchyard ``Request`` from a method and path."""

    def _make(method: str = "GET", path: str = "/") -> Request:
        return Request.build(method, path)

    return _make

