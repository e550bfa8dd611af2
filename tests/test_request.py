"""Tests for switchyard.http.request — immutable Request."""

import pytest

from switchyard._internal.types import RequestLike
from switchyard.http.headers import Headers
from switchyard.http.request import Request


class TestRequest:
    def test_build(self) -> None:
        req = Request.build("GET", "/a", headers={"Content-Type": "text/plain"}, body=b"x")
        assert req.method == "GET"
        assert req.path == "/a"
        assert req.headers["content-type"] == "text/plain"
        assert req.body == b"x"
        assert dict(req.path_params) == {}

    def test_frozen(self) -> None:
        req = Request("GET", "/")
        with pytest.raises(AttributeError):
            req.path = "/other"  # type: ignore[misc]

    def test_default_headers_empty(self) -> None:
        assert len(Request("GET", "/").headers) == 0

    def test_is_request_like(self) -> None:
        assert isinstance(Request("GET", "/"), RequestLike)


class TestTransformations:
    def test_with_path(self) -> None:
        req = Request("GET", "/a")
        new = req.with_path("/b")
        assert new.path == "/b"
        assert req.path == "/a"

    def test_with_method(self) -> None:
        assert Request("GET", "/").with_method("POST").method == "POST"

    def test_with_header(self) -> None:
        req = Request("GET", "/").with_header("X-A", "1").with_header("x-a", "2")
        assert req.headers.get_all("X-A") == ("1", "2")

    def test_with_path_params_read_only(self) -> None:
        req = Request("GET", "/u/1").with_path_params({"id": "1"})
        assert req.path_params == {"id": "1"}
        with pytest.raises(TypeError):
            req.path_params["id"] = "2"  # type: ignore[index]

    def test_with_path_params_copies(self) -> None:
        params = {"id": "1"}
        req = Request("GET", "/").with_path_params(params)
        params["id"] = "changed"
        assert req.path_params["id"] == "1"

    def test_with_attribute(self) -> None:
        req = Request("GET", "/").with_attribute("user", "alice").with_attribute("role", "admin")
        assert dict(req.attributes) == {"user": "alice", "role": "admin"}

    def test_transformations_keep_other_fields(self) -> None:
        req = Request("GET", "/", headers=Headers((("A", "1"),))).with_path_params({"x": "y"})
        new = req.with_attribute("k", "v")
        assert new.headers["a"] == "1"
        assert new.path_params == {"x": "y"}
