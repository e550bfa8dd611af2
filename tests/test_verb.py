"""Tests for switchyard.http.verb — Verb enum and method resolution."""

import pytest

from switchyard.errors import DispatchError, UnrecognizedVerb
from switchyard.http.verb import Verb


class TestVerbMembers:
    def test_closed_set(self) -> None:
        assert {v.value for v in Verb} == {
            "GET",
            "POST",
            "PUT",
            "DELETE",
            "PATCH",
            "HEAD",
            "TRACE",
            "CONNECT",
        }

    def test_str(self) -> None:
        assert str(Verb.PATCH) == "PATCH"


class TestFromMethod:
    @pytest.mark.parametrize("method", ["GET", "get", "Get", "gEt"])
    def test_case_insensitive(self, method: str) -> None:
        assert Verb.from_method(method) is Verb.GET

    @pytest.mark.parametrize("method", ["FOO", "", "OPTIONS", " GET", "GET "])
    def test_unrecognized(self, method: str) -> None:
        with pytest.raises(UnrecognizedVerb) as exc_info:
            Verb.from_method(method)
        assert exc_info.value.method == method

    def test_unrecognized_is_dispatch_error(self) -> None:
        with pytest.raises(DispatchError):
            Verb.from_method("FOO")


class TestTryFrom:
    def test_known(self) -> None:
        assert Verb.try_from("delete") is Verb.DELETE

    def test_unknown(self) -> None:
        assert Verb.try_from("FOO") is None

    def test_non_string(self) -> None:
        assert Verb.try_from(None) is None  # type: ignore[arg-type]
