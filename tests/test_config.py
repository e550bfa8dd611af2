"""Tests for switchyard.config — RouterConfig frozen dataclass."""

import pytest

from switchyard.config import RouterConfig


class TestRouterConfig:
    def test_defaults(self) -> None:
        cfg = RouterConfig()

        assert cfg.max_path_length == 2048
        assert cfg.max_segments == 50
        assert cfg.max_segment_length == 255
        assert cfg.debug is False

    def test_override(self) -> None:
        cfg = RouterConfig(max_segments=10, debug=True)

        assert cfg.max_segments == 10
        assert cfg.debug is True
        assert cfg.max_path_length == 2048

    def test_frozen(self) -> None:
        cfg = RouterConfig()

        with pytest.raises(AttributeError):
            cfg.debug = True  # type: ignore[misc]
