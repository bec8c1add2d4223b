"""Tests for screenroute.config: NavigatorConfig."""

import pytest

from screenroute.config import NavigatorConfig, check_basepath
from screenroute.errors import ConfigurationError, ScreenRouteError


class TestNavigatorConfig:
    def test_defaults(self) -> None:
        config = NavigatorConfig()
        assert config.basepath == "/"
        assert config.default_index == -1
        assert dict(config.initial_state) == {}
        assert config.log_changes is True

    def test_frozen(self) -> None:
        config = NavigatorConfig()
        with pytest.raises(AttributeError):
            config.basepath = "/x"  # type: ignore[misc]

    def test_relative_basepath_rejected(self) -> None:
        with pytest.raises(ConfigurationError) as exc_info:
            NavigatorConfig(basepath="app")
        assert "'app'" in str(exc_info.value)

    def test_configuration_error_is_screenroute_error(self) -> None:
        assert issubclass(ConfigurationError, ScreenRouteError)


class TestCheckBasepath:
    def test_absolute(self) -> None:
        assert check_basepath("/app") == "/app"
        assert check_basepath("/") == "/"

    def test_relative(self) -> None:
        with pytest.raises(ConfigurationError):
            check_basepath("app")

    def test_empty(self) -> None:
        with pytest.raises(ConfigurationError):
            check_basepath("")
