"""Tests for screenroute.cli: entrypoint, match and interpolate commands."""

import pytest

from screenroute.cli import main


class TestCLIHelp:
    def test_help_exits_zero(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["--help"])
        assert exc_info.value.code == 0

    def test_no_command_exits_zero(self, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main([])
        assert exc_info.value.code == 0
        assert "screenroute" in capsys.readouterr().out

    def test_match_missing_routes(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["match", "/users"])
        assert exc_info.value.code == 2


class TestMatchCommand:
    def test_table(self, capsys: pytest.CaptureFixture[str]) -> None:
        main(["match", "/users/42?tab=1", "/", "users", "users/:id"])
        out = capsys.readouterr().out
        assert "INDEX" in out
        assert "*2" in out
        assert "id=42?tab=1" in out
        assert "active: 2" in out
        assert "query: tab=1" in out

    def test_fallback(self, capsys: pytest.CaptureFixture[str]) -> None:
        main(["match", "/nope", "users", "/"])
        out = capsys.readouterr().out
        assert "active: 1" in out

    def test_basepath_and_default(self, capsys: pytest.CaptureFixture[str]) -> None:
        main(["match", "/other", "users", "--basepath", "/app", "--default-index", "0"])
        out = capsys.readouterr().out
        assert "/app/users" in out
        assert "active: 0" in out


class TestInterpolateCommand:
    def test_prints_path(self, capsys: pytest.CaptureFixture[str]) -> None:
        main(["interpolate", "/posts/:id", "/users/42"])
        assert capsys.readouterr().out == "/posts/42\n"

    def test_missing_segment(self, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["interpolate", "/posts/:id", "/users"])
        assert exc_info.value.code == 1
        assert "Error:" in capsys.readouterr().err
