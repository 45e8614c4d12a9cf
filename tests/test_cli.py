"""Tests for the developer CLI."""

import pytest

typer = pytest.importorskip("typer")

from typer.testing import CliRunner  # noqa: E402

from svg_color_picker.cli.app import create_app  # noqa: E402

runner = CliRunner()


@pytest.fixture
def app() -> "typer.Typer":
    return create_app()


class TestCli:

    def test_kelvin(self, app: "typer.Typer") -> None:
        result = runner.invoke(app, ["kelvin", "6500"])
        assert result.exit_code == 0
        assert "rgb(" in result.output

    def test_kelvin_infinite(self, app: "typer.Typer") -> None:
        result = runner.invoke(app, ["kelvin", "inf"])
        assert result.exit_code == 0
        assert "rgb(" in result.output

    def test_kelvin_out_of_range_warns(self, app: "typer.Typer") -> None:
        result = runner.invoke(app, ["kelvin", "500"])
        assert result.exit_code == 0
        assert "outside" in result.output

    def test_wheel(self, app: "typer.Typer") -> None:
        result = runner.invoke(app, ["wheel", "150", "14"])
        assert result.exit_code == 0
        assert "90.00" in result.output

    def test_wheel_bad_direction(self, app: "typer.Typer") -> None:
        result = runner.invoke(app, ["wheel", "1", "2", "--direction", "sideways"])
        assert result.exit_code == 1

    def test_slider(self, app: "typer.Typer") -> None:
        result = runner.invoke(app, ["slider", "hue", "#ff0000"])
        assert result.exit_code == 0
        assert "Gradient stops" in result.output

    def test_slider_bad_color(self, app: "typer.Typer") -> None:
        result = runner.invoke(app, ["slider", "red", "not-a-color"])
        assert result.exit_code == 1
