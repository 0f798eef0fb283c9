"""Unit tests for the 'config' commands."""

from __future__ import annotations

from typer.testing import CliRunner

from pomodorable.commands.config_command import app
from pomodorable.services.config_service import get_config_service

runner = CliRunner()


class TestConfigView:
    def test_view_lists_keys(self):
        result = runner.invoke(app, ["view"])

        assert result.exit_code == 0
        assert "timer.focus_length" in result.stdout
        assert "ui.refresh_interval_ms" in result.stdout


class TestConfigGet:
    def test_get_value(self):
        result = runner.invoke(app, ["get", "timer.interval_target"])

        assert result.exit_code == 0
        assert result.stdout.strip() == "10"

    def test_get_section_as_json(self):
        result = runner.invoke(app, ["get", "timer"])

        assert result.exit_code == 0
        assert '"long_break_interval": 4' in result.stdout

    def test_get_unknown_key(self):
        result = runner.invoke(app, ["get", "timer.nope"])

        assert result.exit_code == 1
        assert "not found" in result.stdout


class TestConfigSet:
    def test_set_number(self):
        result = runner.invoke(app, ["set", "timer.focus_length", "45"])

        assert result.exit_code == 0
        assert "Success" in result.stdout
        assert get_config_service().config.timer.focus_length == 45

    def test_set_bool(self):
        result = runner.invoke(app, ["set", "ui.show_quotes", "false"])

        assert result.exit_code == 0
        assert get_config_service().config.ui.show_quotes is False

    def test_set_json_object(self):
        result = runner.invoke(app, ["set", "quotes", '{"focus": ["Go go go"]}'])

        assert result.exit_code == 0
        assert get_config_service().config.quotes == {"focus": ["Go go go"]}

    def test_set_plain_string(self):
        result = runner.invoke(app, ["set", "logging.level", "debug"])

        assert result.exit_code == 0
        assert get_config_service().config.logging.level == "DEBUG"

    def test_set_invalid_value(self):
        result = runner.invoke(app, ["set", "timer.interval_target", "0"])

        assert result.exit_code == 1
        assert "Invalid value" in result.stdout
        assert get_config_service().config.timer.interval_target == 10

    def test_set_unknown_key(self):
        result = runner.invoke(app, ["set", "timer.snooze", "3"])

        assert result.exit_code == 1
        assert "not found" in result.stdout


class TestConfigReset:
    def test_reset_key_with_yes(self):
        get_config_service().set("timer.focus_length", 45)

        result = runner.invoke(app, ["reset", "timer.focus_length", "--yes"])

        assert result.exit_code == 0
        assert "reset to default" in result.stdout
        assert get_config_service().config.timer.focus_length == 25

    def test_reset_all_confirmed(self):
        get_config_service().set("timer.focus_length", 45)

        result = runner.invoke(app, ["reset"], input="y\n")

        assert result.exit_code == 0
        assert "Configuration reset to defaults" in result.stdout
        assert get_config_service().config.timer.focus_length == 25

    def test_reset_cancelled(self):
        get_config_service().set("timer.focus_length", 45)

        result = runner.invoke(app, ["reset"], input="n\n")

        assert result.exit_code == 0
        assert "Cancelled" in result.stdout
        assert get_config_service().config.timer.focus_length == 45

    def test_reset_unknown_key(self):
        result = runner.invoke(app, ["reset", "nope", "-y"])

        assert result.exit_code == 1

    def test_reset_quote_bank(self):
        get_config_service().set("quotes", {"focus": ["Go go go"]})

        result = runner.invoke(app, ["reset", "quotes.focus", "-y"])

        assert result.exit_code == 0
        assert "reset to default" in result.stdout
        assert get_config_service().config.quotes is None
