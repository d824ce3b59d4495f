"""CLI tests using click's CliRunner.

Every test runs against an isolated, empty config directory so local
settings.json never leaks in.
"""

import json

import pytest
from click.testing import CliRunner

from nyctax.cli.__main__ import cli


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    path = tmp_path / "config"
    monkeypatch.setenv("NYC_TAX_CONFIG_PATH", str(path))
    return path


@pytest.fixture
def runner():
    return CliRunner()


class TestTaxesCommand:

    def test_json_output(self, runner):
        result = runner.invoke(cli, [
            "taxes", "--salary", "200000", "--bonus", "40000",
            "--retirement", "23500", "--insurance", "3600", "--format", "json",
        ])
        assert result.exit_code == 0, result.output
        data = json.loads(result.output)
        assert data["gross"] == 240000
        assert data["federal"]["tax"] == pytest.approx(41142.50)
        assert data["filing"] == "single"

    def test_accepts_formatted_amounts(self, runner):
        result = runner.invoke(cli, ["taxes", "--salary", "$150,000", "--format", "json"])
        assert result.exit_code == 0, result.output
        assert json.loads(result.output)["gross"] == 150000

    def test_preset_with_override(self, runner):
        result = runner.invoke(cli, ["taxes", "--preset", "senior", "--bonus", "0", "--format", "json"])
        assert result.exit_code == 0, result.output
        data = json.loads(result.output)
        assert data["salary"] == 280000
        assert data["bonus"] == 0

    def test_text_output(self, runner):
        result = runner.invoke(cli, ["taxes", "--salary", "200000"])
        assert result.exit_code == 0, result.output
        assert "TAKE-HOME" in result.output
        assert "Federal" in result.output
        assert "(single)" in result.output

    def test_filing_from_settings(self, runner):
        runner.invoke(cli, ["settings", "set", "filing", "married"])
        result = runner.invoke(cli, ["taxes", "--salary", "300000", "--format", "json"])
        assert json.loads(result.output)["filing"] == "married"

    def test_filing_option_beats_settings(self, runner):
        runner.invoke(cli, ["settings", "set", "filing", "married"])
        result = runner.invoke(cli, [
            "taxes", "--salary", "300000", "--filing", "single", "--format", "json",
        ])
        assert json.loads(result.output)["filing"] == "single"

    def test_output_format_from_settings(self, runner):
        runner.invoke(cli, ["settings", "set", "output_format", "json"])
        result = runner.invoke(cli, ["taxes", "--salary", "100000"])
        assert json.loads(result.output)["gross"] == 100000

    def test_unknown_preset(self, runner):
        result = runner.invoke(cli, ["taxes", "--preset", "nope"])
        assert result.exit_code == 1
        assert "Unknown preset: nope" in result.output

    def test_invalid_filing(self, runner):
        result = runner.invoke(cli, ["taxes", "--salary", "1", "--filing", "hoh"])
        assert result.exit_code == 2


class TestBudgetCommand:

    def test_preset_json(self, runner):
        result = runner.invoke(cli, ["budget", "--preset", "senior", "--format", "json"])
        assert result.exit_code == 0, result.output
        data = json.loads(result.output)
        assert data["taxes"]["gross"] == 350000
        assert data["spending"]["total_annual"] == pytest.approx(121626)
        assert data["remainder"] == pytest.approx(
            data["taxes"]["take_home"] - data["spending"]["total_annual"]
        )

    def test_no_source(self, runner):
        result = runner.invoke(cli, ["budget"])
        assert result.exit_code == 1
        assert "No spending source" in result.output

    def test_preset_from_settings(self, runner):
        runner.invoke(cli, ["settings", "set", "preset", "mid"])
        result = runner.invoke(cli, ["budget", "--format", "json"])
        assert result.exit_code == 0, result.output
        assert json.loads(result.output)["taxes"]["salary"] == 190000

    def test_profile(self, runner, tmp_path):
        profile = tmp_path / "household.yaml"
        profile.write_text("salary: 100000\nspending:\n  monthly: {rent: 2000}\n")
        result = runner.invoke(cli, ["budget", "--profile", str(profile), "--format", "json"])
        assert result.exit_code == 0, result.output
        data = json.loads(result.output)
        assert data["spending"]["total_annual"] == 24000

    def test_missing_profile(self, runner, tmp_path):
        result = runner.invoke(cli, ["budget", "--profile", str(tmp_path / "missing.yaml")])
        assert result.exit_code == 1
        assert "Profile not found" in result.output

    def test_invalid_profile(self, runner, tmp_path):
        profile = tmp_path / "household.yaml"
        profile.write_text("salary: 100000\nfiling: hoh\n")
        result = runner.invoke(cli, ["budget", "--profile", str(profile)])
        assert result.exit_code == 1
        assert "Invalid profile" in result.output

    def test_text_output(self, runner):
        result = runner.invoke(cli, ["budget", "--preset", "junior"])
        assert result.exit_code == 0, result.output
        assert "Budget: junior" in result.output
        assert "Spending" in result.output
        assert "Remainder" in result.output


class TestPresetsCommands:

    def test_list(self, runner):
        result = runner.invoke(cli, ["presets", "list"])
        assert result.exit_code == 0
        for name in ("junior", "mid", "senior", "staff", "director", "exec"):
            assert name in result.output

    def test_show_json(self, runner):
        result = runner.invoke(cli, ["presets", "show", "mid", "--format", "json"])
        assert result.exit_code == 0
        assert json.loads(result.output)["spending"]["monthly"]["rent"] == 2800

    def test_show_text(self, runner):
        result = runner.invoke(cli, ["presets", "show", "mid"])
        assert "salary: $190,000" in result.output
        assert "rent: $2,800" in result.output

    def test_show_unknown(self, runner):
        result = runner.invoke(cli, ["presets", "show", "nope"])
        assert result.exit_code == 1


class TestSliderCommands:

    def test_list(self, runner):
        result = runner.invoke(cli, ["slider", "list"])
        assert result.exit_code == 0
        assert "housing - Housing & Home: 5.0% to 50.0%" in result.output
        assert "monthly:rent" in result.output

    def test_amount(self, runner):
        result = runner.invoke(cli, ["slider", "amount", "housing", "50", "--gross", "200000"])
        assert result.exit_code == 0, result.output
        assert "27.5%" in result.output
        assert "$55,000" in result.output
        assert "monthly" in result.output

    def test_amount_out_of_range(self, runner):
        result = runner.invoke(cli, ["slider", "amount", "housing", "150", "--gross", "200000"])
        assert result.exit_code == 2

    def test_item_owner(self, runner):
        result = runner.invoke(cli, ["slider", "item", "monthly", "rent"])
        assert result.output.strip() == "housing"

    def test_item_unmapped(self, runner):
        result = runner.invoke(cli, ["slider", "item", "monthly", "streaming"])
        assert "monthly:streaming is not mapped to a slider" in result.output


class TestSettingsCommands:

    def test_show_empty(self, runner, isolated_config):
        result = runner.invoke(cli, ["settings", "show"])
        assert result.exit_code == 0
        assert str(isolated_config / "settings.json") in result.output
        assert "No settings configured" in result.output

    def test_set_show_unset(self, runner):
        result = runner.invoke(cli, ["settings", "set", "preset", "staff"])
        assert result.exit_code == 0
        assert "Set preset: staff" in result.output

        result = runner.invoke(cli, ["settings", "show"])
        assert "preset: staff" in result.output

        result = runner.invoke(cli, ["settings", "unset", "preset"])
        assert "Cleared preset setting." in result.output

        result = runner.invoke(cli, ["settings", "unset", "preset"])
        assert "preset was not set." in result.output

    def test_set_invalid(self, runner):
        result = runner.invoke(cli, ["settings", "set", "filing", "hoh"])
        assert result.exit_code == 1
        assert "Invalid value for filing" in result.output


class TestVersion:

    def test_version(self, runner):
        result = runner.invoke(cli, ["--version"])
        assert result.exit_code == 0
        assert "nyc-tax" in result.output
