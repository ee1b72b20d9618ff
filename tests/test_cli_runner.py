"""CLI surface tests using typer.testing.CliRunner."""

from __future__ import annotations

import json

import pytest
from typer.testing import CliRunner

from summaryviz import __version__
from summaryviz.cli import app
from tests.conftest import DHT_SYNC_LAG_JSON, ECHO_TEMPLATE, make_record, write_scenario_templates

runner = CliRunner()

pytestmark = pytest.mark.functional


# =============================================================================
# version command
# =============================================================================


class TestVersionCommand:
    """Tests for 'summaryviz version'."""

    def test_version_output(self):
        result = runner.invoke(app, ["version"])
        assert result.exit_code == 0
        assert __version__ in result.output


# =============================================================================
# init command
# =============================================================================


class TestInitCommand:
    """Tests for 'summaryviz init'."""

    def test_init_creates_file(self, tmp_path):
        output = tmp_path / "summaryviz.yaml"
        result = runner.invoke(app, ["init", "--output", str(output)])
        assert result.exit_code == 0
        assert "page_template" in output.read_text()

    def test_init_refuses_overwrite(self, tmp_path):
        output = tmp_path / "summaryviz.yaml"
        output.write_text("keep me")
        result = runner.invoke(app, ["init", "--output", str(output)])
        assert result.exit_code == 1
        assert "already exists" in result.output
        assert output.read_text() == "keep me"

    def test_init_force(self, tmp_path):
        output = tmp_path / "summaryviz.yaml"
        output.write_text("old")
        result = runner.invoke(app, ["init", "-o", str(output), "--force"])
        assert result.exit_code == 0
        assert output.read_text() != "old"


# =============================================================================
# render command
# =============================================================================


class TestRenderCommand:
    """Tests for 'summaryviz render'."""

    def test_render_dht_sync_lag(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        output = tmp_path / "report.html"
        result = runner.invoke(app, ["render", str(DHT_SYNC_LAG_JSON), str(output)])
        assert result.exit_code == 0, result.output
        assert "Report Generated" in result.output
        assert output.read_text().startswith("<!DOCTYPE html>")

    def test_render_missing_input(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        output = tmp_path / "report.html"
        result = runner.invoke(app, ["render", str(tmp_path / "nope.json"), str(output)])
        assert result.exit_code == 1
        assert "Couldn't read JSON" in result.output
        assert not output.exists()

    def test_render_unknown_scenario(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        input_path = tmp_path / "summary.json"
        input_path.write_text(json.dumps(make_record("mystery")))
        result = runner.invoke(app, ["render", str(input_path), str(tmp_path / "out.html")])
        assert result.exit_code == 1
        assert "mystery" in result.output

    def test_render_with_config(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        template_dir = write_scenario_templates(tmp_path / "templates", {"alpha": ECHO_TEMPLATE})
        (template_dir / "plain.html.j2").write_text("{{ html | safe }}")
        config = tmp_path / "custom.yaml"
        config.write_text("templates_dir: templates\npage_template: plain.html.j2\n")
        input_path = tmp_path / "summary.json"
        input_path.write_text(json.dumps(make_record("alpha", "a")))
        output = tmp_path / "out.html"

        result = runner.invoke(
            app, ["render", str(input_path), str(output), "--config", str(config)]
        )
        assert result.exit_code == 0, result.output
        assert output.read_text() == '<section class="scenario scenario-alpha">alpha|</section>'

    def test_render_template_option(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        template_dir = write_scenario_templates(tmp_path / "templates", {"alpha": ECHO_TEMPLATE})
        (template_dir / "page.html.j2").write_text("default")
        (template_dir / "other.html.j2").write_text("other {{ title }}")
        (tmp_path / "summaryviz.yaml").write_text("templates_dir: templates\n")
        input_path = tmp_path / "summary.json"
        input_path.write_text(json.dumps(make_record("alpha", "a")))
        output = tmp_path / "out.html"

        result = runner.invoke(app, ["render", str(input_path), str(output), "-t", "other.html.j2"])
        assert result.exit_code == 0, result.output
        assert output.read_text() == "other alpha-a"

    def test_render_bad_template_option(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        result = runner.invoke(
            app, ["render", str(DHT_SYNC_LAG_JSON), str(tmp_path / "o.html"), "-t", "page.txt"]
        )
        assert result.exit_code == 1
        assert "Invalid page template" in result.output

    def test_render_bad_config(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        (tmp_path / "summaryviz.yaml").write_text("unknown_option: 1\n")
        result = runner.invoke(app, ["render", str(DHT_SYNC_LAG_JSON), str(tmp_path / "o.html")])
        assert result.exit_code == 1
        assert "unknown_option" in result.output


# =============================================================================
# scenarios command
# =============================================================================


class TestScenariosCommand:
    """Tests for 'summaryviz scenarios'."""

    def test_lists_bundled_scenarios(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        result = runner.invoke(app, ["scenarios"])
        assert result.exit_code == 0
        assert "dht_sync_lag" in result.output
        assert "custom" in result.output

    def test_lists_custom_scenarios(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        write_scenario_templates(tmp_path / "templates", {"alpha": ECHO_TEMPLATE})
        (tmp_path / "summaryviz.yaml").write_text("templates_dir: templates\n")
        result = runner.invoke(app, ["scenarios"])
        assert result.exit_code == 0
        assert "alpha" in result.output
        assert "default" in result.output

    def test_no_scenarios(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        (tmp_path / "templates").mkdir()
        (tmp_path / "summaryviz.yaml").write_text("templates_dir: templates\n")
        result = runner.invoke(app, ["scenarios"])
        assert result.exit_code == 0
        assert "No scenario templates" in result.output
