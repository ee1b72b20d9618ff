"""Tests for the Jinja2 template renderer."""

from __future__ import annotations

import jinja2
import pytest

from summaryviz.charts import ChartDimensions
from summaryviz.reports import FILTERS, TemplateRenderer, scenario_template_name
from tests.conftest import write_scenario_templates

pytestmark = pytest.mark.unit


def _render_string(renderer: TemplateRenderer, source: str, **context) -> str:
    return renderer.env.from_string(source).render(**context)


class TestScenarioTemplateName:
    def test_name(self):
        assert scenario_template_name("dht_sync_lag") == "scenarios/dht_sync_lag.html.j2"


class TestFilters:
    """Filters and globals available to every template."""

    def test_filter_set(self):
        assert set(FILTERS) == {"number", "percent_change", "plural", "datetime"}

    def test_filters_read_only(self):
        with pytest.raises(TypeError):
            FILTERS["extra"] = str  # type: ignore[index]

    def test_number_filter(self):
        renderer = TemplateRenderer()
        assert _render_string(renderer, "{{ x | number(3) }}", x=0.00000151631235) == "0.00000152"

    def test_number_filter_blank_renders_raw(self):
        renderer = TemplateRenderer()
        assert _render_string(renderer, "{{ x | number(3) }}", x=0) == "0"
        assert _render_string(renderer, "[{{ x | number }}]", x=None) == "[]"

    def test_percent_change_filter(self):
        renderer = TemplateRenderer()
        assert _render_string(renderer, "{{ a | percent_change(b) }}", a=50, b=75) == "50%"

    def test_plural_filter(self):
        renderer = TemplateRenderer()
        assert _render_string(renderer, '{{ n | plural(" peer", " peers") }}', n=1) == "1 peer"

    def test_datetime_filter(self):
        renderer = TemplateRenderer()
        assert _render_string(renderer, "{{ ts | datetime }}", ts=1738152337).endswith(")")

    def test_none_renders_empty(self):
        renderer = TemplateRenderer()
        assert _render_string(renderer, "[{{ x }}]", x=None) == "[]"

    def test_undefined_is_strict(self):
        renderer = TemplateRenderer()
        with pytest.raises(jinja2.UndefinedError):
            _render_string(renderer, "{{ missing }}")

    def test_trend_graph_global_uses_dimensions(self):
        renderer = TemplateRenderer(chart_dimensions=ChartDimensions(point_width=100))
        html = _render_string(
            renderer, "{{ create_trend_graph('g', [1, 2], 1.5, '10s') }}"
        )
        # 2 points * 100 wide
        assert 'width="200"' in html

    def test_trend_graph_not_escaped(self):
        renderer = TemplateRenderer()
        html = _render_string(renderer, "{{ create_trend_graph('g', [1, 2], none, '10s') }}")
        assert html.startswith("<svg")


class TestTemplateRenderer:
    """Template loading and listing."""

    def test_default_template_dir(self):
        renderer = TemplateRenderer()
        assert (renderer.template_dir / "page.html.j2").is_file()

    def test_package_scenarios(self):
        assert "dht_sync_lag" in TemplateRenderer().list_scenario_templates()

    def test_custom_scenarios_sorted(self, tmp_path):
        template_dir = write_scenario_templates(tmp_path, {"zeta": "z", "alpha": "a"})
        (template_dir / "scenarios" / "notes.txt").write_text("ignored")
        renderer = TemplateRenderer(template_dir=template_dir)
        assert renderer.list_scenario_templates() == ["alpha", "zeta"]

    def test_no_scenario_dir(self, tmp_path):
        assert TemplateRenderer(template_dir=tmp_path).list_scenario_templates() == []

    def test_render(self, tmp_path):
        (tmp_path / "hello.html.j2").write_text("<p>{{ name }}</p>")
        renderer = TemplateRenderer(template_dir=tmp_path)
        assert renderer.render("hello.html.j2", {"name": "<b>"}) == "<p>&lt;b&gt;</p>"

    def test_get_scenario_template_missing(self, tmp_path):
        renderer = TemplateRenderer(template_dir=tmp_path)
        with pytest.raises(jinja2.TemplateNotFound):
            renderer.get_scenario_template("nope")
