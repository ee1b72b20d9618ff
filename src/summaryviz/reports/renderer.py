"""Jinja2 rendering for scenario fragments and report pages."""

from __future__ import annotations

import functools
import logging
from collections.abc import Callable, Mapping
from pathlib import Path
from types import MappingProxyType
from typing import Any

from jinja2 import Environment, FileSystemLoader, StrictUndefined, Template, select_autoescape

from summaryviz._constants import SCENARIO_TEMPLATE_DIR, TEMPLATE_SUFFIX
from summaryviz.charts import ChartDimensions, create_trend_graph
from summaryviz.formatting import format_datetime, format_number, percent_change, plural

logger = logging.getLogger(__name__)

# Template filters, e.g. {{ value | number(3) }} or {{ old | percent_change(new) }}
FILTERS: Mapping[str, Callable[..., Any]] = MappingProxyType(
    {
        "number": format_number,
        "percent_change": percent_change,
        "plural": plural,
        "datetime": format_datetime,
    }
)


def _finalize(value: Any) -> Any:
    # Render null fields as nothing rather than "None"
    return "" if value is None else value


def scenario_template_name(scenario_name: str) -> str:
    """Template path for a scenario, relative to the templates directory."""
    return f"{SCENARIO_TEMPLATE_DIR}/{scenario_name}{TEMPLATE_SUFFIX}"


class TemplateRenderer:
    """Renders Jinja2 templates for report pages and scenario fragments.

    The filter and global sets are fixed when the renderer is built; nothing
    is registered on the environment afterwards.
    """

    def __init__(
        self,
        template_dir: Path | None = None,
        chart_dimensions: ChartDimensions | None = None,
    ):
        """Initialize template renderer.

        Args:
            template_dir: Path to templates directory. Defaults to package templates.
            chart_dimensions: Trend chart layout. Defaults to ChartDimensions().
        """
        if template_dir is None:
            # Use package templates (supports dev, pip install, and PyInstaller)
            from summaryviz._resources import get_templates_dir

            template_dir = get_templates_dir()

        self.template_dir = Path(template_dir)
        self.env = Environment(
            loader=FileSystemLoader(str(self.template_dir)),
            autoescape=select_autoescape(["html", "j2"]),
            undefined=StrictUndefined,
            finalize=_finalize,
            trim_blocks=True,
            lstrip_blocks=True,
        )
        self.env.filters.update(FILTERS)
        self.env.globals.update(
            {
                "create_trend_graph": functools.partial(
                    create_trend_graph, dimensions=chart_dimensions
                ),
            }
        )

    def get_template(self, template_name: str) -> Template:
        """Load and compile a template.

        Raises:
            jinja2.TemplateNotFound: If the template doesn't exist
            jinja2.TemplateSyntaxError: If the template doesn't compile
        """
        logger.debug(f"Loading template {template_name} from {self.template_dir}")
        return self.env.get_template(template_name)

    def get_scenario_template(self, scenario_name: str) -> Template:
        """Load the fragment template for a scenario."""
        return self.get_template(scenario_template_name(scenario_name))

    def render(self, template_name: str, context: dict[str, Any]) -> str:
        """Render a template with the given context.

        Args:
            template_name: Name of template file (e.g., "page.html.j2")
            context: Template variables

        Returns:
            Rendered HTML string
        """
        template = self.get_template(template_name)
        return template.render(**context)

    def list_scenario_templates(self) -> list[str]:
        """Names of all scenarios that have a fragment template."""
        scenario_dir = self.template_dir / SCENARIO_TEMPLATE_DIR
        if not scenario_dir.is_dir():
            return []
        return sorted(
            p.name.removesuffix(TEMPLATE_SUFFIX) for p in scenario_dir.glob(f"*{TEMPLATE_SUFFIX}")
        )
