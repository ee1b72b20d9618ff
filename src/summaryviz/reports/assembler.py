"""Assemble scenario records into report HTML.

Each record is shaped by its scenario transform and rendered through
``scenarios/<scenario_name>.html.j2``. Fragments are joined in input order.
Any failure aborts the whole report; there is no partial output.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any

import jinja2

from summaryviz.errors import InputError, TemplateError, TransformError
from summaryviz.transforms import resolve

from .renderer import TemplateRenderer

logger = logging.getLogger(__name__)

FRAGMENT_SEPARATOR = "\n\n"
TITLE_SEPARATOR = ", "

# Keys every display model must carry
REQUIRED_MODEL_KEYS = ("title", "description")

# Errors a transform raises when a record doesn't have its scenario's shape
_SHAPE_ERRORS = (KeyError, IndexError, TypeError, ValueError, AttributeError)


@dataclass(frozen=True)
class Report:
    """Rendered scenario fragments plus a title naming every run."""

    html: str
    title: str


def _run_identity(record: Any) -> tuple[str, str]:
    try:
        run_summary = record["run_summary"]
        return run_summary["scenario_name"], run_summary["run_id"]
    except (KeyError, TypeError) as e:
        raise InputError(
            "Scenario record needs run_summary.scenario_name and run_summary.run_id"
        ) from e


class ReportAssembler:
    """Turns scenario records into one block of report HTML."""

    def __init__(self, renderer: TemplateRenderer | None = None):
        """Initialize report assembler.

        Args:
            renderer: Template renderer (package templates if not provided)
        """
        self.renderer = renderer or TemplateRenderer()

    def build_model(self, scenario_name: str, record: dict[str, Any]) -> dict[str, Any]:
        """Apply the scenario's transform and check the display model.

        Raises:
            TransformError: If the transform fails or drops title/description
        """
        transform = resolve(scenario_name)
        try:
            model = transform(record)
        except _SHAPE_ERRORS as e:
            raise TransformError(  # noqa: B904
                scenario_name,
                f"Couldn't transform data for {scenario_name} scenario. "
                f"Error message: \"{e!r}\"",
            )

        missing = [key for key in REQUIRED_MODEL_KEYS if key not in model]
        if missing:
            raise TransformError(
                scenario_name,
                f"Transform for {scenario_name} scenario returned no {', '.join(missing)}",
            )
        return model

    def render_fragment(self, scenario_name: str, model: dict[str, Any]) -> str:
        """Render one display model through its scenario template.

        Raises:
            TemplateError: If the template is missing, invalid, or fails to render
        """
        try:
            template = self.renderer.get_scenario_template(scenario_name)
        except jinja2.TemplateNotFound as e:
            raise TemplateError(  # noqa: B904
                scenario_name,
                f"Couldn't load template for {scenario_name} scenario. "
                f"Error message: \"template not found: {e.name}\"",
            )
        except jinja2.TemplateSyntaxError as e:
            raise TemplateError(  # noqa: B904
                scenario_name,
                f"Couldn't compile template for {scenario_name} scenario. "
                f"Error message: \"{e.message}\" (line {e.lineno})",
            )

        try:
            return template.render(**model)
        except (jinja2.TemplateError, *_SHAPE_ERRORS) as e:
            raise TemplateError(  # noqa: B904
                scenario_name,
                f"Couldn't generate HTML for {scenario_name} scenario. Error message: \"{e}\"",
            )

    def assemble(self, records: Mapping[str, Any] | Sequence[Mapping[str, Any]]) -> Report:
        """Render one record or a list of records into a Report.

        Args:
            records: A scenario record, or a list of them

        Returns:
            Report with fragments joined by a blank line and a title of
            ``<scenario_name>-<run_id>`` entries joined by ", "

        Raises:
            InputError: If a record has no run_summary identity
            TransformError: If a record can't be shaped for display
            TemplateError: If a record can't be rendered
        """
        if isinstance(records, Mapping):
            records = [records]

        fragments: list[str] = []
        titles: list[str] = []

        for record in records:
            scenario_name, run_id = _run_identity(record)
            logger.debug(f"Rendering {scenario_name} run {run_id}")

            model = self.build_model(scenario_name, dict(record))
            fragments.append(self.render_fragment(scenario_name, model))
            titles.append(f"{scenario_name}-{run_id}")

        report = Report(
            html=FRAGMENT_SEPARATOR.join(fragments),
            title=TITLE_SEPARATOR.join(titles),
        )
        logger.info(f"Assembled report for {len(fragments)} scenario run(s): {report.title}")
        return report


def visualise(
    records: Mapping[str, Any] | Sequence[Mapping[str, Any]],
    renderer: TemplateRenderer | None = None,
) -> Report:
    """Render scenario records with the package templates (or ``renderer``)."""
    return ReportAssembler(renderer).assemble(records)
