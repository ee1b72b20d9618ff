"""Report page generation.

Wraps assembled scenario fragments in the page template, with the report CSS
embedded so the output is a single self-contained HTML file.
"""

from __future__ import annotations

import logging
from datetime import datetime
from pathlib import Path
from typing import Any

import jinja2

from summaryviz import __version__
from summaryviz._resources import find_asset
from summaryviz.config import VisualiserConfig
from summaryviz.errors import PageError

from .assembler import Report, ReportAssembler
from .loader import load_summary
from .renderer import TemplateRenderer

logger = logging.getLogger(__name__)

CSS_ASSET = "report.css"


class ReportGenerator:
    """Generates HTML report pages from run summary JSON."""

    def __init__(self, config: VisualiserConfig | None = None):
        """Initialize report generator.

        Args:
            config: Visualiser configuration (defaults apply when omitted)
        """
        self.config = config or VisualiserConfig()
        self.renderer = TemplateRenderer(
            template_dir=self.config.templates_dir,
            chart_dimensions=self.config.chart.to_dimensions(),
        )
        self.assembler = ReportAssembler(self.renderer)

    def _load_css(self) -> str:
        # A custom template directory may ship its own stylesheet
        path = find_asset(CSS_ASSET, [self.renderer.template_dir])
        if path is None:
            raise PageError(f"Couldn't load the report CSS ({CSS_ASSET})")
        logger.debug(f"Embedding stylesheet {path}")
        try:
            return path.read_text(encoding="utf-8")
        except OSError as e:
            raise PageError(  # noqa: B904
                f"Couldn't read the report CSS from `{path}`. Error message: \"{e}\""
            )

    def render_page(self, report: Report) -> str:
        """Render the full HTML page around an assembled report.

        Raises:
            PageError: If the page template is missing or fails to render
        """
        context: dict[str, Any] = {
            "html": report.html,
            "title": report.title,
            "css": self._load_css(),
            "generated_at": datetime.now().timestamp(),
            "version": __version__,
        }
        try:
            return self.renderer.render(self.config.page_template, context)
        except jinja2.TemplateError as e:
            raise PageError(  # noqa: B904
                f"Couldn't build HTML page from {self.config.page_template}. "
                f"Error message: \"{e}\""
            )

    def generate_report(self, input_path: Path | str, output_path: Path | str) -> Path:
        """Generate an HTML report page from a summary JSON file.

        Args:
            input_path: Summary JSON (one scenario record or a list of them)
            output_path: HTML file to write

        Returns:
            Path to generated report

        Raises:
            InputError: If the JSON can't be loaded
            TransformError: If a scenario can't be shaped for display
            TemplateError: If a scenario can't be rendered
            PageError: If the page can't be built or written
        """
        records = load_summary(input_path)
        report = self.assembler.assemble(records)
        page = self.render_page(report)

        filepath = Path(output_path)
        try:
            filepath.write_text(page, encoding="utf-8")
        except OSError as e:
            raise PageError(  # noqa: B904
                f"Couldn't save HTML page to `{filepath}`. Error message: \"{e}\""
            )
        logger.info(f"Generated report: {filepath}")

        return filepath
