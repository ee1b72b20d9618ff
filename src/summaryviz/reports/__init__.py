"""Reports module for summaryviz.

Turns scenario run summaries into HTML report pages.
"""

from .assembler import Report, ReportAssembler, visualise
from .generator import ReportGenerator
from .loader import load_summary, parse_summary, validate_records
from .renderer import FILTERS, TemplateRenderer, scenario_template_name

__all__ = [
    "FILTERS",
    "Report",
    "ReportAssembler",
    "ReportGenerator",
    "TemplateRenderer",
    "load_summary",
    "parse_summary",
    "scenario_template_name",
    "validate_records",
    "visualise",
]
