"""Exceptions raised while turning run summaries into reports."""

from __future__ import annotations


class VisualiserError(Exception):
    """Base exception for report generation errors."""

    pass


class InputError(VisualiserError):
    """Raised when the summary JSON cannot be read or has the wrong shape."""

    pass


class ScenarioError(VisualiserError):
    """Base for errors tied to one scenario record.

    The message always names the scenario so the failing record can be found
    in a multi-scenario input.
    """

    def __init__(self, scenario_name: str, message: str):
        super().__init__(message)
        self.scenario_name = scenario_name


class TransformError(ScenarioError):
    """Raised when a scenario transform cannot shape a record."""

    pass


class TemplateError(ScenarioError):
    """Raised when a scenario template is missing, invalid, or fails to render."""

    pass


class PageError(VisualiserError):
    """Raised when the page template or its assets can't be loaded, rendered, or saved."""

    pass
