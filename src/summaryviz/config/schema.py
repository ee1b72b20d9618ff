"""Pydantic models for summaryviz configuration."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from summaryviz._constants import (
    CHART_HEIGHT,
    CHART_MARGIN_BOTTOM,
    CHART_MARGIN_LEFT,
    CHART_MARGIN_RIGHT,
    CHART_MARGIN_TOP,
    CHART_POINT_WIDTH,
    DEFAULT_PAGE_TEMPLATE,
    TEMPLATE_SUFFIX,
)
from summaryviz.charts import ChartDimensions


class ChartConfig(BaseModel):
    """Trend chart layout in pixels."""

    model_config = ConfigDict(extra="forbid")

    point_width: int = Field(default=CHART_POINT_WIDTH, gt=0)
    height: int = Field(default=CHART_HEIGHT, gt=0)
    margin_top: int = Field(default=CHART_MARGIN_TOP, ge=0)
    margin_right: int = Field(default=CHART_MARGIN_RIGHT, ge=0)
    margin_bottom: int = Field(default=CHART_MARGIN_BOTTOM, ge=0)
    margin_left: int = Field(default=CHART_MARGIN_LEFT, ge=0)

    @model_validator(mode="after")
    def validate_plot_height(self) -> ChartConfig:
        """The plot area must have a positive height once margins are removed."""
        if self.height <= self.margin_top + self.margin_bottom:
            raise ValueError(
                f"chart height ({self.height}) must exceed top + bottom margins "
                f"({self.margin_top + self.margin_bottom})"
            )
        return self

    def to_dimensions(self) -> ChartDimensions:
        return ChartDimensions(**self.model_dump())


class VisualiserConfig(BaseModel):
    """Root configuration for summaryviz.

    All values shown are defaults; an empty file is a valid configuration.
    """

    model_config = ConfigDict(extra="forbid")

    # None means the templates bundled with the package
    templates_dir: Path | None = None
    page_template: str = DEFAULT_PAGE_TEMPLATE
    chart: ChartConfig = Field(default_factory=ChartConfig)

    @field_validator("page_template")
    @classmethod
    def validate_page_template(cls, v: str) -> str:
        if not v.endswith(TEMPLATE_SUFFIX):
            raise ValueError(f"page_template must be a '{TEMPLATE_SUFFIX}' file, got: {v}")
        return v

    @field_validator("templates_dir")
    @classmethod
    def validate_templates_dir(cls, v: Path | None) -> Path | None:
        if v is not None and not v.is_dir():
            raise ValueError(f"templates_dir is not a directory: {v}")
        return v
