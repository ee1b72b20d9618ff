"""Shared constants for summaryviz."""

# Config file picked up from the working directory when --config is not given
DEFAULT_CONFIG = "summaryviz.yaml"

# Page template wrapping the concatenated scenario fragments
DEFAULT_PAGE_TEMPLATE = "page.html.j2"

# Scenario templates live at <templates>/scenarios/<scenario_name>.html.j2
SCENARIO_TEMPLATE_DIR = "scenarios"
TEMPLATE_SUFFIX = ".html.j2"

# Trend chart layout (pixels). The left margin leaves room for y labels.
CHART_POINT_WIDTH = 40
CHART_HEIGHT = 120
CHART_MARGIN_TOP = 25
CHART_MARGIN_RIGHT = 20
CHART_MARGIN_BOTTOM = 20
CHART_MARGIN_LEFT = 60

# Headroom above the largest sample, as a fraction of it
Y_HEADROOM = 0.05
