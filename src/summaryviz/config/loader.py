"""Reading and writing summaryviz.yaml."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from summaryviz.errors import VisualiserError

from .schema import VisualiserConfig


class ConfigError(VisualiserError):
    """A configuration file could not be used."""

    pass


class ConfigFileNotFoundError(ConfigError):
    """The configuration file does not exist or can't be read."""

    pass


class ConfigParseError(ConfigError):
    """The configuration file is not a YAML mapping."""

    pass


class ConfigValidationError(ConfigError):
    """The configuration file parsed but holds invalid settings.

    ``problems`` keeps one ``"<field path>: <message>"`` entry per failure.
    """

    def __init__(self, message: str, problems: list[str] | None = None):
        super().__init__(message)
        self.problems = problems or []


def _read_mapping(path: Path) -> dict[str, Any]:
    # An empty file is a valid (all defaults) configuration
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        raise ConfigFileNotFoundError(f"Configuration file not found: {path}")  # noqa: B904
    except OSError as e:
        raise ConfigFileNotFoundError(f"Couldn't read {path}: {e}")  # noqa: B904

    try:
        content = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise ConfigParseError(f"{path} is not valid YAML: {e}")  # noqa: B904

    if content is None:
        return {}
    if not isinstance(content, dict):
        raise ConfigParseError(f"Expected a mapping at the top of {path}")
    return content


def _describe(error: ValidationError) -> list[str]:
    problems = []
    for err in error.errors():
        field = ".".join(str(part) for part in err["loc"]) or "(root)"
        problems.append(f"{field}: {err['msg']}")
    return problems


def load_config(path: str | Path) -> VisualiserConfig:
    """Load summaryviz settings from a YAML file.

    A relative ``templates_dir`` is taken relative to the file, not to the
    working directory.

    Raises:
        ConfigFileNotFoundError: If the file is missing or unreadable
        ConfigParseError: If it isn't a YAML mapping
        ConfigValidationError: If a setting is invalid
    """
    path = Path(path)
    settings = _read_mapping(path)

    templates_dir = settings.get("templates_dir")
    if isinstance(templates_dir, str) and not Path(templates_dir).is_absolute():
        settings["templates_dir"] = str(path.parent / templates_dir)

    try:
        return VisualiserConfig.model_validate(settings)
    except ValidationError as e:
        problems = _describe(e)
        raise ConfigValidationError(  # noqa: B904
            f"Invalid settings in {path}:\n" + "\n".join(f"  - {p}" for p in problems),
            problems=problems,
        )


def save_config(config: VisualiserConfig, path: str | Path) -> None:
    """Write ``config`` to ``path`` as YAML, defaults included."""
    settings = config.model_dump(mode="json")
    Path(path).write_text(
        yaml.safe_dump(settings, default_flow_style=False, sort_keys=False),
        encoding="utf-8",
    )


def generate_example_config_yaml() -> str:
    """Starter summaryviz.yaml with every option commented out at its default.

    The file parses to an empty mapping, so it is valid as written.
    """
    return """# summaryviz settings
# Every option below is commented out and shows its default value.
# Uncomment and edit the ones you want to change.

# Directory holding page.html.j2, partials/ and scenarios/<name>.html.j2.
# Relative paths are resolved against this file. Unset = bundled templates.
# templates_dir: ./templates

# Page template that wraps the scenario fragments.
# page_template: page.html.j2

# Trend chart layout, in pixels.
# chart:
#   point_width: 40      # horizontal space per time window
#   height: 120          # total height including margins
#   margin_top: 25
#   margin_right: 20
#   margin_bottom: 20
#   margin_left: 60      # room for the y axis labels
"""
