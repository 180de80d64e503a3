import os
import logging
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Union
import yaml
from platformdirs import user_config_dir
from .core.errors import ConfigError
from .core.factory import to_shape_type
from .core.shape import ShapeType, Style
from .core.style import DEFAULT_STYLES, merge_style


logger = logging.getLogger(__name__)


CONFIG_DIR = Path(user_config_dir("whiteboard"))
CONFIG_FILE = CONFIG_DIR / "config.yaml"


def getflag(name, default=False):
    default = "true" if default else "false"
    return os.environ.get(name, default).lower() in ("true", "1")


def configure_logging(level: Optional[int] = None):
    """
    Sets up root logging the way the editor expects. WHITEBOARD_DEBUG
    switches to debug output when no explicit level is given.
    """
    if level is None:
        level = logging.DEBUG if getflag("WHITEBOARD_DEBUG") else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


@dataclass(frozen=True)
class EditorConfig:
    """Tunable constants of the interaction core."""

    # Per-axis distance within which a corner or endpoint is grabbed.
    handle_tolerance: float = 5.0
    # Slack allowed when deciding whether a point is on a line.
    line_tolerance: float = 1.0
    # Height of the hit box of a single line of text.
    text_line_height: float = 16.0
    font_family: str = "sans-serif"
    font_size: float = 16.0
    styles: Mapping[ShapeType, Style] = field(
        default_factory=lambda: dict(DEFAULT_STYLES)
    )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "handle_tolerance": self.handle_tolerance,
            "line_tolerance": self.line_tolerance,
            "text_line_height": self.text_line_height,
            "font_family": self.font_family,
            "font_size": self.font_size,
            "styles": {
                shape_type.value: {
                    "stroke_color": style.stroke_color,
                    "fill_color": style.fill_color,
                    "line_width": style.line_width,
                    "corner_radius": style.corner_radius,
                }
                for shape_type, style in self.styles.items()
            },
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "EditorConfig":
        """
        Builds a config from plain data, e.g. a parsed YAML file. Missing
        keys keep their defaults; style tables are merged per type.

        Raises:
            ConfigError: if the data has the wrong shape.
        """
        if not isinstance(data, Mapping):
            raise ConfigError(
                f"Expected a mapping, got {type(data).__name__}"
            )
        config = cls()
        try:
            styles = dict(config.styles)
            for name, overrides in (data.get("styles") or {}).items():
                shape_type = to_shape_type(name)
                styles[shape_type] = merge_style(
                    styles[shape_type], overrides
                )
            return replace(
                config,
                handle_tolerance=float(
                    data.get("handle_tolerance", config.handle_tolerance)
                ),
                line_tolerance=float(
                    data.get("line_tolerance", config.line_tolerance)
                ),
                text_line_height=float(
                    data.get("text_line_height", config.text_line_height)
                ),
                font_family=str(data.get("font_family", config.font_family)),
                font_size=float(data.get("font_size", config.font_size)),
                styles=styles,
            )
        except (TypeError, ValueError, AttributeError) as e:
            raise ConfigError(f"Invalid editor configuration: {e}") from e


def load_config(
    filepath: Optional[Union[str, Path]] = None,
) -> EditorConfig:
    """
    Loads the editor configuration from a YAML file. Falls back to the
    per-user config file, and to the defaults if no file exists.
    """
    path = Path(filepath) if filepath is not None else CONFIG_FILE
    if not path.exists():
        logger.debug(f"No config at {path}, using defaults")
        return EditorConfig()

    logger.info(f"Loading config from {path}")
    with open(path, "r") as f:
        try:
            data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigError(f"Could not parse {path}: {e}") from e
    if not data:
        return EditorConfig()
    return EditorConfig.from_dict(data)


def save_config(
    config: EditorConfig, filepath: Optional[Union[str, Path]] = None
):
    path = Path(filepath) if filepath is not None else CONFIG_FILE
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w") as f:
        yaml.safe_dump(config.to_dict(), f)
