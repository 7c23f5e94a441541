"""Console color theme for fileman.

The bundled ``data/theme.toml`` supplies every color. A user file at
~/.config/fileman/theme.toml may override any subset of them; an invalid
user file is ignored with a warning.
"""

import logging
import tomllib
from functools import cache
from importlib import resources
from pathlib import Path
from typing import Annotated

from pydantic import BaseModel, ConfigDict, StringConstraints, ValidationError
from rich.theme import Theme

from fileman.core.paths import get_user_theme_path

logger = logging.getLogger(__name__)

HexColor = Annotated[
    str,
    StringConstraints(strip_whitespace=True, pattern=r"^#(?:[0-9a-fA-F]{3}|[0-9a-fA-F]{6})$"),
]


class ThemeColors(BaseModel):
    """Colors used by the shell and the one-shot commands.

    Attributes:
        muted: Secondary text (cancellations, hints, sources).
        header: Menu and listing titles.
        border: Table borders.
        success: Successful operations.
        warning: Unknown commands and warnings.
        error: Failed operations.
        info: No-match notices and table values.
        entry: Paths in listings and search results.
    """

    model_config = ConfigDict(extra="forbid")

    muted: HexColor = "#b2bec3"
    header: HexColor = "#69B9A1"
    border: HexColor = "#29526d"
    success: HexColor = "#03b971"
    warning: HexColor = "#f5b332"
    error: HexColor = "#f53263"
    info: HexColor = "#0ec1c8"
    entry: HexColor = "#c1ff62"


def _read_colors(path: Path) -> dict[str, object]:
    """Read the [colors] table of a theme file.

    Returns:
        The table contents, empty if the file is missing.

    Raises:
        ValueError: If the file is not valid TOML or [colors] is not a table.
        OSError: If the file exists but cannot be read.
    """
    try:
        with open(path, "rb") as f:
            colors = tomllib.load(f).get("colors", {})
    except FileNotFoundError:
        return {}
    if not isinstance(colors, dict):
        raise ValueError(f"'colors' in {path} must be a table")
    return colors


def load_theme_colors(user_path: Path | None = None) -> ThemeColors:
    """Merge the bundled colors with the user's overrides.

    Args:
        user_path: User theme file. If None, the XDG location is used.

    Returns:
        Validated colors. The bundled colors alone if the user file is
        unreadable or invalid.
    """
    bundled = resources.files("fileman.data").joinpath("theme.toml")
    colors = ThemeColors.model_validate(_read_colors(Path(str(bundled))))

    path = user_path or get_user_theme_path()
    try:
        overrides = _read_colors(path)
        if not overrides:
            return colors
        merged = ThemeColors.model_validate({**colors.model_dump(), **overrides})
    except (OSError, ValueError, ValidationError) as e:
        logger.warning("Ignoring theme file %s: %s", path, e)
        return colors

    logger.debug("Loaded user theme overrides from %s", path)
    return merged


def build_theme(colors: ThemeColors) -> Theme:
    """Map colors onto the style names used in console markup."""
    return Theme(
        {
            "muted": colors.muted,
            "bold_header": f"bold {colors.header}",
            "border": colors.border,
            "success": colors.success,
            "warning": colors.warning,
            "error": f"bold {colors.error}",
            "info": colors.info,
            "entry": colors.entry,
        }
    )


@cache
def get_theme() -> Theme:
    """Get the Rich theme, loaded once per process."""
    return build_theme(load_theme_colors())
