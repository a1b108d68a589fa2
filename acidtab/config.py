"""
User style defaults, read from a TOML file.

For example, a ``style.toml`` in the user config directory (see
:py:func:`default_config_path`) containing::

    borders = "heavy"
    close = ["left", "right"]
    pad = 1
    prefix = "  "
    header = true

Every key is optional.
"""

from typing import Any, Mapping

import logging
import tomllib
from dataclasses import dataclass, replace
from pathlib import Path

import platformdirs

from acidtab.borders import BORDER_PRESETS, BORDERS_DEFAULT, Borders, Close, parse_close
from acidtab.errors import ConfigError
from acidtab.table import Table


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Style:
    """The presentation settings of a table, independent of its contents."""

    borders: Borders = BORDERS_DEFAULT
    close: Close = Close.NONE
    pad: str = "  "
    prefix: str = ""
    header: bool = True

    def apply(self, table: Table) -> Table:
        """Copy this style onto a table."""
        return (
            table.set_borders(self.borders)
            .set_close(self.close)
            .set_pad(self.pad)
            .set_prefix(self.prefix)
            .set_header(self.header)
        )


def default_config_path() -> Path:
    return Path(platformdirs.user_config_dir("acidtab")) / "style.toml"


def style_from_mapping(data: Mapping[str, Any], source: str = "config") -> Style:
    """Build a Style from the (parsed TOML) mapping given."""
    style = Style()

    unknown = set(data) - {"borders", "close", "pad", "prefix", "header"}
    if unknown:
        raise ConfigError(f"{source}: unknown key(s): {', '.join(sorted(unknown))}")

    if "borders" in data:
        name = data["borders"]
        if not isinstance(name, str) or name not in BORDER_PRESETS:
            raise ConfigError(
                f"{source}: unknown borders {name!r}, expected one of "
                f"{', '.join(BORDER_PRESETS)}"
            )
        style = replace(style, borders=BORDER_PRESETS[name])

    if "close" in data:
        sides = data["close"]
        if isinstance(sides, str):
            sides = [sides]
        if not isinstance(sides, list) or not all(isinstance(s, str) for s in sides):
            raise ConfigError(f"{source}: 'close' must be a side name or list of them")
        try:
            style = replace(style, close=parse_close(sides))
        except ValueError as exc:
            raise ConfigError(f"{source}: {exc}") from exc

    if "pad" in data:
        pad = data["pad"]
        # An integer is a number of spaces
        if isinstance(pad, int) and not isinstance(pad, bool) and pad >= 0:
            pad = " " * pad
        if not isinstance(pad, str):
            raise ConfigError(
                f"{source}: 'pad' must be a string or a non-negative integer"
            )
        style = replace(style, pad=pad)

    if "prefix" in data:
        if not isinstance(data["prefix"], str):
            raise ConfigError(f"{source}: 'prefix' must be a string")
        style = replace(style, prefix=data["prefix"])

    if "header" in data:
        if not isinstance(data["header"], bool):
            raise ConfigError(f"{source}: 'header' must be true or false")
        style = replace(style, header=data["header"])

    return style


def load_style(path: Path | None = None, missing_ok: bool = True) -> Style:
    """
    Load a Style from a TOML file (by default the one in the user's config
    directory). When the file does not exist the default style is returned,
    unless missing_ok is False.
    """
    if path is None:
        path = default_config_path()

    try:
        with path.open("rb") as f:
            data = tomllib.load(f)
    except FileNotFoundError:
        if not missing_ok:
            raise ConfigError(f"{path}: file not found") from None
        logger.debug("No style config at %s, using defaults", path)
        return Style()
    except tomllib.TOMLDecodeError as exc:
        raise ConfigError(f"{path}: {exc}") from exc

    logger.debug("Loaded style config from %s", path)
    return style_from_mapping(data, str(path))
