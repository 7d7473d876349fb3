"""Config file discovery and validation.

``find_config`` locates minmax.toml by walking up from the working
directory (``MINMAX_CONFIG`` wins when set). ``load_config`` parses and
validates it against :class:`MinmaxConfig`, turning both TOML syntax errors
and bad values into a ``click.ClickException`` the CLI prints cleanly.
"""

from __future__ import annotations

import os
import tomllib
from pathlib import Path

import click
from pydantic import ValidationError

from minmax.config.models import MinmaxConfig

CONFIG_FILENAME = "minmax.toml"
CONFIG_ENV_VAR = "MINMAX_CONFIG"


def find_config(start: Path | None = None) -> Path | None:
    """Return the nearest minmax.toml at or above *start*, or None.

    An ``MINMAX_CONFIG`` path that does not exist disables discovery.
    """
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        p = Path(env_path)
        return p if p.is_file() else None

    current = (start or Path.cwd()).resolve()
    for directory in (current, *current.parents):
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None


def _describe(exc: ValidationError) -> str:
    return "; ".join(
        f"{'.'.join(str(part) for part in err['loc'])}: {err['msg']}" for err in exc.errors()
    )


def load_config(path: Path) -> MinmaxConfig:
    """Parse and validate the config file at *path*.

    Raises:
        click.ClickException: The file is not valid TOML, or a value does
            not fit its section (e.g. ``allow_strings = "maybe"``).
    """
    raw = path.read_text(encoding="utf-8")
    try:
        data = tomllib.loads(raw)
    except tomllib.TOMLDecodeError as exc:
        raise click.ClickException(f"Invalid TOML in {path}: {exc}") from exc
    try:
        return MinmaxConfig.model_validate(data)
    except ValidationError as exc:
        raise click.ClickException(f"Invalid config in {path}: {_describe(exc)}") from exc
