"""Unified settings — CLI flags, env vars, and TOML config in one object.

Priority chain (highest to lowest):
  1. Init kwargs  — CLI flags passed by Click
  2. Env vars     — ``MINMAX_*`` prefix
  3. TOML file    — ``minmax.toml`` discovered via walk-up
  4. Code defaults — baked into the section models
"""

from __future__ import annotations

import threading
from pathlib import Path
from typing import Any

from pydantic import Field
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

from minmax.config.discovery import find_config, load_config
from minmax.config.models import ClampConfig, OperandsConfig


class TomlSettingsSource(PydanticBaseSettingsSource):
    """Feed the validated, sparse contents of ``minmax.toml`` to pydantic-settings.

    Only keys present in the file are returned, so env vars still override
    individual fields and untouched fields keep their code defaults.
    """

    def __init__(self, settings_cls: type[BaseSettings], toml_path: Path | None) -> None:
        super().__init__(settings_cls)
        self._data: dict[str, Any] = {}
        if toml_path and toml_path.is_file():
            self._data = load_config(toml_path).model_dump(exclude_unset=True)

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:
        """Return ``(value, field_name, value_is_complex)``."""
        val = self._data.get(field_name)
        return val, field_name, field_name in self._data

    def __call__(self) -> dict[str, Any]:
        return self._data


# Thread-local storage for TOML path during construction.
_tls = threading.local()


class MinmaxSettings(BaseSettings):
    """Unified settings for the minmax CLI.

    Frozen after construction and carried on ``click.Context.obj``
    by :class:`minmax.commands._context.AppContext`.

    Attributes:
        config_path: The TOML file actually loaded, or None.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "MINMAX_",
        "env_nested_delimiter": "__",
    }

    config_path: Path | None = None

    # --- CLI flags ---
    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    log_json: bool = False

    # --- TOML sections ---
    operands: OperandsConfig = Field(default_factory=OperandsConfig)
    clamp: ClampConfig = Field(default_factory=ClampConfig)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Insert TOML source between env vars and defaults."""
        toml_path = getattr(_tls, "toml_path", None)
        return (
            init_settings,
            env_settings,
            TomlSettingsSource(settings_cls, toml_path),
        )

    @classmethod
    def from_cli(
        cls,
        *,
        config_path: str | None = None,
        start: Path | None = None,
        allow_strings: bool | None = None,
        **cli_flags: Any,
    ) -> MinmaxSettings:
        """Construct settings from a CLI invocation.

        Uses *config_path* when given (a missing file means no TOML),
        otherwise walks up from *start* (default: cwd) for ``minmax.toml``.
        ``allow_strings`` only overrides the ``[operands]`` section when
        explicitly set.
        """
        toml_path: Path | None = None
        if config_path:
            p = Path(config_path)
            if p.is_file():
                toml_path = p
        else:
            toml_path = find_config(start)

        _tls.toml_path = toml_path
        try:
            settings = cls(config_path=toml_path, **cli_flags)
        finally:
            _tls.toml_path = None

        if allow_strings is not None:
            operands = settings.operands.model_copy(update={"allow_strings": allow_strings})
            settings = settings.model_copy(update={"operands": operands})
        return settings
