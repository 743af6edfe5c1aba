"""Unified settings: CLI flags, env vars, and TOML config in one object.

Priority chain (highest to lowest):
  1. Init kwargs: CLI flags passed by Click
  2. Env vars: ``PIESHOP_*`` prefix, ``__`` for nested sections
  3. TOML file: ``pieshop.toml`` discovered via walk-up
  4. Code defaults: baked into the section models
"""

from __future__ import annotations

import threading
import tomllib
from pathlib import Path
from typing import Any

from pydantic import Field
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

from pieshop.config.discovery import find_config, resolve_shop_root
from pieshop.config.models import PluginsConfig, SessionConfig, ShopConfig, StoreConfig


class TomlSettingsSource(PydanticBaseSettingsSource):
    """Read settings from a ``pieshop.toml`` file."""

    def __init__(self, settings_cls: type[BaseSettings], toml_path: Path | None) -> None:
        super().__init__(settings_cls)
        self._data: dict[str, Any] = {}
        if toml_path and toml_path.is_file():
            raw = toml_path.read_text(encoding="utf-8")
            try:
                self._data = tomllib.loads(raw)
            except tomllib.TOMLDecodeError as exc:
                import click

                msg = f"Invalid TOML in {toml_path}: {exc}"
                raise click.ClickException(msg) from exc

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:
        val = self._data.get(field_name)
        return val, field_name, field_name in self._data

    def __call__(self) -> dict[str, Any]:
        return self._data


# TOML path handed to settings_customise_sources during construction.
_tls = threading.local()


class PieSettings(BaseSettings):
    """Unified settings for the pieshop CLI.

    Stored on the CLI ``AppContext``; frozen after construction.

    Attributes:
        shop_root: Directory holding ``.pieshop/`` (parent of
            ``pieshop.toml``, or CWD if no config found).
        config_path: The TOML file that was loaded, if any.
        session_name: Visitor session to use; overrides ``[session] name``.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "PIESHOP_",
        "env_nested_delimiter": "__",
    }

    shop_root: Path = Field(default_factory=Path.cwd)
    config_path: Path | None = None

    # --- CLI flags ---
    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    log_json: bool = False
    session_name: str | None = None

    # --- TOML sections ---
    shop: ShopConfig = Field(default_factory=ShopConfig)
    store: StoreConfig = Field(default_factory=StoreConfig)
    session: SessionConfig = Field(default_factory=SessionConfig)
    plugins: PluginsConfig = Field(default_factory=PluginsConfig)

    @property
    def active_session(self) -> str:
        """Session name in effect (CLI flag, else ``[session] name``)."""
        return self.session_name or self.session.name

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
        shop_root: Path | None = None,
        **cli_flags: Any,
    ) -> PieSettings:
        """Construct settings from a CLI invocation.

        Discovers ``pieshop.toml`` via walk-up (or explicit *config_path*),
        resolves *shop_root* from the config file's parent directory, and
        merges CLI flags as highest-priority overrides. Flags passed as
        ``None`` are dropped so lower-priority sources still apply.
        """
        toml_path: Path | None = None
        if config_path:
            p = Path(config_path)
            if p.is_file():
                toml_path = p
        else:
            toml_path = find_config(shop_root)

        resolved_root = shop_root or resolve_shop_root(toml_path)

        flags = {k: v for k, v in cli_flags.items() if v is not None}

        _tls.toml_path = toml_path
        try:
            return cls(shop_root=resolved_root, config_path=toml_path, **flags)
        finally:
            _tls.toml_path = None
