"""Unified settings — CLI flags, env vars, and code defaults in one object.

Priority chain (highest to lowest):
  1. Init kwargs  — CLI flags passed by Click
  2. Env vars     — ``CLUSTERCFG_*`` prefix
  3. Code defaults

There is no settings file: the only file this tool reads is the cluster
config itself.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

from clustercfg.domain.models import DEFAULT_CONFIG_PATH


class ClusterSettings(BaseSettings):
    """Settings for one clustercfg invocation.

    Attributes:
        config_path: The cluster config file to read.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "CLUSTERCFG_",
    }

    config_path: Path = Path(DEFAULT_CONFIG_PATH)

    # --- CLI flags ---
    json_output: bool = False
    verbose: bool = False
    log_json: bool = False

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """CLI flags, then env vars. No dotenv or secrets files."""
        return (init_settings, env_settings)

    @classmethod
    def from_cli(cls, **cli_flags: Any) -> ClusterSettings:
        """Construct settings from a CLI invocation.

        Flags left unset (``None``) or at their ``False`` default are
        dropped so env vars can still supply them.
        """
        overrides = {key: value for key, value in cli_flags.items() if value}
        return cls(**overrides)
