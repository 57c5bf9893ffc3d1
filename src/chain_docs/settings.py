"""Settings for chain documentation generation.

Link bases, the placeholder used for missing values and output layout are
read from ``CHAIN_DOCS_*`` environment variables, a ``.env`` file, or a
YAML file via ``DocSettings.from_yaml``.

Examples:
    >>> settings = DocSettings(placeholder="-")
    >>> settings.edit_link("solana")
    'https://github.com/wormhole-foundation/docs.wormhole.com/blob/main/scripts/src/chains/solana.json'

Tags:
    settings, configuration, pydantic, environment, chain-docs
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Any

import yaml
from pydantic import Field
from pydantic import ValidationError as PydanticValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from chain_docs.errors import InvalidSettingsError


class DocSettings(BaseSettings):
    """Settings shared by the formatter and the page builder.

    Fields
    ──────
    source_base_url        : Prefix for contract source links
    edit_base_url          : Prefix for "update here" links to chain config files
    consistency_level_link : Relative link to the consistencyLevel reference
    placeholder            : Cell text for missing values
    chain_page_dir         : Directory for per-chain pages
    reference_dir          : Directory for the all-chain reference pages
    template_dir           : Jinja2 template override (package templates if unset)
    log_level              : Structlog log level
    """

    model_config = SettingsConfigDict(
        env_prefix="CHAIN_DOCS_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # ── Links ────────────────────────────────────────────────────
    source_base_url: str = "https://github.com/wormhole-foundation/wormhole/blob/main/"
    edit_base_url: str = (
        "https://github.com/wormhole-foundation/docs.wormhole.com/blob/main/scripts/src/chains/"
    )
    consistency_level_link: str = "../../components/core-contracts.md#consistencylevel"

    # ── Formatting ───────────────────────────────────────────────
    placeholder: str = " "

    # ── Output layout ────────────────────────────────────────────
    chain_page_dir: str = "blockchain-environments"
    reference_dir: str = "reference"
    template_dir: Path | None = Field(
        default=None,
        description="Directory with Jinja2 templates overriding the packaged ones",
    )

    # ── Observability ────────────────────────────────────────────
    log_level: str = "INFO"

    def edit_link(self, chain_name: str) -> str:
        """Link to the config file a chain's missing details are edited in."""
        return f"{self.edit_base_url}{chain_name}.json"

    def source_link(self, contract_source: str) -> str:
        return f"{self.source_base_url}{contract_source}"

    @classmethod
    def from_yaml(cls, yaml_path: Path | str, **overrides: Any) -> "DocSettings":
        """Load settings from a YAML file.

        Keys in the file override environment values; ``overrides``
        override both.

        Raises:
            InvalidSettingsError: If the file is missing, is not a mapping,
                or holds invalid values.
        """
        path = Path(yaml_path)
        try:
            with open(path, encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
        except OSError as e:
            raise InvalidSettingsError(f"Cannot read settings file {path}", cause=e, path=str(path)) from e
        except yaml.YAMLError as e:
            raise InvalidSettingsError(f"Malformed YAML in {path}", cause=e, path=str(path)) from e

        if not isinstance(data, dict):
            raise InvalidSettingsError(
                f"Settings file {path} must contain a mapping, got {type(data).__name__}",
                path=str(path),
            )

        data.update(overrides)
        try:
            return cls(**data)
        except PydanticValidationError as e:
            raise InvalidSettingsError(f"Invalid settings in {path}", cause=e, path=str(path)) from e


@lru_cache(maxsize=1)
def get_settings() -> DocSettings:
    """Default settings instance, built once from the environment."""
    return DocSettings()


__all__ = ["DocSettings", "get_settings"]
