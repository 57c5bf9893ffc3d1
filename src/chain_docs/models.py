"""
Chain configuration records.

Typed, immutable views of the per-chain configuration: Wormhole chain id,
contract addresses per network tier, ecosystem links and finality
settings. Fields accept both snake_case names and the camelCase keys used
in the chain JSON files (``extraDetails``, ``wormholeRelayerAddress``, ...).

Example:
    >>> chain = Chain.model_validate({
    ...     "name": "solana",
    ...     "id": 1,
    ...     "mainnet": {"core": "worm2ZoG2kUd4vFXhvjh93UUH596ayRfgQ2MgjNMTth"},
    ...     "extraDetails": {"title": "Solana", "finality": {"confirmed": 0, "finalized": 1}},
    ... })
    >>> chain.title
    'Solana'
"""

from __future__ import annotations

from enum import Enum
from typing import Iterable

from pydantic import BaseModel, ConfigDict, Field


class NetworkTier(str, Enum):
    """Network tier a contract set is deployed to."""

    MAINNET = "mainnet"
    TESTNET = "testnet"
    DEVNET = "devnet"


class _Record(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")


class Link(_Record):
    """Hyperlink to an explorer or developer resource."""

    url: str = Field(..., min_length=1)
    description: str | None = Field(default=None, description="Link text; falls back to url")

    @property
    def label(self) -> str:
        return self.description or self.url


class Finality(_Record):
    """Consistency level thresholds accepted by a chain's core contract."""

    confirmed: int | None = None
    instant: int | None = None
    safe: int | None = None
    finalized: int | None = None
    otherwise: str | None = Field(
        default=None,
        description="Meaning of a value outside the listed levels",
    )
    details: str | None = Field(default=None, description="URL with more information")


class ExtraDetails(_Record):
    """Optional descriptive metadata for a chain page."""

    title: str | None = None
    notes: list[str] | None = None
    homepage: str | None = None
    explorer: list[Link] | None = None
    developer: list[Link] | None = None
    contract_source: str | None = Field(
        default=None,
        alias="contractSource",
        description="Contract source path relative to the source repository",
    )
    finality: Finality | None = None


class Contracts(_Record):
    """Contract addresses for one network tier."""

    core: str | None = None
    token_bridge: str | None = None
    nft_bridge: str | None = None
    wormhole_relayer_address: str | None = Field(default=None, alias="wormholeRelayerAddress")
    mock_delivery_provider_address: str | None = Field(
        default=None, alias="mockDeliveryProviderAddress"
    )
    mock_integration_address: str | None = Field(default=None, alias="mockIntegrationAddress")
    cctp: str | None = None


class Chain(_Record):
    """A blockchain network registered in the documentation."""

    name: str = Field(..., min_length=1, description="Chain identifier, also the config file stem")
    id: int = Field(..., ge=0, description="Wormhole chain id")
    mainnet: Contracts = Field(default_factory=Contracts)
    testnet: Contracts = Field(default_factory=Contracts)
    devnet: Contracts = Field(default_factory=Contracts)
    extra_details: ExtraDetails | None = Field(default=None, alias="extraDetails")

    @property
    def title(self) -> str:
        """Display title: the configured title, or the chain name."""
        if self.extra_details is not None and self.extra_details.title:
            return self.extra_details.title
        return self.name

    @property
    def finality(self) -> Finality | None:
        if self.extra_details is None:
            return None
        return self.extra_details.finality

    def contracts(self, tier: NetworkTier | str) -> Contracts:
        """Contract set for a network tier."""
        return getattr(self, NetworkTier(tier).value)


def sort_by_id(chains: Iterable[Chain]) -> list[Chain]:
    """Return a new list of chains in ascending chain id order.

    The sort is stable, so chains sharing an id keep their input order.
    The input sequence is not modified.
    """
    return sorted(chains, key=lambda c: c.id)


__all__ = [
    "NetworkTier",
    "Link",
    "Finality",
    "ExtraDetails",
    "Contracts",
    "Chain",
    "sort_by_id",
]
