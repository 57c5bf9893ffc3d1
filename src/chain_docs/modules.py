"""Contract module selector for the all-contracts tables."""

from __future__ import annotations

from enum import Enum
from typing import Callable

from chain_docs.errors import UnknownModuleError
from chain_docs.models import Contracts


class ContractModule(str, Enum):
    """A contract role whose address is listed across all chains.

    Each member maps to the ``Contracts`` field holding its address, so
    table generation dispatches on the member instead of on raw strings.

    Examples:
        >>> ContractModule.parse("relayer").field
        'wormhole_relayer_address'
        >>> ContractModule.CORE.accessor(Contracts(core="0x1"))
        '0x1'
    """

    CORE = "core"
    TOKEN_BRIDGE = "token_bridge"
    NFT_BRIDGE = "nft_bridge"
    CCTP = "cctp"
    RELAYER = "relayer"

    @property
    def field(self) -> str:
        """Name of the ``Contracts`` field this module reads."""
        return _FIELDS[self]

    @property
    def accessor(self) -> Callable[[Contracts], str | None]:
        field_name = self.field
        return lambda contracts: getattr(contracts, field_name)

    @property
    def heading(self) -> str:
        return _HEADINGS[self]

    @classmethod
    def parse(cls, value: "ContractModule | str") -> "ContractModule":
        """Resolve a module from a member or its string value.

        Raises:
            UnknownModuleError: If ``value`` names no module.
        """
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError as e:
            raise UnknownModuleError(value, choices=[m.value for m in cls]) from e


_FIELDS = {
    ContractModule.CORE: "core",
    ContractModule.TOKEN_BRIDGE: "token_bridge",
    ContractModule.NFT_BRIDGE: "nft_bridge",
    ContractModule.CCTP: "cctp",
    ContractModule.RELAYER: "wormhole_relayer_address",
}

_HEADINGS = {
    ContractModule.CORE: "Core Contracts",
    ContractModule.TOKEN_BRIDGE: "Token Bridge",
    ContractModule.NFT_BRIDGE: "NFT Bridge",
    ContractModule.CCTP: "CCTP",
    ContractModule.RELAYER: "Relayer",
}


__all__ = ["ContractModule"]
