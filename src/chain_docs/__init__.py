"""
Chain Documentation Generator

Generates Markdown documentation pages describing blockchain network
metadata (Wormhole chain ids, contract addresses, consistency levels)
from typed chain configuration records.

Example:
    >>> from chain_docs import Chain, DocumentationBuilder
    >>> chains = [Chain.model_validate(data) for data in chain_configs]
    >>> pages = DocumentationBuilder(chains).build()
"""

from chain_docs.details import (
    DocFormatter,
    all_chain_ids_table,
    all_consistency_levels_table,
    all_contracts_table,
    chain_details_page,
    contract_table,
    finality_option_table,
)
from chain_docs.errors import (
    ChainDocsError,
    DuplicateChainIdError,
    InvalidSettingsError,
    UnknownModuleError,
)
from chain_docs.maybe import MISSING, Maybe, Missing, Present, from_optional
from chain_docs.models import Chain, Contracts, ExtraDetails, Finality, Link, NetworkTier
from chain_docs.modules import ContractModule
from chain_docs.pages import DocumentationBuilder
from chain_docs.settings import DocSettings

__version__ = "0.1.0"

__all__ = [
    "Chain",
    "Contracts",
    "ExtraDetails",
    "Finality",
    "Link",
    "NetworkTier",
    "ContractModule",
    "Present",
    "Missing",
    "MISSING",
    "Maybe",
    "from_optional",
    "DocFormatter",
    "DocumentationBuilder",
    "DocSettings",
    "contract_table",
    "finality_option_table",
    "chain_details_page",
    "all_chain_ids_table",
    "all_consistency_levels_table",
    "all_contracts_table",
    "ChainDocsError",
    "DuplicateChainIdError",
    "UnknownModuleError",
    "InvalidSettingsError",
    "__version__",
]
