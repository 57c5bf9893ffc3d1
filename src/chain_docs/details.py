"""
Chain documentation formatter.

Turns chain configuration records into Markdown: per-tier contract
tables, consistency level tables, full chain detail pages and the
all-chain reference tables.

Manifesto:
    Documentation pages should never fail to build because a chain is
    sparsely configured. Every optional value is lifted into ``Maybe`` and
    rendered at the cell, so a missing address shows up as a placeholder
    and a missing link as an invitation to fill it in.

Architecture:
    ```
    Chain ──► DocFormatter
                  │
                  ├──► contract_table(tier contracts)
                  ├──► finality_option_table(finality)
                  └──► chain_details_page(chain)

    [Chain] ──► sort_by_id (new list)
                  │
                  ├──► all_chain_ids_table
                  ├──► all_consistency_levels_table
                  └──► all_contracts_table(module)
    ```

Features:
    - Contract tables with fixed base rows and optional role rows
    - Finality tables listing only configured levels, plus fallback notes
    - Ecosystem links with "update here" placeholders pointing at the
      chain's config file
    - Multi-chain tables ordered by chain id without mutating the input

Examples:
    >>> from chain_docs.models import Chain
    >>> chains = [Chain(name="ethereum", id=2), Chain(name="solana", id=1)]
    >>> print(all_chain_ids_table(chains))
    |Chain Name|Wormhole Chain Id|
    |---|------------|
    |solana|1|
    |ethereum|2|
    <BLANKLINE>

Tags:
    formatter, markdown, chain-docs, core_infrastructure
"""

from __future__ import annotations

from functools import lru_cache
from typing import Iterable, Sequence

from chain_docs.errors import UnknownModuleError
from chain_docs.formatting import fmt_num, fmt_str, hint, md_link, table
from chain_docs.logging import chain_context, ensure_logging, get_logger
from chain_docs.maybe import from_optional
from chain_docs.models import Chain, Contracts, Finality, Link, NetworkTier, sort_by_id
from chain_docs.modules import ContractModule
from chain_docs.settings import DocSettings, get_settings

logger = get_logger(__name__)


# Consistency levels in display order, mapped to Finality fields
FINALITY_LEVELS = (
    ("Confirmed", "confirmed"),
    ("Instant", "instant"),
    ("Safe", "safe"),
    ("Finalized", "finalized"),
)

INSTANT_FINALITY_NOTE = "This field may be ignored since the chain provides instant finality."

# Section headings match the anchors of the published chain pages
TIER_HEADINGS = {
    NetworkTier.MAINNET: "Mainnet Contracts",
    NetworkTier.TESTNET: "Testnet Contracts",
    NetworkTier.DEVNET: "Devnet Contract",
}


class DocFormatter:
    """Render chain configuration records as Markdown.

    All methods are pure: they return strings and never modify their
    inputs. Missing optional values render as ``settings.placeholder``.

    Guardrails:
        - Do NOT sort caller sequences in place
          ✅ Use sort_by_id, which returns a new list
        - Do NOT raise on missing optional data
          ✅ Render the placeholder or omit optional rows
    """

    def __init__(self, settings: DocSettings | None = None):
        self.settings = settings or get_settings()
        ensure_logging(self.settings)

    @property
    def placeholder(self) -> str:
        return self.settings.placeholder

    # ------------------------------------------------------------------
    # Single-chain tables
    # ------------------------------------------------------------------

    def contract_table(self, contracts: Contracts) -> str:
        """Two-column table of contract roles and addresses.

        Core, Token Bridge and NFT Bridge are always listed. Relayer,
        MockProvider, MockIntegration and CCTP rows appear only when the
        address is defined.
        """
        rows = [
            ("Core", contracts.core),
            ("Token Bridge", contracts.token_bridge),
            ("NFT Bridge", contracts.nft_bridge),
        ]
        optional_rows = [
            ("Relayer", contracts.wormhole_relayer_address),
            ("MockProvider", contracts.mock_delivery_provider_address),
            ("MockIntegration", contracts.mock_integration_address),
            ("CCTP", contracts.cctp),
        ]
        rows.extend(row for row in optional_rows if row[1] is not None)

        lines = table(
            ["Type", "Contract"],
            [(role, fmt_str(address, self.placeholder)) for role, address in rows],
        )
        return "\n".join(lines)

    def finality_option_table(self, finality: Finality | None) -> tuple[str, str]:
        """Consistency level table and details paragraph for a chain.

        Returns:
            ``(options, details)``. Both are empty strings when ``finality``
            is None; ``details`` is empty when no details URL is set.
        """
        if finality is None:
            return "", ""

        details = ""
        if finality.details:
            details = f"\nFor more information see {md_link(finality.details, finality.details)}\n"

        rows = []
        for level, field_name in FINALITY_LEVELS:
            value = from_optional(getattr(finality, field_name))
            if value.is_present():
                rows.append((level, fmt_num(value, self.placeholder)))

        options = "\n".join(table(["Level", "Value"], rows, rule=["-----", "-----"]))

        if finality.otherwise:
            options += (
                "\n\nIf a value is passed that is _not_ in the set above "
                f"it's assumed to mean {finality.otherwise}"
            )
        if finality.finalized == 0:
            options += f"\n\n{INSTANT_FINALITY_NOTE}"

        return options, details

    # ------------------------------------------------------------------
    # Chain detail page
    # ------------------------------------------------------------------

    def _link_list(self, links: Sequence[Link] | None, fallback: str) -> str:
        if not links:
            return fallback
        return " | ".join(md_link(link.label, link.url) for link in links)

    def _update_here(self, what: str, chain: Chain) -> str:
        return f"No {what}, update {md_link('here', self.settings.edit_link(chain.name))}"

    def chain_details_page(self, chain: Chain) -> str:
        """Assemble the full Markdown page for one chain."""
        extra = chain.extra_details

        webpage = self._update_here("webpage", chain)
        explorer = self._update_here("explorer", chain)
        devdocs = self._update_here("dev docs", chain)
        source = self._update_here("source file", chain)
        notes: list[str] = []

        if extra is not None:
            if extra.homepage:
                webpage = md_link("Web site", extra.homepage)
            explorer = self._link_list(extra.explorer, explorer)
            devdocs = self._link_list(extra.developer, devdocs)
            if extra.contract_source:
                source = md_link(extra.contract_source, self.settings.source_link(extra.contract_source))
            notes = list(extra.notes or [])

        blocks = [f"# {chain.title}"]
        if notes:
            blocks.append("\n".join(hint(note) for note in notes))

        blocks.append(
            "## Ecosystem\n"
            "\n"
            f"- {webpage}\n"
            f"- {explorer}\n"
            f"- {devdocs}"
        )
        blocks.append(
            "## Wormhole Details\n"
            "\n"
            f"- **Name**: `{chain.name}`\n"
            f"- **Chain ID**: `{chain.id}`\n"
            f"- **Contract Source**: {source}"
        )

        options, details = self.finality_option_table(chain.finality)
        if options:
            blocks.append(
                "### Consistency Levels\n"
                "\n"
                f"The options for {md_link('consistencyLevel', self.settings.consistency_level_link)} "
                "(i.e finality) are:"
            )
            blocks.append(options)
            if details:
                blocks.append(details.strip("\n"))

        for tier in NetworkTier:
            blocks.append(f"### {TIER_HEADINGS[tier]}")
            blocks.append(self.contract_table(chain.contracts(tier)))

        with chain_context(chain):
            logger.debug("chain_page_rendered", notes=len(notes), blocks=len(blocks))
        return "\n\n".join(blocks) + "\n"

    # ------------------------------------------------------------------
    # All-chain reference tables
    # ------------------------------------------------------------------

    def all_chain_ids_table(self, chains: Iterable[Chain]) -> str:
        """Chain name and Wormhole chain id for every chain, by id."""
        lines = table(
            ["Chain Name", "Wormhole Chain Id"],
            [(c.name, str(c.id)) for c in sort_by_id(chains)],
            rule=["---", "------------"],
        )
        return "\n".join(lines) + "\n"

    def all_consistency_levels_table(self, chains: Iterable[Chain]) -> str:
        """One consistency level section per chain that defines finality."""
        content: list[str] = []
        for chain in sort_by_id(chains):
            if chain.finality is None:
                continue
            options, details = self.finality_option_table(chain.finality)
            content.extend([f"## {chain.title}", options, details])
        return "\n".join(content)

    def all_contracts_table(self, chains: Iterable[Chain], module: ContractModule | str) -> str:
        """Address of one contract module on every chain and tier.

        An unrecognised module name yields the header with no rows.
        """
        header = ["Chain Name", "Mainnet", "Testnet", "Devnet"]
        rule = ["---"] * len(header)
        ordered = sort_by_id(chains)

        try:
            selected = ContractModule.parse(module)
        except UnknownModuleError as e:
            logger.warning("unknown_contract_module", **e.to_dict())
            return "\n".join(table(header, [], rule=rule)) + "\n"

        address = selected.accessor
        rows = [
            [chain.name] + [fmt_str(address(chain.contracts(tier)), self.placeholder) for tier in NetworkTier]
            for chain in ordered
        ]
        return "\n".join(table(header, rows, rule=rule)) + "\n"


@lru_cache(maxsize=1)
def default_formatter() -> DocFormatter:
    """Formatter built from the default settings."""
    return DocFormatter(get_settings())


def contract_table(contracts: Contracts) -> str:
    return default_formatter().contract_table(contracts)


def finality_option_table(finality: Finality | None) -> tuple[str, str]:
    return default_formatter().finality_option_table(finality)


def chain_details_page(chain: Chain) -> str:
    return default_formatter().chain_details_page(chain)


def all_chain_ids_table(chains: Iterable[Chain]) -> str:
    return default_formatter().all_chain_ids_table(chains)


def all_consistency_levels_table(chains: Iterable[Chain]) -> str:
    return default_formatter().all_consistency_levels_table(chains)


def all_contracts_table(chains: Iterable[Chain], module: ContractModule | str) -> str:
    return default_formatter().all_contracts_table(chains, module)


__all__ = [
    "DocFormatter",
    "default_formatter",
    "contract_table",
    "finality_option_table",
    "chain_details_page",
    "all_chain_ids_table",
    "all_consistency_levels_table",
    "all_contracts_table",
]
