"""
Documentation page assembly.

Builds every generated page for a set of chains: one detail page per
chain plus the chain id, consistency level and contract address
reference pages. Pages are returned as a mapping from relative output
path to Markdown; writing them out is left to the caller.

Example:
    >>> builder = DocumentationBuilder(chains)
    >>> pages = builder.build()
    >>> pages["blockchain-environments/solana.md"].splitlines()[0]
    '# Solana'
"""

from __future__ import annotations

from collections import defaultdict
from pathlib import Path
from typing import Any, Iterable

from jinja2 import Environment, FileSystemLoader, select_autoescape

from chain_docs.details import DocFormatter
from chain_docs.errors import DuplicateChainIdError
from chain_docs.logging import get_logger
from chain_docs.models import Chain, sort_by_id
from chain_docs.modules import ContractModule
from chain_docs.settings import DocSettings, get_settings

logger = get_logger(__name__)

DEFAULT_TEMPLATE_DIR = Path(__file__).parent / "templates"


class DocumentationBuilder:
    """Assemble all documentation pages for a chain set.

    Architecture:
        ```
        DocumentationBuilder(chains)
              │
              ├──► check unique chain ids
              │
              ├──► chain_pages()
              │         └──► DocFormatter.chain_details_page per chain
              │
              ├──► reference pages
              │         ├──► chain_ids.md.j2           ◄── all_chain_ids_table
              │         ├──► consistency_levels.md.j2  ◄── all_consistency_levels_table
              │         └──► contract_addresses.md.j2  ◄── all_contracts_table per module
              │
              └──► build() -> {relative path: markdown}
        ```

    Guardrails:
        - Do NOT write files here
          ✅ Return the page mapping; the caller owns the filesystem
        - Do NOT accept two chains with the same id
          ✅ Raise DuplicateChainIdError at construction
    """

    # Map reference page to (template, output filename)
    REFERENCE_PAGES = {
        "chain_ids": ("chain_ids.md.j2", "chain-ids.md"),
        "consistency_levels": ("consistency_levels.md.j2", "consistency-levels.md"),
        "contract_addresses": ("contract_addresses.md.j2", "contract-addresses.md"),
    }

    def __init__(
        self,
        chains: Iterable[Chain],
        settings: DocSettings | None = None,
        formatter: DocFormatter | None = None,
    ):
        """Initialize the builder.

        Args:
            chains: Chains to document, in any order
            settings: Link and layout settings (defaults from environment)
            formatter: Formatter to use (built from ``settings`` if omitted)

        Raises:
            DuplicateChainIdError: If two chains share a chain id
        """
        self.settings = settings or get_settings()
        self.formatter = formatter or DocFormatter(self.settings)
        self.chains = sort_by_id(chains)
        self._check_unique_ids()

        template_dir = self.settings.template_dir or DEFAULT_TEMPLATE_DIR
        self.env = Environment(
            loader=FileSystemLoader(str(template_dir)),
            autoescape=select_autoescape(["html", "xml"]),
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=True,
        )

    def _check_unique_ids(self) -> None:
        names_by_id: dict[int, list[str]] = defaultdict(list)
        for chain in self.chains:
            names_by_id[chain.id].append(chain.name)

        for chain_id, names in names_by_id.items():
            if len(names) > 1:
                raise DuplicateChainIdError(chain_id, names)

    def _render(self, template_name: str, **context: Any) -> str:
        template = self.env.get_template(template_name)
        return template.render(chains=self.chains, **context)

    def chain_page_path(self, chain: Chain) -> str:
        return f"{self.settings.chain_page_dir}/{chain.name}.md"

    def reference_page_path(self, page: str) -> str:
        _, filename = self.REFERENCE_PAGES[page]
        return f"{self.settings.reference_dir}/{filename}"

    def chain_pages(self) -> dict[str, str]:
        """Detail page for each chain, keyed by output path."""
        return {
            self.chain_page_path(chain): self.formatter.chain_details_page(chain)
            for chain in self.chains
        }

    def chain_ids_page(self) -> str:
        template_name, _ = self.REFERENCE_PAGES["chain_ids"]
        return self._render(
            template_name,
            table=self.formatter.all_chain_ids_table(self.chains),
        )

    def consistency_levels_page(self) -> str:
        template_name, _ = self.REFERENCE_PAGES["consistency_levels"]
        return self._render(
            template_name,
            content=self.formatter.all_consistency_levels_table(self.chains),
            consistency_level_link=self.settings.consistency_level_link,
        )

    def contract_addresses_page(self) -> str:
        template_name, _ = self.REFERENCE_PAGES["contract_addresses"]
        sections = [
            {
                "module": module.value,
                "heading": module.heading,
                "table": self.formatter.all_contracts_table(self.chains, module),
            }
            for module in ContractModule
        ]
        return self._render(template_name, sections=sections)

    def reference_pages(self) -> dict[str, str]:
        """Reference pages covering all chains, keyed by output path."""
        return {
            self.reference_page_path("chain_ids"): self.chain_ids_page(),
            self.reference_page_path("consistency_levels"): self.consistency_levels_page(),
            self.reference_page_path("contract_addresses"): self.contract_addresses_page(),
        }

    def build(self) -> dict[str, str]:
        """Build every page.

        Returns:
            Dict mapping relative output path to Markdown content
        """
        pages = self.chain_pages()
        pages.update(self.reference_pages())

        total_size = sum(len(content.encode("utf-8")) for content in pages.values())
        logger.info(
            "docs_built",
            chains=len(self.chains),
            pages=len(pages),
            bytes=total_size,
        )
        return pages


__all__ = ["DocumentationBuilder", "DEFAULT_TEMPLATE_DIR"]
