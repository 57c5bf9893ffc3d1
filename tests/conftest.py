"""
Shared pytest fixtures for chain-docs tests.

Chain fixtures are built from dicts shaped like the chain JSON config
files (camelCase keys) so model aliases are exercised everywhere.
"""

import pytest

from chain_docs.details import DocFormatter
from chain_docs.models import Chain
from chain_docs.settings import DocSettings


ETHEREUM = {
    "name": "ethereum",
    "id": 2,
    "mainnet": {
        "core": "0x98f3c9e6E3fAce36bAAd05FE09d375Ef1464288B",
        "token_bridge": "0x3ee18B2214AFF97000D974cf647E7C347E8fa585",
        "nft_bridge": "0x6FFd7EdE62328b3Af38FCD61461Bbfc52F5651fE",
        "wormholeRelayerAddress": "0x27428DD2d3DD32A4D7f7C497eAaa23130d894911",
        "cctp": "0xAaDA05BD399372f0b0463744C09113c137636f6a",
    },
    "testnet": {
        "core": "0x4a8bc80Ed5a4067f1CCf107057b8270E0cC11A78",
        "token_bridge": "0xDB5492265f6038831E89f495670FF909aDe94bd9",
        "wormholeRelayerAddress": "0x7B1bD7a6b4E61c2a123AC6BC2cbfC614437D0470",
        "mockDeliveryProviderAddress": "0x60a86b97a7596eBFd25fb769053894ed0D9A8366",
        "mockIntegrationAddress": "0x3bF0c43d88541BBCF92bE508ec41e540FbF28C56",
    },
    "devnet": {
        "core": "0xC89Ce4735882C9F0f0FE26686c53074E09B0D550",
    },
    "extraDetails": {
        "title": "Ethereum",
        "notes": ["Ethereum testnet contracts are deployed on Sepolia."],
        "homepage": "https://ethereum.org",
        "explorer": [
            {"url": "https://etherscan.io", "description": "Etherscan"},
            {"url": "https://sepolia.etherscan.io"},
        ],
        "developer": [
            {"url": "https://ethereum.org/en/developers/docs/", "description": "Developer docs"},
        ],
        "contractSource": "ethereum/contracts",
        "finality": {
            "instant": 200,
            "safe": 201,
            "finalized": 1,
            "details": "https://ethereum.org/en/developers/docs/consensus-mechanisms/pos/",
        },
    },
}

SOLANA = {
    "name": "solana",
    "id": 1,
    "mainnet": {"core": "worm2ZoG2kUd4vFXhvjh93UUH596ayRfgQ2MgjNMTth"},
    "extraDetails": {
        "title": "Solana",
        "finality": {"confirmed": 0, "finalized": 1},
    },
}

ALGORAND = {
    "name": "algorand",
    "id": 8,
    "mainnet": {"core": "842125965", "token_bridge": "842126029"},
}

APTOS = {
    "name": "aptos",
    "id": 22,
    "mainnet": {"core": "0x5bc11445584a763c1fa7ed39081f1b920954da14e04b32440cba863d03e19625"},
    "extraDetails": {
        "title": "Aptos",
        "finality": {"finalized": 0, "otherwise": "finalized"},
    },
}


@pytest.fixture
def settings():
    """Default settings, isolated from any local .env file."""
    return DocSettings(_env_file=None)


@pytest.fixture
def formatter(settings):
    return DocFormatter(settings)


@pytest.fixture
def ethereum():
    return Chain.model_validate(ETHEREUM)


@pytest.fixture
def solana():
    return Chain.model_validate(SOLANA)


@pytest.fixture
def algorand():
    return Chain.model_validate(ALGORAND)


@pytest.fixture
def aptos():
    return Chain.model_validate(APTOS)


@pytest.fixture
def chains(ethereum, solana, algorand, aptos):
    """Chains in deliberately unsorted order."""
    return [ethereum, aptos, solana, algorand]
