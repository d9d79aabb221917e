"""
Pytest configuration and shared fixtures.

Block and proof fixtures mirror what web3 returns from eth_getBlockByNumber
and eth_getProof, so no test needs network access.
"""

from typing import Any, Dict
from unittest.mock import MagicMock

import pytest
import rlp
from eth_utils import keccak
from hexbytes import HexBytes

EMPTY_UNCLES_HASH = HexBytes(
    "0x1dcc4de8dec75d7aab85b567b6ccd41ad312451b948a7413f0a142fd40d49347"
)


@pytest.fixture
def genesis_block() -> Dict[str, Any]:
    """Ethereum mainnet block 0."""
    empty_trie_root = HexBytes(
        "0x56e81f171bcc55a6ff8345e692c0f86e5b48e01b996cadc001622fb5e363b421"
    )
    return {
        "hash": HexBytes(
            "0xd4e56740f876aef8c010b86a40d5f56745a118d0906a34e69aec8c0db1cb8fa3"
        ),
        "parentHash": HexBytes("0x" + "00" * 32),
        "sha3Uncles": EMPTY_UNCLES_HASH,
        "miner": "0x0000000000000000000000000000000000000000",
        "stateRoot": HexBytes(
            "0xd7f8974fb5ac78d9ac099b9ad5018bedc2ce0a72dad1827a1709da30580f0544"
        ),
        "transactionsRoot": empty_trie_root,
        "receiptsRoot": empty_trie_root,
        "logsBloom": HexBytes("0x" + "00" * 256),
        "difficulty": 17179869184,
        "number": 0,
        "gasLimit": 5000,
        "gasUsed": 0,
        "timestamp": 0,
        "extraData": HexBytes(
            "0x11bbe8db4e347b4e8c937c1c8370e4b5ed33adb3db69cbdb7a38e1e50b1b82fa"
        ),
        "mixHash": HexBytes("0x" + "00" * 32),
        "nonce": HexBytes("0x0000000000000042"),
    }


def _london_header_list(block: Dict[str, Any], include_base_fee: bool):
    """Raw RLP items of a London block, built without the toolkit encoder."""
    items = [
        bytes(block["parentHash"]),
        bytes(block["sha3Uncles"]),
        bytes(HexBytes(block["miner"])),
        bytes(block["stateRoot"]),
        bytes(block["transactionsRoot"]),
        bytes(block["receiptsRoot"]),
        bytes(block["logsBloom"]),
        block["difficulty"],
        block["number"],
        block["gasLimit"],
        block["gasUsed"],
        block["timestamp"],
        bytes(block["extraData"]),
        bytes(block["mixHash"]),
        bytes(block["nonce"]),
    ]
    if include_base_fee:
        items.append(block["baseFeePerGas"])
    return items


def make_london_block(
    base_fee: int = 5_000_000_000, **overrides
) -> Dict[str, Any]:
    """Build a post-London block record whose hash matches its fields."""
    block = {
        "parentHash": HexBytes("0x" + "11" * 32),
        "sha3Uncles": EMPTY_UNCLES_HASH,
        "miner": "0x95222290DD7278Aa3Ddd389Cc1E1d165CC4BAfe5",
        "stateRoot": HexBytes("0x" + "22" * 32),
        "transactionsRoot": HexBytes("0x" + "33" * 32),
        "receiptsRoot": HexBytes("0x" + "44" * 32),
        "logsBloom": HexBytes("0x" + "00" * 256),
        "difficulty": 0,
        "number": 17_000_000,
        "gasLimit": 30_000_000,
        "gasUsed": 12_345_678,
        "timestamp": 1_681_338_455,
        "extraData": HexBytes(b"beaverbuild.org"),
        "mixHash": HexBytes("0x" + "55" * 32),
        "nonce": HexBytes("0x" + "00" * 8),
        "baseFeePerGas": base_fee,
    }
    block.update(overrides)
    block["hash"] = HexBytes(
        keccak(rlp.encode(_london_header_list(block, include_base_fee=True)))
    )
    return block


@pytest.fixture
def london_block() -> Dict[str, Any]:
    """Post-London block with a base fee of 5 gwei."""
    return make_london_block()


@pytest.fixture
def sample_account() -> str:
    """Sample account address for tests."""
    return "0xdAC17F958D2ee523a2206206994597C13D831ec7"


@pytest.fixture
def sample_slot() -> int:
    """Sample storage slot for tests."""
    return 5


@pytest.fixture
def sample_block_number() -> int:
    """Sample block number for tests."""
    return 17_000_000


@pytest.fixture
def account_proof_nodes():
    """Six 300-byte account proof nodes."""
    return [bytes([i + 1]) * 300 for i in range(6)]


@pytest.fixture
def storage_proof_nodes():
    """Three storage proof nodes of varying size."""
    return [b"\xaa" * 532, b"\xbb" * 200, b"\xcc" * 70]


@pytest.fixture
def proof_response(
    sample_account, sample_slot, account_proof_nodes, storage_proof_nodes
) -> Dict[str, Any]:
    """eth_getProof response for one storage slot."""
    return {
        "address": sample_account,
        "accountProof": [HexBytes(node) for node in account_proof_nodes],
        "balance": 10**18,
        "codeHash": HexBytes("0x" + "77" * 32),
        "nonce": 1,
        "storageHash": HexBytes("0x" + "66" * 32),
        "storageProof": [
            {
                "key": HexBytes(sample_slot.to_bytes(32, "big")),
                "value": 42,
                "proof": [HexBytes(node) for node in storage_proof_nodes],
            }
        ],
    }


@pytest.fixture
def mock_web3_service(london_block, proof_response):
    """Mock Web3Service returning the London block and proof fixtures."""
    service = MagicMock()
    service.get_block.return_value = london_block
    service.get_proof.return_value = proof_response
    return service


@pytest.fixture
def london_block_factory():
    """Factory for London blocks with custom base fee or fields."""
    return make_london_block


@pytest.fixture
def london_header_items():
    """Raw RLP items of a London block, for independent hashing."""
    return _london_header_list
