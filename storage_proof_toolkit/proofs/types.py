"""
Type definitions for storage proof parameters.
"""

from dataclasses import dataclass, field
from typing import Any, List, Mapping, Optional, Union

from hexbytes import HexBytes

from storage_proof_toolkit.shared.constants import HeaderConstants
from storage_proof_toolkit.shared.exceptions import (
    MissingProofEntry,
    UnsupportedHeader,
)

# A proof is a root-first list of RLP-encoded trie nodes
ProofNode = bytes
Proof = List[ProofNode]

HexLike = Union[bytes, str, int]


def to_bytes(value: HexLike) -> bytes:
    """Coerce an RPC value (HexBytes, hex string, bytes) to plain bytes"""
    return bytes(HexBytes(value))


def to_int(value: HexLike) -> int:
    """Coerce an RPC quantity (int, hex string, bytes) to an integer"""
    if isinstance(value, int):
        return value
    return int.from_bytes(HexBytes(value), byteorder="big")


# =============================================================================
# BLOCK TYPES
# =============================================================================


@dataclass(frozen=True)
class BlockHeader:
    """Ethereum block header, pre- or post-London shape."""

    parent_hash: bytes
    uncles_hash: bytes
    miner: bytes  # 20-byte author address
    state_root: bytes
    transactions_root: bytes
    receipts_root: bytes
    logs_bloom: Optional[bytes]  # 256 bytes, None when absent
    difficulty: int
    gas_limit: int
    gas_used: int
    timestamp: int
    extra_data: bytes
    number: int = 0
    mix_hash: bytes = bytes(32)
    nonce: bytes = bytes(8)
    base_fee_per_gas: Optional[int] = None  # London and later
    block_hash: Optional[bytes] = None  # Published hash of the block

    @classmethod
    def from_block(cls, block: Mapping[str, Any]) -> "BlockHeader":
        """
        Build a header from a web3 block record.

        Args:
            block: Result of eth_getBlockByNumber (AttributeDict or dict)

        Returns:
            BlockHeader: Typed header with defaults for unset fields

        Raises:
            UnsupportedHeader: If the block carries post-London fields
        """
        extra_fields = [
            k for k in HeaderConstants.UNSUPPORTED_FIELDS if k in block
        ]
        if extra_fields:
            raise UnsupportedHeader(
                "Unsupported block header shape, unexpected fields: "
                + ", ".join(extra_fields)
            )

        logs_bloom = block.get("logsBloom")
        mix_hash = block.get("mixHash")
        nonce = block.get("nonce")
        number = block.get("number")
        base_fee = block.get("baseFeePerGas")
        block_hash = block.get("hash")

        return cls(
            parent_hash=to_bytes(block["parentHash"]),
            uncles_hash=to_bytes(block["sha3Uncles"]),
            miner=to_bytes(block["miner"]),
            state_root=to_bytes(block["stateRoot"]),
            transactions_root=to_bytes(block["transactionsRoot"]),
            receipts_root=to_bytes(block["receiptsRoot"]),
            logs_bloom=to_bytes(logs_bloom) if logs_bloom is not None else None,
            difficulty=to_int(block["difficulty"]),
            number=to_int(number) if number is not None else 0,
            gas_limit=to_int(block["gasLimit"]),
            gas_used=to_int(block["gasUsed"]),
            timestamp=to_int(block["timestamp"]),
            extra_data=to_bytes(block["extraData"]),
            mix_hash=to_bytes(mix_hash) if mix_hash is not None else bytes(32),
            nonce=to_bytes(nonce) if nonce is not None else bytes(8),
            base_fee_per_gas=to_int(base_fee) if base_fee is not None else None,
            block_hash=to_bytes(block_hash) if block_hash is not None else None,
        )


# =============================================================================
# PROOF TYPES
# =============================================================================


@dataclass(frozen=True)
class StorageProofEntry:
    """Proof of one storage slot in the account's storage trie."""

    key: int
    value: int
    proof: Proof

    @classmethod
    def from_rpc(cls, entry: Mapping[str, Any]) -> "StorageProofEntry":
        try:
            return cls(
                key=to_int(entry["key"]),
                value=to_int(entry["value"]),
                proof=[to_bytes(node) for node in entry["proof"]],
            )
        except KeyError as e:
            raise MissingProofEntry(
                f"Storage proof entry is missing field {e}"
            ) from e


@dataclass(frozen=True)
class AccountProofBundle:
    """Account proof in the state trie plus the account's leaf value."""

    address: bytes
    nonce: int
    balance: int
    storage_hash: bytes
    code_hash: bytes
    account_proof: Proof
    storage_proofs: List[StorageProofEntry] = field(default_factory=list)

    @classmethod
    def from_rpc(cls, response: Mapping[str, Any]) -> "AccountProofBundle":
        """
        Build a bundle from an eth_getProof response.

        Raises:
            MissingProofEntry: If the response lacks a required field
        """
        try:
            return cls(
                address=to_bytes(response["address"]),
                nonce=to_int(response["nonce"]),
                balance=to_int(response["balance"]),
                storage_hash=to_bytes(response["storageHash"]),
                code_hash=to_bytes(response["codeHash"]),
                account_proof=[
                    to_bytes(node) for node in response["accountProof"]
                ],
                storage_proofs=[
                    StorageProofEntry.from_rpc(entry)
                    for entry in response["storageProof"]
                ],
            )
        except KeyError as e:
            raise MissingProofEntry(
                f"Account proof response is missing field {e}"
            ) from e

    def storage_entry(self, slot: int) -> StorageProofEntry:
        """
        Get the storage proof entry for a slot.

        Raises:
            MissingProofEntry: If no entry matches the slot
        """
        for entry in self.storage_proofs:
            if entry.key == slot:
                return entry
        raise MissingProofEntry(f"No storage proof entry for slot {hex(slot)}")


# =============================================================================
# OUTPUT TYPES
# =============================================================================


@dataclass(frozen=True)
class ProofArtifacts:
    """Verified and normalized material the parameter assembler draws from."""

    block_hash: bytes
    account_key: bytes
    account_value: bytes
    storage_key: bytes  # 32 bytes, big-endian
    storage_value: bytes  # 32 bytes, big-endian
    block_header_rlp: bytes  # Padded to the fixed header length
    block_header_rlp_head_len: int
    block_header_rlp_tail_len: int
    storage_root: bytes
    account_proof: bytes  # Flattened, fixed width
    storage_proof: bytes  # Flattened, fixed width
    account_proof_depth: int
    storage_proof_depth: int
