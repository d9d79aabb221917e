"""Block header encoder"""

from typing import List, Tuple

import rlp
from eth_utils import keccak
from hexbytes import HexBytes

from storage_proof_toolkit.proofs.types import BlockHeader
from storage_proof_toolkit.shared.constants import (
    HeaderConstants,
    ProofConstants,
)
from storage_proof_toolkit.shared.exceptions import (
    HashMismatch,
    HeaderTooLarge,
    StateRootNotFound,
)
from storage_proof_toolkit.shared.logging import get_logger

_logger = get_logger(__name__)


def _rlp_item(value) -> HexBytes:
    """Integers as big-endian minimal bytes (zero -> empty), bytes as-is"""
    if isinstance(value, int):
        return HexBytes("0x") if value == 0 else HexBytes(value)
    return HexBytes(value)


def header_fields(
    header: BlockHeader, omit_zero_base_fee: bool = False
) -> List[HexBytes]:
    """
    Ordered RLP list items of a block header.

    A present base fee is appended as the 16th item. When omit_zero_base_fee
    is set, a base fee of exactly zero is dropped and the list has 15 items.
    """
    fields = [
        header.parent_hash,
        header.uncles_hash,
        header.miner,
        header.state_root,
        header.transactions_root,
        header.receipts_root,
        header.logs_bloom if header.logs_bloom is not None else b"",
        header.difficulty,
        header.number,
        header.gas_limit,
        header.gas_used,
        header.timestamp,
        header.extra_data,
        header.mix_hash,
        header.nonce,
    ]

    base_fee = header.base_fee_per_gas
    if base_fee is not None and not (omit_zero_base_fee and base_fee == 0):
        fields.append(base_fee)

    return [_rlp_item(v) for v in fields]


def encode_block_header(
    header: BlockHeader, omit_zero_base_fee: bool = False
) -> bytes:
    """Encode a block header -> RLP encoded"""
    return rlp.encode(header_fields(header, omit_zero_base_fee))


def verify_block_hash(encoded: bytes, expected: bytes, stage: str) -> None:
    """
    Check that an encoded header hashes to the expected block hash.

    Args:
        encoded: Unpadded RLP encoded header
        expected: Published 32-byte block hash
        stage: Name of the pipeline stage, used in the error message

    Raises:
        HashMismatch: If keccak256(encoded) differs from expected
    """
    digest = keccak(encoded)
    if expected is None or digest != bytes(expected):
        raise HashMismatch(
            f"{stage}: Block hash mismatch! "
            f"expected {HexBytes(expected).hex() if expected else None}, "
            f"got {HexBytes(digest).hex()}"
        )
    _logger.debug("%s: block hash verified", stage)


def get_state_root(encoded: bytes) -> bytes:
    """Read the state root back out of an encoded header"""
    items = rlp.decode(encoded)
    return bytes(items[HeaderConstants.STATE_ROOT_INDEX])


def split_by_state_root(
    encoded: bytes, state_root: bytes
) -> Tuple[bytes, bytes, bytes]:
    """
    Split an encoded header around the state root.

    The first byte-exact occurrence is used, even if the same bytes appear
    earlier for unrelated reasons.

    Returns:
        Tuple[bytes, bytes, bytes]: head, state root, tail

    Raises:
        StateRootNotFound: If the state root is not found in the header
    """
    start = encoded.find(state_root) if state_root else -1
    if start < 0:
        raise StateRootNotFound(
            "Failed to split RLP data: state root "
            f"{HexBytes(state_root).hex()} not found in header"
        )
    end = start + len(state_root)
    return encoded[:start], encoded[start:end], encoded[end:]


def pad_block_header(
    encoded: bytes, length: int = ProofConstants.BLOCK_HEADER_RLP_BYTES
) -> bytes:
    """
    Right-pad an encoded header with zeros to a fixed length.

    Raises:
        HeaderTooLarge: If the header is already longer than length
    """
    if len(encoded) > length:
        raise HeaderTooLarge(
            f"Encoded header is {len(encoded)} bytes, limit is {length}"
        )
    return encoded + bytes(length - len(encoded))
