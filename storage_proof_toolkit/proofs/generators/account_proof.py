"""Account and storage proof encoders"""

from typing import Sequence

import rlp

from storage_proof_toolkit.proofs.types import AccountProofBundle, ProofNode
from storage_proof_toolkit.shared.constants import ProofConstants
from storage_proof_toolkit.shared.exceptions import NodeTooLarge, ProofTooDeep


def pad_proof_node(node: ProofNode, width: int) -> bytes:
    """
    Right-pad a single proof node with zeros to a fixed width.

    Raises:
        NodeTooLarge: If the node is longer than width
    """
    if len(node) > width:
        raise NodeTooLarge(
            f"Proof node is {len(node)} bytes, limit is {width}"
        )
    return bytes(node) + bytes(width - len(node))


def normalize_proof(
    proof: Sequence[ProofNode],
    width: int = ProofConstants.PROOF_BYTES_LEN,
    depth: int = ProofConstants.ACCOUNT_PROOF_MAX_DEPTH,
) -> bytes:
    """
    Flatten a proof into a fixed-size buffer.

    Every node is zero-padded to `width` bytes and all-zero nodes are
    appended until there are `depth` of them, so the result is always
    exactly depth * width bytes.

    Args:
        proof: Root-first list of RLP encoded trie nodes
        width: Fixed byte width of each node
        depth: Fixed number of nodes

    Returns:
        bytes: The flattened proof

    Raises:
        NodeTooLarge: If any node is longer than width
        ProofTooDeep: If the proof has more than depth nodes
    """
    if len(proof) > depth:
        raise ProofTooDeep(
            f"Proof has {len(proof)} nodes, limit is {depth}"
        )

    nodes = [pad_proof_node(node, width) for node in proof]
    nodes.extend(bytes(width) for _ in range(depth - len(nodes)))
    return b"".join(nodes)


def encode_account_value(bundle: AccountProofBundle) -> bytes:
    """RLP encode the account leaf value [nonce, balance, storageRoot, codeHash]"""
    return rlp.encode(
        [
            bundle.nonce,
            bundle.balance,
            bundle.storage_hash,
            bundle.code_hash,
        ]
    )


def to_word(value: int) -> bytes:
    """32-byte big-endian encoding of a storage key or value"""
    return value.to_bytes(ProofConstants.WORD_BYTES, byteorder="big")
