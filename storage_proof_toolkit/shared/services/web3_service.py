"""
Web3 Service module, the chain data source of the toolkit.

Fetches the block record and the eth_getProof response the pipeline works
from. There is no caching and no retry: every invocation reads fresh data
and any RPC failure propagates to the caller.
"""

from typing import Any, Dict, Sequence

from web3 import Web3
from web3.exceptions import BlockNotFound as Web3BlockNotFound

from storage_proof_toolkit.shared.exceptions import BlockNotFound
from storage_proof_toolkit.shared.logging import get_logger

_logger = get_logger(__name__)


class Web3Service:
    """
    A service class for reading blocks and Merkle proofs over JSON-RPC.
    """

    def __init__(self, rpc_url: str):
        """
        Initialize the Web3Service.

        Args:
            rpc_url (str): The RPC URL to use.
        """
        self.rpc_url = rpc_url
        self.w3 = self._initialize_web3(rpc_url)

    def _initialize_web3(self, rpc_url: str) -> Web3:
        """Initialize Web3 instance"""
        return Web3(Web3.HTTPProvider(rpc_url))

    def get_block(self, block_number: int) -> Dict[str, Any]:
        """
        Get block information for a specific block number.

        Raises:
            BlockNotFound: If the node has no such block
        """
        _logger.debug("Fetching block %d", block_number)
        try:
            block = self.w3.eth.get_block(block_number)
        except Web3BlockNotFound as e:
            raise BlockNotFound(f"Block {block_number} not found") from e
        if block is None:
            raise BlockNotFound(f"Block {block_number} not found")
        return block

    def get_proof(
        self, address: str, slots: Sequence[int], block_number: int
    ) -> Dict[str, Any]:
        """Get the account and storage proofs of an address at a block"""
        _logger.debug(
            "Fetching proof for %s, %d slot(s) at block %d",
            address,
            len(slots),
            block_number,
        )
        return self.w3.eth.get_proof(
            Web3.to_checksum_address(address),
            [self.w3.to_hex(slot) for slot in slots],
            block_number,
        )
