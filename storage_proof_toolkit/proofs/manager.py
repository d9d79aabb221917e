from typing import Any, Dict

from storage_proof_toolkit.proofs.generators.account_proof import (
    encode_account_value,
    normalize_proof,
    to_word,
)
from storage_proof_toolkit.proofs.generators.block_header import (
    encode_block_header,
    get_state_root,
    pad_block_header,
    split_by_state_root,
    verify_block_hash,
)
from storage_proof_toolkit.proofs.types import (
    AccountProofBundle,
    BlockHeader,
    ProofArtifacts,
)
from storage_proof_toolkit.shared.constants import ProofConstants, Settings
from storage_proof_toolkit.shared.logging import get_logger
from storage_proof_toolkit.shared.results import ProcessingError, Result
from storage_proof_toolkit.shared.services.web3_service import Web3Service

_logger = get_logger(__name__)


class HeaderEncoding:
    """Verified header encoding split around its state root."""

    def __init__(
        self, encoded: bytes, head: bytes, state_root: bytes, tail: bytes
    ):
        self.encoded = encoded
        self.head = head
        self.state_root = state_root
        self.tail = tail

    @property
    def padded(self) -> bytes:
        return pad_block_header(self.encoded)


class StorageProofParams:
    """Builds circuit parameters for one account and one storage slot"""

    def __init__(
        self,
        web3_service: Web3Service,
        omit_zero_base_fee: bool = False,
    ):
        self.web3_service = web3_service
        self.omit_zero_base_fee = omit_zero_base_fee

    @classmethod
    def from_settings(cls, settings: Settings) -> "StorageProofParams":
        return cls(
            Web3Service(settings.rpc_url),
            omit_zero_base_fee=settings.omit_zero_base_fee,
        )

    def encode_header(self, header: BlockHeader) -> HeaderEncoding:
        """
        Encode, verify and split a block header.

        The hash is checked once right after encoding and once more after
        the split, both times on the unpadded buffer.

        Raises:
            HashMismatch: If the encoding does not hash to the block hash
            StateRootNotFound: If the state root cannot be located
        """
        encoded = encode_block_header(header, self.omit_zero_base_fee)
        verify_block_hash(encoded, header.block_hash, "encode")

        state_root = get_state_root(encoded)
        head, root, tail = split_by_state_root(encoded, state_root)

        verify_block_hash(encoded, header.block_hash, "verification")
        _logger.debug(
            "Header is %d bytes, head %d, tail %d",
            len(encoded),
            len(head),
            len(tail),
        )
        return HeaderEncoding(encoded, head, root, tail)

    def build_artifacts(
        self,
        header: BlockHeader,
        bundle: AccountProofBundle,
        slot: int,
    ) -> ProofArtifacts:
        """
        Derive every circuit input from a fetched header and proof.

        Raises:
            ProofParamsException: On any verification or size failure
        """
        encoding = self.encode_header(header)
        storage_entry = bundle.storage_entry(slot)

        return ProofArtifacts(
            block_hash=header.block_hash,
            account_key=bundle.address,
            account_value=encode_account_value(bundle),
            storage_key=to_word(storage_entry.key),
            storage_value=to_word(storage_entry.value),
            block_header_rlp=encoding.padded,
            block_header_rlp_head_len=len(encoding.head),
            block_header_rlp_tail_len=len(encoding.tail),
            storage_root=bundle.storage_hash,
            account_proof=normalize_proof(
                bundle.account_proof,
                ProofConstants.PROOF_BYTES_LEN,
                ProofConstants.ACCOUNT_PROOF_MAX_DEPTH,
            ),
            storage_proof=normalize_proof(
                storage_entry.proof,
                ProofConstants.PROOF_BYTES_LEN,
                ProofConstants.STORAGE_PROOF_MAX_DEPTH,
            ),
            account_proof_depth=len(bundle.account_proof),
            storage_proof_depth=len(storage_entry.proof),
        )

    def generate(
        self, block_number: int, account: str, slot: int
    ) -> Result[ProofArtifacts]:
        """
        Fetch a block and a proof, then verify and normalize them.

        Args:
            block_number: The block number
            account: The account address
            slot: The storage slot

        Returns:
            Result[ProofArtifacts]: Success with artifacts, or failure with
            an error whose kind tells a missing block from a fatal failure
        """
        context: Dict[str, Any] = {
            "block": block_number,
            "account": account,
            "slot": hex(slot),
        }
        stage = "block"

        try:
            block = self.web3_service.get_block(block_number)
            header = BlockHeader.from_block(block)

            stage = "proof"
            raw_proof = self.web3_service.get_proof(
                account, [slot], block_number
            )
            bundle = AccountProofBundle.from_rpc(raw_proof)

            stage = "params"
            artifacts = self.build_artifacts(header, bundle, slot)
        except Exception as e:
            error = ProcessingError.from_exception(stage, e, context)
            if error.is_fatal:
                _logger.error("%s failed: %s", stage, error.to_dict())
            else:
                _logger.warning(error.message)
            return Result.fail(error)

        _logger.info(
            "Generated parameters for %s at block %d "
            "(account proof depth %d, storage proof depth %d)",
            account,
            block_number,
            artifacts.account_proof_depth,
            artifacts.storage_proof_depth,
        )
        return Result.ok(artifacts)
