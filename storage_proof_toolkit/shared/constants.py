"""All constants for the project"""

import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

from storage_proof_toolkit.shared.exceptions import ConfigurationException

load_dotenv()


class ProofConstants:
    """Fixed input sizes expected by the verification circuit"""

    BLOCK_HEADER_RLP_BYTES = 590
    PROOF_BYTES_LEN = 532
    ACCOUNT_PROOF_MAX_DEPTH = 10
    STORAGE_PROOF_MAX_DEPTH = 9

    WORD_BYTES = 32


class HeaderConstants:
    """Block header field layout"""

    # Fields introduced after London, not supported
    UNSUPPORTED_FIELDS = (
        "withdrawalsRoot",
        "blobGasUsed",
        "excessBlobGas",
        "parentBeaconBlockRoot",
        "requestsHash",
    )

    STATE_ROOT_INDEX = 3


class EnvConstants:
    """Environment variable names"""

    RPC_URL = "MAINNET_RPC"
    BLOCK_NUMBER = "BLOCK_NUMBER"
    TARGET_ACCOUNT = "TARGET_ACCOUNT"
    STORAGE_SLOT = "STORAGE_SLOT"
    OMIT_ZERO_BASE_FEE = "OMIT_ZERO_BASE_FEE"


def _env_flag(value: Optional[str]) -> bool:
    return (value or "").strip().lower() in {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class Settings:
    """
    Runtime configuration for one invocation.

    Attributes:
        rpc_url: JSON-RPC endpoint of the chain data source
        block_number: Target block number
        account: Target account address (checksummed)
        slot: Target storage slot as an integer
        omit_zero_base_fee: Drop a zero base fee from the header encoding
    """

    rpc_url: str
    block_number: int
    account: str
    slot: int
    omit_zero_base_fee: bool = False

    @classmethod
    def from_env(
        cls,
        rpc_url: Optional[str] = None,
        block_number: Optional[str] = None,
        account: Optional[str] = None,
        slot: Optional[str] = None,
    ) -> "Settings":
        """
        Build settings from the environment, explicit values taking precedence.

        Raises:
            ConfigurationException: If a value is missing or malformed
        """
        # validation imports this module
        from storage_proof_toolkit.commands.validation import (
            validate_block_number,
            validate_eth_address,
            validate_storage_slot,
        )

        rpc_url = rpc_url or os.getenv(EnvConstants.RPC_URL)
        block_number = block_number or os.getenv(EnvConstants.BLOCK_NUMBER)
        account = account or os.getenv(EnvConstants.TARGET_ACCOUNT)
        slot = slot or os.getenv(EnvConstants.STORAGE_SLOT)

        missing = [
            name
            for name, value in (
                (EnvConstants.RPC_URL, rpc_url),
                (EnvConstants.BLOCK_NUMBER, block_number),
                (EnvConstants.TARGET_ACCOUNT, account),
                (EnvConstants.STORAGE_SLOT, slot),
            )
            if not value
        ]
        if missing:
            raise ConfigurationException(
                f"Missing required environment variables: {', '.join(missing)}"
            )

        try:
            return cls(
                rpc_url=rpc_url,
                block_number=validate_block_number(block_number),
                account=validate_eth_address(account, "target_account"),
                slot=validate_storage_slot(slot),
                omit_zero_base_fee=_env_flag(
                    os.getenv(EnvConstants.OMIT_ZERO_BASE_FEE)
                ),
            )
        except ValueError as e:
            raise ConfigurationException(str(e)) from e
