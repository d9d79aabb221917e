from eth_utils import is_address, is_hex, remove_0x_prefix, to_checksum_address

from storage_proof_toolkit.shared.constants import ProofConstants


def validate_eth_address(address: str, param_name: str = "address") -> str:
    """Validate and return checksum ethereum address"""
    if not address or not isinstance(address, str):
        raise ValueError(
            f"Invalid {param_name}: address must be a non-empty string"
        )
    address = address.strip()
    if not address.startswith("0x"):
        address = "0x" + address
    if not is_address(address):
        raise ValueError(
            f"Invalid {param_name}: {address} is not a valid Ethereum address"
        )
    return to_checksum_address(address)


def validate_storage_slot(slot: str) -> int:
    """Validate a hex storage slot of at most 32 bytes and return it as int"""
    if not slot or not isinstance(slot, str):
        raise ValueError("Invalid storage_slot: must be a non-empty hex string")
    digits = remove_0x_prefix(slot.strip())
    if not digits or not is_hex(digits):
        raise ValueError(f"Invalid storage_slot: {slot} is not hex")
    if len(digits) > ProofConstants.WORD_BYTES * 2:
        raise ValueError(
            f"Invalid storage_slot: {slot} is longer than "
            f"{ProofConstants.WORD_BYTES} bytes"
        )
    return int(digits, 16)


def validate_block_number(block_number) -> int:
    """Validate a decimal block number"""
    try:
        number = int(str(block_number).strip(), 10)
    except ValueError:
        raise ValueError(
            f"Invalid block_number: {block_number} is not a decimal integer"
        )
    if number < 0:
        raise ValueError("Block number must be a non-negative integer")
    return number
