"""Parameter assembly for the verification circuit"""

from enum import Enum
from typing import List, Optional, Sequence, Tuple, Union

from storage_proof_toolkit.proofs.types import ProofArtifacts
from storage_proof_toolkit.shared.exceptions import InvalidCommand

ParamValue = Union[bytes, int]
Parameter = Tuple[str, ParamValue]


class ParamsMode(Enum):
    """Output set selected by the command token."""

    PROVE = "gen_prove_params"
    VERIFY = "gen_verify_params"

    @classmethod
    def from_command(cls, command: Optional[str]) -> "ParamsMode":
        """
        Resolve a command token.

        Raises:
            InvalidCommand: If the token is missing or unknown
        """
        if not command:
            raise InvalidCommand("No arguments passed.")
        for mode in cls:
            if mode.value == command:
                return mode
        raise InvalidCommand(
            f"Invalid command! {command!r} is not one of "
            f"{', '.join(m.value for m in cls)}"
        )


# Output order per mode
PROVE_FIELDS = (
    "block_hash",
    "account_key",
    "account_value",
    "storage_key",
    "storage_value",
    "block_header_rlp",
    "block_header_rlp_head_len",
    "block_header_rlp_tail_len",
    "storage_root",
    "account_proof",
    "storage_proof",
    "account_proof_depth",
    "storage_proof_depth",
)

VERIFY_FIELDS = (
    "account_key",
    "account_value",
    "block_hash",
    "storage_key",
    "storage_value",
)

MODE_FIELDS = {
    ParamsMode.PROVE: PROVE_FIELDS,
    ParamsMode.VERIFY: VERIFY_FIELDS,
}


def assemble_parameters(
    mode: ParamsMode, artifacts: ProofArtifacts
) -> List[Parameter]:
    """Select the ordered (name, value) pairs emitted for a mode"""
    return [(name, getattr(artifacts, name)) for name in MODE_FIELDS[mode]]


def format_parameter(name: str, value: ParamValue) -> str:
    """
    Render one output line.

    Byte buffers render as a list of decimal byte values, integers as-is:
        block_hash = [212, 229, ...]
        account_proof_depth = 8
    """
    if isinstance(value, (bytes, bytearray)):
        rendered = "[" + ", ".join(str(b) for b in value) + "]"
    else:
        rendered = str(value)
    return f"{name} = {rendered}"


def format_parameters(parameters: Sequence[Parameter]) -> List[str]:
    return [format_parameter(name, value) for name, value in parameters]
