"""
Exception hierarchy for the storage proof toolkit.

Every failure of the pipeline is a ProofParamsException carrying an
ErrorKind. All kinds abort the run except BLOCK_NOT_FOUND, which is a
normal "nothing to do" outcome.

- HashMismatch: encoded header does not hash to the published block hash
- StateRootNotFound: state root is not a contiguous run of the header
- MissingProofEntry: proof response lacks the requested data
- NodeTooLarge / ProofTooDeep / HeaderTooLarge: fixed-size contract violated
- UnsupportedHeader: block uses a header shape newer than London
- InvalidCommand: unknown or missing command token
- BlockNotFound: the requested block does not exist
- ConfigurationException: missing or malformed configuration
"""

from enum import Enum


class ErrorKind(Enum):
    """Distinguishable failure kinds."""

    HASH_MISMATCH = "hash_mismatch"
    STATE_ROOT_NOT_FOUND = "state_root_not_found"
    MISSING_PROOF_ENTRY = "missing_proof_entry"
    NODE_TOO_LARGE = "node_too_large"
    PROOF_TOO_DEEP = "proof_too_deep"
    HEADER_TOO_LARGE = "header_too_large"
    UNSUPPORTED_HEADER = "unsupported_header"
    INVALID_COMMAND = "invalid_command"
    BLOCK_NOT_FOUND = "block_not_found"
    CONFIGURATION = "configuration"
    CHAIN_DATA = "chain_data"

    @property
    def is_fatal(self) -> bool:
        return self is not ErrorKind.BLOCK_NOT_FOUND


class ProofParamsException(Exception):
    """
    Base class for all pipeline failures.

    Subclasses set `kind`; callers branch on it rather than on the class.
    """

    kind = ErrorKind.CHAIN_DATA

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    @property
    def is_fatal(self) -> bool:
        return self.kind.is_fatal


class HashMismatch(ProofParamsException):
    kind = ErrorKind.HASH_MISMATCH


class StateRootNotFound(ProofParamsException):
    kind = ErrorKind.STATE_ROOT_NOT_FOUND


class MissingProofEntry(ProofParamsException):
    kind = ErrorKind.MISSING_PROOF_ENTRY


class NodeTooLarge(ProofParamsException):
    kind = ErrorKind.NODE_TOO_LARGE


class ProofTooDeep(ProofParamsException):
    kind = ErrorKind.PROOF_TOO_DEEP


class HeaderTooLarge(ProofParamsException):
    kind = ErrorKind.HEADER_TOO_LARGE


class UnsupportedHeader(ProofParamsException):
    kind = ErrorKind.UNSUPPORTED_HEADER


class InvalidCommand(ProofParamsException):
    kind = ErrorKind.INVALID_COMMAND


class BlockNotFound(ProofParamsException):
    """Raised when the requested block does not exist. Not fatal."""

    kind = ErrorKind.BLOCK_NOT_FOUND


class ConfigurationException(ProofParamsException):
    """
    Exception for configuration/startup errors.

    Use when:
    - Required environment variables are missing
    - Invalid configuration values
    """

    kind = ErrorKind.CONFIGURATION
