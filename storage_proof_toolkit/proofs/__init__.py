from storage_proof_toolkit.proofs.manager import StorageProofParams
from storage_proof_toolkit.proofs.params import ParamsMode
from storage_proof_toolkit.proofs.types import (
    AccountProofBundle,
    BlockHeader,
    ProofArtifacts,
    StorageProofEntry,
)

__all__ = [
    "StorageProofParams",
    "ParamsMode",
    "BlockHeader",
    "AccountProofBundle",
    "StorageProofEntry",
    "ProofArtifacts",
]
